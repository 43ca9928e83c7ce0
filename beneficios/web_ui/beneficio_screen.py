"""List/form view-state controller for benefit records.

The NiceGUI page binds widgets to the attributes of ``BeneficioScreen`` and
calls its coroutines from event handlers. All backend work runs inside the
screen's ``ViewLifetime`` so ``dispose`` cancels whatever is still pending.

State machine:
    ``list`` -> ``form`` on ``show_create_form`` / ``show_edit_form``.
    ``form`` -> ``list`` on successful submit, ``cancel``, or a failed
    re-fetch while entering edit mode.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Literal, Optional

from beneficios.app.controller import AppController
from beneficios.domain.entities import Benefit, BenefitId
from beneficios.domain.ports import ConfirmFn, UseCaseError
from beneficios.usecases.delete_beneficio import DeleteBeneficio
from beneficios.usecases.list_beneficios import ListBeneficios
from beneficios.usecases.load_beneficio import LoadBeneficio
from beneficios.usecases.save_beneficio import SaveBeneficio
from beneficios.usecases.transfer_between_beneficios import TransferBetweenBeneficios
from beneficios.viewmodels.form_vm import BeneficioFormVM
from beneficios.viewmodels.list_vm import BeneficioRow, filter_beneficios, to_row
from beneficios.viewmodels.notification_vm import NotificationVM

from .lifetime import ViewLifetime, maybe_await
from .transfer_screen import TransferScreen

LOGGER = logging.getLogger(__name__)

ScreenName = Literal["list", "form"]


class BeneficioScreen:
    """Owns the loaded list, the selection, the form, and the busy flags."""

    def __init__(
        self,
        *,
        uc_list: ListBeneficios,
        uc_load: LoadBeneficio,
        uc_save: SaveBeneficio,
        uc_delete: DeleteBeneficio,
        uc_transfer: TransferBetweenBeneficios,
        confirm: ConfirmFn,
        notifications: Optional[NotificationVM] = None,
        refetch_on_edit: bool = False,
    ) -> None:
        self.uc_list = uc_list
        self.uc_load = uc_load
        self.uc_save = uc_save
        self.uc_delete = uc_delete
        self.confirm = confirm
        self.refetch_on_edit = refetch_on_edit
        self.notifications = notifications or NotificationVM()
        self.lifetime = ViewLifetime("beneficios")

        self.screen: ScreenName = "list"
        self.items: List[Benefit] = []
        self.selected: Optional[Benefit] = None
        self.filter_term: str = ""
        self.loading_list = False
        self.loading_form = False
        self.saving = False
        self.form = BeneficioFormVM()
        self.transfer = TransferScreen(
            uc_transfer,
            notifications=self.notifications,
            lifetime=self.lifetime,
            on_success=self.load_list,
        )
        self._list_task: Optional[asyncio.Task] = None

    @classmethod
    def from_controller(
        cls,
        controller: AppController,
        *,
        confirm: ConfirmFn,
        refetch_on_edit: bool = False,
    ) -> "BeneficioScreen":
        controller.ensure_ready()
        return cls(
            uc_list=controller.uc_list,
            uc_load=controller.uc_load,
            uc_save=controller.uc_save,
            uc_delete=controller.uc_delete,
            uc_transfer=controller.uc_transfer,
            confirm=confirm,
            notifications=NotificationVM(controller.settings_vm.notification_duration_s),
            refetch_on_edit=refetch_on_edit,
        )

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------
    async def load_list(self) -> None:
        """Reload the snapshot; a newer reload supersedes one still in flight."""
        previous = self._list_task
        if previous is not None and not previous.done():
            previous.cancel()
        task = self.lifetime.spawn(self._load_list())
        if task is None:
            return
        self._list_task = task
        try:
            await task
        except asyncio.CancelledError:
            if self.lifetime.closed or self._list_task is not task:
                return
            raise

    async def _load_list(self) -> None:
        self.loading_list = True
        try:
            items = await self.uc_list()
        except UseCaseError as err:
            self.loading_list = False
            self._notify_error("Erro ao carregar lista de benefícios", err)
            return
        self.items = items
        self.loading_list = False
        LOGGER.debug("Loaded %d benefit(s)", len(items))

    def set_filter(self, term: Optional[str]) -> None:
        self.filter_term = (term or "").strip()

    def clear_filter(self) -> None:
        self.filter_term = ""

    def visible_items(self) -> List[Benefit]:
        return filter_beneficios(self.items, self.filter_term)

    def visible_rows(self) -> List[BeneficioRow]:
        return [to_row(item) for item in self.visible_items()]

    def find(self, benefit_id: BenefitId) -> Optional[Benefit]:
        for item in self.items:
            if item.id == benefit_id:
                return item
        return None

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------
    def show_create_form(self) -> None:
        self.selected = None
        self.loading_form = False
        self.form.reset()
        self.screen = "form"

    async def show_edit_form(self, benefit: Benefit, *, refetch: Optional[bool] = None) -> None:
        """Enter edit mode from a row; optionally re-fetch it by id first."""
        if benefit.id is None:
            raise ValueError("Only persisted benefits can be edited.")
        self.selected = benefit
        self.form.load(benefit)
        self.screen = "form"
        self.loading_form = bool(self.refetch_on_edit if refetch is None else refetch)
        if not self.loading_form:
            return
        await self.lifetime.run(self._refetch(benefit.id))

    async def _refetch(self, benefit_id: BenefitId) -> None:
        try:
            fresh = await self.uc_load(benefit_id)
        except UseCaseError as err:
            if not self._editing(benefit_id):
                LOGGER.debug("Dropping refetch failure for abandoned edit id=%s", benefit_id)
                return
            self._back_to_list()
            self._notify_error("Erro ao carregar dados do benefício", err)
            return
        if self._editing(benefit_id):
            self.loading_form = False
            self.selected = fresh
            self.form.load(fresh)

    def _editing(self, benefit_id: BenefitId) -> bool:
        return self.screen == "form" and self.selected is not None and self.selected.id == benefit_id

    async def submit(self) -> bool:
        """Validate locally, then create or update; True on success."""
        if self.saving or self.loading_form:
            return False
        if not self.form.is_valid():
            self.form.mark_all_touched()
            return False
        benefit = self.form.to_benefit()
        self.saving = True
        return bool(await self.lifetime.run(self._save(benefit)))

    async def _save(self, benefit: Benefit) -> bool:
        try:
            await self.uc_save(benefit)
        except UseCaseError as err:
            self.saving = False
            self._notify_error("Erro ao salvar o benefício", err)
            return False
        self.saving = False
        verb = "criado" if benefit.is_new else "atualizado"
        self.notifications.success(f"Benefício {verb} com sucesso!")
        self._back_to_list()
        await self.load_list()
        return not self.lifetime.closed

    def cancel(self) -> None:
        self._back_to_list()

    # ------------------------------------------------------------------
    # Delete / transfer
    # ------------------------------------------------------------------
    async def delete(self, benefit: Benefit) -> bool:
        """Ask the confirmation gate, then delete; True when the row was removed."""
        if benefit.id is None:
            return False
        return bool(await self.lifetime.run(self._delete(benefit)))

    async def _delete(self, benefit: Benefit) -> bool:
        message = f'Tem certeza que deseja excluir o benefício "{benefit.nome}"?'
        if not await maybe_await(self.confirm(message)):
            return False
        try:
            await self.uc_delete(benefit.id)
        except UseCaseError as err:
            self._notify_error("Erro ao excluir", err)
            return False
        self.notifications.success("Benefício excluído com sucesso!")
        if self.selected is not None and self.selected.id == benefit.id:
            self._back_to_list()
        await self.load_list()
        return not self.lifetime.closed

    def open_transfer(self, benefit: Optional[Benefit] = None) -> TransferScreen:
        self.transfer.open(from_id=benefit.id if benefit is not None else None)
        return self.transfer

    # ------------------------------------------------------------------
    def dispose(self) -> None:
        """Tear down: cancel pending calls and drop the notification."""
        self.lifetime.close()
        self.notifications.dismiss()

    def _back_to_list(self) -> None:
        self.selected = None
        self.loading_form = False
        self.form.reset()
        self.screen = "list"

    def _notify_error(self, prefix: str, err: UseCaseError) -> None:
        LOGGER.warning("%s [%s]: %s", prefix, err.code, err.message)
        self.notifications.error(f"{prefix}: {err.message}")


__all__ = ["BeneficioScreen", "ScreenName"]

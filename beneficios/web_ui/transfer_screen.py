from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from beneficios.domain.entities import TransferRequest
from beneficios.domain.ports import UseCaseError
from beneficios.usecases.transfer_between_beneficios import TransferBetweenBeneficios
from beneficios.viewmodels.notification_vm import NotificationVM
from beneficios.viewmodels.transfer_vm import TransferFormVM

from .lifetime import ViewLifetime

LOGGER = logging.getLogger(__name__)


class TransferScreen:
    """Transfer workflow: validate locally, submit once, reload on success.

    The screen stays open on failure so the user can correct the form. No
    partial-failure state exists on the client; the backend applies the
    transfer atomically or not at all.
    """

    def __init__(
        self,
        uc_transfer: TransferBetweenBeneficios,
        *,
        notifications: Optional[NotificationVM] = None,
        lifetime: Optional[ViewLifetime] = None,
        on_success: Optional[Callable[[], Awaitable[None]]] = None,
    ) -> None:
        self.uc_transfer = uc_transfer
        self.notifications = notifications or NotificationVM()
        self.lifetime = lifetime or ViewLifetime("transfer")
        self.on_success = on_success
        self.form = TransferFormVM()
        self.visible = False
        self.submitting = False

    def open(self, from_id: Optional[int] = None) -> None:
        self.form.prefill(from_id)
        self.visible = True

    def close(self) -> None:
        self.visible = False
        self.form.reset()

    async def submit(self) -> bool:
        """Validate and dispatch the transfer; True when the backend accepted it."""
        if self.submitting:
            return False
        if not self.form.is_valid():
            self.form.mark_all_touched()
            return False
        request = self.form.to_request()
        self.submitting = True
        return bool(await self.lifetime.run(self._submit(request)))

    async def _submit(self, request: TransferRequest) -> bool:
        try:
            await self.uc_transfer(request)
        except UseCaseError as err:
            self.submitting = False
            LOGGER.warning("Transfer failed [%s]: %s", err.code, err.message)
            self.notifications.error(f"Erro na transferência: {err.message}")
            return False
        self.submitting = False
        self.close()
        self.notifications.success("Transferência realizada com sucesso!")
        if self.on_success is not None:
            await self.on_success()
        return not self.lifetime.closed


__all__ = ["TransferScreen"]

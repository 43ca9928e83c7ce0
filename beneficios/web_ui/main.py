"""NiceGUI entrypoint for the benefícios admin UI."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any, Optional

from nicegui import app, ui

from beneficios.adapters.beneficio_mock import BeneficioMock
from beneficios.adapters.storage_local import StorageLocal
from beneficios.app.controller import AppController
from beneficios.domain.entities import Benefit
from beneficios.utils.logging import apply_debug_setting, configure_root
from beneficios.viewmodels.settings_vm import SettingsVM
from beneficios.web_ui.beneficio_screen import BeneficioScreen

LOGGER = logging.getLogger(__name__)

_SEVERITY_COLORS = {"success": "positive", "error": "negative"}

DEMO_SEED = (
    Benefit(nome="Vale Refeição", descricao="Crédito mensal", valor=800.0, ativo=True),
    Benefit(nome="Vale Transporte", descricao="Passe urbano", valor=220.0, ativo=True),
    Benefit(nome="Auxílio Home Office", valor=150.0, ativo=False),
)


def _install_theme() -> None:
    """Install global CSS tokens for the admin page."""
    ui.add_head_html(
        """
<style>
:root {
  --ben-card: rgba(255, 255, 255, 0.9);
  --ben-border: #d3dbe6;
}
.ben-page { max-width: 1100px; margin: 0 auto; padding: 14px; }
.ben-card { background: var(--ben-card); border: 1px solid var(--ben-border); border-radius: 12px; }
.ben-mono { font-family: monospace; }
</style>
        """
    )


async def _confirm_dialog(message: str) -> bool:
    """Yes/no gate rendered as a NiceGUI dialog."""
    with ui.dialog() as dialog, ui.card():
        ui.label(message)
        with ui.row().classes("justify-end w-full"):
            ui.button("Cancelar", on_click=lambda: dialog.submit(False)).props("flat")
            ui.button("Remover", color="negative", on_click=lambda: dialog.submit(True))
    result = await dialog
    dialog.delete()
    return bool(result)


def _build_ui(controller: AppController) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    async def index() -> None:
        try:
            screen = BeneficioScreen.from_controller(controller, confirm=_confirm_dialog)
        except ValueError as exc:
            ui.label(str(exc)).classes("text-negative")
            return
        ui.context.client.on_disconnect(screen.dispose)

        @ui.refreshable
        def render_notification() -> None:
            note = screen.notifications.current
            if note is None:
                return
            with ui.row().classes("w-full items-center ben-card q-pa-sm"):
                ui.icon("check_circle" if note.severity == "success" else "error").classes(
                    f"text-{_SEVERITY_COLORS[note.severity]}"
                )
                ui.label(note.message).classes("col")
                ui.button("Fechar", on_click=dismiss_notification).props("flat dense")

        @ui.refreshable
        def render_body() -> None:
            if screen.screen == "list":
                render_list()
            else:
                render_form()

        def render_list() -> None:
            with ui.row().classes("w-full items-center q-gutter-sm"):
                ui.label("Benefícios").classes("text-h5 col")
                ui.button("Novo", icon="add", on_click=show_create, color="primary")
                ui.button("Transferir", icon="swap_horiz", on_click=lambda: open_transfer(None))
                ui.button("Recarregar", icon="refresh", on_click=reload)
            with ui.row().classes("w-full items-center q-gutter-sm"):
                ui.input(
                    "Filtrar",
                    value=screen.filter_term,
                    on_change=lambda e: apply_filter(e.value),
                ).props("dense outlined clearable").classes("col")
                if screen.filter_term:
                    ui.button("Limpar", on_click=clear_filter).props("flat")
            ui.spinner(size="lg").bind_visibility_from(screen, "loading_list")
            rows = screen.visible_rows()
            if not rows and not screen.loading_list:
                ui.label("Nenhum benefício encontrado.").classes("text-grey-7")
            with ui.column().classes("w-full"):
                for row in rows:
                    with ui.row().classes("w-full items-center ben-card q-pa-sm"):
                        ui.label(str(row.id)).classes("ben-mono")
                        ui.label(row.nome).classes("text-weight-medium")
                        ui.label(row.descricao).classes("col text-grey-8")
                        ui.label(row.valor).classes("ben-mono")
                        ui.label(row.ativo)
                        ui.button(icon="edit", on_click=lambda _, i=row.id: edit(i)).props("flat dense")
                        ui.button(icon="swap_horiz", on_click=lambda _, i=row.id: open_transfer(screen.find(i))).props("flat dense")
                        ui.button(icon="delete", color="negative", on_click=lambda _, i=row.id: delete(i)).props("flat dense")

        def render_form() -> None:
            form = screen.form
            errors = form.errors_for_display()
            with ui.card().classes("w-full ben-card"):
                ui.label(form.title).classes("text-h6")
                if screen.loading_form:
                    ui.spinner()
                    return
                ui.input(
                    "Nome",
                    value=form.nome,
                    on_change=lambda e: form.set_field("nome", e.value or ""),
                ).classes("w-full")
                if "nome" in errors:
                    ui.label(errors["nome"]).classes("text-negative text-caption")
                ui.textarea(
                    "Descrição",
                    value=form.descricao,
                    on_change=lambda e: form.set_field("descricao", e.value or ""),
                ).classes("w-full")
                ui.number(
                    "Valor",
                    value=form.valor,
                    min=0,
                    format="%.2f",
                    on_change=lambda e: form.set_field("valor", e.value),
                )
                if "valor" in errors:
                    ui.label(errors["valor"]).classes("text-negative text-caption")
                ui.checkbox("Ativo", value=form.ativo, on_change=lambda e: form.set_field("ativo", bool(e.value)))
                with ui.row().classes("q-gutter-sm"):
                    ui.button("Salvar", on_click=submit, color="primary").bind_enabled_from(
                        screen, "saving", backward=lambda saving: not saving
                    )
                    ui.button("Cancelar", on_click=cancel).props("flat")

        def render_transfer_dialog() -> None:
            transfer = screen.transfer
            options = {item.id: f"{item.id} - {item.nome}" for item in screen.items if item.id is not None}
            with ui.dialog() as dialog, ui.card().classes("ben-card"):
                ui.label("Transferir valor").classes("text-h6")
                ui.select(options, label="Origem", value=transfer.form.from_id,
                          on_change=lambda e: transfer.form.set_field("from_id", e.value))
                ui.select(options, label="Destino", value=transfer.form.to_id,
                          on_change=lambda e: transfer.form.set_field("to_id", e.value))
                ui.number("Valor", min=0.01, step=0.01, format="%.2f", value=transfer.form.amount,
                          on_change=lambda e: transfer.form.set_field("amount", e.value))
                error_label = ui.label("").classes("text-negative text-caption")
                with ui.row().classes("justify-end w-full"):
                    ui.button("Cancelar", on_click=lambda: close_transfer(dialog)).props("flat")
                    ui.button("Transferir", color="primary",
                              on_click=lambda: submit_transfer(dialog, error_label)).bind_enabled_from(
                        transfer, "submitting", backward=lambda busy: not busy
                    )
            dialog.open()

        def refresh_all() -> None:
            render_body.refresh()
            render_notification.refresh()

        def dismiss_notification() -> None:
            screen.notifications.dismiss()
            render_notification.refresh()

        def apply_filter(term: Optional[str]) -> None:
            screen.set_filter(term)
            render_body.refresh()

        def clear_filter() -> None:
            screen.clear_filter()
            render_body.refresh()

        def show_create() -> None:
            screen.show_create_form()
            refresh_all()

        def cancel() -> None:
            screen.cancel()
            refresh_all()

        async def reload() -> None:
            await screen.load_list()
            refresh_all()

        async def edit(benefit_id: int) -> None:
            item = screen.find(benefit_id)
            if item is not None:
                await screen.show_edit_form(item)
            refresh_all()

        async def submit() -> None:
            await screen.submit()
            refresh_all()

        async def delete(benefit_id: int) -> None:
            item = screen.find(benefit_id)
            if item is not None:
                await screen.delete(item)
            refresh_all()

        def open_transfer(item: Optional[Benefit]) -> None:
            screen.open_transfer(item)
            render_transfer_dialog()

        def close_transfer(dialog: Any) -> None:
            screen.transfer.close()
            dialog.close()
            dialog.delete()

        async def submit_transfer(dialog: Any, error_label: Any) -> None:
            if await screen.transfer.submit():
                dialog.close()
                dialog.delete()
            else:
                errors = screen.transfer.form.errors_for_display()
                error_label.set_text("; ".join(errors.values()))
            refresh_all()

        with ui.column().classes("ben-page w-full"):
            render_notification()
            render_body()

        ui.timer(0.5, render_notification.refresh)
        await ui.context.client.connected()
        await screen.load_list()
        refresh_all()


def _parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the benefícios admin web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8081)
    parser.add_argument("--api-url", default=None, help="Base URL of the benefícios resource.")
    parser.add_argument("--settings-dir", default=os.environ.get("BENEFICIOS_SETTINGS_DIR", "."))
    parser.add_argument("--mock", action="store_true", help="Use the in-memory backend.")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> SettingsVM:
    """Defaults <- persisted settings <- environment <- CLI flags."""
    settings_vm = SettingsVM()
    settings_vm.apply_dict(StorageLocal(args.settings_dir).load_user_settings())
    settings_vm.apply_env()
    if args.api_url:
        settings_vm.api_base_url = args.api_url
    return settings_vm


def main(argv: Optional[list] = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    configure_root()
    args = _parse_args(argv)
    settings_vm = build_settings(args)
    level = apply_debug_setting(settings_vm.debug_logging)
    LOGGER.info("Log level %s", logging.getLevelName(level))
    port = BeneficioMock(seed=DEMO_SEED) if args.mock else None
    controller = AppController(settings_vm, port=port)
    if args.smoke_test:
        controller.ensure_ready()
        print("web-smoke-ok", settings_vm.api_base_url, "mock" if args.mock else "rest")
        return
    _install_theme()
    _build_ui(controller)
    app.on_shutdown(controller.close)
    ui.run(
        host=args.host,
        port=args.port,
        title="Benefícios",
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()

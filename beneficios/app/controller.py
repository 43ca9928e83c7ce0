"""Adapter and use-case wiring for the web runtime.

This module owns lazy construction of the REST transport, the
``BeneficioPort`` implementation, and the use-case objects that depend on
values in :class:`beneficios.viewmodels.settings_vm.SettingsVM`.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..adapters.beneficio_rest import BeneficioRestAdapter
from ..adapters.http_client import HttpConfig, HttpTransport
from ..domain.ports import BeneficioPort
from ..usecases.delete_beneficio import DeleteBeneficio
from ..usecases.list_beneficios import ListBeneficios
from ..usecases.load_beneficio import LoadBeneficio
from ..usecases.save_beneficio import SaveBeneficio
from ..usecases.transfer_between_beneficios import TransferBetweenBeneficios
from ..viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)


class AppController:
    """Create and cache the port and use-cases from settings state.

    Call chain:
        ``beneficios.web_ui.main`` creates one instance per process; every
        ``BeneficioScreen`` asks it for use cases when the page is built.
    """

    def __init__(self, settings_vm: SettingsVM, *, port: Optional[BeneficioPort] = None) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings holding the API URL, key, and timeout.
            port: Fixed port implementation (e.g. ``BeneficioMock``); when
                given, no HTTP transport is built.
        """
        self.settings_vm = settings_vm
        self._transport: Optional[HttpTransport] = None
        self._port: Optional[BeneficioPort] = port
        self.uc_list: Optional[ListBeneficios] = None
        self.uc_load: Optional[LoadBeneficio] = None
        self.uc_save: Optional[SaveBeneficio] = None
        self.uc_delete: Optional[DeleteBeneficio] = None
        self.uc_transfer: Optional[TransferBetweenBeneficios] = None

    @property
    def port(self) -> Optional[BeneficioPort]:
        return self._port

    def ensure_ready(self) -> None:
        """Build the port and use cases if they are not cached yet.

        Raises:
            ValueError: If settings are invalid (e.g. malformed base URL).
        """
        if self.uc_list is not None:
            return
        if self._port is None:
            if not self.settings_vm.is_valid():
                raise ValueError("Configuração inválida: verifique a URL da API.")
            cfg = HttpConfig(
                base_url=self.settings_vm.api_base_url,
                request_timeout_s=self.settings_vm.request_timeout_s,
                api_key=self.settings_vm.api_key or None,
            )
            self._transport = HttpTransport(cfg)
            self._port = BeneficioRestAdapter(
                self._transport, transfer_path=self.settings_vm.transfer_path
            )
            LOGGER.info("Using benefícios API at %s", cfg.base_url)
        port = self._port
        self.uc_list = ListBeneficios(port)
        self.uc_load = LoadBeneficio(port)
        self.uc_save = SaveBeneficio(port)
        self.uc_delete = DeleteBeneficio(port)
        self.uc_transfer = TransferBetweenBeneficios(port)

    def close(self) -> None:
        """Release the HTTP session; called once when the server shuts down."""
        if self._transport is not None:
            self._transport.close()
            self._transport = None


__all__ = ["AppController"]

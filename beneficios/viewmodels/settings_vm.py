from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..utils.logging import env_forces_debug

DEFAULT_API_URL = "http://localhost:8080/backend-module/api/v1/beneficios"

# Environment variables that override persisted settings.
_ENV_OVERRIDES = {
    "BENEFICIOS_API_URL": "api_base_url",
    "BENEFICIOS_API_KEY": "api_key",
    "BENEFICIOS_TIMEOUT_S": "request_timeout_s",
}


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    api_base_url: str = DEFAULT_API_URL
    api_key: str = ""
    request_timeout_s: int = 10
    notification_duration_s: float = 5.0
    transfer_path: str = "/transfer"


def _default_debug_logging() -> bool:
    return env_forces_debug()


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def api_base_url(self) -> str:
        return self.config.api_base_url

    @api_base_url.setter
    def api_base_url(self, value: str) -> None:
        self.config = replace(self.config, api_base_url=self._coerce_url(value))

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def request_timeout_s(self) -> int:
        return self.config.request_timeout_s

    @request_timeout_s.setter
    def request_timeout_s(self, value: int) -> None:
        self.config = replace(self.config, request_timeout_s=self._coerce_int("request_timeout_s", value))

    @property
    def notification_duration_s(self) -> float:
        return self.config.notification_duration_s

    @property
    def transfer_path(self) -> str:
        return self.config.transfer_path

    # ------------------------------------------------------------------
    def is_valid(self) -> bool:
        if not self.api_base_url.startswith(("http://", "https://")):
            return False
        if self.request_timeout_s <= 0 or self.notification_duration_s <= 0:
            return False
        return True

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_flat_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_flat_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Overlay ``BENEFICIOS_*`` environment variables onto the settings."""
        env = os.environ if environ is None else environ
        overrides = {
            key: env[var] for var, key in _ENV_OVERRIDES.items() if env.get(var, "").strip()
        }
        if overrides:
            self.apply_dict(overrides)

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "api_base_url":
            return self._coerce_url(raw)
        if key == "api_key":
            return "" if raw is None else str(raw).strip()
        if key == "request_timeout_s":
            return self._coerce_int(key, raw)
        if key == "notification_duration_s":
            return self._coerce_float(key, raw)
        if key == "transfer_path":
            return self._coerce_path(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_url(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("api_base_url must be a non-empty string.")
        return value.strip().rstrip("/")

    @staticmethod
    def _coerce_path(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("transfer_path must be a non-empty string.")
        text = value.strip()
        return text if text.startswith("/") else f"/{text}"

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if coerced <= 0:
            raise ValueError(f"{name} must be positive.")
        return coerced

    @staticmethod
    def _coerce_float(name: str, value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be a number.")
        try:
            coerced = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{name} must be a number.") from exc
        if coerced <= 0:
            raise ValueError(f"{name} must be positive.")
        return coerced


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()

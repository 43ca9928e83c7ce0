from __future__ import annotations

import json

import pytest

from beneficios.adapters.storage_local import StorageLocal
from beneficios.viewmodels.settings_vm import DEFAULT_API_URL, SettingsVM, default_settings_payload


def test_defaults_are_valid() -> None:
    settings = SettingsVM()

    assert settings.api_base_url == DEFAULT_API_URL
    assert settings.request_timeout_s == 10
    assert settings.transfer_path == "/transfer"
    assert settings.is_valid()


def test_apply_dict_coerces_values() -> None:
    settings = SettingsVM()

    settings.apply_dict(
        {
            "api_base_url": " https://api.example/beneficios/ ",
            "request_timeout_s": "15",
            "notification_duration_s": "2.5",
            "transfer_path": "transferir",
            "debug_logging": "yes",
        }
    )

    assert settings.api_base_url == "https://api.example/beneficios"
    assert settings.request_timeout_s == 15
    assert settings.notification_duration_s == 2.5
    assert settings.transfer_path == "/transferir"
    assert settings.debug_logging is True


@pytest.mark.parametrize(
    "payload",
    [
        {"unknown": 1},
        {"request_timeout_s": 0},
        {"request_timeout_s": "abc"},
        {"api_base_url": ""},
        {"notification_duration_s": -1},
    ],
)
def test_apply_dict_rejects_bad_values(payload) -> None:
    with pytest.raises(ValueError):
        SettingsVM().apply_dict(payload)


def test_non_http_url_is_invalid() -> None:
    settings = SettingsVM()
    settings.api_base_url = "ftp://host/beneficios"

    assert not settings.is_valid()


def test_apply_env_overrides_persisted_values() -> None:
    settings = SettingsVM()

    settings.apply_env(
        {
            "BENEFICIOS_API_URL": "http://other:9000/api",
            "BENEFICIOS_API_KEY": "secret",
            "BENEFICIOS_TIMEOUT_S": " ",
        }
    )

    assert settings.api_base_url == "http://other:9000/api"
    assert settings.api_key == "secret"
    assert settings.request_timeout_s == 10


def test_storage_returns_defaults_when_file_missing(tmp_path) -> None:
    storage = StorageLocal(str(tmp_path))

    assert storage.load_user_settings() == default_settings_payload()


def test_saved_settings_file_restores_settings(tmp_path) -> None:
    storage = StorageLocal(str(tmp_path))
    settings = SettingsVM()
    settings.apply_dict({"api_base_url": "http://srv/api", "transfer_path": "/transferir"})

    (tmp_path / StorageLocal.SETTINGS_FILE).write_text(json.dumps(settings.to_dict()), encoding="utf-8")
    restored = SettingsVM()
    restored.apply_dict(storage.load_user_settings())

    assert restored.to_dict() == settings.to_dict()


def test_partial_file_is_merged_over_defaults(tmp_path) -> None:
    (tmp_path / StorageLocal.SETTINGS_FILE).write_text(
        json.dumps({"request_timeout_s": 3}), encoding="utf-8"
    )

    loaded = StorageLocal(str(tmp_path)).load_user_settings()

    assert loaded["request_timeout_s"] == 3
    assert loaded["api_base_url"] == DEFAULT_API_URL


def test_non_object_file_is_rejected(tmp_path) -> None:
    (tmp_path / StorageLocal.SETTINGS_FILE).write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        StorageLocal(str(tmp_path)).load_user_settings()

from __future__ import annotations

import logging

import pytest

from beneficios.utils.logging import apply_debug_setting, configure_root, env_forces_debug, env_level


@pytest.fixture(autouse=True)
def _restore_root_level(monkeypatch):
    monkeypatch.delenv("BENEFICIOS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BENEFICIOS_DEBUG", raising=False)
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({}, None),
        ({"BENEFICIOS_LOG_LEVEL": "warning"}, logging.WARNING),
        ({"BENEFICIOS_LOG_LEVEL": "15"}, 15),
        ({"BENEFICIOS_LOG_LEVEL": "loud"}, logging.INFO),
        ({"BENEFICIOS_DEBUG": "yes"}, logging.DEBUG),
        ({"BENEFICIOS_DEBUG": "0"}, None),
    ],
)
def test_env_level(environ, expected) -> None:
    assert env_level(environ) == expected


def test_debug_setting_switches_between_info_and_debug() -> None:
    assert apply_debug_setting(True) == logging.DEBUG
    assert apply_debug_setting(False) == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_explicit_env_level_wins_over_setting(monkeypatch) -> None:
    monkeypatch.setenv("BENEFICIOS_LOG_LEVEL", "warning")

    assert apply_debug_setting(True) == logging.WARNING
    assert configure_root() == logging.WARNING
    assert env_forces_debug() is False


def test_debug_flag_enables_debug_and_quiets_urllib3(monkeypatch) -> None:
    monkeypatch.setenv("BENEFICIOS_DEBUG", "true")

    assert configure_root() == logging.DEBUG
    assert env_forces_debug() is True
    assert logging.getLogger("urllib3").level == logging.INFO

"""Root logger setup for the web runtime.

``BENEFICIOS_LOG_LEVEL`` (name or number) pins the level; otherwise a truthy
``BENEFICIOS_DEBUG`` selects DEBUG. Either one overrides the ``debug_logging``
setting.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LEVEL_ENV = "BENEFICIOS_LOG_LEVEL"
DEBUG_ENV = "BENEFICIOS_DEBUG"

_TRUTHY = {"1", "true", "yes", "on"}


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or None when nothing is set."""
    env = os.environ if environ is None else environ
    raw = (env.get(LEVEL_ENV) or "").strip()
    if raw:
        if raw.isdigit():
            return int(raw)
        named = logging.getLevelName(raw.upper())
        return named if isinstance(named, int) else logging.INFO
    if (env.get(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def env_forces_debug() -> bool:
    level = env_level()
    return level is not None and level <= logging.DEBUG


def configure_root(default_level: int = logging.INFO) -> int:
    """Install the console handler once and set the root level."""
    forced = env_level()
    level = default_level if forced is None else forced
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt="%H:%M:%S")
    root.setLevel(level)
    # urllib3 logs every pooled connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))
    return level


def apply_debug_setting(enabled: bool) -> int:
    """Follow the ``debug_logging`` setting unless the environment pins a level."""
    forced = env_level()
    if forced is None:
        forced = logging.DEBUG if enabled else logging.INFO
    logging.getLogger().setLevel(forced)
    return forced


__all__ = ["apply_debug_setting", "configure_root", "env_forces_debug", "env_level"]

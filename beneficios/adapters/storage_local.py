from __future__ import annotations

import json
import os
from typing import Any, Dict

from beneficios.viewmodels.settings_vm import default_settings_payload


class StorageLocal:
    """Local filesystem storage for user settings (JSON)."""

    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def load_user_settings(self) -> Dict[str, Any]:
        path = self.settings_path
        if not os.path.isfile(path):
            return default_settings_payload()
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: settings must be a JSON object")
        merged = default_settings_payload()
        merged.update(data)
        return merged

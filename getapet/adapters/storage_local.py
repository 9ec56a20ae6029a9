from __future__ import annotations
import json, os
from typing import Dict
from getapet.domain.ports import StoragePort

PREFS_FILENAME = "user_prefs.json"


class StorageLocal(StoragePort):
    """Local filesystem storage for user prefs (JSON)."""

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def prefs_path(self) -> str:
        return os.path.join(self.root, PREFS_FILENAME)

    # ---- User prefs (JSON) ----
    def save_user_prefs(self, prefs: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        tmp_path = self.prefs_path + ".tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(prefs, f, ensure_ascii=False, indent=2, sort_keys=True)
        os.replace(tmp_path, self.prefs_path)

    def load_user_prefs(self) -> Dict:
        if not os.path.exists(self.prefs_path):
            return {}
        with open(self.prefs_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.prefs_path} must contain a JSON object.")
        return data


def default_root() -> str:
    """Preference directory: ``GETAPET_HOME`` or the working directory."""
    return os.environ.get("GETAPET_HOME", "").strip() or "."

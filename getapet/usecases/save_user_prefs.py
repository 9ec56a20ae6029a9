from __future__ import annotations
from dataclasses import dataclass
from typing import Dict
from ..domain.ports import StoragePort, UseCaseError


@dataclass
class SaveUserPrefs:
    storage: StoragePort

    def __call__(self, prefs: Dict) -> None:
        try:
            self.storage.save_user_prefs(prefs)
        except Exception as e:
            raise UseCaseError("SAVE_PREFS_FAILED", str(e))

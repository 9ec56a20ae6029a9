from __future__ import annotations
from dataclasses import dataclass
from typing import Dict
from ..domain.ports import StoragePort, UseCaseError


@dataclass
class LoadUserPrefs:
    storage: StoragePort

    def __call__(self) -> Dict:
        try:
            return self.storage.load_user_prefs()
        except Exception as e:
            raise UseCaseError("LOAD_PREFS_FAILED", str(e))

from __future__ import annotations
from typing import Any, Dict, Protocol


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class CatalogPort(Protocol):
    """Source of raw catalog payloads (``PetCatalog.from_mapping`` shape)."""

    def load_catalog(self, path: str) -> Dict[str, Any]: ...


class StoragePort(Protocol):
    """Persistence for user preferences."""

    def save_user_prefs(self, prefs: Dict) -> None: ...
    def load_user_prefs(self) -> Dict: ...

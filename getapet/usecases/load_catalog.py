from __future__ import annotations
import logging
from dataclasses import dataclass
from ..domain.catalog import PetCatalog
from ..domain.ports import CatalogPort, UseCaseError

LOGGER = logging.getLogger(__name__)


@dataclass
class LoadCatalog:
    source: CatalogPort

    def __call__(self, path: str = "") -> PetCatalog:
        """Load ``path`` or return the built-in catalog when it is empty."""
        if not path:
            return PetCatalog.default()
        try:
            catalog = PetCatalog.from_mapping(self.source.load_catalog(path))
        except Exception as e:
            raise UseCaseError("LOAD_CATALOG_FAILED", f"Could not load catalog {path}: {e}")
        LOGGER.info("Loaded catalog %s (%d pets).", path, len(catalog))
        return catalog

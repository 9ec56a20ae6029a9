"""Domain package exports for pet value objects and the catalog."""

from .catalog import PetCatalog
from .entities import (
    Category,
    HeaderItem,
    Item,
    Pet,
    PetItem,
    Section,
    header_for,
    item_for,
)
from .ports import UseCaseError

__all__ = [
    "Category",
    "HeaderItem",
    "Item",
    "Pet",
    "PetCatalog",
    "PetItem",
    "Section",
    "UseCaseError",
    "header_for",
    "item_for",
]

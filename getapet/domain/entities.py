from __future__ import annotations

"""Domain value objects shared across the catalog, view models, and views."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union
from uuid import UUID, uuid4


class Category(Enum):
    """Pet categories in their fixed display order."""

    DOGS = "dogs"
    CATS = "cats"
    BIRDS = "birds"
    BUNNIES = "bunnies"
    OTHERS = "others"

    @property
    def display_name(self) -> str:
        """Header title shown above the category's pets."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> "Category":
        """Resolve a category from its name or value, ignoring case."""
        if not isinstance(text, str) or not text.strip():
            raise ValueError("Category name must be a non-empty string.")
        needle = text.strip().lower()
        for category in cls:
            if needle in (category.value, category.name.lower()):
                return category
        raise ValueError(f"Unknown pet category '{text}'.")

    def __str__(self) -> str:
        return self.display_name


class Section(Enum):
    """The two fixed sections of the explorer list, in rendering order."""

    AVAILABLE = "available"
    ADOPTED = "adopted"

    @property
    def title(self) -> str:
        return "Available Pets" if self is Section.AVAILABLE else "Adopted Pets"


@dataclass(frozen=True)
class Pet:
    """An adoptable pet. Identity is value equality."""

    name: str
    age: int
    image_name: str
    category: Category

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Pet name must be a non-empty string.")
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise ValueError("Pet age must be an integer.")
        if self.age < 0:
            raise ValueError("Pet age must be non-negative.")
        if not isinstance(self.category, Category):
            raise TypeError("Pet category must be a Category member.")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class _ItemBase:
    """Common fields for list items.

    ``identity`` is generated once per construction, so two items with the same
    title and pet stay distinct in sets, dict keys, and the list model.
    """

    title: str
    identity: UUID = field(default_factory=uuid4, init=False, repr=False)

    @property
    def key(self) -> str:
        """Stable row id for views (hex form of ``identity``)."""
        return self.identity.hex

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ItemBase):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)


@dataclass(frozen=True, eq=False)
class HeaderItem(_ItemBase):
    """Category header row; owns pet rows in the Available section."""

    @property
    def pet(self) -> None:
        return None


@dataclass(frozen=True, eq=False)
class PetItem(_ItemBase):
    """Leaf row representing one pet."""

    pet: Optional[Pet] = None

    def __post_init__(self) -> None:
        if not isinstance(self.pet, Pet):
            raise ValueError("PetItem requires a Pet.")


Item = Union[HeaderItem, PetItem]


def header_for(category: Category) -> HeaderItem:
    """Build a header item titled with the category's display name."""
    return HeaderItem(title=category.display_name)


def item_for(pet: Pet) -> PetItem:
    """Build a fresh pet item titled with the pet's name."""
    return PetItem(title=pet.name, pet=pet)


__all__ = [
    "Category",
    "HeaderItem",
    "Item",
    "Pet",
    "PetItem",
    "Section",
    "header_for",
    "item_for",
]

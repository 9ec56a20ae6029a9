"""Read-only pet catalog: categories in display order, pets per category.

Call context:
    ``ExplorerVM.load`` walks ``categories()`` and ``pets(category)`` to build
    the Available section. ``CatalogJson`` parses catalog files into
    ``PetCatalog.from_mapping`` payloads.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple

from .entities import Category, Pet


# Built-in catalog used when no catalog file is configured.
_DEFAULT_PETS: Dict[Category, Tuple[Tuple[str, int, str], ...]] = {
    Category.DOGS: (
        ("Rex", 3, "rex"),
        ("Bella", 5, "bella"),
        ("Charlie", 1, "charlie"),
    ),
    Category.CATS: (
        ("Milo", 2, "milo"),
        ("Luna", 4, "luna"),
        ("Oliver", 7, "oliver"),
    ),
    Category.BIRDS: (
        ("Kiwi", 1, "kiwi"),
        ("Sunny", 2, "sunny"),
    ),
    Category.BUNNIES: (
        ("Thumper", 2, "thumper"),
        ("Clover", 3, "clover"),
    ),
    Category.OTHERS: (
        ("Shelly", 12, "shelly"),
        ("Nibbles", 1, "nibbles"),
    ),
}


class PetCatalog:
    """Immutable mapping of categories to ordered pet sequences."""

    def __init__(self, pets_by_category: Mapping[Category, Iterable[Pet]]) -> None:
        catalog: Dict[Category, Tuple[Pet, ...]] = {}
        for category, pets in pets_by_category.items():
            if not isinstance(category, Category):
                raise TypeError(f"Catalog key must be a Category, got {category!r}.")
            entries = tuple(pets)
            for pet in entries:
                if pet.category is not category:
                    raise ValueError(
                        f"Pet '{pet.name}' is tagged {pet.category.value} "
                        f"but listed under {category.value}."
                    )
            catalog[category] = entries
        self._pets = catalog

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def categories(self) -> Tuple[Category, ...]:
        """Return every category in display order."""
        return tuple(Category)

    def pets(self, category: Category) -> Tuple[Pet, ...]:
        """Return the category's pets in catalog order (empty if none)."""
        return self._pets.get(category, ())

    def all_pets(self) -> List[Pet]:
        pets: List[Pet] = []
        for category in self.categories():
            pets.extend(self.pets(category))
        return pets

    def __len__(self) -> int:
        return sum(len(pets) for pets in self._pets.values())

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def default(cls) -> "PetCatalog":
        """Return the built-in catalog."""
        return cls(
            {
                category: [
                    Pet(name=name, age=age, image_name=image, category=category)
                    for name, age, image in entries
                ]
                for category, entries in _DEFAULT_PETS.items()
            }
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "PetCatalog":
        """Build a catalog from ``{category: [{name, age, image_name}, ...]}``.

        Raises:
            ValueError: Unknown category names or malformed pet entries.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Catalog payload must be a mapping of categories.")
        pets_by_category: Dict[Category, List[Pet]] = {}
        for raw_category, raw_pets in payload.items():
            category = Category.parse(str(raw_category))
            if not isinstance(raw_pets, Sequence) or isinstance(raw_pets, (str, bytes)):
                raise ValueError(f"Pets for '{raw_category}' must be a list.")
            pets = pets_by_category.setdefault(category, [])
            for index, entry in enumerate(raw_pets):
                pets.append(_pet_from_entry(category, entry, index))
        return cls(pets_by_category)

    def to_mapping(self) -> Dict[str, List[Dict[str, Any]]]:
        """Inverse of ``from_mapping`` for categories that have pets."""
        return {
            category.value: [
                {"name": pet.name, "age": pet.age, "image_name": pet.image_name}
                for pet in self.pets(category)
            ]
            for category in self.categories()
            if self.pets(category)
        }


def _pet_from_entry(category: Category, entry: Any, index: int) -> Pet:
    if not isinstance(entry, Mapping):
        raise ValueError(f"{category.value}[{index}] must be an object.")
    name = entry.get("name")
    age = entry.get("age")
    image_name = entry.get("image_name") or (name.lower() if isinstance(name, str) else "")
    try:
        return Pet(name=name, age=age, image_name=str(image_name), category=category)
    except ValueError as exc:
        raise ValueError(f"{category.value}[{index}]: {exc}") from exc


__all__ = ["PetCatalog"]

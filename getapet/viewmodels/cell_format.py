"""Row display helpers shared by the Tk tree view and the NiceGUI page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Any, Optional

from getapet.domain.entities import HeaderItem, Pet, PetItem, Section

ACCESSORY_OUTLINE = "outline"
ACCESSORY_DISCLOSURE = "disclosure"


@dataclass(frozen=True)
class RowDisplay:
    """Display fields for one list row."""

    text: str = ""
    secondary_text: str = ""
    image_name: str = ""
    accessory: str = ""
    highlighted: bool = False


def age_label(age: int) -> str:
    if age == 1:
        return "1 year old"
    return f"{age} years old"


def header_row(item: HeaderItem) -> RowDisplay:
    return RowDisplay(text=item.title, accessory=ACCESSORY_OUTLINE)


def available_pet_row(pet: Pet, *, adopted: bool) -> RowDisplay:
    return RowDisplay(
        text=pet.name,
        secondary_text=age_label(pet.age),
        image_name=pet.image_name,
        accessory=ACCESSORY_DISCLOSURE,
        highlighted=adopted,
    )


def adopted_pet_row(pet: Pet) -> RowDisplay:
    return RowDisplay(
        text=f"Your pet: {pet.name}",
        secondary_text=age_label(pet.age),
        image_name=pet.image_name,
        accessory=ACCESSORY_DISCLOSURE,
    )


def render_row(section: Any, item: Any, adoptions: AbstractSet[Pet]) -> RowDisplay:
    """Pick the row style for ``item`` in ``section``.

    Headers render the same in every section. Pet rows in Available are
    highlighted while their pet is in ``adoptions``. Anything unrecognised
    renders as an empty row.
    """
    if isinstance(item, HeaderItem):
        return header_row(item)
    pet: Optional[Pet] = item.pet if isinstance(item, PetItem) else None
    if pet is None:
        return RowDisplay()
    if section is Section.AVAILABLE:
        return available_pet_row(pet, adopted=pet in adoptions)
    if section is Section.ADOPTED:
        return adopted_pet_row(pet)
    return RowDisplay()


__all__ = [
    "ACCESSORY_DISCLOSURE",
    "ACCESSORY_OUTLINE",
    "RowDisplay",
    "adopted_pet_row",
    "age_label",
    "available_pet_row",
    "header_row",
    "render_row",
]

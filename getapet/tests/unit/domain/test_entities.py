from __future__ import annotations

import pytest

from getapet.domain.entities import Category, HeaderItem, Pet, PetItem, Section, header_for, item_for


def test_pets_compare_by_value() -> None:
    a = Pet(name="Rex", age=3, image_name="rex", category=Category.DOGS)
    b = Pet(name="Rex", age=3, image_name="rex", category=Category.DOGS)

    assert a == b
    assert len({a, b}) == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "", "age": 1},
        {"name": "Rex", "age": -1},
    ],
)
def test_pet_rejects_invalid_fields(kwargs) -> None:
    with pytest.raises(ValueError):
        Pet(image_name="x", category=Category.DOGS, **kwargs)


def test_pet_rejects_non_integer_age() -> None:
    with pytest.raises(ValueError):
        Pet(name="Rex", age="3", image_name="rex", category=Category.DOGS)


def test_items_with_equal_content_stay_distinct(rex) -> None:
    first = PetItem(title="Rex", pet=rex)
    second = PetItem(title="Rex", pet=rex)

    assert first != second
    assert first.identity != second.identity
    assert len({first, second}) == 2
    assert {first: 1, second: 2}[first] == 1


def test_item_identity_is_fixed_at_construction(rex) -> None:
    item = item_for(rex)
    identity = item.identity

    assert item.identity == identity
    assert item.key == identity.hex
    assert item == item


def test_header_has_no_pet_and_pet_item_requires_one() -> None:
    header = header_for(Category.CATS)

    assert isinstance(header, HeaderItem)
    assert header.pet is None
    assert header.title == "Cats"
    with pytest.raises(ValueError):
        PetItem(title="ghost")


def test_items_are_immutable(rex) -> None:
    item = item_for(rex)
    with pytest.raises(AttributeError):
        item.title = "Other"


def test_category_parse_accepts_names_and_values() -> None:
    assert Category.parse("dogs") is Category.DOGS
    assert Category.parse(" BUNNIES ") is Category.BUNNIES
    with pytest.raises(ValueError):
        Category.parse("dragons")


def test_sections_are_fixed_and_ordered() -> None:
    assert list(Section) == [Section.AVAILABLE, Section.ADOPTED]
    assert Section.ADOPTED.title == "Adopted Pets"

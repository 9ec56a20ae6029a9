from __future__ import annotations

from typing import List

import pytest

from getapet.domain.entities import Category, HeaderItem, Pet, PetItem, Section, header_for, item_for
from getapet.viewmodels.list_model import HierarchicalListModel, ListPatch, RowPlacement


def _pets(category: Category, *names: str) -> List[Pet]:
    return [Pet(name=name, age=n + 1, image_name=name.lower(), category=category) for n, name in enumerate(names)]


def _model(patches: List[ListPatch]) -> HierarchicalListModel:
    model = HierarchicalListModel(on_patch=patches.append)
    model.initialize_sections([Section.AVAILABLE, Section.ADOPTED])
    return model


def _groups():
    dogs, cats = header_for(Category.DOGS), header_for(Category.CATS)
    return [
        (dogs, [item_for(p) for p in _pets(Category.DOGS, "Rex", "Bella")]),
        (cats, [item_for(p) for p in _pets(Category.CATS, "Milo")]),
    ]


def test_build_available_preserves_category_and_pet_order() -> None:
    patches: List[ListPatch] = []
    model = _model(patches)
    groups = _groups()

    model.build_available(groups)

    assert [item.title for item in model.items_in(Section.AVAILABLE)] == ["Dogs", "Rex", "Bella", "Cats", "Milo"]
    assert model.items_in(Section.ADOPTED) == []
    assert model.children_of(groups[0][0]) == groups[0][1]
    assert model.parent_of(groups[1][1][0]) is groups[1][0]
    assert len(model) == 5


def test_build_available_emits_a_single_patch() -> None:
    patches: List[ListPatch] = []
    model = _model(patches)

    model.build_available(_groups())

    assert len(patches) == 1
    patch = patches[0]
    assert patch.section is Section.AVAILABLE
    assert [p.item.title for p in patch.placements()] == ["Dogs", "Cats", "Rex", "Bella", "Milo"]
    assert patch.moved == [] and patch.deleted == [] and patch.reloaded == []


def test_append_to_adopted_only_inserts_the_new_row() -> None:
    patches: List[ListPatch] = []
    model = _model(patches)
    model.build_available(_groups())
    rex = _pets(Category.DOGS, "Rex")[0]
    first, second = item_for(rex), item_for(rex)

    model.append_to_adopted(first)
    patch = model.append_to_adopted(second)

    assert patch.section is Section.ADOPTED
    assert [p.item for p in patch.inserted] == [second]
    assert patch.inserted[0].after is first
    assert patch.inserted[0].index == 1
    assert patch.inserted[0].parent is None
    assert model.items_in(Section.ADOPTED) == [first, second]


def test_current_items_spans_sections_in_rendering_order() -> None:
    model = _model([])
    groups = _groups()
    model.build_available(groups)
    adopted = item_for(groups[0][1][0].pet)
    model.append_to_adopted(adopted)

    titles = [item.title for item in model.current_items()]

    assert titles == ["Dogs", "Rex", "Bella", "Cats", "Milo", "Rex"]
    assert model.current_items()[-1] is adopted


def test_reload_item_marks_only_that_row() -> None:
    patches: List[ListPatch] = []
    model = _model(patches)
    groups = _groups()
    model.build_available(groups)
    bella = groups[0][1][1]

    assert model.reload_item(bella) is True

    patch = patches[-1]
    assert patch.reloaded == [bella]
    assert patch.inserted == [] and patch.moved == [] and patch.deleted == []


def test_reload_of_unknown_item_is_a_silent_noop() -> None:
    patches: List[ListPatch] = []
    model = _model(patches)
    model.build_available(_groups())
    before = list(model.current_items())
    stranger = item_for(_pets(Category.BIRDS, "Kiwi")[0])

    assert model.reload_item(stranger) is False
    assert model.current_items() == before
    assert len(patches) == 1


def test_reapplying_with_a_reordered_section_moves_minimal_rows() -> None:
    patches: List[ListPatch] = []
    model = _model(patches)
    (dogs, dog_items), (cats, cat_items) = _groups()
    model.build_available([(dogs, dog_items), (cats, cat_items)])

    patch = model.apply_section(Section.AVAILABLE, [(cats, cat_items), (dogs, list(reversed(dog_items)))])

    assert [p.item for p in patch.moved] == [cats, dog_items[1]]
    assert patch.moved[0].after is None and patch.moved[1].parent is dogs
    assert patch.inserted == [] and patch.deleted == []
    assert [item.title for item in model.items_in(Section.AVAILABLE)] == ["Cats", "Milo", "Dogs", "Bella", "Rex"]


def test_reapplying_identical_content_produces_no_patch() -> None:
    patches: List[ListPatch] = []
    model = _model(patches)
    groups = _groups()
    model.build_available(groups)

    patch = model.apply_section(Section.AVAILABLE, groups)

    assert patch.is_empty
    assert len(patches) == 1


def test_dropping_a_header_deletes_it_without_listing_its_children() -> None:
    model = _model([])
    (dogs, dog_items), (cats, cat_items) = _groups()
    model.build_available([(dogs, dog_items), (cats, cat_items)])

    patch = model.apply_section(Section.AVAILABLE, [(cats, cat_items)])

    assert patch.deleted == [dogs]
    assert patch.inserted == [] and patch.moved == []
    assert dog_items[0] not in model


def test_item_lookup_helpers() -> None:
    model = _model([])
    groups = _groups()
    model.build_available(groups)
    rex_item = groups[0][1][0]

    assert model.item_for_key(rex_item.key) is rex_item
    assert model.item_for_key("missing") is None
    assert model.item_at(Section.AVAILABLE, 1) is rex_item
    assert model.item_at(Section.AVAILABLE, 99) is None
    assert model.item_at(Section.ADOPTED, 0) is None
    assert model.section_of(rex_item) is Section.AVAILABLE
    assert model.first_pet_item(rex_item.pet) is rex_item
    assert isinstance(model.items_in(Section.AVAILABLE)[0], HeaderItem)


def test_appending_an_item_twice_is_rejected() -> None:
    model = _model([])
    item = item_for(_pets(Category.DOGS, "Rex")[0])
    model.append_to_adopted(item)

    with pytest.raises(ValueError):
        model.append_to_adopted(item)


def test_section_operations_require_initialization() -> None:
    model = HierarchicalListModel()

    with pytest.raises(RuntimeError):
        model.append_to_adopted(PetItem(title="Rex", pet=_pets(Category.DOGS, "Rex")[0]))
    assert model.current_items() == []


def test_add_placement_keeps_rendering_order_across_kinds() -> None:
    header = header_for(Category.DOGS)
    first = RowPlacement(item=header, parent=None, after=None, index=0)
    second = RowPlacement(item=item_for(Pet("Rex", 3, "rex", Category.DOGS)), parent=header, after=None, index=0)
    patch = ListPatch(section=Section.AVAILABLE)

    patch.add_placement(first, moved=True)
    patch.add_placement(second, moved=False)

    assert patch.moved == [first]
    assert patch.inserted == [second]
    assert patch.placements() == [first, second]
    assert not patch.is_empty

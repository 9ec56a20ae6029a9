from __future__ import annotations

from typing import Dict, List

from getapet.app.views.explorer_view import ExplorerView, placement_index, row_tags, section_iid
from getapet.app.views.theme import TAG_ADOPTED, TAG_HEADER
from getapet.domain.entities import Section
from getapet.viewmodels.cell_format import ACCESSORY_OUTLINE, RowDisplay


class FakeTree:
    """Minimal stand-in for ttk.Treeview positional queries."""

    def __init__(self, children: Dict[str, List[str]]) -> None:
        self.children = children

    def _parent_of(self, iid: str):
        for parent, kids in self.children.items():
            if iid in kids:
                return parent
        return None

    def exists(self, iid: str) -> bool:
        return self._parent_of(iid) is not None

    def parent(self, iid: str) -> str:
        return self._parent_of(iid)

    def index(self, iid: str) -> int:
        return self.children[self._parent_of(iid)].index(iid)


def test_first_child_goes_to_index_zero() -> None:
    tree = FakeTree({"p": ["a", "b"]})

    assert placement_index(tree, "new", "p", None) == 0


def test_new_row_lands_after_its_anchor() -> None:
    tree = FakeTree({"p": ["a", "b", "c"]})

    assert placement_index(tree, "new", "p", "b") == 2


def test_moving_a_row_forward_accounts_for_itself() -> None:
    tree = FakeTree({"p": ["a", "b", "c"]})

    # a moves behind c: Treeview.move counts positions without "a"
    assert placement_index(tree, "a", "p", "c") == 2


def test_moving_a_row_from_another_parent() -> None:
    tree = FakeTree({"p": ["a", "b"], "q": ["x"]})

    assert placement_index(tree, "x", "p", "a") == 1


def test_row_tags_follow_display_flags() -> None:
    assert row_tags(RowDisplay(accessory=ACCESSORY_OUTLINE)) == (TAG_HEADER,)
    assert row_tags(RowDisplay(highlighted=True)) == (TAG_ADOPTED,)
    assert row_tags(RowDisplay()) == ()


def test_section_iids_are_namespaced() -> None:
    assert section_iid(Section.ADOPTED) == "section:adopted"


class SelectionTree:
    """Stand-in for the Treeview selection and item-option calls."""

    def __init__(self, selected: str, tags=(), is_open: bool = False) -> None:
        self._selection = (selected,)
        self.tags = tuple(tags)
        self.open = is_open
        self.removed: List[str] = []

    def selection(self):
        return self._selection

    def selection_remove(self, iid: str) -> None:
        self.removed.append(iid)
        self._selection = ()

    def item(self, iid: str, option=None, **kw):
        if "open" in kw:
            self.open = kw["open"]
            return None
        return self.tags if option == "tags" else self.open


def _view_with(tree: SelectionTree) -> tuple:
    calls: List[str] = []
    view = ExplorerView.__new__(ExplorerView)
    view.tree = tree
    view.on_select = calls.append
    return view, calls


def test_moving_the_selection_does_not_open_details() -> None:
    view, calls = _view_with(SelectionTree("pet-row"))

    view._on_select_changed()

    assert calls == []


def test_activating_a_row_forwards_its_id() -> None:
    view, calls = _view_with(SelectionTree("pet-row"))

    view._on_activate()

    assert calls == ["pet-row"]


def test_selecting_a_header_toggles_it_without_forwarding() -> None:
    tree = SelectionTree("header-row", tags=(TAG_HEADER,))
    view, calls = _view_with(tree)

    view._on_select_changed()

    assert tree.open is True
    assert calls == []


def test_section_nodes_are_never_forwarded() -> None:
    tree = SelectionTree(section_iid(Section.AVAILABLE))
    view, calls = _view_with(tree)

    view._on_select_changed()
    view._on_activate()

    assert tree.removed == [section_iid(Section.AVAILABLE)]
    assert calls == []

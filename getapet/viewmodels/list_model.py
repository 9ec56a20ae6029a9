"""Hierarchical list model with keyed, incremental patches.

Call context:
    ``ExplorerVM`` owns one model. Each mutating call reconciles the affected
    section against the state last handed to the renderer and emits a
    ``ListPatch`` through ``on_patch``. ``ExplorerView`` (Tk) and the NiceGUI
    page consume patches; unaffected rows never appear in a patch.

Structure:
    Every section is a forest of depth at most two. Available holds category
    headers that own pet rows, Adopted holds pet rows at the top level.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from getapet.domain.entities import Item, Pet, PetItem, Section

LOGGER = logging.getLogger(__name__)

Group = Tuple[Item, Sequence[Item]]


@dataclass(frozen=True)
class RowPlacement:
    """Where an inserted or moved row lands.

    ``after`` is the preceding sibling in the new order (``None`` for the first
    child), ``index`` the final position among siblings.
    """

    item: Item
    parent: Optional[Item]
    after: Optional[Item]
    index: int


@dataclass
class ListPatch:
    """Minimal change set for one section."""

    section: Section
    deleted: List[Item] = field(default_factory=list)
    inserted: List[RowPlacement] = field(default_factory=list)
    moved: List[RowPlacement] = field(default_factory=list)
    reloaded: List[Item] = field(default_factory=list)
    # inserted + moved in new rendering order, filled by add_placement
    _ordered: List[RowPlacement] = field(default_factory=list, repr=False, compare=False)

    @property
    def is_empty(self) -> bool:
        return not (self.deleted or self.inserted or self.moved or self.reloaded)

    def placements(self) -> List[RowPlacement]:
        """Inserted and moved rows in new rendering order."""
        return list(self._ordered)

    def add_placement(self, placement: RowPlacement, *, moved: bool) -> None:
        (self.moved if moved else self.inserted).append(placement)
        self._ordered.append(placement)


class _SectionTree:
    def __init__(self) -> None:
        self.roots: List[Item] = []
        self.children: Dict[Item, List[Item]] = {}
        self.parents: Dict[Item, Optional[Item]] = {}

    def copy(self) -> "_SectionTree":
        clone = _SectionTree()
        clone.roots = list(self.roots)
        clone.children = {item: list(kids) for item, kids in self.children.items()}
        clone.parents = dict(self.parents)
        return clone

    def siblings(self, parent: Optional[Item]) -> List[Item]:
        if parent is None:
            return self.roots
        return self.children.setdefault(parent, [])

    def add(self, item: Item, parent: Optional[Item]) -> None:
        self.siblings(parent).append(item)
        self.parents[item] = parent

    def flatten(self) -> List[Item]:
        ordered: List[Item] = []
        for root in self.roots:
            ordered.append(root)
            ordered.extend(self.children.get(root, ()))
        return ordered

    def __contains__(self, item: object) -> bool:
        return item in self.parents


class HierarchicalListModel:
    """Per-section item trees plus the last state handed to the renderer."""

    def __init__(self, on_patch: Optional[Callable[[ListPatch], None]] = None) -> None:
        self.on_patch = on_patch
        self._sections: Tuple[Section, ...] = ()
        self._trees: Dict[Section, _SectionTree] = {}
        self._rendered: Dict[Section, _SectionTree] = {}

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def initialize_sections(self, sections: Iterable[Section]) -> None:
        """Establish the ordered section list with no items."""
        ordered: List[Section] = []
        for section in sections:
            if section not in ordered:
                ordered.append(section)
        self._sections = tuple(ordered)
        self._trees = {section: _SectionTree() for section in self._sections}
        self._rendered = {section: _SectionTree() for section in self._sections}

    def apply_section(self, section: Section, groups: Sequence[Group]) -> ListPatch:
        """Replace a section's content and emit one patch for the difference."""
        tree = _SectionTree()
        for header, children in groups:
            tree.add(header, None)
            for child in children:
                tree.add(child, header)
        self._trees[self._require(section)] = tree
        return self._commit(section)

    def build_available(self, groups: Sequence[Group]) -> ListPatch:
        """Lay out category headers and their pets in one rendering update."""
        return self.apply_section(Section.AVAILABLE, groups)

    def append(
        self,
        section: Section,
        items: Sequence[Item],
        parent: Optional[Item] = None,
    ) -> ListPatch:
        tree = self._trees[self._require(section)]
        if parent is not None and parent not in tree:
            raise KeyError(f"Parent row {parent.title!r} is not in {section.value}.")
        for item in items:
            if self.section_of(item) is not None:
                raise ValueError(f"Row {item.title!r} is already in the list.")
            tree.add(item, parent)
        return self._commit(section)

    def append_to_adopted(self, item: Item) -> ListPatch:
        """Append one row to the end of the Adopted section."""
        return self.append(Section.ADOPTED, [item])

    def reload_item(self, item: Item) -> bool:
        """Re-render one row in place. Returns ``False`` if it is not present."""
        section = self.section_of(item)
        if section is None:
            LOGGER.debug("Reload skipped; row %s is not in the list.", item.key)
            return False
        self._commit(section, reloads=[item])
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def sections(self) -> Tuple[Section, ...]:
        return self._sections

    def current_items(self) -> List[Item]:
        """Every row across all sections in rendering order."""
        items: List[Item] = []
        for section in self._sections:
            items.extend(self._trees[section].flatten())
        return items

    def items_in(self, section: Section) -> List[Item]:
        tree = self._trees.get(section)
        return tree.flatten() if tree is not None else []

    def children_of(self, header: Item) -> List[Item]:
        section = self.section_of(header)
        if section is None:
            return []
        return list(self._trees[section].children.get(header, ()))

    def parent_of(self, item: Item) -> Optional[Item]:
        section = self.section_of(item)
        if section is None:
            return None
        return self._trees[section].parents[item]

    def section_of(self, item: Item) -> Optional[Section]:
        for section in self._sections:
            if item in self._trees[section]:
                return section
        return None

    def item_for_key(self, key: str) -> Optional[Item]:
        for item in self.current_items():
            if item.key == key:
                return item
        return None

    def item_at(self, section: Section, row: int) -> Optional[Item]:
        """Resolve a flattened row index within a section."""
        items = self.items_in(section)
        if row < 0 or row >= len(items):
            return None
        return items[row]

    def first_pet_item(self, pet: Pet, section: Optional[Section] = None) -> Optional[PetItem]:
        """First pet row whose pet equals ``pet``, in rendering order."""
        candidates = self.items_in(section) if section is not None else self.current_items()
        for item in candidates:
            if isinstance(item, PetItem) and item.pet == pet:
                return item
        return None

    def __len__(self) -> int:
        return sum(len(tree.parents) for tree in self._trees.values())

    def __contains__(self, item: object) -> bool:
        return any(item in tree for tree in self._trees.values())

    # ------------------------------------------------------------------
    # Reconciliation
    # ------------------------------------------------------------------
    def _require(self, section: Section) -> Section:
        if section not in self._trees:
            raise RuntimeError(f"Section {section.value!r} has not been initialized.")
        return section

    def _commit(self, section: Section, reloads: Sequence[Item] = ()) -> ListPatch:
        old = self._rendered[section]
        new = self._trees[section]
        patch = diff_trees(section, old, new)
        patch.reloaded = [item for item in reloads if item in new and item in old]
        self._rendered[section] = new.copy()
        if not patch.is_empty:
            LOGGER.debug(
                "Patch %s: -%d +%d ~%d reload=%d",
                section.value,
                len(patch.deleted),
                len(patch.inserted),
                len(patch.moved),
                len(patch.reloaded),
            )
            if self.on_patch:
                self.on_patch(patch)
        return patch


def diff_trees(section: Section, old: _SectionTree, new: _SectionTree) -> ListPatch:
    """Keyed reconciliation by item identity.

    Rows kept under the same parent whose relative order survives (longest
    increasing run of old positions) are left alone; everything else is
    reported as deleted, inserted, or moved.
    """
    patch = ListPatch(section=section)

    for item in old.flatten():
        if item in new:
            continue
        old_parent = old.parents[item]
        if old_parent is not None and old_parent not in new:
            continue  # removed together with its header
        patch.deleted.append(item)

    parents: List[Optional[Item]] = [None] + list(new.roots)
    for parent in parents:
        siblings = new.children.get(parent, []) if parent is not None else new.roots
        stable = _stable_rows(old, parent, siblings)
        previous: Optional[Item] = None
        for index, item in enumerate(siblings):
            if item not in stable:
                placement = RowPlacement(item=item, parent=parent, after=previous, index=index)
                patch.add_placement(placement, moved=item in old)
            previous = item
    return patch


def _stable_rows(old: _SectionTree, parent: Optional[Item], siblings: Sequence[Item]) -> Set[Item]:
    """Rows that keep parent and relative order: an LIS over old positions."""
    if parent is not None and parent not in old:
        return set()
    old_siblings = old.children.get(parent, []) if parent is not None else old.roots
    position = {item: n for n, item in enumerate(old_siblings)}
    candidates = [item for item in siblings if item in position]
    if not candidates:
        return set()

    tails: List[int] = []
    tail_items: List[int] = []
    back: List[int] = [-1] * len(candidates)
    for n, item in enumerate(candidates):
        pos = position[item]
        slot = bisect_left(tails, pos)
        if slot == len(tails):
            tails.append(pos)
            tail_items.append(n)
        else:
            tails[slot] = pos
            tail_items[slot] = n
        back[n] = tail_items[slot - 1] if slot > 0 else -1

    keep: Set[Item] = set()
    cursor = tail_items[-1]
    while cursor != -1:
        keep.add(candidates[cursor])
        cursor = back[cursor]
    return keep


__all__ = ["HierarchicalListModel", "ListPatch", "RowPlacement", "diff_trees"]

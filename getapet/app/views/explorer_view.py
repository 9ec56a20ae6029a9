"""Explorer tree view: sections, category headers, and pet rows.

The view renders ``ListPatch`` objects from ``HierarchicalListModel``
incrementally and emits selection callbacks; it holds no adoption state.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Iterable, Optional

from getapet.domain.entities import Item, Section
from getapet.viewmodels.cell_format import ACCESSORY_OUTLINE, RowDisplay
from getapet.viewmodels.list_model import ListPatch, RowPlacement
from .theme import TAG_ADOPTED, TAG_HEADER, TAG_SECTION, configure_row_tags
from .view_utils import safe_call

SECTION_PREFIX = "section:"


def section_iid(section: Section) -> str:
    return f"{SECTION_PREFIX}{section.value}"


def placement_index(tree: Any, iid: str, parent_iid: str, after_iid: Optional[str]) -> int:
    """Index for ``tree.insert``/``tree.move`` that lands ``iid`` right after ``after_iid``.

    ``Treeview.move`` counts positions without the moved row itself, so a row
    that already sits before its anchor under the same parent needs one less.
    """
    if after_iid is None:
        return 0
    index = tree.index(after_iid) + 1
    if tree.exists(iid) and tree.parent(iid) == parent_iid and tree.index(iid) < index:
        index -= 1
    return index


def row_tags(row: RowDisplay) -> tuple:
    tags = []
    if row.accessory == ACCESSORY_OUTLINE:
        tags.append(TAG_HEADER)
    if row.highlighted:
        tags.append(TAG_ADOPTED)
    return tuple(tags)


class ExplorerView(ttk.Frame):
    """Two-section grouped list backed by a ``ttk.Treeview``."""

    def __init__(
        self,
        parent,
        *,
        sections: Iterable[Section],
        render_row: Callable[[Section, Item], RowDisplay],
        on_select: Optional[Callable[[str], None]] = None,
        expand_categories: bool = False,
        **kwargs,
    ):
        """Build the tree with one node per section.

        Args:
            parent: Host frame from ``MainWindowView``.
            sections: Sections in display order.
            render_row: Row formatter, usually ``ExplorerVM.row_for``.
            on_select: Called with the row id of a pet or header row activated
                by double-click or Enter.
            expand_categories: Open category headers when they are inserted.
            **kwargs: Additional frame options forwarded to ``ttk.Frame``.
        """
        super().__init__(parent, **kwargs)
        self._render_row = render_row
        self.on_select = on_select
        self.expand_categories = expand_categories

        self.tree = ttk.Treeview(self, columns=("detail",), show="tree headings", selectmode="browse")
        self.tree.heading("#0", text="Pet")
        self.tree.heading("detail", text="Age")
        self.tree.column("#0", width=260, stretch=True)
        self.tree.column("detail", width=120, anchor=tk.W, stretch=False)
        configure_row_tags(self.tree)

        vsb = ttk.Scrollbar(self, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=vsb.set)
        self.tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        vsb.pack(side=tk.RIGHT, fill=tk.Y)

        for section in sections:
            self.tree.insert("", tk.END, iid=section_iid(section), text=section.title, open=True, tags=(TAG_SECTION,))

        self.tree.bind("<<TreeviewSelect>>", self._on_select_changed)
        self.tree.bind("<Double-Button-1>", self._on_activate)
        self.tree.bind("<Return>", self._on_activate)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def apply_patch(self, patch: ListPatch) -> None:
        """Apply one section patch; rows not named in it are left untouched."""
        for item in patch.deleted:
            if self.tree.exists(item.key):
                self.tree.delete(item.key)

        for placement in patch.placements():
            self._place(patch.section, placement)

        for item in patch.reloaded:
            if self.tree.exists(item.key):
                self._render(patch.section, item)

    def deselect(self, iid: Optional[str] = None) -> None:
        for selected in self.tree.selection():
            if iid is None or selected == iid:
                self.tree.selection_remove(selected)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _place(self, section: Section, placement: RowPlacement) -> None:
        iid = placement.item.key
        parent_iid = placement.parent.key if placement.parent is not None else section_iid(section)
        after_iid = placement.after.key if placement.after is not None else None
        index = placement_index(self.tree, iid, parent_iid, after_iid)
        if self.tree.exists(iid):
            self.tree.move(iid, parent_iid, index)
        else:
            self.tree.insert(parent_iid, index, iid=iid, open=self.expand_categories)
        self._render(section, placement.item)

    def _render(self, section: Section, item: Item) -> None:
        row = self._render_row(section, item)
        self.tree.item(item.key, text=row.text, values=(row.secondary_text,), tags=row_tags(row))

    def _selected_row(self) -> Optional[str]:
        selection = self.tree.selection()
        if not selection or selection[0].startswith(SECTION_PREFIX):
            return None
        return selection[0]

    def _on_select_changed(self, _event=None) -> None:
        """Toggle category headers; section nodes are not selectable."""
        selection = self.tree.selection()
        if selection and selection[0].startswith(SECTION_PREFIX):
            self.tree.selection_remove(selection[0])
            return
        iid = self._selected_row()
        if iid is not None and TAG_HEADER in self.tree.item(iid, "tags"):
            self.tree.item(iid, open=not self.tree.item(iid, "open"))

    def _on_activate(self, _event=None) -> None:
        """Double-click/Enter on a row forwards its id to ``on_select``."""
        iid = self._selected_row()
        if iid is not None:
            safe_call(self.on_select, iid)


__all__ = ["ExplorerView", "placement_index", "row_tags", "section_iid"]

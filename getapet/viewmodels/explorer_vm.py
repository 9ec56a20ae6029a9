"""Explorer screen view-model: list lifecycle, selection, and adoption.

Call context:
    ``getapet.app.main.App`` and ``getapet.web_ui.main`` build one instance per
    screen, call ``load`` once, route row selections to ``select`` and render
    rows through ``row_for``. Detail screens report back via
    ``on_pet_adopted``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Set

from getapet.domain.catalog import PetCatalog
from getapet.domain.entities import (
    HeaderItem,
    Item,
    Pet,
    PetItem,
    Section,
    header_for,
    item_for,
)
from .cell_format import RowDisplay, render_row
from .list_model import HierarchicalListModel, ListPatch
from .pet_detail_vm import PetDetailVM

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListLayout:
    """Declarative layout handed to whichever view renders the list."""

    title: str = "Pet Explorer"
    appearance: str = "grouped"
    collapsible_headers: bool = True


class ExplorerVM:
    """Owns the list model and the adoption set for one explorer screen."""

    SECTIONS = (Section.AVAILABLE, Section.ADOPTED)

    def __init__(
        self,
        catalog: PetCatalog,
        *,
        dedupe_adopted: bool = False,
        on_patch: Optional[Callable[[ListPatch], None]] = None,
        on_open_detail: Optional[Callable[[PetDetailVM], None]] = None,
        on_deselect: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.catalog = catalog
        self.dedupe_adopted = dedupe_adopted
        self.on_open_detail = on_open_detail
        self.on_deselect = on_deselect
        self.model = HierarchicalListModel(on_patch=on_patch)
        self.layout: Optional[ListLayout] = None
        self._adoptions: Set[Pet] = set()

    @property
    def on_patch(self) -> Optional[Callable[[ListPatch], None]]:
        return self.model.on_patch

    @on_patch.setter
    def on_patch(self, callback: Optional[Callable[[ListPatch], None]]) -> None:
        self.model.on_patch = callback

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Configure layout, create both sections, and build Available."""
        if self.layout is not None:
            raise RuntimeError("Explorer already loaded.")
        self.layout = self.configure_layout()
        self.model.initialize_sections(self.SECTIONS)
        groups = []
        for category in self.catalog.categories():
            header = header_for(category)
            groups.append((header, [item_for(pet) for pet in self.catalog.pets(category)]))
        self.model.build_available(groups)
        LOGGER.info(
            "Loaded %d categories with %d pets.",
            len(groups),
            sum(len(children) for _, children in groups),
        )

    def configure_layout(self) -> ListLayout:
        return ListLayout()

    @property
    def is_loaded(self) -> bool:
        return self.layout is not None

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, key: str) -> Optional[PetDetailVM]:
        """Handle a row selection by row id."""
        return self._select_item(self.model.item_for_key(key), key)

    def select_at(self, section: Section, row: int) -> Optional[PetDetailVM]:
        """Handle a row selection by section and flattened row index."""
        return self._select_item(self.model.item_at(section, row), f"{section.value}:{row}")

    def _select_item(self, item: Optional[Item], ref: str) -> Optional[PetDetailVM]:
        if item is None:
            LOGGER.debug("Selection %s no longer maps to a row; deselecting.", ref)
            if self.on_deselect:
                self.on_deselect(ref)
            return None
        if isinstance(item, HeaderItem):
            return None
        return self.open_detail(item.pet)

    def open_detail(self, pet: Pet) -> PetDetailVM:
        detail = PetDetailVM(
            pet,
            is_adopted=self.is_adopted(pet),
            on_adopted=self.on_pet_adopted,
        )
        if self.on_open_detail:
            self.on_open_detail(detail)
        return detail

    # ------------------------------------------------------------------
    # Adoption
    # ------------------------------------------------------------------
    def on_pet_adopted(self, pet: Pet) -> Optional[PetItem]:
        """Record an adoption reported by a detail screen.

        Returns the new Adopted row, or ``None`` when ``dedupe_adopted`` is on
        and the pet already has one.
        """
        self._adoptions.add(pet)
        new_item: Optional[PetItem] = None
        if self.dedupe_adopted and self.model.first_pet_item(pet, Section.ADOPTED) is not None:
            LOGGER.debug("%s already listed as adopted; not appending.", pet.name)
        else:
            new_item = item_for(pet)
            self.model.append_to_adopted(new_item)

        available = self.model.first_pet_item(pet, Section.AVAILABLE)
        if available is not None:
            self.model.reload_item(available)
        else:
            LOGGER.debug("%s has no Available row to refresh.", pet.name)
        LOGGER.info("Adopted %s (%s).", pet.name, pet.category.display_name)
        return new_item

    def is_adopted(self, pet: Pet) -> bool:
        return pet in self._adoptions

    @property
    def adoptions(self) -> FrozenSet[Pet]:
        return frozenset(self._adoptions)

    def adopted_pets(self) -> List[Pet]:
        """Pets in Adopted-section order (repeats kept)."""
        return [item.pet for item in self.model.items_in(Section.ADOPTED) if isinstance(item, PetItem)]

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    @property
    def title(self) -> str:
        return (self.layout or ListLayout()).title

    def row_for(self, section: Section, item: Item) -> RowDisplay:
        return render_row(section, item, self._adoptions)


__all__ = ["ExplorerVM", "ListLayout"]

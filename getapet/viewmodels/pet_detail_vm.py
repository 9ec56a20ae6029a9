from __future__ import annotations

import logging
from typing import Callable, Optional

from getapet.domain.entities import Pet
from .cell_format import age_label

LOGGER = logging.getLogger(__name__)


class PetDetailVM:
    """State behind one visit to the pet detail screen.

    The explorer registers ``on_adopted`` when it opens the screen; the
    callback fires at most once per instance, and only when the user adopts a
    pet that was not adopted when the screen opened.
    """

    def __init__(
        self,
        pet: Pet,
        *,
        is_adopted: bool = False,
        on_adopted: Optional[Callable[[Pet], None]] = None,
    ) -> None:
        self.pet = pet
        self.is_adopted = bool(is_adopted)
        self.on_adopted = on_adopted
        self._reported = False

    @property
    def title(self) -> str:
        return self.pet.name

    @property
    def subtitle(self) -> str:
        return age_label(self.pet.age)

    @property
    def image_name(self) -> str:
        return self.pet.image_name

    @property
    def category_label(self) -> str:
        return self.pet.category.display_name

    @property
    def can_adopt(self) -> bool:
        return not self.is_adopted

    @property
    def status_text(self) -> str:
        if self.is_adopted:
            return f"{self.pet.name} has found a home."
        return f"{self.pet.name} is waiting for adoption."

    def cmd_adopt(self) -> bool:
        """Adopt the pet. Returns ``True`` when the callback fired."""
        if not self.can_adopt or self._reported:
            return False
        self.is_adopted = True
        self._reported = True
        LOGGER.debug("Detail screen adopted %s", self.pet.name)
        if self.on_adopted:
            self.on_adopted(self.pet)
        return True


__all__ = ["PetDetailVM"]

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from ..errors import FormValidationError
from ..models import Pokeymon, PokeymonType, utcnow
from ..settings import StatSettings

logger = logging.getLogger(__name__)

EMPTY_NAME_MESSAGE = "Please enter a name for your Pokeymon"


class PokeymonForm:
    """Add/edit form state for a single Pokeymon.

    The form never mutates ``existing``; :meth:`submit` returns a new value
    that the caller persists and re-renders.
    """

    SECTION_TITLES = ["Basic Info", "Type", "Stats", "Date Captured"]

    def __init__(self, existing: Optional[Pokeymon] = None, stats: Optional[StatSettings] = None) -> None:
        self.existing = existing
        self.stats = stats or StatSettings()
        self.name = ""
        self.type_index = 0
        self.attack = self.stats.min
        self.defense = self.stats.min
        self.date_captured: datetime = utcnow()
        if existing is not None:
            self.name = existing.name
            self.type_index = PokeymonType.index_of(existing.type)
            self.attack = existing.attack
            self.defense = existing.defense
            self.date_captured = existing.date_captured

    @property
    def is_editing(self) -> bool:
        return self.existing is not None

    @property
    def title(self) -> str:
        return "Edit Pokeymon" if self.is_editing else "Add Pokeymon"

    @property
    def section_titles(self) -> List[str]:
        return list(self.SECTION_TITLES)

    @staticmethod
    def type_choices() -> List[str]:
        return [t.display for t in PokeymonType]

    @property
    def selected_type(self) -> PokeymonType:
        return PokeymonType.from_index(self.type_index)

    def select_type(self, kind: PokeymonType) -> None:
        self.type_index = PokeymonType.index_of(kind)

    def set_attack(self, value: int) -> int:
        self.attack = self.stats.clamp(value)
        return self.attack

    def set_defense(self, value: int) -> int:
        self.defense = self.stats.clamp(value)
        return self.defense

    def submit(self) -> Pokeymon:
        name = (self.name or "").strip()
        if not name:
            raise FormValidationError(EMPTY_NAME_MESSAGE)
        fields = dict(
            name=name,
            type=self.selected_type,
            attack=self.stats.clamp(self.attack),
            defense=self.stats.clamp(self.defense),
            date_captured=self.date_captured,
        )
        if self.existing is not None:
            logger.debug("Form produced edit for %s", self.existing.id)
            return self.existing.replace(**fields)
        return Pokeymon(**fields)

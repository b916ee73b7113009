from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..models import Pokeymon
from ..persistence import PokeymonStore, SaveResult
from ..settings import Settings
from .form_view import PokeymonForm
from .rows import ATTACK_ICON, DEFENSE_ICON

logger = logging.getLogger(__name__)

Section = Tuple[str, List[Tuple[str, str]]]


class DetailController:
    """Read-only detail view for one Pokeymon, with an edit entry point."""

    title = "Details"

    def __init__(
        self,
        pokeymon: Pokeymon,
        store: PokeymonStore,
        settings: Optional[Settings] = None,
        on_update: Optional[Callable[[Pokeymon], None]] = None,
    ) -> None:
        self.pokeymon = pokeymon
        self.store = store
        self.settings = settings or Settings()
        self.on_update = on_update

    def sections(self) -> List[Section]:
        p = self.pokeymon
        return [
            (
                "Information",
                [
                    ("Name", p.name),
                    ("Type", p.type.display),
                    ("Date Captured", self.settings.display.medium_date(p.date_captured)),
                ],
            ),
            (
                "Stats",
                [
                    (f"{ATTACK_ICON} Attack", str(p.attack)),
                    (f"{DEFENSE_ICON} Defence", str(p.defense)),
                ],
            ),
        ]

    def lines(self) -> List[str]:
        out: List[str] = [self.title]
        for header, rows in self.sections():
            out.append(f"[{header}]")
            out.extend(f"  {label}: {value}" for label, value in rows)
        return out

    def edit_form(self) -> PokeymonForm:
        return PokeymonForm(existing=self.pokeymon, stats=self.settings.stats)

    def apply(self, updated: Pokeymon) -> SaveResult:
        """Persist an edited value and make it the one shown."""
        if updated.id != self.pokeymon.id:
            raise ValueError("Edited Pokeymon must keep the original id")
        result = self.store.update(updated)
        if not result.ok:
            logger.warning("Edit of %s was not saved: %s", updated.id, result.error)
        self.pokeymon = updated
        if self.on_update:
            self.on_update(updated)
        return result

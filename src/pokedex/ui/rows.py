from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models import Pokeymon
from ..settings import Settings

ATTACK_ICON = "⚔️"
DEFENSE_ICON = "🛡️"
DATE_ICON = "📅"


@dataclass(frozen=True)
class PokeymonRow:
    """Display strings for one list row. UI-agnostic and safe to unit test."""

    name: str
    type_label: str
    attack_label: str
    defense_label: str
    date_label: str

    def text(self) -> str:
        return "  ".join(
            (self.name, self.type_label, self.attack_label, self.defense_label, self.date_label)
        )


def render_row(pokeymon: Pokeymon, settings: Optional[Settings] = None) -> PokeymonRow:
    settings = settings or Settings()
    return PokeymonRow(
        name=pokeymon.name,
        type_label=pokeymon.type.display,
        attack_label=f"{ATTACK_ICON} {pokeymon.attack}",
        defense_label=f"{DEFENSE_ICON} {pokeymon.defense}",
        date_label=f"{DATE_ICON} {settings.display.short_date(pokeymon.date_captured)}",
    )

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Union
from uuid import UUID, uuid4

# Numeric capture dates are seconds relative to this instant.
REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)

_EMOJI = {
    "fire": "🔥",
    "water": "💧",
    "earth": "🪨",
    "grass": "🌿",
    "electric": "⚡️",
    "ice": "❄️",
    "flying": "🪽",
    "psychic": "🔮",
}


class PokeymonType(Enum):
    """Elemental category of a Pokeymon.

    Declaration order is the order shown in selection controls, so
    ``from_index``/``index_of`` are stable across runs.
    """

    FIRE = "fire"
    WATER = "water"
    EARTH = "earth"
    GRASS = "grass"
    ELECTRIC = "electric"
    ICE = "ice"
    FLYING = "flying"
    PSYCHIC = "psychic"

    @property
    def emoji(self) -> str:
        return _EMOJI[self.value]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def display(self) -> str:
        return f"{self.emoji} {self.label}"

    @classmethod
    def from_index(cls, index: int) -> "PokeymonType":
        return list(cls)[index]

    @classmethod
    def index_of(cls, kind: "PokeymonType") -> int:
        return list(cls).index(kind)

    @classmethod
    def parse(cls, text: str) -> "PokeymonType":
        key = (text or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown Pokeymon type {text!r}; expected one of: {choices}") from None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def encode_date(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def decode_date(raw: Union[str, int, float]) -> datetime:
    """Parse a stored capture date.

    Accepts ISO-8601 strings and numbers of seconds since REFERENCE_DATE.
    Naive values are taken as UTC.
    """
    if isinstance(raw, bool):
        raise TypeError("dateCaptured must be a string or a number")
    if isinstance(raw, (int, float)):
        return REFERENCE_DATE + timedelta(seconds=raw)
    if not isinstance(raw, str):
        raise TypeError("dateCaptured must be a string or a number")
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _require_int(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer")
    return value


@dataclass(frozen=True)
class Pokeymon:
    """A single captured creature.

    Instances are values: editing produces a new instance through
    :meth:`replace`, which always keeps the original ``id``.
    """

    name: str
    type: PokeymonType
    attack: int = 0
    defense: int = 0
    date_captured: datetime = field(default_factory=utcnow)
    id: UUID = field(default_factory=uuid4)

    def replace(self, **changes: Any) -> "Pokeymon":
        if "id" in changes:
            raise TypeError("Pokeymon.id cannot be changed")
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id).upper(),
            "name": self.name,
            "type": self.type.value,
            "attack": self.attack,
            "defense": self.defense,
            "dateCaptured": encode_date(self.date_captured),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Pokeymon":
        if not isinstance(data, dict):
            raise TypeError("Pokeymon record must be a JSON object")
        name = data["name"]
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        return Pokeymon(
            id=UUID(str(data["id"])),
            name=name,
            type=PokeymonType(data["type"]),
            attack=_require_int(data, "attack"),
            defense=_require_int(data, "defense"),
            date_captured=decode_date(data["dateCaptured"]),
        )

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from pokedex.models import Pokeymon, PokeymonType  # noqa: E402
from pokedex.persistence import PokeymonStore  # noqa: E402


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "pokeymon.json"


@pytest.fixture()
def store(data_file: Path) -> PokeymonStore:
    return PokeymonStore(path=data_file)


@pytest.fixture()
def trio():
    captured = datetime(2025, 9, 10, 12, 0, tzinfo=timezone.utc)
    return [
        Pokeymon(name="Blazeon", type=PokeymonType.FIRE, attack=50, defense=30, date_captured=captured),
        Pokeymon(name="Drizzlet", type=PokeymonType.WATER, attack=20, defense=45, date_captured=captured),
        Pokeymon(name="Voltik", type=PokeymonType.ELECTRIC, attack=70, defense=10, date_captured=captured),
    ]

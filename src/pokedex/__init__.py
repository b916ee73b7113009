"""
Pokedex core package.

This package provides headless logic for recording captured Pokeymon:
- The Pokeymon record and its closed set of elemental types
- A whole-file JSON store kept in the per-user data directory
- List, detail and form controllers that any UI can render

UI layers (terminal, GUI, etc.) should import and compose these pieces.
"""
from .models import Pokeymon, PokeymonType
from .persistence import LoadResult, LoadStatus, PokeymonStore, SaveResult
from .errors import (
    PokedexError,
    StorageError,
    CorruptStoreError,
    FormValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "Pokeymon",
    "PokeymonType",
    "PokeymonStore",
    "LoadResult",
    "LoadStatus",
    "SaveResult",
    "PokedexError",
    "StorageError",
    "CorruptStoreError",
    "FormValidationError",
]

"""Persistence for the Pokeymon collection.

This package provides:
- Encoding/decoding of the collection to a flat JSON array
- A PokeymonStore that loads, replaces and saves the whole file
- The per-installation default data file location
"""

from ..errors import CorruptStoreError, StorageError
from .codec import decode_collection, encode_collection
from .paths import default_data_dir, default_data_file
from .store import LoadResult, LoadStatus, PokeymonStore, SaveResult

__all__ = [
    "PokeymonStore",
    "LoadResult",
    "LoadStatus",
    "SaveResult",
    "encode_collection",
    "decode_collection",
    "default_data_dir",
    "default_data_file",
    "StorageError",
    "CorruptStoreError",
]

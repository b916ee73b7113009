from __future__ import annotations

import json
from typing import Any, Iterable, List

from ..errors import CorruptStoreError
from ..models import Pokeymon


def encode_collection(records: Iterable[Pokeymon]) -> str:
    """Encode records to the pretty-printed JSON array stored on disk."""
    data = [r.to_dict() for r in records]
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def decode_collection(text: str) -> List[Pokeymon]:
    """Decode the JSON array stored on disk.

    Any malformed content (bad JSON, non-array root, bad record) raises
    CorruptStoreError; partial results are never returned.
    """
    try:
        data: Any = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise CorruptStoreError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise CorruptStoreError(f"Expected a JSON array, got {type(data).__name__}")

    records: List[Pokeymon] = []
    for position, item in enumerate(data):
        try:
            records.append(Pokeymon.from_dict(item))
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise CorruptStoreError(f"Invalid record at index {position}: {e!r}") from e
    return records

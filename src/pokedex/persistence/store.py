from __future__ import annotations

import logging
import os
import tempfile
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Union
from uuid import UUID

from ..errors import StorageError
from ..models import Pokeymon
from .codec import decode_collection, encode_collection
from .paths import default_data_file, ensure_dir

logger = logging.getLogger(__name__)

RecordRef = Union[Pokeymon, UUID, str]


class LoadStatus(Enum):
    OK = "ok"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass
class LoadResult:
    """Outcome of reading the collection file.

    ``records`` is always usable; ``status`` tells a fresh install
    (MISSING) apart from data that could not be read (CORRUPT).
    """

    status: LoadStatus
    records: List[Pokeymon] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def data_loss(self) -> bool:
        return self.status is LoadStatus.CORRUPT


@dataclass
class SaveResult:
    ok: bool
    changed: bool = True
    error: Optional[str] = None


class PokeymonStore:
    """Whole-file JSON store for the Pokeymon collection.

    Every mutating call re-reads the file, edits the list in memory and
    writes the full list back. Nothing is cached between calls. Failures are
    logged and reported through LoadResult/SaveResult, never raised.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else default_data_file()
        self.lock = threading.RLock()

    # Public API

    def load(self) -> LoadResult:
        with self.lock:
            if not self.path.exists():
                logger.debug("No collection file at %s; starting empty", self.path)
                return LoadResult(LoadStatus.MISSING)
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    text = f.read()
                records = decode_collection(text)
            except (OSError, UnicodeDecodeError, StorageError) as e:
                logger.error("Error loading Pokeymon from %s: %s", self.path, e)
                return LoadResult(LoadStatus.CORRUPT, error=str(e))
            return LoadResult(LoadStatus.OK, records=records)

    def load_all(self) -> List[Pokeymon]:
        return self.load().records

    def save_all(self, records: Iterable[Pokeymon]) -> SaveResult:
        with self.lock:
            try:
                text = encode_collection(records)
                self._atomic_write(text)
            except (OSError, TypeError, ValueError, AttributeError) as e:
                logger.exception("Error saving Pokeymon to %s", self.path)
                return SaveResult(ok=False, error=str(e))
            return SaveResult(ok=True)

    def add(self, record: Pokeymon) -> SaveResult:
        with self.lock:
            records = self.load_all()
            records.append(record)
            return self.save_all(records)

    def update(self, record: Pokeymon) -> SaveResult:
        with self.lock:
            records = self.load_all()
            for index, existing in enumerate(records):
                if existing.id == record.id:
                    records[index] = record
                    break
            else:
                logger.debug("update: no Pokeymon with id %s", record.id)
                result = self.save_all(records)
                result.changed = False
                return result
            return self.save_all(records)

    def delete(self, ref: RecordRef) -> SaveResult:
        try:
            target: Optional[UUID] = _as_uuid(ref)
        except ValueError:
            logger.debug("delete: %r is not a Pokeymon id", ref)
            target = None
        with self.lock:
            records = self.load_all()
            kept = [r for r in records if target is None or r.id != target]
            result = self.save_all(kept)
            result.changed = len(kept) != len(records)
            return result

    def delete_at(self, position: int) -> SaveResult:
        with self.lock:
            records = self.load_all()
            if not 0 <= position < len(records):
                logger.debug("delete_at: position %s out of range (count=%s)", position, len(records))
                return SaveResult(ok=True, changed=False)
            del records[position]
            return self.save_all(records)

    # Internal utilities

    def _atomic_write(self, text: str) -> None:
        """Replace the collection file with ``text``.

        Writes a temp file in the same directory and renames it over the
        target, so readers see either the old or the new file.
        """
        ensure_dir(self.path.parent)
        fd, tmp_name = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        finally:
            if os.path.exists(tmp_name):
                try:
                    os.remove(tmp_name)
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_name, exc_info=True)


def _as_uuid(ref: RecordRef) -> UUID:
    if isinstance(ref, Pokeymon):
        return ref.id
    if isinstance(ref, UUID):
        return ref
    return UUID(str(ref))

from __future__ import annotations

import logging
from typing import List, Optional

from ..models import Pokeymon
from ..persistence import LoadStatus, PokeymonStore, SaveResult
from ..settings import Settings
from .detail_view import DetailController
from .form_view import PokeymonForm
from .rows import PokeymonRow, render_row

logger = logging.getLogger(__name__)


class ListController:
    """Scrollable collection list.

    Holds an in-memory copy of the collection in file order. Every change is
    persisted through the store before the in-memory copy is updated.
    """

    title = "Pokeymon Collection"

    def __init__(self, store: PokeymonStore, settings: Optional[Settings] = None) -> None:
        self.store = store
        self.settings = settings or Settings()
        self.pokeymon: List[Pokeymon] = []
        self.status = LoadStatus.MISSING
        self.load_error: Optional[str] = None

    def reload(self) -> LoadStatus:
        result = self.store.load()
        self.pokeymon = list(result.records)
        self.status = result.status
        self.load_error = result.error
        if result.data_loss:
            logger.warning("Collection could not be read; showing an empty list")
        return self.status

    @property
    def data_loss(self) -> bool:
        return self.status is LoadStatus.CORRUPT

    @property
    def count(self) -> int:
        return len(self.pokeymon)

    def rows(self) -> List[PokeymonRow]:
        return [render_row(p, self.settings) for p in self.pokeymon]

    def new_form(self) -> PokeymonForm:
        return PokeymonForm(stats=self.settings.stats)

    def add(self, pokeymon: Pokeymon) -> SaveResult:
        result = self.store.add(pokeymon)
        if not result.ok:
            logger.warning("New Pokeymon %s was not saved: %s", pokeymon.name, result.error)
        self.pokeymon.append(pokeymon)
        return result

    def delete_at(self, index: int) -> SaveResult:
        self._check_index(index)
        result = self.store.delete_at(index)
        del self.pokeymon[index]
        return result

    def select(self, index: int) -> DetailController:
        self._check_index(index)
        return DetailController(
            self.pokeymon[index],
            self.store,
            self.settings,
            on_update=self._replace,
        )

    def _replace(self, updated: Pokeymon) -> None:
        for i, p in enumerate(self.pokeymon):
            if p.id == updated.id:
                self.pokeymon[i] = updated
                return

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.pokeymon):
            raise IndexError(f"No Pokeymon at position {index} (count={len(self.pokeymon)})")

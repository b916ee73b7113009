"""Headless presentation layer: list, detail and form controllers.

Toolkits (terminal, GUI, etc.) render what these controllers expose and
forward user actions to them.
"""

from .detail_view import DetailController
from .form_view import EMPTY_NAME_MESSAGE, PokeymonForm
from .list_view import ListController
from .rows import PokeymonRow, render_row

__all__ = [
    "DetailController",
    "ListController",
    "PokeymonForm",
    "PokeymonRow",
    "render_row",
    "EMPTY_NAME_MESSAGE",
]

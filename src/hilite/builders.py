"""Helpers for writing expected highlighted renderings by hand.

Each helper wraps a fragment in its class marker and a trailing reset::

    b = HiliteBuilder(ANSI_CATALOG)
    expected = b.keyword("SELECT ") + "* " + b.keyword("FROM ") + b.identifier("table")
"""

from __future__ import annotations

from hilite.catalog import MarkerCatalog
from hilite.types import RESET_CLASS, HighlightClass


def hilite(text: str, highlight_class: HighlightClass, catalog: MarkerCatalog) -> str:
    """Return ``text`` wrapped in the class marker and the reset marker."""
    return catalog.literal_for(highlight_class) + text + catalog.literal_for(RESET_CLASS)


class HiliteBuilder:
    __slots__ = ("catalog",)

    def __init__(self, catalog: MarkerCatalog) -> None:
        self.catalog = catalog

    def wrap(self, text: str, highlight_class: HighlightClass) -> str:
        return hilite(text, highlight_class, self.catalog)

    def plain(self, text: str) -> str:
        return text

    def keyword(self, text: str) -> str:
        return self.wrap(text, "keyword")

    def identifier(self, text: str) -> str:
        return self.wrap(text, "identifier")

    def alias(self, text: str) -> str:
        return self.wrap(text, "alias")

    def op(self, text: str) -> str:
        return self.wrap(text, "operator")

    def function(self, text: str) -> str:
        return self.wrap(text, "function")

    def substitution(self, text: str) -> str:
        return self.wrap(text, "substitution")

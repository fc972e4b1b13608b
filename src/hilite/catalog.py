"""Marker catalogs: the literal each highlight class is rendered with.

A catalog is plain data handed to the scanner and the comparator. Neither
of them knows any formatter's literals on its own, so the same checker
works for terminal escapes, readable test tags, or anything loaded from a
JSON file.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from hilite.io_utils import load_json
from hilite.types import HIGHLIGHT_CLASSES, RESET_CLASS, HighlightClass, MarkerEntry


@dataclass(frozen=True, slots=True)
class MarkerCatalog:
    """Ordered, immutable table of (highlight class, literal) entries.

    Invariants (enforced in __post_init__):
        - at least one entry, each class at most once
        - the reset class ``"none"`` is present
        - no literal is a prefix of another, so a scan at any position
          matches at most one entry
    """

    entries: tuple[MarkerEntry, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("catalog must contain at least one entry")
        seen: set[str] = set()
        for entry in self.entries:
            if entry.highlight_class in seen:
                raise ValueError(
                    f"duplicate catalog entry for class {entry.highlight_class!r}",
                )
            seen.add(entry.highlight_class)
        if RESET_CLASS not in seen:
            raise ValueError(f"catalog must define the {RESET_CLASS!r} reset marker")
        for i, a in enumerate(self.entries):
            for b in self.entries[i + 1:]:
                if a.literal.startswith(b.literal) or b.literal.startswith(a.literal):
                    raise ValueError(
                        f"literals for {a.highlight_class!r} ({a.literal!r}) and "
                        f"{b.highlight_class!r} ({b.literal!r}) overlap as prefixes",
                    )

    def __iter__(self) -> Iterator[MarkerEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def literal_for(self, highlight_class: HighlightClass) -> str:
        for entry in self.entries:
            if entry.highlight_class == highlight_class:
                return entry.literal
        raise KeyError(highlight_class)

    def classes(self) -> tuple[HighlightClass, ...]:
        return tuple(entry.highlight_class for entry in self.entries)

    def literals(self) -> tuple[str, ...]:
        return tuple(entry.literal for entry in self.entries)

    @property
    def none_literal(self) -> str:
        return self.literal_for(RESET_CLASS)


def make_catalog(pairs: Mapping[HighlightClass, str]) -> MarkerCatalog:
    """Build a catalog from a class -> literal mapping, keeping mapping order."""
    return MarkerCatalog(
        entries=tuple(MarkerEntry(cls, literal) for cls, literal in pairs.items()),
    )


# Terminal escapes emitted by the SQL formatter when highlighting is on.
ANSI_CATALOG = make_catalog(
    {
        "keyword": "\033[1m",
        "identifier": "\033[0;36m",
        "function": "\033[0;33m",
        "operator": "\033[1;33m",
        "alias": "\033[0;32m",
        "substitution": "\033[1;36m",
        "none": "\033[0m",
    },
)

TAG_CATALOG = make_catalog({cls: f"<{cls}>" for cls in HIGHLIGHT_CLASSES})

BUILTIN_CATALOGS: dict[str, MarkerCatalog] = {
    "ansi": ANSI_CATALOG,
    "tags": TAG_CATALOG,
}


def catalog_to_dict(catalog: MarkerCatalog) -> dict[str, object]:
    """Serialize a catalog to its JSON shape (ordered entry list)."""
    return {
        "entries": [
            {"class": entry.highlight_class, "literal": entry.literal}
            for entry in catalog
        ],
    }


def catalog_from_dict(payload: Mapping[str, Any]) -> MarkerCatalog:
    """Parse a catalog from either JSON shape.

    Accepted forms::

        {"entries": [{"class": "keyword", "literal": "..."}, ...]}
        {"keyword": "...", "none": "...", ...}
    """
    if "entries" in payload:
        raw_entries = payload["entries"]
        if not isinstance(raw_entries, list):
            raise ValueError("catalog 'entries' must be a list")
        entries: list[MarkerEntry] = []
        for idx, row in enumerate(cast(list[Any], raw_entries)):
            if not isinstance(row, dict):
                raise ValueError(f"catalog entry {idx} must be an object")
            item = cast(dict[str, Any], row)
            entries.append(_parse_entry(item.get("class"), item.get("literal"), idx))
        return MarkerCatalog(entries=tuple(entries))
    return MarkerCatalog(
        entries=tuple(
            _parse_entry(cls, literal, idx)
            for idx, (cls, literal) in enumerate(payload.items())
        ),
    )


def _parse_entry(cls: object, literal: object, idx: int) -> MarkerEntry:
    if not isinstance(cls, str):
        raise ValueError(f"catalog entry {idx}: class must be a string")
    if not isinstance(literal, str):
        raise ValueError(f"catalog entry {idx}: literal must be a string")
    if cls not in HIGHLIGHT_CLASSES:
        raise ValueError(f"catalog entry {idx}: unknown highlight class {cls!r}")
    return MarkerEntry(highlight_class=cast(HighlightClass, cls), literal=literal)


def load_catalog(path: Path) -> MarkerCatalog:
    """Load a catalog from a JSON file."""
    payload = load_json(path)
    if not isinstance(payload, dict):
        raise ValueError(f"Expected JSON object in {path}")
    try:
        return catalog_from_dict(cast(dict[str, Any], payload))
    except ValueError as exc:
        raise ValueError(f"Invalid catalog in {path}: {exc}") from exc


def resolve_catalog(name_or_path: str) -> MarkerCatalog:
    """Resolve a built-in catalog name (``ansi``, ``tags``) or a JSON path."""
    key = name_or_path.strip().lower()
    if key in BUILTIN_CATALOGS:
        return BUILTIN_CATALOGS[key]
    path = Path(name_or_path)
    if path.is_file():
        return load_catalog(path)
    known = ", ".join(sorted(BUILTIN_CATALOGS))
    raise ValueError(f"Unknown catalog {name_or_path!r} (expected one of: {known}, or a JSON file)")

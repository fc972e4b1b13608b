"""Marker scanning: consume marker runs and strip markers from text."""

from __future__ import annotations

from collections.abc import Iterator

from hilite.catalog import MarkerCatalog
from hilite.types import RESET_CLASS, HighlightClass, HighlightSpan, MarkerRun


def consume_markers(text: str, position: int, catalog: MarkerCatalog) -> MarkerRun:
    """Consume every marker literal sitting back-to-back at ``position``.

    After each match the catalog scan restarts from its first entry, so
    markers of different classes concatenated in any order are absorbed in
    one call. The class of the last literal matched wins.

    Returns the advanced position and the last class consumed, or a run with
    ``last_class=None`` if no marker starts at ``position``.
    """
    last_class: HighlightClass | None = None
    while True:
        for entry in catalog:
            if text.startswith(entry.literal, position):
                position += len(entry.literal)
                last_class = entry.highlight_class
                break
        else:
            return MarkerRun(position=position, last_class=last_class)


def strip_markers(text: str, catalog: MarkerCatalog) -> str:
    """Remove every catalog marker from ``text``, keeping content in order."""
    out: list[str] = []
    pos = 0
    end = len(text)
    while True:
        pos = consume_markers(text, pos, catalog).position
        if pos >= end:
            return "".join(out)
        out.append(text[pos])
        pos += 1


def iter_content(
    text: str,
    catalog: MarkerCatalog,
) -> Iterator[tuple[int, str, HighlightClass]]:
    """Yield ``(raw_offset, char, active_class)`` for each content character.

    The active class starts as the reset class and is replaced by the last
    marker of every run that precedes a character.
    """
    active: HighlightClass = RESET_CLASS
    pos = 0
    end = len(text)
    while True:
        run = consume_markers(text, pos, catalog)
        pos = run.position
        if run.last_class is not None:
            active = run.last_class
        if pos >= end:
            return
        yield pos, text[pos], active
        pos += 1


def highlight_spans(text: str, catalog: MarkerCatalog) -> list[HighlightSpan]:
    """Group content into maximal spans of one active class."""
    spans: list[HighlightSpan] = []
    buf: list[str] = []
    current: HighlightClass | None = None
    start = 0
    offset = 0
    for _, ch, active in iter_content(text, catalog):
        if current is not None and active != current:
            spans.append(HighlightSpan(current, "".join(buf), start, offset))
            buf = []
            start = offset
        current = active
        buf.append(ch)
        offset += 1
    if current is not None:
        spans.append(HighlightSpan(current, "".join(buf), start, offset))
    return spans

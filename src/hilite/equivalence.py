"""Highlight-aware equality of two marked texts.

Highlighted renderings cannot be compared character by character, because
two freedoms are allowed to the formatter:

1. Whitespace may carry any highlight class, or none.
2. A class may or may not be reset with the ``none`` marker before the next
   class marker, so ``<keyword>foo<none><operator>+`` and
   ``<keyword>foo<operator>+`` are the same rendering.

The comparison first checks that the visible content matches, then walks
both texts in lockstep and compares the active class of every
non-whitespace character.
"""

from __future__ import annotations

import logging

from hilite.catalog import MarkerCatalog
from hilite.scanner import consume_markers, strip_markers
from hilite.types import RESET_CLASS, ComparisonResult, HighlightClass, MarkerRun


log = logging.getLogger(__name__)

# C-locale isspace(); unicode spaces are content.
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _first_difference(left: str, right: str) -> int:
    for idx, (a, b) in enumerate(zip(left, right)):
        if a != b:
            return idx
    return min(len(left), len(right))


def are_equal_with_hilites_removed(left: str, right: str, catalog: MarkerCatalog) -> bool:
    """True when both texts carry the same content once markers are stripped."""
    return strip_markers(left, catalog) == strip_markers(right, catalog)


def compare_with_hilites(left: str, right: str, catalog: MarkerCatalog) -> ComparisonResult:
    """Compare two marked texts and report the first mismatch, if any."""
    left_plain = strip_markers(left, catalog)
    right_plain = strip_markers(right, catalog)
    if left_plain != right_plain:
        return ComparisonResult(
            equal=False,
            failure="normalization_mismatch",
            content_offset=_first_difference(left_plain, right_plain),
            left_content=left_plain,
            right_content=right_plain,
        )

    left_pos = 0
    right_pos = 0
    left_active: HighlightClass = RESET_CLASS
    right_active: HighlightClass = RESET_CLASS
    content_offset = 0

    while True:
        run = consume_markers(left, left_pos, catalog)
        left_pos = run.position
        if run.last_class is not None:
            left_active = run.last_class

        run = consume_markers(right, right_pos, catalog)
        right_pos = run.position
        if run.last_class is not None:
            right_active = run.last_class

        left_done = left_pos >= len(left)
        right_done = right_pos >= len(right)
        if left_done and right_done:
            return ComparisonResult(equal=True, left_content=left_plain, right_content=right_plain)

        # Normalized texts already matched, so either branch means the scan
        # itself disagrees with strip_markers.
        if left_done or right_done or left[left_pos] != right[right_pos]:
            log.error(
                "Structural inconsistency at content offset %d (left=%d, right=%d) "
                "after normalized texts matched",
                content_offset,
                left_pos,
                right_pos,
            )
            return ComparisonResult(
                equal=False,
                failure="structural_inconsistency",
                left_offset=left_pos,
                right_offset=right_pos,
                content_offset=content_offset,
                left_class=left_active,
                right_class=right_active,
                left_content=left_plain,
                right_content=right_plain,
            )

        if left[left_pos] not in _WHITESPACE and left_active != right_active:
            return ComparisonResult(
                equal=False,
                failure="highlight_mismatch",
                left_offset=left_pos,
                right_offset=right_pos,
                content_offset=content_offset,
                left_class=left_active,
                right_class=right_active,
                left_content=left_plain,
                right_content=right_plain,
            )

        left_pos += 1
        right_pos += 1
        content_offset += 1


def are_equal_with_hilites(left: str, right: str, catalog: MarkerCatalog) -> bool:
    """Boolean form of :func:`compare_with_hilites`."""
    return compare_with_hilites(left, right, catalog).equal


class HiliteComparator:
    """Comparison entry points bound to one marker catalog."""

    __slots__ = ("catalog",)

    def __init__(self, catalog: MarkerCatalog) -> None:
        self.catalog = catalog

    def consume(self, text: str, position: int = 0) -> MarkerRun:
        return consume_markers(text, position, self.catalog)

    def normalize(self, text: str) -> str:
        return strip_markers(text, self.catalog)

    def compare(self, left: str, right: str) -> ComparisonResult:
        return compare_with_hilites(left, right, self.catalog)

    def equivalent(self, left: str, right: str) -> bool:
        return compare_with_hilites(left, right, self.catalog).equal

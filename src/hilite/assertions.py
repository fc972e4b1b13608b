"""Assertion helper and failure messages for highlight comparisons."""

from __future__ import annotations

from hilite.catalog import MarkerCatalog
from hilite.equivalence import compare_with_hilites
from hilite.types import ComparisonResult


CONTEXT_CHARS = 20


def _window(content: str, offset: int, width: int = CONTEXT_CHARS) -> str:
    lo = max(0, offset - width)
    hi = min(len(content), offset + width)
    prefix = "..." if lo > 0 else ""
    suffix = "..." if hi < len(content) else ""
    return f"{prefix}{content[lo:hi]!r}{suffix}"


def describe_result(result: ComparisonResult) -> str:
    """Render a one-paragraph explanation of a comparison outcome."""
    if result.equal:
        return "texts are equal with highlighting"

    offset = result.content_offset or 0
    if result.failure == "normalization_mismatch":
        return (
            f"content differs at offset {offset}: "
            f"left {_window(result.left_content, offset)} vs "
            f"right {_window(result.right_content, offset)}"
        )

    char = result.left_content[offset] if offset < len(result.left_content) else ""
    where = (
        f"content offset {offset} ({char!r}, raw left={result.left_offset}, "
        f"right={result.right_offset})"
    )
    if result.failure == "highlight_mismatch":
        return (
            f"highlight differs at {where}: left is {result.left_class!r}, "
            f"right is {result.right_class!r}; context {_window(result.left_content, offset)}"
        )
    return (
        f"structural inconsistency at {where}: marker scan and normalization "
        f"disagree (are both texts using the same catalog?)"
    )


def assert_equal_with_hilites(
    expected: str,
    actual: str,
    catalog: MarkerCatalog,
) -> ComparisonResult:
    """Assert two marked texts are equal with highlighting.

    Raises AssertionError carrying :func:`describe_result` on mismatch and
    returns the comparison result otherwise.
    """
    result = compare_with_hilites(expected, actual, catalog)
    if not result.equal:
        raise AssertionError(describe_result(result))
    return result

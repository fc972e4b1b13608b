"""Core types for marker scanning and highlight comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


HighlightClass: TypeAlias = Literal[
    "keyword",
    "identifier",
    "alias",
    "operator",
    "function",
    "substitution",
    "none",
]
FailureKind: TypeAlias = Literal[
    "normalization_mismatch",
    "highlight_mismatch",
    "structural_inconsistency",
]

HIGHLIGHT_CLASSES: tuple[HighlightClass, ...] = (
    "keyword",
    "identifier",
    "alias",
    "operator",
    "function",
    "substitution",
    "none",
)
RESET_CLASS: HighlightClass = "none"

FAILURE_KINDS: tuple[FailureKind, ...] = (
    "normalization_mismatch",
    "highlight_mismatch",
    "structural_inconsistency",
)


@dataclass(frozen=True, slots=True)
class MarkerEntry:
    """One catalog row: a highlight class and the literal that opens it."""

    highlight_class: HighlightClass
    literal: str

    def __post_init__(self) -> None:
        if self.highlight_class not in HIGHLIGHT_CLASSES:
            raise ValueError(f"unknown highlight class {self.highlight_class!r}")
        if not self.literal:
            raise ValueError(
                f"literal for {self.highlight_class!r} cannot be empty",
            )


@dataclass(frozen=True, slots=True)
class MarkerRun:
    """Outcome of consuming a run of back-to-back markers.

    ``last_class`` is ``None`` when nothing was consumed. That is distinct
    from ``"none"``, which means a reset marker was the last one matched.
    """

    position: int
    last_class: HighlightClass | None = None

    @property
    def consumed(self) -> bool:
        return self.last_class is not None


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """Consecutive content characters sharing one active class.

    Offsets index into the normalized (marker-free) content.
    """

    highlight_class: HighlightClass
    content: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end - self.start != len(self.content):
            raise ValueError(
                f"span [{self.start}, {self.end}) does not match content length {len(self.content)}",
            )


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Outcome of a highlight-aware comparison.

    On failure the offsets point at the first offending content character:
    ``left_offset``/``right_offset`` are raw offsets into each marked text,
    ``content_offset`` indexes the normalized content. For a
    normalization mismatch only ``content_offset`` and the two content
    strings are meaningful.
    """

    equal: bool
    failure: FailureKind | None = None
    left_offset: int | None = None
    right_offset: int | None = None
    content_offset: int | None = None
    left_class: HighlightClass | None = None
    right_class: HighlightClass | None = None
    left_content: str = ""
    right_content: str = ""

    def __post_init__(self) -> None:
        if self.equal and self.failure is not None:
            raise ValueError("an equal result cannot carry a failure kind")
        if not self.equal and self.failure is None:
            raise ValueError("an unequal result must carry a failure kind")
        if self.failure is not None and self.failure not in FAILURE_KINDS:
            raise ValueError(f"unknown failure kind {self.failure!r}")

    def __bool__(self) -> bool:
        return self.equal


def comparison_result_to_dict(result: ComparisonResult) -> dict[str, object]:
    """Serialize a comparison result for JSON reports."""
    return {
        "equal": result.equal,
        "failure": result.failure,
        "left_offset": result.left_offset,
        "right_offset": result.right_offset,
        "content_offset": result.content_offset,
        "left_class": result.left_class,
        "right_class": result.right_class,
    }

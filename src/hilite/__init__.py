"""Highlight-aware comparison of marker-annotated text."""

from hilite.assertions import assert_equal_with_hilites, describe_result
from hilite.builders import HiliteBuilder, hilite
from hilite.catalog import (
    ANSI_CATALOG,
    TAG_CATALOG,
    MarkerCatalog,
    catalog_from_dict,
    catalog_to_dict,
    load_catalog,
    make_catalog,
    resolve_catalog,
)
from hilite.equivalence import (
    HiliteComparator,
    are_equal_with_hilites,
    are_equal_with_hilites_removed,
    compare_with_hilites,
)
from hilite.scanner import consume_markers, highlight_spans, iter_content, strip_markers
from hilite.types import (
    HIGHLIGHT_CLASSES,
    ComparisonResult,
    FailureKind,
    HighlightClass,
    HighlightSpan,
    MarkerEntry,
    MarkerRun,
)

__all__ = [
    "ANSI_CATALOG",
    "ComparisonResult",
    "FailureKind",
    "HIGHLIGHT_CLASSES",
    "HighlightClass",
    "HighlightSpan",
    "HiliteBuilder",
    "HiliteComparator",
    "MarkerCatalog",
    "MarkerEntry",
    "MarkerRun",
    "TAG_CATALOG",
    "are_equal_with_hilites",
    "are_equal_with_hilites_removed",
    "assert_equal_with_hilites",
    "catalog_from_dict",
    "catalog_to_dict",
    "compare_with_hilites",
    "consume_markers",
    "describe_result",
    "highlight_spans",
    "hilite",
    "iter_content",
    "load_catalog",
    "make_catalog",
    "resolve_catalog",
    "strip_markers",
]

#!/usr/bin/env python3
"""Compare two highlighted renderings and report the first mismatch.

Exit status: 0 when equal, 1 when they differ, 2 on bad input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hilite.assertions import describe_result  # noqa: E402
from hilite.catalog import MarkerCatalog, resolve_catalog  # noqa: E402
from hilite.equivalence import compare_with_hilites  # noqa: E402
from hilite.io_utils import dumps  # noqa: E402
from hilite.scanner import highlight_spans  # noqa: E402
from hilite.types import comparison_result_to_dict  # noqa: E402

log = logging.getLogger("compare_hilites")


def _read_operand(path: Path | None, text: str | None, name: str) -> str:
    if text is not None:
        return text
    if path is None:
        raise ValueError(f"--{name} or --{name}-text is required")
    if not path.exists():
        raise FileNotFoundError(f"Missing {name} file: {path}")
    return path.read_text(encoding="utf-8")


def _spans_payload(text: str, catalog: MarkerCatalog) -> list[dict[str, object]]:
    return [
        {
            "class": span.highlight_class,
            "content": span.content,
            "start": span.start,
            "end": span.end,
        }
        for span in highlight_spans(text, catalog)
    ]


def main() -> int:
    parser = argparse.ArgumentParser(description="Highlight-aware comparison of two marked texts")
    parser.add_argument("--left", type=Path, help="File with the expected rendering")
    parser.add_argument("--right", type=Path, help="File with the actual rendering")
    parser.add_argument("--left-text", help="Expected rendering given inline")
    parser.add_argument("--right-text", help="Actual rendering given inline")
    parser.add_argument(
        "--catalog",
        default="ansi",
        help="Marker catalog: 'ansi', 'tags', or a JSON catalog file",
    )
    parser.add_argument("--strip-trailing-newline", action="store_true")
    parser.add_argument("--spans", action="store_true", help="Include per-class spans in JSON output")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        catalog = resolve_catalog(args.catalog)
        left = _read_operand(args.left, args.left_text, "left")
        right = _read_operand(args.right, args.right_text, "right")
    except (ValueError, FileNotFoundError) as exc:
        log.error("%s", exc)
        return 2

    if args.strip_trailing_newline:
        left = left.removesuffix("\n")
        right = right.removesuffix("\n")

    log.debug("Comparing %d and %d chars with %d-entry catalog", len(left), len(right), len(catalog))
    result = compare_with_hilites(left, right, catalog)

    if args.json:
        payload: dict[str, object] = {
            "catalog": args.catalog,
            **comparison_result_to_dict(result),
            "message": describe_result(result),
        }
        if args.spans:
            payload["left_spans"] = _spans_payload(left, catalog)
            payload["right_spans"] = _spans_payload(right, catalog)
        print(dumps(payload).decode("utf-8"))
    else:
        print(describe_result(result))
    return 0 if result.equal else 1


if __name__ == "__main__":
    raise SystemExit(main())

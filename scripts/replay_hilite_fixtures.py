#!/usr/bin/env python3
"""Replay expected-vs-rendered highlight fixtures and gate on failures.

Each JSONL row carries an ``expected`` and an ``actual`` marked text. The
gate fails when any fixture's comparison outcome differs from its
``expect_equal`` flag, or when any fixture hits a structural inconsistency.
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

from hilite.catalog import resolve_catalog  # noqa: E402
from hilite.io_utils import dumps  # noqa: E402
from hilite.replay import run_replay  # noqa: E402

log = logging.getLogger("replay_hilite_fixtures")

DEFAULT_FIXTURES = ROOT / "data" / "fixtures" / "hilite_fixtures.jsonl"


def main() -> int:
    parser = argparse.ArgumentParser(description="Highlight fixture replay gate")
    parser.add_argument("--fixtures", type=Path, default=DEFAULT_FIXTURES)
    parser.add_argument(
        "--catalog",
        default="ansi",
        help="Marker catalog: 'ansi', 'tags', or a JSON catalog file",
    )
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--report-out", type=Path, default=None)
    parser.add_argument("--sidecar-out", type=Path, default=None, help="Per-fixture records as JSONL")
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
        report = run_replay(
            args.fixtures,
            catalog,
            catalog_name=args.catalog,
            limit=args.limit,
            report_out=args.report_out,
            sidecar_out=args.sidecar_out,
        )
    except (ValueError, FileNotFoundError) as exc:
        log.error("%s", exc)
        return 2

    structural = int(report["failure_counts"].get("structural_inconsistency", 0))
    gate_ok = report["failed"] == 0 and structural == 0
    report["gate_ok"] = gate_ok

    if args.json:
        print(dumps(report).decode("utf-8"))
    else:
        print(
            dumps(
                {
                    "processed": report["processed"],
                    "passed": report["passed"],
                    "failed": report["failed"],
                    "failure_counts": report["failure_counts"],
                    "gate_ok": gate_ok,
                },
            ).decode("utf-8"),
        )
    return 0 if gate_ok else 1


if __name__ == "__main__":
    raise SystemExit(main())

"""Replay expected-vs-rendered fixture pairs and summarize the outcome.

Fixture rows are JSON objects, one per line::

    {"fixture_id": "select-simple", "expected": "...", "actual": "...",
     "expect_equal": true, "category": "select"}

``expect_equal`` defaults to true. A fixture passes when the comparison
outcome matches it.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any

from hilite.assertions import describe_result
from hilite.catalog import MarkerCatalog
from hilite.equivalence import compare_with_hilites
from hilite.io_utils import load_jsonl_rows, save_json, save_jsonl
from hilite.types import comparison_result_to_dict


log = logging.getLogger(__name__)

MAX_FAILURE_SAMPLES = 25


def load_fixtures(path: Path) -> list[tuple[int, dict[str, Any]]]:
    """Load and validate fixture rows as ``(line_number, row)`` pairs."""
    rows = load_jsonl_rows(path)
    for line_no, row in rows:
        for key in ("expected", "actual"):
            if not isinstance(row.get(key), str):
                raise ValueError(f"Fixture at {path}:{line_no} needs a string {key!r}")
        if "expect_equal" in row and not isinstance(row["expect_equal"], bool):
            raise ValueError(f"Fixture at {path}:{line_no}: 'expect_equal' must be a boolean")
    return rows


def evaluate_fixture(row: dict[str, Any], catalog: MarkerCatalog, *, line: int = 0) -> dict[str, Any]:
    """Compare one fixture row and return its report record.

    Rows without a ``fixture_id`` are named after their 1-based line number.
    """
    raw_id = row.get("fixture_id")
    fixture_id = f"fixture_{line:06d}" if raw_id is None or raw_id == "" else str(raw_id)
    expect_equal = bool(row.get("expect_equal", True))
    result = compare_with_hilites(str(row["expected"]), str(row["actual"]), catalog)
    ok = result.equal == expect_equal
    record: dict[str, Any] = {
        "fixture_id": fixture_id,
        "line": line,
        "category": str(row.get("category") or ""),
        "expect_equal": expect_equal,
        "ok": ok,
        **comparison_result_to_dict(result),
    }
    if not result.equal:
        record["message"] = describe_result(result)
    log.debug("fixture %s: equal=%s ok=%s", fixture_id, result.equal, ok)
    return record


def run_replay(
    fixtures_path: Path,
    catalog: MarkerCatalog,
    *,
    catalog_name: str = "",
    limit: int | None = None,
    report_out: Path | None = None,
    sidecar_out: Path | None = None,
) -> dict[str, Any]:
    """Evaluate every fixture in ``fixtures_path`` and build a summary report.

    With ``sidecar_out`` every per-fixture record is also written as JSONL.
    """
    rows = load_fixtures(fixtures_path)
    if limit is not None and limit >= 0:
        rows = rows[:limit]

    records = [evaluate_fixture(row, catalog, line=line_no) for line_no, row in rows]
    failed = [r for r in records if not r["ok"]]
    failure_counts = Counter(str(r["failure"]) for r in records if r["failure"] is not None)
    structural = failure_counts.get("structural_inconsistency", 0)
    if structural:
        log.error("%d fixture(s) hit a structural inconsistency", structural)

    report: dict[str, Any] = {
        "fixtures_path": str(fixtures_path),
        "catalog": catalog_name,
        "processed": len(records),
        "passed": len(records) - len(failed),
        "failed": len(failed),
        "failure_counts": dict(sorted(failure_counts.items())),
        "failures": failed[:MAX_FAILURE_SAMPLES],
    }
    log.info(
        "Replayed %d fixture(s): %d passed, %d failed",
        report["processed"],
        report["passed"],
        report["failed"],
    )

    if sidecar_out is not None:
        save_jsonl(records, sidecar_out)
        report["sidecar_path"] = str(sidecar_out)
    if report_out is not None:
        save_json(report, report_out)
        report["report_out"] = str(report_out)
    return report

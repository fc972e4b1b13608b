"""I/O utilities for JSON and JSONL files.

orjson-backed reading and writing for catalogs, fixtures and reports.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def load_json(path: Path) -> Any:
    """Load JSON from a file."""
    if not path.exists():
        raise FileNotFoundError(f"Missing JSON file: {path}")
    try:
        return orjson.loads(path.read_bytes())
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(dumps(obj, pretty=pretty) + b"\n")


def dumps(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize with sorted keys, indented unless ``pretty`` is False."""
    opts = orjson.OPT_SORT_KEYS
    if pretty:
        opts |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=opts)


def load_jsonl_rows(path: Path) -> list[tuple[int, dict[str, Any]]]:
    """Load a JSON Lines file as ``(line_number, object)`` pairs.

    Line numbers are 1-based and count blank lines, which are skipped.
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing JSONL file: {path}")
    records: list[tuple[int, dict[str, Any]]] = []
    raw = path.read_bytes()
    for line_no, line in enumerate(raw.split(b"\n"), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            row = orjson.loads(line)
        except orjson.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON at {path}:{line_no}: {exc}") from exc
        if not isinstance(row, dict):
            raise ValueError(f"Expected JSON object at {path}:{line_no}")
        records.append((line_no, row))
    return records


def save_jsonl(records: list[dict[str, Any]], path: Path) -> None:
    """Save a list of dicts as a JSON Lines file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [orjson.dumps(r, option=orjson.OPT_SORT_KEYS) for r in records]
    path.write_bytes(b"\n".join(lines) + b"\n" if lines else b"")

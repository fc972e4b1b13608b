"""Tests for hilite.catalog."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

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
from hilite.types import HIGHLIGHT_CLASSES, MarkerEntry


class TestMarkerEntry:
    def test_rejects_empty_literal(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            MarkerEntry("keyword", "")

    def test_rejects_unknown_class(self) -> None:
        with pytest.raises(ValueError, match="unknown highlight class"):
            MarkerEntry("comment", "<comment>")  # type: ignore[arg-type]


class TestMarkerCatalog:
    def test_builtin_catalogs_cover_every_class(self) -> None:
        for catalog in (ANSI_CATALOG, TAG_CATALOG):
            assert set(catalog.classes()) == set(HIGHLIGHT_CLASSES)
            assert len(catalog) == len(HIGHLIGHT_CLASSES)

    def test_ansi_literals(self) -> None:
        assert ANSI_CATALOG.literal_for("keyword") == "\033[1m"
        assert ANSI_CATALOG.none_literal == "\033[0m"

    def test_tag_literals(self) -> None:
        assert TAG_CATALOG.literal_for("operator") == "<operator>"
        assert TAG_CATALOG.none_literal == "<none>"

    def test_literal_for_missing_class(self) -> None:
        catalog = make_catalog({"keyword": "<k>", "none": "<n>"})
        with pytest.raises(KeyError):
            catalog.literal_for("alias")

    def test_empty_catalog_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one entry"):
            MarkerCatalog(entries=())

    def test_reset_marker_required(self) -> None:
        with pytest.raises(ValueError, match="reset marker"):
            make_catalog({"keyword": "<k>"})

    def test_duplicate_class_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate"):
            MarkerCatalog(
                entries=(
                    MarkerEntry("keyword", "<k>"),
                    MarkerEntry("keyword", "<kw>"),
                    MarkerEntry("none", "<n>"),
                ),
            )

    def test_prefix_literals_rejected(self) -> None:
        with pytest.raises(ValueError, match="overlap as prefixes"):
            make_catalog({"keyword": "\033[1", "operator": "\033[1;33m", "none": "\033[0m"})

    def test_identical_literals_rejected(self) -> None:
        with pytest.raises(ValueError, match="overlap as prefixes"):
            make_catalog({"keyword": "*", "none": "*"})

    def test_order_is_preserved(self) -> None:
        assert ANSI_CATALOG.classes()[:3] == ("keyword", "identifier", "function")
        assert ANSI_CATALOG.literals()[-1] == "\033[0m"


class TestCatalogSerialization:
    def test_dict_round_trip_keeps_order(self) -> None:
        payload = catalog_to_dict(ANSI_CATALOG)
        assert catalog_from_dict(payload) == ANSI_CATALOG

    def test_flat_mapping_form(self) -> None:
        catalog = catalog_from_dict({"keyword": "[K]", "none": "[/]"})
        assert catalog.classes() == ("keyword", "none")
        assert catalog.literal_for("keyword") == "[K]"

    def test_entries_must_be_list(self) -> None:
        with pytest.raises(ValueError, match="must be a list"):
            catalog_from_dict({"entries": {"keyword": "[K]"}})

    def test_load_catalog_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"entries": [
            {"class": "keyword", "literal": "{kw}"},
            {"class": "none", "literal": "{/}"},
        ]}))
        catalog = load_catalog(path)
        assert catalog.literals() == ("{kw}", "{/}")

    def test_load_catalog_reports_path_on_bad_catalog(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"keyword": "{kw}"}))
        with pytest.raises(ValueError, match="bad.json"):
            load_catalog(path)

    def test_null_literal_rejected(self) -> None:
        with pytest.raises(ValueError, match="catalog entry 0: literal must be a string"):
            catalog_from_dict({"keyword": None, "none": "<n>"})

    def test_numeric_literal_rejected(self) -> None:
        payload = {"entries": [
            {"class": "keyword", "literal": "<k>"},
            {"class": "none", "literal": 1},
        ]}
        with pytest.raises(ValueError, match="catalog entry 1: literal must be a string"):
            catalog_from_dict(payload)

    def test_non_string_class_rejected(self) -> None:
        with pytest.raises(ValueError, match="class must be a string"):
            catalog_from_dict({"entries": [{"class": 3, "literal": "<k>"}]})

    def test_unknown_class_in_flat_form(self) -> None:
        with pytest.raises(ValueError, match="unknown highlight class 'comment'"):
            catalog_from_dict({"comment": "#", "none": "<n>"})

    def test_load_catalog_with_null_literal(self, tmp_path: Path) -> None:
        path = tmp_path / "null.json"
        path.write_text(json.dumps({"keyword": None, "none": "<n>"}))
        with pytest.raises(ValueError, match="null.json"):
            load_catalog(path)

    def test_load_catalog_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.json")


class TestResolveCatalog:
    def test_builtin_names(self) -> None:
        assert resolve_catalog("ansi") is ANSI_CATALOG
        assert resolve_catalog(" TAGS ") is TAG_CATALOG

    def test_path(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"function": "@f", "none": "@0"}))
        assert resolve_catalog(str(path)).literal_for("function") == "@f"

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown catalog"):
            resolve_catalog("solarized")

"""Tests for validator.schema_registry and validator.normalizer."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from data_model.errors import SchemaError
from guidecheck._config import DEFAULT_SCHEMA
from validator import SchemaRegistry, match_key


class TestMatchKey:
    def test_case_punctuation_emoji_insensitive(self) -> None:
        assert match_key("🚀 1. Quick-Start!") == "quick start"
        assert match_key("QUICK START") == "quick start"

    def test_inner_punctuation_becomes_space(self) -> None:
        assert match_key("I/O and Serialization") == "i o and serialization"

    def test_only_decoration(self) -> None:
        assert match_key("✨ --- ✨") == ""


class TestLoad:
    def test_from_names(self) -> None:
        reg = SchemaRegistry.from_names(["Quick Start", "Phase 0", "Debugging"])
        assert [(e.name, e.rank) for e in reg.entries] == [
            ("Quick Start", 1),
            ("Phase 0", 2),
            ("Debugging", 3),
        ]
        assert all(e.required for e in reg.entries)
        assert reg.primary_level is None
        assert len(reg) == 3

    def test_from_file(self, schema_file: Path) -> None:
        reg = SchemaRegistry.from_file(schema_file)
        assert reg.schema.name == "mini"
        assert reg.source == str(schema_file)
        assert reg.entries[0].aliases == frozenset({"Getting Started"})

    def test_explicit_ranks_reorder(self) -> None:
        reg = SchemaRegistry.from_dict({
            "sections": [
                {"name": "B", "rank": 2},
                {"name": "A", "rank": 1},
            ],
        })
        assert [e.name for e in reg.entries] == ["A", "B"]

    def test_primary_level_and_optional(self) -> None:
        reg = SchemaRegistry.from_dict({
            "primary_level": 2,
            "sections": ["A", {"name": "B", "required": False}],
        })
        assert reg.primary_level == 2
        assert reg.entries[1].required is False

    def test_default_schema_is_valid(self) -> None:
        reg = SchemaRegistry.from_file(DEFAULT_SCHEMA)
        assert len(reg) == 22
        assert [e.rank for e in reg.entries] == list(range(1, 23))


class TestValidation:
    def test_empty_list(self) -> None:
        with pytest.raises(SchemaError):
            SchemaRegistry.from_dict([])

    def test_wrong_structure(self) -> None:
        with pytest.raises(SchemaError) as exc:
            SchemaRegistry.from_dict({"sections": [{"aliases": ["x"]}]})
        assert any("name" in p for p in exc.value.problems)

    def test_unknown_key(self) -> None:
        with pytest.raises(SchemaError):
            SchemaRegistry.from_dict({"sections": ["A"], "colour": "red"})

    def test_empty_name(self) -> None:
        with pytest.raises(SchemaError) as exc:
            SchemaRegistry.from_names(["A", "  ", "C"])
        assert any("pusta nazwa" in p for p in exc.value.problems)

    def test_duplicate_name_after_normalization(self) -> None:
        with pytest.raises(SchemaError) as exc:
            SchemaRegistry.from_names(["Quick Start", "quick-start!"])
        assert any("zduplikowana" in p for p in exc.value.problems)

    def test_ranks_not_contiguous(self) -> None:
        with pytest.raises(SchemaError):
            SchemaRegistry.from_dict({"sections": [
                {"name": "A", "rank": 1},
                {"name": "B", "rank": 3},
            ]})

    def test_ranks_duplicated(self) -> None:
        with pytest.raises(SchemaError):
            SchemaRegistry.from_dict({"sections": [
                {"name": "A", "rank": 1},
                {"name": "B", "rank": 1},
            ]})

    def test_alias_collision(self) -> None:
        with pytest.raises(SchemaError) as exc:
            SchemaRegistry.from_dict({"sections": [
                {"name": "Testing", "aliases": ["Checks"]},
                {"name": "Checks"},
            ]})
        assert any("koliduje" in p for p in exc.value.problems)

    def test_alias_equal_to_own_name_is_fine(self) -> None:
        reg = SchemaRegistry.from_dict({"sections": [
            {"name": "Testing", "aliases": ["testing!"]},
        ]})
        assert reg.lookup("Testing").name == "Testing"

    def test_invalid_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaError) as exc:
            SchemaRegistry.from_file(path)
        assert exc.value.source == str(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaError):
            SchemaRegistry.from_file(tmp_path / "missing.json")


class TestLookup:
    def test_by_name_and_alias(self, schema_file: Path) -> None:
        reg = SchemaRegistry.from_file(schema_file)
        assert reg.lookup("Quick Start").rank == 1
        assert reg.lookup("🏁 Getting started").rank == 1
        assert reg.lookup("**PHASE 0**").rank == 2
        assert reg.lookup("21. Debugging").rank == 3

    def test_no_match(self, schema_file: Path) -> None:
        reg = SchemaRegistry.from_file(schema_file)
        assert reg.lookup("Appendix") is None
        assert reg.lookup("🎉") is None

    def test_file_roundtrip_of_list_form(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps(["A", "B"]), encoding="utf-8")
        reg = SchemaRegistry.from_file(path)
        assert reg.schema.name == "list"
        assert reg.lookup("b").rank == 2

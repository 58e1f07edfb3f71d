"""End-to-end tests for the guidecheck CLI."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from guidecheck.cli import build_parser, main


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


class TestCheckCommand:
    def test_lines_format_and_exit_code(
        self, guides_dir: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = _run(["check", str(guides_dir), "--schema", str(schema_file), "--format", "lines"])
        assert code == 1
        out = capsys.readouterr().out.splitlines()
        python_md = str(guides_dir / "python.md")
        assert out == [
            f"{python_md}\tMISSING\tPhase 0\t2\t-\t-",
            "SUMMARY\tchecked=2\tpassed=1\twith_findings=1\terrors=0",
        ]

    def test_all_conformant(self, guides_dir: Path, schema_file: Path) -> None:
        code = _run(["check", str(guides_dir / "go.md"), "--schema", str(schema_file), "-f", "lines"])
        assert code == 0

    def test_json_format(
        self, guides_dir: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        _run(["check", str(guides_dir), "--schema", str(schema_file), "--format", "json", "-j", "2"])
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["checked"] == 2
        assert [Path(d["path"]).name for d in data["documents"]] == ["go.md", "python.md"]

    def test_table_format(
        self, guides_dir: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = _run(["check", str(guides_dir), "--schema", str(schema_file)])
        assert code == 1
        out = capsys.readouterr().out
        assert "MISSING" in out
        assert "Phase" in out
        assert "NIEZGODNY" in out

    def test_misordered_fatal_flag(self, tmp_path: Path, schema_file: Path) -> None:
        doc = tmp_path / "swapped.md"
        doc.write_text("# G\n## Phase 0\n## Quick Start\n## Debugging\n", encoding="utf-8")
        base = ["check", str(doc), "--schema", str(schema_file), "-f", "lines"]
        assert _run(base) == 0
        assert _run(base + ["--misordered-fatal"]) == 1

    def test_alias_heading_accepted(self, tmp_path: Path, schema_file: Path) -> None:
        doc = tmp_path / "alias.md"
        doc.write_text(
            "# G\n## 🚀 Getting Started\n## 0. Phase 0\n## Debugging 🐛\n", encoding="utf-8"
        )
        assert _run(["check", str(doc), "--schema", str(schema_file), "-f", "lines"]) == 0

    def test_missing_document_exit_2(
        self, guides_dir: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = str(guides_dir / "missing.md")
        code = _run(["check", str(guides_dir / "go.md"), missing, "--schema", str(schema_file), "-f", "lines"])
        assert code == 2
        out = capsys.readouterr().out
        assert f"{missing}\tREAD_ERROR" in out
        assert "SUMMARY\tchecked=2\tpassed=1" in out

    def test_invalid_schema_exit_2(
        self, guides_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps(["A", "a!"]), encoding="utf-8")
        code = _run(["check", str(guides_dir), "--schema", str(bad), "-f", "lines"])
        assert code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Niepoprawny schemat" in captured.err

    def test_schema_from_env(
        self, guides_dir: Path, schema_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GUIDECHECK_SCHEMA", str(schema_file))
        assert _run(["check", str(guides_dir / "go.md"), "-f", "lines"]) == 0

    def test_bad_workers_env(
        self, guides_dir: Path, schema_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GUIDECHECK_WORKERS", "many")
        assert _run(["check", str(guides_dir), "--schema", str(schema_file)]) == 2

    def test_empty_directory(self, tmp_path: Path, schema_file: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        assert _run(["check", str(empty), "--schema", str(schema_file)]) == 2

    def test_default_schema_against_canonical_guide(self, tmp_path: Path) -> None:
        from validator import SchemaRegistry
        from guidecheck._config import DEFAULT_SCHEMA

        names = [e.name for e in SchemaRegistry.from_file(DEFAULT_SCHEMA).entries]
        doc = tmp_path / "rust.md"
        doc.write_text(
            "# Rust Guide\n\n" + "\n".join(f"## {i}. {n}\n\ntext\n" for i, n in enumerate(names, 1)),
            encoding="utf-8",
        )
        assert _run(["check", str(doc), "-f", "lines"]) == 0


class TestOutlineCommand:
    def test_json_output(self, guides_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["outline", str(guides_dir / "go.md"), "--json-output"])
        data = json.loads(capsys.readouterr().out)
        assert [s["title"] for s in data["sections"]] == ["Go", "Quick Start", "Phase 0", "Debugging"]
        assert data["warnings"] == []

    def test_level_filter_and_match(
        self, guides_dir: Path, schema_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["outline", str(guides_dir / "go.md"), "--level", "2", "--schema", str(schema_file)])
        out = capsys.readouterr().out
        assert "1. Quick Start" in out
        assert "3. Debugging" in out

    def test_missing_file(self, tmp_path: Path) -> None:
        assert _run(["outline", str(tmp_path / "nope.md")]) == 2

    def test_help_explains_byte_offsets(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run(["outline", "--help"]) == 0
        assert "po normalizacji" in capsys.readouterr().out


class TestSchemaCommand:
    def test_lists_entries(self, schema_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["schema", "--schema", str(schema_file)])
        out = capsys.readouterr().out
        assert "mini" in out
        assert "Getting Started" in out
        assert "Debugging" in out

    def test_invalid(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"sections": []}', encoding="utf-8")
        assert _run(["schema", "--schema", str(bad)]) == 2


class TestParser:
    def test_requires_command(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_format_choices(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["check", "x", "--format", "xml"])

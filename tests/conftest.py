"""Wspólne fixtury testów guidecheck."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from validator import SchemaRegistry

THREE_SECTIONS = ["Quick Start", "Phase 0", "Debugging"]


def guide_text(headings: list[str], level: int = 2, title: str | None = "Python Guide") -> str:
    """Buduje dokument Markdown z podanymi nagłówkami i krótką treścią pod każdym."""
    parts: list[str] = []
    if title is not None:
        parts.append(f"# {title}\n\nWstęp.\n")
    marker = "#" * level
    for h in headings:
        parts.append(f"{marker} {h}\n\nTreść sekcji {h}.\n")
    return "\n".join(parts)


@pytest.fixture
def three_registry() -> SchemaRegistry:
    return SchemaRegistry.from_names(THREE_SECTIONS)


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "schema.json"
    path.write_text(
        json.dumps({
            "name": "mini",
            "sections": [
                {"name": "Quick Start", "aliases": ["Getting Started"]},
                "Phase 0",
                "Debugging",
            ],
        }),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def guides_dir(tmp_path: Path) -> Path:
    root = tmp_path / "guides"
    root.mkdir()
    (root / "go.md").write_text(guide_text(THREE_SECTIONS, title="Go"), encoding="utf-8")
    (root / "python.md").write_text(
        guide_text(["Quick Start", "Debugging"], title="Python"), encoding="utf-8"
    )
    return root

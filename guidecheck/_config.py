"""Konfiguracja guidecheck — zmienne środowiskowe z wartościami domyślnymi."""

from __future__ import annotations

import os
import pathlib

ROOT           = pathlib.Path(__file__).resolve().parent.parent
DEFAULT_SCHEMA = ROOT / "templates-schemas" / "guide-sections.json"
DEFAULT_GLOB   = "*.md"
MAX_WORKERS    = 8


def schema_path() -> pathlib.Path:
    return pathlib.Path(os.getenv("GUIDECHECK_SCHEMA", str(DEFAULT_SCHEMA)))


def glob_pattern() -> str:
    return os.getenv("GUIDECHECK_GLOB", DEFAULT_GLOB)


def worker_count() -> int:
    """Liczba wątków puli; ValueError gdy GUIDECHECK_WORKERS nie jest liczbą."""
    raw = os.getenv("GUIDECHECK_WORKERS")
    if raw is None:
        return min(MAX_WORKERS, os.cpu_count() or 1)
    return int(raw)

"""
validator/schema_registry.py — rejestr kanonicznego schematu sekcji.

SchemaRegistry wczytuje definicję schematu (JSON), waliduje ją i buduje słownik:
  _by_key: match_key(nazwa lub alias) -> SchemaEntry

Format pliku (lista albo obiekt):
  ["Quick Start", {"name": "Phase 0", "aliases": ["Phase 0: Setup"]}, ...]
  {"name": "...", "primary_level": 2, "sections": [...]}

Walidacja:
  - struktura      — JSON Schema (Draft 2020-12, jsonschema)
  - nazwy          — niepuste i unikalne (po normalizacji)
  - rangi          — jawne lub z kolejności; unikalne i ciągłe od 1
  - aliasy         — niepuste, żaden nie wskazuje dwóch różnych wpisów
Każde naruszenie → SchemaError z listą wszystkich problemów.
"""

from __future__ import annotations

import json
import pathlib
from typing import Any, Iterable

import jsonschema

from data_model.errors import SchemaError
from data_model.schema import Schema, SchemaEntry
from .normalizer import match_key


# ---------------------------------------------------------------------------
# Schemat JSON pliku definicji
# ---------------------------------------------------------------------------

SCHEMA_FILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["sections"],
    "additionalProperties": False,
    "properties": {
        "name":          {"type": "string"},
        "description":   {"type": "string"},
        "primary_level": {"type": "integer", "minimum": 1, "maximum": 6},
        "sections": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": ["string", "object"],
                "if": {"type": "object"},
                "then": {
                    "required": ["name"],
                    "additionalProperties": False,
                    "properties": {
                        "name":     {"type": "string"},
                        "rank":     {"type": "integer"},
                        "required": {"type": "boolean"},
                        "aliases":  {"type": "array", "items": {"type": "string"}},
                    },
                },
            },
        },
    },
}

_VALIDATOR = jsonschema.Draft202012Validator(SCHEMA_FILE_SCHEMA)


# ---------------------------------------------------------------------------
# SchemaRegistry
# ---------------------------------------------------------------------------

class SchemaRegistry:
    """
    Zwalidowany schemat sekcji z wyszukiwaniem po nazwie / aliasie.

    Po zbudowaniu tylko do odczytu — bezpieczny do współdzielenia przez wątki.

    Atrybuty publiczne:
      schema        — Schema (wpisy uporządkowane wg rangi)
      source        — skąd wczytano schemat (ścieżka lub "<dict>")
    """

    def __init__(self, data: Any, source: str = "<dict>") -> None:
        self.source = source
        if isinstance(data, list):
            data = {"sections": data}

        problems = _structure_problems(data)
        if problems:
            raise SchemaError(source, problems)

        entries, problems = _build_entries(data["sections"])
        if not problems:
            self._by_key, problems = _build_index(entries)
        if problems:
            raise SchemaError(source, problems)

        self.schema = Schema(
            name=data.get("name") or pathlib.Path(source).stem,
            entries=tuple(entries),
            primary_level=data.get("primary_level"),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def entries(self) -> tuple[SchemaEntry, ...]:
        return self.schema.entries

    @property
    def primary_level(self) -> int | None:
        return self.schema.primary_level

    def lookup(self, title: str) -> SchemaEntry | None:
        """Szuka wpisu po nazwie lub aliasie (bez wielkości liter, interpunkcji, emoji)."""
        key = match_key(title)
        if not key:
            return None
        return self._by_key.get(key)

    def __len__(self) -> int:
        return len(self.schema)

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "SchemaRegistry":
        """Ładuje schemat z pliku JSON."""
        source = str(path)
        try:
            text = pathlib.Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaError(source, [f"nie można odczytać pliku: {e.strerror or e}"]) from e
        except UnicodeDecodeError as e:
            raise SchemaError(source, [f"plik nie jest tekstem UTF-8: {e.reason}"]) from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SchemaError(source, [f"błąd parsowania JSON: {e}"]) from e
        return cls(data, source=source)

    @classmethod
    def from_dict(cls, data: dict | list) -> "SchemaRegistry":
        """Buduje rejestr z już wczytanej struktury."""
        return cls(data)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "SchemaRegistry":
        """Schemat z samych nazw (bez aliasów), rangi wg kolejności."""
        return cls(list(names))


# ---------------------------------------------------------------------------
# Walidacja i budowa wpisów
# ---------------------------------------------------------------------------

def _structure_problems(data: Any) -> list[str]:
    problems: list[str] = []
    for e in sorted(_VALIDATOR.iter_errors(data), key=lambda e: tuple(str(p) for p in e.absolute_path)):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        problems.append(f"{path}: {e.message}")
    return problems


def _build_entries(raw_sections: list) -> tuple[list[SchemaEntry], list[str]]:
    problems: list[str] = []
    staged: list[SchemaEntry] = []

    for i, item in enumerate(raw_sections):
        if isinstance(item, str):
            item = {"name": item}

        name = item["name"].strip()
        if not match_key(name):
            problems.append(f"/sections/{i}: pusta nazwa sekcji")
            continue

        staged.append(SchemaEntry(
            name=name,
            rank=item.get("rank", i + 1),
            aliases=frozenset(a.strip() for a in item.get("aliases", [])),
            required=item.get("required", True),
        ))

    ranks = sorted(entry.rank for entry in staged)
    if not problems and ranks != list(range(1, len(raw_sections) + 1)):
        problems.append(
            f"rangi muszą być unikalne i ciągłe od 1 do {len(raw_sections)}, "
            f"otrzymano: {ranks}"
        )

    entries = sorted(staged, key=lambda e: e.rank)
    return entries, problems


def _build_index(entries: list[SchemaEntry]) -> tuple[dict[str, SchemaEntry], list[str]]:
    problems: list[str] = []
    by_key: dict[str, SchemaEntry] = {}

    # Najpierw nazwy — konflikt nazwa/nazwa to duplikat sekcji.
    for entry in entries:
        key = match_key(entry.name)
        other = by_key.get(key)
        if other is not None:
            problems.append(
                f"zduplikowana nazwa sekcji: '{entry.name}' (ranga {entry.rank}) "
                f"i '{other.name}' (ranga {other.rank})"
            )
            continue
        by_key[key] = entry

    for entry in entries:
        for alias in sorted(entry.aliases):
            key = match_key(alias)
            if not key:
                problems.append(f"pusty alias w sekcji '{entry.name}'")
                continue
            other = by_key.get(key)
            if other is None:
                by_key[key] = entry
            elif other is not entry:
                problems.append(
                    f"alias '{alias}' sekcji '{entry.name}' koliduje z sekcją '{other.name}'"
                )

    return by_key, problems

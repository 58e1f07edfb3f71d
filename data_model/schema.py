"""
data_model/schema.py — kanoniczny schemat sekcji przewodnika.

Schema to uporządkowana lista SchemaEntry; rangi są unikalne i ciągłe od 1.
Obiekty są tworzone wyłącznie przez SchemaRegistry (po walidacji) i nie są
modyfikowane w trakcie przebiegu.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SchemaEntry:
    """
    Wymagana sekcja przewodnika.

    - name:     nazwa kanoniczna, np. "Quick Start"
    - rank:     pozycja w schemacie, 1-based
    - aliases:  alternatywne nagłówki (porównywane bez wielkości liter,
                interpunkcji i emoji)
    - required: czy brak sekcji jest zgłaszany jako MISSING
    """

    name: str
    rank: int
    aliases: frozenset[str] = frozenset()
    required: bool = True


@dataclass(frozen=True, slots=True)
class Schema:
    name: str
    entries: tuple[SchemaEntry, ...]
    primary_level: int | None = None

    def __len__(self) -> int:
        return len(self.entries)

    def by_rank(self, rank: int) -> SchemaEntry:
        return self.entries[rank - 1]

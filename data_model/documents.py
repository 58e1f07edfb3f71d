"""
data_model/documents.py — model dokumentu-przewodnika i jego sekcji.

Document odpowiada jednemu plikowi przewodnika; Section to jeden nagłówek
wraz z zakresem treści (offsety bajtowe w znormalizowanym tekście UTF-8).
Po ekstrakcji outline'u dokument jest niezmienny.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias
from enum import StrEnum


class WarningCode(StrEnum):
    """Kody ostrzeżeń parsera (nie wpływają na kod wyjścia)."""

    LEVEL_SKIP     = "W_LEVEL_SKIP"
    UNCLOSED_FENCE = "W_UNCLOSED_FENCE"


@dataclass(frozen=True, slots=True)
class ParseWarning:
    code: WarningCode
    line: int            # 1-based
    message: str


@dataclass(frozen=True, slots=True)
class Section:
    """
    Pojedynczy nagłówek dokumentu.

    - title:       oryginalny tekst nagłówka (do raportów)
    - clean_title: tytuł bez emoji / interpunkcji / numeracji na brzegach
    - level:       liczba znaków '#' (1..6)
    - ordinal:     pozycja w dokumencie, 1-based, ściśle rosnąca
    - line:        numer linii nagłówka, 1-based
    - start, end:  offsety bajtowe treści [start, end) — od linii po nagłówku
                   do następnego nagłówka o poziomie <= level (lub końca)
    """

    title: str
    clean_title: str
    level: int
    ordinal: int
    line: int
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Document:
    path: str                  # ścieżka w postaci podanej przez użytkownika
    text: str                  # tekst po normalizacji końców linii
    sections: tuple[Section, ...] = ()
    warnings: tuple[ParseWarning, ...] = ()

    @property
    def name(self) -> str:
        return self.path.replace("\\", "/").rsplit("/", 1)[-1]

    def body(self, section: Section) -> str:
        """Zwraca treść sekcji (bez linii nagłówka)."""
        raw = self.text.encode("utf-8")
        return raw[section.start:section.end].decode("utf-8")

    def levels(self) -> list[int]:
        """Poziomy nagłówków występujące w dokumencie (rosnąco, bez powtórzeń)."""
        return sorted({s.level for s in self.sections})


# Outline dokumentu w kolejności występowania.
Outline: TypeAlias = list[Section]

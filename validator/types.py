"""
validator/types.py — rodzaje niezgodności i struktura raportu zgodności.

Finding — pojedyncza niezgodność outline'u dokumentu ze schematem
    (MISSING / EXTRA / MISORDERED / DUPLICATE).
ConformanceReport — wynik porównania jednego dokumentu: użyty poziom
    nagłówków, lista niezgodności, ostrzeżenia parsera.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from data_model.documents import ParseWarning, Section
from data_model.schema import SchemaEntry


class FindingKind(StrEnum):
    """Stałe kody niezgodności (w formacie maszynowym wypisywane dosłownie)."""

    MISSING    = "MISSING"
    EXTRA      = "EXTRA"
    MISORDERED = "MISORDERED"
    DUPLICATE  = "DUPLICATE"


@dataclass(frozen=True, slots=True)
class Finding:
    """
    Pojedyncza niezgodność.

    - kind:     rodzaj (FindingKind)
    - name:     nazwa kanoniczna sekcji; dla EXTRA oryginalny tytuł nagłówka
    - message:  czytelny opis
    - entry:    wpis schematu (brak dla EXTRA)
    - section:  nagłówek dokumentu (brak dla MISSING)
    - expected: oczekiwana ranga w schemacie (MISSING, MISORDERED, DUPLICATE)
    - actual:   faktyczna pozycja wśród dopasowanych sekcji (MISORDERED)
    """

    kind: FindingKind
    name: str
    message: str
    entry: SchemaEntry | None = None
    section: Section | None = None
    expected: int | None = None
    actual: int | None = None

    @property
    def line(self) -> int | None:
        return self.section.line if self.section is not None else None


@dataclass(frozen=True, slots=True)
class ConformanceReport:
    """
    Wynik porównania dokumentu ze schematem.

    - path:     ścieżka dokumentu
    - level:    poziom nagłówków poddany kontroli (None gdy brak nagłówków)
    - findings: niezgodności; najpierw w kolejności dokumentu, potem MISSING wg rangi
    - warnings: ostrzeżenia parsera (nie wpływają na wynik)
    - matched:  liczba sekcji dopasowanych do schematu (bez duplikatów)
    """

    path: str
    level: int | None
    findings: tuple[Finding, ...] = ()
    warnings: tuple[ParseWarning, ...] = ()
    matched: int = 0

    @property
    def is_conformant(self) -> bool:
        return not self.findings

    def of_kind(self, kind: FindingKind) -> list[Finding]:
        return [f for f in self.findings if f.kind == kind]

    def failing(self, misordered_fatal: bool = False) -> list[Finding]:
        """Niezgodności wpływające na kod wyjścia (MISORDERED tylko gdy fatal)."""
        return [
            f for f in self.findings
            if misordered_fatal or f.kind != FindingKind.MISORDERED
        ]

"""
validator/conformance.py — porównanie outline'u dokumentu z kanonicznym schematem.

ConformanceChecker.check(document) -> ConformanceReport

Etapy:
  A — poziom       (jawny, z schematu lub automatyczny)
  B — dopasowanie  (tytuł → SchemaEntry; brak → EXTRA, powtórzenie → DUPLICATE)
  C — kolejność    (LCS rang dokumentu z 1..N; poza LCS → MISORDERED)
  D — kompletność  (wymagane wpisy bez dopasowania → MISSING)

LCS zamiast porównania pozycyjnego: jedno przesunięcie sekcji daje jedną
niezgodność, a nie kaskadę N fałszywych.
"""

from __future__ import annotations

from data_model.documents import Document, Section
from data_model.schema import SchemaEntry
from .schema_registry import SchemaRegistry
from .types import ConformanceReport, Finding, FindingKind


# ---------------------------------------------------------------------------
# LCS
# ---------------------------------------------------------------------------

def lcs_keep(seq: list[int], canonical: list[int]) -> list[bool]:
    """
    Zwraca maskę elementów `seq` należących do najdłuższego wspólnego
    podciągu z `canonical`.

    Przy remisie zachowywany jest wcześniejszy element `seq`
    (odrzucamy późniejszy) — wynik jest deterministyczny.
    """
    n, m = len(seq), len(canonical)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n):
        for j in range(m):
            if seq[i] == canonical[j]:
                dp[i + 1][j + 1] = dp[i][j] + 1
            else:
                dp[i + 1][j + 1] = max(dp[i][j + 1], dp[i + 1][j])

    keep = [False] * n
    i, j = n, m
    while i > 0 and j > 0:
        if seq[i - 1] == canonical[j - 1]:
            keep[i - 1] = True
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return keep


# ---------------------------------------------------------------------------
# ConformanceChecker
# ---------------------------------------------------------------------------

class ConformanceChecker:
    """
    Porównuje dokumenty z jednym, współdzielonym schematem.

    Użycie:
        registry = SchemaRegistry.from_file("templates-schemas/guide-sections.json")
        checker  = ConformanceChecker(registry)
        report   = checker.check(extract_outline(load_document("python.md")))
    """

    def __init__(self, registry: SchemaRegistry, level: int | None = None) -> None:
        self._registry = registry
        self._level    = level

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def check(self, document: Document) -> ConformanceReport:
        level = self.resolve_level(document)
        primary = [s for s in document.sections if s.level == level]

        located: list[Finding] = []
        matched: list[tuple[Section, SchemaEntry]] = []
        seen: set[int] = set()

        # B — dopasowanie
        for section in primary:
            entry = self._registry.lookup(section.title)
            if entry is None:
                located.append(_extra(section))
            elif entry.rank in seen:
                located.append(_duplicate(entry, section))
            else:
                seen.add(entry.rank)
                matched.append((section, entry))

        # C — kolejność
        ranks = [entry.rank for _, entry in matched]
        keep = lcs_keep(ranks, [e.rank for e in self._registry.entries])
        for position, ((section, entry), kept) in enumerate(zip(matched, keep), start=1):
            if not kept:
                located.append(_misordered(entry, section, position))

        located.sort(key=lambda f: f.section.ordinal)

        # D — kompletność
        missing = [
            _missing(entry)
            for entry in self._registry.entries
            if entry.required and entry.rank not in seen
        ]

        return ConformanceReport(
            path=document.path,
            level=level,
            findings=tuple(located + missing),
            warnings=document.warnings,
            matched=len(matched),
        )

    def resolve_level(self, document: Document) -> int | None:
        """
        Poziom nagłówków podlegający kontroli:
          1. jawny argument `level`
          2. primary_level ze schematu
          3. najpłytszy poziom z co najmniej jednym dopasowanym nagłówkiem
          4. najpłytszy poziom w dokumencie (None, gdy brak nagłówków)
        """
        if self._level is not None:
            return self._level
        if self._registry.primary_level is not None:
            return self._registry.primary_level

        levels = document.levels()
        for level in levels:
            if any(
                s.level == level and self._registry.lookup(s.title) is not None
                for s in document.sections
            ):
                return level
        return levels[0] if levels else None


# ---------------------------------------------------------------------------
# Konstruktory niezgodności
# ---------------------------------------------------------------------------

def _missing(entry: SchemaEntry) -> Finding:
    return Finding(
        kind=FindingKind.MISSING,
        name=entry.name,
        message=f"Brak wymaganej sekcji '{entry.name}' (pozycja {entry.rank} w schemacie).",
        entry=entry,
        expected=entry.rank,
    )


def _extra(section: Section) -> Finding:
    return Finding(
        kind=FindingKind.EXTRA,
        name=section.title,
        message=f"Sekcja '{section.title}' (linia {section.line}) nie występuje w schemacie.",
        section=section,
    )


def _duplicate(entry: SchemaEntry, section: Section) -> Finding:
    return Finding(
        kind=FindingKind.DUPLICATE,
        name=entry.name,
        message=(
            f"Sekcja '{entry.name}' powtórzona w linii {section.line} "
            f"(jako '{section.title}')."
        ),
        entry=entry,
        section=section,
        expected=entry.rank,
    )


def _misordered(entry: SchemaEntry, section: Section, position: int) -> Finding:
    return Finding(
        kind=FindingKind.MISORDERED,
        name=entry.name,
        message=(
            f"Sekcja '{entry.name}' na pozycji {position}, "
            f"oczekiwana pozycja w schemacie: {entry.rank}."
        ),
        entry=entry,
        section=section,
        expected=entry.rank,
        actual=position,
    )

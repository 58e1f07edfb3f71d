"""
md_parser/parser.py — ekstrakcja outline'u (nagłówków sekcji) z dokumentu Markdown.

Architektura:
  tekst → linie → (FENCE | HEADING | BODY) ze śledzeniem stanu bloku kodu
  → _scan_headings() → lista _RawHeading (poziom, tytuł, offsety bajtowe)
  → _build_sections() → lista Section (treść do następnego nagłówka o poziomie <= własnemu)

Kluczowe funkcje publiczne:
  parse_outline(text)         -> (Outline, list[ParseWarning])
  extract_outline(document)   -> Document (z dołączonymi sekcjami)
"""

from __future__ import annotations

import dataclasses
import re

from data_model.documents import Document, Outline, ParseWarning, Section, WarningCode
from md_parser.text_cleaner import clean_title

# ---------------------------------------------------------------------------
# Wzorce
# ---------------------------------------------------------------------------

# "## Tytuł" lub "## Tytuł ##" — 1..6 znaków '#', potem biały znak i tekst.
_HEADING_RE = re.compile(r"^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")

# Otwarcie / zamknięcie bloku kodu: ``` lub ~~~ (min. 3), dowolne wcięcie.
_FENCE_OPEN_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})(.*)$")
_FENCE_CLOSE_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})[ \t]*$")


# ---------------------------------------------------------------------------
# Typy wewnętrzne
# ---------------------------------------------------------------------------

class _RawHeading:
    __slots__ = ("level", "title", "line", "line_start", "body_start")

    def __init__(self, level: int, title: str, line: int, line_start: int, body_start: int) -> None:
        self.level = level
        self.title = title
        self.line = line              # 1-based
        self.line_start = line_start  # offset bajtowy początku linii nagłówka
        self.body_start = body_start  # offset bajtowy linii po nagłówku


class _Fence:
    __slots__ = ("char", "length", "line")

    def __init__(self, char: str, length: int, line: int) -> None:
        self.char = char
        self.length = length
        self.line = line

    def is_closed_by(self, marker: str) -> bool:
        return marker[0] == self.char and len(marker) >= self.length


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def extract_outline(document: Document) -> Document:
    """Zwraca kopię dokumentu z dołączonym outline'em i ostrzeżeniami parsera."""
    sections, warnings = parse_outline(document.text)
    return dataclasses.replace(
        document,
        sections=tuple(sections),
        warnings=tuple(warnings),
    )


def parse_outline(text: str) -> tuple[Outline, list[ParseWarning]]:
    """
    Parsuje tekst i zwraca (sekcje w kolejności dokumentu, ostrzeżenia).

    Dokument bez nagłówków daje pustą listę sekcji (to nie jest błąd).
    Linie wewnątrz bloków kodu nigdy nie są traktowane jako nagłówki.
    """
    headings, warnings, total = _scan_headings(text)
    warnings.extend(_level_skip_warnings(headings))
    warnings.sort(key=lambda w: w.line)
    return _build_sections(headings, total), warnings


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _scan_headings(text: str) -> tuple[list[_RawHeading], list[ParseWarning], int]:
    lines = text.split("\n")
    last = len(lines) - 1

    headings: list[_RawHeading] = []
    warnings: list[ParseWarning] = []
    fence: _Fence | None = None
    offset = 0

    for idx, line in enumerate(lines):
        line_no = idx + 1
        next_offset = offset + len(line.encode("utf-8")) + (1 if idx < last else 0)

        if fence is not None:
            m = _FENCE_CLOSE_RE.match(line)
            if m and fence.is_closed_by(m.group(1)):
                fence = None
        else:
            m = _FENCE_OPEN_RE.match(line)
            # Info string otwarcia ``` nie może zawierać backticków (inaczej to kod inline).
            if m and not (m.group(1)[0] == "`" and "`" in m.group(2)):
                marker = m.group(1)
                fence = _Fence(marker[0], len(marker), line_no)
            else:
                h = _HEADING_RE.match(line)
                if h:
                    headings.append(_RawHeading(
                        level=len(h.group(1)),
                        title=h.group(2).strip(),
                        line=line_no,
                        line_start=offset,
                        body_start=next_offset,
                    ))

        offset = next_offset

    if fence is not None:
        warnings.append(ParseWarning(
            code=WarningCode.UNCLOSED_FENCE,
            line=fence.line,
            message=(
                f"Blok kodu otwarty w linii {fence.line} nie został zamknięty — "
                f"reszta dokumentu pominięta przy wykrywaniu nagłówków."
            ),
        ))

    return headings, warnings, offset


def _level_skip_warnings(headings: list[_RawHeading]) -> list[ParseWarning]:
    """Ostrzeżenia dla przeskoków poziomu, np. '#' → '###' bez '##'."""
    warnings: list[ParseWarning] = []
    prev: int | None = None
    for h in headings:
        if prev is not None and h.level > prev + 1:
            warnings.append(ParseWarning(
                code=WarningCode.LEVEL_SKIP,
                line=h.line,
                message=(
                    f"Przeskok poziomu nagłówka z {prev} na {h.level}: '{h.title}'."
                ),
            ))
        prev = h.level
    return warnings


def _build_sections(headings: list[_RawHeading], total: int) -> Outline:
    sections: Outline = []
    for i, h in enumerate(headings):
        end = total
        for nxt in headings[i + 1:]:
            if nxt.level <= h.level:
                end = nxt.line_start
                break
        sections.append(Section(
            title=h.title,
            clean_title=clean_title(h.title),
            level=h.level,
            ordinal=i + 1,
            line=h.line,
            start=min(h.body_start, total),
            end=end,
        ))
    return sections

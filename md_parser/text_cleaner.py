"""
md_parser/text_cleaner.py — normalizacja tekstu dokumentu i tytułów nagłówków.

Co normalizujemy w tekście:
  - Końce linii CRLF / CR → LF
  - Twarde spacje (NBSP) → zwykła spacja
  - Białe znaki na końcu każdej linii

Co usuwamy z tytułu (clean_title):
  - Emoji, symbole i interpunkcję na początku i końcu ("🚀 Quick Start!" → "Quick Start")
  - Znaczniki wyróżnienia Markdown na brzegach ("**Debugging**" → "Debugging")
  - Numerację porządkową na początku ("3. Phase 0" → "Phase 0", "2.1) Setup" → "Setup")

Oryginalny tekst nagłówka nie jest zmieniany — Section.title go zachowuje.
"""

from __future__ import annotations

import re
import unicodedata

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

_NBSP = "\u00a0"

# Numeracja na początku tytułu: "1.", "2.3)", "12:" (z następującą spacją).
_ORDINAL_PREFIX_RE = re.compile(r"^\d+(?:\.\d+)*[.):]\s+")

# Nawiasy zamykające zostawiamy, jeśli tytuł zawiera ich otwarcie: "Phase 0 (Setup)".
_CLOSERS = {")": "(", "]": "[", "}": "{"}


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def normalize_text(text: str) -> str:
    """Ujednolica końce linii i usuwa białe znaki z końców linii."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace(_NBSP, " ")
    return "\n".join(line.rstrip() for line in text.split("\n"))


def is_decoration(ch: str) -> bool:
    """
    Czy znak jest "ozdobnikiem" (nie treścią) tytułu?

    Interpunkcja (P*), symbole i emoji (S*), separatory (Z*), znaki
    formatujące (Cf, np. ZWJ) oraz znaki łączące emoji (Mn, Me).
    """
    if ch.isspace():
        return True
    cat = unicodedata.category(ch)
    return cat[0] in "PSZ" or cat in ("Cf", "Mn", "Me")


def clean_title(raw: str) -> str:
    """Usuwa ozdobniki i numerację z brzegów tytułu nagłówka."""
    title = raw.strip()
    while True:
        before = title
        title = _strip_leading(title)
        title = _ORDINAL_PREFIX_RE.sub("", title)
        title = _strip_trailing(title)
        if title == before:
            return title


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _strip_leading(title: str) -> str:
    i = 0
    while i < len(title) and is_decoration(title[i]):
        i += 1
    return title[i:]


def _strip_trailing(title: str) -> str:
    end = len(title)
    while end > 0 and is_decoration(title[end - 1]):
        opener = _CLOSERS.get(title[end - 1])
        if opener is not None and opener in title[:end - 1]:
            break
        end -= 1
    return title[:end]

"""
validator/normalizer.py — klucz porównania tytułów sekcji.

match_key():
  - NFKC + casefold (bez wielkości liter, pełnej szerokości itp.)
  - Interpunkcja, symbole i emoji zastępowane spacją
  - Numeracja i ozdobniki na brzegach usuwane (clean_title)
  - Białe znaki zwinięte do pojedynczej spacji

"🚀 1. Quick-Start!" i "quick start" dają ten sam klucz: "quick start".
"""

from __future__ import annotations

import unicodedata

from md_parser.text_cleaner import clean_title, is_decoration


def match_key(title: str) -> str:
    """Zwraca klucz porównania tytułu (pusty string, gdy tytuł to same ozdobniki)."""
    text = unicodedata.normalize("NFKC", clean_title(title)).casefold()
    chars = [" " if is_decoration(ch) else ch for ch in text]
    return " ".join("".join(chars).split())

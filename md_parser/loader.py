"""
md_parser/loader.py — wczytywanie dokumentów-przewodników z dysku.

Publiczne API:
  collect_paths(inputs, pattern)  -> list[str]   (rozwinięcie katalogów)
  load_document(path)             -> Document    (bez sekcji)

Każdy plik czytany jest niezależnie; plik źródłowy nigdy nie jest modyfikowany.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from data_model.documents import Document
from data_model.errors import EncodingError, ReadError
from md_parser.text_cleaner import normalize_text

DEFAULT_PATTERN = "*.md"


def collect_paths(inputs: Iterable[str], pattern: str = DEFAULT_PATTERN) -> list[str]:
    """
    Rozwija katalogi (rekurencyjnie, wg wzorca glob) i zwraca posortowaną
    listę ścieżek bez duplikatów.

    Ścieżki są normalizowane (os.path.normpath), więc `guides/a.md`
    i `guides/sub/../a.md` to ten sam dokument.

    Ścieżki nieistniejące zostają na liście — pipeline zgłosi je jako
    ReadError dla konkretnego dokumentu.
    """
    found: set[str] = set()
    for raw in inputs:
        p = Path(os.path.normpath(raw))
        try:
            is_dir = p.is_dir()
        except OSError:
            # brak uprawnień do katalogu nadrzędnego: zgłosi to load_document
            is_dir = False
        if is_dir:
            found.update(os.path.normpath(f) for f in p.rglob(pattern) if f.is_file())
        else:
            found.add(str(p))
    return sorted(found)


def load_document(path: str | Path) -> Document:
    """
    Wczytuje plik jako tekst UTF-8 i normalizuje końce linii.

    Raises:
        ReadError:     plik nie istnieje, jest katalogiem lub nie da się go odczytać
                       (dowolny OSError, także przy sprawdzaniu ścieżki)
        EncodingError: treść nie jest poprawnym tekstem UTF-8
    """
    name = str(path)
    p = Path(path)

    try:
        if not p.exists():
            raise ReadError(name, "plik nie istnieje")
        if p.is_dir():
            raise ReadError(name, "ścieżka wskazuje katalog, a nie plik")
        raw = p.read_bytes()
    except OSError as e:
        raise ReadError(name, f"nie można odczytać pliku: {e.strerror or e}") from e

    if b"\x00" in raw:
        raise EncodingError(name, "plik zawiera bajty NUL (plik binarny?)")

    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise EncodingError(name, f"niepoprawny UTF-8 (bajt {e.start})") from e

    return Document(path=name, text=normalize_text(text))

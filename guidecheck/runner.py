"""
guidecheck/runner.py — równoległe przetwarzanie dokumentów.

Jeden dokument = jedna jednostka pracy (Load → Extract → Compare) w puli
wątków. Wyniki zbiera wątek wywołujący i zwraca posortowane wg ścieżki,
niezależnie od kolejności ukończenia. Schemat jest współdzielony tylko do odczytu.

Publiczne API:
  process_path(path, checker)           -> DocumentResult
  check_paths(paths, checker, workers)  -> list[DocumentResult]
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable

from data_model.errors import DocumentError, ReadError
from md_parser.loader import load_document
from md_parser.parser import extract_outline
from validator import ConformanceChecker, ConformanceReport


@dataclass(frozen=True, slots=True)
class DocumentResult:
    """Wynik dla jednego dokumentu: raport albo błąd odczytu (nigdy oba)."""

    path: str
    report: ConformanceReport | None = None
    error: DocumentError | None = None

    @property
    def failed_to_load(self) -> bool:
        return self.error is not None


def process_path(path: str, checker: ConformanceChecker) -> DocumentResult:
    """Pipeline jednego dokumentu; błędy dokumentu zamieniane na wynik."""
    try:
        document = load_document(path)
    except DocumentError as e:
        return DocumentResult(path=path, error=e)
    except OSError as e:
        return DocumentResult(
            path=path,
            error=ReadError(path, f"nie można odczytać pliku: {e.strerror or e}"),
        )
    return DocumentResult(path=path, report=checker.check(extract_outline(document)))


def check_paths(
    paths: Iterable[str],
    checker: ConformanceChecker,
    workers: int = 1,
) -> list[DocumentResult]:
    """
    Przetwarza dokumenty w puli `workers` wątków.

    Błąd jednego dokumentu nie przerywa pozostałych.
    """
    unique = sorted(set(paths))
    if not unique:
        return []

    results: dict[str, DocumentResult] = {}
    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(unique)))) as pool:
        futures = {pool.submit(process_path, p, checker): p for p in unique}
        for future in as_completed(futures):
            result = future.result()
            results[result.path] = result

    return [results[p] for p in unique]

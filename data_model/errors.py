"""
data_model/errors.py — hierarchia wyjątków guidecheck.

  GuideCheckError
    DocumentError   — błąd pojedynczego dokumentu (odzyskiwalny)
      ReadError       brak pliku / katalog / brak uprawnień
      EncodingError   treść nie jest tekstem UTF-8
    SchemaError     — błędny schemat (przerywa cały przebieg)
"""

from __future__ import annotations


class GuideCheckError(Exception):
    """Bazowy wyjątek narzędzia."""


class DocumentError(GuideCheckError):
    code = "DOCUMENT_ERROR"

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class ReadError(DocumentError):
    code = "READ_ERROR"


class EncodingError(DocumentError):
    code = "ENCODING_ERROR"


class SchemaError(GuideCheckError):
    """Schemat nie przeszedł walidacji; `problems` zawiera wszystkie usterki."""

    def __init__(self, source: str, problems: list[str]) -> None:
        self.source = source
        self.problems = list(problems)
        summary = "; ".join(self.problems) if self.problems else "nieznany błąd"
        super().__init__(f"Niepoprawny schemat ({source}): {summary}")

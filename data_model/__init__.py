"""
data_model — struktury danych guidecheck.

Użycie:
  from data_model import Document, Section, Schema, SchemaEntry, ...

Moduły:
  documents — Document, Section, ParseWarning, WarningCode, Outline
  schema    — SchemaEntry, Schema
  errors    — GuideCheckError, DocumentError, ReadError, EncodingError, SchemaError
"""

from .documents import (
    WarningCode,
    ParseWarning,
    Section,
    Document,
    Outline,
)
from .schema import (
    SchemaEntry,
    Schema,
)
from .errors import (
    GuideCheckError,
    DocumentError,
    ReadError,
    EncodingError,
    SchemaError,
)

__all__ = [
    # documents
    "WarningCode",
    "ParseWarning",
    "Section",
    "Document",
    "Outline",
    # schema
    "SchemaEntry",
    "Schema",
    # errors
    "GuideCheckError",
    "DocumentError",
    "ReadError",
    "EncodingError",
    "SchemaError",
]

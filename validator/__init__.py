"""
validator — kontrola zgodności outline'u przewodników z kanonicznym schematem sekcji.

Interfejs publiczny:
    SchemaRegistry      — zwalidowany schemat z wyszukiwaniem po nazwie / aliasie
    ConformanceChecker  — porównanie dokumentu ze schematem (LCS)
    ConformanceReport, Finding, FindingKind — typy raportu

Typowe użycie:
    from md_parser.loader import load_document
    from md_parser.parser import extract_outline
    from validator import ConformanceChecker, SchemaRegistry

    registry = SchemaRegistry.from_file("templates-schemas/guide-sections.json")
    checker  = ConformanceChecker(registry)

    report = checker.check(extract_outline(load_document("guides/python.md")))
    if not report.is_conformant:
        for f in report.findings:
            print(f.kind, f.name, f.expected, f.actual)
"""

from .types import ConformanceReport, Finding, FindingKind
from .schema_registry import SchemaRegistry
from .conformance import ConformanceChecker, lcs_keep
from .normalizer import match_key

__all__ = [
    "ConformanceReport",
    "Finding",
    "FindingKind",
    "SchemaRegistry",
    "ConformanceChecker",
    "lcs_keep",
    "match_key",
]

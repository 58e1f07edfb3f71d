"""Komenda: guidecheck outline — podgląd wyodrębnionych nagłówków dokumentu."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from data_model.documents import Document
from data_model.errors import DocumentError, SchemaError
from guidecheck import _config
from guidecheck.reporter import EXIT_ERROR
from md_parser.loader import load_document
from md_parser.parser import extract_outline
from validator import SchemaRegistry

console = Console()


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def _show_table(document: Document, registry: SchemaRegistry | None, level: int | None) -> None:
    sections = [s for s in document.sections if level is None or s.level == level]
    if not sections:
        console.print("[yellow]Brak nagłówków.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",      justify="right", no_wrap=True, style="dim")
    table.add_column("LVL",    justify="right", no_wrap=True, style="dim")
    table.add_column("LINIA",  justify="right", no_wrap=True)
    table.add_column("BAJTY",  justify="center", no_wrap=True)
    table.add_column("TYTUŁ",  no_wrap=False, max_width=60)
    if registry is not None:
        table.add_column("SCHEMAT", no_wrap=True, style="bold cyan")

    for s in sections:
        indent = "  " * (s.level - 1)
        row: list[str | Text] = [
            str(s.ordinal),
            str(s.level),
            str(s.line),
            f"{s.start}–{s.end}",
            Text(indent + s.title),
        ]
        if registry is not None:
            entry = registry.lookup(s.title)
            row.append(Text(f"{entry.rank}. {entry.name}") if entry else Text("-"))
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(sections)} nagłówków[/dim]\n")


def _show_warnings(document: Document) -> None:
    if not document.warnings:
        return
    console.print("[yellow]Ostrzeżenia:[/yellow]")
    for w in document.warnings:
        console.print(f"  [yellow]·[/yellow] [dim]{w.code} linia {w.line}[/dim] ", end="")
        console.print(Text(w.message))


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    try:
        document = extract_outline(load_document(args.document))
    except DocumentError as e:
        console.print(f"[red]{e.code}:[/red] {escape(str(e))}")
        raise SystemExit(EXIT_ERROR)

    registry: SchemaRegistry | None = None
    if args.schema or args.match:
        schema_path = args.schema or _config.schema_path()
        try:
            registry = SchemaRegistry.from_file(schema_path)
        except SchemaError as e:
            console.print(f"[red]Niepoprawny schemat:[/red] {escape(str(e))}")
            raise SystemExit(EXIT_ERROR)

    if args.json_output:
        out = {
            "path": document.path,
            "sections": [
                asdict(s) for s in document.sections
                if args.level is None or s.level == args.level
            ],
            "warnings": [asdict(w) for w in document.warnings],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return

    console.print(
        f"Dokument [bold]{escape(document.path)}[/bold]: "
        f"{len(document.sections)} nagłówków, poziomy {document.levels() or '-'}"
    )
    _show_table(document, registry, args.level)
    _show_warnings(document)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "outline",
        help="Wyświetla wyodrębniony outline (nagłówki) dokumentu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla nagłówki wykryte w dokumencie (poza blokami kodu) wraz z poziomem,
numerem linii i zakresem bajtów treści. Przydatne do diagnozy niezgodności.

Offsety BAJTY liczone są w tekście po normalizacji (LF, bez BOM i spacji na
końcach linii), nie w surowym pliku na dysku.

Przykłady:
  guidecheck outline guides/python.md
  guidecheck outline guides/python.md --level 2 --match
  guidecheck outline guides/python.md --json-output
        """,
    )
    p.add_argument(
        "document",
        metavar="PLIK",
        help="Ścieżka do dokumentu.",
    )
    p.add_argument(
        "--level",
        type=int,
        choices=range(1, 7),
        default=None,
        metavar="N",
        help="Pokaż tylko nagłówki danego poziomu.",
    )
    p.add_argument(
        "--match",
        action="store_true",
        help="Dopasuj nagłówki do domyślnego schematu (kolumna SCHEMAT).",
    )
    p.add_argument(
        "--schema", "-s",
        default=None,
        metavar="PLIK",
        help="Dopasuj nagłówki do podanego schematu (implikuje --match).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz outline jako JSON na stdout.",
    )
    p.set_defaults(func=run)

"""Komenda: guidecheck check — kontrola zgodności dokumentów ze schematem sekcji."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from data_model.errors import SchemaError
from guidecheck import _config
from guidecheck.reporter import (
    EXIT_ERROR,
    exit_code,
    print_table,
    render_json,
    render_lines,
)
from guidecheck.runner import check_paths
from md_parser.loader import collect_paths
from validator import ConformanceChecker, SchemaRegistry

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> None:
    err_console.print(message)
    raise SystemExit(EXIT_ERROR)


def run(args: argparse.Namespace) -> None:
    # --- Schemat (błąd = koniec przebiegu) --------------------------------
    schema_path = args.schema or _config.schema_path()
    try:
        registry = SchemaRegistry.from_file(schema_path)
    except SchemaError as e:
        err_console.print(f"[red]Niepoprawny schemat:[/red] {escape(e.source)}")
        for problem in e.problems:
            err_console.print(f"  [red]·[/red] {escape(problem)}")
        raise SystemExit(EXIT_ERROR)

    # --- Liczba wątków ----------------------------------------------------
    if args.workers is not None:
        workers = args.workers
    else:
        try:
            workers = _config.worker_count()
        except ValueError:
            _fail("[red]GUIDECHECK_WORKERS musi być liczbą całkowitą.[/red]")
    if workers < 1:
        _fail("[red]Liczba wątków musi być >= 1.[/red]")

    # --- Dokumenty --------------------------------------------------------
    paths = collect_paths(args.paths, args.glob or _config.glob_pattern())
    if not paths:
        _fail("[red]Nie znaleziono dokumentów do sprawdzenia.[/red]")

    checker = ConformanceChecker(registry, level=args.level)
    results = check_paths(paths, checker, workers=workers)

    # --- Wynik ------------------------------------------------------------
    match args.format:
        case "lines":
            print("\n".join(render_lines(results)))
        case "json":
            print(render_json(results))
        case _:
            console.print(
                f"Schemat [bold]{escape(registry.schema.name)}[/bold] "
                f"({len(registry)} sekcji), dokumentów: {len(paths)}"
            )
            print_table(results, console, misordered_fatal=args.misordered_fatal)

    raise SystemExit(exit_code(results, misordered_fatal=args.misordered_fatal))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Sprawdza dokumenty względem schematu sekcji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Sprawdza, czy każdy dokument ma te same sekcje najwyższego poziomu, w tej
samej kolejności, co kanoniczny schemat.

Rodzaje niezgodności:
  MISSING     brak wymaganej sekcji
  EXTRA       sekcja spoza schematu
  MISORDERED  sekcja poza kolejnością (domyślnie tylko raportowana)
  DUPLICATE   sekcja powtórzona

Domyślny schemat: {_config.DEFAULT_SCHEMA}
  (zmienna środowiskowa GUIDECHECK_SCHEMA nadpisuje)

Przykłady:
  guidecheck check guides/
  guidecheck check guides/python.md guides/go.md --format lines
  guidecheck check guides/ --schema moj-schemat.json --misordered-fatal
  guidecheck check guides/ --level 2 --workers 4 --format json
        """,
    )
    p.add_argument(
        "paths",
        nargs="+",
        metavar="ŚCIEŻKA",
        help="Pliki lub katalogi z dokumentami (katalogi przeszukiwane rekurencyjnie).",
    )
    p.add_argument(
        "--schema", "-s",
        default=None,
        metavar="PLIK",
        help=f"Plik JSON ze schematem sekcji (domyślnie: {_config.DEFAULT_SCHEMA.name}).",
    )
    p.add_argument(
        "--format", "-f",
        choices=["table", "lines", "json"],
        default="table",
        help="Format wyjścia: table (dla człowieka), lines (TSV), json.",
    )
    p.add_argument(
        "--misordered-fatal",
        action="store_true",
        help="Traktuj MISORDERED jako błąd (kod wyjścia 1).",
    )
    p.add_argument(
        "--level",
        type=int,
        choices=range(1, 7),
        default=None,
        metavar="N",
        help="Poziom nagłówków do kontroli (domyślnie: ze schematu lub automatycznie).",
    )
    p.add_argument(
        "--glob",
        default=None,
        metavar="WZORZEC",
        help=f"Wzorzec plików w katalogach (domyślnie: {_config.DEFAULT_GLOB}).",
    )
    p.add_argument(
        "--workers", "-j",
        type=int,
        default=None,
        metavar="N",
        help="Liczba wątków (domyślnie: GUIDECHECK_WORKERS lub min(8, CPU)).",
    )
    p.set_defaults(func=run)

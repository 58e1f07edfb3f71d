"""Komenda: guidecheck schema — walidacja i listowanie schematu sekcji."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from data_model.errors import SchemaError
from guidecheck import _config
from guidecheck.reporter import EXIT_ERROR
from validator import SchemaRegistry

console = Console()


def run(args: argparse.Namespace) -> None:
    schema_path = args.schema or _config.schema_path()
    try:
        registry = SchemaRegistry.from_file(schema_path)
    except SchemaError as e:
        console.print(f"[red]BŁĄD[/red]  Schemat [bold]{escape(e.source)}[/bold] jest niepoprawny:")
        for problem in e.problems:
            console.print(f"  [red]·[/red] {escape(problem)}")
        raise SystemExit(EXIT_ERROR)

    schema = registry.schema
    level = schema.primary_level if schema.primary_level is not None else "auto"
    console.print(
        f"[green]OK[/green]  Schemat [bold]{escape(schema.name)}[/bold] — "
        f"{len(schema)} sekcji, poziom nagłówków: {level}"
    )

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("RANGA",   justify="right", no_wrap=True)
    table.add_column("NAZWA",   style="bold", no_wrap=True)
    table.add_column("WYMAG.",  justify="center", no_wrap=True)
    table.add_column("ALIASY",  no_wrap=False, max_width=60)

    for entry in schema.entries:
        table.add_row(
            str(entry.rank),
            Text(entry.name),
            "tak" if entry.required else "nie",
            Text(", ".join(sorted(entry.aliases)) or "-"),
        )

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "schema",
        help="Waliduje i listuje schemat sekcji.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Wczytuje plik schematu, sprawdza go (struktura JSON, unikalne nazwy,
ciągłe rangi, aliasy bez kolizji) i wypisuje listę sekcji.

Domyślny schemat: {_config.DEFAULT_SCHEMA}

Przykłady:
  guidecheck schema
  guidecheck schema --schema moj-schemat.json
        """,
    )
    p.add_argument(
        "--schema", "-s",
        default=None,
        metavar="PLIK",
        help=f"Plik JSON ze schematem (domyślnie: {_config.DEFAULT_SCHEMA.name}).",
    )
    p.set_defaults(func=run)

"""
guidecheck — kontrola struktury przewodników względem wspólnego schematu sekcji.

Użycie:
  guidecheck <komenda> [opcje]

Komendy:
  check     Sprawdza dokumenty (pliki lub katalogi) względem schematu sekcji.
  outline   Wyświetla wyodrębniony outline jednego dokumentu.
  schema    Waliduje i listuje schemat sekcji.

Kody wyjścia:
  0  wszystkie dokumenty zgodne
  1  co najmniej jedna niezgodność
  2  błąd konfiguracji / odczytu
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# i emoji z nagłówków były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from guidecheck.commands import check as cmd_check
from guidecheck.commands import outline as cmd_outline
from guidecheck.commands import schema as cmd_schema


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guidecheck",
        description="guidecheck — kontrola zgodności struktury przewodników.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="guidecheck 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_check.add_parser(subparsers)
    cmd_outline.add_parser(subparsers)
    cmd_schema.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()

"""
guidecheck/reporter.py — prezentacja wyników kontroli i kod wyjścia.

Formaty:
  table — tabele rich dla człowieka
  lines — jedna linia TSV na niezgodność:
          dokument  RODZAJ  sekcja  oczekiwana  faktyczna  linia
          + linie PARSE_WARNING / READ_ERROR / ENCODING_ERROR i końcowa SUMMARY
  json  — te same dane jako dokument JSON

Kody wyjścia:
  0 — wszystkie dokumenty zgodne
  1 — co najmniej jedna niezgodność (MISORDERED tylko z misordered_fatal)
  2 — błąd odczytu dokumentu lub konfiguracji
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from guidecheck.runner import DocumentResult
from validator import FindingKind

EXIT_OK       = 0
EXIT_FINDINGS = 1
EXIT_ERROR    = 2

KIND_STYLE: dict[str, str] = {
    FindingKind.MISSING:    "red",
    FindingKind.EXTRA:      "yellow",
    FindingKind.MISORDERED: "magenta",
    FindingKind.DUPLICATE:  "cyan",
}


# ---------------------------------------------------------------------------
# Podsumowanie i kod wyjścia
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Summary:
    checked: int
    passed: int
    with_findings: int
    errors: int
    findings: int
    warnings: int


def summarize(results: list[DocumentResult]) -> Summary:
    reports = [r.report for r in results if r.report is not None]
    return Summary(
        checked=len(results),
        passed=sum(1 for rep in reports if rep.is_conformant),
        with_findings=sum(1 for rep in reports if not rep.is_conformant),
        errors=sum(1 for r in results if r.failed_to_load),
        findings=sum(len(rep.findings) for rep in reports),
        warnings=sum(len(rep.warnings) for rep in reports),
    )


def exit_code(results: list[DocumentResult], misordered_fatal: bool = False) -> int:
    if any(r.failed_to_load for r in results):
        return EXIT_ERROR
    if any(r.report.failing(misordered_fatal) for r in results if r.report is not None):
        return EXIT_FINDINGS
    return EXIT_OK


def _status(result: DocumentResult) -> str:
    if result.report is None:
        return "error"
    return "pass" if result.report.is_conformant else "findings"


# ---------------------------------------------------------------------------
# Format maszynowy: lines
# ---------------------------------------------------------------------------

def _field(value: object | None) -> str:
    if value is None:
        return "-"
    return str(value).replace("\t", " ").replace("\n", " ")


def render_lines(results: list[DocumentResult]) -> list[str]:
    """Jedna linia TSV na niezgodność / ostrzeżenie / błąd; na końcu SUMMARY."""
    lines: list[str] = []
    for result in results:
        if result.error is not None:
            lines.append("\t".join([
                _field(result.path), result.error.code, _field(result.error.message), "-", "-", "-",
            ]))
            continue
        for f in result.report.findings:
            lines.append("\t".join([
                _field(result.path), str(f.kind), _field(f.name),
                _field(f.expected), _field(f.actual), _field(f.line),
            ]))
        for w in result.report.warnings:
            lines.append("\t".join([
                _field(result.path), "PARSE_WARNING", str(w.code), "-", "-", _field(w.line),
            ]))

    s = summarize(results)
    lines.append(
        f"SUMMARY\tchecked={s.checked}\tpassed={s.passed}"
        f"\twith_findings={s.with_findings}\terrors={s.errors}"
    )
    return lines


# ---------------------------------------------------------------------------
# Format maszynowy: json
# ---------------------------------------------------------------------------

def _result_payload(result: DocumentResult) -> dict[str, Any]:
    out: dict[str, Any] = {"path": result.path, "status": _status(result)}
    if result.error is not None:
        out["error"] = {"code": result.error.code, "message": result.error.message}
        return out

    report = result.report
    out["level"] = report.level
    out["matched"] = report.matched
    out["findings"] = [
        {
            "kind": str(f.kind),
            "name": f.name,
            "expected": f.expected,
            "actual": f.actual,
            "line": f.line,
            "message": f.message,
        }
        for f in report.findings
    ]
    out["warnings"] = [
        {"code": str(w.code), "line": w.line, "message": w.message}
        for w in report.warnings
    ]
    return out


def render_json(results: list[DocumentResult]) -> str:
    s = summarize(results)
    payload = {
        "summary": {
            "checked": s.checked,
            "passed": s.passed,
            "with_findings": s.with_findings,
            "errors": s.errors,
            "findings": s.findings,
            "warnings": s.warnings,
        },
        "documents": [_result_payload(r) for r in results],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


# ---------------------------------------------------------------------------
# Format dla człowieka: table
# ---------------------------------------------------------------------------

def _findings_table(result: DocumentResult) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("RODZAJ",  no_wrap=True)
    table.add_column("SEKCJA",  style="bold", no_wrap=False, max_width=40)
    table.add_column("OCZEK.",  justify="right", no_wrap=True)
    table.add_column("FAKT.",   justify="right", no_wrap=True)
    table.add_column("LINIA",   justify="right", no_wrap=True, style="dim")
    table.add_column("OPIS",    no_wrap=False, max_width=60)

    for f in result.report.findings:
        table.add_row(
            Text(str(f.kind), style=KIND_STYLE.get(f.kind, "")),
            Text(f.name),
            _field(f.expected),
            _field(f.actual),
            _field(f.line),
            Text(f.message),
        )
    return table


def print_table(
    results: list[DocumentResult],
    console: Console,
    misordered_fatal: bool = False,
) -> None:
    for result in results:
        if result.error is not None:
            console.print(f"[red]BŁĄD[/red]  [bold]{escape(result.path)}[/bold] ", end="")
            console.print(Text(f"({result.error.code}) {result.error.message}"))
            continue

        report = result.report
        if report.is_conformant:
            console.print(f"[green]OK[/green]    [bold]{escape(result.path)}[/bold]")
        else:
            tag = (
                "[red]NIEZGODNY[/red]"
                if report.failing(misordered_fatal)
                else "[yellow]UWAGI[/yellow]"
            )
            console.print(
                f"{tag}  [bold]{escape(result.path)}[/bold] — "
                f"{len(report.findings)} niezgodność(i), poziom nagłówków: {report.level}"
            )
            console.print(_findings_table(result))

        for w in report.warnings:
            console.print(f"  [yellow]·[/yellow] [dim]linia {w.line}[/dim] ", end="")
            console.print(Text(w.message))

    s = summarize(results)
    console.print()
    console.print(
        f"Sprawdzono [bold]{s.checked}[/bold] dokument(ów): "
        f"[green]{s.passed} zgodnych[/green], "
        f"[yellow]{s.with_findings} z niezgodnościami[/yellow], "
        f"[red]{s.errors} błędów odczytu[/red]."
    )

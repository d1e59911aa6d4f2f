"""Terminal reporting of scan results."""

from typing import Protocol

import typer

from store_getters_linter.domain.entities import ScanResult


class ScanReporter(Protocol):
    """Protocol for reporting scan results."""

    def report(self, result: ScanResult, fix_enabled: bool) -> None:
        ...


class TerminalScanReporter:
    """One line per diagnostic, then a summary."""

    def report(self, result: ScanResult, fix_enabled: bool) -> None:
        for report in result.reports:
            if report.parse_failed:
                typer.secho(f"{report.path}: could not be parsed, skipped", fg=typer.colors.YELLOW, err=True)
                continue
            if report.fixed:
                typer.secho(f"Fixed: {report.path}", fg=typer.colors.GREEN)
            for diagnostic in report.diagnostics:
                typer.echo(diagnostic.format(report.path))

        count = result.diagnostic_count
        files = len(result.reports)
        if count == 0:
            typer.secho(f"No getter state mutations in {files} file(s).", fg=typer.colors.GREEN)
            return
        hint = "" if fix_enabled else " Run with --fix to wrap receivers in copy.deepcopy()."
        typer.secho(
            f"{count} getter state mutation(s) in {files} file(s).{hint}",
            fg=typer.colors.RED,
        )

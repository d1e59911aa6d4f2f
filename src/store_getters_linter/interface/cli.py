"""CLI entry points for store-getters - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from store_getters_linter.domain.config import ConfigurationLoader
from store_getters_linter.domain.constants import (
    RULE_CODE,
    RULE_DESCRIPTION,
    RULE_SYMBOL,
    STORE_GETTERS_BANNER,
)
from store_getters_linter.domain.protocols import FixerGatewayProtocol
from store_getters_linter.domain.rules.getter_mutation import GetterMutationRule
from store_getters_linter.interface.reporters import ScanReporter
from store_getters_linter.use_cases.apply_fixes import ApplyFixesUseCase
from store_getters_linter.use_cases.scan_getters import ScanGettersUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    scan_use_case: ScanGettersUseCase
    fixer_gateway: FixerGatewayProtocol
    rule: GetterMutationRule
    reporter: ScanReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.' (public API)."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="store-getters",
            help=f"{STORE_GETTERS_BANNER} Find getters that mutate store state in place.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Optional[Path] = typer.Argument(None, help="File or directory to scan (default: src/ or .)"),  # noqa: B008
            fix: Optional[bool] = typer.Option(
                None,
                "--fix/--no-fix",
                help="Wrap offending receivers in copy.deepcopy(). Default: [tool.store-getters] enable-fix.",
            ),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
        ) -> None:
            """Report (and optionally fix) in-place mutations of store state in getters."""
            if verbose:
                logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
            target_path = CLIAppFactory.resolve_target_path(path)
            fix_enabled = deps.config_loader.enable_fix if fix is None else fix

            if fix_enabled:
                use_case = ApplyFixesUseCase(deps.scan_use_case, deps.fixer_gateway)
                result = use_case.execute(target_path)
            else:
                result = deps.scan_use_case.execute(target_path)

            deps.reporter.report(result, fix_enabled)
            if result.has_violations():
                raise typer.Exit(code=1)

        @app.command()
        def explain() -> None:
            """Describe the rule and how to fix a violation by hand."""
            typer.echo(f"{RULE_CODE} ({RULE_SYMBOL})")
            typer.echo(RULE_DESCRIPTION)
            typer.echo("")
            typer.echo(deps.rule.get_fix_instructions())

        return app

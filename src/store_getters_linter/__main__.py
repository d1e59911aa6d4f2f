"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from store_getters_linter.infrastructure.di.container import StoreGettersContainer
from store_getters_linter.interface.cli import CLIAppFactory, CLIDependencies
from store_getters_linter.interface.reporters import TerminalScanReporter
from store_getters_linter.use_cases.scan_getters import ScanGettersUseCase


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = StoreGettersContainer.get_instance()
    rule = container.get_rule()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        scan_use_case=ScanGettersUseCase(container.get_astroid_gateway(), rule),
        fixer_gateway=container.get_fixer_gateway(),
        rule=rule,
        reporter=TerminalScanReporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()

"""
Pylint plugin entry point - composition root for the checker plugin.

Enable with `pylint --load-plugins=store_getters_linter.checker`.
"""

from pylint.lint import PyLinter

from store_getters_linter.infrastructure.di.container import StoreGettersContainer
from store_getters_linter.use_cases.checks.getter_mutation import GetterMutationChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = StoreGettersContainer.get_instance()
    linter.register_checker(
        GetterMutationChecker(
            linter,
            rule=container.get_rule(),
            astroid_gateway=container.get_astroid_gateway(),
            fixer_gateway=container.get_fixer_gateway(),
        )
    )

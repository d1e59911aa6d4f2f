"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so `tests.linter_test_utils` imports.
"""

import textwrap

import pytest

from store_getters_linter.domain.rules.getter_mutation import GetterMutationRule
from store_getters_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from store_getters_linter.use_cases.scan_getters import ScanGettersUseCase


@pytest.fixture
def scan_use_case() -> ScanGettersUseCase:
    return ScanGettersUseCase(AstroidGateway(), GetterMutationRule())


@pytest.fixture
def write_store(tmp_path):
    """Write a dedented store module under tmp_path and return its path."""

    def _write(code: str, name: str = "store.py"):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(code).lstrip("\n"), encoding="utf-8")
        return path

    return _write

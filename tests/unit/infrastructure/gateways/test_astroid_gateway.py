"""Unit tests for AstroidGateway."""

import codecs
import logging
from pathlib import Path

import astroid
import pytest

from store_getters_linter.infrastructure.gateways.astroid_gateway import AstroidGateway


class _Recorder:
    def __init__(self) -> None:
        self.events: list[str] = []

    def visit_dict(self, node) -> None:
        self.events.append("enter dict")

    def leave_dict(self, node) -> None:
        self.events.append("leave dict")

    def visit_call(self, node) -> None:
        self.events.append(f"call {node.func.as_string()}")


class TestAstroidGateway:
    def test_parse_source_keeps_indentation(self) -> None:
        module = AstroidGateway().parse_source("x = 1\nif x:\n    y = x.sort()\n", "store.py")
        call = next(module.nodes_of_class(astroid.nodes.Call))
        assert (call.lineno, call.col_offset) == (3, 8)

    def test_parse_source_syntax_error(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert AstroidGateway().parse_source("getters = {", "broken.py") is None
        assert "Cannot parse broken.py" in caplog.text

    def test_parse_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.py"
        path.write_text("getters = {}\n", encoding="utf-8")
        module = AstroidGateway().parse_file(str(path))
        assert module.file == str(path)
        assert module.name == "store"

    def test_parse_missing_file(self, tmp_path: Path) -> None:
        assert AstroidGateway().parse_file(str(tmp_path / "missing.py")) is None

    def test_read_source_returns_exact_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "store.py"
        path.write_bytes(b"getters = {}\r\nitems = []\r\n")
        gateway = AstroidGateway()
        module = gateway.parse_file(str(path))
        assert gateway.read_source(module) == b"getters = {}\r\nitems = []\r\n"

    def test_read_source_of_string_build(self) -> None:
        gateway = AstroidGateway()
        module = gateway.parse_source("x = 'é'\n", "store.py")
        assert gateway.read_source(module) == "x = 'é'\n".encode("utf-8")

    def test_walk_order(self) -> None:
        module = AstroidGateway().parse_source("getters = {'a': f({})}\n")
        recorder = _Recorder()
        AstroidGateway().walk(module, recorder)
        assert recorder.events == [
            "enter dict",
            "call f",
            "enter dict",
            "leave dict",
            "leave dict",
        ]

    def test_parse_file_with_bom(self, tmp_path: Path) -> None:
        path = tmp_path / "store.py"
        path.write_bytes(codecs.BOM_UTF8 + b"getters = {'g': lambda state: state.items.sort()}\n")
        module = AstroidGateway().parse_file(str(path))
        assert module is not None
        call = next(module.nodes_of_class(astroid.nodes.Call))
        assert (call.lineno, call.col_offset) == (1, 30)

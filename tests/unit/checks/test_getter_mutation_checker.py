"""Unit tests for GetterMutationChecker (W9701)."""

import codecs
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock

import astroid
from astroid.builder import AstroidBuilder

from store_getters_linter.domain.constants import RULE_CODE, RULE_SYMBOL
from store_getters_linter.domain.entities import SourceSpan
from store_getters_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from store_getters_linter.infrastructure.gateways.text_splice_fixer_gateway import (
    TextSpliceFixerGateway,
)
from store_getters_linter.use_cases.checks.getter_mutation import GetterMutationChecker
from tests.linter_test_utils import MockLinter, run_checker

STORE = """
import copy

todos = define_store(
    "todos",
    state=lambda: {"items": []},
    getters={
        "sorted_items": lambda state: state.items.sort(),
        "newest": lambda: self.items.pop(),
        "count": lambda state: len(state.items),
    },
)
"""


class TestGetterMutationChecker(unittest.TestCase):
    """Drive the checker over parsed modules with a recording linter."""

    def test_msgs_registered(self) -> None:
        checker = GetterMutationChecker(MockLinter())
        self.assertIn(RULE_CODE, checker.msgs)
        self.assertEqual(checker.msgs[RULE_CODE][1], RULE_SYMBOL)
        self.assertEqual(checker.name, "store-getters")

    def test_fix_option_is_not_an_enable_prefix(self) -> None:
        # pylint treats any `--enable-...` argument as `--enable-all-extensions`.
        names = [name for name, _ in GetterMutationChecker.options]
        self.assertEqual(names, ["fix-getter-mutations"])
        self.assertFalse(any(name.startswith("enable-") for name in names))

    def test_fix_enabled_reads_linter_config(self) -> None:
        self.assertTrue(GetterMutationChecker(MockLinter(enable_fix=True)).fix_enabled)
        self.assertFalse(GetterMutationChecker(MockLinter()).fix_enabled)

    def test_reports_each_mutation(self) -> None:
        linter, _ = run_checker(GetterMutationChecker, STORE)
        self.assertEqual(linter.messages, [RULE_CODE, RULE_CODE])
        self.assertEqual([c["args"] for c in linter.calls], [("sort",), ("pop",)])

    def test_message_anchored_on_method_name(self) -> None:
        linter, _ = run_checker(GetterMutationChecker, STORE)
        first = linter.calls[0]
        # `        "sorted_items": lambda state: state.items.sort(),` on line 8
        self.assertEqual(first["line"], 8)
        self.assertEqual(first["col_offset"], 50)
        self.assertEqual(first["end_lineno"], 8)
        self.assertEqual(first["end_col_offset"], 54)
        self.assertEqual(first["node"].attrname, "sort")

    def test_clean_module(self) -> None:
        linter, _ = run_checker(
            GetterMutationChecker,
            """
            getters = {"sorted_items": lambda state: sorted(state.items)}
            actions = {"add": lambda state, item: state.items.append(item)}
            """,
        )
        self.assertEqual(linter.messages, [])

    def test_no_edits_without_fix(self) -> None:
        fixer = MagicMock()
        _, checker = run_checker(
            GetterMutationChecker,
            STORE,
            astroid_gateway=AstroidGateway(),
            fixer_gateway=fixer,
        )
        self.assertEqual(checker.pending_edits, [])
        fixer.apply_edits.assert_not_called()

    def test_fix_edits_applied_on_leave_module(self) -> None:
        fixer = MagicMock()
        linter, checker = run_checker(
            GetterMutationChecker,
            STORE,
            enable_fix=True,
            astroid_gateway=AstroidGateway(),
            fixer_gateway=fixer,
        )
        self.assertEqual(len(linter.messages), 2)
        fixer.apply_edits.assert_called_once()
        path, edits = fixer.apply_edits.call_args.args
        self.assertEqual(Path(path).name, "store.py")
        self.assertEqual(
            [e.replacement for e in edits],
            ["copy.deepcopy(state.items)", "copy.deepcopy(self.items)"],
        )
        self.assertEqual(edits[0].span, SourceSpan(8, 38, 8, 49))
        # Pending edits are flushed once handed to the fixer.
        self.assertEqual(checker.pending_edits, [])

    def test_fix_without_gateways_only_reports(self) -> None:
        linter, checker = run_checker(GetterMutationChecker, STORE, enable_fix=True)
        self.assertEqual(len(linter.messages), 2)
        self.assertEqual(checker.pending_edits, [])

    def test_non_python_file_is_not_rewritten(self) -> None:
        fixer = MagicMock()
        run_checker(
            GetterMutationChecker,
            STORE,
            filename="store.pyi",
            enable_fix=True,
            astroid_gateway=AstroidGateway(),
            fixer_gateway=fixer,
        )
        fixer.apply_edits.assert_not_called()

    def test_each_module_is_a_fresh_session(self) -> None:
        linter = MockLinter()
        checker = GetterMutationChecker(linter)
        gateway = AstroidGateway()
        gateway.walk(gateway.parse_source('getters = {"a": lambda state: state.x.sort()}\n', "a.py"), checker)
        gateway.walk(gateway.parse_source('getters = {"b": lambda: self.x.clear()}\n', "b.py"), checker)
        self.assertEqual([c["args"] for c in linter.calls], [("sort",), ("clear",)])
        self.assertEqual(len(checker._stack), 0)

    def test_fix_on_file_with_bom(self) -> None:
        # pylint builds modules from the file on disk, so the source stream keeps the BOM.
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "bom_store.py"
            path.write_bytes(codecs.BOM_UTF8 + b'getters = {"g": lambda state: state.items.sort()}\n')
            module = AstroidBuilder(astroid.MANAGER).file_build(str(path), "bom_store")
            linter = MockLinter(enable_fix=True)
            checker = GetterMutationChecker(
                linter,
                astroid_gateway=AstroidGateway(),
                fixer_gateway=TextSpliceFixerGateway(),
            )
            AstroidGateway().walk(module, checker)
            self.assertEqual(linter.messages, [RULE_CODE])
            self.assertEqual(
                path.read_bytes(),
                codecs.BOM_UTF8
                + b"import copy\n"
                + b'getters = {"g": lambda state: copy.deepcopy(state.items).sort()}\n',
            )

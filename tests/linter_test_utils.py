import textwrap

import astroid

from store_getters_linter.infrastructure.gateways.astroid_gateway import AstroidGateway


class MockLinter:
    def __init__(self, enable_fix: bool = False) -> None:
        self.messages = []
        self.calls = []
        self.config = type("config", (), {"fix_getter_mutations": enable_fix})()
        self.current_name = "test_module"

    def add_message(
        self,
        msg_id,
        line=None,
        node=None,
        args=None,
        confidence=None,
        col_offset=None,
        end_lineno=None,
        end_col_offset=None,
    ):
        self.messages.append(msg_id)
        self.calls.append(
            {
                "msg_id": msg_id,
                "line": line,
                "node": node,
                "args": args,
                "col_offset": col_offset,
                "end_lineno": end_lineno,
                "end_col_offset": end_col_offset,
            }
        )

    def _register_options_provider(self, provider):
        pass


def parse(code, filename="store.py") -> astroid.nodes.Module:
    tree = AstroidGateway().parse_source(textwrap.dedent(code), filename)
    assert tree is not None, "fixture does not parse"
    return tree


def run_checker(checker_cls, code, filename="store.py", enable_fix=False, **checker_kwargs):
    """Drive a checker over `code` the way pylint's walker would. Returns (linter, checker)."""
    linter = MockLinter(enable_fix=enable_fix)
    checker = checker_cls(linter, **checker_kwargs)
    tree = parse(code, filename)
    AstroidGateway().walk(tree, checker)
    return linter, checker

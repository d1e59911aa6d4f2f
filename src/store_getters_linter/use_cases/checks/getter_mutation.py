"""Getter state mutation checks (W9701)."""

from typing import TYPE_CHECKING

import astroid

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from pylint.checkers import BaseChecker

from store_getters_linter.domain.entities import TextEdit
from store_getters_linter.domain.protocols import AstroidProtocol, FixerGatewayProtocol
from store_getters_linter.domain.rule_msgs import RuleMsgBuilder
from store_getters_linter.domain.rules.getter_mutation import GetterMutationRule
from store_getters_linter.domain.scope_context import ScopeContextStack


class GetterMutationChecker(BaseChecker):
    """W9701: in-place mutation of store state from a getter. Thin: delegates to GetterMutationRule."""

    name: str = "store-getters"
    options = (
        (
            "fix-getter-mutations",
            {
                "default": False,
                "type": "yn",
                "metavar": "<y or n>",
                "help": "Rewrite offending receivers to copy.deepcopy(...) in place.",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        rule: GetterMutationRule | None = None,
        astroid_gateway: AstroidProtocol | None = None,
        fixer_gateway: FixerGatewayProtocol | None = None,
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs()  # type: ignore[assignment]
        super().__init__(linter)
        self._rule = rule or GetterMutationRule()
        self._astroid_gateway = astroid_gateway
        self._fixer_gateway = fixer_gateway
        self._stack = ScopeContextStack()
        self._pending_edits: list[TextEdit] = []
        self._source: bytes | None = None
        self._source_loaded = False

    @property
    def fix_enabled(self) -> bool:
        return bool(getattr(self.linter.config, "fix_getter_mutations", False))

    @property
    def pending_edits(self) -> list[TextEdit]:
        return list(self._pending_edits)

    def visit_module(self, node: astroid.nodes.Module) -> None:
        """Each module is its own traversal session."""
        self._stack = ScopeContextStack()
        self._pending_edits = []
        self._source = None
        self._source_loaded = False

    def leave_module(self, node: astroid.nodes.Module) -> None:
        if not self._pending_edits or self._fixer_gateway is None:
            return
        file_path = getattr(node, "file", None)
        if file_path and str(file_path).endswith(".py"):
            self._fixer_gateway.apply_edits(file_path, self._pending_edits)
        self._pending_edits = []

    def visit_dict(self, node: astroid.nodes.Dict) -> None:
        self._rule.enter_node(node, self._stack)

    def leave_dict(self, node: astroid.nodes.Dict) -> None:
        self._rule.leave_node(node, self._stack)

    def visit_lambda(self, node: astroid.nodes.Lambda) -> None:
        self._rule.record_function(node, self._stack)

    def visit_call(self, node: astroid.nodes.Call) -> None:
        """Delegate W9701 to the domain rule."""
        for v in self._rule.check_call(node, self._stack):
            diagnostic = self._rule.emit(v, self.fix_enabled, self._module_source(node))
            loc = diagnostic.location
            self.add_message(
                v.code,
                node=v.node.func,
                args=v.message_args or (),
                line=loc.start_line,
                col_offset=loc.start_col,
                end_lineno=loc.end_line,
                end_col_offset=loc.end_col,
            )
            if diagnostic.fix is not None:
                self._pending_edits.append(diagnostic.fix)

    def _module_source(self, node: astroid.nodes.NodeNG) -> bytes | None:
        if not self.fix_enabled:
            return None
        if not self._source_loaded:
            self._source_loaded = True
            if self._astroid_gateway is not None:
                self._source = self._astroid_gateway.read_source(node.root())
        return self._source

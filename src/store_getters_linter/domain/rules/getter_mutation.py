"""Getter State Mutation Rule (W9701) - Detection + auto-fix via deep copy."""

from typing import Literal

import astroid

from store_getters_linter.domain.constants import (
    DEEP_COPY_FUNCTION,
    DEEP_COPY_MODULE,
    RULE_CODE,
    RULE_DESCRIPTION,
    RULE_SEVERITY,
    RULE_SYMBOL,
)
from store_getters_linter.domain.entities import Diagnostic, RootClassification, TextEdit
from store_getters_linter.domain.mutation_catalog import MutationCatalog
from store_getters_linter.domain.root_resolver import RootResolver
from store_getters_linter.domain.rule_msgs import RuleMsgBuilder
from store_getters_linter.domain.rules import Violation
from store_getters_linter.domain.scope_context import ScopeContextStack
from store_getters_linter.domain.source_text import SourceText

_FLAGGED = (RootClassification.BOUND_PARAMETER, RootClassification.IMPLICIT_RECEIVER)


class GetterMutationRule:
    """
    Rule for W9701: in-place sequence mutation of store state inside a getter.

    - Detection: a call `<root>.<chain>.<method>(...)` inside a `getters`
      literal, where `method` is in the MutationCatalog and `root` is the
      getter's first parameter or `self`.
    - Fix: wraps the receiver chain in `copy.deepcopy(...)`, leaving the
      trailing `.method(...)` untouched.

    The rule is stateless; the ScopeContextStack is owned by whoever drives
    the traversal and passed into every call.
    """

    code: str = RULE_CODE
    symbol: str = RULE_SYMBOL
    description: str = RULE_DESCRIPTION
    fix_type: Literal["code"] = "code"

    # --------------------------------------------------------------------- #
    # Traversal callbacks
    # --------------------------------------------------------------------- #

    def enter_node(self, node: astroid.nodes.NodeNG, stack: ScopeContextStack) -> None:
        stack.enter(node)

    def leave_node(self, node: astroid.nodes.NodeNG, stack: ScopeContextStack) -> None:
        stack.exit(node)

    def record_function(
        self, node: astroid.nodes.NodeNG, stack: ScopeContextStack
    ) -> None:
        stack.bind_param(node)

    def check_call(
        self, node: astroid.nodes.NodeNG, stack: ScopeContextStack
    ) -> list[Violation]:
        """Return at most one violation for a Call node."""
        frame = stack.current()
        if frame is None:
            return []

        func = getattr(node, "func", None)
        if not isinstance(func, astroid.nodes.Attribute):
            return []
        method = func.attrname
        if not MutationCatalog.is_mutating(method):
            return []

        receiver = func.expr
        if receiver is None:
            return []
        root = RootResolver.resolve_root(receiver)
        classification = RootResolver.classify(root, frame.binding_for(node))
        if classification not in _FLAGGED:
            return []

        return [
            Violation.from_node(
                code=self.code,
                message=RuleMsgBuilder.render(method),
                node=node,
                method=method,
                receiver=receiver,
                root=root,
                classification=classification,
            )
        ]

    # --------------------------------------------------------------------- #
    # Diagnostic + fix
    # --------------------------------------------------------------------- #

    def emit(
        self, violation: Violation, fix_enabled: bool, source: bytes | None = None
    ) -> Diagnostic:
        """Build the diagnostic, anchored on the method name token."""
        func = violation.node.func
        location = SourceText.attribute_name_span(func) or SourceText.span_of(violation.node)
        fix = None
        if fix_enabled and source is not None:
            fix = self.fix(violation, source)
        return Diagnostic(
            code=self.code,
            symbol=self.symbol,
            message=violation.message,
            method=violation.method,
            location=location,
            severity=RULE_SEVERITY,
            fix=fix,
        )

    def fix(self, violation: Violation, source: bytes) -> TextEdit | None:
        """
        Replace the receiver's original text with `copy.deepcopy(<text>)`.

        Pure splice over the receiver's span; nothing is re-serialised. No
        edit when `copy` at the call site is not the module.
        """
        if self._copy_shadowed(violation.root):
            return None
        span = SourceText.span_of(violation.receiver)
        if span is None:
            return None
        try:
            original = SourceText(source).text(span)
        except (IndexError, UnicodeDecodeError):
            return None
        if not original:
            return None
        return TextEdit(
            span=span,
            replacement=f"{DEEP_COPY_MODULE}.{DEEP_COPY_FUNCTION}({original})",
        )

    @staticmethod
    def _copy_shadowed(root: astroid.nodes.NodeNG) -> bool:
        """True when `copy` resolves to a parameter or binding other than `import copy`."""
        if isinstance(root, astroid.nodes.Name) and root.name == DEEP_COPY_MODULE:
            return True
        lookup = getattr(root, "lookup", None)
        if lookup is None:
            return False
        _, assignments = lookup(DEEP_COPY_MODULE)
        return any(not isinstance(a, astroid.nodes.Import) for a in assignments)

    def get_fix_instructions(self, violation: Violation | None = None) -> str:
        """Provide human/AI instructions for manual fix."""
        method = violation.method if violation else "the mutating method"
        return (
            f"Call {method} on a copy of the state instead of the state itself: "
            "1. Wrap the receiver in copy.deepcopy(...) "
            "2. Add 'import copy' to the module "
            "3. Or use a non-mutating form (sorted(...), reversed(...), list(...) + [...])"
        )

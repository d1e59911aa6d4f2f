"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Violation",
]

import astroid

from store_getters_linter.domain.entities import RootClassification


@dataclass(frozen=True)
class Violation:
    """An offending call site: what was called, on what, and why it counts."""

    code: str
    message: str
    node: astroid.nodes.NodeNG
    method: str
    receiver: astroid.nodes.NodeNG
    """Whole object side of the call (`state.a.b` in `state.a.b.sort()`)."""
    root: astroid.nodes.NodeNG
    classification: RootClassification
    message_args: tuple[str, ...] | None = None

    @classmethod
    def from_node(
        cls,
        *,
        code: str,
        message: str,
        node: astroid.nodes.NodeNG,
        method: str,
        receiver: astroid.nodes.NodeNG,
        root: astroid.nodes.NodeNG,
        classification: RootClassification,
    ) -> "Violation":
        """Build a Violation for a call node, with the method name as message argument."""
        return cls(
            code=code,
            message=message,
            node=node,
            method=method,
            receiver=receiver,
            root=root,
            classification=classification,
            message_args=(method,),
        )

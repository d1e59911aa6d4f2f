"""Receiver chain resolution for method calls."""

import astroid

from store_getters_linter.domain.constants import IMPLICIT_RECEIVER
from store_getters_linter.domain.entities import RootClassification


class RootResolver:
    """
    Walks a receiver such as `state.a.b[0]` back to its root (`state`).

    Only attribute access and plain subscripts are unwrapped. Anything else,
    a call, a list display, a slice (a sub-range copy), terminates the walk
    and is returned as is.
    """

    @staticmethod
    def is_property_access(node: astroid.nodes.NodeNG) -> bool:
        if isinstance(node, astroid.nodes.Attribute):
            return True
        if isinstance(node, astroid.nodes.Subscript):
            return not isinstance(node.slice, astroid.nodes.Slice)
        return False

    @classmethod
    def resolve_root(cls, receiver: astroid.nodes.NodeNG) -> astroid.nodes.NodeNG:
        node = receiver
        while cls.is_property_access(node):
            inner = node.expr if isinstance(node, astroid.nodes.Attribute) else node.value
            if inner is None:
                break
            node = inner
        return node

    @staticmethod
    def classify(
        root: astroid.nodes.NodeNG, bound_param: str | None
    ) -> RootClassification:
        """Classify a resolved root against the getter's bound state parameter."""
        if not isinstance(root, astroid.nodes.Name):
            return RootClassification.OTHER
        if bound_param is not None and root.name == bound_param:
            return RootClassification.BOUND_PARAMETER
        if root.name == IMPLICIT_RECEIVER:
            return RootClassification.IMPLICIT_RECEIVER
        return RootClassification.OTHER

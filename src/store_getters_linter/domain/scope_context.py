"""Tracks which `getters` literal, and which getter parameter, a traversal is inside."""

from dataclasses import dataclass, field

import astroid

from store_getters_linter.domain.constants import ACCESSOR_GROUP_KEY


class ContextStackUnderflowError(AssertionError):
    """Raised when a `getters` literal is left without having been entered."""


@dataclass
class ContextFrame:
    """
    One `getters` literal being traversed.

    `bound_param` is the first parameter of the most recently entered getter.
    `bindings` maps every getter entered in this frame (by node identity) to
    its first parameter name, or None when it declares none.
    """
    active: bool = True
    bound_param: str | None = None
    bindings: dict[int, str | None] = field(default_factory=dict)

    def bind(self, function_node: astroid.nodes.NodeNG, param: str | None) -> None:
        self.bindings[id(function_node)] = param
        if param is not None:
            self.bound_param = param

    def binding_for(self, node: astroid.nodes.NodeNG) -> str | None:
        """
        State parameter name visible at `node`.

        Follows the parent links to the nearest enclosing getter that declares
        a parameter. Parameterless functions in between do not rebind anything.
        """
        current = getattr(node, "parent", None)
        while current is not None:
            param = self.bindings.get(id(current))
            if param is not None:
                return param
            current = getattr(current, "parent", None)
        return None


class ScopeContextStack:
    """Stack of `ContextFrame`s, one per `getters` literal currently open."""

    def __init__(self) -> None:
        self._frames: list[ContextFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    @staticmethod
    def is_accessor_collection(node: astroid.nodes.NodeNG) -> bool:
        """
        True for a dict literal stored under the `getters` name.

        Recognised shapes:
            {"getters": {...}}
            define_store("id", getters={...})
            getters = {...}  /  getters: dict = {...}
        """
        if not isinstance(node, astroid.nodes.Dict):
            return False
        parent = node.parent
        if isinstance(parent, astroid.nodes.Keyword):
            return parent.arg == ACCESSOR_GROUP_KEY
        if isinstance(parent, astroid.nodes.Dict):
            for key, value in parent.items:
                if value is node:
                    return (
                        isinstance(key, astroid.nodes.Const)
                        and key.value == ACCESSOR_GROUP_KEY
                    )
            return False
        if isinstance(parent, astroid.nodes.Assign):
            targets = list(parent.targets)
        elif isinstance(parent, astroid.nodes.AnnAssign):
            targets = [parent.target]
        else:
            return False
        return parent.value is node and any(
            ScopeContextStack._target_name(t) == ACCESSOR_GROUP_KEY for t in targets
        )

    @staticmethod
    def _target_name(target: astroid.nodes.NodeNG) -> str | None:
        if isinstance(target, astroid.nodes.AssignName):
            return target.name
        if isinstance(target, astroid.nodes.AssignAttr):
            return target.attrname
        return None

    @staticmethod
    def first_param_name(function_node: astroid.nodes.NodeNG) -> str | None:
        args = getattr(function_node, "args", None)
        if args is None:
            return None
        positional = list(getattr(args, "posonlyargs", None) or []) + list(
            getattr(args, "args", None) or []
        )
        if not positional:
            return None
        return getattr(positional[0], "name", None)

    def enter(self, node: astroid.nodes.NodeNG) -> bool:
        """Push a frame if `node` opens a `getters` literal. Returns whether it did."""
        if not self.is_accessor_collection(node):
            return False
        self._frames.append(ContextFrame())
        return True

    def exit(self, node: astroid.nodes.NodeNG) -> bool:
        """Pop the frame opened by `node`. Returns whether one was popped."""
        if not self.is_accessor_collection(node):
            return False
        if not self._frames:
            raise ContextStackUnderflowError(
                f"left a '{ACCESSOR_GROUP_KEY}' literal at line "
                f"{getattr(node, 'lineno', '?')} that was never entered"
            )
        self._frames.pop()
        return True

    def bind_param(self, function_node: astroid.nodes.NodeNG) -> None:
        frame = self.current()
        if frame is None or not isinstance(function_node, astroid.nodes.Lambda):
            return
        frame.bind(function_node, self.first_param_name(function_node))

    def current(self) -> ContextFrame | None:
        return self._frames[-1] if self._frames else None

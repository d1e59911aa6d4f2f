from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    import astroid

    from store_getters_linter.domain.entities import TextEdit


class AstroidProtocol(Protocol):
    def parse_file(self, file_path: str) -> Optional["astroid.nodes.Module"]:
        """Parse a file and return the astroid Module node."""
        ...

    def parse_source(self, source: str, path: str = "") -> Optional["astroid.nodes.Module"]:
        ...

    def read_source(self, module: "astroid.nodes.Module") -> Optional[bytes]:
        """Return the exact bytes the module was parsed from."""
        ...

    def walk(self, tree: "astroid.nodes.NodeNG", visitor: object) -> None:
        """Drive visit_<node>/leave_<node> callbacks on `visitor` over `tree`."""
        ...


class FixerGatewayProtocol(Protocol):
    def splice(self, source: bytes, edits: list["TextEdit"]) -> bytes:
        ...

    def apply_edits(self, file_path: str, edits: list["TextEdit"]) -> bool:
        """Apply text edits to a file. Returns True if the file was modified."""
        ...

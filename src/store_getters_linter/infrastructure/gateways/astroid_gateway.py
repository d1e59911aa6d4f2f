import logging
from pathlib import Path
from typing import Optional

import astroid
from astroid.builder import AstroidBuilder

from store_getters_linter.domain.protocols import AstroidProtocol

logger = logging.getLogger(__name__)


class AstroidGateway(AstroidProtocol):
    """Parses modules with astroid and drives visitor callbacks over them."""

    def parse_file(self, file_path: str) -> Optional[astroid.nodes.Module]:
        """Parse a file and return the astroid Module node.

        Bytes are decoded without newline translation so positions line up
        with the file on disk. A leading BOM is dropped, as astroid does.
        """
        path = Path(file_path)
        try:
            source = path.read_bytes().decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", file_path, exc)
            return None
        return self.parse_source(source, str(path))

    def parse_source(self, source: str, path: str = "") -> Optional[astroid.nodes.Module]:
        """
        Parse source text as is.

        Unlike astroid.parse the text is not dedented, so node positions index
        straight into the bytes on disk.
        """
        modname = Path(path).stem if path else ""
        builder = AstroidBuilder(astroid.MANAGER)
        try:
            return builder.string_build(source, modname=modname, path=path or None)
        except astroid.AstroidSyntaxError as exc:
            logger.warning("Cannot parse %s: %s", path or "<string>", exc)
            return None

    def read_source(self, module: astroid.nodes.Module) -> Optional[bytes]:
        """Return the exact bytes the module was parsed from."""
        try:
            stream = module.stream()
        except OSError as exc:
            logger.warning("Cannot read source of %s: %s", module.name, exc)
            return None
        if stream is None:
            return None
        with stream:
            return stream.read()

    def walk(self, tree: astroid.nodes.NodeNG, visitor: object) -> None:
        """
        Pre-order visit_<class> and post-order leave_<class> callbacks.

        Same dispatch as pylint's ASTWalker: the lower-cased node class name.
        """
        node_name = tree.__class__.__name__.lower()
        visit = getattr(visitor, f"visit_{node_name}", None)
        if visit is not None:
            visit(tree)

        for child in tree.get_children():
            self.walk(child, visitor)

        leave = getattr(visitor, f"leave_{node_name}", None)
        if leave is not None:
            leave(tree)

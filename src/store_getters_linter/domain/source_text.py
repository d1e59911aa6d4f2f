"""Byte-exact access to the source text behind astroid positions."""

import codecs

import astroid

from store_getters_linter.domain.entities import SourceSpan


class SourceText:
    """
    Module source as UTF-8 bytes with a line table.

    astroid reports columns as UTF-8 byte offsets, so slicing happens on bytes
    and is decoded afterwards. astroid does not count a leading UTF-8 BOM, so
    line 1 starts after it.
    """

    def __init__(self, source: bytes) -> None:
        self.source = source
        self.line_starts: list[int] = [0]
        for line in source.splitlines(keepends=True):
            self.line_starts.append(self.line_starts[-1] + len(line))
        if source.startswith(codecs.BOM_UTF8):
            self.line_starts[0] = len(codecs.BOM_UTF8)

    def text(self, span: SourceSpan) -> str:
        start, end = span.to_offsets(self.line_starts)
        return self.source[start:end].decode("utf-8")

    @staticmethod
    def span_of(node: astroid.nodes.NodeNG) -> SourceSpan | None:
        lineno = getattr(node, "lineno", None)
        col_offset = getattr(node, "col_offset", None)
        end_lineno = getattr(node, "end_lineno", None)
        end_col_offset = getattr(node, "end_col_offset", None)
        if None in (lineno, col_offset, end_lineno, end_col_offset):
            return None
        return SourceSpan(lineno, col_offset, end_lineno, end_col_offset)

    @staticmethod
    def attribute_name_span(node: astroid.nodes.Attribute) -> SourceSpan | None:
        """Span of the `name` token in `expr.name`, falling back to the whole node."""
        end_lineno = getattr(node, "end_lineno", None)
        end_col_offset = getattr(node, "end_col_offset", None)
        if end_lineno is None or end_col_offset is None:
            lineno = getattr(node, "lineno", None)
            col_offset = getattr(node, "col_offset", None)
            if lineno is None or col_offset is None:
                return None
            return SourceSpan(lineno, col_offset, lineno, col_offset)
        start_col = end_col_offset - len(node.attrname.encode("utf-8"))
        return SourceSpan(end_lineno, max(start_col, 0), end_lineno, end_col_offset)

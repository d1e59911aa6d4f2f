"""Text splice Fixer Gateway."""

import codecs
import logging
from pathlib import Path

import libcst as cst

from store_getters_linter.domain.constants import DEEP_COPY_MODULE
from store_getters_linter.domain.entities import TextEdit
from store_getters_linter.domain.protocols import FixerGatewayProtocol
from store_getters_linter.domain.source_text import SourceText
from store_getters_linter.infrastructure.gateways.transformers import EnsureImportTransformer

logger = logging.getLogger(__name__)


class TextSpliceFixerGateway(FixerGatewayProtocol):
    """
    Applies TextEdits by splicing the original bytes.

    LibCST is only used to check the spliced result still parses and to add
    the `import copy` the replacement text needs; it round-trips everything
    else byte for byte.
    """

    def splice(self, source: bytes, edits: list[TextEdit]) -> bytes:
        """Return `source` with `edits` applied. Overlapping edits after the first are dropped."""
        line_starts = SourceText(source).line_starts
        located = sorted(
            ((edit.span.to_offsets(line_starts), edit) for edit in edits),
            key=lambda item: item[0],
        )

        accepted: list[tuple[int, int, TextEdit]] = []
        last_end = -1
        for (start, end), edit in located:
            if start < last_end:
                logger.debug("Skipping overlapping edit at %s; a rerun will pick it up", edit.span)
                continue
            accepted.append((start, end, edit))
            last_end = end

        result = source
        for start, end, edit in reversed(accepted):
            result = result[:start] + edit.replacement.encode("utf-8") + result[end:]
        return result

    def apply_edits(self, file_path: str, edits: list[TextEdit]) -> bool:
        """
        Apply edits to a file.

        Args:
            file_path: Path to the file to modify
            edits: TextEdits computed against the file's current content

        Returns:
            True if the file was modified, False otherwise
        """
        if not edits:
            return False
        path = Path(file_path)
        try:
            original = path.read_bytes()
        except OSError as exc:
            logger.warning("Cannot read %s: %s", file_path, exc)
            return False

        bom = codecs.BOM_UTF8 if original.startswith(codecs.BOM_UTF8) else b""
        try:
            spliced = self.splice(original, edits)
            module = cst.parse_module(spliced[len(bom):])
        except cst.ParserSyntaxError as exc:
            logger.warning("Fix for %s would not parse, leaving file untouched: %s", file_path, exc)
            return False
        except (IndexError, UnicodeDecodeError) as exc:
            logger.warning("Edits do not match the content of %s: %s", file_path, exc)
            return False

        module = module.visit(EnsureImportTransformer({"module": DEEP_COPY_MODULE}))
        new_bytes = bom + module.bytes
        if new_bytes == original:
            return False

        try:
            path.write_bytes(new_bytes)
        except OSError as exc:
            logger.warning("Cannot write %s: %s", file_path, exc)
            return False
        logger.info("Applied %d fix(es) to %s", len(edits), file_path)
        return True

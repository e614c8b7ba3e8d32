"""Text-edit based Fixer Gateway."""

import logging

from attribute_order_linter.domain.entities import EditScript, SourceRange
from attribute_order_linter.domain.protocols import FileSystemProtocol, FixerGatewayProtocol

logger = logging.getLogger(__name__)


class TextEditFixerGateway(FixerGatewayProtocol):
    """Gateway for applying edit scripts to template sources."""

    def __init__(self, filesystem: FileSystemProtocol) -> None:
        self._fs = filesystem

    @staticmethod
    def select_non_overlapping(scripts: list[EditScript]) -> list[EditScript]:
        """Keep scripts in order, dropping any whose span overlaps one already kept."""
        kept: list[EditScript] = []
        spans: list[SourceRange] = []
        for script in scripts:
            span = script.span
            if span is None:
                continue
            if any(span.overlaps(other) for other in spans):
                logger.debug("Skipping overlapping edit script at %s", span)
                continue
            kept.append(script)
            spans.append(span)
        return kept

    def apply_fixes(self, file_path: str, scripts: list[EditScript]) -> bool:
        """
        Apply a list of edit scripts to a file.

        Returns:
            True if the file was modified, False otherwise
        """
        try:
            source = self._fs.read_text(file_path)
        except OSError as exc:
            logger.error("Cannot read %s: %s", file_path, exc)
            return False

        merged = EditScript(
            edits=tuple(
                edit for script in self.select_non_overlapping(scripts) for edit in script.edits
            )
        )
        updated = merged.apply(source)
        if updated == source:
            return False
        try:
            self._fs.write_text(file_path, updated)
        except OSError as exc:
            logger.error("Cannot write %s: %s", file_path, exc)
            return False
        return True

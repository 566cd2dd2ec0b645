# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT feedback reader."""

from pathlib import Path

from odfdo import Document

from feedback_analysis.sources.base import SourceError


class OdtFeedbackReader:
    """Read ODT documents, one output line per paragraph or heading."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_text(self, path: Path) -> str:
        """Extract plain text from an ODT document.

        Whitespace inside a paragraph is normalized to single spaces. Empty
        paragraphs are dropped.
        """

        try:
            body = Document(path).body

            # Using XPath is more robust than `get_paragraphs()` for documents
            # converted from DOCX or containing formatted content (lists, tables,
            # frames, etc.).
            nodes = list(body.xpath(".//text:p | .//text:h"))
            if not nodes:
                nodes = list(body.get_paragraphs())

            lines = [" ".join(_node_text(n).split()) for n in nodes]
        except Exception as exc:  # noqa: BLE001
            raise SourceError(f"Failed to parse ODT file: {exc}", path=path) from exc

        return "\n".join(line for line in lines if line)


def _node_text(node: object) -> str:
    # odfdo Paragraph objects expose richer text via `inner_text` than via `.text`.
    for attr in ("inner_text", "text_recursive", "text"):
        value = getattr(node, attr, None)
        if callable(value):
            value = value()
        if value is not None:
            return str(value)
    return str(node)

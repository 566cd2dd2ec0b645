# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""TXT/Markdown feedback reader."""

from pathlib import Path

from feedback_analysis.sources.base import SourceError


class TextFeedbackReader:
    """Read .txt and .md files as UTF-8 text."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".txt", ".md"}

    def read_text(self, path: Path) -> str:
        try:
            raw = path.read_text(encoding="utf-8")
        except Exception as exc:  # noqa: BLE001
            raise SourceError(f"Failed to read text file: {exc}", path=path) from exc

        # A leading BOM would otherwise end up in the first sentence.
        return raw.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")

# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Feedback reader registry."""

from pathlib import Path

from feedback_analysis.config import ConfigError
from feedback_analysis.sources.base import FeedbackReader, SourceError
from feedback_analysis.sources.odt_reader import OdtFeedbackReader
from feedback_analysis.sources.text_reader import TextFeedbackReader


SUPPORTED_SUFFIXES = (".md", ".odt", ".txt")

_READERS: list[FeedbackReader] = [
    OdtFeedbackReader(),
    TextFeedbackReader(),
]


def get_feedback_reader(path: Path) -> FeedbackReader:
    """Select a feedback reader based on the file.

    Raises:
        ConfigError:
            If no reader supports the file.
    """

    for reader in _READERS:
        if reader.can_read(path):
            return reader

    raise ConfigError(f"Unsupported feedback format: {path} (supported: {', '.join(SUPPORTED_SUFFIXES)})")


def read_feedback_text(path: Path) -> str:
    """Read a feedback file and normalize errors to ConfigError."""

    reader = get_feedback_reader(path)
    try:
        return reader.read_text(path)
    except SourceError as exc:
        raise ConfigError(str(exc)) from exc

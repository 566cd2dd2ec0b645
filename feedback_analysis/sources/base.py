# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Feedback reader interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class FeedbackReader(Protocol):
    """Interface for feedback file readers.

    Implementations only extract raw text. Segmentation and everything after it
    is the job of the analysis pipeline.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        """Return the raw feedback text of the given file."""

        raise NotImplementedError


@dataclass(frozen=True)
class SourceError(RuntimeError):
    """Raised for feedback file reading errors."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:  # pragma: no cover
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message

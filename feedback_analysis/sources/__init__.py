"""Feedback file reading.

The CLI can read feedback from different source formats. Each reader converts
a file into one raw text block that is handed to the analysis pipeline
unchanged:

- `.txt` / `.md`: UTF-8 text with normalized line endings
- `.odt`: one line per document paragraph/heading
"""

from feedback_analysis.sources.base import FeedbackReader, SourceError
from feedback_analysis.sources.registry import SUPPORTED_SUFFIXES, get_feedback_reader, read_feedback_text

__all__ = [
    "FeedbackReader",
    "SourceError",
    "SUPPORTED_SUFFIXES",
    "get_feedback_reader",
    "read_feedback_text",
]

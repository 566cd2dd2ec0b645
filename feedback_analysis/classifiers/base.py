# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Helpers shared by all classifiers."""

import logging
import re
from typing import Callable, Iterable, Sequence, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


def two_phase(name: str, explicit: Callable[[], list[T]], implicit: Callable[[], list[T]]) -> list[T]:
    """
    Run the explicit phase and fall back to the implicit phase if it is empty.

    Args:
        name:
            Classifier name (for debug logging only).
        explicit:
            Keyword/pattern matching phase.
        implicit:
            Inference phase, called only if `explicit` returned nothing.

    Returns:
        The findings of whichever phase produced the result.
    """

    findings = explicit()
    if findings:
        logger.debug("%s: %d explicit finding(s)", name, len(findings))
        return findings

    findings = implicit()
    logger.debug("%s: no explicit findings, %d inferred", name, len(findings))
    return findings


def severity_tier(count: int) -> str:
    """Map a mention count to `high` (>= 3), `medium` (2) or `low`."""

    if count >= 3:
        return "high"
    if count >= 2:
        return "medium"
    return "low"


def intensity_tier(count: int) -> str:
    """Capitalized variant of `severity_tier` used for emotions."""

    return severity_tier(count).capitalize()


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return e.g. "1 mention" or "2 mentions"."""

    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"


def truncate(text: str, limit: int) -> str:
    """Cut text to `limit` characters and append "..." if it was longer."""

    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def keyword_matches(sentences: Sequence[str], keywords: Iterable[str]) -> list[int]:
    """Return positions of sentences containing at least one keyword."""

    keywords = tuple(keywords)
    return [
        idx
        for idx, sentence in enumerate(sentences)
        if any(k in sentence.lower() for k in keywords)
    ]


def pattern_matches(sentences: Sequence[str], patterns: Iterable[re.Pattern[str]]) -> list[int]:
    """Return positions of sentences matched by at least one pattern."""

    patterns = tuple(patterns)
    return [
        idx
        for idx, sentence in enumerate(sentences)
        if any(p.search(sentence) for p in patterns)
    ]

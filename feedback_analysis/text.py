# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Sentence segmentation, token normalization and sentence similarity.

The classifiers match keywords against raw (lowercased) sentences. The helpers
in this module only exist for the coarse similarity measure used by the
clusterer:

- sentences are split on runs of `.`, `!`, `?` and newlines,
- tokens are lowercase alphanumeric words longer than two characters,
- each token is reduced to a root form by stripping one known suffix.

The stemmer is deliberately approximate. Collisions such as "less" -> "" are
accepted behavior.
"""

import re


MIN_SENTENCE_LENGTH = 10
MIN_TOKEN_LENGTH = 2

# Order matters: the first matching suffix wins.
SUFFIXES: tuple[str, ...] = (
    "ing",
    "tion",
    "ment",
    "ness",
    "able",
    "ful",
    "less",
    "ous",
    "ive",
    "ly",
    "ed",
    "er",
    "es",
    "s",
)

_DELIMITER_RE = re.compile(r"[.!?\n]+")
_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")


def split_sentences(text: str) -> list[str]:
    """Split raw feedback text into candidate sentences.

    Args:
        text:
            Raw text. May contain empty lines and trailing whitespace.

    Returns:
        Trimmed sentences longer than ten characters, in input order.
    """

    if not text:
        return []

    sentences: list[str] = []
    for candidate in _DELIMITER_RE.split(text):
        cleaned = candidate.strip()
        if len(cleaned) > MIN_SENTENCE_LENGTH:
            sentences.append(cleaned)
    return sentences


def tokenize(sentence: str) -> list[str]:
    """Return the lowercase alphanumeric tokens of a sentence (length > 2)."""

    cleaned = _NON_WORD_RE.sub("", sentence.lower())
    return [t for t in cleaned.split() if len(t) > MIN_TOKEN_LENGTH]


def root_form(token: str) -> str:
    """Strip the first matching suffix from a token."""

    for suffix in SUFFIXES:
        if token.endswith(suffix):
            return token[: -len(suffix)]
    return token


def root_forms(sentence: str) -> set[str]:
    """Return the set of unique root forms of a sentence."""

    return {root_form(t) for t in tokenize(sentence)}


def similarity(a: str, b: str) -> float:
    """Overlap coefficient of the root-form sets of two sentences.

    The denominator is the size of the smaller set, so a short sentence that
    shares all of its roots with a longer one scores 1.0.

    Returns:
        A score in [0, 1]. 0.0 if either sentence has no tokens.
    """

    roots_a = root_forms(a)
    roots_b = root_forms(b)
    if not roots_a or not roots_b:
        return 0.0

    return len(roots_a & roots_b) / min(len(roots_a), len(roots_b))

# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Heuristic sentence sentiment.

Counts occurrences of negative and positive signal phrases and takes a strict
majority vote. Phrases are not weighted; ties are neutral.
"""

from collections import Counter
from typing import Iterable

from feedback_analysis.taxonomy import SentimentLexicon


POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"


def infer_sentiment(sentence: str, lexicon: SentimentLexicon) -> str:
    """Classify a sentence as `positive`, `negative` or `neutral`."""

    lowered = sentence.lower()
    negative = sum(lowered.count(phrase) for phrase in lexicon.negative)
    positive = sum(lowered.count(phrase) for phrase in lexicon.positive)

    if negative > positive:
        return NEGATIVE
    if positive > negative:
        return POSITIVE
    return NEUTRAL


def sentiment_counts(sentences: Iterable[str], lexicon: SentimentLexicon) -> Counter[str]:
    """Count sentences per sentiment label."""

    counts: Counter[str] = Counter({POSITIVE: 0, NEGATIVE: 0, NEUTRAL: 0})
    for sentence in sentences:
        counts[infer_sentiment(sentence, lexicon)] += 1
    return counts

# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Emotion classifier.

The implicit phase falls back to sentence sentiment: one finding per observed
polarity, and "Neutral Engagement" only for feedback that is neither positive
nor negative anywhere.
"""

from typing import Sequence

from feedback_analysis.classifiers.base import intensity_tier, keyword_matches, two_phase
from feedback_analysis.models import EmotionalPattern
from feedback_analysis.sentiment import NEGATIVE, NEUTRAL, POSITIVE, infer_sentiment
from feedback_analysis.taxonomy import Taxonomy


MAX_QUOTES = 3

_IMPLICIT_LABELS = (
    (NEGATIVE, "Implicit Dissatisfaction"),
    (POSITIVE, "Implicit Approval"),
)


def explicit_emotions(sentences: Sequence[str], taxonomy: Taxonomy) -> list[EmotionalPattern]:
    """Match emotion keywords, in taxonomy order."""

    out: list[EmotionalPattern] = []
    for spec in taxonomy.emotions:
        matches = [sentences[i] for i in keyword_matches(sentences, spec.keywords)]
        if not matches:
            continue
        out.append(_pattern(spec.emotion, spec.sentiment, matches))
    return out


def implicit_emotions(sentences: Sequence[str], taxonomy: Taxonomy) -> list[EmotionalPattern]:
    """Infer emotional patterns from aggregated sentence sentiment."""

    by_sentiment: dict[str, list[str]] = {POSITIVE: [], NEGATIVE: [], NEUTRAL: []}
    for sentence in sentences:
        by_sentiment[infer_sentiment(sentence, taxonomy.sentiment)].append(sentence)

    out = [
        _pattern(label, sentiment, by_sentiment[sentiment])
        for sentiment, label in _IMPLICIT_LABELS
        if by_sentiment[sentiment]
    ]

    if not out and by_sentiment[NEUTRAL]:
        out.append(_pattern("Neutral Engagement", NEUTRAL, by_sentiment[NEUTRAL]))

    return out


def classify_emotions(sentences: Sequence[str], taxonomy: Taxonomy) -> list[EmotionalPattern]:
    return two_phase(
        "emotions",
        lambda: explicit_emotions(sentences, taxonomy),
        lambda: implicit_emotions(sentences, taxonomy),
    )


def _pattern(emotion: str, sentiment: str, matches: Sequence[str]) -> EmotionalPattern:
    return EmotionalPattern(
        emotion=emotion,
        intensity=intensity_tier(len(matches)),
        trigger=matches[0] if matches else "",
        sentiment=sentiment,
        mentions=len(matches),
        quotes=tuple(matches[:MAX_QUOTES]),
    )

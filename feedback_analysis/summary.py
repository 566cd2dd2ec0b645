# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Executive summary text."""

from typing import Sequence

from feedback_analysis.classifiers.base import pluralize
from feedback_analysis.models import (
    BehavioralTheme,
    CognitiveBias,
    EmotionalPattern,
    PainPoint,
    Persona,
    Recommendation,
)
from feedback_analysis.personas import sentiment_balance


_PERSONA_WORDS = {1: "One", 2: "Two", 3: "Three"}


def generate_summary(
    pain_points: Sequence[PainPoint],
    emotional_patterns: Sequence[EmotionalPattern],
    behavioral_themes: Sequence[BehavioralTheme],
    cognitive_biases: Sequence[CognitiveBias],
    personas: Sequence[Persona],
    recommendations: Sequence[Recommendation],
) -> str:
    """Render the narrative summary paragraph from aggregate counts."""

    positive, negative = sentiment_balance(emotional_patterns)

    parts = [
        f"Analysis of user feedback reveals {pluralize(len(pain_points), 'key pain point')} "
        f"and {pluralize(len(emotional_patterns), 'distinct emotional pattern')}."
    ]

    if negative > positive:
        parts.append("Overall sentiment skews negative, suggesting urgent attention to core issues.")
    elif positive > negative:
        parts.append("Overall sentiment is positive, with targeted areas for improvement.")
    else:
        parts.append("Sentiment is mixed, indicating both strengths and areas needing attention.")

    if pain_points:
        top = pain_points[0]
        parts.append(f'The most critical issue is "{top.issue}" with {top.frequency}.')

    if cognitive_biases:
        count = len(cognitive_biases)
        verb = "were" if count > 1 else "was"
        parts.append(
            f"{pluralize(count, 'cognitive bias', 'cognitive biases')} {verb} detected, "
            "which should be considered when interpreting results."
        )

    if behavioral_themes:
        parts.append(f'The leading behavioral theme is "{behavioral_themes[0].theme}".')

    persona_count = _PERSONA_WORDS.get(len(personas), str(len(personas)))
    persona_noun = "persona was" if len(personas) == 1 else "personas were"
    parts.append(
        f"{persona_count} user {persona_noun} identified and "
        f"{pluralize(len(recommendations), 'recommendation')} "
        f"{'is' if len(recommendations) == 1 else 'are'} proposed to guide product strategy."
    )

    return " ".join(parts)

# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Persona synthesis.

Always produces the same two personas, adapted to the findings of one
analysis: an advocate (power user or frustrated loyalist) and an explorer
(a newcomer evaluating the product).
"""

from typing import Sequence

from feedback_analysis.models import EmotionalPattern, PainPoint, Persona
from feedback_analysis.sentiment import NEGATIVE, POSITIVE


ADVOCATE_FALLBACK_QUOTE = "I use this daily but there's room to grow."
EXPLORER_FALLBACK_QUOTE = "I just want it to be straightforward."

DEFAULT_FRUSTRATIONS = ("Inconsistent experience across workflows", "Unclear product direction")


def sentiment_balance(emotional_patterns: Sequence[EmotionalPattern]) -> tuple[int, int]:
    """Return `(positive, negative)` counts of emotional findings."""

    positive = sum(1 for e in emotional_patterns if e.sentiment == POSITIVE)
    negative = sum(1 for e in emotional_patterns if e.sentiment == NEGATIVE)
    return positive, negative


def synthesize_personas(
    sentences: Sequence[str],
    pain_points: Sequence[PainPoint],
    emotional_patterns: Sequence[EmotionalPattern],
) -> tuple[Persona, Persona]:
    """
    Build the advocate and explorer personas.

    Args:
        sentences:
            Segmented sentences of the analyzed text (quote source).
        pain_points:
            Pain points sorted by severity.
        emotional_patterns:
            Emotional findings (decide the advocate's role).

    Returns:
        Exactly two personas.
    """

    positive, negative = sentiment_balance(emotional_patterns)
    top_issues = [p.issue for p in pain_points[:2]]

    advocate = Persona(
        name="Alex the Advocate",
        role="Enthusiastic power user" if positive > negative else "Frustrated loyalist",
        goals=("Get work done efficiently", "Help improve the product", "Share with team"),
        frustrations=tuple(top_issues) if top_issues else DEFAULT_FRUSTRATIONS,
        quote=sentences[0] if sentences else ADVOCATE_FALLBACK_QUOTE,
    )

    explorer = Persona(
        name="Jordan the Explorer",
        role="Curious newcomer evaluating options",
        goals=("Understand the product quickly", "Compare with alternatives", "Find value fast"),
        frustrations=("Steep learning curve", *top_issues[:1]),
        quote=sentences[len(sentences) // 2] if sentences else EXPLORER_FALLBACK_QUOTE,
    )

    return advocate, explorer

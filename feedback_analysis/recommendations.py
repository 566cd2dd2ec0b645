# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Recommendation synthesis.

Recommendations are built in a fixed order and are not re-sorted afterwards:

1. up to three pain points (priorities high, medium, low),
2. up to two negative emotions that are not of low intensity,
3. up to two behavioral themes,
4. default recommendations until there are at least two.

A category is never recommended twice.
"""

from typing import Sequence

from feedback_analysis.classifiers.base import truncate
from feedback_analysis.models import BehavioralTheme, EmotionalPattern, PainPoint, Recommendation
from feedback_analysis.sentiment import NEGATIVE


MIN_RECOMMENDATIONS = 2
PAIN_PRIORITIES = ("high", "medium", "low")
MAX_EMOTION_RECOMMENDATIONS = 2
MAX_THEME_RECOMMENDATIONS = 2

DEFAULT_RECOMMENDATIONS: tuple[Recommendation, ...] = (
    Recommendation(
        priority="medium",
        category="User Research",
        action="Conduct deeper user interviews to uncover specific pain points",
        expected_impact="Better understanding of user needs for targeted improvements",
    ),
    Recommendation(
        priority="low",
        category="Feedback Loop",
        action="Set up a recurring feedback channel to track sentiment over time",
        expected_impact="Earlier detection of emerging issues",
    ),
)


def synthesize_recommendations(
    pain_points: Sequence[PainPoint],
    emotional_patterns: Sequence[EmotionalPattern],
    behavioral_themes: Sequence[BehavioralTheme],
) -> list[Recommendation]:
    """Build the recommendation list (at least two entries)."""

    out: list[Recommendation] = []

    for priority, pain in zip(PAIN_PRIORITIES, pain_points):
        if _has_category(out, pain.issue):
            continue
        out.append(
            Recommendation(
                priority=priority,
                category=pain.issue,
                action=f"Address {pain.issue.lower()} based on {pain.frequency} of user feedback",
                expected_impact=(
                    "Significant improvement in user satisfaction"
                    if pain.severity == "high"
                    else "Moderate positive impact on user experience"
                ),
            )
        )

    added = 0
    for emotion in emotional_patterns:
        if added >= MAX_EMOTION_RECOMMENDATIONS:
            break
        if emotion.sentiment != NEGATIVE or emotion.intensity == "Low":
            continue
        if any(emotion.emotion in r.category for r in out):
            continue

        trigger = f' such as "{truncate(emotion.trigger, 57)}"' if emotion.trigger else ""
        out.append(
            Recommendation(
                priority="high" if emotion.intensity == "High" else "medium",
                category=f"Emotional Friction: {emotion.emotion}",
                action=f"Investigate the moments that cause {emotion.emotion.lower()}{trigger}",
                expected_impact="Reduced negative sentiment and churn risk",
            )
        )
        added += 1

    added = 0
    for theme in behavioral_themes:
        if added >= MAX_THEME_RECOMMENDATIONS:
            break
        if _has_category(out, theme.theme):
            continue
        out.append(
            Recommendation(
                priority="medium",
                category=theme.theme,
                action=f"Design for {theme.user_segment.lower()}: {theme.description.lower()}",
                expected_impact="Better fit with how users actually work",
            )
        )
        added += 1

    for default in DEFAULT_RECOMMENDATIONS:
        if len(out) >= MIN_RECOMMENDATIONS:
            break
        if _has_category(out, default.category):
            continue
        out.append(default)

    return out


def _has_category(recommendations: Sequence[Recommendation], category: str) -> bool:
    return any(r.category == category for r in recommendations)

# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Report data model.

Findings, personas and recommendations are frozen dataclasses with tuple
fields. They are created once per analysis call and never modified afterwards.
`Report.to_dict()` converts the whole report into plain YAML/JSON-safe data.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class PainPoint:
    """
    A recurring problem reported by users.

    Attributes:
        issue:
            Pain point category (or an inferred issue excerpt).
        mentions:
            Number of mentions including the cluster boost.
        frequency:
            Human-readable mention count, e.g. "3 mentions".
        severity:
            `high`, `medium` or `low`.
        quotes:
            Up to two matching sentences.
    """

    issue: str
    mentions: int
    frequency: str
    severity: str
    quotes: tuple[str, ...] = ()


@dataclass(frozen=True)
class EmotionalPattern:
    """
    An emotion expressed across the feedback.

    Attributes:
        emotion:
            Emotion label.
        intensity:
            `High`, `Medium` or `Low`.
        trigger:
            First sentence expressing the emotion ("" if none).
        sentiment:
            `positive`, `negative` or `neutral`.
        mentions:
            Number of supporting sentences.
        quotes:
            Up to three supporting sentences.
    """

    emotion: str
    intensity: str
    trigger: str
    sentiment: str
    mentions: int = 0
    quotes: tuple[str, ...] = ()


@dataclass(frozen=True)
class BehavioralTheme:
    """A behavior pattern shared by a user segment."""

    theme: str
    description: str
    user_segment: str
    mentions: int = 0
    evidence: tuple[str, ...] = ()


@dataclass(frozen=True)
class CognitiveBias:
    """A bias that may distort how the feedback should be read."""

    bias: str
    evidence: str
    impact: str
    mentions: int = 0
    quotes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Persona:
    """A synthesized representative user."""

    name: str
    role: str
    goals: tuple[str, ...]
    frustrations: tuple[str, ...]
    quote: str


@dataclass(frozen=True)
class Recommendation:
    """A prioritized product action."""

    priority: str
    category: str
    action: str
    expected_impact: str


@dataclass(frozen=True)
class Report:
    """
    Result of one analysis call.

    Attributes:
        pain_points:
            Sorted by severity (high first), stable otherwise.
        emotional_patterns:
            Emotions in taxonomy order (or one implicit finding per polarity).
        behavioral_themes:
            Always at least two themes.
        cognitive_biases:
            Possibly empty.
        personas:
            Always exactly two personas.
        recommendations:
            At least two recommendations in construction order.
        executive_summary:
            Short narrative paragraph.
    """

    pain_points: tuple[PainPoint, ...]
    emotional_patterns: tuple[EmotionalPattern, ...]
    behavioral_themes: tuple[BehavioralTheme, ...]
    cognitive_biases: tuple[CognitiveBias, ...]
    personas: tuple[Persona, ...]
    recommendations: tuple[Recommendation, ...]
    executive_summary: str

    def to_dict(self) -> dict[str, Any]:
        """Return the report as plain dicts, lists, strings and ints."""

        return _plain(asdict(self))


def _plain(value: Any) -> Any:
    # asdict() keeps tuples; YAML would tag them as python/tuple.
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value

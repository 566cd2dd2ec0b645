# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Behavioral theme classifier.

Explicit phase: theme keywords are tested against the whole lowercased
document, theme patterns against each individual sentence. This mix of
document-level and sentence-level evidence is kept as is.

Implicit phase: eight pattern-based detectors (efficiency, exploration,
reliability, automation, evaluation, learning, habitual use, co-creation).

Whatever the phases produce is topped up to at least two themes, first from
recurring sentence clusters, then from fixed defaults.
"""

from typing import Sequence

from feedback_analysis.classifiers.base import keyword_matches, pattern_matches, truncate, two_phase
from feedback_analysis.clustering import FALLBACK_THRESHOLD, cluster_sentences
from feedback_analysis.models import BehavioralTheme
from feedback_analysis.taxonomy import Taxonomy, ThemeSpec


MIN_THEMES = 2
MAX_EVIDENCE = 2
EXCERPT_LENGTH = 47

DEFAULT_THEMES: tuple[BehavioralTheme, ...] = (
    BehavioralTheme(
        theme="Efficiency Seeking",
        description="Users prioritize speed and streamlined workflows",
        user_segment="All Users",
    ),
    BehavioralTheme(
        theme="Feature Exploration",
        description="Users actively discover and request new capabilities",
        user_segment="Engaged Users",
    ),
)


def explicit_themes(sentences: Sequence[str], lowered_text: str, taxonomy: Taxonomy) -> list[BehavioralTheme]:
    """Match theme keywords (document-level) and patterns (sentence-level)."""

    out: list[BehavioralTheme] = []
    for spec in taxonomy.themes:
        document_hit = any(k in lowered_text for k in spec.keywords)
        pattern_hits = pattern_matches(sentences, spec.patterns)
        if not document_hit and not pattern_hits:
            continue

        evidence = sorted(set(pattern_hits) | set(keyword_matches(sentences, spec.keywords)))
        out.append(_theme(spec, [sentences[i] for i in evidence]))
    return out


def implicit_themes(sentences: Sequence[str], taxonomy: Taxonomy) -> list[BehavioralTheme]:
    """Run the implicit theme detectors. Only used when no explicit theme fired."""

    out: list[BehavioralTheme] = []
    for spec in taxonomy.implicit_themes:
        hits = pattern_matches(sentences, spec.patterns)
        if hits:
            out.append(_theme(spec, [sentences[i] for i in hits]))
    return out


def top_up_themes(
    themes: Sequence[BehavioralTheme],
    sentences: Sequence[str],
    *,
    fallback_threshold: float = FALLBACK_THRESHOLD,
) -> list[BehavioralTheme]:
    """
    Ensure at least two themes.

    Recurring clusters (two or more sentences, largest first) are added before
    the fixed defaults. Labels already present are never added twice.
    """

    out = list(themes)
    if len(out) >= MIN_THEMES:
        return out

    labels = {t.theme for t in out}

    clusters = sorted(cluster_sentences(sentences, fallback_threshold), key=len, reverse=True)
    for members in clusters:
        if len(out) >= MIN_THEMES or len(members) < 2:
            break
        label = f"Recurring Theme: {truncate(members[0], EXCERPT_LENGTH)}"
        if label in labels:
            continue
        out.append(
            BehavioralTheme(
                theme=label,
                description="Users repeatedly return to the same topic in different words",
                user_segment="Vocal Users",
                mentions=len(members),
                evidence=tuple(members[:MAX_EVIDENCE]),
            )
        )
        labels.add(label)

    for default in DEFAULT_THEMES:
        if len(out) >= MIN_THEMES:
            break
        if default.theme in labels:
            continue
        out.append(default)
        labels.add(default.theme)

    return out


def classify_themes(
    sentences: Sequence[str],
    lowered_text: str,
    taxonomy: Taxonomy,
    *,
    fallback_threshold: float = FALLBACK_THRESHOLD,
) -> list[BehavioralTheme]:
    found = two_phase(
        "themes",
        lambda: explicit_themes(sentences, lowered_text, taxonomy),
        lambda: implicit_themes(sentences, taxonomy),
    )
    return top_up_themes(found, sentences, fallback_threshold=fallback_threshold)


def _theme(spec: ThemeSpec, evidence: Sequence[str]) -> BehavioralTheme:
    return BehavioralTheme(
        theme=spec.theme,
        description=spec.description,
        user_segment=spec.user_segment,
        # A document-level keyword may sit in a fragment too short to be a sentence.
        mentions=max(len(evidence), 1),
        evidence=tuple(evidence[:MAX_EVIDENCE]),
    )

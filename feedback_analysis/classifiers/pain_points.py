# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Pain point classifier.

Explicit phase: a taxonomy category is reported if at least one sentence
contains one of its keywords. The mention count gets a cluster boost so that
a problem repeated in similar but keyword-free phrasing counts for more than
one raw hit:

    boost = (sum of sizes of the clusters holding a match - matches) // 2

Implicit phase: negative sentences are clustered with the looser fallback
threshold and the first clusters become "Inferred Issue" pain points.
"""

from typing import Sequence

from feedback_analysis.classifiers.base import (
    keyword_matches,
    pluralize,
    severity_tier,
    truncate,
    two_phase,
)
from feedback_analysis.clustering import DEFAULT_THRESHOLD, FALLBACK_THRESHOLD, cluster_indices, cluster_sentences
from feedback_analysis.models import PainPoint
from feedback_analysis.sentiment import NEGATIVE, infer_sentiment
from feedback_analysis.taxonomy import Taxonomy


MAX_QUOTES = 2
MAX_INFERRED = 3
EXCERPT_LENGTH = 57

SEVERITY_RANK = {"high": 0, "medium": 1, "low": 2}


def explicit_pain_points(
    sentences: Sequence[str],
    taxonomy: Taxonomy,
    *,
    cluster_threshold: float = DEFAULT_THRESHOLD,
) -> list[PainPoint]:
    """Match pain point keywords and apply the cluster boost."""

    clusters = cluster_indices(sentences, cluster_threshold)
    cluster_of: dict[int, int] = {}
    for c_idx, members in enumerate(clusters):
        for s_idx in members:
            cluster_of[s_idx] = c_idx

    out: list[PainPoint] = []
    for spec in taxonomy.pain_points:
        matches = keyword_matches(sentences, spec.keywords)
        if not matches:
            continue

        touched = {cluster_of[i] for i in matches}
        clustered = sum(len(clusters[c]) for c in touched)
        mentions = len(matches) + (clustered - len(matches)) // 2

        out.append(
            PainPoint(
                issue=spec.issue,
                mentions=mentions,
                frequency=pluralize(mentions, "mention"),
                severity=severity_tier(mentions),
                quotes=tuple(sentences[i] for i in matches[:MAX_QUOTES]),
            )
        )

    return out


def implicit_pain_points(
    sentences: Sequence[str],
    taxonomy: Taxonomy,
    *,
    fallback_threshold: float = FALLBACK_THRESHOLD,
) -> list[PainPoint]:
    """Infer pain points from clusters of negative sentences."""

    negative = [s for s in sentences if infer_sentiment(s, taxonomy.sentiment) == NEGATIVE]
    if not negative:
        return []

    # First clusters in order of appearance. Ranking happens in sort_by_severity().
    clusters = cluster_sentences(negative, fallback_threshold)[:MAX_INFERRED]

    out: list[PainPoint] = []
    for members in clusters:
        size = len(members)
        out.append(
            PainPoint(
                issue=f"Inferred Issue: {truncate(members[0], EXCERPT_LENGTH)}",
                mentions=size,
                frequency=pluralize(size, "mention"),
                severity=severity_tier(size),
                quotes=tuple(members[:MAX_QUOTES]),
            )
        )
    return out


def sort_by_severity(pain_points: Sequence[PainPoint]) -> list[PainPoint]:
    """Sort high > medium > low, keeping the input order within a tier."""

    return sorted(pain_points, key=lambda p: SEVERITY_RANK.get(p.severity, len(SEVERITY_RANK)))


def classify_pain_points(
    sentences: Sequence[str],
    taxonomy: Taxonomy,
    *,
    cluster_threshold: float = DEFAULT_THRESHOLD,
    fallback_threshold: float = FALLBACK_THRESHOLD,
) -> list[PainPoint]:
    """Run both phases and sort the result by severity."""

    found = two_phase(
        "pain_points",
        lambda: explicit_pain_points(sentences, taxonomy, cluster_threshold=cluster_threshold),
        lambda: implicit_pain_points(sentences, taxonomy, fallback_threshold=fallback_threshold),
    )
    return sort_by_severity(found)

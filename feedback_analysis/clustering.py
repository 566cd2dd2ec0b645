# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Greedy sentence clustering.

Clusters are formed in a single pass. Each unassigned sentence seeds a new
cluster and absorbs every later unassigned sentence that is similar enough to
the seed. Members are only ever compared against the seed, so two members of
the same cluster can be dissimilar to each other. Downstream counts depend on
exactly this shape; do not replace it with transitive single-linkage.
"""

from typing import Sequence

from feedback_analysis.text import similarity


DEFAULT_THRESHOLD = 0.35
FALLBACK_THRESHOLD = 0.25


def cluster_indices(sentences: Sequence[str], threshold: float = DEFAULT_THRESHOLD) -> list[list[int]]:
    """Cluster sentences and return clusters as lists of sentence positions.

    Positions are used instead of the sentence text so duplicate sentences
    stay distinguishable.
    """

    assigned = [False] * len(sentences)
    clusters: list[list[int]] = []

    for seed_idx, seed in enumerate(sentences):
        if assigned[seed_idx]:
            continue

        assigned[seed_idx] = True
        members = [seed_idx]

        for other_idx in range(seed_idx + 1, len(sentences)):
            if assigned[other_idx]:
                continue
            if similarity(seed, sentences[other_idx]) >= threshold:
                assigned[other_idx] = True
                members.append(other_idx)

        clusters.append(members)

    return clusters


def cluster_sentences(sentences: Sequence[str], threshold: float = DEFAULT_THRESHOLD) -> list[list[str]]:
    """Partition sentences into ordered clusters.

    Args:
        sentences:
            Sentences in input order.
        threshold:
            Minimum similarity to the seed for a sentence to be absorbed.

    Returns:
        Ordered clusters. Every input sentence appears in exactly one cluster.
    """

    return [[sentences[i] for i in members] for members in cluster_indices(sentences, threshold)]

"""
Unit tests for greedy seed-based clustering.
"""

import pytest

from feedback_analysis.clustering import cluster_indices, cluster_sentences


def test_every_sentence_in_exactly_one_cluster():
    """Test that clustering partitions the input."""
    sentences = [
        "The invoice screen shows wrong totals",
        "Exporting reports takes forever",
        "The invoice screen shows wrong dates",
        "Dark mode would be lovely",
    ]

    clusters = cluster_indices(sentences, 0.35)
    flat = sorted(i for members in clusters for i in members)

    assert flat == [0, 1, 2, 3]
    assert clusters[0] == [0, 2]


def test_members_are_compared_against_seed_only():
    """Test that a sentence similar to a member but not to the seed is not absorbed."""
    seed = "alpha beta gamma delta"
    member = "gamma delta epsilon zeta"  # 2/4 with seed
    outsider = "epsilon zeta theta iota"  # 0 with seed, 2/4 with member

    clusters = cluster_sentences([seed, member, outsider], 0.5)

    assert clusters == [[seed, member], [outsider]]


def test_duplicate_sentences_stay_distinct():
    """Test that duplicates are tracked by position."""
    sentence = "The export button is broken again"

    assert cluster_indices([sentence, sentence], 0.35) == [[0, 1]]


def test_threshold_controls_membership():
    """Test that a looser threshold merges more sentences."""
    a = "dashboard loads slowly"
    b = "dashboard crashes often"

    assert len(cluster_sentences([a, b], 0.35)) == 2
    assert len(cluster_sentences([a, b], 0.25)) == 1


def test_empty_input():
    """Test that no sentences yield no clusters."""
    assert cluster_sentences([]) == []


PARTITION_INPUT = [
    "The invoice screen shows wrong totals",
    "Exporting reports takes forever",
    "The invoice screen shows wrong totals",
    "Dark mode would be lovely",
    "Exporting reports takes forever and fails",
    "ok",
]


@pytest.mark.parametrize("threshold", [0.0, 0.25, 0.35, 0.5, 1.0])
def test_partition_holds_for_any_threshold(threshold):
    """Test that every position lands in exactly one cluster, duplicates included."""
    clusters = cluster_indices(PARTITION_INPUT, threshold)
    flat = sorted(i for members in clusters for i in members)

    assert flat == list(range(len(PARTITION_INPUT)))
    assert all(members for members in clusters)
    assert [members[0] for members in clusters] == sorted(members[0] for members in clusters)

"""
End-to-end tests for `analyze()`.
"""

import pytest

from feedback_analysis import analyze
from feedback_analysis.config import AnalysisOptions


SEVERITY_RANK = {"high": 0, "medium": 1, "low": 2}

SAMPLE = """
The app is slow. I love the reporting feature. Support never answers tickets.
"""

LONG_SAMPLE = """
Loading the dashboard is slow every single morning.
The dashboard loading is slow and I wait for minutes.
I love the new charts, they look amazing.
Everything feels laggy after the update.
Support never answers my tickets and the response time is terrible.
I export everything to spreadsheets manually because the API is missing.
Our team shares reports with clients, so sharing should be easier.
"""


def test_reference_scenario():
    """Test the findings for a short mixed feedback text."""
    report = analyze(SAMPLE)

    pains = {p.issue: p for p in report.pain_points}
    assert pains["Performance & Speed Issues"].mentions == 1
    assert pains["Performance & Speed Issues"].severity == "low"
    assert pains["Customer Support Quality"].mentions == 1
    assert pains["Customer Support Quality"].severity == "low"

    emotions = {e.emotion: e for e in report.emotional_patterns}
    assert emotions["Delight"].sentiment == "positive"
    assert emotions["Delight"].trigger == "I love the reporting feature"

    biases = {b.bias: b for b in report.cognitive_biases}
    assert "never" in biases["Frequency Illusion"].evidence


def test_short_input_yields_fallback_report():
    """Test a text without any sentence longer than ten characters."""
    report = analyze("Hi.")

    assert report.pain_points == ()
    assert report.emotional_patterns == ()
    assert len(report.behavioral_themes) == 2
    assert len(report.personas) == 2
    assert len(report.recommendations) >= 2
    assert report.executive_summary.startswith(
        "Analysis of user feedback reveals 0 key pain points and 0 distinct emotional patterns."
    )


@pytest.mark.parametrize("raw", [None, "", "   \n\n  ", "!!!???..."])
def test_degenerate_input_never_raises(raw):
    """Test that empty or delimiter-only input produces a complete report."""
    report = analyze(raw)

    assert report.pain_points == ()
    assert len(report.behavioral_themes) >= 2
    assert len(report.recommendations) >= 2
    assert report.executive_summary


@pytest.mark.parametrize("raw", [SAMPLE, LONG_SAMPLE, "Hi."])
def test_report_invariants(raw):
    """Test the structural guarantees of every report."""
    report = analyze(raw)

    assert [p.name for p in report.personas] == ["Alex the Advocate", "Jordan the Explorer"]
    assert len(report.behavioral_themes) >= 2
    assert len(report.recommendations) >= 2

    ranks = [SEVERITY_RANK[p.severity] for p in report.pain_points]
    assert ranks == sorted(ranks)

    categories = [r.category for r in report.recommendations]
    assert len(categories) == len(set(categories))

    for pain in report.pain_points:
        assert 1 <= len(pain.quotes) <= 2
    for emotion in report.emotional_patterns:
        assert emotion.intensity in {"High", "Medium", "Low"}
        assert len(emotion.quotes) <= 3


def test_repeated_pain_point_is_high_severity():
    """Test that repeated performance complaints rank first."""
    report = analyze(LONG_SAMPLE)

    top = report.pain_points[0]
    assert top.issue == "Performance & Speed Issues"
    assert top.severity == "high"
    assert report.recommendations[0].category == "Performance & Speed Issues"
    assert report.recommendations[0].priority == "high"


def test_analyze_is_deterministic():
    """Test that the same input yields the same report."""
    assert analyze(LONG_SAMPLE) == analyze(LONG_SAMPLE)


def test_options_change_clustering():
    """Test that a threshold of 1.0 disables the cluster boost for partial overlaps."""
    text = (
        "Editor crash loses my unsaved drafts. "
        "Editor freezes and loses my unsaved drafts. "
        "Editor hangs and loses my unsaved drafts."
    )

    boosted = {p.issue: p for p in analyze(text).pain_points}
    strict = {
        p.issue: p
        for p in analyze(text, options=AnalysisOptions(cluster_threshold=1.0)).pain_points
    }

    assert boosted["Reliability & Bugs"].mentions == 2
    assert strict["Reliability & Bugs"].mentions == 1


def test_to_dict_is_plain_data():
    """Test that the serialized report only holds lists, dicts, strings and ints."""
    data = analyze(SAMPLE).to_dict()

    assert set(data) == {
        "pain_points",
        "emotional_patterns",
        "behavioral_themes",
        "cognitive_biases",
        "personas",
        "recommendations",
        "executive_summary",
    }
    assert isinstance(data["personas"][0]["goals"], list)
    assert isinstance(data["pain_points"][0]["quotes"], list)

"""
Unit tests for personas, recommendations and the executive summary.
"""

import pytest

from feedback_analysis.classifiers.themes import DEFAULT_THEMES
from feedback_analysis.models import BehavioralTheme, CognitiveBias, EmotionalPattern, PainPoint
from feedback_analysis.personas import synthesize_personas
from feedback_analysis.recommendations import synthesize_recommendations
from feedback_analysis.summary import generate_summary


def _pain(issue, mentions, severity):
    frequency = "1 mention" if mentions == 1 else f"{mentions} mentions"
    return PainPoint(issue=issue, mentions=mentions, frequency=frequency, severity=severity)


def _emotion(name, sentiment, intensity="Low", trigger=""):
    return EmotionalPattern(emotion=name, intensity=intensity, trigger=trigger, sentiment=sentiment)


@pytest.fixture
def pain_points():
    return [
        _pain("Performance & Speed Issues", 3, "high"),
        _pain("Pricing Concerns", 2, "medium"),
        _pain("Mobile Experience", 1, "low"),
        _pain("Missing Features", 1, "low"),
    ]


def test_personas_for_positive_feedback(pain_points):
    """Test the advocate role and quotes for positive feedback."""
    sentences = ["First sentence here", "Second sentence here", "Third sentence here"]
    emotions = [_emotion("Delight", "positive"), _emotion("Trust", "positive"), _emotion("Confusion", "negative")]

    advocate, explorer = synthesize_personas(sentences, pain_points, emotions)

    assert advocate.name == "Alex the Advocate"
    assert advocate.role == "Enthusiastic power user"
    assert advocate.frustrations == ("Performance & Speed Issues", "Pricing Concerns")
    assert advocate.quote == "First sentence here"
    assert explorer.name == "Jordan the Explorer"
    assert explorer.role == "Curious newcomer evaluating options"
    assert explorer.frustrations == ("Steep learning curve", "Performance & Speed Issues")
    assert explorer.quote == "Second sentence here"


def test_personas_for_empty_feedback():
    """Test the fallbacks without sentences and findings."""
    advocate, explorer = synthesize_personas([], [], [])

    assert advocate.role == "Frustrated loyalist"
    assert advocate.frustrations == ("Inconsistent experience across workflows", "Unclear product direction")
    assert advocate.quote == "I use this daily but there's room to grow."
    assert explorer.frustrations == ("Steep learning curve",)
    assert explorer.quote == "I just want it to be straightforward."


def test_recommendations_from_pain_points(pain_points):
    """Test that the top three pain points become prioritized recommendations."""
    recommendations = synthesize_recommendations(pain_points, [], [])

    assert [(r.priority, r.category) for r in recommendations] == [
        ("high", "Performance & Speed Issues"),
        ("medium", "Pricing Concerns"),
        ("low", "Mobile Experience"),
    ]
    assert recommendations[0].action == (
        "Address performance & speed issues based on 3 mentions of user feedback"
    )


def test_recommendations_from_negative_emotions_and_themes():
    """Test emotion and theme recommendations after the pain points."""
    emotions = [
        _emotion("Frustration", "negative", "High", "I hate the login flow"),
        _emotion("Confusion", "negative", "Low"),
        _emotion("Delight", "positive", "High"),
    ]

    recommendations = synthesize_recommendations([_pain("Pricing Concerns", 1, "low")], emotions, DEFAULT_THEMES)

    assert [(r.priority, r.category) for r in recommendations] == [
        ("high", "Pricing Concerns"),
        ("high", "Emotional Friction: Frustration"),
        ("medium", "Efficiency Seeking"),
        ("medium", "Feature Exploration"),
    ]
    assert 'such as "I hate the login flow"' in recommendations[1].action


def test_recommendation_defaults():
    """Test that at least two recommendations are always returned."""
    recommendations = synthesize_recommendations([], [], [])

    assert [r.category for r in recommendations] == ["User Research", "Feedback Loop"]


def test_recommendation_categories_are_unique():
    """Test that a theme with the same label as a pain point is skipped."""
    theme = BehavioralTheme(theme="Pricing Concerns", description="Costs matter", user_segment="All Users")

    recommendations = synthesize_recommendations([_pain("Pricing Concerns", 1, "low")], [], [theme])

    categories = [r.category for r in recommendations]
    assert len(categories) == len(set(categories))
    assert categories == ["Pricing Concerns", "User Research"]


def test_summary_mentions_counts_and_top_issue(pain_points):
    """Test the narrative summary for negative feedback."""
    emotions = [_emotion("Frustration", "negative")]
    bias = CognitiveBias(bias="Frequency Illusion", evidence="", impact="")
    personas = synthesize_personas([], pain_points, emotions)
    recommendations = synthesize_recommendations(pain_points, emotions, DEFAULT_THEMES)

    summary = generate_summary(pain_points, emotions, DEFAULT_THEMES, [bias], personas, recommendations)

    assert summary.startswith(
        "Analysis of user feedback reveals 4 key pain points and 1 distinct emotional pattern."
    )
    assert "Overall sentiment skews negative" in summary
    assert 'The most critical issue is "Performance & Speed Issues" with 3 mentions.' in summary
    assert "1 cognitive bias was detected" in summary
    assert 'The leading behavioral theme is "Efficiency Seeking".' in summary
    assert summary.endswith(
        "Two user personas were identified and 5 recommendations are proposed to guide product strategy."
    )


def test_summary_for_mixed_sentiment():
    """Test the mixed sentiment sentence and omitted clauses."""
    summary = generate_summary([], [], [], [], [], [])

    assert "Sentiment is mixed" in summary
    assert "most critical issue" not in summary
    assert "cognitive bias" not in summary

"""
Unit tests for the heuristic sentence sentiment.
"""

from feedback_analysis.sentiment import NEGATIVE, NEUTRAL, POSITIVE, infer_sentiment, sentiment_counts


def test_strict_majority(taxonomy):
    """Test that the phrase counts decide the polarity."""
    lexicon = taxonomy.sentiment

    assert infer_sentiment("The export is broken and slow", lexicon) == NEGATIVE
    assert infer_sentiment("Great tool, really easy to use", lexicon) == POSITIVE
    assert infer_sentiment("We opened the dashboard on Monday", lexicon) == NEUTRAL


def test_tie_is_neutral(taxonomy):
    """Test that equal counts are neutral."""
    assert infer_sentiment("Good idea but slow", taxonomy.sentiment) == NEUTRAL


def test_occurrences_are_counted(taxonomy):
    """Test that repeated phrases count more than once."""
    assert infer_sentiment("Slow, slow, slow but nice", taxonomy.sentiment) == NEGATIVE


def test_sentiment_counts_contains_all_labels(taxonomy):
    """Test that the counter always carries all three labels."""
    counts = sentiment_counts(["I love it so much"], taxonomy.sentiment)

    assert counts[POSITIVE] == 1
    assert counts[NEGATIVE] == 0
    assert counts[NEUTRAL] == 0

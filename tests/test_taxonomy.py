"""
Unit tests for taxonomy loading and validation.
"""

import pytest
import yaml

from feedback_analysis.config import ConfigError
from feedback_analysis.taxonomy import load_taxonomy, parse_taxonomy, taxonomy_hash


MINIMAL = {
    "pain_points": [{"issue": "Speed", "keywords": ["Slow"]}],
    "emotions": [{"emotion": "Anger", "sentiment": "negative", "keywords": ["angry"]}],
    "biases": [{"bias": "Frequency Illusion", "impact": "Overstated", "keywords": ["always"]}],
    "implicit_biases": [{"bias": "Absolutist", "impact": "Exaggerated", "patterns": [r"\bnever\b"]}],
    "themes": [{"theme": "Teams", "description": "Sharing", "user_segment": "Teams", "keywords": ["team"]}],
    "implicit_themes": [
        {
            "key": "daily",
            "theme": "Habit",
            "description": "Daily use",
            "user_segment": "Daily Users",
            "patterns": [r"\bdaily\b"],
        }
    ],
    "sentiment": {"negative": ["bad"], "positive": ["good"]},
}


def test_default_taxonomy_sections(taxonomy):
    """Test the size of the packaged tables."""
    assert len(taxonomy.pain_points) == 8
    assert len(taxonomy.emotions) == 6
    assert len(taxonomy.biases) == 5
    assert [b.bias for b in taxonomy.implicit_biases] == ["Absolutist Thinking", "Comparative Framing"]
    assert len(taxonomy.themes) == 8
    assert [t.key for t in taxonomy.implicit_themes] == [
        "efficiency",
        "exploration",
        "reliability",
        "automation",
        "evaluation",
        "learning",
        "habitual_use",
        "co_creation",
    ]


def test_keywords_are_lowercased():
    """Test keyword normalization."""
    taxonomy = parse_taxonomy(MINIMAL)

    assert taxonomy.pain_points[0].keywords == ("slow",)


def test_patterns_are_case_insensitive():
    """Test that patterns are compiled with IGNORECASE."""
    taxonomy = parse_taxonomy(MINIMAL)

    assert taxonomy.implicit_biases[0].patterns[0].search("NEVER again")


def test_invalid_sentiment_is_rejected():
    """Test validation of emotion polarity."""
    raw = dict(MINIMAL, emotions=[{"emotion": "Anger", "sentiment": "angry", "keywords": ["mad"]}])

    with pytest.raises(ConfigError, match=r"emotions\[1\]\.sentiment"):
        parse_taxonomy(raw)


def test_invalid_pattern_is_rejected():
    """Test that broken regular expressions are reported with their location."""
    raw = dict(MINIMAL, implicit_biases=[{"bias": "X", "impact": "Y", "patterns": ["(unclosed"]}])

    with pytest.raises(ConfigError, match=r"implicit_biases\[1\]\.patterns\[1\]"):
        parse_taxonomy(raw)


def test_theme_needs_keywords_or_patterns():
    """Test that an empty theme entry is rejected."""
    raw = dict(MINIMAL, themes=[{"theme": "Empty", "description": "d", "user_segment": "s"}])

    with pytest.raises(ConfigError):
        parse_taxonomy(raw)


def test_missing_section_is_rejected():
    """Test that every section is required."""
    raw = {k: v for k, v in MINIMAL.items() if k != "sentiment"}

    with pytest.raises(ConfigError, match="sentiment"):
        parse_taxonomy(raw)


def test_load_taxonomy_from_file(tmp_path):
    """Test loading a custom taxonomy file."""
    path = tmp_path / "taxonomy.yaml"
    path.write_text(yaml.safe_dump(MINIMAL), encoding="utf-8")

    taxonomy = load_taxonomy(path)

    assert taxonomy.themes[0].theme == "Teams"


def test_load_taxonomy_missing_file(tmp_path):
    """Test the error for a missing file."""
    with pytest.raises(ConfigError, match="not found"):
        load_taxonomy(tmp_path / "missing.yaml")


def test_taxonomy_hash_is_stable(taxonomy):
    """Test that the hash depends on content only."""
    assert taxonomy_hash(parse_taxonomy(MINIMAL)) == taxonomy_hash(parse_taxonomy(MINIMAL))
    assert taxonomy_hash(parse_taxonomy(MINIMAL)) != taxonomy_hash(taxonomy)

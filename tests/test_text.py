"""
Unit tests for sentence segmentation, tokenization and similarity.
"""

import pytest

from feedback_analysis.text import root_form, root_forms, similarity, split_sentences, tokenize


def test_split_sentences_on_punctuation_and_newlines():
    """Test that runs of delimiters split sentences and short fragments are dropped."""
    text = "The export is slow!!! Why?\nLoading takes ages... ok."

    assert split_sentences(text) == ["The export is slow", "Loading takes ages"]


def test_split_sentences_trims_and_requires_more_than_ten_characters():
    """Test the length limit applies to the trimmed fragment."""
    # exactly 10 characters is not enough
    assert split_sentences("   abcdefghij   .") == []
    assert split_sentences("abcdefghijk.") == ["abcdefghijk"]


def test_split_sentences_empty_input():
    """Test that empty text yields no sentences."""
    assert split_sentences("") == []
    assert split_sentences("Hi.") == []
    assert split_sentences("\n\n  \n") == []


def test_tokenize_drops_punctuation_and_short_tokens():
    """Test lowercasing, character filtering and the minimum token length."""
    assert tokenize("I can't LOG in to my account!") == ["cant", "log", "account"]


def test_root_form_strips_first_matching_suffix():
    """Test suffix priority order."""
    assert root_form("loading") == "load"
    assert root_form("notification") == "notifica"
    assert root_form("payment") == "pay"
    assert root_form("quickly") == "quick"
    assert root_form("crashes") == "crash"
    assert root_form("reports") == "report"
    assert root_form("sync") == "sync"


def test_root_form_accepts_collisions():
    """Test that the approximate stemmer may strip a whole token."""
    assert root_form("less") == ""


def test_root_forms_are_unique():
    """Test that root forms are collected as a set."""
    assert root_forms("Reports and report exports") == {"report", "and", "export"}


def test_similarity_uses_smaller_set_as_denominator():
    """Test that a short sentence fully contained in a longer one scores 1.0."""
    assert similarity("slow exports", "the exports are really slow today") == 1.0


def test_similarity_partial_overlap():
    """Test overlap ratio for partially matching sentences."""
    a = "dashboard loads slowly"  # {dashboard, load, slow}
    b = "dashboard crashes often"  # {dashboard, crash, often}

    assert similarity(a, b) == 1 / 3


def test_similarity_without_tokens_is_zero():
    """Test that sentences without usable tokens never match."""
    assert similarity("ok", "the export is slow") == 0.0
    assert similarity("", "") == 0.0


MIXED_LENGTH_PAIRS = [
    ("slow exports", "the exports are really slow today"),
    ("dashboard loads slowly", "dashboard crashes often"),
    ("Search never finds the invoice I need", "invoice search"),
    ("billing", "The billing page times out every single morning"),
    ("ok", "the export is slow"),
]


@pytest.mark.parametrize(("a", "b"), MIXED_LENGTH_PAIRS)
def test_similarity_is_symmetric(a, b):
    """Test that argument order never changes the score."""
    assert similarity(a, b) == similarity(b, a)


@pytest.mark.parametrize(
    "sentence",
    [
        "The export button is broken again",
        "Search never finds the invoice I need",
        "dashboard loads slowly",
    ],
)
def test_similarity_is_reflexive(sentence):
    """Test that a sentence with tokens is fully similar to itself."""
    assert similarity(sentence, sentence) == 1.0

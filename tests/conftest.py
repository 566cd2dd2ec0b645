"""Shared fixtures for the feedback analysis tests."""

import pytest

from feedback_analysis.taxonomy import default_taxonomy


@pytest.fixture
def taxonomy():
    """Packaged default taxonomy."""
    return default_taxonomy()

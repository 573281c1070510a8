"""Shared test fixtures for the relevance backend test suite."""

import pytest

from app.utils.stemming import identity_stem


@pytest.fixture
def stem():
    """No-op stemmer so algorithm tests do not depend on Porter rules."""
    return identity_stem

"""Tests for tokenisation and word similarity."""

import pytest

from app.utils.stemming import porter_stem
from app.utils.text_similarity import is_fuzzy_match, tokenize, word_similarity


def test_tokenize_lowercases_and_splits_on_hyphens_and_underscores():
    assert tokenize("Don't Stop-Me_now!!") == ["dont", "stop", "me", "now"]


def test_tokenize_removes_curly_apostrophes_without_space():
    assert tokenize("L’Attaque des Titans") == ["lattaque", "des", "titans"]


def test_tokenize_replaces_punctuation_runs_with_space():
    assert tokenize("Re:Zero -- Starting Life...") == ["re", "zero", "starting", "life"]


def test_tokenize_collapses_whitespace():
    assert tokenize("  A   B  ") == ["a", "b"]


@pytest.mark.parametrize("text", ["", "   ", "!!! ...", "---", "''"])
def test_tokenize_returns_empty_for_no_word_content(text):
    assert tokenize(text) == []


def test_similarity_identical_stems(stem):
    assert word_similarity("naruto", "naruto", stem) == 1.0


def test_similarity_substring_is_fixed_constant(stem):
    assert word_similarity("ninja", "ninjas", stem) == 0.8
    assert word_similarity("ninjas", "ninja", stem) == 0.8
    # Length does not matter for substring matches
    assert word_similarity("a", "abcdefghij", stem) == 0.8


def test_similarity_edit_distance_ratio(stem):
    assert word_similarity("naruto", "narutu", stem) == pytest.approx(5 / 6)


def test_similarity_between_floor_and_fuzzy_threshold_is_kept(stem):
    similarity = word_similarity("naruto", "narotu", stem)

    assert similarity == pytest.approx(4 / 6)
    assert not is_fuzzy_match("naruto", "narotu", stem)


def test_similarity_below_floor_is_clamped_to_zero(stem):
    assert word_similarity("cat", "dog", stem) == 0.0
    assert word_similarity("abcde", "abxyz", stem) == 0.0


def test_fuzzy_match_threshold_is_inclusive(stem):
    assert word_similarity("abcdefghij", "abcdefgxyz", stem) == 0.7
    assert is_fuzzy_match("abcdefghij", "abcdefgxyz", stem)


def test_similarity_compares_stems():
    assert word_similarity("ninjas", "ninja", porter_stem) == 1.0


def test_similarity_is_symmetric_for_sample_pairs(stem):
    pairs = [("naruto", "narutu"), ("ninja", "ninjas"), ("bleach", "blaech"), ("x", "y")]
    for a, b in pairs:
        assert word_similarity(a, b, stem) == word_similarity(b, a, stem)

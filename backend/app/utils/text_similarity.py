"""Tokenisation and fuzzy word similarity for title relevance."""

import re

from rapidfuzz.distance import Levenshtein

from app.utils.stemming import StemFunc

# Similarity at or above this counts as a fuzzy match in structural checks.
FUZZY_MATCH_THRESHOLD = 0.7
# Edit-distance ratios below this are clamped to zero.
SIMILARITY_FLOOR = 0.6
SUBSTRING_SIMILARITY = 0.8

_APOSTROPHES = re.compile(r"['’]")
_NON_WORD = re.compile(r"[^\w\s-]+")
_SEPARATORS = re.compile(r"[\s\-_]+")


def tokenize(text: str) -> list[str]:
    """Lowercase, drop apostrophes and punctuation, and split into words.

    Examples:
        >>> tokenize("Don't Stop-Me_now!!")
        ['dont', 'stop', 'me', 'now']
        >>> tokenize("?!")
        []
    """
    text = text.lower()
    text = _APOSTROPHES.sub("", text)
    # Punctuation runs become a single space; hyphens survive until the split
    text = _NON_WORD.sub(" ", text)
    return [word for word in _SEPARATORS.split(text) if word]


def word_similarity(word_a: str, word_b: str, stem: StemFunc) -> float:
    """Similarity of two words in [0.0, 1.0] after stemming.

    Rules, first match wins:
        1. identical stems -> 1.0
        2. one stem contains the other -> 0.8 (fixed, not length-scaled)
        3. Levenshtein ratio of the stems if it reaches 0.6, else 0.0
    """
    stem_a = stem(word_a)
    stem_b = stem(word_b)

    if stem_a == stem_b:
        return 1.0

    if stem_a in stem_b or stem_b in stem_a:
        return SUBSTRING_SIMILARITY

    max_len = max(len(stem_a), len(stem_b))
    distance = Levenshtein.distance(stem_a, stem_b)
    ratio = (max_len - distance) / max_len

    if ratio >= SIMILARITY_FLOOR:
        return ratio
    return 0.0


def is_fuzzy_match(word_a: str, word_b: str, stem: StemFunc) -> bool:
    return word_similarity(word_a, word_b, stem) >= FUZZY_MATCH_THRESHOLD

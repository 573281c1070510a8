"""Structural matchers over stemmed title and query word sequences.

Each check is independent and uses the fuzzy-match predicate from
``app.utils.text_similarity``; the scorer composes them in priority order.
"""

from app.utils.stemming import StemFunc
from app.utils.text_similarity import is_fuzzy_match, word_similarity


def find_adjacent_sequence(
    title_words: list[str], query_words: list[str], stem: StemFunc
) -> int | None:
    """Return the first index where the query words fuzzily match a
    contiguous window of the title, or ``None``."""
    if not query_words or len(title_words) < len(query_words):
        return None

    for start in range(len(title_words) - len(query_words) + 1):
        if all(
            is_fuzzy_match(query_word, title_words[start + offset], stem)
            for offset, query_word in enumerate(query_words)
        ):
            return start
    return None


def words_appear_in_order(
    title_words: list[str], query_words: list[str], stem: StemFunc
) -> bool:
    """Greedy left-to-right check that query words occur in title order.

    Each query word consumes title words up to and including its first fuzzy
    match. Running off the end of the title before the last query word fails.
    """
    title_index = 0
    last = len(query_words) - 1
    for i, query_word in enumerate(query_words):
        while title_index < len(title_words):
            matched = is_fuzzy_match(query_word, title_words[title_index], stem)
            title_index += 1
            if matched:
                break
        if title_index == len(title_words) and i < last:
            return False
    return True


def has_fuzzy_match(query_word: str, title_words: list[str], stem: StemFunc) -> bool:
    return any(is_fuzzy_match(query_word, title_word, stem) for title_word in title_words)


def all_words_present(
    title_words: list[str], query_words: list[str], stem: StemFunc
) -> bool:
    """Every query word fuzzily matches some title word (reuse allowed)."""
    return all(has_fuzzy_match(word, title_words, stem) for word in query_words)


def count_matched_words(
    title_words: list[str], query_words: list[str], stem: StemFunc
) -> int:
    return sum(1 for word in query_words if has_fuzzy_match(word, title_words, stem))


def best_similarity(query_word: str, title_words: list[str], stem: StemFunc) -> float:
    """Highest raw similarity of *query_word* against any title word."""
    return max(
        (word_similarity(query_word, title_word, stem) for title_word in title_words),
        default=0.0,
    )

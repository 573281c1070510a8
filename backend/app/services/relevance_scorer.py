"""Title relevance scorer.

Ranks a candidate title against a search query with a fixed tier table,
favouring literal matches while tolerating typos, plurals, reordering and
partial overlap:

    100  stemmed title and query are the same words
     99  query phrase starts the title
     95  query phrase appears elsewhere in the title
     90  fuzzy adjacent match at the start of the title
     85  fuzzy adjacent match elsewhere
     80  every query word present, in order
     75  every query word present, any order
    <=70 partial match, weighted by average similarity

The scorer is pure: no state survives a call, and it never raises.
"""

import logging
import re

from app.models.relevance import MatchTier, RelevanceResult
from app.services.matching import (
    all_words_present,
    best_similarity,
    count_matched_words,
    find_adjacent_sequence,
    words_appear_in_order,
)
from app.utils.stemming import CachedStemmer, StemFunc, porter_stem
from app.utils.text_similarity import tokenize

logger = logging.getLogger(__name__)

TIER_SCORES: dict[MatchTier, float] = {
    MatchTier.EXACT: 100.0,
    MatchTier.PHRASE_PREFIX: 99.0,
    MatchTier.PHRASE: 95.0,
    MatchTier.ADJACENT_START: 90.0,
    MatchTier.ADJACENT: 85.0,
    MatchTier.IN_ORDER: 80.0,
    MatchTier.UNORDERED: 75.0,
}
PARTIAL_SCORE_CEILING = 70.0


def _tier(tier: MatchTier) -> RelevanceResult:
    return RelevanceResult(score=TIER_SCORES[tier], tier=tier)


def _partial_score(
    title_words: list[str], query_words: list[str], stem: StemFunc
) -> float:
    matched = count_matched_words(title_words, query_words, stem)
    proportion_matched = matched / len(query_words)

    total_similarity = sum(
        best_similarity(query_word, title_words, stem) for query_word in query_words
    )
    average_similarity = total_similarity / len(query_words)

    score = average_similarity * PARTIAL_SCORE_CEILING * proportion_matched
    return max(0.0, min(PARTIAL_SCORE_CEILING, score))


def score_relevance(
    title: str,
    query: str,
    stemmer: StemFunc | None = None,
    max_title_tokens: int | None = None,
) -> RelevanceResult:
    """Score *title* against *query* and report which tier decided it.

    Args:
        title: Candidate title.
        query: User-entered search query.
        stemmer: Token -> stem function. Defaults to the English Porter stemmer.
        max_title_tokens: Optional cap on title tokens considered, bounding
            the pairwise similarity work for very long titles.

    Returns:
        A :class:`RelevanceResult` with a score in [0, 100].
    """
    stem = CachedStemmer(stemmer or porter_stem)

    title_tokens = tokenize(title)
    query_tokens = tokenize(query)

    if not query_tokens:
        return RelevanceResult(score=0.0, tier=MatchTier.EMPTY_QUERY)

    title_words = [stem(token) for token in title_tokens]
    query_words = [stem(token) for token in query_tokens]

    if "".join(title_words) == "".join(query_words):
        return _tier(MatchTier.EXACT)

    title_phrase = " ".join(title_words)
    query_phrase = re.escape(" ".join(query_words))

    if re.search(rf"^{query_phrase}\b", title_phrase):
        return _tier(MatchTier.PHRASE_PREFIX)

    if re.search(rf"\b{query_phrase}\b", title_phrase):
        return _tier(MatchTier.PHRASE)

    # Phrase checks above see the whole title; only the pairwise fuzzy
    # matchers below are bounded.
    if max_title_tokens is not None and max_title_tokens >= 0:
        title_words = title_words[:max_title_tokens]

    start = find_adjacent_sequence(title_words, query_words, stem)
    if start == 0:
        return _tier(MatchTier.ADJACENT_START)
    if start is not None:
        return _tier(MatchTier.ADJACENT)

    if all_words_present(title_words, query_words, stem):
        if words_appear_in_order(title_words, query_words, stem):
            return _tier(MatchTier.IN_ORDER)
        return _tier(MatchTier.UNORDERED)

    score = _partial_score(title_words, query_words, stem)
    logger.debug(
        "[RelevanceScorer] Partial match %.2f for query=%r title=%r", score, query, title
    )
    return RelevanceResult(score=score, tier=MatchTier.PARTIAL)


def relevance_score(title: str, query: str, stemmer: StemFunc | None = None) -> float:
    """Relevance of *title* to *query* as a number in [0, 100]."""
    return score_relevance(title, query, stemmer).score

"""Ranking and blocking built on the pure relevance scorer."""

import logging
from collections.abc import Iterable

from app.config import Settings
from app.models.relevance import Candidate, RankedCandidate, RelevanceResult
from app.services.relevance_scorer import score_relevance
from app.utils.stemming import StemFunc, get_stemmer
from app.utils.text_similarity import tokenize

logger = logging.getLogger(__name__)


class RelevanceService:
    """Score, rank and fuzzily block search results by title.

    Args:
        stemmer: Token -> stem function handed to every scoring call.
        scoring_enabled: When ``False``, :meth:`rank` keeps input order.
        block_threshold: Minimum score for a blocked name to count as a match.
        max_title_tokens: Cap on title tokens considered per scoring call.
    """

    def __init__(
        self,
        stemmer: StemFunc,
        *,
        scoring_enabled: bool = True,
        block_threshold: float = 70.0,
        max_title_tokens: int | None = None,
    ) -> None:
        self.stemmer = stemmer
        self.scoring_enabled = scoring_enabled
        self.block_threshold = block_threshold
        self.max_title_tokens = max_title_tokens

    @classmethod
    def from_settings(cls, settings: Settings) -> "RelevanceService":
        return cls(
            get_stemmer(settings.stemmer),
            scoring_enabled=settings.relevance_scoring_enabled,
            block_threshold=settings.fuzzy_block_threshold,
            max_title_tokens=settings.max_title_tokens,
        )

    def score(self, title: str, query: str) -> RelevanceResult:
        return score_relevance(
            title, query, self.stemmer, max_title_tokens=self.max_title_tokens
        )

    def score_titles(
        self, titles: Iterable[str | None], query: str
    ) -> tuple[float, str | None]:
        """Best score over a primary title and its alternatives.

        Returns:
            ``(score, best_title)``; ``(0.0, None)`` when no title is usable.
            Ties keep the earliest title.
        """
        best_score = 0.0
        best_title: str | None = None
        for title in titles:
            if not title:
                continue
            score = self.score(title, query).score
            if best_title is None or score > best_score:
                best_score = score
                best_title = title
        return best_score, best_title

    def rank(self, candidates: list[Candidate], query: str) -> list[RankedCandidate]:
        """Order *candidates* by descending relevance to *query*.

        Equal scores keep their input order. Scoring is skipped, and input
        order kept, when it is disabled or the query has no words.
        """
        if not self.scoring_enabled or not tokenize(query):
            return [
                RankedCandidate(id=candidate.id, title=candidate.title)
                for candidate in candidates
            ]

        ranked: list[RankedCandidate] = []
        for candidate in candidates:
            score, matched_title = self.score_titles(
                [candidate.title, *candidate.alt_titles], query
            )
            ranked.append(
                RankedCandidate(
                    id=candidate.id,
                    title=candidate.title,
                    relevance=score,
                    matched_title=matched_title,
                )
            )

        ranked.sort(key=lambda item: item.relevance, reverse=True)
        logger.info(
            "[RelevanceService] Ranked %d candidates for query='%s'",
            len(ranked),
            query[:80],
        )
        return ranked

    def find_blocking_match(self, name: str, blocked_names: Iterable[str]) -> str | None:
        """Return the first blocked name that fuzzily matches *name*, if any."""
        if not name:
            return None
        for blocked in blocked_names:
            if not blocked:
                continue
            score = self.score(name, blocked).score
            if score >= self.block_threshold:
                logger.debug(
                    "[RelevanceService] '%s' blocked by '%s' (score=%.1f)",
                    name,
                    blocked,
                    score,
                )
                return blocked
        return None

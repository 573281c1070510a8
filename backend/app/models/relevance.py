"""Data models for title relevance scoring and ranking."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MatchTier(str, Enum):
    """Which rule of the relevance decision table produced a score."""

    EXACT = "exact"
    PHRASE_PREFIX = "phrase_prefix"
    PHRASE = "phrase"
    ADJACENT_START = "adjacent_start"
    ADJACENT = "adjacent"
    IN_ORDER = "in_order"
    UNORDERED = "unordered"
    PARTIAL = "partial"
    EMPTY_QUERY = "empty_query"


class RelevanceResult(BaseModel):
    """A relevance score and the tier that decided it."""

    score: float = Field(..., ge=0.0, le=100.0, description="Relevance in [0, 100]")
    tier: MatchTier


class Candidate(BaseModel):
    """A search result to be ranked against a query."""

    id: str = Field(..., description="Caller-supplied identifier")
    title: str = Field(default="", description="Primary title")
    alt_titles: list[str] = Field(
        default_factory=list, description="Alternative titles (translations, romanizations)"
    )


class RankedCandidate(BaseModel):
    """A candidate with its best relevance over all of its titles."""

    id: str
    title: str
    relevance: Optional[float] = Field(
        default=None, description="Best score over all titles; None when scoring is off"
    )
    matched_title: Optional[str] = Field(
        default=None, description="The title that produced the relevance score"
    )

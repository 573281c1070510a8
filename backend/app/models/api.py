"""API request/response models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.relevance import Candidate, MatchTier, RankedCandidate

_MAX_TEXT_LENGTH = 500


def _truncate(v: str) -> str:
    if len(v) > _MAX_TEXT_LENGTH:
        return v[:_MAX_TEXT_LENGTH]
    return v


class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Human-readable error message")


class ScoreRequest(BaseModel):
    title: str = Field(default="", description="Candidate title")
    query: str = Field(default="", description="Search query")

    @field_validator("title", "query")
    @classmethod
    def validate_length(cls, v: str) -> str:
        return _truncate(v)


class ScoreResponse(BaseModel):
    score: float
    tier: MatchTier


class CandidateInput(Candidate):
    """Candidate as accepted over HTTP, with length limits on titles."""

    @field_validator("title")
    @classmethod
    def validate_title_length(cls, v: str) -> str:
        return _truncate(v)

    @field_validator("alt_titles")
    @classmethod
    def validate_alt_titles(cls, v: list[str]) -> list[str]:
        return [_truncate(title) for title in v if title and title.strip()]


class RankRequest(BaseModel):
    query: str = Field(..., description="Search query")
    candidates: list[CandidateInput] = Field(default_factory=list)

    @field_validator("query")
    @classmethod
    def validate_query_length(cls, v: str) -> str:
        return _truncate(v)


class RankResponse(BaseModel):
    query: str
    scoring_enabled: bool
    results: list[RankedCandidate]


class BlockCheckRequest(BaseModel):
    name: str = Field(..., description="Name to test, e.g. a scanlation group")
    blocked_names: list[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name_length(cls, v: str) -> str:
        return _truncate(v)

    @field_validator("blocked_names")
    @classmethod
    def validate_blocked_names(cls, v: list[str]) -> list[str]:
        return [_truncate(name) for name in v if name and name.strip()]


class BlockCheckResponse(BaseModel):
    blocked: bool
    matched_name: Optional[str] = None
    threshold: float

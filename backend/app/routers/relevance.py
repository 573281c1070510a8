"""POST /api/relevance/* — score, rank and fuzzily block titles."""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from app.config import settings
from app.models.api import (
    BlockCheckRequest,
    BlockCheckResponse,
    RankRequest,
    RankResponse,
    ScoreRequest,
    ScoreResponse,
)
from app.services.relevance_service import RelevanceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/relevance")


def _service(request: Request) -> RelevanceService:
    return request.app.state.relevance_service


@router.post("/score", response_model=ScoreResponse)
async def score_title(body: ScoreRequest, request: Request):
    result = _service(request).score(body.title, body.query)
    return ScoreResponse(score=result.score, tier=result.tier)


@router.post("/rank", response_model=RankResponse)
async def rank_candidates(body: RankRequest, request: Request):
    if len(body.candidates) > settings.max_candidates:
        raise HTTPException(
            status_code=400,
            detail=f"Too many candidates: {len(body.candidates)} (limit {settings.max_candidates}).",
        )

    service = _service(request)
    start = time.monotonic()
    results = service.rank(body.candidates, body.query)
    elapsed = time.monotonic() - start

    logger.info(
        "[Relevance] Ranked %d candidates in %.3fs (scoring_enabled=%s)",
        len(results),
        elapsed,
        service.scoring_enabled,
    )
    return RankResponse(
        query=body.query,
        scoring_enabled=service.scoring_enabled,
        results=results,
    )


@router.post("/block-check", response_model=BlockCheckResponse)
async def check_blocked(body: BlockCheckRequest, request: Request):
    if len(body.blocked_names) > settings.max_blocked_names:
        raise HTTPException(
            status_code=400,
            detail=f"Too many blocked names: {len(body.blocked_names)} (limit {settings.max_blocked_names}).",
        )

    service = _service(request)
    matched = service.find_blocking_match(body.name, body.blocked_names)
    if matched is not None:
        logger.info("[Relevance] '%s' matched blocked name '%s'", body.name[:80], matched[:80])
    return BlockCheckResponse(
        blocked=matched is not None,
        matched_name=matched,
        threshold=service.block_threshold,
    )

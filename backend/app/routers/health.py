from fastapi import APIRouter, Request

from app.config import settings

router = APIRouter()

VERSION = "0.1.0"


@router.get("/health")
async def health_check(request: Request):
    service = request.app.state.relevance_service
    return {
        "status": "ok",
        "version": VERSION,
        "stemmer": settings.stemmer,
        "relevance_scoring_enabled": service.scoring_enabled,
    }

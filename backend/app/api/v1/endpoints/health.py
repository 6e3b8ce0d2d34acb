"""
Health check endpoint.
"""

from fastapi import APIRouter

from app.config import settings
from app.services.scoring.weights import SCORING_VERSION

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/detailed")
async def detailed_health():
    """Health check with scoring and mail configuration."""
    return {
        "status": "ok",
        "scoring_version": SCORING_VERSION,
        "passing_grade": settings.PASSING_GRADE,
        "mail_sender_configured": bool(settings.NOTIFICATION_SENDER_EMAIL),
    }

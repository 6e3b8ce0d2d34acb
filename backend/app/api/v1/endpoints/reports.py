"""
Report scoring API endpoints.
"""
from fastapi import APIRouter, HTTPException

from app.logger import logger
from app.schemas.report_request import ScoreRequest
from app.schemas.report_result import ScoreResult
from app.services.report_runner import summarize_scores
from app.services.scoring.engine import ScoringEngine
from app.services.scoring.models import InvalidAuditData

router = APIRouter(tags=["Reports"])


@router.post("/score", response_model=ScoreResult)
async def score_answers(request: ScoreRequest):
    """Score a set of audit answers."""
    answers = [a.to_domain() for a in request.answers]
    item_metadata = request.item_metadata()

    try:
        report = ScoringEngine().compute_scores(answers, item_metadata, request.excluded_sections)
    except InvalidAuditData as e:
        logger.warning(f"Rejected score request: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return summarize_scores(report, answers, item_metadata)

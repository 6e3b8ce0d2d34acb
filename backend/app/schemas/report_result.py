"""
Pydantic schemas for scoring and report responses.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from app.services.notifications.models import NotificationTarget
from app.services.scoring.models import AuditAnswer, CategoryScore, ItemMetadata


class GroupScore(BaseModel):
    """Score for a category or section."""
    id: str
    earned_points: float
    possible_points: float
    percentage: Optional[float] = None
    answered: int = 0
    not_applicable: int = 0

    @classmethod
    def from_score(cls, score: CategoryScore) -> "GroupScore":
        return cls(
            id=score.category_id,
            earned_points=score.earned_points,
            possible_points=score.possible_points,
            percentage=score.percentage,
            answered=score.answered,
            not_applicable=score.not_applicable,
        )


class CorrectiveAction(BaseModel):
    """Failed item needing follow-up."""
    question_id: str
    category_id: str
    section_id: str
    title: str = ""
    comment: str = ""

    @classmethod
    def from_answer(cls, answer: AuditAnswer, meta: Optional[ItemMetadata] = None) -> "CorrectiveAction":
        return cls(
            question_id=answer.question_id,
            category_id=answer.category_id,
            section_id=answer.section_id,
            title=meta.title if meta else "",
            comment=answer.comment,
        )


class Recipient(BaseModel):
    """Resolved notification recipient."""
    account_id: str
    email: str
    display_name: str
    role: str
    matched_alias: str

    @classmethod
    def from_target(cls, target: NotificationTarget) -> "Recipient":
        return cls(
            account_id=target.account.id,
            email=target.account.email,
            display_name=target.account.name,
            role=target.account.role,
            matched_alias=target.matched_alias,
        )


class ScoreResult(BaseModel):
    """Scores for a set of answers."""
    overall_percentage: Optional[float] = None
    original_percentage: Optional[float] = None
    overall_display: str = "N/A"
    severity: Optional[str] = None
    performance: str = "N/A"
    category_scores: list[GroupScore] = []
    section_scores: list[GroupScore] = []
    excluded_sections: list[str] = []
    corrective_actions: list[CorrectiveAction] = []
    scoring_version: str = "1.0"


class ReportResult(ScoreResult):
    """Complete report generation result."""
    document_number: str
    store_name: str = ""
    store_code: str = ""
    audit_date: str = ""
    auditor: str = ""

    status: Literal["pending", "running", "completed", "failed"]

    started_at: datetime
    completed_at: Optional[datetime] = None
    duration_seconds: float = 0

    recipients: list[Recipient] = []

    error: Optional[str] = None

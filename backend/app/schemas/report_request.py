"""
Pydantic schemas for scoring and recipient requests.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from app.services.notifications.models import StoreManagerAccount
from app.services.scoring.models import AnswerValue, AuditAnswer, ItemMetadata


class AnswerIn(BaseModel):
    """One recorded checklist answer."""
    question_id: str
    category_id: str
    section_id: str
    value: AnswerValue
    numeric_value: Optional[float] = None
    is_corrective: bool = False
    comment: str = ""

    def to_domain(self) -> AuditAnswer:
        return AuditAnswer(**self.model_dump())


class ItemMetadataIn(BaseModel):
    """Points available for a question."""
    question_id: str
    max_points: Optional[float] = Field(None, ge=0)
    title: str = ""

    def to_domain(self) -> ItemMetadata:
        return ItemMetadata(**self.model_dump())


class ScoreRequest(BaseModel):
    """Request to score a set of answers."""
    answers: list[AnswerIn]
    items: list[ItemMetadataIn] = []
    excluded_sections: list[str] = []

    class Config:
        json_schema_extra = {
            "example": {
                "answers": [
                    {"question_id": "Q1", "category_id": "hygiene", "section_id": "S1", "value": "Yes"},
                    {"question_id": "Q2", "category_id": "hygiene", "section_id": "S1", "value": "No",
                     "is_corrective": True},
                    {"question_id": "Q3", "category_id": "storage", "section_id": "S2", "value": "Numeric",
                     "numeric_value": 3},
                ],
                "items": [{"question_id": "Q3", "max_points": 5}],
            }
        }

    def item_metadata(self) -> dict[str, ItemMetadata]:
        return {item.question_id: item.to_domain() for item in self.items}


class StoreManagerIn(BaseModel):
    """User account as stored in the user directory."""
    id: str
    email: str
    display_name: str = ""
    # Raw alias data, validated by parse_store_aliases
    assigned_stores: Any = None
    email_notifications_enabled: bool = True
    is_active: bool = True
    is_approved: bool = True
    role: str = "StoreManager"
    department: str = ""

    def to_domain(self) -> StoreManagerAccount:
        stores = self.assigned_stores
        return StoreManagerAccount(
            id=self.id,
            email=self.email,
            display_name=self.display_name,
            assigned_store_aliases=tuple(stores) if isinstance(stores, list) else stores,
            email_notifications_enabled=self.email_notifications_enabled,
            is_active=self.is_active,
            is_approved=self.is_approved,
            role=self.role,
            department=self.department,
        )


class RecipientsRequest(BaseModel):
    """Request to resolve notification recipients for a store."""
    store_identifier: str
    candidates: list[StoreManagerIn]

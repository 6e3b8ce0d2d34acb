"""
Notification recipient API endpoints.
"""
from fastapi import APIRouter

from app.schemas.report_request import RecipientsRequest
from app.schemas.report_result import Recipient
from app.services.notifications.recipients import RecipientResolver

router = APIRouter(tags=["Notifications"])


@router.post("/recipients", response_model=list[Recipient])
async def resolve_recipients(request: RecipientsRequest):
    """Resolve which store managers should be notified for a store."""
    candidates = [c.to_domain() for c in request.candidates]
    targets = RecipientResolver().resolve(request.store_identifier, candidates)
    return [Recipient.from_target(t) for t in targets]

"""
Corrective actions - failed items flagged for follow-up.
"""
from typing import Iterable

from app.services.scoring.models import AnswerValue, AuditAnswer


def corrective_actions(answers: Iterable[AuditAnswer]) -> list[AuditAnswer]:
    """Answers that need remediation: flagged corrective AND answered No.

    Yes and NA answers are never included, whatever their flag says.
    """
    return [a for a in answers if a.is_corrective and a.value == AnswerValue.NO]

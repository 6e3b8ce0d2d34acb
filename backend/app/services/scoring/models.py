"""
Scoring data model - audit answers in, category/section scores out.
"""
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Optional


class AnswerValue(str, Enum):
    """Possible answers to a checklist question."""
    YES = "Yes"
    PARTIALLY = "Partially"
    NO = "No"
    NA = "NA"
    NUMERIC = "Numeric"


class InvalidAuditData(ValueError):
    """Raised when answer data cannot be scored without guessing."""

    def __init__(self, question_id: str, reason: str):
        self.question_id = question_id
        self.reason = reason
        super().__init__(f"Invalid audit data for question {question_id}: {reason}")


def percentage_of(earned: float, possible: float) -> float:
    """earned/possible as a percentage, one decimal, halves rounded up (6.25 -> 6.3)."""
    value = Decimal(str(earned / possible * 100))
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class AuditAnswer:
    """One recorded answer to a checklist question."""
    question_id: str
    category_id: str
    section_id: str
    value: AnswerValue
    numeric_value: Optional[float] = None
    is_corrective: bool = False
    comment: str = ""


@dataclass(frozen=True)
class ItemMetadata:
    """Checklist definition for a question (points available)."""
    question_id: str
    max_points: Optional[float] = None
    title: str = ""


@dataclass
class CategoryScore:
    """Earned vs. possible points for one category or section.

    ``percentage`` is None when nothing in the group was scoreable
    (every answer NA), so it can never be mistaken for 0% or 100%.
    """
    category_id: str
    earned_points: float = 0.0
    possible_points: float = 0.0
    answered: int = 0
    not_applicable: int = 0

    @property
    def percentage(self) -> Optional[float]:
        if self.possible_points <= 0:
            return None
        return percentage_of(self.earned_points, self.possible_points)

    @property
    def is_applicable(self) -> bool:
        return self.possible_points > 0


@dataclass
class ScoreReport:
    """Complete scoring result for one audit."""
    category_scores: list[CategoryScore] = field(default_factory=list)
    section_scores: list[CategoryScore] = field(default_factory=list)
    overall_percentage: Optional[float] = None
    # Overall across every section, ignoring exclusions
    original_percentage: Optional[float] = None
    excluded_sections: list[str] = field(default_factory=list)

    @property
    def is_applicable(self) -> bool:
        return self.overall_percentage is not None

    def display_overall(self) -> str:
        """Overall percentage as shown on reports ("N/A" when undefined)."""
        if self.overall_percentage is None:
            return "N/A"
        return f"{self.overall_percentage:.1f}%"

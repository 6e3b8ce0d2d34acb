"""
Scoring Engine - turns audit answers into category, section and overall scores.

Rules:
- Yes earns the item's full points, Partially half, No nothing
- NA is left out of both earned and possible points
- Numeric earns its value out of the item's max_points
- Groups with no possible points are "not applicable" and do not
  count towards the overall percentage
"""

from typing import Iterable, Mapping, Optional

from app.config import settings
from app.logger import get_logger
from app.services.scoring.models import (
    AnswerValue,
    AuditAnswer,
    CategoryScore,
    InvalidAuditData,
    ItemMetadata,
    ScoreReport,
    percentage_of,
)
from app.services.scoring.weights import ANSWER_MULTIPLIERS

logger = get_logger("scoring")


class ScoringEngine:
    """Computes audit scores from recorded answers."""

    def __init__(self, default_coefficient: Optional[float] = None):
        self.default_coefficient = (
            settings.DEFAULT_COEFFICIENT if default_coefficient is None else default_coefficient
        )

    def compute_scores(
        self,
        answers: Iterable[AuditAnswer],
        item_metadata: Optional[Mapping[str, ItemMetadata]] = None,
        excluded_sections: Iterable[str] = (),
    ) -> ScoreReport:
        """Score a set of answers.

        Args:
            answers: Answers recorded for one audit
            item_metadata: Checklist definitions keyed by question id
            excluded_sections: Section ids left out of the overall percentage

        Returns:
            ScoreReport with per-category and per-section breakdowns

        Raises:
            InvalidAuditData: a Numeric answer has no value, no positive maximum,
                or a value outside 0..maximum
        """
        item_metadata = item_metadata or {}
        excluded = set(excluded_sections)

        categories: dict[str, CategoryScore] = {}
        sections: dict[str, CategoryScore] = {}

        for answer in answers:
            category = categories.setdefault(answer.category_id, CategoryScore(answer.category_id))
            section = sections.setdefault(answer.section_id, CategoryScore(answer.section_id))

            points = self._points_for(answer, item_metadata.get(answer.question_id))
            for group in (category, section):
                if points is None:
                    group.not_applicable += 1
                    continue
                earned, possible = points
                group.earned_points += earned
                group.possible_points += possible
                group.answered += 1

        section_scores = list(sections.values())
        # Pooled totals match the category pooling; sections carry exclusions
        overall = _overall([s for s in section_scores if s.category_id not in excluded])
        original = _overall(section_scores)

        if excluded:
            logger.info(f"Excluded sections {sorted(excluded)}: overall {original} -> {overall}")

        logger.info(
            f"Scored {sum(s.answered for s in section_scores)} answers across "
            f"{len(categories)} categories, overall={overall}"
        )

        return ScoreReport(
            category_scores=list(categories.values()),
            section_scores=section_scores,
            overall_percentage=overall,
            original_percentage=original,
            excluded_sections=sorted(excluded),
        )

    def _points_for(
        self, answer: AuditAnswer, meta: Optional[ItemMetadata]
    ) -> Optional[tuple[float, float]]:
        """(earned, possible) for one answer, or None when it does not count."""
        if answer.value == AnswerValue.NA:
            return None

        max_points = meta.max_points if meta is not None else None

        if answer.value == AnswerValue.NUMERIC:
            if max_points is None:
                raise InvalidAuditData(answer.question_id, "numeric answer has no maximum points")
            if max_points <= 0:
                raise InvalidAuditData(answer.question_id, f"maximum points must be positive, got {max_points}")
            if answer.numeric_value is None:
                raise InvalidAuditData(answer.question_id, "numeric answer has no value")
            if not 0 <= answer.numeric_value <= max_points:
                raise InvalidAuditData(
                    answer.question_id,
                    f"numeric value {answer.numeric_value} outside 0-{max_points}",
                )
            return float(answer.numeric_value), float(max_points)

        full = float(max_points) if max_points is not None else float(self.default_coefficient)
        return full * ANSWER_MULTIPLIERS[answer.value], full


def _overall(groups: list[CategoryScore]) -> Optional[float]:
    """Pooled percentage over applicable groups, None if none apply."""
    included = [g for g in groups if g.is_applicable]
    possible = sum(g.possible_points for g in included)
    if possible <= 0:
        return None
    earned = sum(g.earned_points for g in included)
    return percentage_of(earned, possible)


def compute_scores(
    answers: Iterable[AuditAnswer],
    item_metadata: Optional[Mapping[str, ItemMetadata]] = None,
    excluded_sections: Iterable[str] = (),
) -> ScoreReport:
    """Score answers with the default engine."""
    return ScoringEngine().compute_scores(answers, item_metadata, excluded_sections)

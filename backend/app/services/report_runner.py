"""
Report Runner - Main orchestrator for audit report generation.

Coordinates data loading, scoring, severity, corrective actions and
recipient resolution. Rendering and email delivery are handed the result.
"""
from datetime import datetime, timezone
from typing import Mapping, Optional, Sequence

from app.logger import logger
from app.schemas.report_result import (
    CorrectiveAction,
    GroupScore,
    Recipient,
    ReportResult,
    ScoreResult,
)
from app.services.data_source import AuditDataSource
from app.services.notifications.recipients import RecipientResolver
from app.services.scoring.corrective import corrective_actions
from app.services.scoring.engine import ScoringEngine
from app.services.scoring.models import AuditAnswer, ItemMetadata, ScoreReport
from app.services.scoring.severity import performance_status, severity_from_score
from app.services.scoring.weights import SCORING_VERSION


def summarize_scores(
    report: ScoreReport,
    answers: Sequence[AuditAnswer],
    item_metadata: Mapping[str, ItemMetadata],
) -> ScoreResult:
    """Flatten a ScoreReport into the response shape used by reports and the API."""
    overall = report.overall_percentage
    return ScoreResult(
        overall_percentage=overall,
        original_percentage=report.original_percentage,
        overall_display=report.display_overall(),
        severity=severity_from_score(overall).value if overall is not None else None,
        performance=performance_status(overall),
        category_scores=[GroupScore.from_score(s) for s in report.category_scores],
        section_scores=[GroupScore.from_score(s) for s in report.section_scores],
        excluded_sections=report.excluded_sections,
        corrective_actions=[
            CorrectiveAction.from_answer(a, item_metadata.get(a.question_id))
            for a in corrective_actions(answers)
        ],
        scoring_version=SCORING_VERSION,
    )


class ReportRunner:
    """Orchestrates report generation for one audit."""

    def __init__(
        self,
        data_source: AuditDataSource,
        scoring_engine: Optional[ScoringEngine] = None,
        resolver: Optional[RecipientResolver] = None,
    ):
        self.data_source = data_source
        self.scoring_engine = scoring_engine or ScoringEngine()
        self.resolver = resolver or RecipientResolver()

    def run(self, document_number: str) -> ReportResult:
        """
        Generate the report data for an audit.

        Args:
            document_number: Audit document number

        Returns:
            ReportResult with status "completed", or "failed" with error set
        """
        started_at = datetime.now(timezone.utc)

        try:
            logger.info(f"Generating report for {document_number}")
            header = self.data_source.get_audit(document_number)
            answers = self.data_source.get_answers(document_number)
            item_metadata = self.data_source.get_item_metadata(document_number)

            report = self.scoring_engine.compute_scores(
                answers, item_metadata, excluded_sections=header.excluded_sections
            )
            scores = summarize_scores(report, answers, item_metadata)

            targets = self.resolver.resolve_report_recipients(
                header.store_name, self.data_source.get_store_managers()
            )

            completed_at = datetime.now(timezone.utc)
            logger.info(
                f"Report {document_number}: overall={scores.overall_display}, "
                f"severity={scores.severity}, recipients={len(targets)}"
            )

            return ReportResult(
                document_number=document_number,
                store_name=header.store_name,
                store_code=header.store_code,
                audit_date=header.audit_date,
                auditor=header.auditor,
                status="completed",
                started_at=started_at,
                completed_at=completed_at,
                duration_seconds=round((completed_at - started_at).total_seconds(), 2),
                recipients=[Recipient.from_target(t) for t in targets],
                **scores.model_dump(),
            )

        except Exception as e:
            logger.exception(f"Report generation failed for {document_number}: {e}")
            return self._error_result(document_number, started_at, str(e))

    def _error_result(self, document_number: str, started_at: datetime, error: str) -> ReportResult:
        """Create error result."""
        completed_at = datetime.now(timezone.utc)
        return ReportResult(
            document_number=document_number,
            status="failed",
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=round((completed_at - started_at).total_seconds(), 2),
            scoring_version=SCORING_VERSION,
            error=error,
        )

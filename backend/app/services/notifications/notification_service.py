"""
Notification Service - emails store managers and department heads when a
report is generated.

Each recipient gets a personalized message; a failed delivery is recorded
in the summary (and in the notification history, when a recorder is given)
and does not stop the remaining sends.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional, Protocol

from app.config import settings
from app.logger import get_logger
from app.services.notifications.email_templates import EmailTemplates
from app.services.notifications.graph_mailer import GraphMailer, MailDeliveryError
from app.services.notifications.models import (
    DeliveryResult,
    NotificationRecord,
    NotificationSummary,
    ReportNotification,
    StoreManagerAccount,
)
from app.services.notifications.recipients import RecipientResolver

logger = get_logger("notifications")

REPORT_GENERATED = "ReportGenerated"


class NotificationRecorder(Protocol):
    def record(self, entry: NotificationRecord) -> None: ...


@dataclass
class InMemoryNotificationLog:
    """NotificationRecorder keeping history in a list."""
    entries: list[NotificationRecord] = field(default_factory=list)

    def record(self, entry: NotificationRecord) -> None:
        self.entries.append(entry)

    def for_document(self, document_number: str) -> list[NotificationRecord]:
        """History for one report, newest first."""
        matching = [e for e in self.entries if e.document_number == document_number]
        return sorted(matching, key=lambda e: e.sent_at, reverse=True)


class NotificationService:
    """Resolves recipients for a report and sends them the notification."""

    def __init__(
        self,
        mailer: GraphMailer,
        resolver: Optional[RecipientResolver] = None,
        templates: Optional[EmailTemplates] = None,
        recorder: Optional[NotificationRecorder] = None,
        body_format: Optional[str] = None,
    ):
        self.mailer = mailer
        self.resolver = resolver or RecipientResolver()
        self.templates = templates or EmailTemplates()
        self.recorder = recorder
        self.body_format = (body_format or settings.EMAIL_BODY_FORMAT).lower()
        if self.body_format not in ("html", "text"):
            raise ValueError(f"Unknown email body format: {self.body_format}")

    def _render(self, report: ReportNotification, recipient_name: str) -> tuple[str, str]:
        """(body, Graph content type) in the configured format."""
        if self.body_format == "text":
            return self.templates.render_plain_text(report, recipient_name), "Text"
        return self.templates.render_report_notification(report, recipient_name), "HTML"

    async def notify_report(
        self,
        report: ReportNotification,
        candidates: Iterable[StoreManagerAccount],
        selected_emails: Optional[Iterable[str]] = None,
        access_token: Optional[str] = None,
        sent_by: str = "",
    ) -> NotificationSummary:
        """Notify the store managers of the report's store and all department heads.

        Args:
            report: Report details for the email
            candidates: User accounts to resolve against
            selected_emails: Restrict delivery to these addresses, if given
            access_token: Delegated token of the user sending the report
            sent_by: Email of the user sending the report, for the history

        Returns:
            NotificationSummary with per-recipient results
        """
        logger.info(f"Starting notifications for {report.document_number} (store: {report.store_name})")

        targets = self.resolver.resolve_report_recipients(report.store_name, candidates)

        if selected_emails:
            selected = set(selected_emails)
            targets = [t for t in targets if t.account.email in selected]
            logger.info(f"Filtered to {len(targets)} selected recipient(s)")

        if not targets:
            logger.info("No recipients found - skipping notifications")
            return NotificationSummary(message="No recipients configured or selected")

        summary = NotificationSummary(total=len(targets))
        subject = self.templates.subject(report)

        for target in targets:
            account = target.account
            body, content_type = self._render(report, account.name)
            error = None
            try:
                await self.mailer.send(
                    [account.email], subject, body, access_token=access_token, content_type=content_type
                )
            except MailDeliveryError as e:
                logger.error(f"Failed to notify {account.email}: {e}")
                error = str(e)

            if error is None:
                summary.sent += 1
                summary.results.append(DeliveryResult(email=account.email, status="sent"))
            else:
                summary.failed += 1
                summary.results.append(DeliveryResult(email=account.email, status="failed", error=error))

            self._record(report, account, subject, sent_by, error)

        summary.message = (
            f"Notifications complete: {summary.sent} sent, {summary.failed} failed ({summary.total} total)"
        )
        logger.info(summary.message)
        return summary

    def _record(
        self,
        report: ReportNotification,
        account: StoreManagerAccount,
        subject: str,
        sent_by: str,
        error: Optional[str],
    ) -> None:
        if self.recorder is None:
            return
        self.recorder.record(
            NotificationRecord(
                document_number=report.document_number,
                recipient_id=account.id,
                recipient_email=account.email,
                recipient_name=account.name,
                recipient_role=account.role,
                notification_type=REPORT_GENERATED,
                status="Sent" if error is None else "Failed",
                email_subject=subject,
                sent_at=datetime.now(timezone.utc),
                sent_by=sent_by,
                error_message=error,
            )
        )

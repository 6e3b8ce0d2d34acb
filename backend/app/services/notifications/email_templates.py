"""
Email Templates - render report notification emails with Jinja2.
"""

import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.config import settings
from app.services.notifications.models import ReportNotification
from app.services.scoring.severity import score_band

# Colour and label per score band
BAND_STYLES = {
    "pass": ("#10b981", "Pass"),
    "acceptable": ("#f59e0b", "Acceptable"),
    "fail": ("#ef4444", "Fail"),
    "na": ("#6c757d", "Not applicable"),
}


class EmailTemplates:
    """Renders HTML and plain-text notification bodies."""

    def __init__(self, template_dir: str = None):
        self.template_dir = template_dir or os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "templates"
        )
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html"]),
        )

    def subject(self, report: ReportNotification) -> str:
        return f"New Audit Report: {report.store_name} - {report.document_number}"

    def render_report_notification(self, report: ReportNotification, recipient_name: str) -> str:
        """HTML body for one recipient."""
        return self.env.get_template("report_notification.html").render(
            **self._context(report, recipient_name)
        )

    def render_plain_text(self, report: ReportNotification, recipient_name: str) -> str:
        """Plain-text alternative of the HTML body."""
        return self.env.get_template("report_notification.txt").render(
            **self._context(report, recipient_name)
        )

    def _context(self, report: ReportNotification, recipient_name: str) -> dict:
        color, status_text = BAND_STYLES[score_band(report.overall_percentage)]
        overall_display = (
            "N/A" if report.overall_percentage is None else f"{report.overall_percentage:.1f}%"
        )
        return {
            "brand_name": settings.REPORT_BRAND_NAME,
            "recipient_name": recipient_name,
            "document_number": report.document_number,
            "store_name": report.store_name,
            "audit_date": report.audit_date,
            "auditor": report.auditor,
            "report_url": report.report_url,
            "dashboard_url": settings.DASHBOARD_URL,
            "overall_display": overall_display,
            "score_color": color,
            "status_text": status_text,
        }

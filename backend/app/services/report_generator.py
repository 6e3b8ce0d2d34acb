"""
Report Generator Service - render audit reports as HTML or PDF.

Uses Jinja2 for the HTML and WeasyPrint to convert it into PDF.
"""

import os
from datetime import datetime

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.config import settings
from app.logger import logger
from app.schemas.report_result import ReportResult

# Table row styling per severity
SEVERITY_CLASSES = {
    "Critical": "severity-critical",
    "Major": "severity-major",
    "Minor": "severity-minor",
    "None": "severity-none",
}


class ReportGenerator:
    """Generate HTML/PDF reports from report results."""

    def __init__(self, template_dir: str = None):
        self.template_dir = template_dir or os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html"]),
        )

    def render_html(self, report: ReportResult) -> str:
        """Render the report as a standalone HTML document."""
        if report.status != "completed":
            raise ValueError(f"Report {report.document_number} is not completed ({report.status})")

        template = self.env.get_template("audit_report.html")
        return template.render(
            brand_name=settings.REPORT_BRAND_NAME,
            report=report,
            generated_on=datetime.now().strftime("%B %d, %Y"),
            severity_class=SEVERITY_CLASSES.get(report.severity, "severity-na"),
            passing_grade=settings.PASSING_GRADE,
        )

    def generate_pdf(self, report: ReportResult) -> bytes:
        """Render the report and convert it to PDF bytes."""
        from weasyprint import HTML

        html_string = self.render_html(report)
        try:
            pdf_bytes = HTML(string=html_string, base_url=self.template_dir).write_pdf()
        except Exception as e:
            logger.error(f"Failed to generate PDF for {report.document_number}: {e}")
            raise

        logger.info(f"Generated PDF report for {report.document_number} ({len(pdf_bytes)} bytes)")
        return pdf_bytes

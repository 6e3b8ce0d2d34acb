import asyncio
import json
import os
import sys

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "backend")))

from app.services.data_source import InMemoryAuditDataSource
from app.services.notifications.graph_mailer import GraphMailer
from app.services.notifications.models import ReportNotification
from app.services.notifications.notification_service import NotificationService
from app.services.report_generator import ReportGenerator
from app.services.report_runner import ReportRunner


async def main(path: str, notify: bool, body_format: str = None):
    with open(path, "r", encoding="utf-8") as f:
        source = InMemoryAuditDataSource.from_dict(json.load(f))

    document_number = next(iter(source.audits))
    print(f"Generating report for {document_number}...")

    result = ReportRunner(source).run(document_number)
    print(f"Status: {result.status}")
    if result.error:
        print(f"Error: {result.error}")
        return 1

    print(f"Overall: {result.overall_display} ({result.severity}, {result.performance})")
    print(f"Recipients: {', '.join(r.email for r in result.recipients) or 'none'}")

    generator = ReportGenerator()
    html_path = f"{document_number}.html"
    with open(html_path, "w", encoding="utf-8") as f:
        f.write(generator.render_html(result))
    print(f"Saved {html_path}")

    pdf_path = f"{document_number}.pdf"
    with open(pdf_path, "wb") as f:
        f.write(generator.generate_pdf(result))
    print(f"Saved {pdf_path}")

    if notify:
        service = NotificationService(GraphMailer(), body_format=body_format)
        summary = await service.notify_report(
            ReportNotification(
                document_number=result.document_number,
                store_name=result.store_name,
                audit_date=result.audit_date,
                overall_percentage=result.overall_percentage,
                auditor=result.auditor,
            ),
            source.get_store_managers(),
        )
        print(summary.message)
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python generate_report.py <audit.json> [--notify] [--text]")
        sys.exit(2)
    body_format = "text" if "--text" in sys.argv[2:] else None
    sys.exit(asyncio.run(main(sys.argv[1], "--notify" in sys.argv[2:], body_format)))

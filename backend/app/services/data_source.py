"""
Audit data source - the interface the report runner reads audit data through.

SharePoint/Graph and SQL Server readers implement AuditDataSource outside
this package; InMemoryAuditDataSource serves tests and local runs.
"""

from dataclasses import dataclass, field
from typing import Protocol

from app.services.notifications.models import StoreManagerAccount
from app.services.scoring.models import AuditAnswer, ItemMetadata


class AuditNotFound(LookupError):
    """Raised when a document number is unknown to the data source."""


@dataclass(frozen=True)
class AuditHeader:
    """Audit instance details shown on reports and notifications."""
    document_number: str
    store_name: str
    store_code: str = ""
    audit_date: str = ""
    auditor: str = ""
    excluded_sections: tuple[str, ...] = ()


class AuditDataSource(Protocol):
    def get_audit(self, document_number: str) -> AuditHeader: ...

    def get_answers(self, document_number: str) -> list[AuditAnswer]: ...

    def get_item_metadata(self, document_number: str) -> dict[str, ItemMetadata]: ...

    def get_store_managers(self) -> list[StoreManagerAccount]: ...


@dataclass
class InMemoryAuditDataSource:
    """AuditDataSource backed by plain dicts."""
    audits: dict[str, AuditHeader] = field(default_factory=dict)
    answers: dict[str, list[AuditAnswer]] = field(default_factory=dict)
    items: dict[str, ItemMetadata] = field(default_factory=dict)
    store_managers: list[StoreManagerAccount] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "InMemoryAuditDataSource":
        """Build a source holding a single audit from exported JSON.

        Expected keys: ``audit``, ``answers``, ``items`` and ``store_managers``.
        """
        from app.schemas.report_request import AnswerIn, ItemMetadataIn, StoreManagerIn

        audit = dict(data["audit"])
        audit["excluded_sections"] = tuple(audit.get("excluded_sections", ()))
        header = AuditHeader(**audit)

        items = [ItemMetadataIn.model_validate(i).to_domain() for i in data.get("items", [])]
        return cls(
            audits={header.document_number: header},
            answers={
                header.document_number: [
                    AnswerIn.model_validate(a).to_domain() for a in data.get("answers", [])
                ]
            },
            items={item.question_id: item for item in items},
            store_managers=[
                StoreManagerIn.model_validate(m).to_domain() for m in data.get("store_managers", [])
            ],
        )

    def get_audit(self, document_number: str) -> AuditHeader:
        try:
            return self.audits[document_number]
        except KeyError:
            raise AuditNotFound(f"Audit not found: {document_number}") from None

    def get_answers(self, document_number: str) -> list[AuditAnswer]:
        return list(self.answers.get(document_number, []))

    def get_item_metadata(self, document_number: str) -> dict[str, ItemMetadata]:
        return dict(self.items)

    def get_store_managers(self) -> list[StoreManagerAccount]:
        return list(self.store_managers)

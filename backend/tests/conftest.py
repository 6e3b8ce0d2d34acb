"""
Shared pytest fixtures for the audit reporting test suite.

Provides:
  - ``make_answer``: factory for AuditAnswer with sensible defaults.
  - ``make_account``: factory for notifiable StoreManagerAccount records.
  - ``sample_source``: an InMemoryAuditDataSource holding one audit.
"""

import pytest

from app.services.data_source import AuditHeader, InMemoryAuditDataSource
from app.services.notifications.models import StoreManagerAccount
from app.services.scoring.models import AnswerValue, AuditAnswer, ItemMetadata


def _answer(
    question_id: str = "Q1",
    value: AnswerValue = AnswerValue.YES,
    category_id: str = "hygiene",
    section_id: str = "S1",
    numeric_value: float = None,
    is_corrective: bool = False,
    comment: str = "",
) -> AuditAnswer:
    return AuditAnswer(
        question_id=question_id,
        category_id=category_id,
        section_id=section_id,
        value=value,
        numeric_value=numeric_value,
        is_corrective=is_corrective,
        comment=comment,
    )


def _account(
    id: str = "1",
    email: str = "manager@example.com",
    aliases=("GMRL-SIG", "Signature Store"),
    **overrides,
) -> StoreManagerAccount:
    return StoreManagerAccount(
        id=id,
        email=email,
        display_name=overrides.pop("display_name", f"Manager {id}"),
        assigned_store_aliases=aliases,
        **overrides,
    )


@pytest.fixture
def make_answer():
    return _answer


@pytest.fixture
def make_account():
    return _account


@pytest.fixture
def sample_source() -> InMemoryAuditDataSource:
    """One audit at "Signature Store" with two sections and two managers."""
    doc = "GMRL-FSAUDIT-0001"
    return InMemoryAuditDataSource(
        audits={
            doc: AuditHeader(
                document_number=doc,
                store_name="Signature Store",
                store_code="GMRL-SIG",
                audit_date="2026-03-14",
                auditor="Jane Auditor",
            )
        },
        answers={
            doc: [
                _answer("Q1", AnswerValue.YES, section_id="S1"),
                _answer("Q2", AnswerValue.NO, section_id="S1", is_corrective=True, comment="Dirty floor"),
                _answer("Q3", AnswerValue.YES, category_id="storage", section_id="S2"),
                _answer("Q4", AnswerValue.NA, category_id="storage", section_id="S2"),
            ]
        },
        items={
            "Q1": ItemMetadata("Q1", 2, "Hand wash station stocked"),
            "Q2": ItemMetadata("Q2", 2, "Floors clean"),
            "Q3": ItemMetadata("Q3", 4, "Fridge below 5C"),
            "Q4": ItemMetadata("Q4", 2, "Freezer log"),
        },
        store_managers=[
            _account("1", "sig@example.com", '["Signature"]'),
            _account("2", "other@example.com", '["GMRL-ABD"]'),
            _account("3", "broken@example.com", "not json"),
        ],
    )

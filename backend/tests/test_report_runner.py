"""
Tests for services/report_runner.py and services/data_source.py.
"""

import pytest

from app.services.data_source import AuditNotFound, InMemoryAuditDataSource
from app.services.report_runner import ReportRunner
from app.services.scoring.models import AnswerValue


DOC = "GMRL-FSAUDIT-0001"


def test_completed_report(sample_source):
    result = ReportRunner(sample_source).run(DOC)

    assert result.status == "completed"
    assert result.error is None
    assert result.store_name == "Signature Store"
    # (2 + 0 + 4) / (2 + 2 + 4)
    assert result.overall_percentage == 75.0
    assert result.overall_display == "75.0%"
    assert result.severity == "Minor"
    assert result.performance == "FAIL"
    assert {s.id: s.percentage for s in result.section_scores} == {"S1": 50.0, "S2": 100.0}


def test_corrective_actions_carry_item_titles(sample_source):
    result = ReportRunner(sample_source).run(DOC)

    assert len(result.corrective_actions) == 1
    action = result.corrective_actions[0]
    assert action.question_id == "Q2"
    assert action.title == "Floors clean"
    assert action.comment == "Dirty floor"


def test_recipients_resolved_from_store_name(sample_source):
    result = ReportRunner(sample_source).run(DOC)

    assert [r.email for r in result.recipients] == ["sig@example.com"]
    assert result.recipients[0].matched_alias == "Signature"


def test_department_heads_added_to_recipients(sample_source, make_account):
    sample_source.store_managers.append(
        make_account("9", "clean@example.com", aliases=None, role="CleaningHead")
    )

    result = ReportRunner(sample_source).run(DOC)

    assert [(r.email, r.role) for r in result.recipients] == [
        ("sig@example.com", "StoreManager"),
        ("clean@example.com", "CleaningHead"),
    ]


def test_unknown_audit_fails_without_raising(sample_source):
    result = ReportRunner(sample_source).run("MISSING")

    assert result.status == "failed"
    assert "MISSING" in result.error
    assert result.overall_percentage is None


def test_invalid_answer_data_fails_report(sample_source, make_answer):
    sample_source.answers[DOC].append(make_answer("Q9", AnswerValue.NUMERIC, numeric_value=1))

    result = ReportRunner(sample_source).run(DOC)

    assert result.status == "failed"
    assert "Q9" in result.error


def test_header_exclusions_applied(sample_source):
    header = sample_source.audits[DOC]
    sample_source.audits[DOC] = type(header)(
        document_number=header.document_number,
        store_name=header.store_name,
        excluded_sections=("S1",),
    )

    result = ReportRunner(sample_source).run(DOC)

    assert result.overall_percentage == 100.0
    assert result.original_percentage == 75.0
    assert result.severity == "None"


class TestInMemoryAuditDataSource:
    def test_missing_audit(self):
        with pytest.raises(AuditNotFound):
            InMemoryAuditDataSource().get_audit("X")

    def test_from_dict(self):
        source = InMemoryAuditDataSource.from_dict({
            "audit": {
                "document_number": "D1",
                "store_name": "Signature Store",
                "excluded_sections": ["S3"],
            },
            "answers": [
                {"question_id": "Q1", "category_id": "c", "section_id": "S1", "value": "Yes"},
            ],
            "items": [{"question_id": "Q1", "max_points": 3}],
            "store_managers": [
                {"id": "1", "email": "m@example.com", "assigned_stores": "[\"Signature\"]"},
            ],
        })

        assert source.get_audit("D1").excluded_sections == ("S3",)
        assert source.get_answers("D1")[0].value is AnswerValue.YES
        assert source.get_item_metadata("D1")["Q1"].max_points == 3
        assert source.get_store_managers()[0].assigned_store_aliases == "[\"Signature\"]"

    @pytest.mark.parametrize("bad_aliases", [[1, 2], {"a": 1}])
    def test_from_dict_keeps_account_with_non_string_aliases(self, bad_aliases):
        source = InMemoryAuditDataSource.from_dict({
            "audit": {"document_number": "D1", "store_name": "Signature Store"},
            "answers": [
                {"question_id": "Q1", "category_id": "c", "section_id": "S1", "value": "Yes"},
            ],
            "store_managers": [
                {"id": "1", "email": "bad@example.com", "assigned_stores": bad_aliases},
                {"id": "2", "email": "good@example.com", "assigned_stores": ["Signature"]},
            ],
        })

        assert len(source.get_store_managers()) == 2
        result = ReportRunner(source).run("D1")
        assert result.status == "completed"
        assert [r.email for r in result.recipients] == ["good@example.com"]

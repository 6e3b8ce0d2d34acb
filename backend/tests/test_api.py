"""
Tests for the HTTP API (api/v1/endpoints) using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_health(client):
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_detailed_health(client):
    body = client.get("/api/v1/health/detailed").json()
    assert body["status"] == "ok"
    assert "scoring_version" in body


def test_score_endpoint(client):
    resp = client.post("/api/v1/reports/score", json={
        "answers": [
            {"question_id": "Q1", "category_id": "hygiene", "section_id": "S1", "value": "Yes"},
            {"question_id": "Q2", "category_id": "hygiene", "section_id": "S1", "value": "No",
             "is_corrective": True},
            {"question_id": "Q3", "category_id": "storage", "section_id": "S2", "value": "Numeric",
             "numeric_value": 3},
        ],
        "items": [
            {"question_id": "Q1", "max_points": 2},
            {"question_id": "Q2", "max_points": 2},
            {"question_id": "Q3", "max_points": 4},
        ],
    })

    assert resp.status_code == 200
    body = resp.json()
    # (2 + 0 + 3) / 8
    assert body["overall_percentage"] == 62.5
    assert body["severity"] == "Major"
    assert [a["question_id"] for a in body["corrective_actions"]] == ["Q2"]


def test_score_endpoint_all_na(client):
    resp = client.post("/api/v1/reports/score", json={
        "answers": [{"question_id": "Q1", "category_id": "c", "section_id": "S1", "value": "NA"}],
    })

    body = resp.json()
    assert body["overall_percentage"] is None
    assert body["overall_display"] == "N/A"
    assert body["severity"] is None
    assert body["performance"] == "N/A"


def test_score_endpoint_rejects_numeric_without_maximum(client):
    resp = client.post("/api/v1/reports/score", json={
        "answers": [{"question_id": "Q1", "category_id": "c", "section_id": "S1",
                     "value": "Numeric", "numeric_value": 2}],
    })

    assert resp.status_code == 422
    assert "Q1" in resp.json()["detail"]


def test_recipients_endpoint(client):
    resp = client.post("/api/v1/notifications/recipients", json={
        "store_identifier": "Signature",
        "candidates": [
            {"id": "1", "email": "a@example.com", "assigned_stores": ["GMRL-SIG", "Signature Store"]},
            {"id": "2", "email": "b@example.com", "assigned_stores": ["GMRL-SIG"]},
            {"id": "3", "email": "c@example.com", "assigned_stores": "{broken"},
            {"id": "4", "email": "d@example.com", "assigned_stores": "[\"Signature\"]",
             "email_notifications_enabled": False},
        ],
    })

    assert resp.status_code == 200
    assert resp.json() == [{
        "account_id": "1",
        "email": "a@example.com",
        "display_name": "a@example.com",
        "role": "StoreManager",
        "matched_alias": "Signature Store",
    }]


@pytest.mark.parametrize("bad_aliases", [[1, 2], {"a": 1}, 42])
def test_recipients_endpoint_skips_non_string_aliases(client, bad_aliases):
    resp = client.post("/api/v1/notifications/recipients", json={
        "store_identifier": "Signature",
        "candidates": [
            {"id": "1", "email": "good@example.com", "assigned_stores": ["Signature"]},
            {"id": "2", "email": "bad@example.com", "assigned_stores": bad_aliases},
        ],
    })

    assert resp.status_code == 200
    assert [r["email"] for r in resp.json()] == ["good@example.com"]


def test_recipients_endpoint_ignores_other_roles(client):
    resp = client.post("/api/v1/notifications/recipients", json={
        "store_identifier": "Signature",
        "candidates": [
            {"id": "1", "email": "sm@example.com", "assigned_stores": ["Signature"]},
            {"id": "2", "email": "admin@example.com", "assigned_stores": ["Signature"],
             "role": "Admin"},
        ],
    })

    assert [r["email"] for r in resp.json()] == ["sm@example.com"]


def test_score_endpoint_rejects_numeric_above_maximum(client):
    resp = client.post("/api/v1/reports/score", json={
        "answers": [{"question_id": "Q1", "category_id": "c", "section_id": "S1",
                     "value": "Numeric", "numeric_value": 10}],
        "items": [{"question_id": "Q1", "max_points": 5}],
    })

    assert resp.status_code == 422
    assert "Q1" in resp.json()["detail"]

"""Tests for the assessment HTTP endpoints."""

import pytest
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


@pytest.fixture
def l10_payload():
    """Well-run weekly L10 as a raw request body."""
    return {
        "title": "Weekly L10 Meeting",
        "purpose": "DECIDE",
        "urgency": "TODAY",
        "duration": 90,
        "decision_required": True,
        "interactivity": "HIGH",
        "complexity": "HIGH",
        "has_agenda": True,
        "agenda_items": [
            {"title": "Scorecard", "duration": 5},
            {"title": "Rock Review", "duration": 5},
        ],
        "attendees": [
            {"id": f"u{i}", "name": f"User {i}", "role": "Leader", "is_dri": i == 0}
            for i in range(6)
        ],
        "is_recurring": True,
        "recurrence_frequency": "WEEKLY",
    }


def test_health_check():
    """Test that /health returns 200 with status ok."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestScoreEndpoint:
    def test_protected_l10(self, l10_payload):
        response = client.post(
            "/v1/assessments/score",
            json={"assessment": l10_payload, "protected_mode": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["meeting_type"] == "L10"
        assert data["result"]["score"] == 10.0
        assert data["result"]["recommendation"] == "PROCEED"
        assert data["preparedness"]["level"] == "FULLY_PREPARED"
        assert data["savings"]["potential_hours_saved"] == 0.0
        assert data["breakdown"]["helping"][0]["label"] == "EOS L10 Meeting"
        assert len(data["actions"]) == 3

    def test_preparedness_only_in_protected_mode(self, l10_payload):
        response = client.post(
            "/v1/assessments/score",
            json={"assessment": l10_payload, "protected_mode": False},
        )
        assert response.status_code == 200
        assert response.json()["preparedness"] is None

    def test_custom_hourly_rate(self, l10_payload):
        l10_payload["title"] = "Status broadcast"
        l10_payload["purpose"] = "INFO_SHARE"
        l10_payload["interactivity"] = "LOW"
        l10_payload["complexity"] = "LOW"
        l10_payload["decision_required"] = False
        l10_payload["has_agenda"] = False
        response = client.post(
            "/v1/assessments/score",
            json={"assessment": l10_payload, "hourly_rate": 50},
        )
        data = response.json()
        # 6 people x 1.5 hours x 50
        assert data["savings"]["total_cost"] == pytest.approx(450.0)
        assert data["result"]["recommendation"] in ("SKIP", "ASYNC_FIRST")

    def test_invalid_enum_rejected(self, l10_payload):
        l10_payload["purpose"] = "PARTY"
        response = client.post("/v1/assessments/score", json={"assessment": l10_payload})
        assert response.status_code == 422

    def test_missing_field_rejected(self, l10_payload):
        del l10_payload["urgency"]
        response = client.post("/v1/assessments/score", json={"assessment": l10_payload})
        assert response.status_code == 422


class TestAgendaEndpoint:
    def test_suggests_l10_agenda(self, l10_payload):
        response = client.post(
            "/v1/assessments/agenda",
            json={"assessment": l10_payload, "protected_mode": True},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["meeting_type"] == "L10"
        assert data["items"][0] == {"title": "Segue", "duration": 5}


class TestSummaryEndpoint:
    def test_totals(self, l10_payload):
        response = client.post(
            "/v1/assessments/summary",
            json={
                "records": [
                    {"assessment": l10_payload, "recommendation": "SKIP"},
                    {"assessment": l10_payload, "recommendation": "PROCEED"},
                ],
                "hourly_rate": 100,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["assessments"] == 2
        assert data["total_hours_saved"] == pytest.approx(9.0)
        assert data["total_cost_saved"] == pytest.approx(900.0)
        assert data["recommendation_counts"] == {
            "SKIP": 1,
            "ASYNC_FIRST": 0,
            "SHORTEN": 0,
            "PROCEED": 1,
        }

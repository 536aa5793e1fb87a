import pytest
from django.urls import reverse
from rest_framework.test import APIClient

from assessments.models import AssessmentHistory

pytestmark = pytest.mark.django_db


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def saved(client, intake_payload):
    response = client.post(reverse("assessment-history"), intake_payload, format="json")
    assert response.status_code == 201
    return response.json()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestScore:
    def test_scores_without_saving(self, client, intake_payload):
        response = client.post(reverse("assessment-score"), intake_payload, format="json")

        assert response.status_code == 200
        result = response.json()["result"]
        assert result["risk_level"] == "high"
        assert result["stage"] == 4
        assert result["probability"] == pytest.approx(0.9)
        assert [f["impact"] for f in result["factors"]] == [30, 25, 20, 15]
        assert AssessmentHistory.objects.count() == 0

    def test_validation_errors(self, client, intake_payload):
        intake_payload["age"] = 70
        intake_payload.pop("cycle_length")

        response = client.post(reverse("assessment-score"), intake_payload, format="json")

        assert response.status_code == 400
        body = response.json()
        assert "age" in body
        assert "cycle_length" in body


class TestHistory:
    def test_create_returns_entry(self, saved, intake_payload):
        assert set(saved) == {"id", "date", "data", "result"}
        assert saved["data"] == intake_payload
        assert saved["result"]["recommendations"][-2:] == [
            "Discuss pain management strategies with your doctor",
            "Request detailed blood work analysis",
        ]

    def test_create_with_weight_and_height(self, client, intake_payload):
        intake_payload.pop("bmi")
        intake_payload.update(weight_kg=60, height_cm=165)

        response = client.post(reverse("assessment-history"), intake_payload, format="json")

        assert response.status_code == 201
        assert response.json()["data"]["bmi"] == 22.04
        assert "weight_kg" not in response.json()["data"]

    def test_list_most_recent_first(self, client, intake_payload, saved):
        intake_payload["age"] = 40
        second = client.post(reverse("assessment-history"), intake_payload, format="json").json()

        listed = client.get(reverse("assessment-history")).json()
        assert [e["id"] for e in listed] == [second["id"], saved["id"]]

    def test_list_trimmed_to_limit(self, client, intake_payload, settings):
        settings.ASSESSMENT_HISTORY_LIMIT = 3
        ids = [
            client.post(reverse("assessment-history"), intake_payload, format="json").json()["id"]
            for _ in range(5)
        ]

        listed = client.get(reverse("assessment-history")).json()
        assert [e["id"] for e in listed] == list(reversed(ids[2:]))
        assert AssessmentHistory.objects.count() == 3

    def test_detail(self, client, saved):
        response = client.get(reverse("assessment-detail", args=[saved["id"]]))
        assert response.status_code == 200
        assert response.json() == saved

    def test_detail_not_found(self, client):
        response = client.get(reverse("assessment-detail", args=["nope"]))
        assert response.status_code == 404
        assert response.json() == {"detail": "Assessment not found."}

    def test_clear(self, client, saved):
        response = client.delete(reverse("assessment-history"))
        assert response.status_code == 204
        assert client.get(reverse("assessment-history")).json() == []

    def test_memory_store(self, client, intake_payload, memory_store):
        response = client.post(reverse("assessment-history"), intake_payload, format="json")

        assert response.status_code == 201
        assert [e.id for e in memory_store.list_all()] == [response.json()["id"]]
        assert AssessmentHistory.objects.count() == 0


class TestEntryViews:
    def test_report_download(self, client, saved):
        response = client.get(reverse("assessment-report", args=[saved["id"]]))

        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/plain")
        assert response["Content-Disposition"].startswith('attachment; filename="EndoAI_Assessment_')
        body = response.content.decode("utf-8")
        assert "Risk Level: High Risk" in body
        assert "| EndoAI Report |" in body

    def test_report_not_found(self, client):
        assert client.get(reverse("assessment-report", args=["nope"])).status_code == 404

    def test_explanation(self, client, saved):
        response = client.get(reverse("assessment-explanation", args=[saved["id"]]))
        assert response.status_code == 200
        assert "- Overall risk: High (90%)" in response.json()["explanation"]

    def test_chat_greeting(self, client, saved):
        response = client.get(reverse("assessment-chat", args=[saved["id"]]))
        assert response.status_code == 200
        assert response.json()["reply"].startswith("Hello!")

    def test_chat_reply(self, client, saved):
        response = client.post(
            reverse("assessment-chat", args=[saved["id"]]),
            {"message": "What is my risk?"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["reply"].startswith("Your risk level is high")

    def test_chat_requires_message(self, client, saved):
        response = client.post(reverse("assessment-chat", args=[saved["id"]]), {}, format="json")
        assert response.status_code == 400
        assert "message" in response.json()

    def test_chat_not_found(self, client):
        response = client.post(reverse("assessment-chat", args=["nope"]), {"message": "hi"}, format="json")
        assert response.status_code == 404

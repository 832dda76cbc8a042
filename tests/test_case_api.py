"""
API tests for the case catalog, examination and free-text endpoints.
"""

import pytest
from django.urls import reverse

pytestmark = pytest.mark.django_db


class TestCaseCatalog:
    """Test suite for listing and retrieving cases."""

    def test_list_hides_answer_key(self, api_client, case, findings, other_case):
        response = api_client.get(reverse("api:case-list"))

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 2
        for row in body["data"]:
            assert "diagnosis" not in row
            assert "key_findings" not in row
        assert {row["title"] for row in body["data"]} == {
            "CHF Exacerbation",
            "Community-Acquired Pneumonia",
        }

    def test_list_filters_by_sex(self, api_client, case, other_case):
        response = api_client.get(reverse("api:case-list"), {"sex": "Female"})

        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["id"] == other_case.id

    def test_detail_returns_vignette(self, api_client, case, findings):
        response = api_client.get(reverse("api:case-detail", args=[case.id]))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["chief_complaint"] == "Shortness of breath and leg swelling"
        assert data["pmh"] == ["Coronary artery disease", "Hypertension"]
        assert data["bp"] == "150/92"
        assert data["spo2"] == 92
        assert "diagnosis" not in data
        assert "key_findings" not in data
        assert "findings" not in data

    def test_detail_unknown_case(self, api_client, db):
        response = api_client.get(reverse("api:case-detail", args=[9999]))

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Case not found"


class TestExamine:
    """Test suite for the examine endpoint."""

    def test_matching_finding(self, api_client, case, findings):
        response = api_client.post(
            reverse("api:case-examine", args=[case.id]),
            {"region": "chest", "maneuver": "auscultate", "target": "heart", "location": "apex"},
            format="json",
        )

        assert response.status_code == 200
        finding = response.json()["data"]["finding"]
        assert finding["id"] == findings["heart_apex"].id
        assert finding["finding_type"] == "audio"
        assert finding["media_url"] == "/media/audio/s3-gallop.mp3"
        assert finding["is_abnormal"] is True

    def test_target_and_location_are_optional(self, api_client, case, findings):
        response = api_client.post(
            reverse("api:case-examine", args=[case.id]),
            {"region": "neck", "maneuver": "inspect"},
            format="json",
        )

        finding = response.json()["data"]["finding"]
        assert finding["id"] == findings["jvp"].id
        assert finding["location"] is None

    def test_unmatched_request_returns_normal(self, api_client, case, findings):
        response = api_client.post(
            reverse("api:case-examine", args=[case.id]),
            {"region": "head", "maneuver": "percuss", "target": "skull"},
            format="json",
        )

        assert response.status_code == 200
        finding = response.json()["data"]["finding"]
        assert finding == {
            "id": "normal",
            "region": "head",
            "maneuver": "percuss",
            "target": "skull",
            "location": None,
            "finding_type": "text",
            "media_url": None,
            "description": "Examination unremarkable. No abnormalities detected.",
            "is_abnormal": False,
        }

    def test_mismatched_location_returns_normal(self, api_client, case, findings):
        response = api_client.post(
            reverse("api:case-examine", args=[case.id]),
            {"region": "chest", "maneuver": "auscultate", "target": "heart", "location": "base"},
            format="json",
        )

        assert response.json()["data"]["finding"]["id"] == "normal"

    def test_invalid_region(self, api_client, case):
        response = api_client.post(
            reverse("api:case-examine", args=[case.id]),
            {"region": "tail", "maneuver": "inspect"},
            format="json",
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("region:")
        assert "region" in body["details"]

    def test_missing_maneuver(self, api_client, case):
        response = api_client.post(
            reverse("api:case-examine", args=[case.id]),
            {"region": "chest"},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["error"] == "maneuver: This field is required."

    def test_unknown_case(self, api_client, db):
        response = api_client.post(
            reverse("api:case-examine", args=[9999]),
            {"region": "chest", "maneuver": "inspect"},
            format="json",
        )

        assert response.status_code == 404
        assert response.json()["error"] == "Case not found"


class TestParseInput:
    """Test suite for the free-text parse endpoint."""

    def test_parses_and_examines(self, api_client, case, findings):
        response = api_client.post(
            reverse("api:case-parse-input", args=[case.id]),
            {"input": "Listen to the heart at the apex"},
            format="json",
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["parsed"]["region"] == "chest"
        assert data["parsed"]["maneuver"] == "auscultate"
        assert data["parsed"]["confidence"] == 1.0
        assert data["finding"]["id"] == findings["heart_apex"].id

    def test_unclear_input_asks_for_clarification(self, api_client, case):
        response = api_client.post(
            reverse("api:case-parse-input", args=[case.id]),
            {"input": "hello there"},
            format="json",
        )

        data = response.json()["data"]
        assert data["parsed"]["clarification_needed"]
        assert data["parsed"]["confidence"] == 0.0
        assert data["finding"] is None

    def test_unknown_case(self, api_client, db):
        response = api_client.post(
            reverse("api:case-parse-input", args=[9999]),
            {"input": "listen to the heart"},
            format="json",
        )

        assert response.status_code == 404


class TestProjectRoutes:
    """Test suite for the non-resource routes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_api_index(self, api_client):
        response = api_client.get(reverse("api:index"))

        assert response.status_code == 200
        assert "sessions" in response.json()["data"]["endpoints"]

    def test_unknown_endpoint_is_json(self, client, db):
        response = client.get("/api/does-not-exist/")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "The requested endpoint does not exist",
        }

    def test_unknown_endpoint_is_json_in_debug(self, client, settings, db):
        settings.DEBUG = True

        response = client.get("/api/does-not-exist/")

        assert response.status_code == 404
        assert response["Content-Type"] == "application/json"
        assert response.json() == {
            "success": False,
            "error": "The requested endpoint does not exist",
        }

    def test_wrong_method_is_enveloped(self, api_client, case):
        response = api_client.delete(reverse("api:case-detail", args=[case.id]))

        assert response.status_code == 405
        assert response.json()["success"] is False
        assert "Allow" in response

"""
API tests for the session workflow: start, record, submit, review.
"""

import pytest
from django.urls import reverse

from exam_engine.services import (
    KeyFindingScoringStrategy,
    ScoringStrategy,
    SessionCompletedError,
    SessionService,
)
from student_sessions.models import StudentSessionModel

pytestmark = pytest.mark.django_db


def _start(api_client, case_id):
    response = api_client.post(reverse("api:session-list"), {"case_id": case_id}, format="json")
    assert response.status_code == 201
    return response.json()["data"]["session"]


def _record(api_client, session_id, finding_id, input_method="click", raw_input=None):
    return api_client.post(
        reverse("api:session-maneuver", args=[session_id]),
        {"finding_id": finding_id, "input_method": input_method, "raw_input": raw_input},
        format="json",
    )


def _submit(api_client, session_id, diagnosis):
    return api_client.put(
        reverse("api:session-submit", args=[session_id]),
        {"diagnosis": diagnosis},
        format="json",
    )


class TestStartSession:
    """Test suite for session creation."""

    def test_creates_open_session(self, api_client, case):
        session = _start(api_client, case.id)

        assert session["case_id"] == case.id
        assert session["is_completed"] is False
        assert session["end_time"] is None
        assert session["maneuvers_performed"] == []
        assert session["overall_score"] is None

    def test_unknown_case(self, api_client, db):
        response = api_client.post(reverse("api:session-list"), {"case_id": 9999}, format="json")

        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Case not found",
            "details": {"case_id": 9999},
        }

    def test_missing_case_id(self, api_client, db):
        response = api_client.post(reverse("api:session-list"), {}, format="json")

        assert response.status_code == 400
        assert response.json()["error"] == "case_id: This field is required."


class TestRecordManeuver:
    """Test suite for recording performed maneuvers."""

    def test_records_click(self, api_client, case, findings):
        session = _start(api_client, case.id)

        response = _record(api_client, session["id"], findings["jvp"].id)

        assert response.status_code == 201
        maneuver = response.json()["data"]["maneuver"]
        assert maneuver["finding_id"] == findings["jvp"].id
        assert maneuver["finding"]["target"] == "jugular_venous_pressure"
        assert maneuver["input_method"] == "click"

    def test_records_typed_input(self, api_client, case, findings):
        session = _start(api_client, case.id)

        response = _record(
            api_client,
            session["id"],
            findings["heart_apex"].id,
            input_method="text",
            raw_input="listen to the heart at the apex",
        )

        assert response.json()["data"]["maneuver"]["raw_input"] == (
            "listen to the heart at the apex"
        )

    def test_finding_from_another_case(self, api_client, case, findings, other_case):
        session = _start(api_client, case.id)

        response = _record(api_client, session["id"], other_case.findings.first().id)

        assert response.status_code == 404
        assert response.json()["error"] == "Finding not found for this case"

    def test_unknown_session(self, api_client, findings):
        response = _record(api_client, 9999, findings["jvp"].id)

        assert response.status_code == 404
        assert response.json()["error"] == "Session not found"

    def test_invalid_input_method(self, api_client, case, findings):
        session = _start(api_client, case.id)

        response = _record(api_client, session["id"], findings["jvp"].id, input_method="voice")

        assert response.status_code == 400


class TestSubmitDiagnosis:
    """Test suite for scoring and closing sessions."""

    def test_focused_correct_session(self, api_client, case, findings):
        session = _start(api_client, case.id)
        for name in ("heart_apex", "jvp", "lung_bases", "abdomen"):
            _record(api_client, session["id"], findings[name].id)

        response = _submit(api_client, session["id"], "congestive heart failure")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["score"] == {
            "completeness": 100,
            "efficiency": 90,
            "diagnosis_accuracy": 100,
            "overall_score": 97,
            "feedback": [
                "Excellent! You checked all key findings.",
                "Correct diagnosis! Well done.",
            ],
        }
        assert data["correct_diagnosis"] == "Congestive Heart Failure"
        assert data["key_findings_missed"] == []
        assert data["session"]["is_completed"] is True
        assert data["session"]["submitted_diagnosis"] == "congestive heart failure"
        assert data["session"]["overall_score"] == 97
        assert len(data["session"]["maneuvers_performed"]) == 4

    def test_empty_session_with_wrong_diagnosis(self, api_client, case, findings):
        session = _start(api_client, case.id)

        response = _submit(api_client, session["id"], "Pneumonia")

        data = response.json()["data"]
        assert data["score"]["completeness"] == 0
        assert data["score"]["efficiency"] == 100
        assert data["score"]["diagnosis_accuracy"] == 50
        assert data["score"]["overall_score"] == 50
        assert data["score"]["feedback"][0] == (
            "You missed 3 key findings that would have helped with the diagnosis."
        )
        assert data["score"]["feedback"][-1] == (
            "The correct diagnosis was: Congestive Heart Failure"
        )
        assert [f["id"] for f in data["key_findings_missed"]] == [
            findings["heart_apex"].id,
            findings["jvp"].id,
            findings["lung_bases"].id,
        ]

    def test_session_cannot_be_submitted_twice(self, api_client, case, findings):
        session = _start(api_client, case.id)
        _submit(api_client, session["id"], "Heart failure")

        response = _submit(api_client, session["id"], "Congestive Heart Failure")

        assert response.status_code == 400
        assert response.json()["error"] == "Session has already been completed"
        stored = StudentSessionModel.objects.get(pk=session["id"])
        assert stored.submitted_diagnosis == "Heart failure"

    def test_completed_session_rejects_maneuvers(self, api_client, case, findings):
        session = _start(api_client, case.id)
        _submit(api_client, session["id"], "Heart failure")

        response = _record(api_client, session["id"], findings["jvp"].id)

        assert response.status_code == 400
        assert response.json()["error"] == "Session has already been completed"

    def test_blank_diagnosis_rejected(self, api_client, case):
        session = _start(api_client, case.id)

        response = _submit(api_client, session["id"], "")

        assert response.status_code == 400
        assert StudentSessionModel.objects.get(pk=session["id"]).end_time is None

    def test_unknown_session(self, api_client, db):
        response = _submit(api_client, 9999, "Heart failure")

        assert response.status_code == 404


class TestReviewAndHistory:
    """Test suite for the review and history endpoints."""

    def test_review_includes_answer_key(self, api_client, case, findings):
        session = _start(api_client, case.id)
        _record(api_client, session["id"], findings["liver"].id)
        _record(api_client, session["id"], findings["jvp"].id)
        _submit(api_client, session["id"], "Cirrhosis")

        response = api_client.get(reverse("api:session-review", args=[session["id"]]))

        assert response.status_code == 200
        review = response.json()["data"]["session"]
        assert review["case"]["diagnosis"] == "Congestive Heart Failure"
        assert sorted(review["case"]["key_findings"]) == sorted(
            f.id for f in case.key_findings.all()
        )
        assert len(review["case"]["findings"]) == 5
        assert [m["finding_id"] for m in review["maneuvers_performed"]] == [
            findings["liver"].id,
            findings["jvp"].id,
        ]

    def test_review_unknown_session(self, api_client, db):
        response = api_client.get(reverse("api:session-review", args=[9999]))

        assert response.status_code == 404

    def test_history_filters_completed(self, api_client, case, findings):
        open_session = _start(api_client, case.id)
        done_session = _start(api_client, case.id)
        _submit(api_client, done_session["id"], "Heart failure")

        completed = api_client.get(reverse("api:session-list"), {"completed": "true"}).json()
        pending = api_client.get(reverse("api:session-list"), {"completed": "false"}).json()

        assert [row["id"] for row in completed["data"]] == [done_session["id"]]
        assert [row["id"] for row in pending["data"]] == [open_session["id"]]
        assert completed["data"][0]["case_title"] == "CHF Exacerbation"


class TestSessionService:
    """Test suite for the service layer directly."""

    def test_strategy_can_be_swapped(self, case, findings):
        class FlatStrategy(ScoringStrategy):
            def calculate_score(self, performed_finding_ids, key_finding_ids,
                                total_findings, submitted_diagnosis, correct_diagnosis):
                score = {
                    "completeness": 1,
                    "efficiency": 2,
                    "diagnosis_accuracy": 3,
                    "overall_score": 4,
                }
                score["feedback"] = self.explain_score(score, correct_diagnosis)
                return score

            def explain_score(self, score, correct_diagnosis):
                return ["flat"]

        service = SessionService(strategy=KeyFindingScoringStrategy())
        service.set_strategy(FlatStrategy())
        session = service.start_session(case.id)

        result = service.submit_diagnosis(session.id, "anything")

        assert result["score"]["overall_score"] == 4
        assert result["session"].feedback == ["flat"]

    def test_second_submit_raises(self, case, findings):
        service = SessionService(strategy=KeyFindingScoringStrategy())
        session = service.start_session(case.id)
        service.submit_diagnosis(session.id, "Heart failure")

        with pytest.raises(SessionCompletedError):
            service.submit_diagnosis(session.id, "Heart failure")

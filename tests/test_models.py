"""
Unit tests for the case and session models.
"""

from datetime import timedelta

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from student_sessions.models import PerformedManeuverModel, StudentSessionModel

pytestmark = pytest.mark.django_db


class TestExamFindingModel:
    """Test suite for finding persistence rules."""

    def test_findings_are_immutable(self, findings):
        finding = findings["heart_apex"]
        finding.description = "Changed after the fact."

        with pytest.raises(ValidationError):
            finding.save()

        finding.refresh_from_db()
        assert finding.description == "S3 gallop heard at apex."

    def test_str_includes_target_and_location(self, findings):
        assert str(findings["heart_apex"]) == "Chest / Auscultate / heart / apex"

    def test_findings_ordered_by_id(self, case, findings):
        ids = list(case.findings.values_list("id", flat=True))
        assert ids == sorted(ids)


class TestCaseModel:
    """Test suite for case validation."""

    def test_clean_accepts_own_key_findings(self, case, findings):
        case.full_clean()

    def test_clean_rejects_foreign_key_findings(self, case, findings, other_case):
        case.key_findings.add(other_case.findings.first())

        with pytest.raises(ValidationError) as excinfo:
            case.clean()

        assert "key_findings" in excinfo.value.message_dict


class TestStudentSessionModel:
    """Test suite for session state."""

    def test_is_completed_follows_end_time(self, case):
        session = StudentSessionModel.objects.create(case=case)
        assert session.is_completed is False

        session.end_time = timezone.now()
        session.save()
        assert session.is_completed is True

    def test_maneuvers_are_ordered_by_timestamp(self, case, findings):
        session = StudentSessionModel.objects.create(case=case)
        later = PerformedManeuverModel.objects.create(
            session=session,
            finding=findings["jvp"],
            input_method="click",
            timestamp=timezone.now(),
        )
        earlier = PerformedManeuverModel.objects.create(
            session=session,
            finding=findings["heart_apex"],
            input_method="text",
            raw_input="listen to the heart",
            timestamp=later.timestamp - timedelta(seconds=30),
        )

        assert list(session.maneuvers_performed.all()) == [earlier, later]

"""
Tests for the ``seed_cases`` management command.
"""

from io import StringIO

import pytest
from django.core.management import call_command

from cases.models import CaseModel, ExamFindingModel
from student_sessions.models import StudentSessionModel

pytestmark = pytest.mark.django_db


def _seed() -> str:
    out = StringIO()
    call_command("seed_cases", stdout=out)
    return out.getvalue()


class TestSeedCases:
    """Test suite for the demo case seeder."""

    def test_seeds_three_cases(self):
        output = _seed()

        assert CaseModel.objects.count() == 3
        assert ExamFindingModel.objects.count() == 24
        assert "Seeding complete" in output

    def test_key_findings(self):
        _seed()

        chf = CaseModel.objects.get(title="CHF Exacerbation")
        assert chf.diagnosis == "Congestive Heart Failure Exacerbation"
        assert chf.findings.count() == 16
        assert set(chf.key_findings.values_list("target", flat=True)) == {
            "jugular_venous_pressure",
            "heart",
            "lungs",
            "edema",
        }
        assert chf.key_findings.count() == 5

        for title in ("COPD Exacerbation", "Community-Acquired Pneumonia"):
            case = CaseModel.objects.get(title=title)
            assert case.key_findings.count() == case.findings.count() == 4

    def test_key_findings_belong_to_their_case(self):
        _seed()

        for case in CaseModel.objects.all():
            case.clean()

    def test_reseeding_replaces_data(self, case, findings):
        StudentSessionModel.objects.create(case=case)

        _seed()
        _seed()

        assert CaseModel.objects.count() == 3
        assert not CaseModel.objects.filter(pk=case.pk).exists()
        assert StudentSessionModel.objects.count() == 0

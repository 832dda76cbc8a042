"""
Tests for the Django admin of the case bank.
"""

import pytest
from django.urls import reverse

from cases.models import ExamFindingModel

pytestmark = pytest.mark.django_db


class TestExamFindingAdmin:
    """Test suite for the finding admin."""

    def test_existing_finding_opens_view_only(self, admin_client, findings):
        url = reverse("admin:cases_examfindingmodel_change", args=[findings["jvp"].id])

        response = admin_client.get(url)

        assert response.status_code == 200
        assert 'name="_save"' not in response.content.decode()

    def test_saving_existing_finding_is_refused(self, admin_client, findings):
        finding = findings["jvp"]
        url = reverse("admin:cases_examfindingmodel_change", args=[finding.id])

        response = admin_client.post(url, {"_save": "Save"})

        assert response.status_code == 403
        finding.refresh_from_db()
        assert finding.description == "JVP elevated at 12 cm H2O."

    def test_new_finding_can_be_added(self, admin_client, case):
        response = admin_client.post(
            reverse("admin:cases_examfindingmodel_add"),
            {
                "case": case.id,
                "region": "head",
                "maneuver": "inspect",
                "target": "general",
                "location": "",
                "description": "Alert, mildly dyspneic.",
                "finding_type": "text",
                "media_url": "",
                "_save": "Save",
            },
        )

        assert response.status_code == 302
        assert ExamFindingModel.objects.filter(case=case, region="head").count() == 1

    def test_changelist_renders(self, admin_client, findings):
        response = admin_client.get(reverse("admin:cases_examfindingmodel_changelist"))

        assert response.status_code == 200

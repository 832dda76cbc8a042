"""
Unit tests for the case repository.
"""

import pytest

from exam_engine.services import CaseRepository

pytestmark = pytest.mark.django_db


class TestCaseRepository:
    """Test suite for repository reads."""

    def test_list_cases_newest_first(self, case, other_case):
        assert list(CaseRepository().list_cases()) == [other_case, case]

    def test_key_finding_ids(self, case, findings):
        ids = CaseRepository().key_finding_ids(case)

        assert sorted(ids) == sorted(
            findings[name].id for name in ("heart_apex", "jvp", "lung_bases")
        )

    def test_find_finding_ignores_missing_location(self, case, findings):
        finding = CaseRepository().find_finding(
            case_id=case.id, region="back", maneuver="percuss", target="lungs"
        )

        assert finding == findings["lung_bases"]

    def test_missing_rows_return_none(self, db):
        repository = CaseRepository()

        assert repository.get_case(9999) is None
        assert repository.get_session(9999) is None
        assert repository.get_session_for_review(9999) is None

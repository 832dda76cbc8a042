"""
exam_engine/services/case_repository.py
=======================================
Repository layer providing read-optimised access to cases, findings
and sessions.

All database reads for the engine are centralised here so service
classes never build raw querysets themselves.
"""

from __future__ import annotations

import logging
from typing import Optional

from django.db.models import Prefetch, QuerySet

from cases.models import CaseModel, ExamFindingModel
from student_sessions.models import PerformedManeuverModel, StudentSessionModel

logger: logging.Logger = logging.getLogger(__name__)


class CaseRepository:
    """Centralised access to the case bank and student sessions."""

    def list_cases(self) -> QuerySet[CaseModel]:
        """Return all cases, newest first."""
        return CaseModel.objects.all()

    def get_case(self, case_id: int) -> Optional[CaseModel]:
        """Return a single case by primary key, or ``None``."""
        try:
            return CaseModel.objects.get(pk=case_id)
        except CaseModel.DoesNotExist:
            logger.warning("case id %s not found", case_id)
            return None

    def find_finding(
        self,
        case_id: int,
        region: str,
        maneuver: str,
        target: str | None = None,
        location: str | None = None,
    ) -> Optional[ExamFindingModel]:
        """Return the first finding matching an examination request.

        ``target`` and ``location`` only narrow the match when supplied.

        Returns:
            The matching :class:`ExamFindingModel`, or ``None``.
        """
        qs: QuerySet[ExamFindingModel] = ExamFindingModel.objects.filter(
            case_id=case_id,
            region=region,
            maneuver=maneuver,
        )
        if target:
            qs = qs.filter(target=target)
        if location:
            qs = qs.filter(location=location)
        return qs.order_by("id").first()

    def get_finding_for_case(
        self, case_id: int, finding_id: int
    ) -> Optional[ExamFindingModel]:
        """Return a finding only if it belongs to the given case."""
        return ExamFindingModel.objects.filter(pk=finding_id, case_id=case_id).first()

    def get_session(self, session_id: int) -> Optional[StudentSessionModel]:
        """Return a session with its case, or ``None``."""
        try:
            return StudentSessionModel.objects.select_related("case").get(pk=session_id)
        except StudentSessionModel.DoesNotExist:
            logger.warning("session id %s not found", session_id)
            return None

    def get_session_for_review(
        self, session_id: int
    ) -> Optional[StudentSessionModel]:
        """Return a session with case findings and ordered maneuvers prefetched."""
        maneuvers = PerformedManeuverModel.objects.select_related("finding").order_by(
            "timestamp", "id"
        )
        try:
            return (
                StudentSessionModel.objects
                .select_related("case")
                .prefetch_related(
                    "case__findings",
                    "case__key_findings",
                    Prefetch("maneuvers_performed", queryset=maneuvers),
                )
                .get(pk=session_id)
            )
        except StudentSessionModel.DoesNotExist:
            logger.warning("session id %s not found", session_id)
            return None

    def key_finding_ids(self, case: CaseModel) -> list[int]:
        """Return the case's key finding IDs."""
        return list(case.key_findings.values_list("id", flat=True))

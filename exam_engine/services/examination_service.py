"""
exam_engine/services/examination_service.py
===========================================
Resolves an examination request against a case's finding bank.

When no authored finding matches, a canned "normal" result is
returned so every maneuver produces an answer.
"""

from __future__ import annotations

import logging

from cases.models import ExamFindingModel

from .case_repository import CaseRepository
from .exceptions import CaseNotFoundError

logger: logging.Logger = logging.getLogger(__name__)

NORMAL_FINDING_ID: str = "normal"
NORMAL_FINDING_DESCRIPTION: str = "Examination unremarkable. No abnormalities detected."


def normal_finding(
    region: str,
    maneuver: str,
    target: str | None = None,
    location: str | None = None,
) -> dict:
    """Build the canned result for maneuvers with no authored finding."""
    return {
        "id": NORMAL_FINDING_ID,
        "region": region,
        "maneuver": maneuver,
        "target": target,
        "location": location,
        "finding_type": ExamFindingModel.FindingType.TEXT.value,
        "media_url": None,
        "description": NORMAL_FINDING_DESCRIPTION,
        "is_abnormal": False,
    }


class ExaminationService:
    """Looks up the finding for a region / maneuver combination."""

    def __init__(self) -> None:
        self._repository: CaseRepository = CaseRepository()

    def examine(
        self,
        case_id: int,
        region: str,
        maneuver: str,
        target: str | None = None,
        location: str | None = None,
    ) -> ExamFindingModel | dict:
        """Perform one maneuver on a case.

        Returns:
            The matching :class:`ExamFindingModel`, or the dict built by
            :func:`normal_finding` when nothing matches.

        Raises:
            CaseNotFoundError: If the case does not exist.
        """
        if self._repository.get_case(case_id) is None:
            raise CaseNotFoundError(case_id)

        finding = self._repository.find_finding(
            case_id=case_id,
            region=region,
            maneuver=maneuver,
            target=target,
            location=location,
        )
        if finding is None:
            logger.debug(
                "no finding for case %s %s/%s (target=%s, location=%s)",
                case_id,
                region,
                maneuver,
                target,
                location,
            )
            return normal_finding(region, maneuver, target, location)

        logger.debug("case %s %s/%s -> finding %s", case_id, region, maneuver, finding.id)
        return finding

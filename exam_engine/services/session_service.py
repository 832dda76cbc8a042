"""
exam_engine/services/session_service.py
=======================================
Orchestration service for student sessions: start → record
maneuvers → submit diagnosis → review.

Uses the **Strategy** pattern for scoring — callers inject or swap the
scoring rules at runtime via :meth:`set_strategy`.
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.utils import timezone

from cases.models import ExamFindingModel
from student_sessions.models import PerformedManeuverModel, StudentSessionModel

from .base_strategy import ScoringStrategy
from .case_repository import CaseRepository
from .exceptions import (
    CaseNotFoundError,
    ExamEngineError,
    FindingNotFoundError,
    SessionCompletedError,
    SessionNotFoundError,
)

logger: logging.Logger = logging.getLogger(__name__)

_SCORE_FIELDS: tuple[str, ...] = (
    "completeness",
    "efficiency",
    "diagnosis_accuracy",
    "overall_score",
    "feedback",
)


class SessionService:
    """High-level session orchestrator.

    Typical usage::

        from exam_engine.services import (
            KeyFindingScoringStrategy,
            SessionService,
        )

        svc = SessionService(strategy=KeyFindingScoringStrategy())
        session = svc.start_session(case_id=1)
        svc.record_maneuver(session.id, finding_id=4, input_method="click")
        result = svc.submit_diagnosis(session.id, "Congestive heart failure")
    """

    def __init__(self, strategy: ScoringStrategy) -> None:
        """Initialise with a scoring strategy (dependency injection).

        Args:
            strategy: Concrete :class:`ScoringStrategy` implementation.
        """
        self._strategy: ScoringStrategy = strategy
        self._repository: CaseRepository = CaseRepository()

    def set_strategy(self, strategy: ScoringStrategy) -> None:
        """Replace the active scoring strategy at runtime."""
        logger.info(
            "switching scoring strategy to %s",
            strategy.__class__.__name__,
        )
        self._strategy = strategy

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start_session(self, case_id: int) -> StudentSessionModel:
        """Open a new session on a case.

        Raises:
            CaseNotFoundError: If the case does not exist.
        """
        case = self._repository.get_case(case_id)
        if case is None:
            raise CaseNotFoundError(case_id)

        session: StudentSessionModel = StudentSessionModel.objects.create(
            case=case,
            start_time=timezone.now(),
        )
        logger.info("started session %s on case %s", session.id, case_id)
        return session

    def record_maneuver(
        self,
        session_id: int,
        finding_id: int,
        input_method: str,
        raw_input: str | None = None,
    ) -> PerformedManeuverModel:
        """Append a performed finding to an open session.

        Raises:
            SessionNotFoundError: If the session does not exist.
            SessionCompletedError: If the session already has an end time.
            FindingNotFoundError: If the finding is not part of the
                session's case.
        """
        session = self._require_open_session(session_id)

        finding: ExamFindingModel | None = self._repository.get_finding_for_case(
            case_id=session.case_id, finding_id=finding_id
        )
        if finding is None:
            raise FindingNotFoundError(finding_id=finding_id, case_id=session.case_id)

        maneuver: PerformedManeuverModel = PerformedManeuverModel.objects.create(
            session=session,
            finding=finding,
            input_method=input_method,
            raw_input=raw_input or "",
            timestamp=timezone.now(),
        )
        logger.debug(
            "session %s recorded finding %s via %s",
            session_id,
            finding_id,
            input_method,
        )
        return maneuver

    def submit_diagnosis(self, session_id: int, diagnosis: str) -> dict:
        """Score the session and close it.

        Returns:
            Dict with ``session`` (refreshed model), ``score`` (dict),
            ``correct_diagnosis`` (str) and ``key_findings_missed``
            (list of :class:`ExamFindingModel`).

        Raises:
            SessionNotFoundError: If the session does not exist.
            SessionCompletedError: If the session was already submitted.
            ExamEngineError: On unexpected scoring or persistence errors.
        """
        session = self._repository.get_session_for_review(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        if session.is_completed:
            raise SessionCompletedError(session_id)

        case = session.case
        findings: list[ExamFindingModel] = list(case.findings.all())
        key_ids: list[int] = self._repository.key_finding_ids(case)
        performed_ids: list[int] = [
            m.finding_id for m in session.maneuvers_performed.all()
        ]

        try:
            score: dict = self._strategy.calculate_score(
                performed_finding_ids=performed_ids,
                key_finding_ids=key_ids,
                total_findings=len(findings),
                submitted_diagnosis=diagnosis,
                correct_diagnosis=case.diagnosis,
            )

            with transaction.atomic():
                # conditional update so a concurrent submit cannot score twice
                updated: int = StudentSessionModel.objects.filter(
                    pk=session_id,
                    end_time__isnull=True,
                ).update(
                    end_time=timezone.now(),
                    submitted_diagnosis=diagnosis,
                    **{field: score[field] for field in _SCORE_FIELDS},
                )
            if not updated:
                raise SessionCompletedError(session_id)

        except ExamEngineError:
            raise
        except Exception as exc:
            logger.exception("unexpected error while scoring session %s", session_id)
            raise ExamEngineError(
                message="An unexpected error occurred while scoring the session.",
                details={"original_error": str(exc)},
            ) from exc

        performed_set: set[int] = set(performed_ids)
        missed: list[ExamFindingModel] = [
            f for f in findings if f.id in key_ids and f.id not in performed_set
        ]

        logger.info(
            "session %s submitted - overall score %s",
            session_id,
            score["overall_score"],
        )
        return {
            "session": self._repository.get_session_for_review(session_id),
            "score": {field: score[field] for field in _SCORE_FIELDS},
            "correct_diagnosis": case.diagnosis,
            "key_findings_missed": missed,
        }

    def get_review(self, session_id: int) -> StudentSessionModel:
        """Return a session with its case, findings and ordered maneuvers.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        session = self._repository.get_session_for_review(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _require_open_session(self, session_id: int) -> StudentSessionModel:
        session = self._repository.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        if session.is_completed:
            raise SessionCompletedError(session_id)
        return session

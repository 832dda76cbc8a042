"""
exam_engine/services/exceptions.py
==================================
Custom exception hierarchy for the examination engine.

Exception Tree::

    ExamEngineError (base)
    ├── CaseNotFoundError
    ├── SessionNotFoundError
    ├── FindingNotFoundError
    ├── SessionCompletedError
    └── MediaGenerationError
        ├── InvalidMediaRequestError
        └── MediaGenerationUnavailableError
"""

from __future__ import annotations


class ExamEngineError(Exception):
    """Base exception for all examination engine errors.

    All domain-specific exceptions raised within the service layer
    inherit from this class so callers can catch them uniformly.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with structured error context.
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message: str = message
        self.details: dict = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class CaseNotFoundError(ExamEngineError):
    """Raised when a case ID does not exist."""

    def __init__(self, case_id: int) -> None:
        self.case_id: int = case_id
        super().__init__(
            message="Case not found",
            details={"case_id": case_id},
        )


class SessionNotFoundError(ExamEngineError):
    """Raised when a session ID does not exist."""

    def __init__(self, session_id: int) -> None:
        self.session_id: int = session_id
        super().__init__(
            message="Session not found",
            details={"session_id": session_id},
        )


class FindingNotFoundError(ExamEngineError):
    """Raised when a finding does not exist within the session's case."""

    def __init__(self, finding_id: int, case_id: int) -> None:
        self.finding_id: int = finding_id
        super().__init__(
            message="Finding not found for this case",
            details={"finding_id": finding_id, "case_id": case_id},
        )


class SessionCompletedError(ExamEngineError):
    """Raised when a completed session receives a maneuver or diagnosis."""

    def __init__(self, session_id: int) -> None:
        self.session_id: int = session_id
        super().__init__(
            message="Session has already been completed",
            details={"session_id": session_id},
        )


class MediaGenerationError(ExamEngineError):
    """Raised when the generation API or the asset download fails."""


class InvalidMediaRequestError(MediaGenerationError):
    """Raised for unknown media types or unsafe filenames."""


class MediaGenerationUnavailableError(MediaGenerationError):
    """Raised when no Replicate API token is configured."""

    def __init__(self) -> None:
        super().__init__(message="REPLICATE_API_TOKEN not configured")

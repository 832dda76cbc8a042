"""
exam_engine/services/__init__.py
================================
Service layer for the virtual patient examination engine.

Exports:
    - ScoringStrategy: Abstract base class for scoring strategies.
    - KeyFindingScoringStrategy: Completeness / efficiency / accuracy scoring.
    - SessionService: Session orchestration with strategy pattern.
    - ExaminationService: Finding lookup with the canned normal result.
    - InputParser: Keyword parser for typed examination requests.
    - MediaGenerationService: Replicate image / video gateway.
    - CaseRepository: Read-optimised repository for cases and sessions.
    - ExamEngineError and subclasses: Custom exceptions.
"""

from .base_strategy import ScoringStrategy
from .case_repository import CaseRepository
from .examination_service import ExaminationService, normal_finding
from .exceptions import (
    CaseNotFoundError,
    ExamEngineError,
    FindingNotFoundError,
    InvalidMediaRequestError,
    MediaGenerationError,
    MediaGenerationUnavailableError,
    SessionCompletedError,
    SessionNotFoundError,
)
from .input_parser import InputParser
from .key_finding_scoring import KeyFindingScoringStrategy
from .media_generation_service import MediaGenerationService
from .session_service import SessionService

__all__: list[str] = [
    "ScoringStrategy",
    "KeyFindingScoringStrategy",
    "SessionService",
    "ExaminationService",
    "normal_finding",
    "InputParser",
    "MediaGenerationService",
    "CaseRepository",
    "ExamEngineError",
    "CaseNotFoundError",
    "SessionNotFoundError",
    "FindingNotFoundError",
    "SessionCompletedError",
    "MediaGenerationError",
    "InvalidMediaRequestError",
    "MediaGenerationUnavailableError",
]

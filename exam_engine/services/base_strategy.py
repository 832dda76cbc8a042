"""
exam_engine/services/base_strategy.py
=====================================
Abstract base class defining the contract every scoring strategy
must fulfil.  Follows the **Strategy** design pattern so the
:class:`SessionService` can swap scoring rules at runtime.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class ScoringStrategy(ABC):
    """Abstract scoring strategy interface.

    Implementations must be pure: the same inputs always produce the
    same scores, and nothing is read from or written to the database.
    """

    @abstractmethod
    def calculate_score(
        self,
        performed_finding_ids: Sequence[int],
        key_finding_ids: Sequence[int],
        total_findings: int,
        submitted_diagnosis: str,
        correct_diagnosis: str,
    ) -> dict:
        """Score a finished session.

        Args:
            performed_finding_ids: Finding IDs in the order they were
                performed (repeats allowed).
            key_finding_ids: The case's key finding IDs.
            total_findings: Number of findings authored for the case.
            submitted_diagnosis: Diagnosis entered by the student.
            correct_diagnosis: The case's canonical diagnosis.

        Returns:
            A dict containing at minimum::

                {
                    "completeness": int,
                    "efficiency": int,
                    "diagnosis_accuracy": int,
                    "overall_score": int,
                    "feedback": [str, ...],
                }
        """
        ...

    @abstractmethod
    def explain_score(self, score: dict, correct_diagnosis: str) -> list[str]:
        """Produce the ordered feedback messages for a score.

        Args:
            score: Dict as returned by :meth:`calculate_score`; must carry
                ``missed_key_findings`` alongside the scores.
            correct_diagnosis: Revealed when the submission was wrong.

        Returns:
            Human-readable feedback strings.
        """
        ...

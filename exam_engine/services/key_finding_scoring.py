"""
exam_engine/services/key_finding_scoring.py
===========================================
Default scoring strategy: measures a session against the case's key
findings and canonical diagnosis.

Algorithm:
    1. completeness = key findings performed / key findings × 100.
    2. efficiency = 100 − (non-key maneuvers / total findings) × 50,
       floored at 0.
    3. diagnosis_accuracy = 100 if the submission contains, or is
       contained by, the canonical diagnosis (case-insensitive), else 50.
    4. overall_score = mean of the three.

Every score is rounded half-up to an integer.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .base_strategy import ScoringStrategy

# efficiency feedback bands
LOW_EFFICIENCY_THRESHOLD: int = 70
HIGH_EFFICIENCY_THRESHOLD: int = 90

CORRECT_ACCURACY: int = 100
INCORRECT_ACCURACY: int = 50


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class KeyFindingScoringStrategy(ScoringStrategy):
    """Scores completeness, efficiency and diagnostic accuracy."""

    def calculate_score(
        self,
        performed_finding_ids: Sequence[int],
        key_finding_ids: Sequence[int],
        total_findings: int,
        submitted_diagnosis: str,
        correct_diagnosis: str,
    ) -> dict:
        key_set: set[int] = set(key_finding_ids)
        performed_set: set[int] = set(performed_finding_ids)

        key_checked: int = len(key_set & performed_set)
        missed: int = len(key_set) - key_checked

        if key_set:
            completeness: int = round_half_up(key_checked / len(key_set) * 100)
        else:
            completeness = 100

        unnecessary: int = sum(
            1 for finding_id in performed_finding_ids if finding_id not in key_set
        )
        if total_findings > 0:
            efficiency: int = max(
                0, round_half_up(100 - (unnecessary / total_findings) * 50)
            )
        else:
            efficiency = 100

        diagnosis_accuracy: int = (
            CORRECT_ACCURACY
            if self.diagnosis_matches(submitted_diagnosis, correct_diagnosis)
            else INCORRECT_ACCURACY
        )

        overall_score: int = round_half_up(
            (completeness + efficiency + diagnosis_accuracy) / 3
        )

        score: dict = {
            "completeness": completeness,
            "efficiency": efficiency,
            "diagnosis_accuracy": diagnosis_accuracy,
            "overall_score": overall_score,
            "missed_key_findings": missed,
            "unnecessary_maneuvers": unnecessary,
        }
        score["feedback"] = self.explain_score(score, correct_diagnosis)
        return score

    @staticmethod
    def diagnosis_matches(submitted: str, correct: str) -> bool:
        """Case-insensitive substring match in either direction."""
        submitted_norm: str = submitted.strip().lower()
        correct_norm: str = correct.strip().lower()
        if not submitted_norm:
            return False
        return submitted_norm in correct_norm or correct_norm in submitted_norm

    def explain_score(self, score: dict, correct_diagnosis: str) -> list[str]:
        feedback: list[str] = []

        if score["completeness"] < 100:
            missed: int = score["missed_key_findings"]
            plural: str = "s" if missed > 1 else ""
            feedback.append(
                f"You missed {missed} key finding{plural} that would have "
                "helped with the diagnosis."
            )
        else:
            feedback.append("Excellent! You checked all key findings.")

        if score["efficiency"] < LOW_EFFICIENCY_THRESHOLD:
            feedback.append(
                "Consider focusing on more targeted examination maneuvers "
                "based on your differential diagnosis."
            )
        elif score["efficiency"] > HIGH_EFFICIENCY_THRESHOLD:
            feedback.append(
                "Great efficiency! You performed a focused, "
                "hypothesis-driven examination."
            )

        if score["diagnosis_accuracy"] < CORRECT_ACCURACY:
            feedback.append(f"The correct diagnosis was: {correct_diagnosis}")
        else:
            feedback.append("Correct diagnosis! Well done.")

        return feedback

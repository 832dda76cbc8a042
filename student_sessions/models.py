"""
student_sessions/models.py
==========================
Models for recording a student's examination of a case.

Contains:
    - StudentSessionModel: A single attempt at a case, from start to
      diagnosis submission, holding the computed scores.
    - PerformedManeuverModel: One finding the student triggered during
      a session, in order.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from cases.models import CaseModel, ExamFindingModel


class StudentSessionModel(models.Model):
    """Records one student attempt at a case.

    A session is *open* until ``end_time`` is set by diagnosis
    submission; after that it accepts neither maneuvers nor another
    diagnosis.

    Attributes:
        case: The case being examined.
        start_time: When the session was created.
        end_time: When the diagnosis was submitted (``None`` while open).
        submitted_diagnosis: Free-text diagnosis entered by the student.
        completeness / efficiency / diagnosis_accuracy / overall_score:
            Scores (0–100) computed on submission.
        feedback: JSON list of feedback strings computed on submission.
    """

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    case: models.ForeignKey = models.ForeignKey(
        CaseModel,
        on_delete=models.CASCADE,
        related_name="sessions",
        help_text="The case being examined in this session.",
    )
    start_time = models.DateTimeField(
        default=timezone.now,
        help_text="Timestamp when the session was started.",
    )
    end_time = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Timestamp when the diagnosis was submitted.",
    )
    submitted_diagnosis: str = models.TextField(
        blank=True,
        default="",
        help_text="Diagnosis submitted by the student.",
    )
    completeness = models.PositiveSmallIntegerField(null=True, blank=True)
    efficiency = models.PositiveSmallIntegerField(null=True, blank=True)
    diagnosis_accuracy = models.PositiveSmallIntegerField(null=True, blank=True)
    overall_score = models.PositiveSmallIntegerField(null=True, blank=True)
    feedback = models.JSONField(
        default=list,
        blank=True,
        help_text='Feedback messages, e.g. ["Correct diagnosis! Well done."].',
    )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def is_completed(self) -> bool:
        return self.end_time is not None

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["-start_time"]
        verbose_name: str = "Student Session"
        verbose_name_plural: str = "Student Sessions"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        formatted_date: str = (
            self.start_time.strftime("%Y-%m-%d %H:%M") if self.start_time else "N/A"
        )
        state: str = "completed" if self.is_completed else "open"
        return f"Session {self.pk} on {self.case.title} - {formatted_date} ({state})"


class PerformedManeuverModel(models.Model):
    """A finding triggered by the student during a session."""

    class InputMethod(models.TextChoices):
        """How the student requested the maneuver."""

        CLICK = "click", "Click"
        TEXT = "text", "Text"

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    session: models.ForeignKey = models.ForeignKey(
        StudentSessionModel,
        on_delete=models.CASCADE,
        related_name="maneuvers_performed",
    )
    finding: models.ForeignKey = models.ForeignKey(
        ExamFindingModel,
        on_delete=models.PROTECT,
        related_name="performances",
    )
    input_method: str = models.CharField(
        max_length=10,
        choices=InputMethod.choices,
    )
    raw_input: str = models.TextField(
        blank=True,
        default="",
        help_text="Original free text when the maneuver was typed.",
    )
    timestamp = models.DateTimeField(default=timezone.now)

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["timestamp", "id"]
        verbose_name: str = "Performed Maneuver"
        verbose_name_plural: str = "Performed Maneuvers"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{self.finding} via {self.get_input_method_display()}"

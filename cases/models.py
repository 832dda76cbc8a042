"""
cases/models.py
===============
Core domain models for the simulated patient case bank.

Contains:
    - CaseModel: A patient vignette with demographics, history, vital
      signs, the canonical diagnosis and its key findings.
    - ExamFindingModel: A pre-authored examination finding tied to a
      body region and maneuver (plus optional target / location).
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class BodyRegion(models.TextChoices):
    """Body regions a student can examine."""

    HEAD = "head", "Head"
    NECK = "neck", "Neck"
    CHEST = "chest", "Chest"
    ABDOMEN = "abdomen", "Abdomen"
    BACK = "back", "Back"
    UPPER_EXTREMITY_LEFT = "upper_extremity_left", "Left Upper Extremity"
    UPPER_EXTREMITY_RIGHT = "upper_extremity_right", "Right Upper Extremity"
    LOWER_EXTREMITY_LEFT = "lower_extremity_left", "Left Lower Extremity"
    LOWER_EXTREMITY_RIGHT = "lower_extremity_right", "Right Lower Extremity"


class Maneuver(models.TextChoices):
    """Examination maneuvers."""

    INSPECT = "inspect", "Inspect"
    PALPATE = "palpate", "Palpate"
    PERCUSS = "percuss", "Percuss"
    AUSCULTATE = "auscultate", "Auscultate"
    SPECIAL_TEST = "special_test", "Special Test"
    MEASURE = "measure", "Measure"


class CaseModel(models.Model):
    """A simulated patient case.

    The ``diagnosis`` and ``key_findings`` fields are withheld from the
    student until a diagnosis has been submitted.

    Attributes:
        title: Short case label (e.g. "CHF Exacerbation").
        age / sex / chief_complaint: Demographics shown on the case list.
        hpi: History of present illness.
        pmh / medications / allergies: JSON lists of strings.
        social_history / family_history: Free-text history.
        bp / hr / rr / temp / spo2: Vital signs at presentation.
        diagnosis: Canonical free-text diagnosis used for scoring.
        key_findings: Findings considered diagnostically essential.
    """

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    title: str = models.CharField(
        max_length=200,
        help_text="Short case title.",
    )
    age: int = models.PositiveSmallIntegerField(
        validators=[MaxValueValidator(130)],
        help_text="Patient age in years.",
    )
    sex: str = models.CharField(
        max_length=20,
        help_text="Patient sex as presented in the vignette.",
    )
    chief_complaint: str = models.CharField(
        max_length=255,
        help_text="Presenting complaint in the patient's words.",
    )
    hpi: str = models.TextField(
        blank=True,
        default="",
        help_text="History of present illness.",
    )
    pmh = models.JSONField(
        default=list,
        blank=True,
        help_text='Past medical history, e.g. ["Hypertension"].',
    )
    medications = models.JSONField(
        default=list,
        blank=True,
        help_text='Current medications, e.g. ["Lisinopril 20mg daily"].',
    )
    allergies = models.JSONField(
        default=list,
        blank=True,
        help_text='Known allergies, e.g. ["NKDA"].',
    )
    social_history: str = models.TextField(blank=True, default="")
    family_history: str = models.TextField(blank=True, default="")
    bp: str = models.CharField(
        max_length=20,
        help_text='Blood pressure, e.g. "150/92".',
    )
    hr: int = models.PositiveSmallIntegerField(help_text="Heart rate (bpm).")
    rr: int = models.PositiveSmallIntegerField(help_text="Respiratory rate (/min).")
    temp: float = models.FloatField(help_text="Temperature (°C).")
    spo2: int = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        help_text="Oxygen saturation (%).",
    )
    diagnosis: str = models.CharField(
        max_length=255,
        help_text="Canonical diagnosis the submission is scored against.",
    )
    key_findings: models.ManyToManyField = models.ManyToManyField(
        "ExamFindingModel",
        blank=True,
        related_name="key_for_cases",
        help_text="Findings the student is expected to elicit.",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def clean(self) -> None:
        """Validate that every key finding belongs to this case.

        Note:
            Like any M2M check this only runs once the instance has a PK.
        """
        super().clean()
        if self.pk and self.key_findings.exclude(case_id=self.pk).exists():
            raise ValidationError(
                {"key_findings": "Key findings must belong to the same case."}
            )

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["-created_at", "-id"]
        verbose_name: str = "Case"
        verbose_name_plural: str = "Cases"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{self.title} ({self.age}{self.sex[:1]})"


class ExamFindingModel(models.Model):
    """A single examination finding.

    Findings are looked up by ``(region, maneuver, target, location)``;
    ``target`` and ``location`` are empty strings when not applicable.
    Rows are immutable once created.
    """

    class FindingType(models.TextChoices):
        """How the finding is presented to the student."""

        TEXT = "text", "Text"
        AUDIO = "audio", "Audio"
        IMAGE = "image", "Image"
        VIDEO = "video", "Video"

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    case: models.ForeignKey = models.ForeignKey(
        CaseModel,
        on_delete=models.CASCADE,
        related_name="findings",
        help_text="Case this finding belongs to.",
    )
    region: str = models.CharField(
        max_length=30,
        choices=BodyRegion.choices,
    )
    maneuver: str = models.CharField(
        max_length=20,
        choices=Maneuver.choices,
    )
    target: str = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text='Structure examined, e.g. "heart" or "jugular_venous_pressure".',
    )
    location: str = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text='Sub-location within the region, e.g. "apex".',
    )
    description: str = models.TextField(
        help_text="What the student observes.",
    )
    finding_type: str = models.CharField(
        max_length=10,
        choices=FindingType.choices,
        default=FindingType.TEXT,
    )
    media_url: str = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text='Path of the associated media, e.g. "/media/audio/s3-gallop.mp3".',
    )
    is_abnormal: bool = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def save(self, *args, **kwargs) -> None:
        if not self._state.adding:
            raise ValidationError("Exam findings are immutable once created.")
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["id"]
        indexes = [
            models.Index(
                fields=["case", "region", "maneuver"],
                name="finding_lookup_idx",
            ),
        ]
        verbose_name: str = "Exam Finding"
        verbose_name_plural: str = "Exam Findings"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        parts = [self.get_region_display(), self.get_maneuver_display()]
        if self.target:
            parts.append(self.target)
        if self.location:
            parts.append(self.location)
        return " / ".join(parts)

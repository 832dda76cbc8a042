"""
api/serializers.py
==================
DRF serializers for the Virtual Patient API.

Contains:
    - CaseListSerializer / CaseDetailSerializer: Student-facing case views
      (the answer key is never exposed).
    - ExamFindingSerializer: Representation of a single finding.
    - StudentSessionSerializer / SessionReviewSerializer: Session state
      and the post-submission review with the answer key.
    - *RequestSerializer: Input validation for every POST/PUT endpoint.
"""

from __future__ import annotations

from rest_framework import serializers

from cases.models import BodyRegion, CaseModel, ExamFindingModel, Maneuver
from student_sessions.models import PerformedManeuverModel, StudentSessionModel


# ─────────────────────────────────────────────────────────────────────
# Read-only serializers
# ─────────────────────────────────────────────────────────────────────


class ExamFindingSerializer(serializers.ModelSerializer):
    """Serializer for :class:`ExamFindingModel`.

    Empty ``target`` / ``location`` / ``media_url`` are rendered as
    ``null`` so authored findings look like the canned normal result.
    """

    _OPTIONAL_FIELDS: tuple[str, ...] = ("target", "location", "media_url")

    class Meta:
        model = ExamFindingModel
        fields = [
            "id",
            "region",
            "maneuver",
            "target",
            "location",
            "finding_type",
            "media_url",
            "description",
            "is_abnormal",
        ]
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        for field in self._OPTIONAL_FIELDS:
            if data.get(field) == "":
                data[field] = None
        return data


class CaseListSerializer(serializers.ModelSerializer):
    """Summary row for the case picker."""

    class Meta:
        model = CaseModel
        fields = [
            "id",
            "title",
            "age",
            "sex",
            "chief_complaint",
            "created_at",
        ]
        read_only_fields = fields


class CaseDetailSerializer(serializers.ModelSerializer):
    """Full vignette without the diagnosis or key findings."""

    class Meta:
        model = CaseModel
        fields = [
            "id",
            "title",
            "age",
            "sex",
            "chief_complaint",
            "hpi",
            "pmh",
            "medications",
            "allergies",
            "social_history",
            "family_history",
            "bp",
            "hr",
            "rr",
            "temp",
            "spo2",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CaseReviewSerializer(CaseDetailSerializer):
    """Vignette plus the answer key, used once a session is reviewed."""

    findings = ExamFindingSerializer(many=True, read_only=True)
    key_findings = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta(CaseDetailSerializer.Meta):
        fields = CaseDetailSerializer.Meta.fields + [
            "diagnosis",
            "key_findings",
            "findings",
        ]
        read_only_fields = fields


class PerformedManeuverSerializer(serializers.ModelSerializer):
    """A performed maneuver with its finding inlined."""

    finding = ExamFindingSerializer(read_only=True)
    finding_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = PerformedManeuverModel
        fields = [
            "id",
            "session",
            "finding_id",
            "finding",
            "input_method",
            "raw_input",
            "timestamp",
        ]
        read_only_fields = fields


class StudentSessionSerializer(serializers.ModelSerializer):
    """Session state including scores once submitted."""

    case_id = serializers.IntegerField(read_only=True)
    is_completed = serializers.BooleanField(read_only=True)
    maneuvers_performed = PerformedManeuverSerializer(many=True, read_only=True)

    class Meta:
        model = StudentSessionModel
        fields = [
            "id",
            "case_id",
            "start_time",
            "end_time",
            "is_completed",
            "submitted_diagnosis",
            "completeness",
            "efficiency",
            "diagnosis_accuracy",
            "overall_score",
            "feedback",
            "maneuvers_performed",
        ]
        read_only_fields = fields


class SessionSummarySerializer(serializers.ModelSerializer):
    """Lightweight row for the session history list."""

    case_id = serializers.IntegerField(read_only=True)
    case_title = serializers.CharField(source="case.title", read_only=True)
    is_completed = serializers.BooleanField(read_only=True)

    class Meta:
        model = StudentSessionModel
        fields = [
            "id",
            "case_id",
            "case_title",
            "start_time",
            "end_time",
            "is_completed",
            "overall_score",
        ]
        read_only_fields = fields


class SessionReviewSerializer(StudentSessionSerializer):
    """Session with the full case, answer key and ordered maneuvers."""

    case = CaseReviewSerializer(read_only=True)

    class Meta(StudentSessionSerializer.Meta):
        fields = StudentSessionSerializer.Meta.fields + ["case"]
        read_only_fields = fields


# ─────────────────────────────────────────────────────────────────────
# Input serializers
# ─────────────────────────────────────────────────────────────────────


class ExamineRequestSerializer(serializers.Serializer):
    """Input validation for the examine endpoint."""

    region = serializers.ChoiceField(choices=BodyRegion.choices)
    maneuver = serializers.ChoiceField(choices=Maneuver.choices)
    target = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True
    )
    location = serializers.CharField(
        max_length=100, required=False, allow_blank=True, allow_null=True
    )


class ParseInputRequestSerializer(serializers.Serializer):
    """Input validation for the free-text parse endpoint."""

    input = serializers.CharField(max_length=500)


class SessionCreateSerializer(serializers.Serializer):
    """Input validation for session creation."""

    case_id = serializers.IntegerField(min_value=1)


class ManeuverRecordSerializer(serializers.Serializer):
    """Input validation for recording a performed maneuver."""

    finding_id = serializers.IntegerField(min_value=1)
    input_method = serializers.ChoiceField(
        choices=PerformedManeuverModel.InputMethod.choices
    )
    raw_input = serializers.CharField(
        required=False, allow_blank=True, allow_null=True
    )


class DiagnosisSubmitSerializer(serializers.Serializer):
    """Input validation for diagnosis submission."""

    diagnosis = serializers.CharField(max_length=500)


class ImageRequestSerializer(serializers.Serializer):
    image_type = serializers.CharField(max_length=100)


class CustomImageRequestSerializer(serializers.Serializer):
    prompt = serializers.CharField()
    filename = serializers.CharField(max_length=120)


class VideoRequestSerializer(serializers.Serializer):
    video_type = serializers.CharField(max_length=100)


class ImageToVideoRequestSerializer(serializers.Serializer):
    image_url = serializers.URLField()
    video_prompt = serializers.CharField()
    filename = serializers.CharField(max_length=120)
    duration = serializers.IntegerField(min_value=1, max_value=10, default=3)

"""
api/views.py
============
DRF views for the Virtual Patient API.

Contains:
    - CaseListAPIView / CaseDetailAPIView: Case picker and vignette.
    - ExamineAPIView / ParseInputAPIView: Examination maneuvers.
    - Session views: create, list, record maneuver, submit, review.
    - Media views: status, catalog, image / video generation.
    - Project-level handlers: health, API index, JSON 404 / 500.

Every response uses the ``{success, data|error}`` envelope.
"""

from __future__ import annotations

import logging

from django.http import JsonResponse
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters, generics, status
from rest_framework.decorators import api_view
from rest_framework.views import APIView

from exam_engine.services import (
    CaseRepository,
    ExaminationService,
    ExamEngineError,
    InputParser,
    KeyFindingScoringStrategy,
    MediaGenerationService,
    SessionService,
)
from exam_engine.services.exceptions import CaseNotFoundError
from student_sessions.models import StudentSessionModel

from .filters import StudentSessionFilter
from .responses import engine_error_response, server_error_response, success_response
from .serializers import (
    CaseDetailSerializer,
    CaseListSerializer,
    CustomImageRequestSerializer,
    DiagnosisSubmitSerializer,
    ExamFindingSerializer,
    ExamineRequestSerializer,
    ImageRequestSerializer,
    ImageToVideoRequestSerializer,
    ManeuverRecordSerializer,
    ParseInputRequestSerializer,
    PerformedManeuverSerializer,
    SessionCreateSerializer,
    SessionReviewSerializer,
    SessionSummarySerializer,
    StudentSessionSerializer,
    VideoRequestSerializer,
)

logger = logging.getLogger(__name__)


def _session_service() -> SessionService:
    return SessionService(strategy=KeyFindingScoringStrategy())


def _finding_payload(finding) -> dict:
    """Serialize an authored finding; the canned normal result is already a dict."""
    if isinstance(finding, dict):
        return finding
    return ExamFindingSerializer(finding).data


# ─────────────────────────────────────────────────────────────────────
# Cases
# ─────────────────────────────────────────────────────────────────────


class CaseListAPIView(generics.ListAPIView):
    """List all cases without their answer keys.

    **Filters** (query params):
        - ``sex``: exact match (e.g. ``?sex=Female``)
        - ``search``: partial match on ``title`` and ``chief_complaint``
        - ``ordering``: sort by ``created_at``, ``title`` or ``age``
    """

    serializer_class = CaseListSerializer
    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]
    filterset_fields = ["sex"]
    search_fields = ["title", "chief_complaint"]
    ordering_fields = ["created_at", "title", "age"]
    ordering = ["-created_at", "-id"]

    def get_queryset(self):
        return CaseRepository().list_cases()

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        data = self.get_serializer(queryset, many=True).data
        return success_response(data, count=len(data))


class CaseDetailAPIView(APIView):
    """Retrieve a case vignette.

    **GET** ``/api/cases/<case_id>/``

    The diagnosis and key findings are withheld until submission.
    """

    def get(self, request, case_id: int):
        try:
            case = CaseRepository().get_case(case_id)
            if case is None:
                raise CaseNotFoundError(case_id)
            return success_response(CaseDetailSerializer(case).data)
        except ExamEngineError as exc:
            logger.warning("Case retrieval failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error fetching case %s", case_id)
            return server_error_response(exc, "Failed to fetch case")


class ExamineAPIView(APIView):
    """Perform an examination maneuver.

    **POST** ``/api/cases/<case_id>/examine/``

    Request body::

        {
            "region": "chest",
            "maneuver": "auscultate",
            "target": "heart",
            "location": "apex"
        }

    Returns ``{"finding": {...}}``; the finding ID is ``"normal"`` when
    nothing was authored for the request.
    """

    def post(self, request, case_id: int):
        serializer = ExamineRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        params: dict = serializer.validated_data

        try:
            finding = ExaminationService().examine(
                case_id=case_id,
                region=params["region"],
                maneuver=params["maneuver"],
                target=params.get("target") or None,
                location=params.get("location") or None,
            )
            return success_response({"finding": _finding_payload(finding)})
        except ExamEngineError as exc:
            logger.warning("Examination failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error during examination")
            return server_error_response(exc, "Failed to perform examination")


class ParseInputAPIView(APIView):
    """Parse a typed examination request.

    **POST** ``/api/cases/<case_id>/parse-input/``

    Request body::

        {"input": "listen to the heart at the apex"}

    Returns ``{"parsed": {...}, "finding": {...} | null}``.
    """

    def post(self, request, case_id: int):
        serializer = ParseInputRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            if CaseRepository().get_case(case_id) is None:
                raise CaseNotFoundError(case_id)
            parsed: dict = InputParser().parse(serializer.validated_data["input"])
            finding = None
            if parsed["clarification_needed"] is None:
                finding = _finding_payload(
                    ExaminationService().examine(
                        case_id=case_id,
                        region=parsed["region"],
                        maneuver=parsed["maneuver"],
                        target=parsed["target"],
                        location=parsed["location"],
                    )
                )
            return success_response({"parsed": parsed, "finding": finding})
        except ExamEngineError as exc:
            logger.warning("Input parsing failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error parsing input")
            return server_error_response(exc, "Failed to parse input")


# ─────────────────────────────────────────────────────────────────────
# Sessions
# ─────────────────────────────────────────────────────────────────────


class SessionListCreateAPIView(generics.ListAPIView):
    """List past sessions (GET) or start a new one (POST).

    **POST** ``/api/sessions/``

    Request body::

        {"case_id": 1}
    """

    queryset = StudentSessionModel.objects.select_related("case")
    serializer_class = SessionSummarySerializer
    filter_backends = [DjangoFilterBackend, filters.OrderingFilter]
    filterset_class = StudentSessionFilter
    ordering_fields = ["start_time", "overall_score"]
    ordering = ["-start_time"]

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        data = self.get_serializer(queryset, many=True).data
        return success_response(data, count=len(data))

    def post(self, request):
        serializer = SessionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            session = _session_service().start_session(
                case_id=serializer.validated_data["case_id"]
            )
            return success_response(
                {"session": StudentSessionSerializer(session).data},
                status.HTTP_201_CREATED,
            )
        except ExamEngineError as exc:
            logger.warning("Session creation failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error creating session")
            return server_error_response(exc, "Failed to create session")


class RecordManeuverAPIView(APIView):
    """Record a performed maneuver.

    **POST** ``/api/sessions/<session_id>/maneuver/``

    Request body::

        {"finding_id": 4, "input_method": "click", "raw_input": null}
    """

    def post(self, request, session_id: int):
        serializer = ManeuverRecordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        params: dict = serializer.validated_data

        try:
            maneuver = _session_service().record_maneuver(
                session_id=session_id,
                finding_id=params["finding_id"],
                input_method=params["input_method"],
                raw_input=params.get("raw_input"),
            )
            return success_response(
                {"maneuver": PerformedManeuverSerializer(maneuver).data},
                status.HTTP_201_CREATED,
            )
        except ExamEngineError as exc:
            logger.warning("Recording maneuver failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error recording maneuver")
            return server_error_response(exc, "Failed to record maneuver")


class SubmitDiagnosisAPIView(APIView):
    """Submit a diagnosis and close the session.

    **PUT** ``/api/sessions/<session_id>/submit/``

    Request body::

        {"diagnosis": "Congestive heart failure"}

    Returns the scored session, the correct diagnosis and the key
    findings that were missed.
    """

    def put(self, request, session_id: int):
        serializer = DiagnosisSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            result: dict = _session_service().submit_diagnosis(
                session_id=session_id,
                diagnosis=serializer.validated_data["diagnosis"],
            )
            return success_response(
                {
                    "session": StudentSessionSerializer(result["session"]).data,
                    "score": result["score"],
                    "correct_diagnosis": result["correct_diagnosis"],
                    "key_findings_missed": ExamFindingSerializer(
                        result["key_findings_missed"], many=True
                    ).data,
                }
            )
        except ExamEngineError as exc:
            logger.warning("Diagnosis submission failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error submitting diagnosis")
            return server_error_response(exc, "Failed to submit diagnosis")


class SessionReviewAPIView(APIView):
    """Review a session with the full case and answer key.

    **GET** ``/api/sessions/<session_id>/review/``
    """

    def get(self, request, session_id: int):
        try:
            session = _session_service().get_review(session_id=session_id)
            return success_response({"session": SessionReviewSerializer(session).data})
        except ExamEngineError as exc:
            logger.warning("Session review failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error fetching session review")
            return server_error_response(exc, "Failed to fetch session review")


# ─────────────────────────────────────────────────────────────────────
# Media generation
# ─────────────────────────────────────────────────────────────────────


class MediaStatusAPIView(APIView):
    """Report whether media generation is configured."""

    def get(self, request):
        service = MediaGenerationService()
        available: bool = service.is_configured()
        return success_response(
            {
                "available": available,
                "message": (
                    "Media generation is available"
                    if available
                    else "REPLICATE_API_TOKEN not configured"
                ),
                "image_types": service.available_image_types(),
                "video_types": service.available_video_types(),
            }
        )


class MediaTypesAPIView(APIView):
    """List the predefined image and video types."""

    def get(self, request):
        service = MediaGenerationService()
        return success_response(
            {
                "images": service.available_image_types(),
                "videos": service.available_video_types(),
            }
        )


class GenerateImageAPIView(APIView):
    """**POST** ``/api/media/generate-image/`` with ``{"image_type": ...}``."""

    def post(self, request):
        serializer = ImageRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        image_type: str = serializer.validated_data["image_type"]

        try:
            result: dict = MediaGenerationService().generate_image(image_type)
            return success_response(
                {
                    "image_type": image_type,
                    **result,
                    "message": "Image generated and saved successfully",
                }
            )
        except ExamEngineError as exc:
            logger.warning("Image generation failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error generating image")
            return server_error_response(exc, "Failed to generate image")


class GenerateCustomImageAPIView(APIView):
    """**POST** ``/api/media/generate-custom-image/`` with ``{"prompt", "filename"}``."""

    def post(self, request):
        serializer = CustomImageRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        params: dict = serializer.validated_data

        try:
            result: dict = MediaGenerationService().generate_custom_image(
                prompt=params["prompt"],
                filename=params["filename"],
            )
            return success_response(
                {**result, "message": "Custom image generated and saved successfully"}
            )
        except ExamEngineError as exc:
            logger.warning("Custom image generation failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error generating custom image")
            return server_error_response(exc, "Failed to generate custom image")


class GenerateVideoAPIView(APIView):
    """**POST** ``/api/media/generate-video/`` with ``{"video_type": ...}``."""

    def post(self, request):
        serializer = VideoRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        video_type: str = serializer.validated_data["video_type"]

        try:
            result: dict = MediaGenerationService().generate_video(video_type)
            return success_response(
                {
                    "video_type": video_type,
                    **result,
                    "message": "Video generated and saved successfully",
                }
            )
        except ExamEngineError as exc:
            logger.warning("Video generation failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error generating video")
            return server_error_response(exc, "Failed to generate video")


class ImageToVideoAPIView(APIView):
    """**POST** ``/api/media/image-to-video/``.

    Request body::

        {
            "image_url": "https://...",
            "video_prompt": "...",
            "filename": "clip.mp4",
            "duration": 3
        }
    """

    def post(self, request):
        serializer = ImageToVideoRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        params: dict = serializer.validated_data

        try:
            result: dict = MediaGenerationService().image_to_video(
                image_url=params["image_url"],
                video_prompt=params["video_prompt"],
                filename=params["filename"],
                duration=params["duration"],
            )
            return success_response(
                {**result, "message": "Image converted to video successfully"}
            )
        except ExamEngineError as exc:
            logger.warning("Image-to-video conversion failed: %s", exc.message)
            return engine_error_response(exc)
        except Exception as exc:
            logger.exception("Unexpected error converting image to video")
            return server_error_response(exc, "Failed to convert image to video")


# ─────────────────────────────────────────────────────────────────────
# Project-level handlers
# ─────────────────────────────────────────────────────────────────────


def health_view(request):
    return JsonResponse(
        {
            "status": "ok",
            "message": "Virtual Patient API is running",
            "timestamp": timezone.now().isoformat(),
        }
    )


@api_view(["GET"])
def api_index_view(request):
    """List the available endpoints."""
    return success_response(
        {
            "message": "Virtual Patient Physical Examination Simulator API",
            "version": "1.0.0",
            "endpoints": {
                "health": "GET /health",
                "cases": {
                    "list": "GET /api/cases/",
                    "get": "GET /api/cases/<id>/",
                    "examine": "POST /api/cases/<id>/examine/",
                    "parse_input": "POST /api/cases/<id>/parse-input/",
                },
                "sessions": {
                    "list": "GET /api/sessions/",
                    "create": "POST /api/sessions/",
                    "record_maneuver": "POST /api/sessions/<id>/maneuver/",
                    "submit": "PUT /api/sessions/<id>/submit/",
                    "review": "GET /api/sessions/<id>/review/",
                },
                "media": {
                    "status": "GET /api/media/status/",
                    "available_types": "GET /api/media/available-types/",
                    "generate_image": "POST /api/media/generate-image/",
                    "generate_custom_image": "POST /api/media/generate-custom-image/",
                    "generate_video": "POST /api/media/generate-video/",
                    "image_to_video": "POST /api/media/image-to-video/",
                },
            },
        }
    )


def not_found_view(request, exception=None):
    return JsonResponse(
        {"success": False, "error": "The requested endpoint does not exist"},
        status=404,
    )


def server_error_view(request):
    return JsonResponse(
        {"success": False, "error": "Internal Server Error"},
        status=500,
    )

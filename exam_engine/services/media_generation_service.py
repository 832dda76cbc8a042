"""
exam_engine/services/media_generation_service.py
================================================
Thin gateway to the Replicate generation API.

Images are rendered with Flux Schnell; videos are produced by
rendering a still and animating it with MiniMax video-01.  Every
returned asset is downloaded into ``MEDIA_ROOT`` and logged as a
:class:`GeneratedMediaModel`.  Calls are synchronous and not retried.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import replicate
import requests
from django.conf import settings

from media_generation.models import GeneratedMediaModel

from .exceptions import (
    InvalidMediaRequestError,
    MediaGenerationError,
    MediaGenerationUnavailableError,
)
from .media_prompts import (
    IMAGE_MODEL,
    MEDICAL_IMAGE_PROMPTS,
    MEDICAL_VIDEO_PROMPTS,
    VIDEO_MODEL,
)

logger: logging.Logger = logging.getLogger(__name__)

_SAFE_FILENAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,120}$")

IMAGE_SUBDIR: str = "images"
VIDEO_SUBDIR: str = "videos"


def _first_url(output: Any, what: str) -> str:
    """Extract the asset URL from a ``replicate.run`` result."""
    url = output[0] if isinstance(output, (list, tuple)) and output else output
    if not isinstance(url, str):
        raise MediaGenerationError(message=f"Invalid {what} URL returned from Replicate")
    return url


class MediaGenerationService:
    """Generates images and videos for examination findings."""

    def __init__(self, client: replicate.Client | None = None) -> None:
        self._client: replicate.Client | None = client

    # ------------------------------------------------------------------
    # Catalog
    # ------------------------------------------------------------------
    @staticmethod
    def is_configured() -> bool:
        return bool(settings.REPLICATE_API_TOKEN)

    @staticmethod
    def available_image_types() -> list[dict]:
        return [
            {
                "id": key,
                "description": config["description"],
                "filename": config["filename"],
            }
            for key, config in MEDICAL_IMAGE_PROMPTS.items()
        ]

    @staticmethod
    def available_video_types() -> list[dict]:
        return [
            {
                "id": key,
                "description": config["description"],
                "filename": config["filename"],
                "duration": config["duration"],
            }
            for key, config in MEDICAL_VIDEO_PROMPTS.items()
        ]

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate_image(self, image_type: str) -> dict:
        """Render one of the predefined medical images.

        Returns:
            ``{"url": <replicate url>, "local_path": "/media/images/..."}``

        Raises:
            InvalidMediaRequestError: Unknown ``image_type``.
            MediaGenerationUnavailableError: No API token configured.
            MediaGenerationError: Upstream or download failure.
        """
        config: dict | None = MEDICAL_IMAGE_PROMPTS.get(image_type)
        if config is None:
            raise InvalidMediaRequestError(
                message=(
                    "Invalid image_type. Available types: "
                    + ", ".join(MEDICAL_IMAGE_PROMPTS)
                ),
                details={"image_type": image_type},
            )
        logger.info("generating image %s", image_type)
        return self._render_image(
            prompt=config["prompt"],
            filename=config["filename"],
            media_type=image_type,
        )

    def generate_custom_image(self, prompt: str, filename: str) -> dict:
        """Render an image from an arbitrary prompt."""
        self._check_filename(filename)
        logger.info("generating custom image %s", filename)
        return self._render_image(prompt=prompt, filename=filename, media_type="")

    def generate_video(self, video_type: str) -> dict:
        """Render a still with Flux, then animate it.

        Returns:
            ``{"image_url", "video_url", "local_path"}``
        """
        config: dict | None = MEDICAL_VIDEO_PROMPTS.get(video_type)
        if config is None:
            raise InvalidMediaRequestError(
                message=(
                    "Invalid video_type. Available types: "
                    + ", ".join(MEDICAL_VIDEO_PROMPTS)
                ),
                details={"video_type": video_type},
            )
        client = self._get_client()
        logger.info("generating video %s (step 1/2: base image)", video_type)

        image_url: str = _first_url(
            self._run(
                client,
                IMAGE_MODEL,
                {
                    "prompt": config["image_prompt"],
                    "num_outputs": 1,
                    "aspect_ratio": "16:9",
                    "output_format": "jpg",
                    "output_quality": 90,
                },
            ),
            "image",
        )

        logger.info("generating video %s (step 2/2: animation)", video_type)
        result: dict = self._animate(
            client,
            image_url=image_url,
            video_prompt=config["video_prompt"],
            filename=config["filename"],
            duration=config["duration"],
            media_type=video_type,
        )
        return {"image_url": image_url, **result}

    def image_to_video(
        self,
        image_url: str,
        video_prompt: str,
        filename: str,
        duration: int = 3,
    ) -> dict:
        """Animate an existing image.

        Returns:
            ``{"video_url", "local_path"}``
        """
        self._check_filename(filename)
        client = self._get_client()
        logger.info("converting image to video %s", filename)
        return self._animate(
            client,
            image_url=image_url,
            video_prompt=video_prompt,
            filename=filename,
            duration=duration,
            media_type="",
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _get_client(self) -> replicate.Client:
        if not self.is_configured():
            raise MediaGenerationUnavailableError()
        if self._client is None:
            self._client = replicate.Client(api_token=settings.REPLICATE_API_TOKEN)
        return self._client

    @staticmethod
    def _check_filename(filename: str) -> None:
        if not _SAFE_FILENAME.match(filename):
            raise InvalidMediaRequestError(
                message="filename may only contain letters, digits, '.', '_' and '-'",
                details={"filename": filename},
            )

    @staticmethod
    def _run(client: replicate.Client, model: str, model_input: dict) -> Any:
        try:
            return client.run(model, input=model_input, use_file_output=False)
        except Exception as exc:
            logger.exception("replicate call to %s failed", model)
            raise MediaGenerationError(
                message=f"Failed to generate media: {exc}",
                details={"model": model},
            ) from exc

    def _render_image(self, prompt: str, filename: str, media_type: str) -> dict:
        client = self._get_client()
        logger.debug("prompt: %s...", prompt[:100])
        url: str = _first_url(
            self._run(
                client,
                IMAGE_MODEL,
                {
                    "prompt": prompt,
                    "num_outputs": 1,
                    "aspect_ratio": "4:3",
                    "output_format": "jpg",
                    "output_quality": 90,
                },
            ),
            "image",
        )
        local_path: str = self._download(url, IMAGE_SUBDIR, filename)
        GeneratedMediaModel.objects.create(
            media_kind=GeneratedMediaModel.MediaKind.IMAGE,
            media_type=media_type,
            prompt=prompt,
            source_url=url,
            local_path=local_path,
        )
        return {"url": url, "local_path": local_path}

    def _animate(
        self,
        client: replicate.Client,
        image_url: str,
        video_prompt: str,
        filename: str,
        duration: int,
        media_type: str,
    ) -> dict:
        video_url: str = _first_url(
            self._run(
                client,
                VIDEO_MODEL,
                {
                    "image": image_url,
                    "prompt": video_prompt,
                    "duration": str(duration),
                },
            ),
            "video",
        )
        local_path: str = self._download(video_url, VIDEO_SUBDIR, filename)
        GeneratedMediaModel.objects.create(
            media_kind=GeneratedMediaModel.MediaKind.VIDEO,
            media_type=media_type,
            prompt=video_prompt,
            source_url=video_url,
            local_path=local_path,
        )
        return {"video_url": video_url, "local_path": local_path}

    @staticmethod
    def _download(url: str, subdir: str, filename: str) -> str:
        """Save ``url`` under ``MEDIA_ROOT/<subdir>`` and return its public path."""
        try:
            response = requests.get(url, timeout=settings.MEDIA_DOWNLOAD_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.error("download of %s failed: %s", url, exc)
            raise MediaGenerationError(
                message=f"Failed to download generated media: {exc}",
                details={"url": url},
            ) from exc

        target_dir: Path = Path(settings.MEDIA_ROOT) / subdir
        target_dir.mkdir(parents=True, exist_ok=True)
        file_path: Path = target_dir / filename
        file_path.write_bytes(response.content)
        logger.info("saved %s", file_path)

        return f"{settings.MEDIA_URL.rstrip('/')}/{subdir}/{filename}"

"""
media_generation/models.py
==========================
Models for logging generated media assets.

Contains:
    - GeneratedMediaModel: One image or video produced by the external
      generation API and saved under ``MEDIA_ROOT``.
"""

from __future__ import annotations

from django.db import models


class GeneratedMediaModel(models.Model):
    """Audit record for a single generated asset.

    Attributes:
        media_kind: Image or video.
        media_type: Catalog key (e.g. ``"jvd-elevated"``); blank for
            custom prompts.
        prompt: Prompt sent to the generation model.
        source_url: URL returned by the generation API.
        local_path: Public path of the saved copy, e.g.
            ``"/media/images/jvd-elevated.jpg"``.
    """

    class MediaKind(models.TextChoices):
        """Kinds of generated media."""

        IMAGE = "IMAGE", "Image"
        VIDEO = "VIDEO", "Video"

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------
    media_kind: str = models.CharField(
        max_length=10,
        choices=MediaKind.choices,
    )
    media_type: str = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Predefined catalog key, blank for custom prompts.",
    )
    prompt: str = models.TextField(
        help_text="Prompt sent to the generation model.",
    )
    source_url: str = models.URLField(
        max_length=500,
        help_text="URL of the asset returned by the generation API.",
    )
    local_path: str = models.CharField(
        max_length=255,
        help_text="Public path of the saved asset.",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    # ------------------------------------------------------------------
    # Meta
    # ------------------------------------------------------------------
    class Meta:
        ordering: list[str] = ["-created_at"]
        verbose_name: str = "Generated Media"
        verbose_name_plural: str = "Generated Media"

    # ------------------------------------------------------------------
    # Dunder methods
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        label: str = self.media_type or "custom"
        return f"{self.get_media_kind_display()} {label} - {self.local_path}"

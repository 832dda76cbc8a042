"""
exam_engine/services/input_parser.py
====================================
Keyword parser turning a typed examination request ("listen to the
heart at the apex") into a structured maneuver command.

Each vocabulary is a list of ``(value, pattern)`` pairs checked in
order; the first match wins, so more specific phrases come first.
"""

from __future__ import annotations

import re

from cases.models import BodyRegion, Maneuver

MANEUVER_PATTERNS: list[tuple[str, re.Pattern]] = [
    (Maneuver.AUSCULTATE, re.compile(r"\b(auscult\w*|listen\w*|stethoscope)\b", re.IGNORECASE)),
    (Maneuver.PERCUSS, re.compile(r"\b(percuss\w*|tap\w*)\b", re.IGNORECASE)),
    (Maneuver.PALPATE, re.compile(r"\b(palpat\w*|feel\w*|press\w*|touch\w*)\b", re.IGNORECASE)),
    (Maneuver.SPECIAL_TEST, re.compile(r"\b(special test|egophony|reflux|sign|test)\b", re.IGNORECASE)),
    (Maneuver.MEASURE, re.compile(r"\b(measur\w*|estimate|check the pressure)\b", re.IGNORECASE)),
    (Maneuver.INSPECT, re.compile(r"\b(inspect\w*|look\w*|observ\w*|view|examine)\b", re.IGNORECASE)),
]

REGION_PATTERNS: list[tuple[str, re.Pattern]] = [
    (BodyRegion.LOWER_EXTREMITY_LEFT, re.compile(r"\bleft (leg|ankle|foot|calf|lower extremity)\b", re.IGNORECASE)),
    (BodyRegion.LOWER_EXTREMITY_RIGHT, re.compile(r"\bright (leg|ankle|foot|calf|lower extremity)\b", re.IGNORECASE)),
    (BodyRegion.UPPER_EXTREMITY_LEFT, re.compile(r"\bleft (arm|hand|wrist|upper extremity)\b", re.IGNORECASE)),
    (BodyRegion.UPPER_EXTREMITY_RIGHT, re.compile(r"\bright (arm|hand|wrist|upper extremity)\b", re.IGNORECASE)),
    (BodyRegion.LOWER_EXTREMITY_LEFT, re.compile(r"\b(legs?|ankles?|feet|foot|calf|calves|edema)\b", re.IGNORECASE)),
    (BodyRegion.UPPER_EXTREMITY_LEFT, re.compile(r"\b(arms?|hands?|wrists?)\b", re.IGNORECASE)),
    (BodyRegion.NECK, re.compile(r"\b(neck|jugular|jvp|jvd|thyroid|carotid)\b", re.IGNORECASE)),
    (BodyRegion.BACK, re.compile(r"\b(back|posterior|lung bases?|bases)\b", re.IGNORECASE)),
    (BodyRegion.CHEST, re.compile(r"\b(chest|heart|cardiac|precordium|lungs?|apex|thorax)\b", re.IGNORECASE)),
    (BodyRegion.ABDOMEN, re.compile(r"\b(abdomen|abdominal|belly|stomach|liver|spleen|ruq|luq)\b", re.IGNORECASE)),
    (BodyRegion.HEAD, re.compile(r"\b(head|face|eyes?|mouth|general appearance|patient)\b", re.IGNORECASE)),
]

TARGET_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("jugular_venous_pressure", re.compile(r"\b(jugular|jvp|jvd)\b", re.IGNORECASE)),
    ("hepatojugular_reflux", re.compile(r"\bhepatojugular\b", re.IGNORECASE)),
    ("tactile_fremitus", re.compile(r"\bfremitus\b", re.IGNORECASE)),
    ("chest_expansion", re.compile(r"\bexpansion\b", re.IGNORECASE)),
    ("egophony", re.compile(r"\begophony\b", re.IGNORECASE)),
    ("heart", re.compile(r"\b(heart|cardiac)\b", re.IGNORECASE)),
    ("lungs", re.compile(r"\b(lungs?|breath sounds)\b", re.IGNORECASE)),
    ("liver", re.compile(r"\bliver\b", re.IGNORECASE)),
    ("edema", re.compile(r"\b(edema|swelling|pitting)\b", re.IGNORECASE)),
    ("pulses", re.compile(r"\bpulses?\b", re.IGNORECASE)),
    ("precordium", re.compile(r"\bprecordium\b", re.IGNORECASE)),
    ("apex", re.compile(r"\b(pmi|apex beat|apical impulse)\b", re.IGNORECASE)),
]

LOCATION_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("right_lower_lobe", re.compile(r"\bright lower lobe\b|\brll\b", re.IGNORECASE)),
    ("bilateral_bases", re.compile(r"\b(bilateral )?bases\b", re.IGNORECASE)),
    ("right_upper_quadrant", re.compile(r"\bright upper quadrant\b|\bruq\b", re.IGNORECASE)),
    ("mitral_area", re.compile(r"\bmitral\b", re.IGNORECASE)),
    ("apex", re.compile(r"\b(at|over) the apex\b", re.IGNORECASE)),
    ("bilateral", re.compile(r"\b(bilateral\w*|both sides)\b", re.IGNORECASE)),
]

BASE_CONFIDENCE: float = 0.5
DETAIL_CONFIDENCE: float = 0.25


def _first_match(patterns: list[tuple[str, re.Pattern]], text: str) -> str | None:
    for value, pattern in patterns:
        if pattern.search(text):
            return str(value)
    return None


class InputParser:
    """Parses typed examination requests."""

    def parse(self, text: str) -> dict:
        """Parse ``text`` into a maneuver command.

        Returns:
            Dict with ``region``, ``maneuver``, ``target``, ``location``,
            ``confidence`` (0–1) and ``clarification_needed`` (``None``
            when the command is complete).
        """
        region = _first_match(REGION_PATTERNS, text)
        maneuver = _first_match(MANEUVER_PATTERNS, text)
        target = _first_match(TARGET_PATTERNS, text)
        location = _first_match(LOCATION_PATTERNS, text)

        missing: list[str] = []
        if maneuver is None:
            missing.append("which maneuver to perform (inspect, palpate, percuss, auscultate)")
        if region is None:
            missing.append("which body region to examine")

        if missing:
            return {
                "region": region,
                "maneuver": maneuver,
                "target": target,
                "location": location,
                "confidence": 0.0,
                "clarification_needed": "Please specify " + " and ".join(missing) + ".",
            }

        confidence: float = BASE_CONFIDENCE
        if target:
            confidence += DETAIL_CONFIDENCE
        if location:
            confidence += DETAIL_CONFIDENCE

        return {
            "region": region,
            "maneuver": maneuver,
            "target": target,
            "location": location,
            "confidence": min(confidence, 1.0),
            "clarification_needed": None,
        }

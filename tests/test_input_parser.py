"""
Unit tests for the free-text examination parser.
"""

import pytest

from exam_engine.services import InputParser


@pytest.fixture
def parser():
    return InputParser()


class TestInputParser:
    """Test suite for keyword parsing."""

    @pytest.mark.parametrize(
        "text, region, maneuver, target, location",
        [
            ("listen to the heart at the apex", "chest", "auscultate", "heart", "apex"),
            ("percuss the lung bases", "back", "percuss", "lungs", "bilateral_bases"),
            (
                "palpate the liver in the right upper quadrant",
                "abdomen",
                "palpate",
                "liver",
                "right_upper_quadrant",
            ),
            ("look at the JVP", "neck", "inspect", "jugular_venous_pressure", None),
            ("feel for pitting edema in the left leg", "lower_extremity_left", "palpate", "edema", None),
        ],
    )
    def test_recognised_phrases(self, parser, text, region, maneuver, target, location):
        parsed = parser.parse(text)

        assert parsed["region"] == region
        assert parsed["maneuver"] == maneuver
        assert parsed["target"] == target
        assert parsed["location"] == location
        assert parsed["clarification_needed"] is None

    def test_confidence_grows_with_detail(self, parser):
        assert parser.parse("inspect the chest")["confidence"] == 0.5
        assert parser.parse("auscultate the heart")["confidence"] == 0.75
        assert parser.parse("listen to the heart at the apex")["confidence"] == 1.0

    def test_missing_maneuver(self, parser):
        parsed = parser.parse("the chest")

        assert parsed["region"] == "chest"
        assert parsed["maneuver"] is None
        assert parsed["confidence"] == 0.0
        assert "maneuver" in parsed["clarification_needed"]

    def test_missing_everything(self, parser):
        parsed = parser.parse("what should I do?")

        assert parsed["confidence"] == 0.0
        assert "maneuver" in parsed["clarification_needed"]
        assert "body region" in parsed["clarification_needed"]

    def test_case_insensitive(self, parser):
        assert parser.parse("AUSCULTATE THE HEART")["maneuver"] == "auscultate"

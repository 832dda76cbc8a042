"""
Shared fixtures for the virtual patient test suite.

Provides a small heart-failure case with five findings, three of which
are key findings, plus an API client and isolated media settings.
"""

import pytest
from rest_framework.test import APIClient

from cases.models import CaseModel, ExamFindingModel


@pytest.fixture(autouse=True)
def media_settings(settings, tmp_path):
    """Keep generated media in a temp dir and start with no API token."""
    settings.MEDIA_ROOT = tmp_path / "media"
    settings.REPLICATE_API_TOKEN = ""
    settings.APP_ENV = "development"
    return settings


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def case(db):
    return CaseModel.objects.create(
        title="CHF Exacerbation",
        age=65,
        sex="Male",
        chief_complaint="Shortness of breath and leg swelling",
        hpi="Progressive dyspnea over one week, worse lying flat.",
        pmh=["Coronary artery disease", "Hypertension"],
        medications=["Furosemide 40mg daily"],
        allergies=["NKDA"],
        social_history="Former smoker.",
        family_history="Father died of MI at 60.",
        bp="150/92",
        hr=98,
        rr=24,
        temp=37.1,
        spo2=92,
        diagnosis="Congestive Heart Failure",
    )


@pytest.fixture
def findings(case):
    """Five findings on ``case``; ``heart_apex``, ``jvp`` and ``lung_bases`` are key."""
    created = {
        "heart_apex": ExamFindingModel.objects.create(
            case=case,
            region="chest",
            maneuver="auscultate",
            target="heart",
            location="apex",
            description="S3 gallop heard at apex.",
            finding_type="audio",
            media_url="/media/audio/s3-gallop.mp3",
            is_abnormal=True,
        ),
        "jvp": ExamFindingModel.objects.create(
            case=case,
            region="neck",
            maneuver="inspect",
            target="jugular_venous_pressure",
            description="JVP elevated at 12 cm H2O.",
            is_abnormal=True,
        ),
        "lung_bases": ExamFindingModel.objects.create(
            case=case,
            region="back",
            maneuver="percuss",
            target="lungs",
            location="bilateral_bases",
            description="Dullness at both bases.",
            is_abnormal=True,
        ),
        "abdomen": ExamFindingModel.objects.create(
            case=case,
            region="abdomen",
            maneuver="inspect",
            target="general",
            description="Abdomen soft, non-distended.",
            is_abnormal=False,
        ),
        "liver": ExamFindingModel.objects.create(
            case=case,
            region="abdomen",
            maneuver="palpate",
            target="liver",
            location="right_upper_quadrant",
            description="Liver palpable 3 cm below costal margin.",
            is_abnormal=True,
        ),
    }
    case.key_findings.set(
        [created["heart_apex"], created["jvp"], created["lung_bases"]]
    )
    return created


@pytest.fixture
def other_case(db):
    """A second case with a single finding, used for cross-case checks."""
    other = CaseModel.objects.create(
        title="Community-Acquired Pneumonia",
        age=45,
        sex="Female",
        chief_complaint="Fever and cough",
        bp="118/72",
        hr=108,
        rr=22,
        temp=38.9,
        spo2=93,
        diagnosis="Right Lower Lobe Pneumonia",
    )
    ExamFindingModel.objects.create(
        case=other,
        region="back",
        maneuver="auscultate",
        target="lungs",
        location="right_lower_lobe",
        description="Coarse crackles in the right lower lobe.",
        is_abnormal=True,
    )
    return other

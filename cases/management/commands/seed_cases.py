"""
cases/management/commands/seed_cases.py
=======================================
Management command to seed the database with the demo cases.

Usage:
    python manage.py seed_cases

Existing cases, findings and sessions are removed first: findings are
immutable, so re-seeding always recreates them.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from cases.models import CaseModel, ExamFindingModel
from student_sessions.models import PerformedManeuverModel, StudentSessionModel

SEED_CASES: list[dict] = [
    # ------------------------------------------------------------------
    # CHF exacerbation
    # ------------------------------------------------------------------
    {
        "title": "CHF Exacerbation",
        "age": 65,
        "sex": "Male",
        "chief_complaint": "Shortness of breath and leg swelling",
        "hpi": (
            "Patient is a 65-year-old male presenting with progressive shortness of "
            "breath over the past week, worse when lying flat. He has been sleeping on "
            "three pillows. He also notes bilateral leg swelling up to his knees. He has "
            "gained 10 pounds in the last week. He has a history of coronary artery "
            "disease with an MI 2 years ago."
        ),
        "pmh": [
            "Coronary artery disease",
            "Myocardial infarction (2 years ago)",
            "Hypertension",
            "Type 2 diabetes",
        ],
        "medications": [
            "Lisinopril 20mg daily",
            "Metoprolol 50mg BID",
            "Atorvastatin 40mg daily",
            "Furosemide 40mg daily",
            "Metformin 1000mg BID",
        ],
        "allergies": ["NKDA"],
        "social_history": (
            "Former smoker (quit 5 years ago, 30 pack-year history). Drinks 1-2 beers "
            "per week. Retired construction worker."
        ),
        "family_history": "Father died of MI at age 60. Mother with hypertension.",
        "bp": "150/92",
        "hr": 98,
        "rr": 24,
        "temp": 37.1,
        "spo2": 92,
        "diagnosis": "Congestive Heart Failure Exacerbation",
        "findings": [
            {
                "region": "head",
                "maneuver": "inspect",
                "target": "general",
                "description": (
                    "Patient appears mildly uncomfortable, sitting upright in bed. Mild "
                    "respiratory distress noted."
                ),
                "is_abnormal": True,
            },
            {
                "region": "neck",
                "maneuver": "inspect",
                "target": "jugular_venous_pressure",
                "description": (
                    "Jugular venous distention (JVD) present. JVP estimated at 12 cm H2O "
                    "(elevated, normal <8 cm). Visible pulsations in internal jugular vein "
                    "when patient at 45 degrees."
                ),
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "chest",
                "maneuver": "inspect",
                "target": "precordium",
                "description": (
                    "No visible heave or thrill. Apex beat displaced laterally to anterior "
                    "axillary line, suggesting cardiomegaly."
                ),
                "is_abnormal": True,
            },
            {
                "region": "chest",
                "maneuver": "palpate",
                "target": "apex",
                "description": (
                    "Point of maximal impulse (PMI) palpated in the 6th intercostal space, "
                    "anterior axillary line. Sustained and displaced, indicating left "
                    "ventricular hypertrophy."
                ),
                "is_abnormal": True,
            },
            {
                "region": "chest",
                "maneuver": "auscultate",
                "target": "heart",
                "location": "apex",
                "description": (
                    "S3 gallop heard at apex, best with bell of stethoscope in left "
                    "lateral decubitus position. S1 and S2 present. No S4. Regular rate "
                    "and rhythm."
                ),
                "finding_type": "audio",
                "media_url": "/media/audio/s3-gallop.mp3",
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "chest",
                "maneuver": "auscultate",
                "target": "heart",
                "location": "mitral_area",
                "description": (
                    "Possible soft holosystolic murmur at mitral area, suggesting "
                    "functional mitral regurgitation. S3 gallop prominent."
                ),
                "finding_type": "audio",
                "media_url": "/media/audio/mitral-regurg-functional.mp3",
                "is_abnormal": True,
            },
            {
                "region": "chest",
                "maneuver": "inspect",
                "target": "respiratory",
                "description": (
                    "Increased work of breathing noted. Using accessory muscles. "
                    "Respiratory rate 24 breaths per minute."
                ),
                "is_abnormal": True,
            },
            {
                "region": "back",
                "maneuver": "auscultate",
                "target": "lungs",
                "location": "bilateral_bases",
                "description": (
                    "Bilateral inspiratory crackles (rales) heard at lung bases, extending "
                    "up to mid-lung fields. Consistent with pulmonary edema."
                ),
                "finding_type": "audio",
                "media_url": "/media/audio/crackles-bilateral.mp3",
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "back",
                "maneuver": "percuss",
                "target": "lungs",
                "location": "bilateral_bases",
                "description": (
                    "Dullness to percussion at bilateral lung bases, suggesting pleural "
                    "effusions."
                ),
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "abdomen",
                "maneuver": "inspect",
                "target": "general",
                "description": "Abdomen soft, non-distended. No visible pulsations or masses.",
                "is_abnormal": False,
            },
            {
                "region": "abdomen",
                "maneuver": "palpate",
                "target": "liver",
                "location": "right_upper_quadrant",
                "description": (
                    "Liver palpable 3 cm below costal margin, smooth, tender. Hepatomegaly "
                    "due to hepatic congestion."
                ),
                "is_abnormal": True,
            },
            {
                "region": "abdomen",
                "maneuver": "palpate",
                "target": "hepatojugular_reflux",
                "description": (
                    "Hepatojugular reflux positive. Sustained pressure on RUQ causes JVP "
                    "to rise >4 cm and remain elevated."
                ),
                "is_abnormal": True,
            },
            {
                "region": "lower_extremity_left",
                "maneuver": "inspect",
                "target": "general",
                "description": (
                    "Bilateral lower extremity edema present, extending to mid-calf. 2+ "
                    "pitting edema noted."
                ),
                "finding_type": "image",
                "media_url": "/media/images/pitting-edema-bilateral.jpg",
                "is_abnormal": True,
            },
            {
                "region": "lower_extremity_right",
                "maneuver": "inspect",
                "target": "general",
                "description": (
                    "Bilateral lower extremity edema present, extending to mid-calf. 2+ "
                    "pitting edema noted. Symmetric."
                ),
                "finding_type": "image",
                "media_url": "/media/images/pitting-edema-bilateral.jpg",
                "is_abnormal": True,
            },
            {
                "region": "lower_extremity_left",
                "maneuver": "palpate",
                "target": "edema",
                "description": (
                    "Pitting edema to mid-calf bilaterally. Indent remains for >5 seconds "
                    "after pressure. No calf tenderness."
                ),
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "lower_extremity_left",
                "maneuver": "palpate",
                "target": "pulses",
                "description": (
                    "Dorsalis pedis and posterior tibial pulses 2+ bilaterally and "
                    "symmetric."
                ),
                "is_abnormal": False,
            },
        ],
    },
    # ------------------------------------------------------------------
    # COPD exacerbation
    # ------------------------------------------------------------------
    {
        "title": "COPD Exacerbation",
        "age": 68,
        "sex": "Female",
        "chief_complaint": "Worsening shortness of breath and cough",
        "hpi": (
            "A 68-year-old female with known COPD presents with worsening shortness of "
            "breath and productive cough for 3 days. Sputum is yellowish-green. She has "
            "been using her rescue inhaler more frequently. She denies fever but feels "
            "more fatigued than usual."
        ),
        "pmh": ["COPD (GOLD Stage 3)", "Hypertension", "Former smoker"],
        "medications": [
            "Albuterol inhaler PRN",
            "Tiotropium daily",
            "Fluticasone/salmeterol BID",
            "Amlodipine 5mg daily",
        ],
        "allergies": ["Penicillin (rash)"],
        "social_history": (
            "Former smoker - quit 5 years ago, 45 pack-year history. Lives alone, "
            "retired teacher."
        ),
        "family_history": "Mother had emphysema.",
        "bp": "138/84",
        "hr": 102,
        "rr": 26,
        "temp": 37.4,
        "spo2": 88,
        "diagnosis": "Acute COPD Exacerbation",
        "findings": [
            {
                "region": "chest",
                "maneuver": "inspect",
                "target": "respiratory",
                "description": (
                    "Barrel chest deformity noted. Pursed-lip breathing observed. Using "
                    "accessory muscles of respiration. Prolonged expiratory phase."
                ),
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "chest",
                "maneuver": "auscultate",
                "target": "lungs",
                "location": "bilateral",
                "description": (
                    "Diffuse expiratory wheezes throughout all lung fields. Decreased "
                    "breath sounds bilaterally. Prolonged expiratory phase."
                ),
                "finding_type": "audio",
                "media_url": "/media/audio/wheezes-expiratory.mp3",
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "chest",
                "maneuver": "percuss",
                "target": "lungs",
                "location": "bilateral",
                "description": (
                    "Hyperresonance to percussion throughout lung fields bilaterally, "
                    "consistent with air trapping."
                ),
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "chest",
                "maneuver": "palpate",
                "target": "chest_expansion",
                "description": (
                    "Reduced chest expansion bilaterally, symmetric. Decreased tactile "
                    "fremitus."
                ),
                "is_abnormal": True,
                "key": True,
            },
        ],
    },
    # ------------------------------------------------------------------
    # Community-acquired pneumonia
    # ------------------------------------------------------------------
    {
        "title": "Community-Acquired Pneumonia",
        "age": 45,
        "sex": "Male",
        "chief_complaint": "Fever, cough, and chest pain",
        "hpi": (
            "A 45-year-old male presents with 4 days of fever, productive cough with "
            "green sputum, and right-sided chest pain that worsens with deep breathing. "
            "He also complains of chills and night sweats."
        ),
        "pmh": ["None"],
        "medications": ["None"],
        "allergies": ["NKDA"],
        "social_history": "Non-smoker, occasional alcohol use. Works as accountant.",
        "family_history": "Non-contributory",
        "bp": "118/72",
        "hr": 108,
        "rr": 22,
        "temp": 38.9,
        "spo2": 93,
        "diagnosis": "Right Lower Lobe Pneumonia",
        "findings": [
            {
                "region": "back",
                "maneuver": "auscultate",
                "target": "lungs",
                "location": "right_lower_lobe",
                "description": (
                    "Coarse crackles heard in right lower lobe. Bronchial breath sounds "
                    "in same area."
                ),
                "finding_type": "audio",
                "media_url": "/media/audio/crackles-coarse.mp3",
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "back",
                "maneuver": "percuss",
                "target": "lungs",
                "location": "right_lower_lobe",
                "description": (
                    "Dullness to percussion over right lower lobe, consistent with "
                    "consolidation."
                ),
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "back",
                "maneuver": "palpate",
                "target": "tactile_fremitus",
                "location": "right_lower_lobe",
                "description": "Increased tactile fremitus over right lower lobe.",
                "is_abnormal": True,
                "key": True,
            },
            {
                "region": "back",
                "maneuver": "special_test",
                "target": "egophony",
                "location": "right_lower_lobe",
                "description": (
                    'Egophony present over right lower lobe ("E" to "A" change). '
                    "Suggests consolidation."
                ),
                "is_abnormal": True,
                "key": True,
            },
        ],
    },
]


class Command(BaseCommand):
    help = "Seed the case bank with the demo cases and their examination findings."

    def handle(self, *args, **options):
        self.stdout.write(self.style.MIGRATE_HEADING("\n=== Seeding Case Bank ===\n"))

        with transaction.atomic():
            # ------------------------------------------------------------------
            # 1. Clear existing data (maneuvers protect their findings)
            # ------------------------------------------------------------------
            PerformedManeuverModel.objects.all().delete()
            StudentSessionModel.objects.all().delete()
            ExamFindingModel.objects.all().delete()
            CaseModel.objects.all().delete()
            self.stdout.write("  [CLEARED] Existing cases, findings and sessions")

            # ------------------------------------------------------------------
            # 2. Create cases, findings and key findings
            # ------------------------------------------------------------------
            for case_data in SEED_CASES:
                self._create_case(case_data)

        # ------------------------------------------------------------------
        # Summary
        # ------------------------------------------------------------------
        self.stdout.write(
            self.style.SUCCESS(
                f"\n✔ Seeding complete: "
                f"{CaseModel.objects.count()} cases, "
                f"{ExamFindingModel.objects.count()} exam findings.\n"
            )
        )

    def _create_case(self, case_data: dict) -> CaseModel:
        fields: dict = {
            key: value for key, value in case_data.items() if key != "findings"
        }
        case = CaseModel.objects.create(**fields)
        self.stdout.write(f"  [CREATED] Case: {case}")

        key_findings: list[ExamFindingModel] = []
        for finding_data in case_data["findings"]:
            is_key: bool = finding_data.get("key", False)
            finding = ExamFindingModel.objects.create(
                case=case,
                **{key: value for key, value in finding_data.items() if key != "key"},
            )
            if is_key:
                key_findings.append(finding)

        case.key_findings.set(key_findings)
        self.stdout.write(
            f"  [CREATED] {len(case_data['findings'])} findings "
            f"({len(key_findings)} key) for {case.title}"
        )
        return case

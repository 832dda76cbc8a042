"""
exam_engine/services/media_prompts.py
=====================================
Catalog of predefined prompts for generating finding media.
"""

from __future__ import annotations

# Replicate model identifiers
IMAGE_MODEL: str = "black-forest-labs/flux-schnell"
VIDEO_MODEL: str = "minimax/video-01"

MEDICAL_IMAGE_PROMPTS: dict[str, dict] = {
    "pitting-edema-bilateral": {
        "prompt": (
            "Medical photograph of bilateral lower extremity pitting edema, clinical "
            "photography style, both legs from knees down showing significant swelling "
            "extending to mid-calf, visible indentation marks from finger pressure test, "
            "skin appears taut and shiny, symmetric swelling on both legs, neutral medical "
            "background, professional medical documentation quality, well-lit clinical "
            "setting, anatomically accurate, photorealistic, 4K medical imaging"
        ),
        "filename": "pitting-edema-bilateral.jpg",
        "description": "Bilateral pitting edema in lower extremities",
    },
    "jvd-elevated": {
        "prompt": (
            "Medical photograph of jugular venous distention (JVD), patient at 45-degree "
            "angle, visible prominent jugular vein in neck, distended internal jugular vein "
            "clearly visible, clinical photography style, male patient neck in profile "
            "showing elevated jugular venous pressure, medical examination setting, "
            "professional documentation quality, photorealistic, well-lit, anatomically "
            "accurate, 4K medical imaging"
        ),
        "filename": "jvd-elevated.jpg",
        "description": "Jugular venous distention (elevated JVP)",
    },
    "barrel-chest": {
        "prompt": (
            "Medical photograph of barrel chest deformity in COPD patient, lateral view "
            "showing increased anteroposterior diameter, chest appears rounded and "
            "barrel-shaped, ribs oriented more horizontally than normal, elderly male "
            "patient, clinical photography style, neutral medical background, professional "
            "documentation quality, photorealistic, well-lit, anatomically accurate, 4K "
            "medical imaging"
        ),
        "filename": "barrel-chest.jpg",
        "description": "Barrel chest deformity (COPD)",
    },
    "pursed-lip-breathing": {
        "prompt": (
            "Medical photograph of elderly patient demonstrating pursed-lip breathing "
            "technique, close-up of face showing lips pursed during exhalation, patient "
            "appears to be working to breathe, COPD respiratory pattern, clinical "
            "photography style, professional medical documentation, photorealistic, "
            "well-lit, anatomically accurate, 4K medical imaging"
        ),
        "filename": "pursed-lip-breathing.jpg",
        "description": "Pursed-lip breathing technique",
    },
}

# image prompt is rendered first, then animated with the video prompt
MEDICAL_VIDEO_PROMPTS: dict[str, dict] = {
    "jvd-pulsation": {
        "image_prompt": (
            "Medical photograph of jugular venous distention (JVD), patient at 45-degree "
            "angle, visible prominent jugular vein in neck, clinical photography style, "
            "male patient neck in profile, medical examination setting, photorealistic"
        ),
        "video_prompt": (
            "Subtle pulsation of the jugular vein with cardiac cycle, gentle rhythmic "
            "movement, realistic medical footage, 2-3 seconds"
        ),
        "filename": "jvd-pulsation.mp4",
        "description": "JVD with visible pulsations",
        "duration": 3,
    },
    "tachypnea": {
        "image_prompt": (
            "Medical photograph of patient chest during respiration, patient in mild "
            "respiratory distress, clinical photography style, neutral medical background, "
            "photorealistic"
        ),
        "video_prompt": (
            "Rapid shallow breathing pattern, chest rising and falling at increased rate "
            "(24-26 breaths per minute), realistic respiratory movement, 3 seconds"
        ),
        "filename": "tachypnea.mp4",
        "description": "Tachypnea (rapid breathing)",
        "duration": 3,
    },
    "labored-breathing": {
        "image_prompt": (
            "Medical photograph of patient demonstrating use of accessory muscles for "
            "breathing, shoulder and neck muscles visible, clinical photography style, "
            "photorealistic"
        ),
        "video_prompt": (
            "Labored breathing with visible use of accessory muscles, shoulder elevation "
            "with each breath, realistic respiratory distress, 3 seconds"
        ),
        "filename": "labored-breathing.mp4",
        "description": "Labored breathing with accessory muscle use",
        "duration": 3,
    },
    "pursed-lip-breathing-video": {
        "image_prompt": (
            "Medical photograph of elderly COPD patient face, lips pursed, clinical "
            "photography style, photorealistic"
        ),
        "video_prompt": (
            "Patient performing pursed-lip breathing technique, slow exhalation through "
            "pursed lips, realistic breathing pattern, 3 seconds"
        ),
        "filename": "pursed-lip-breathing-video.mp4",
        "description": "Pursed-lip breathing technique (video)",
        "duration": 3,
    },
}

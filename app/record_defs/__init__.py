"""Field declarations for every known record type, merged by domain."""

from __future__ import annotations

from app.record_defs.identification import IDENTIFICATION_DEFS
from app.record_defs.legal import LEGAL_DEFS
from app.record_defs.medical import MEDICAL_DEFS
from app.record_defs.pet import PET_DEFS
from app.record_defs.preferences import PREFERENCES_DEFS
from app.record_defs.school import SCHOOL_DEFS
from app.record_defs.travel import TRAVEL_DEFS

RECORD_DEFS = {
    **IDENTIFICATION_DEFS,
    **MEDICAL_DEFS,
    **SCHOOL_DEFS,
    **PREFERENCES_DEFS,
    **TRAVEL_DEFS,
    **LEGAL_DEFS,
    **PET_DEFS,
}

# Keys older app versions wrote that are kept in the canonical payload.
EXTRA_DEFAULTS = {
    "MEDICAL_PROFILE": {"notes": ""},
    "MEDICAL_INSURANCE": {"notes": ""},
    "VISION_PRESCRIPTION": {"notes": ""},
    "PRIVATE_HEALTH_PROFILE": {"privacyEnforced": True},
    "SCHOOL_INFO": {"notes": ""},
    "LEGAL_PROPERTY_DOCUMENT": {"notes": ""},
    "OTHER_DOCUMENT": {"notes": ""},
}

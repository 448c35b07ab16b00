"""Static record-type catalog: labels, categories and cardinality."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

SINGLE = "SINGLE"
MULTI = "MULTI"


@dataclass(frozen=True)
class RecordTypeMeta:
    type: str
    category: str
    label: str
    cardinality: str = SINGLE
    sort: int = 0
    is_private: bool = False


RECORD_TYPE_CATALOG: List[RecordTypeMeta] = [
    RecordTypeMeta("DRIVERS_LICENSE", "IDENTIFICATION", "Driver’s License", SINGLE, 30),
    RecordTypeMeta("BIRTH_CERTIFICATE", "IDENTIFICATION", "Birth Certificate", SINGLE, 40),
    RecordTypeMeta("SOCIAL_SECURITY_CARD", "IDENTIFICATION", "Social Security", SINGLE, 50),
    RecordTypeMeta("MEDICAL_INSURANCE", "MEDICAL", "Insurance Policy", SINGLE, 10),
    RecordTypeMeta("MEDICAL_PROFILE", "MEDICAL", "Medical Profile", SINGLE, 20),
    RecordTypeMeta("MEDICAL_PROCEDURES", "MEDICAL", "Procedures", SINGLE, 30),
    RecordTypeMeta("PRESCRIPTIONS", "MEDICAL", "Prescriptions", SINGLE, 40),
    RecordTypeMeta("VACCINATIONS", "MEDICAL", "Vaccinations", SINGLE, 50),
    RecordTypeMeta("VISION_PRESCRIPTION", "MEDICAL", "Vision Rx", SINGLE, 60),
    RecordTypeMeta("PEOPLE_CARE_PROVIDERS", "MEDICAL", "Care Providers", MULTI, 70),
    RecordTypeMeta("PRIVATE_HEALTH_PROFILE", "PRIVATE_HEALTH", "Private Health", SINGLE, 10, is_private=True),
    RecordTypeMeta("SCHOOL_INFO", "SCHOOL_INFO", "School Info", SINGLE, 10),
    RecordTypeMeta("AUTHORIZED_PICKUP", "SCHOOL_INFO", "Authorized Pickup", SINGLE, 20),
    RecordTypeMeta("EDUCATION_RECORD", "EDUCATION", "Education Record", MULTI, 10),
    RecordTypeMeta("PREFERENCES", "PREFERENCES", "Favorites", SINGLE, 10),
    RecordTypeMeta("PERSON_SIZING_PROFILE", "SIZES", "Sizes", SINGLE, 10),
    RecordTypeMeta("PASSPORT", "TRAVEL", "Passport", MULTI, 10),
    RecordTypeMeta("PASSPORT_CARD", "TRAVEL", "Passport Card", MULTI, 20),
    RecordTypeMeta("TRAVEL_IDS", "TRAVEL", "Travel IDs", SINGLE, 30),
    RecordTypeMeta("LOYALTY_ACCOUNTS", "TRAVEL", "Loyalty Accounts", SINGLE, 40),
    RecordTypeMeta("LEGAL_PROPERTY_DOCUMENT", "LEGAL_PROPERTY", "Legal / Property", MULTI, 10),
    RecordTypeMeta("OTHER_DOCUMENT", "DOCUMENTS", "Other Document", MULTI, 10),
    RecordTypeMeta("PET_PROFILE", "PETS", "Pet Profile", SINGLE, 10),
    RecordTypeMeta("PET_DOCUMENT", "PETS", "Pet Document", MULTI, 20),
    RecordTypeMeta("PET_INSURANCE", "PETS", "Pet Insurance", SINGLE, 30),
]

RECORD_META_BY_TYPE: Dict[str, RecordTypeMeta] = {meta.type: meta for meta in RECORD_TYPE_CATALOG}


def get_record_meta(record_type: str) -> RecordTypeMeta | None:
    return RECORD_META_BY_TYPE.get(record_type)


def record_type_label(record_type: str) -> str:
    meta = get_record_meta(record_type)
    if meta:
        return meta.label
    return str(record_type or "").replace("_", " ")


def is_singleton_type(record_type: str) -> bool:
    meta = get_record_meta(record_type)
    return bool(meta and meta.cardinality == SINGLE)


def types_for_category(category: str) -> list[str]:
    metas = [m for m in RECORD_TYPE_CATALOG if m.category == category]
    return [m.type for m in sorted(metas, key=lambda m: m.sort)]

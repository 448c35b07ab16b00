"""Medical, insurance and private health record types."""

from __future__ import annotations

from app.options import (
    ADVOCACY_NEED_OPTIONS,
    AVOID_OPTIONS,
    BLOOD_TYPE_OPTIONS,
    COPING_STRATEGY_OPTIONS,
    HUMAN_VACCINATION_OPTIONS,
    PEOPLE_CARE_PROVIDER_TYPE_OPTIONS,
    PRIVACY_LEVEL_OPTIONS,
    SAFETY_RISK_OPTIONS,
    SENSORY_SEEKING_OPTIONS,
    SENSORY_SENSITIVITY_OPTIONS,
    SENSORY_SUPPORT_OPTIONS,
    SEVERITY_OPTIONS,
    STRESSOR_OPTIONS,
    TRANSITION_SUPPORT_OPTIONS,
    TRIGGER_OPTIONS,
    VACCINE_DOSE_OPTIONS,
)
from app.schema_registry import DATE, DESCRIPTION, LIST, MULTILINE, OBJECT_LIST, SELECT, TOGGLE, FieldDecl

PRIVATE_HEALTH_INTRO = (
    "This section helps others understand how to support this person in stressful, "
    "medical, or high-demand situations.\n\n"
    "Add triggers, stressors, sensory needs, and strategies that help them feel safe, "
    "regulated, and understood.\n\n"
    "Only visible to you unless shared."
)


def _condition_items() -> tuple:
    return (
        FieldDecl("label", "Condition"),
        FieldDecl("severity", "Severity", SELECT, options=SEVERITY_OPTIONS),
        FieldDecl("isActive", "Active", TOGGLE),
    )


MEDICAL_DEFS = {
    "MEDICAL_PROFILE": [
        FieldDecl("bloodType", "Blood type", SELECT, options=BLOOD_TYPE_OPTIONS),
        FieldDecl(
            "allergies",
            "Allergies",
            OBJECT_LIST,
            add_label="Add Allergy",
            item_fields=(
                FieldDecl("label", "Allergy"),
                FieldDecl("severity", "Severity", SELECT, options=SEVERITY_OPTIONS),
                FieldDecl("isActive", "Active", TOGGLE),
            ),
        ),
        FieldDecl("conditions", "Conditions", OBJECT_LIST, add_label="Add Condition", item_fields=_condition_items()),
    ],
    "MEDICAL_INSURANCE": [
        FieldDecl("insuranceType", "Insurance type"),
        FieldDecl("insurerName", "Insurer name"),
        FieldDecl("memberName", "Member name"),
        FieldDecl("memberId", "Member ID"),
        FieldDecl("groupNumber", "Group number"),
        FieldDecl("planName", "Plan name"),
        FieldDecl("rx.bin", "RX BIN"),
        FieldDecl("rx.pcn", "RX PCN"),
        FieldDecl("rx.rxGroup", "RX Group"),
        FieldDecl("customerServicePhone", "Customer service phone"),
        FieldDecl("website", "Website"),
        FieldDecl("effectiveDate", "Effective date", DATE),
    ],
    "MEDICAL_PROCEDURES": [
        FieldDecl(
            "procedures",
            "Procedures",
            OBJECT_LIST,
            add_label="Add Procedure",
            item_fields=(
                FieldDecl("procedureName", "Procedure name"),
                FieldDecl("monthYear", "Date", DATE),
                FieldDecl("reasonNotes", "Reason / Notes", MULTILINE),
                FieldDecl("providerOrHospital", "Provider / Hospital"),
                FieldDecl("complications", "Complications"),
            ),
        ),
    ],
    "PRESCRIPTIONS": [
        FieldDecl(
            "prescriptions",
            "Prescriptions",
            OBJECT_LIST,
            add_label="Add Prescription",
            item_fields=(
                FieldDecl("medicationName", "Medication name"),
                FieldDecl("dosage", "Dosage"),
                FieldDecl("frequency", "Frequency"),
                FieldDecl("indication", "Indication"),
                FieldDecl("prescribingProviderContactId", "Prescribing provider contact ID"),
                FieldDecl("pharmacyContactId", "Pharmacy contact ID"),
                FieldDecl("startDate", "Start date", DATE),
                FieldDecl("endDate", "End date", DATE),
                FieldDecl("discontinued", "Discontinued", TOGGLE),
                FieldDecl("privacy", "Privacy", SELECT, options=PRIVACY_LEVEL_OPTIONS),
                FieldDecl("isActive", "Active", TOGGLE),
            ),
        ),
    ],
    "VACCINATIONS": [
        FieldDecl(
            "vaccinations",
            "Vaccinations",
            OBJECT_LIST,
            add_label="Add Vaccination",
            item_fields=(
                FieldDecl("vaccineName", "Vaccine name", SELECT, options=HUMAN_VACCINATION_OPTIONS),
                FieldDecl("doseNumber", "Dose number", SELECT, options=VACCINE_DOSE_OPTIONS),
                FieldDecl("dateAdministered", "Date administered", DATE),
                FieldDecl("expirationDate", "Expiration date", DATE),
                FieldDecl("providerContactId", "Provider contact ID"),
            ),
        ),
    ],
    "VISION_PRESCRIPTION": [
        FieldDecl("rxDate", "RX date", DATE),
        FieldDecl("doctorContactId", "Doctor contact ID"),
    ],
    "PRIVATE_HEALTH_PROFILE": [
        FieldDecl("_intro", "", DESCRIPTION, content=PRIVATE_HEALTH_INTRO),
        FieldDecl(
            "advocacyNeeds",
            "What accommodations or supports help this person succeed in school, social, or medical settings?",
            LIST,
            options=ADVOCACY_NEED_OPTIONS,
        ),
        FieldDecl(
            "stressors",
            "What situations or environments commonly increase stress or overwhelm?",
            LIST,
            options=STRESSOR_OPTIONS,
        ),
        FieldDecl(
            "triggers",
            "What specific experiences or interactions may cause immediate distress or escalation?",
            LIST,
            options=TRIGGER_OPTIONS,
        ),
        FieldDecl(
            "copingStrategies",
            "What helps this person calm, regulate, or feel safe when overwhelmed?",
            LIST,
            options=COPING_STRATEGY_OPTIONS,
        ),
        FieldDecl(
            "avoids",
            "What approaches should be avoided during stress or escalation?",
            LIST,
            options=AVOID_OPTIONS,
        ),
        FieldDecl(
            "sensorySensitivities",
            "Are there sensory inputs that are especially uncomfortable or overwhelming?",
            LIST,
            options=SENSORY_SENSITIVITY_OPTIONS,
        ),
        FieldDecl(
            "sensorySeeking",
            "Does this person actively seek certain sensory input?",
            LIST,
            options=SENSORY_SEEKING_OPTIONS,
        ),
        FieldDecl(
            "sensorySupports",
            "What tools or environmental supports help regulate sensory needs?",
            LIST,
            options=SENSORY_SUPPORT_OPTIONS,
        ),
        FieldDecl(
            "transitionSupports",
            "What helps during transitions between activities or environments?",
            LIST,
            options=TRANSITION_SUPPORT_OPTIONS,
        ),
        FieldDecl(
            "safetyRisks",
            "Are there safety considerations caregivers should be aware of?",
            LIST,
            options=SAFETY_RISK_OPTIONS,
        ),
    ],
    "PEOPLE_CARE_PROVIDERS": [
        FieldDecl("providerType", "Provider type", SELECT, options=PEOPLE_CARE_PROVIDER_TYPE_OPTIONS),
        FieldDecl("contactId", "Contact ID"),
    ],
}

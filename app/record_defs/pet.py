"""Pet care record types."""

from __future__ import annotations

from app.options import (
    PET_AGGRESSION_TRIGGER_OPTIONS,
    PET_AVOID_TRIGGER_OPTIONS,
    PET_CRATE_RULE_OPTIONS,
    PET_DOCUMENT_TYPE_OPTIONS,
    PET_ESCAPE_TENDENCY_OPTIONS,
    PET_FEAR_OPTIONS,
    PET_FOOD_TYPE_OPTIONS,
    PET_MED_ADMIN_METHOD_OPTIONS,
    PET_MISSED_DOSE_INSTRUCTION_OPTIONS,
    PET_NEUTERED_OPTIONS,
    PET_PORTION_UNIT_OPTIONS,
    PET_POTTY_TIMES_PER_DAY_OPTIONS,
    PET_PROVIDER_TYPE_OPTIONS,
    PET_RESOURCE_GUARDING_OPTIONS,
    PET_SEPARATION_ANXIETY_LEVEL_OPTIONS,
    PET_SLEEP_LOCATION_OPTIONS,
    PET_STRANGER_INTRODUCTION_OPTIONS,
    PET_TOUCH_SENSITIVITY_AREA_OPTIONS,
    PET_TREAT_ALLOWED_OPTIONS,
    PET_TREAT_PURPOSE_OPTIONS,
    PET_WEIGHT_UNIT_OPTIONS,
)
from app.schema_registry import DATE, LIST, MULTILINE, SELECT, TIME_LIST, FieldDecl

PET_DEFS = {
    "PET_BASICS": [
        FieldDecl("isNeutered", "Neutered / Spayed", SELECT, options=PET_NEUTERED_OPTIONS),
        FieldDecl("microchipId", "Microchip ID"),
    ],
    "PET_WEIGHT_ENTRY": [
        FieldDecl("weightValue", "Weight"),
        FieldDecl("weightUnit", "Unit", SELECT, options=PET_WEIGHT_UNIT_OPTIONS),
        FieldDecl("measuredAt", "Date measured", DATE),
    ],
    "PET_CARE_PROVIDERS": [
        FieldDecl("providerType", "Provider type", SELECT, options=PET_PROVIDER_TYPE_OPTIONS),
        FieldDecl("contactId", "Contact ID"),
    ],
    "PET_VACCINATIONS": [
        FieldDecl("vaccineName", "Vaccine name"),
        FieldDecl("dateAdministered", "Date administered", DATE),
        FieldDecl("doseNumber", "Dose number"),
        FieldDecl("doseTotal", "Dose total"),
        FieldDecl("providerContactId", "Provider contact ID"),
    ],
    "PET_FLEA_PREVENTION": [
        FieldDecl("productName", "Product name"),
        FieldDecl("dateGiven", "Date given", DATE),
        FieldDecl("nextDueDate", "Next due date", DATE),
    ],
    "PET_SURGERIES": [
        FieldDecl("procedureName", "Procedure name"),
        FieldDecl("date", "Date", DATE),
        FieldDecl("clinicOrHospital", "Clinic or hospital"),
        FieldDecl("surgeonOrVetContactId", "Surgeon/Vet contact ID"),
    ],
    "PET_INSURANCE": [
        FieldDecl("providerName", "Provider name"),
        FieldDecl("policyNumber", "Policy number"),
        FieldDecl("memberId", "Member ID"),
        FieldDecl("customerServicePhone", "Customer service phone"),
    ],
    "PET_MEDICATIONS": [
        FieldDecl("medicationName", "Medication name"),
        FieldDecl("dosage", "Dosage"),
        FieldDecl("adminMethod", "How administered", SELECT, options=PET_MED_ADMIN_METHOD_OPTIONS),
        FieldDecl("missedDoseAction", "If missed dose", SELECT, options=PET_MISSED_DOSE_INSTRUCTION_OPTIONS),
        FieldDecl("sideEffectsNotes", "Side effects to watch for", MULTILINE),
    ],
    "PET_DIAGNOSES": [
        FieldDecl("diagnosisName", "Diagnosis"),
        FieldDecl("date", "Date", DATE),
        FieldDecl("notes", "Notes", MULTILINE),
    ],
    "PET_FEEDING_ROUTINE": [
        FieldDecl("foodBrand", "Food brand"),
        FieldDecl("foodType", "Food type", SELECT, options=PET_FOOD_TYPE_OPTIONS),
        FieldDecl("portionAmount", "Portion amount"),
        FieldDecl("portionUnit", "Portion unit", SELECT, options=PET_PORTION_UNIT_OPTIONS),
        FieldDecl("feedingTimes", "Feeding times", TIME_LIST),
        FieldDecl("treatAllowed", "Treats allowed", SELECT, options=PET_TREAT_ALLOWED_OPTIONS),
        FieldDecl("treatPurpose", "Treat purpose", SELECT, options=PET_TREAT_PURPOSE_OPTIONS),
        FieldDecl("treatRulesNotes", "Treat rules / notes", MULTILINE),
    ],
    "PET_BATHROOM_ROUTINE": [
        FieldDecl("pottyTimesPerDay", "Times per day", SELECT, options=PET_POTTY_TIMES_PER_DAY_OPTIONS),
        FieldDecl("leashHarnessNotes", "Leash / harness details", MULTILINE),
        FieldDecl("avoidTriggers", "Avoid triggers", LIST, options=PET_AVOID_TRIGGER_OPTIONS),
        FieldDecl("avoidTriggersNotes", "Trigger notes", MULTILINE),
        FieldDecl("pottyScheduleTimes", "Potty schedule", TIME_LIST),
    ],
    "PET_SLEEP_ROUTINE": [
        FieldDecl("sleepLocation", "Sleep location", SELECT, options=PET_SLEEP_LOCATION_OPTIONS),
        FieldDecl("crateRule", "Crate rules", SELECT, options=PET_CRATE_RULE_OPTIONS),
        FieldDecl("bedtimeRoutine", "Bedtime routine", MULTILINE),
    ],
    "PET_BEHAVIOR_PROFILE": [
        FieldDecl("fears", "Fears", LIST, options=PET_FEAR_OPTIONS),
        FieldDecl(
            "separationAnxietyLevel",
            "Separation anxiety",
            SELECT,
            options=PET_SEPARATION_ANXIETY_LEVEL_OPTIONS,
        ),
        FieldDecl("separationAnxietyNotes", "Anxiety notes", MULTILINE),
        FieldDecl("resourceGuarding", "Resource guarding", SELECT, options=PET_RESOURCE_GUARDING_OPTIONS),
        FieldDecl("escapeTendency", "Escape tendency", SELECT, options=PET_ESCAPE_TENDENCY_OPTIONS),
        FieldDecl("aggressionTriggers", "Aggression triggers", LIST, options=PET_AGGRESSION_TRIGGER_OPTIONS),
        FieldDecl(
            "strangerIntro",
            "Stranger introduction",
            SELECT,
            options=PET_STRANGER_INTRODUCTION_OPTIONS,
        ),
        FieldDecl("touchSensitivities", "Touch sensitivities", LIST, options=PET_TOUCH_SENSITIVITY_AREA_OPTIONS),
    ],
    "PET_DOCUMENT": [
        FieldDecl("label", "Label"),
        FieldDecl("documentType", "Document type", SELECT, options=PET_DOCUMENT_TYPE_OPTIONS),
    ],
}

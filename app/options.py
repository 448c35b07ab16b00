"""Select and list option values used by record field declarations."""

from __future__ import annotations

COUNTRY_OPTIONS = (
    "United States",
    "Canada",
    "Mexico",
    "United Kingdom",
    "Ireland",
    "France",
    "Germany",
    "Spain",
    "Italy",
    "Portugal",
    "Netherlands",
    "Australia",
    "New Zealand",
    "Japan",
    "India",
    "Brazil",
    "Other",
)

# People
PEOPLE_CARE_PROVIDER_TYPE_OPTIONS = (
    "Primary Care",
    "Pediatrician",
    "Dentist",
    "Optometrist",
    "Therapist",
    "Specialist",
    "Pharmacy",
    "Emergency Contact",
    "Other",
)
BLOOD_TYPE_OPTIONS = ("Unknown", "A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
SEVERITY_OPTIONS = ("Unknown", "Mild", "Moderate", "Severe")
VACCINE_DOSE_OPTIONS = ("Unknown", "1", "2", "3", "Booster", "Annual", "Other")
HUMAN_VACCINATION_OPTIONS = (
    "COVID-19",
    "Influenza (Flu)",
    "Tdap (Tetanus, Diphtheria, Pertussis)",
    "MMR (Measles, Mumps, Rubella)",
    "Varicella (Chickenpox)",
    "Hepatitis A",
    "Hepatitis B",
    "HPV",
    "Meningococcal",
    "Pneumococcal",
    "Polio (IPV)",
    "Rotavirus",
    "Shingles (Zoster)",
    "RSV",
    "Other",
)
PRIVACY_LEVEL_OPTIONS = ("STANDARD", "PRIVATE")

ADVOCACY_NEED_OPTIONS = (
    "Extra processing time",
    "Clear/simple instructions",
    "Breaks without penalty",
    "Movement breaks",
    "Visual schedule",
    "Advance notice for changes",
    "Prefer quiet environment",
    "Headphones allowed",
    "Nonverbal response accepted",
    "Safe person identified",
    "Written instructions preferred",
    "Sensory supports allowed",
    "Prefer not to be touched",
    "Other",
)
STRESSOR_OPTIONS = (
    "Crowds",
    "Noise (general)",
    "Transitions between activities",
    "Being rushed",
    "Unpredictable schedule",
    "Bright lights",
    "Strong smells",
    "New places",
    "New people",
    "Waiting in lines",
    "Hunger/thirst",
    "Poor sleep",
    "Medical appointments",
    "Other",
)
TRIGGER_OPTIONS = (
    "Unexpected change",
    "Sensory overload",
    "Hunger",
    "Fatigue",
    "Sudden loud sounds",
    "Being corrected publicly",
    "Loss of control/choice",
    "Forced physical contact",
    "Transitions without warning",
    "Pain/illness",
    "Other",
)
COPING_STRATEGY_OPTIONS = (
    "Quiet space / cool down corner",
    "Movement break",
    "Headphones/ear defenders",
    "Breathing exercises",
    "Deep pressure (hug/weighted blanket)",
    "Music",
    "Dim lights",
    "Fidget tool",
    "Snack / hydration",
    "Short walk",
    "One trusted adult support",
    "Other",
)
AVOID_OPTIONS = (
    "Raising voice",
    "Public correction",
    "Sarcasm",
    "Crowding their space",
    "Too many questions",
    "Threats or ultimatums",
    "Forcing eye contact",
    "Touch without consent",
    "Other",
)
SENSORY_SENSITIVITY_OPTIONS = (
    "Sound (high volume)",
    "Touch (light touch)",
    "Smells",
    "Bright lights",
    "Touch (tags/seams)",
    "Taste/textures",
    "Crowds/close proximity",
    "Heat",
    "Cold",
    "Other",
)
SENSORY_SEEKING_OPTIONS = (
    "Chewing",
    "Jumping",
    "Rocking",
    "Spinning",
    "Humming/vocalizing",
    "Touching textures",
    "Pacing",
    "Other",
)
SENSORY_SUPPORT_OPTIONS = (
    "Noise-canceling headphones",
    "Fidgets",
    "Weighted blanket/lap pad",
    "Movement breaks",
    "Compression vest/clothing",
    "Quiet room",
    "Dim lighting",
    "Other",
)
TRANSITION_SUPPORT_OPTIONS = (
    "5-minute warning",
    "2-minute warning",
    "Visual schedule",
    "Timer visible",
    "First/Then board",
    "Transition object",
    "Preview plan before leaving",
    "Other",
)
SAFETY_RISK_OPTIONS = (
    "Elopement / running off",
    "Impulsivity near streets",
    "Self-injury",
    "Aggression when overwhelmed",
    "Pica (eating non-food items)",
    "Water safety concerns",
    "Medication risks",
    "Other",
)

TRAVEL_ID_OPTIONS = (
    "TSA PreCheck",
    "Global Entry",
    "NEXUS",
    "SENTRI",
    "FAST",
    "Other Trusted Traveler Program",
)
TRAVEL_LOYALTY_TYPE_OPTIONS = ("Airline", "Hotel", "Car Rental", "Booking Site / OTA", "Other")

PERSON_SIZING_REFERENCE_OPTIONS = (
    "Women's Regular",
    "Women's Plus",
    "Women's Petite",
    "Men's Dress Shirt",
    "Men's Casual Shirt",
    "Men's Coats & Jackets",
    "Youth",
    "Custom",
)
PERSON_MEASUREMENT_UNIT_OPTIONS = ("in", "cm")
GENERAL_SIZE_OPTIONS = ("XXS", "XS", "S", "M", "L", "XL", "XXL", "XXXL")
SHOE_CATEGORY_OPTIONS = ("Women's", "Men's", "Youth")
SHOE_SYSTEM_OPTIONS = ("US", "EU", "UK")
SHOE_WIDTH_OPTIONS = ("Narrow", "Regular", "Wide", "Extra Wide")

LEGAL_DOCUMENT_TYPE_OPTIONS = (
    "Will",
    "Trust",
    "Power of Attorney",
    "Living Will",
    "Court Order",
    "Deed",
    "Title",
    "Other",
)
OTHER_DOCUMENT_CATEGORY_OPTIONS = (
    "Financial",
    "Employment",
    "Education",
    "Tax",
    "Insurance",
    "Membership",
    "Warranty",
    "Other",
)

# Pets
PET_NEUTERED_OPTIONS = ("Yes", "No", "Unknown")
PET_WEIGHT_UNIT_OPTIONS = ("lb", "kg")
PET_PROVIDER_TYPE_OPTIONS = (
    "Primary Vet",
    "Emergency Vet",
    "Specialist Vet",
    "Boarding",
    "Walker",
    "Trainer",
    "Sitter",
    "Other",
)
PET_FOOD_TYPE_OPTIONS = ("Dry", "Wet", "Raw", "Fresh", "Prescription", "Other")
PET_PORTION_UNIT_OPTIONS = ("Cups", "Grams")
PET_TREAT_ALLOWED_OPTIONS = ("Yes", "No", "Only for training")
PET_TREAT_PURPOSE_OPTIONS = ("Training", "After potty", "After walk", "Medication", "Calming", "Other")
PET_POTTY_TIMES_PER_DAY_OPTIONS = ("1", "2", "3", "4", "5", "6")
PET_AVOID_TRIGGER_OPTIONS = ("Dogs", "Bikes", "Kids", "Cats", "Skateboards", "Crowds", "Other")
PET_SLEEP_LOCATION_OPTIONS = ("Crate", "Dog bed", "Owner bed", "Couch", "Laundry room", "Other")
PET_CRATE_RULE_OPTIONS = ("Door open", "Door closed", "No crate")
PET_FEAR_OPTIONS = (
    "Thunder",
    "Fireworks",
    "Vacuum",
    "Doorbell",
    "Strangers entering home",
    "Children",
    "Other dogs",
    "Car rides",
    "Grooming",
    "Nail trimming",
    "Other",
)
PET_SEPARATION_ANXIETY_LEVEL_OPTIONS = (
    "None – Completely calm",
    "Mild – Whines or paces briefly",
    "Moderate – Barks/howls for extended time",
    "Severe – Destructive behavior or self-harm risk",
    "Not sure",
)
PET_RESOURCE_GUARDING_OPTIONS = (
    "No",
    "Yes – Food only",
    "Yes – Toys only",
    "Yes – Bed/space",
    "Yes – Multiple items",
)
PET_ESCAPE_TENDENCY_OPTIONS = (
    "No – Reliable",
    "Occasionally curious",
    "Yes – Door-darter",
    "Yes – Fence climber/digger",
    "Yes – Will run if off leash",
)
PET_AGGRESSION_TRIGGER_OPTIONS = (
    "Food",
    "Toys",
    "Being touched while sleeping",
    "Grooming",
    "Other dogs",
    "Cats",
    "Children",
    "Strangers entering home",
    "Pain/injury",
    "No aggression history",
    "Other",
)
PET_STRANGER_INTRODUCTION_OPTIONS = (
    "Friendly – Can approach immediately",
    "Needs calm introduction",
    "Should ignore pet at first",
    "Must meet outdoors first",
    "Avoid direct eye contact",
    "Not comfortable with strangers",
)
PET_TOUCH_SENSITIVITY_AREA_OPTIONS = (
    "Ears",
    "Paws",
    "Tail",
    "Hips",
    "Back",
    "Stomach",
    "Face",
    "No sensitivities",
    "Other",
)
PET_MED_ADMIN_METHOD_OPTIONS = (
    "With food",
    "Hidden in pill pocket",
    "Crushed",
    "Directly by mouth",
    "Topical",
    "Injection",
    "Other",
)
PET_MISSED_DOSE_INSTRUCTION_OPTIONS = (
    "Give as soon as remembered",
    "Skip missed dose (do not double)",
    "Call owner",
    "Call vet",
    "Other",
)
PET_DOCUMENT_TYPE_OPTIONS = (
    "Vaccination Record",
    "Rabies Certificate",
    "ESA Letter",
    "Training Certificate",
    "Service Animal ID",
    "Adoption Papers",
    "Registration / License",
    "Microchip Registration",
    "Other",
)

"""Travel programs and loyalty accounts."""

from __future__ import annotations

from app.options import TRAVEL_ID_OPTIONS, TRAVEL_LOYALTY_TYPE_OPTIONS
from app.schema_registry import DATE, MULTILINE, OBJECT_LIST, SELECT, FieldDecl, ShowWhen

OTHER_PROGRAM = "Other Trusted Traveler Program"
PASSID_PROGRAMS = ("Global Entry", "NEXUS", "SENTRI", "FAST")


def travel_number_label(values: dict) -> str:
    program = str(values.get("type") or "")
    if program == "TSA PreCheck":
        return "Known Traveler Number (KTN)"
    if program in PASSID_PROGRAMS:
        return "PASSID / Known Traveler Number"
    return "Program Number"


TRAVEL_DEFS = {
    "TRAVEL_IDS": [
        FieldDecl(
            "travelIds",
            "Travel IDs",
            OBJECT_LIST,
            add_label="Add Travel ID",
            item_fields=(
                FieldDecl("type", "Program type", SELECT, options=TRAVEL_ID_OPTIONS),
                FieldDecl(
                    "otherProgramName",
                    "Other program name",
                    show_when=ShowWhen(key="type", equals=OTHER_PROGRAM),
                ),
                FieldDecl("number", travel_number_label),
                FieldDecl("expirationDate", "Expiration date", DATE),
                FieldDecl("loginEmail", "Login email", placeholder="Optional"),
                FieldDecl("notes", "Notes", MULTILINE, placeholder="Optional"),
            ),
        ),
    ],
    "LOYALTY_ACCOUNTS": [
        FieldDecl(
            "accounts",
            "Loyalty Accounts",
            OBJECT_LIST,
            add_label="Add Loyalty Account",
            item_fields=(
                FieldDecl("programType", "Program type", SELECT, options=TRAVEL_LOYALTY_TYPE_OPTIONS),
                FieldDecl("providerName", "Provider name"),
                FieldDecl("memberNumber", "Member number"),
                FieldDecl("loginEmailOrUsername", "Login email or username", placeholder="Optional"),
                FieldDecl("statusTier", "Status / tier", placeholder="Optional"),
                FieldDecl("notes", "Notes", MULTILINE, placeholder="Optional"),
            ),
        ),
    ],
}

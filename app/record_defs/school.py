from __future__ import annotations

from app.options import COUNTRY_OPTIONS
from app.schema_registry import OBJECT_LIST, SELECT, FieldDecl

SCHOOL_DEFS = {
    "SCHOOL_INFO": [
        FieldDecl("schoolName", "School name"),
        FieldDecl("address.line1", "Address line 1"),
        FieldDecl("address.city", "City"),
        FieldDecl("address.state", "State"),
        FieldDecl("address.postalCode", "Postal code"),
        FieldDecl("address.country", "Country", SELECT, options=COUNTRY_OPTIONS),
        FieldDecl("mainOfficePhone", "Main office phone"),
        FieldDecl("nurseContactId", "Nurse contact ID"),
        FieldDecl("counselorContactId", "Counselor contact ID"),
    ],
    "AUTHORIZED_PICKUP": [
        FieldDecl(
            "authorizedPickup",
            "Authorized Pickup",
            OBJECT_LIST,
            add_label="Add Pickup Contact",
            item_fields=(
                FieldDecl("contactId", "Contact ID"),
                FieldDecl("relationship", "Relationship"),
                FieldDecl("rules", "Rules (comma separated)"),
            ),
        ),
    ],
    "EDUCATION_RECORD": [
        FieldDecl("title", "Title"),
        FieldDecl("schoolName", "School name"),
        FieldDecl("gradeOrLevel", "Grade or level"),
        FieldDecl("year", "Year"),
    ],
}

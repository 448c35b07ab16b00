"""Identification documents: passports, licenses, certificates."""

from __future__ import annotations

from app.options import COUNTRY_OPTIONS
from app.schema_registry import DATE, LIST, MULTILINE, SELECT, FieldDecl

IDENTIFICATION_DEFS = {
    "PASSPORT": [
        FieldDecl("firstName", "First name"),
        FieldDecl("middleName", "Middle name"),
        FieldDecl("lastName", "Last name"),
        FieldDecl("passportNumber", "Passport number"),
        FieldDecl("nationality", "Nationality", SELECT, options=COUNTRY_OPTIONS),
        FieldDecl("dateOfBirth", "Date of birth", DATE),
        FieldDecl("sex", "Sex", SELECT, options=("Male", "Female", "X")),
        FieldDecl("placeOfBirth", "Place of birth"),
        FieldDecl("issueDate", "Issue date", DATE),
        FieldDecl("expirationDate", "Expiration date", DATE),
        FieldDecl("issuingCountry", "Issuing country", SELECT, options=COUNTRY_OPTIONS),
        FieldDecl("issuingAuthority", "Issuing authority"),
        FieldDecl("mrzRaw", "MRZ raw", MULTILINE),
    ],
    "PASSPORT_CARD": [
        FieldDecl("fullName", "Full name"),
        FieldDecl("passportCardNumber", "Passport card number"),
        FieldDecl("dateOfBirth", "Date of birth", DATE),
        FieldDecl("expirationDate", "Expiration date", DATE),
        FieldDecl("issuingCountry", "Issuing country", SELECT, options=COUNTRY_OPTIONS),
        FieldDecl("mrzRaw", "MRZ raw", MULTILINE),
    ],
    "DRIVERS_LICENSE": [
        FieldDecl("fullName", "Full name"),
        FieldDecl("dlNumber", "License number"),
        FieldDecl("dateOfBirth", "Date of birth", DATE),
        FieldDecl("expirationDate", "Expiration date", DATE),
        FieldDecl("issueDate", "Issue date", DATE),
        FieldDecl("address.line1", "Address line 1"),
        FieldDecl("address.line2", "Address line 2"),
        FieldDecl("address.city", "City"),
        FieldDecl("address.state", "State"),
        FieldDecl("address.postalCode", "Postal code"),
        FieldDecl("address.country", "Country", SELECT, options=COUNTRY_OPTIONS),
        FieldDecl("licenseClass", "License class"),
        FieldDecl("restrictions", "Restrictions", LIST, placeholder="Add a restriction"),
        FieldDecl("issuingRegion", "Issuing region"),
    ],
    "BIRTH_CERTIFICATE": [
        FieldDecl("childFullName", "Child full name"),
        FieldDecl("dateOfBirth", "Date of birth", DATE),
        FieldDecl("placeOfBirth.city", "Birth city"),
        FieldDecl("placeOfBirth.county", "Birth county"),
        FieldDecl("placeOfBirth.state", "Birth state"),
        FieldDecl("placeOfBirth.country", "Birth country", SELECT, options=COUNTRY_OPTIONS),
        FieldDecl("certificateNumber", "Certificate number"),
        FieldDecl("parents.includeParents", "Include parents", SELECT, options=("true", "false")),
        FieldDecl("parents.parent1Name", "Parent 1 name"),
        FieldDecl("parents.parent2Name", "Parent 2 name"),
    ],
    "SOCIAL_SECURITY_CARD": [
        FieldDecl("fullName", "Full name"),
        FieldDecl("ssn", "SSN"),
    ],
}

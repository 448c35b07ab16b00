from __future__ import annotations

from app.options import LEGAL_DOCUMENT_TYPE_OPTIONS, OTHER_DOCUMENT_CATEGORY_OPTIONS
from app.schema_registry import DATE, SELECT, FieldDecl

LEGAL_DEFS = {
    "LEGAL_PROPERTY_DOCUMENT": [
        FieldDecl("documentType", "Document type", SELECT, options=LEGAL_DOCUMENT_TYPE_OPTIONS),
        FieldDecl("title", "Title"),
        FieldDecl("ownerEntityId", "Owner entity ID"),
        FieldDecl("issueDate", "Issue date", DATE),
        FieldDecl("expirationDate", "Expiration date", DATE),
    ],
    "OTHER_DOCUMENT": [
        FieldDecl("category", "Category", SELECT, options=OTHER_DOCUMENT_CATEGORY_OPTIONS),
        FieldDecl("title", "Title"),
    ],
}

from __future__ import annotations

from app.options import (
    GENERAL_SIZE_OPTIONS,
    PERSON_MEASUREMENT_UNIT_OPTIONS,
    PERSON_SIZING_REFERENCE_OPTIONS,
    SHOE_CATEGORY_OPTIONS,
    SHOE_SYSTEM_OPTIONS,
    SHOE_WIDTH_OPTIONS,
)
from app.schema_registry import LIST, MULTILINE, OBJECT_LIST, SELECT, FieldDecl

PREFERENCES_DEFS = {
    "PREFERENCES": [
        FieldDecl("likes", "Likes", LIST, placeholder="Enter a like"),
        FieldDecl("dislikes", "Dislikes", LIST, placeholder="Enter a dislike"),
        FieldDecl("hobbies", "Hobbies", LIST, placeholder="Enter a hobby"),
        FieldDecl("favoriteSports", "Favorite sports", LIST, placeholder="Enter a sport"),
        FieldDecl("favoriteColors", "Favorite colors", LIST, placeholder="Enter a color"),
    ],
    "PERSON_SIZING_PROFILE": [
        FieldDecl("sizingReference", "Sizing reference", SELECT, options=PERSON_SIZING_REFERENCE_OPTIONS),
        FieldDecl("measurementUnit", "Measurement unit", SELECT, options=PERSON_MEASUREMENT_UNIT_OPTIONS),
        FieldDecl("generalSize", "General size", SELECT, options=GENERAL_SIZE_OPTIONS),
        FieldDecl(
            "shoeSizes",
            "Shoe Sizes",
            OBJECT_LIST,
            add_label="Add Shoe Size",
            item_fields=(
                FieldDecl("label", "Size"),
                FieldDecl("category", "Category", SELECT, options=SHOE_CATEGORY_OPTIONS),
                FieldDecl("system", "System", SELECT, options=SHOE_SYSTEM_OPTIONS),
                FieldDecl("width", "Width", SELECT, options=SHOE_WIDTH_OPTIONS),
                FieldDecl("brand", "Brand"),
            ),
        ),
        FieldDecl("notes", "Notes", MULTILINE),
    ],
}

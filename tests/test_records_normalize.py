import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from app.records_normalize import Normalizer
from app.schema_registry import (
    DOCUMENT,
    OBJECT_LIST,
    TOGGLE,
    FieldDecl,
    SchemaRegistry,
    default_registry,
)


FIXED_NOW = "2024-01-05T10:00:00Z"


def _fixed_clock() -> str:
    return FIXED_NOW


def _meds_registry() -> SchemaRegistry:
    registry = SchemaRegistry()
    registry.register(
        "MEDS",
        [
            FieldDecl(
                "meds",
                "Medications",
                OBJECT_LIST,
                item_fields=(FieldDecl("name", "Name"), FieldDecl("dosage", "Dosage")),
            ),
            FieldDecl("active", "Active", TOGGLE),
            FieldDecl("scan", "Scan", DOCUMENT),
        ],
    )
    return registry


SAMPLE_INPUTS = [
    None,
    [],
    [1, 2, 3],
    "just text",
    42,
    True,
    {},
    {"firstName": "Ann", "lastName": "Lee", "expirationDate": ""},
    {"expirationDate": "2030-01-01", "dateOfBirth": 19900101},
    {"restrictions": "Glasses\nDaylight only", "address": {"city": "Austin"}, "address.state": "TX"},
    {"restrictions": ["A", "", "  B  ", None, 3]},
    {"parents": {"includeParents": "yes", "parent1Name": "  ", "parent2Name": " Bo "}},
    {"allergies": [{"label": "Peanuts", "severity": "Severe", "isActive": "1"}, {"label": ""}, "junk"]},
    {"allergies": {"label": "Dust"}},
    {"prescriptions": [{"medicationName": "Aspirin", "endDate": "", "discontinued": "no"}]},
    {"travelIds": [{"type": "Other Trusted Traveler Program", "otherProgramName": "X", "number": 123.0}]},
    {"feedingTimes": "7:30, 18:00, 25:00, noon"},
    {"advocacyNeeds": "Movement breaks, Visual schedule"},
    {"firstName": {"nested": True}, "lastName": ["x"]},
]


class TestNormalizeForSave(unittest.TestCase):
    def setUp(self) -> None:
        self.normalizer = Normalizer(clock=_fixed_clock, strict=False)
        self.registry = default_registry()

    def test_passport_scenario(self) -> None:
        payload = self.normalizer.normalize_for_save(
            "PASSPORT", {"firstName": "Ann", "lastName": "Lee", "expirationDate": ""}
        )
        self.assertIsNone(payload["expirationDate"])
        self.assertEqual(payload["firstName"], "Ann")
        self.assertEqual(payload["lastName"], "Lee")
        self.assertEqual(payload["passportNumber"], "")

    def test_totality_and_shape(self) -> None:
        record_types = self.registry.list_record_types() + ["UNKNOWN_TYPE"]
        for record_type in record_types:
            default = self.registry.get_canonical_default(record_type)
            for raw in SAMPLE_INPUTS:
                payload = self.normalizer.normalize_for_save(record_type, raw)
                self.assertIsInstance(payload, dict)
                self.assertEqual(set(payload.keys()), set(default.keys()), f"{record_type} {raw!r}")

    def test_idempotence(self) -> None:
        for record_type in self.registry.list_record_types():
            for raw in SAMPLE_INPUTS:
                once = self.normalizer.normalize_for_save(record_type, raw)
                twice = self.normalizer.normalize_for_save(record_type, once)
                self.assertEqual(once, twice, f"{record_type} {raw!r}")

    def test_absent_fields_keep_default(self) -> None:
        payload = self.normalizer.normalize_for_save("DRIVERS_LICENSE", {"fullName": "Ann"})
        self.assertEqual(payload["address"], {"line1": "", "line2": "", "city": "", "state": "", "postalCode": "", "country": ""})
        self.assertIsNone(payload["expirationDate"])

    def test_flat_and_nested_keys(self) -> None:
        payload = self.normalizer.normalize_for_save(
            "DRIVERS_LICENSE", {"address.city": "Austin", "address": {"state": "TX"}}
        )
        self.assertEqual(payload["address"]["city"], "Austin")
        self.assertEqual(payload["address"]["state"], "TX")

    def test_list_coercion(self) -> None:
        payload = self.normalizer.normalize_for_save("DRIVERS_LICENSE", {"restrictions": "Glasses, Daylight only,"})
        self.assertEqual(payload["restrictions"], ["Glasses", "Daylight only"])
        payload = self.normalizer.normalize_for_save("DRIVERS_LICENSE", {"restrictions": "A, B\nC"})
        self.assertEqual(payload["restrictions"], ["A, B", "C"])
        payload = self.normalizer.normalize_for_save("DRIVERS_LICENSE", {"restrictions": [" A ", "", 7, None, True]})
        self.assertEqual(payload["restrictions"], ["A", "7", "true"])

    def test_scalar_stringification(self) -> None:
        payload = self.normalizer.normalize_for_save(
            "PASSPORT", {"passportNumber": 12345.0, "middleName": True, "placeOfBirth": 1.5, "sex": {"bad": 1}}
        )
        self.assertEqual(payload["passportNumber"], "12345")
        self.assertEqual(payload["middleName"], "true")
        self.assertEqual(payload["placeOfBirth"], "1.5")
        self.assertEqual(payload["sex"], "")

    def test_birth_certificate_special_keys(self) -> None:
        payload = self.normalizer.normalize_for_save(
            "BIRTH_CERTIFICATE",
            {"parents": {"includeParents": "Yes", "parent1Name": "   ", "parent2Name": " Bo "}},
        )
        self.assertIs(payload["parents"]["includeParents"], True)
        self.assertIsNone(payload["parents"]["parent1Name"])
        self.assertEqual(payload["parents"]["parent2Name"], "Bo")

    def test_object_list_filtering(self) -> None:
        normalizer = Normalizer(_meds_registry(), clock=_fixed_clock)
        payload = normalizer.normalize_for_save(
            "MEDS", {"meds": [{"name": "", "dosage": ""}, {"name": "Aspirin", "dosage": ""}]}
        )
        self.assertEqual(len(payload["meds"]), 1)
        item = payload["meds"][0]
        self.assertEqual(item["name"], "Aspirin")
        self.assertEqual(item["dosage"], "")
        self.assertTrue(item["id"].startswith("meds_"))
        self.assertEqual(item["createdAt"], FIXED_NOW)
        self.assertEqual(item["updatedAt"], FIXED_NOW)

    def test_object_list_single_object_and_junk_rows(self) -> None:
        payload = self.normalizer.normalize_for_save("MEDICAL_PROFILE", {"allergies": {"label": "Dust"}})
        self.assertEqual([a["label"] for a in payload["allergies"]], ["Dust"])
        payload = self.normalizer.normalize_for_save("MEDICAL_PROFILE", {"allergies": ["x", 3, None, {"label": "Pollen"}]})
        self.assertEqual([a["label"] for a in payload["allergies"]], ["Pollen"])
        payload = self.normalizer.normalize_for_save("MEDICAL_PROFILE", {"allergies": "Peanuts"})
        self.assertEqual(payload["allergies"], [])

    def test_object_list_item_with_only_false_toggle_dropped(self) -> None:
        payload = self.normalizer.normalize_for_save(
            "MEDICAL_PROFILE", {"allergies": [{"label": "", "severity": "", "isActive": "no"}]}
        )
        self.assertEqual(payload["allergies"], [])

    def test_object_list_preserves_identity(self) -> None:
        ticking = iter(["2024-02-01T00:00:00Z", "2024-02-02T00:00:00Z"])
        normalizer = Normalizer(clock=lambda: next(ticking))
        payload = normalizer.normalize_for_save(
            "MEDICAL_PROFILE",
            {"allergies": [{"id": "a1", "createdAt": "2020-01-01T00:00:00Z", "label": "Dust", "extra": "dropped"}]},
        )
        item = payload["allergies"][0]
        self.assertEqual(item["id"], "a1")
        self.assertEqual(item["createdAt"], "2020-01-01T00:00:00Z")
        self.assertEqual(item["updatedAt"], "2024-02-01T00:00:00Z")
        self.assertNotIn("extra", item)

    def test_item_field_coercion(self) -> None:
        payload = self.normalizer.normalize_for_save(
            "PRESCRIPTIONS",
            {"prescriptions": [{"medicationName": "Aspirin", "endDate": " ", "discontinued": "YES", "isActive": 0}]},
        )
        item = payload["prescriptions"][0]
        self.assertIsNone(item["endDate"])
        self.assertIs(item["discontinued"], True)
        self.assertIs(item["isActive"], False)
        self.assertEqual(item["dosage"], "")

    def test_rules_item_key_is_list(self) -> None:
        payload = self.normalizer.normalize_for_save(
            "AUTHORIZED_PICKUP", {"authorizedPickup": [{"contactId": "c_1", "rules": "Weekdays\nNo late pickup"}]}
        )
        pickups = payload.get("authorizedPickup")
        self.assertIsInstance(pickups, list)
        self.assertEqual(pickups[0]["rules"], ["Weekdays", "No late pickup"])

    def test_item_fields_coerced_by_their_type(self) -> None:
        registry = SchemaRegistry()
        registry.register(
            "PAGES",
            [
                FieldDecl(
                    "pages",
                    "Pages",
                    OBJECT_LIST,
                    item_fields=(
                        FieldDecl("label", "Label"),
                        FieldDecl("file", "File", DOCUMENT),
                        FieldDecl("times", "Times", "timeList"),
                        FieldDecl("tags", "Tags", "list"),
                    ),
                )
            ],
        )
        normalizer = Normalizer(registry, clock=_fixed_clock)
        payload = normalizer.normalize_for_save(
            "PAGES",
            {
                "pages": [
                    {"label": "p1", "file": {"uri": "file:///a.png", "name": "a.png"}, "times": "7:30, 25:00", "tags": "a,b"},
                    {"file": "file:///b.png"},
                    {"label": "", "file": {"size": 3}},
                ]
            },
        )
        items = payload["pages"]
        self.assertEqual(len(items), 2)
        self.assertEqual(items[0]["file"], {"uri": "file:///a.png", "name": "a.png"})
        self.assertEqual(items[0]["times"], ["07:30"])
        self.assertEqual(items[0]["tags"], ["a", "b"])
        self.assertEqual(items[1]["file"], {"uri": "file:///b.png"})
        self.assertEqual(normalizer.normalize_for_save("PAGES", payload), payload)

    def test_toggle_heuristic(self) -> None:
        normalizer = Normalizer(_meds_registry(), clock=_fixed_clock, strict=False)
        cases = {"true": True, "Yes": True, "1": True, 1: True, "false": False, "no": False, "0": False, "no thanks": False, "": False}
        for raw, expected in cases.items():
            self.assertIs(normalizer.normalize_for_save("MEDS", {"active": raw})["active"], expected, raw)

    def test_strict_toggles(self) -> None:
        normalizer = Normalizer(_meds_registry(), clock=_fixed_clock, strict=True)
        self.assertIs(normalizer.normalize_for_save("MEDS", {"active": "true"})["active"], True)
        self.assertIs(normalizer.normalize_for_save("MEDS", {"active": True})["active"], True)
        self.assertIs(normalizer.normalize_for_save("MEDS", {"active": "yes"})["active"], False)
        self.assertIs(normalizer.normalize_for_save("MEDS", {"active": "1"})["active"], False)

    def test_document_field(self) -> None:
        normalizer = Normalizer(_meds_registry(), clock=_fixed_clock)
        self.assertEqual(normalizer.normalize_for_save("MEDS", {"scan": "file:///a.png"})["scan"], {"uri": "file:///a.png"})
        self.assertEqual(
            normalizer.normalize_for_save("MEDS", {"scan": {"uri": "u", "name": "a.png", "size": 3}})["scan"],
            {"uri": "u", "name": "a.png"},
        )
        self.assertIsNone(normalizer.normalize_for_save("MEDS", {"scan": ""})["scan"])
        self.assertIsNone(normalizer.normalize_for_save("MEDS", {"scan": {"other": "x"}})["scan"])

    def test_time_list(self) -> None:
        payload = self.normalizer.normalize_for_save("PET_FEEDING_ROUTINE", {"feedingTimes": "7:30, 18:00, 25:00, noon"})
        self.assertEqual(payload["feedingTimes"], ["07:30", "18:00"])

    def test_unknown_type(self) -> None:
        self.assertEqual(self.normalizer.normalize_for_save("UNKNOWN_TYPE", {"a": 1}), {})

    def test_undeclared_input_keys_ignored(self) -> None:
        payload = self.normalizer.normalize_for_save("PASSPORT", {"firstName": "Ann", "hacker": "x"})
        self.assertNotIn("hacker", payload)


class TestNormalizeForEdit(unittest.TestCase):
    def test_flat_aliases_for_nested_keys(self) -> None:
        normalizer = Normalizer(clock=_fixed_clock)
        payload = normalizer.normalize_for_edit("BIRTH_CERTIFICATE", {"placeOfBirth": {"city": "Austin"}})
        self.assertEqual(payload["placeOfBirth.city"], "Austin")
        self.assertEqual(payload["parents.parent1Name"], "")
        self.assertEqual(payload["placeOfBirth"]["city"], "Austin")

    def test_edit_payload_saves_back(self) -> None:
        normalizer = Normalizer(clock=_fixed_clock)
        edit = normalizer.normalize_for_edit("DRIVERS_LICENSE", {"address": {"city": "Austin"}})
        edit["address.city"] = "Dallas"
        saved = normalizer.normalize_for_save("DRIVERS_LICENSE", edit)
        self.assertEqual(saved["address"]["city"], "Dallas")


if __name__ == "__main__":
    unittest.main()

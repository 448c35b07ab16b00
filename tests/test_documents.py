import json
import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from app.documents import normalize_document
from app.stores import DOCUMENTS_KEY, InMemoryKeyValueStore, records_key
from app.vault import Vault


def _fixed_clock() -> str:
    return "2024-01-05T10:00:00Z"


class TestNormalizeDocument(unittest.TestCase):
    def test_requires_uri(self) -> None:
        self.assertIsNone(normalize_document({"fileName": "x.pdf"}))
        self.assertIsNone(normalize_document({"uri": "   "}))
        self.assertIsNone(normalize_document("file:///x.pdf"))

    def test_canonical_fields(self) -> None:
        doc = normalize_document(
            {
                "uri": " file:///x.pdf ",
                "fileName": "x.pdf",
                "note": "",
                "sizeBytes": 12,
                "tags": ["a", "", " b "],
                "metadata": {"pages": 2},
            },
            _fixed_clock,
        )
        self.assertTrue(doc["id"].startswith("doc_"))
        self.assertEqual(doc["uri"], "file:///x.pdf")
        self.assertEqual(doc["mimeType"], "application/octet-stream")
        self.assertEqual(doc["createdAt"], "2024-01-05T10:00:00Z")
        self.assertEqual(doc["fileName"], "x.pdf")
        self.assertNotIn("note", doc)
        self.assertEqual(doc["sizeBytes"], 12)
        self.assertEqual(doc["tags"], ["a", "b"])
        self.assertEqual(doc["metadata"], {"pages": 2})

    def test_bool_size_and_bad_metadata_dropped(self) -> None:
        doc = normalize_document({"uri": "file:///x", "sizeBytes": True, "metadata": "x"}, _fixed_clock)
        self.assertNotIn("sizeBytes", doc)
        self.assertEqual(doc["metadata"], {})


class TestDocumentStore(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.kv = InMemoryKeyValueStore()
        self.vault = Vault(self.kv, clock=_fixed_clock)

    async def test_create_get_list_delete(self) -> None:
        first = await self.vault.create_document({"id": "doc_1", "uri": "file:///a.png", "mimeType": "image/png"})
        second = await self.vault.create_document({"uri": "file:///b.png"})
        self.assertEqual([d["id"] for d in await self.vault.list_documents()], [second["id"], "doc_1"])
        self.assertEqual((await self.vault.get_document("doc_1"))["mimeType"], "image/png")
        self.assertEqual(first["id"], "doc_1")

        self.assertTrue(await self.vault.delete_document("doc_1"))
        self.assertFalse(await self.vault.delete_document("doc_1"))
        self.assertIsNone(await self.vault.get_document("doc_1"))

    async def test_create_rejects_missing_uri(self) -> None:
        self.assertIsNone(await self.vault.create_document({"fileName": "x"}))
        self.assertIsNone(await self.vault.create_document(None))
        self.assertNotIn(DOCUMENTS_KEY, self.kv.snapshot())

    async def test_upsert_replaces_in_place(self) -> None:
        await self.vault.create_document({"id": "doc_1", "uri": "file:///a.png"})
        await self.vault.create_document({"id": "doc_2", "uri": "file:///b.png"})
        await self.vault.create_document({"id": "doc_1", "uri": "file:///a2.png", "title": "Scan"})
        docs = await self.vault.list_documents()
        self.assertEqual([d["id"] for d in docs], ["doc_2", "doc_1"])
        self.assertEqual(docs[1]["uri"], "file:///a2.png")

    async def test_corrupt_documents_read_empty(self) -> None:
        await self.kv.set(DOCUMENTS_KEY, "[oops")
        with self.assertLogs("lifevault.documents", level="WARNING"):
            self.assertEqual(await self.vault.list_documents(), [])

    async def test_delete_document_keeps_record_links(self) -> None:
        await self.vault.create_document({"id": "doc_1", "uri": "file:///a.png"})
        await self.vault.upsert_record(
            "e_1", {"id": "r1", "recordType": "PASSPORT", "data": {}, "attachments": [{"documentId": "doc_1"}]}
        )
        await self.vault.delete_document("doc_1")
        self.assertEqual(len(await self.vault.lookup_records_for_document("doc_1")), 1)


class TestLegacyMigration(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.kv = InMemoryKeyValueStore(
            {
                records_key("e_1"): json.dumps(
                    [
                        {
                            "id": "r1",
                            "recordType": "PASSPORT",
                            "title": "Passport",
                            "data": {
                                "firstName": "Ann",
                                "frontImageUri": "file:///front.png",
                                "backImageUri": "file:///back.png",
                            },
                            "attachments": [
                                {"uri": "file:///scan.pdf", "fileName": "scan.pdf", "mimeType": "application/pdf", "label": "Scan"}
                            ],
                        }
                    ]
                ),
                records_key("e_2"): json.dumps(
                    [{"id": "r2", "recordType": "PASSPORT", "data": {"uri": "file:///front.png"}, "attachments": []}]
                ),
                records_key("e_3"): json.dumps([{"id": "r3", "recordType": "PASSPORT", "data": {}, "attachments": []}]),
            }
        )
        self.vault = Vault(self.kv, clock=_fixed_clock)

    async def _records(self, entity_id: str) -> list:
        return json.loads(self.kv.snapshot()[records_key(entity_id)])

    async def test_uris_become_documents(self) -> None:
        self.assertEqual(await self.vault.migrate_legacy_attachments(), 2)

        docs = await self.vault.list_documents()
        by_uri = {d["uri"]: d for d in docs}
        self.assertEqual(sorted(by_uri), ["file:///back.png", "file:///front.png", "file:///scan.pdf"])
        self.assertEqual(by_uri["file:///scan.pdf"]["mimeType"], "application/pdf")
        self.assertEqual(by_uri["file:///scan.pdf"]["fileName"], "scan.pdf")
        self.assertEqual(by_uri["file:///front.png"]["title"], "Passport")

        r1 = (await self._records("e_1"))[0]
        self.assertEqual(r1["data"], {"firstName": "Ann"})
        refs = r1["attachments"]
        self.assertEqual(
            [(ref["documentId"], ref.get("role"), ref.get("label")) for ref in refs],
            [
                (by_uri["file:///scan.pdf"]["id"], None, "Scan"),
                (by_uri["file:///front.png"]["id"], "FRONT", "Front"),
                (by_uri["file:///back.png"]["id"], "BACK", "Back"),
            ],
        )

        r2 = (await self._records("e_2"))[0]
        self.assertEqual(r2["data"], {})
        self.assertEqual(r2["attachments"][0]["documentId"], by_uri["file:///front.png"]["id"])
        self.assertEqual(r2["attachments"][0]["role"], "OTHER")

        refs = await self.vault.lookup_records_for_document(by_uri["file:///front.png"]["id"])
        self.assertEqual([(r["entityId"], r["recordId"]) for r in refs], [("e_1", "r1"), ("e_2", "r2")])

    async def test_migration_is_repeatable(self) -> None:
        await self.vault.migrate_legacy_attachments()
        before = self.kv.snapshot()
        self.assertEqual(await self.vault.migrate_legacy_attachments(), 0)
        after = self.kv.snapshot()
        self.assertEqual(before[records_key("e_1")], after[records_key("e_1")])
        self.assertEqual(json.loads(before[DOCUMENTS_KEY]), json.loads(after[DOCUMENTS_KEY]))

    async def test_untouched_records_not_rewritten(self) -> None:
        original = self.kv.snapshot()[records_key("e_3")]
        await self.vault.migrate_legacy_attachments()
        self.assertEqual(self.kv.snapshot()[records_key("e_3")], original)


if __name__ == "__main__":
    unittest.main()

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

from app.document_index import DocumentLinkIndex, refs_for_entity
from app.stores import DOCUMENT_LINKS_KEY, InMemoryKeyValueStore, records_key
from app.vault import Vault


def _fixed_clock() -> str:
    return "2024-01-05T10:00:00Z"


def _record(record_id: str, *document_ids: str, record_type: str = "PASSPORT", title: str = "") -> dict:
    return {
        "id": record_id,
        "recordType": record_type,
        "title": title,
        "data": {},
        "attachments": [{"documentId": doc_id} for doc_id in document_ids],
    }


class TestRefsForEntity(unittest.TestCase):
    def test_pairs_in_record_order(self) -> None:
        pairs = refs_for_entity(
            "e_1",
            [
                _record("r1", "doc_1", "doc_2", title="Passport"),
                _record("r2", "doc_1", "doc_1"),
                {"id": "", "recordType": "PASSPORT", "attachments": [{"documentId": "doc_3"}]},
                {"id": "r4", "attachments": [{"documentId": "doc_3"}]},
                "junk",
            ],
        )
        self.assertEqual(
            pairs,
            [
                ("doc_1", {"entityId": "e_1", "recordId": "r1", "recordType": "PASSPORT", "title": "Passport"}),
                ("doc_2", {"entityId": "e_1", "recordId": "r1", "recordType": "PASSPORT", "title": "Passport"}),
                ("doc_1", {"entityId": "e_1", "recordId": "r2", "recordType": "PASSPORT"}),
                ("doc_3", {"entityId": "e_1", "recordId": "r4", "recordType": ""}),
            ],
        )


class TestDocumentLinkIndex(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.kv = InMemoryKeyValueStore()
        self.vault = Vault(self.kv, clock=_fixed_clock)

    async def _rebuilt_bytes(self) -> tuple[str, str]:
        incremental = self.kv.snapshot()[DOCUMENT_LINKS_KEY]
        await DocumentLinkIndex(self.kv).rebuild_all()
        return incremental, self.kv.snapshot()[DOCUMENT_LINKS_KEY]

    async def test_link_lookup_and_delete(self) -> None:
        await self.vault.upsert_record(
            "e_1",
            {"id": "r1", "recordType": "PASSPORT", "title": "My Passport", "data": {}, "attachments": [{"documentId": "doc_1"}]},
        )
        self.assertEqual(
            await self.vault.lookup_records_for_document("doc_1"),
            [{"entityId": "e_1", "recordId": "r1", "recordType": "PASSPORT", "title": "My Passport"}],
        )
        self.assertTrue(await self.vault.delete_record("e_1", "r1"))
        self.assertEqual(await self.vault.lookup_records_for_document("doc_1"), [])
        self.assertNotIn("doc_1", json.loads(self.kv.snapshot()[DOCUMENT_LINKS_KEY]))

    async def test_incremental_matches_rebuild(self) -> None:
        await self.vault.upsert_record("e_2", _record("r1", "doc_1", "doc_2"))
        await self.vault.upsert_record("e_1", _record("r2", "doc_1"))
        await self.vault.upsert_record("e_1", _record("r3", "doc_2", record_type="DRIVERS_LICENSE"))
        await self.vault.upsert_record("e_3", _record("r4", "doc_3"))
        await self.vault.upsert_record("e_2", _record("r1", "doc_2"))
        await self.vault.delete_record("e_3", "r4")

        refs = await self.vault.lookup_records_for_document("doc_2")
        self.assertEqual([(r["entityId"], r["recordId"]) for r in refs], [("e_1", "r3"), ("e_2", "r1")])
        self.assertEqual([r["recordId"] for r in await self.vault.lookup_records_for_document("doc_1")], ["r2"])
        self.assertEqual(await self.vault.lookup_records_for_document("doc_3"), [])

        incremental, rebuilt = await self._rebuilt_bytes()
        self.assertEqual(incremental, rebuilt)

    async def test_record_without_type_is_indexed(self) -> None:
        stored = await self.vault.upsert_record("e_1", {"data": {}, "attachments": [{"documentId": "doc_1"}]})
        self.assertEqual(stored["recordType"], "")
        refs = await self.vault.lookup_records_for_document("doc_1")
        self.assertEqual([(r["recordId"], r["recordType"]) for r in refs], [(stored["id"], "")])

        incremental, rebuilt = await self._rebuilt_bytes()
        self.assertEqual(incremental, rebuilt)

    async def test_updates_from_other_vaults_are_kept(self) -> None:
        other = Vault(self.kv, clock=_fixed_clock)
        await self.vault.startup()
        await other.startup()
        await self.vault.upsert_record("e_1", _record("r1", "doc_1"))
        await other.upsert_record("e_2", _record("r2", "doc_1"))
        await self.vault.upsert_record("e_3", _record("r3", "doc_2"))

        persisted = json.loads(self.kv.snapshot()[DOCUMENT_LINKS_KEY])
        self.assertEqual([r["entityId"] for r in persisted["doc_1"]], ["e_1", "e_2"])
        self.assertEqual([r["entityId"] for r in persisted["doc_2"]], ["e_3"])
        incremental, rebuilt = await self._rebuilt_bytes()
        self.assertEqual(incremental, rebuilt)

    async def test_link_and_unlink_document(self) -> None:
        await self.vault.upsert_record("e_1", _record("r1"))
        linked = await self.vault.link_document("e_1", "r1", "doc_9", role="front", label="Front")
        self.assertEqual(linked["attachments"][0]["documentId"], "doc_9")
        self.assertEqual(linked["attachments"][0]["role"], "FRONT")
        again = await self.vault.link_document("e_1", "r1", "doc_9")
        self.assertEqual(len(again["attachments"]), 1)
        self.assertEqual(len(await self.vault.lookup_records_for_document("doc_9")), 1)

        unlinked = await self.vault.unlink_document("e_1", "r1", "doc_9")
        self.assertEqual(unlinked["attachments"], [])
        self.assertEqual(await self.vault.lookup_records_for_document("doc_9"), [])
        self.assertIsNone(await self.vault.link_document("e_1", "missing", "doc_9"))

    async def test_lookup_returns_copy(self) -> None:
        await self.vault.upsert_record("e_1", _record("r1", "doc_1"))
        refs = await self.vault.lookup_records_for_document("doc_1")
        refs[0]["recordId"] = "changed"
        refs.clear()
        self.assertEqual((await self.vault.lookup_records_for_document("doc_1"))[0]["recordId"], "r1")

    async def test_missing_index_rebuilt_on_startup(self) -> None:
        seeded = InMemoryKeyValueStore(
            {
                records_key("e_2"): json.dumps([_record("r1", "doc_1")]),
                records_key("e_1"): json.dumps([_record("r2", "doc_1")]),
            }
        )
        vault = Vault(seeded, clock=_fixed_clock)
        await vault.startup()
        refs = await vault.lookup_records_for_document("doc_1")
        self.assertEqual([r["entityId"] for r in refs], ["e_1", "e_2"])
        self.assertIn(DOCUMENT_LINKS_KEY, seeded.snapshot())

    async def test_corrupt_index_rebuilt(self) -> None:
        seeded = InMemoryKeyValueStore(
            {
                records_key("e_1"): json.dumps([_record("r1", "doc_1")]),
                DOCUMENT_LINKS_KEY: "{broken",
            }
        )
        index = DocumentLinkIndex(seeded)
        with self.assertLogs("lifevault.index", level="WARNING"):
            await index.ensure_ready()
        self.assertEqual(len(await index.lookup("doc_1")), 1)
        self.assertEqual(json.loads(seeded.snapshot()[DOCUMENT_LINKS_KEY])["doc_1"][0]["recordId"], "r1")

    async def test_wrong_shape_index_rebuilt(self) -> None:
        seeded = InMemoryKeyValueStore({DOCUMENT_LINKS_KEY: json.dumps({"doc_1": "nope"})})
        index = DocumentLinkIndex(seeded)
        self.assertEqual(await index.snapshot(), {})

    async def test_persisted_index_is_canonical(self) -> None:
        await self.vault.upsert_record("e_1", _record("r1", "doc_b", "doc_a"))
        raw = self.kv.snapshot()[DOCUMENT_LINKS_KEY]
        self.assertTrue(raw.startswith('{"doc_a":[{"entityId":"e_1"'))
        self.assertNotIn(" ", raw)

    async def test_rebuild_ignores_unreadable_entities(self) -> None:
        seeded = InMemoryKeyValueStore(
            {
                records_key("e_1"): "not json",
                records_key("e_2"): json.dumps([_record("r1", "doc_1")]),
                "unrelated": "x",
            }
        )
        links = await DocumentLinkIndex(seeded).rebuild_all()
        self.assertEqual(list(links.keys()), ["doc_1"])


if __name__ == "__main__":
    unittest.main()

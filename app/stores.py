"""Key-value store contract and the in-memory implementation."""

from __future__ import annotations

from typing import Dict, List, Protocol

RECORDS_KEY_PREFIX = "records:"
DOCUMENT_LINKS_KEY = "document_links"
DOCUMENTS_KEY = "documents"


def records_key(entity_id: str) -> str:
    return f"{RECORDS_KEY_PREFIX}{entity_id}"


def entity_id_from_key(key: str) -> str | None:
    if isinstance(key, str) and key.startswith(RECORDS_KEY_PREFIX):
        return key[len(RECORDS_KEY_PREFIX) :]
    return None


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def list_keys(self) -> List[str]: ...


class InMemoryKeyValueStore:
    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("value must be a string")
        self._data[key] = value

    async def list_keys(self) -> List[str]:
        return list(self._data.keys())

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)

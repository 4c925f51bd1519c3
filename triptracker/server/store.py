"""
In-memory JSON resource store behind the development server.

Records are stored verbatim as dicts; the store knows nothing about
users or trips beyond the collection names. Like json-server it keeps
insertion order, matches query filters by string equality, and has no
uniqueness constraint other than the record id.
"""

import json
import uuid
from typing import Any, Optional

COLLECTIONS = ("users", "trips")


class DuplicateIdError(Exception):
    pass


def _as_query_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


class ResourceStore:

    def __init__(self, seed: Optional[dict[str, list[dict[str, Any]]]] = None):
        self._data: dict[str, dict[str, dict[str, Any]]] = {name: {} for name in COLLECTIONS}
        for collection, records in (seed or {}).items():
            for record in records:
                self.create(collection, record)

    def list(self, collection: str, filters: Optional[dict[str, str]] = None) -> list[dict[str, Any]]:
        records = list(self._data[collection].values())
        for field, expected in (filters or {}).items():
            records = [r for r in records if field in r and _as_query_value(r[field]) == expected]
        return [dict(r) for r in records]

    def get(self, collection: str, record_id: str) -> Optional[dict[str, Any]]:
        record = self._data[collection].get(record_id)
        return dict(record) if record is not None else None

    def create(self, collection: str, record: dict[str, Any]) -> dict[str, Any]:
        record = dict(record)
        record_id = str(record.get("id") or uuid.uuid4().hex[:8])
        if record_id in self._data[collection]:
            raise DuplicateIdError(f"{collection}/{record_id} already exists")
        record["id"] = record_id
        self._data[collection][record_id] = record
        return dict(record)

    def replace(self, collection: str, record_id: str, record: dict[str, Any]) -> Optional[dict[str, Any]]:
        if record_id not in self._data[collection]:
            return None
        record = {**record, "id": record_id}
        self._data[collection][record_id] = record
        return dict(record)

    def delete(self, collection: str, record_id: str) -> bool:
        return self._data[collection].pop(record_id, None) is not None

    def counts(self) -> dict[str, int]:
        return {name: len(records) for name, records in self._data.items()}


_store = ResourceStore()


def get_store() -> ResourceStore:
    """FastAPI dependency; tests override it with a fresh store."""
    return _store

"""
In-memory data store.

Useful for tests and one-off sessions. Records are deep-copied on the way in
and out so callers never share state with the store.
"""

from copy import deepcopy
from typing import Optional

from .base import COLLECTIONS, DataStore, matches_filters, sort_records


class InMemoryStore(DataStore):
    """Process-local record store."""

    def __init__(self, seed: Optional[dict[str, list[dict]]] = None):
        """
        Initialize the store.

        Args:
            seed: Optional initial records, collection name -> list of records
        """
        super().__init__()
        self._collections: dict[str, dict[str, dict]] = {name: {} for name in COLLECTIONS}

        for collection, records in (seed or {}).items():
            for record in records:
                self.insert(collection, record)

    @property
    def name(self) -> str:
        return "memory"

    def select(
        self,
        collection: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict]:
        self._check_collection(collection)
        records = [
            deepcopy(record)
            for record in self._collections[collection].values()
            if matches_filters(record, filters)
        ]
        return sort_records(records, order_by, descending)

    def insert(self, collection: str, record: dict) -> dict:
        self._check_collection(collection)
        prepared = self._prepare_insert(deepcopy(record))
        self._collections[collection][prepared["id"]] = prepared
        return deepcopy(prepared)

    def update(self, collection: str, record_id: str, changes: dict) -> Optional[dict]:
        self._check_collection(collection)
        record = self._collections[collection].get(record_id)
        if record is None:
            return None

        record.update(deepcopy(self._prepare_update(changes)))
        return deepcopy(record)

    def delete(self, collection: str, record_id: str) -> bool:
        self._check_collection(collection)
        return self._collections[collection].pop(record_id, None) is not None

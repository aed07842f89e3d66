"""
Base class for data stores.

A data store holds named record collections. Records are plain dicts keyed
by an opaque string ``id``.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
import logging
import uuid


COLLECTIONS = ("profiles", "jobs", "job_applications", "ratings")


class DataStoreError(Exception):
    """Raised when the backing store cannot complete a request."""


class DataStore(ABC):
    """Abstract base class for record stores."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend name."""
        pass

    @abstractmethod
    def select(
        self,
        collection: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict]:
        """
        Read records from a collection.

        Args:
            collection: Collection name (jobs, profiles, ...)
            filters: Field -> value equality filters, combined with AND
            order_by: Field to sort on
            descending: Sort direction

        Returns:
            Matching records
        """
        pass

    @abstractmethod
    def insert(self, collection: str, record: dict) -> dict:
        """
        Insert a record.

        Returns:
            The stored record, including its assigned ``id``
        """
        pass

    @abstractmethod
    def update(self, collection: str, record_id: str, changes: dict) -> Optional[dict]:
        """
        Apply field changes to a record.

        Returns:
            The updated record, or None if no record has that id
        """
        pass

    @abstractmethod
    def delete(self, collection: str, record_id: str) -> bool:
        """
        Delete a record.

        Returns:
            True if a record was removed
        """
        pass

    def get(self, collection: str, record_id: str) -> Optional[dict]:
        """Get a single record by id."""
        records = self.select(collection, filters={"id": record_id})
        return records[0] if records else None

    def _check_collection(self, collection: str) -> None:
        if collection not in COLLECTIONS:
            raise DataStoreError(f"Unknown collection: {collection!r}")

    def _prepare_insert(self, record: dict) -> dict:
        """Copy a record and fill in the id and creation time when absent."""
        prepared = dict(record)
        if not prepared.get("id"):
            prepared["id"] = str(uuid.uuid4())
        prepared.setdefault("created_at", datetime.now().isoformat())
        return prepared

    def _prepare_update(self, changes: dict) -> dict:
        """Copy field changes without the ``id`` key; ids never change."""
        return {key: value for key, value in changes.items() if key != "id"}


def matches_filters(record: dict, filters: Optional[dict]) -> bool:
    """Equality filter check shared by the local backends."""
    if not filters:
        return True
    return all(record.get(key) == value for key, value in filters.items())


def sort_records(records: list[dict], order_by: Optional[str], descending: bool) -> list[dict]:
    """Sort records on a field; records without the field sort last."""
    if not order_by:
        return records

    present = [r for r in records if r.get(order_by) is not None]
    absent = [r for r in records if r.get(order_by) is None]
    present.sort(key=lambda r: r[order_by], reverse=descending)
    return present + absent

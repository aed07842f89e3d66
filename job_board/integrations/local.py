"""
Local JSON data store.

Each record is saved as ``<data_dir>/<collection>/<id>.json``.
"""

from pathlib import Path
from typing import Optional
import json

from .base import COLLECTIONS, DataStore, DataStoreError, matches_filters, sort_records


class LocalStore(DataStore):
    """Stores records as JSON files on disk."""

    def __init__(self, data_dir: str = "./job_board_data"):
        """
        Initialize the local store.

        Args:
            data_dir: Directory holding one sub-directory per collection
        """
        super().__init__()
        self.data_dir = Path(data_dir)

        for collection in COLLECTIONS:
            (self.data_dir / collection).mkdir(parents=True, exist_ok=True)

    @property
    def name(self) -> str:
        return "local"

    def select(
        self,
        collection: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> list[dict]:
        self._check_collection(collection)

        records = []
        for filepath in sorted((self.data_dir / collection).glob("*.json")):
            record = self._read(filepath)
            if record is not None and matches_filters(record, filters):
                records.append(record)

        return sort_records(records, order_by, descending)

    def get(self, collection: str, record_id: str) -> Optional[dict]:
        self._check_collection(collection)
        filepath = self._path(collection, record_id)
        if not filepath.exists():
            return None
        return self._read(filepath)

    def insert(self, collection: str, record: dict) -> dict:
        self._check_collection(collection)
        prepared = self._prepare_insert(record)
        self._write(collection, prepared)
        self.logger.debug(f"Inserted {collection}/{prepared['id']}")
        return prepared

    def update(self, collection: str, record_id: str, changes: dict) -> Optional[dict]:
        record = self.get(collection, record_id)
        if record is None:
            return None

        record.update(self._prepare_update(changes))
        self._write(collection, record)
        return record

    def delete(self, collection: str, record_id: str) -> bool:
        self._check_collection(collection)
        filepath = self._path(collection, record_id)
        if not filepath.exists():
            return False

        filepath.unlink()
        return True

    def _path(self, collection: str, record_id: str) -> Path:
        # Ids become file names, so path separators would escape the collection
        if not record_id or "/" in record_id or "\\" in record_id or record_id in (".", ".."):
            raise DataStoreError(f"Invalid record id: {record_id!r}")
        return self.data_dir / collection / f"{record_id}.json"

    def _read(self, filepath: Path) -> Optional[dict]:
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"Skipping unreadable record {filepath}: {e}")
            return None
        except OSError as e:
            raise DataStoreError(f"Cannot read {filepath}: {e}") from e

    def _write(self, collection: str, record: dict) -> None:
        filepath = self._path(collection, record["id"])
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(record, f, indent=2, default=str)
        except OSError as e:
            raise DataStoreError(f"Cannot write {filepath}: {e}") from e

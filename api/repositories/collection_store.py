"""In-memory ordered collection mirrored to a JSON file (write-through)."""
from __future__ import annotations

import logging
import threading
import uuid
from pathlib import Path
from typing import Optional

from api.repositories.json_storage import load_collection, save_collection

logger = logging.getLogger(__name__)


class CollectionStore:
    """
    Holds one collection of records (plain dicts) in insertion order.

    The backing file is read once when the store is built; every mutation
    rewrites it entirely. Callers hold ``lock`` around a whole
    read-modify-persist cycle so concurrent requests on the same collection
    run one after the other.
    """

    def __init__(self, name: str, path: Path, id_field: str = "id") -> None:
        self.name = name
        self.path = Path(path)
        self.id_field = id_field
        self.lock = threading.RLock()
        self._records: list[dict] = load_collection(self.path)
        logger.info("Loaded %d %s from %s", len(self._records), name, self.path)

    def list(self) -> list[dict]:
        with self.lock:
            return list(self._records)

    def find(self, record_id: str) -> Optional[dict]:
        with self.lock:
            for record in self._records:
                if record.get(self.id_field) == record_id:
                    return record
        return None

    def new_id(self) -> str:
        with self.lock:
            taken = {record.get(self.id_field) for record in self._records}
            while True:
                candidate = str(uuid.uuid4())
                if candidate not in taken:
                    return candidate

    def append(self, record: dict) -> dict:
        with self.lock:
            self._records.append(record)
            self.persist()
        return record

    def remove(self, record_id: str) -> Optional[dict]:
        with self.lock:
            for index, record in enumerate(self._records):
                if record.get(self.id_field) == record_id:
                    del self._records[index]
                    self.persist()
                    return record
        return None

    def persist(self) -> None:
        with self.lock:
            save_collection(self.path, self._records)

    def __len__(self) -> int:
        return len(self._records)

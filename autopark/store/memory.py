# autopark/store/memory.py
"""In-process store. Used by tests and as the json backend's fallback."""

from typing import Optional

from autopark.store.base import COLLECTIONS, Repository, Store


class MemoryRepository(Repository):
    def __init__(self):
        self._records = {}

    def get(self, record_id: str):
        record = self._records.get(str(record_id))
        return record.model_copy(deep=True) if record is not None else None

    def list(self):
        return [r.model_copy(deep=True) for r in self._records.values()]

    def upsert(self, record):
        self._records[str(record.id)] = record.model_copy(deep=True)
        return record

    def delete(self, record_id: str) -> bool:
        return self._records.pop(str(record_id), None) is not None


class MemoryStore(Store):
    backend = "memory"

    def __init__(self, seed: Optional[dict] = None):
        for name in COLLECTIONS:
            setattr(self, name, MemoryRepository())
        for name, records in (seed or {}).items():
            repo = getattr(self, name)
            for record in records:
                repo.upsert(record)

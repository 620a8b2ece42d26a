# autopark/store/json_file.py
"""
Single JSON document store: {vehicles, drivers, users, trips, requests}.

Every repository call re-reads the file and writes the whole document
back. Writes go through a temp file + os.replace so a crash never leaves
a half-written document. When the filesystem turns out to be read-only
the store keeps working on an in-memory copy for the rest of the process.
"""

import json
import os
import tempfile
from typing import Optional

from autopark.schemas.vehicle import normalize_vehicle_status
from autopark.store.base import COLLECTIONS, Repository, Store
from autopark.utils.logger import get_logger

logger = get_logger(__name__)


def migrate_legacy_document(doc: dict) -> dict:
    """
    Older releases kept an "equipment" list instead of "vehicles".
    Convert it and make sure every collection is present.
    """
    if not isinstance(doc.get("vehicles"), list) and isinstance(doc.get("equipment"), list):
        doc["vehicles"] = [
            {
                "id": str(e.get("id") or ""),
                "make": e.get("make") or "",
                "model": e.get("name") or "",
                "type": e.get("category") or "",
                "status": "repair" if e.get("status") == "repair" else "base",
                "assignedUnit": e.get("owner") or "",
                "vin": e.get("serial") or "",
                "registrationNumber": e.get("registrationNumber") or "",
                "year": e.get("year") or None,
                "mileage": e.get("mileage") or 0,
                "notes": e.get("notes") or "",
            }
            for e in doc.pop("equipment")
        ]
        logger.info(f"Migrated {len(doc['vehicles'])} legacy equipment records to vehicles")
    for name in COLLECTIONS:
        if not isinstance(doc.get(name), list):
            doc[name] = []
    for v in doc["vehicles"]:
        v["status"] = normalize_vehicle_status(v.get("status"))
    return doc


class JsonFileStore(Store):
    backend = "json"

    def __init__(self, path: str):
        self.path = path
        self._fallback: Optional[dict] = None
        for name, schema in COLLECTIONS.items():
            setattr(self, name, JsonCollection(self, name, schema))
        # Creates the file on first run
        self.write(self.read())

    @property
    def read_only(self) -> bool:
        return self._fallback is not None

    def read(self) -> dict:
        if self._fallback is not None:
            return json.loads(json.dumps(self._fallback))
        try:
            if not os.path.exists(self.path):
                return migrate_legacy_document({})
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
            return migrate_legacy_document(json.loads(raw) if raw.strip() else {})
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to read {self.path}, switching to in-memory document: {e}")
            self._fallback = migrate_legacy_document({})
            return self.read()

    def write(self, doc: dict):
        if self._fallback is not None:
            self._fallback = doc
            return
        tmp_path = None
        try:
            directory = os.path.dirname(os.path.abspath(self.path))
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(doc, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Failed to write {self.path}, switching to in-memory document: {e}")
            self._fallback = doc
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)


class JsonCollection(Repository):
    def __init__(self, store: JsonFileStore, name: str, schema):
        self._store = store
        self._name = name
        self._schema = schema

    def _dump(self, record) -> dict:
        return record.model_dump(mode="json", by_alias=True)

    def get(self, record_id: str):
        for raw in self._store.read()[self._name]:
            if str(raw.get("id")) == str(record_id):
                return self._schema.model_validate(raw)
        return None

    def list(self):
        return [self._schema.model_validate(raw) for raw in self._store.read()[self._name]]

    def upsert(self, record):
        doc = self._store.read()
        rows = doc[self._name]
        dumped = self._dump(record)
        for i, raw in enumerate(rows):
            if str(raw.get("id")) == str(record.id):
                rows[i] = dumped
                break
        else:
            rows.append(dumped)
        self._store.write(doc)
        return record

    def delete(self, record_id: str) -> bool:
        doc = self._store.read()
        rows = doc[self._name]
        kept = [raw for raw in rows if str(raw.get("id")) != str(record_id)]
        if len(kept) == len(rows):
            return False
        doc[self._name] = kept
        self._store.write(doc)
        return True

# autopark/store/base.py
"""
Storage interface shared by every backend.

Each entity gets its own Repository with get / list / upsert / delete.
Services only ever talk to a Store, so the backend (memory, JSON file,
SQL database) can be swapped without touching business rules.

There is no locking and no cross-repository transaction: every call is a
separate read-modify-write against the backend.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from autopark.schemas.base import CamelModel
from autopark.schemas.dispatch_request import DispatchRequest
from autopark.schemas.driver import Driver
from autopark.schemas.trip import Trip
from autopark.schemas.user import User
from autopark.schemas.vehicle import Vehicle

RecordT = TypeVar("RecordT", bound=CamelModel)

# collection name -> record schema, in document order
COLLECTIONS = {
    "vehicles": Vehicle,
    "drivers": Driver,
    "users": User,
    "trips": Trip,
    "requests": DispatchRequest,
}


class Repository(ABC, Generic[RecordT]):
    """CRUD access to one collection of records keyed by string id."""

    @abstractmethod
    def get(self, record_id: str) -> Optional[RecordT]:
        ...

    @abstractmethod
    def list(self) -> list[RecordT]:
        ...

    @abstractmethod
    def upsert(self, record: RecordT) -> RecordT:
        """Insert the record, or replace the stored one with the same id."""

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns False if nothing had that id."""


class Store:
    """A bundle of repositories, one per entity."""

    backend = "abstract"

    vehicles: Repository[Vehicle]
    drivers: Repository[Driver]
    users: Repository[User]
    trips: Repository[Trip]
    requests: Repository[DispatchRequest]

    def ping(self) -> bool:
        """Health probe. Raises if the backend is unreachable."""
        self.vehicles.list()
        return True

    def __repr__(self):
        return f"<{type(self).__name__} backend={self.backend}>"

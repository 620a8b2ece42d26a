# autopark/store/sql.py
"""SQLAlchemy-backed store. Each repository call runs in its own session."""

from sqlalchemy import inspect, text

from autopark.database import create_tables, make_engine, make_session_factory
from autopark.models import DispatchRequestRow, DriverRow, TripRow, UserRow, VehicleRow
from autopark.store.base import COLLECTIONS, Repository, Store
from autopark.utils.logger import get_logger

logger = get_logger(__name__)

ROWS = {
    "vehicles": VehicleRow,
    "drivers": DriverRow,
    "users": UserRow,
    "trips": TripRow,
    "requests": DispatchRequestRow,
}


class SqlRepository(Repository):
    def __init__(self, session_factory, row_model, schema):
        self._session_factory = session_factory
        self._row_model = row_model
        self._schema = schema
        self._columns = [attr.key for attr in inspect(row_model).column_attrs]

    def _to_record(self, row):
        return self._schema.model_validate({key: getattr(row, key) for key in self._columns})

    def _to_row(self, record):
        data = record.model_dump()
        return self._row_model(**{key: data.get(key) for key in self._columns})

    def get(self, record_id: str):
        with self._session_factory() as db:
            row = db.get(self._row_model, str(record_id))
            return self._to_record(row) if row is not None else None

    def list(self):
        with self._session_factory() as db:
            return [self._to_record(row) for row in db.query(self._row_model).all()]

    def upsert(self, record):
        with self._session_factory() as db:
            db.merge(self._to_row(record))
            db.commit()
        return record

    def delete(self, record_id: str) -> bool:
        with self._session_factory() as db:
            row = db.get(self._row_model, str(record_id))
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True


class SqlStore(Store):
    backend = "sql"

    def __init__(self, database_url: str):
        self.engine = make_engine(database_url)
        create_tables(self.engine)
        self.session_factory = make_session_factory(self.engine)
        for name, schema in COLLECTIONS.items():
            setattr(self, name, SqlRepository(self.session_factory, ROWS[name], schema))
        logger.info(f"SQL store ready ({self.engine.url.render_as_string(hide_password=True)})")

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

# autopark/store/factory.py
from autopark.config import settings
from autopark.store.base import Store
from autopark.utils.logger import get_logger

logger = get_logger(__name__)

_store = None


def build_store(config=settings) -> Store:
    """Create the store selected by STORE_BACKEND (json | memory | sql)."""
    backend = config.STORE_BACKEND.lower()
    if backend == "memory":
        from autopark.store.memory import MemoryStore
        return MemoryStore()
    if backend == "json":
        from autopark.store.json_file import JsonFileStore
        return JsonFileStore(config.DATA_FILE)
    if backend == "sql":
        # SQLAlchemy models are only imported when this backend is used
        from autopark.store.sql import SqlStore
        return SqlStore(config.DATABASE_URL)
    raise ValueError(f"Unknown STORE_BACKEND '{config.STORE_BACKEND}' (expected json, memory or sql)")


def get_store() -> Store:
    """FastAPI dependency: the process-wide store, created on first use."""
    global _store
    if _store is None:
        _store = build_store()
        logger.info(f"Store initialised: {_store!r}")
    return _store

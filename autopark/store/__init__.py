# Autopark: storage backends
# build_store() picks one from settings; get_store() is the FastAPI dependency

from autopark.store.base import Repository, Store          # noqa
from autopark.store.memory import MemoryStore              # noqa
from autopark.store.json_file import JsonFileStore         # noqa
from autopark.store.factory import build_store, get_store  # noqa

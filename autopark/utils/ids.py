# autopark/utils/ids.py
import uuid


def new_id() -> str:
    """String identity for a new record."""
    return uuid.uuid4().hex

# autopark/schemas/base.py
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Stored timestamps are always UTC-aware, whatever the backend hands back
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire and in the JSON store."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        use_enum_values = True
        from_attributes = True
        extra = "ignore"

# autopark/schemas/dispatch_request.py
"""Dispatch requests: a planned outing of one vehicle with one driver."""

from enum import Enum
from typing import Optional

from pydantic import Field

from autopark.schemas.base import CamelModel, UtcDatetime


class RequestStatus(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    CANCELED = "canceled"


class DispatchRequest(CamelModel):
    id: str
    vehicle_id: str
    driver_id: str
    from_: str = Field(alias="from")
    to: str
    depart_at: UtcDatetime
    arrive_at: Optional[UtcDatetime] = None
    kilometers: Optional[float] = None
    status: RequestStatus = RequestStatus.PLANNED.value
    notes: str = ""
    created_at: Optional[UtcDatetime] = None


class DispatchRequestCreate(CamelModel):
    vehicle_id: Optional[str] = None
    driver_id: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    depart_at: Optional[UtcDatetime] = None
    notes: Optional[str] = None


class DispatchRequestUpdate(CamelModel):
    # status stays a plain string so unknown values reach the service as a 400
    status: Optional[str] = None
    notes: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    depart_at: Optional[UtcDatetime] = None
    driver_id: Optional[str] = None
    vehicle_id: Optional[str] = None

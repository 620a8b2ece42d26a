# autopark/schemas/trip.py
from typing import Optional

from autopark.schemas.base import CamelModel, UtcDatetime


class Trip(CamelModel):
    id: str
    driver_id: str
    vehicle_id: str
    date: UtcDatetime
    distance_km: float = 0
    notes: str = ""


class TripCreate(CamelModel):
    driver_id: Optional[str] = None
    vehicle_id: Optional[str] = None
    date: Optional[UtcDatetime] = None
    distance_km: Optional[float] = None
    notes: Optional[str] = None

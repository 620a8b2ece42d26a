# autopark/schemas/vehicle.py
from enum import Enum
from typing import Annotated, Optional

from pydantic import BeforeValidator, field_validator

from autopark.schemas.base import CamelModel


class VehicleStatus(str, Enum):
    BASE = "base"      # at depot
    TRIP = "trip"      # dispatched
    REPAIR = "repair"


# Statuses written by older releases
LEGACY_VEHICLE_STATUS = {
    "in-service": VehicleStatus.BASE,
    "decommissioned": VehicleStatus.BASE,
    "repair": VehicleStatus.REPAIR,
}


def normalize_vehicle_status(raw, fallback: str = VehicleStatus.BASE.value) -> str:
    """Map any stored or submitted status onto base | trip | repair."""
    if isinstance(raw, VehicleStatus):
        return raw.value
    if raw in {s.value for s in VehicleStatus}:
        return raw
    legacy = LEGACY_VEHICLE_STATUS.get(raw)
    return legacy.value if legacy else fallback


def _blank_to_none(value):
    return None if value == "" else value


# Old records store "" for unknown year/mileage
OptionalInt = Annotated[Optional[int], BeforeValidator(_blank_to_none)]
OptionalFloat = Annotated[Optional[float], BeforeValidator(_blank_to_none)]


class Vehicle(CamelModel):
    id: str
    make: str = ""
    model: str = ""
    type: str = ""
    status: VehicleStatus = VehicleStatus.BASE.value
    assigned_unit: str = ""
    vin: Optional[str] = None
    registration_number: Optional[str] = None
    year: OptionalInt = None
    mileage: OptionalFloat = None
    notes: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value):
        return normalize_vehicle_status(value or VehicleStatus.BASE.value)


class VehicleCreate(CamelModel):
    id: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    type: str = ""
    status: Optional[str] = None
    assigned_unit: str = ""
    vin: Optional[str] = None
    registration_number: Optional[str] = None
    year: OptionalInt = None
    mileage: OptionalFloat = None
    notes: Optional[str] = None


class VehicleUpdate(CamelModel):
    make: Optional[str] = None
    model: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    assigned_unit: Optional[str] = None
    vin: Optional[str] = None
    registration_number: Optional[str] = None
    year: OptionalInt = None
    mileage: OptionalFloat = None
    notes: Optional[str] = None

# autopark/schemas/driver.py
from typing import Optional

from autopark.schemas.base import CamelModel


class Driver(CamelModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    license_number: str = ""
    rank: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    photo_url: Optional[str] = None
    # set on entries listed from user accounts
    position: Optional[str] = None
    email: Optional[str] = None


class DriverCreate(CamelModel):
    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    license_number: Optional[str] = None
    rank: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None


class DriverUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    license_number: Optional[str] = None
    rank: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None

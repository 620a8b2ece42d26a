# autopark/routers/trips.py
"""Trip log. Any signed-in user can read, admins add entries."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from autopark.auth import get_current_user, require_admin
from autopark.schemas.trip import Trip, TripCreate
from autopark.services import trip_service
from autopark.store import Store, get_store

router = APIRouter()


@router.get("/trips", response_model=list[Trip], summary="Trip log, filterable by driver or vehicle")
def list_trips(
    driver_id: Optional[str] = Query(default=None, alias="driverId"),
    vehicle_id: Optional[str] = Query(default=None, alias="vehicleId"),
    store: Store = Depends(get_store),
    user: dict = Depends(get_current_user),
):
    return trip_service.list_trips(store, driver_id, vehicle_id)


@router.post("/trips", response_model=Trip, status_code=201, summary="Log a trip")
def create_trip(body: TripCreate, store: Store = Depends(get_store), user: dict = Depends(require_admin)):
    return trip_service.create_trip(store, body)

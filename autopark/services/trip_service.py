# autopark/services/trip_service.py
"""
Trip log. Rows are appended by admins (real distances) and by the
dispatch lifecycle (zero-distance start/finish markers).
"""

from datetime import datetime, timezone
from typing import Optional

from autopark.schemas.trip import Trip, TripCreate
from autopark.services.driver_service import driver_exists
from autopark.services.errors import ValidationError
from autopark.store.base import Store
from autopark.utils.ids import new_id
from autopark.utils.logger import get_logger
from autopark.utils.text import sanitize_arrows

logger = get_logger(__name__)


def list_trips(store: Store, driver_id: Optional[str] = None, vehicle_id: Optional[str] = None) -> list[Trip]:
    trips = store.trips.list()
    if driver_id:
        trips = [t for t in trips if str(t.driver_id) == str(driver_id)]
    if vehicle_id:
        trips = [t for t in trips if str(t.vehicle_id) == str(vehicle_id)]
    return trips


def append_trip(store: Store, driver_id: str, vehicle_id: str, date: Optional[datetime],
                distance_km: float, notes: str = "") -> Trip:
    trip = Trip(
        id=new_id(),
        driver_id=str(driver_id),
        vehicle_id=str(vehicle_id),
        date=date or datetime.now(timezone.utc),
        distance_km=distance_km,
        notes=notes,
    )
    store.trips.upsert(trip)
    return trip


def create_trip(store: Store, body: TripCreate) -> Trip:
    if not body.driver_id or not body.vehicle_id or not body.distance_km:
        raise ValidationError("driverId, vehicleId, distanceKm are required")
    if not driver_exists(store, body.driver_id) or store.vehicles.get(body.vehicle_id) is None:
        raise ValidationError("Invalid driver or vehicle")
    trip = append_trip(store, body.driver_id, body.vehicle_id, body.date, body.distance_km, body.notes or "")
    logger.info(f"Trip {trip.id}: vehicle={trip.vehicle_id} driver={trip.driver_id} {trip.distance_km} km")
    return trip


def sanitize_trip_notes(store: Store) -> int:
    """Rewrite stored notes with corrupted arrows. Returns how many trips changed."""
    changed = 0
    for trip in store.trips.list():
        cleaned = sanitize_arrows(trip.notes)
        if cleaned != (trip.notes or ""):
            store.trips.upsert(trip.model_copy(update={"notes": cleaned}))
            changed += 1
    if changed:
        logger.info(f"Sanitized arrows in {changed} trip notes")
    return changed

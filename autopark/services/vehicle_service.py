# autopark/services/vehicle_service.py
"""
Vehicle registry. Used by the vehicles router, the trips service and the
dispatch lifecycle (which flips status between base and trip).
"""

from typing import Optional

from autopark.schemas.vehicle import Vehicle, VehicleCreate, VehicleStatus, VehicleUpdate, normalize_vehicle_status
from autopark.services.errors import NotFoundError, ValidationError
from autopark.store.base import Store
from autopark.utils.ids import new_id
from autopark.utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_VEHICLES = [
    {"make": "КрАЗ", "model": "6322", "type": "вантажівка", "assigned_unit": "Рота забезпечення",
     "vin": "KRAZ-6322-0001", "registration_number": "ВЧ-1234", "year": 2018, "mileage": 32500},
    {"make": "ЗІЛ", "model": "131", "type": "вантажівка", "assigned_unit": "Рота забезпечення",
     "vin": "ZIL-131-0002", "registration_number": "ВЧ-2234", "year": 1990, "mileage": 120000},
    {"make": "УАЗ", "model": "469", "type": "позашляховик", "assigned_unit": "Штаб",
     "vin": "UAZ-469-0003", "registration_number": "ВЧ-3234", "year": 1985, "mileage": 80000},
]


def list_vehicles(store: Store, status: Optional[str] = None) -> list[Vehicle]:
    vehicles = store.vehicles.list()
    if status:
        vehicles = [v for v in vehicles if v.status == status]
    return vehicles


def get_vehicle(store: Store, vehicle_id: str) -> Vehicle:
    vehicle = store.vehicles.get(vehicle_id)
    if vehicle is None:
        raise NotFoundError("Vehicle not found")
    return vehicle


def create_vehicle(store: Store, body: VehicleCreate) -> Vehicle:
    if not body.make or not body.model or not body.registration_number:
        raise ValidationError("make, model, registrationNumber are required")
    data = body.model_dump(exclude={"id", "status"})
    vehicle = Vehicle(
        id=body.id or new_id(),
        status=normalize_vehicle_status(body.status or VehicleStatus.BASE.value),
        **data,
    )
    store.vehicles.upsert(vehicle)
    logger.info(f"Vehicle {vehicle.id} registered: {vehicle.make} {vehicle.model} ({vehicle.registration_number})")
    return vehicle


def update_vehicle(store: Store, vehicle_id: str, body: VehicleUpdate) -> Vehicle:
    current = get_vehicle(store, vehicle_id)
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "status" in changes:
        # Unknown values keep whatever the vehicle had
        changes["status"] = normalize_vehicle_status(changes["status"], fallback=current.status)
    vehicle = current.model_copy(update=changes)
    store.vehicles.upsert(vehicle)
    return vehicle


def delete_vehicle(store: Store, vehicle_id: str):
    if not store.vehicles.delete(vehicle_id):
        raise NotFoundError("Vehicle not found")
    logger.info(f"Vehicle {vehicle_id} removed")


def set_vehicle_status(store: Store, vehicle: Vehicle, status: VehicleStatus) -> Vehicle:
    """Persist a status change coming from the dispatch lifecycle."""
    updated = vehicle.model_copy(update={"status": VehicleStatus(status).value})
    store.vehicles.upsert(updated)
    logger.info(f"Vehicle {vehicle.id}: {vehicle.status} → {updated.status}")
    return updated


def seed_sample_vehicles(store: Store) -> int:
    """Add a few sample vehicles to an empty registry. Returns how many were added."""
    if store.vehicles.list():
        return 0
    for sample in SAMPLE_VEHICLES:
        store.vehicles.upsert(Vehicle(id=new_id(), status=VehicleStatus.BASE.value, notes="", **sample))
    logger.info(f"Seeded {len(SAMPLE_VEHICLES)} sample vehicles")
    return len(SAMPLE_VEHICLES)

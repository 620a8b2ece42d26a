# autopark/routers/vehicles.py
"""Vehicle registry. Reads are open, changes need admin or superadmin."""

from typing import Optional

from fastapi import APIRouter, Depends

from autopark.auth import require_admin
from autopark.schemas.vehicle import Vehicle, VehicleCreate, VehicleUpdate
from autopark.services import vehicle_service
from autopark.store import Store, get_store

router = APIRouter()


@router.get("/vehicles", response_model=list[Vehicle], summary="List vehicles")
def list_vehicles(status: Optional[str] = None, store: Store = Depends(get_store)):
    return vehicle_service.list_vehicles(store, status)


@router.get("/vehicles/{vehicle_id}", response_model=Vehicle, summary="Get one vehicle")
def get_vehicle(vehicle_id: str, store: Store = Depends(get_store)):
    return vehicle_service.get_vehicle(store, vehicle_id)


@router.post("/vehicles", response_model=Vehicle, status_code=201, summary="Register a vehicle")
def create_vehicle(body: VehicleCreate, store: Store = Depends(get_store), user: dict = Depends(require_admin)):
    return vehicle_service.create_vehicle(store, body)


@router.put("/vehicles/{vehicle_id}", response_model=Vehicle, summary="Update a vehicle")
def update_vehicle(vehicle_id: str, body: VehicleUpdate, store: Store = Depends(get_store),
                   user: dict = Depends(require_admin)):
    return vehicle_service.update_vehicle(store, vehicle_id, body)


@router.delete("/vehicles/{vehicle_id}", status_code=204, summary="Remove a vehicle")
def delete_vehicle(vehicle_id: str, store: Store = Depends(get_store), user: dict = Depends(require_admin)):
    vehicle_service.delete_vehicle(store, vehicle_id)

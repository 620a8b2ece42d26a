# autopark/routers/drivers.py
"""Drivers. Reads are open, changes need admin or superadmin."""

from fastapi import APIRouter, Depends

from autopark.auth import require_admin
from autopark.schemas.driver import Driver, DriverCreate, DriverUpdate
from autopark.services import driver_service
from autopark.store import Store, get_store

router = APIRouter()


@router.get("/drivers", response_model=list[Driver])
def list_drivers(store: Store = Depends(get_store)):
    return driver_service.list_drivers(store)


@router.get("/drivers/{driver_id}", response_model=Driver)
def get_driver(driver_id: str, store: Store = Depends(get_store)):
    return driver_service.get_driver(store, driver_id)


@router.post("/drivers", response_model=Driver, status_code=201)
def create_driver(body: DriverCreate, store: Store = Depends(get_store), user: dict = Depends(require_admin)):
    return driver_service.create_driver(store, body)


@router.put("/drivers/{driver_id}", response_model=Driver)
def update_driver(driver_id: str, body: DriverUpdate, store: Store = Depends(get_store),
                  user: dict = Depends(require_admin)):
    return driver_service.update_driver(store, driver_id, body)


@router.delete("/drivers/{driver_id}", status_code=204)
def delete_driver(driver_id: str, store: Store = Depends(get_store), user: dict = Depends(require_admin)):
    driver_service.delete_driver(store, driver_id)

# autopark/services/driver_service.py
"""Driver registry and the driver-exists check used by trips and dispatch."""

from autopark.schemas.driver import Driver, DriverCreate, DriverUpdate
from autopark.schemas.user import POSITIONS, User, UserStatus
from autopark.services.errors import NotFoundError, ValidationError
from autopark.store.base import Store
from autopark.utils.ids import new_id
from autopark.utils.logger import get_logger

logger = get_logger(__name__)

DRIVER_POSITION = POSITIONS[0]


def driver_exists(store: Store, driver_id) -> bool:
    """A driver is either a driver record or a user account with that id."""
    if driver_id is None:
        return False
    return store.drivers.get(str(driver_id)) is not None or store.users.get(str(driver_id)) is not None


def driver_from_user(user: User) -> Driver:
    """Accounts store "<last> <first> <middle>" in name."""
    parts = (user.name or "").split(" ")
    return Driver(
        id=user.id,
        first_name=parts[1] if len(parts) > 1 else "",
        last_name=parts[0],
        position=user.position,
        email=user.email,
    )


def list_drivers(store: Store) -> list[Driver]:
    """
    Driver records followed by the user accounts holding the driver
    position. Rejected registrations are left out, and an account never
    shadows a driver record with the same id.
    """
    drivers = store.drivers.list()
    seen = {d.id for d in drivers}
    for user in store.users.list():
        if user.position != DRIVER_POSITION or user.status == UserStatus.REJECTED.value:
            continue
        if user.id in seen:
            continue
        seen.add(user.id)
        drivers.append(driver_from_user(user))
    return drivers


def get_driver(store: Store, driver_id: str) -> Driver:
    driver = store.drivers.get(driver_id)
    if driver is None:
        raise NotFoundError("Driver not found")
    return driver


def create_driver(store: Store, body: DriverCreate) -> Driver:
    if not body.first_name or not body.last_name or not body.license_number:
        raise ValidationError("firstName, lastName, licenseNumber are required")
    driver = Driver(id=body.id or new_id(), **body.model_dump(exclude={"id"}))
    store.drivers.upsert(driver)
    logger.info(f"Driver {driver.id} added: {driver.last_name} {driver.first_name}")
    return driver


def update_driver(store: Store, driver_id: str, body: DriverUpdate) -> Driver:
    current = get_driver(store, driver_id)
    driver = current.model_copy(update=body.model_dump(exclude_unset=True, exclude_none=True))
    store.drivers.upsert(driver)
    return driver


def delete_driver(store: Store, driver_id: str):
    if not store.drivers.delete(driver_id):
        raise NotFoundError("Driver not found")
    logger.info(f"Driver {driver_id} removed")

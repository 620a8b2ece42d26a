# autopark/services/dispatch_service.py
"""
Dispatch requests and their lifecycle.

Status flow: planned → in-progress → done | canceled

Side effects are declared in TRANSITIONS, keyed by (previous, next) status:
  * → in-progress   vehicle goes to "trip", a 0 km start marker is logged
  * → done/canceled vehicle on "trip" comes back to "base", a 0 km finish
                    marker is logged

Side effects are best effort. If one fails it is logged and the request
update is still saved, so request and vehicle/trip state can disagree
until someone fixes them by hand. Nothing is locked: two concurrent
updates of the same request can both apply their side effects.
"""

from datetime import datetime, timezone
from typing import Callable

from autopark.schemas.dispatch_request import (
    DispatchRequest,
    DispatchRequestCreate,
    RequestStatus,
)
from autopark.schemas.vehicle import VehicleStatus
from autopark.services.driver_service import driver_exists
from autopark.services.errors import NotFoundError, ValidationError
from autopark.services.trip_service import append_trip
from autopark.services.vehicle_service import set_vehicle_status
from autopark.store.base import Store
from autopark.utils.ids import new_id
from autopark.utils.logger import get_logger
from autopark.utils.text import sanitize_arrows

logger = get_logger(__name__)

# Fields a PUT may change besides status
EDITABLE_FIELDS = ("notes", "from_", "to", "depart_at", "driver_id", "vehicle_id")

SideEffect = Callable[[Store, DispatchRequest, RequestStatus], None]


def start_dispatch(store: Store, request: DispatchRequest, status: RequestStatus):
    vehicle = store.vehicles.get(request.vehicle_id)
    if vehicle is None:
        logger.warning(f"[DISPATCH] Request #{request.id} started but vehicle {request.vehicle_id} is gone")
        return
    set_vehicle_status(store, vehicle, VehicleStatus.TRIP)
    if not driver_exists(store, request.driver_id):
        logger.warning(f"[DISPATCH] Request #{request.id}: driver {request.driver_id} is gone, no trip logged")
        return
    append_trip(
        store,
        driver_id=request.driver_id,
        vehicle_id=request.vehicle_id,
        date=request.depart_at,
        distance_km=0,
        notes=sanitize_arrows(f"[dispatch] старт: {request.from_} -> {request.to} (request #{request.id})"),
    )
    logger.info(f"[DISPATCH] Request #{request.id} started: {request.from_} → {request.to}")


def finish_dispatch(store: Store, request: DispatchRequest, status: RequestStatus):
    vehicle = store.vehicles.get(request.vehicle_id)
    if vehicle is None or vehicle.status != VehicleStatus.TRIP.value:
        return
    set_vehicle_status(store, vehicle, VehicleStatus.BASE)
    if not driver_exists(store, request.driver_id):
        logger.warning(f"[DISPATCH] Request #{request.id}: driver {request.driver_id} is gone, no trip logged")
        return
    append_trip(
        store,
        driver_id=request.driver_id,
        vehicle_id=request.vehicle_id,
        date=datetime.now(timezone.utc),
        distance_km=0,
        notes=sanitize_arrows(
            f"[dispatch] завершено: {request.from_} -> {request.to} ({status.value}) (request #{request.id})"
        ),
    )
    logger.info(f"[DISPATCH] Request #{request.id} {status.value}, vehicle {vehicle.id} back at base")


def _build_transitions() -> dict[tuple[RequestStatus, RequestStatus], SideEffect]:
    table = {}
    for previous in RequestStatus:
        if previous is not RequestStatus.IN_PROGRESS:
            table[(previous, RequestStatus.IN_PROGRESS)] = start_dispatch
        table[(previous, RequestStatus.DONE)] = finish_dispatch
        table[(previous, RequestStatus.CANCELED)] = finish_dispatch
    return table


TRANSITIONS = _build_transitions()


def side_effect_for(previous, next_status):
    """The side effect for a status change, or None."""
    return TRANSITIONS.get((RequestStatus(previous), RequestStatus(next_status)))


def parse_status(raw) -> RequestStatus:
    try:
        return RequestStatus(raw)
    except ValueError:
        raise ValidationError("Invalid status")


def list_requests(store: Store) -> list[DispatchRequest]:
    return store.requests.list()


def get_request(store: Store, request_id: str) -> DispatchRequest:
    request = store.requests.get(request_id)
    if request is None:
        raise NotFoundError("Request not found")
    return request


def create_request(store: Store, body: DispatchRequestCreate) -> DispatchRequest:
    if not body.vehicle_id or not body.driver_id or not body.from_ or not body.to:
        raise ValidationError("vehicleId, driverId, from, to are required")
    if not driver_exists(store, body.driver_id) or store.vehicles.get(body.vehicle_id) is None:
        raise ValidationError("Invalid driver or vehicle")
    now = datetime.now(timezone.utc)
    request = DispatchRequest(
        id=new_id(),
        vehicle_id=str(body.vehicle_id),
        driver_id=str(body.driver_id),
        from_=body.from_,
        to=body.to,
        depart_at=body.depart_at or now,
        status=RequestStatus.PLANNED.value,
        notes=body.notes or "",
        created_at=now,
    )
    store.requests.upsert(request)
    logger.info(f"[DISPATCH] Request #{request.id} planned: {request.from_} → {request.to}, vehicle {request.vehicle_id}")
    return request


def update_request(store: Store, request_id: str, changes: dict) -> DispatchRequest:
    """
    Merge a partial update into a request and run the side effect of its
    status change, if any.

    changes uses field names: status, notes, from_, to, depart_at,
    driver_id, vehicle_id. Raises NotFoundError for an unknown request and
    ValidationError for an unknown status, before anything is written.
    """
    current = get_request(store, request_id)

    update = {k: changes[k] for k in EDITABLE_FIELDS if changes.get(k) is not None}
    next_status = None
    if changes.get("status"):
        next_status = parse_status(changes["status"])
        update["status"] = next_status.value
    merged = DispatchRequest.model_validate({**current.model_dump(), **update})

    if next_status is not None:
        effect = side_effect_for(current.status, next_status)
        if effect is not None:
            try:
                effect(store, merged, next_status)
            except Exception as e:
                logger.error(f"[DISPATCH] Side effect failed for request #{merged.id} "
                             f"({current.status} → {next_status.value}): {e}", exc_info=True)

    store.requests.upsert(merged)
    return merged


def delete_request(store: Store, request_id: str):
    if not store.requests.delete(request_id):
        raise NotFoundError("Request not found")
    logger.info(f"[DISPATCH] Request #{request_id} deleted")

# autopark/routers/dispatch_requests.py
"""
Dispatch requests.
PUT /requests/{id} drives the dispatch lifecycle: status changes move the
vehicle between base and trip and log start/finish trips.
"""

from fastapi import APIRouter, Depends

from autopark.auth import get_current_user, require_admin
from autopark.schemas.dispatch_request import DispatchRequest, DispatchRequestCreate, DispatchRequestUpdate
from autopark.services import dispatch_service
from autopark.store import Store, get_store

router = APIRouter()


@router.get("/requests", response_model=list[DispatchRequest], summary="List dispatch requests")
def list_requests(store: Store = Depends(get_store), user: dict = Depends(get_current_user)):
    return dispatch_service.list_requests(store)


@router.post("/requests", response_model=DispatchRequest, status_code=201, summary="Plan a dispatch")
def create_request(body: DispatchRequestCreate, store: Store = Depends(get_store),
                   user: dict = Depends(require_admin)):
    return dispatch_service.create_request(store, body)


@router.put("/requests/{request_id}", response_model=DispatchRequest, summary="Update a request / change its status")
def update_request(request_id: str, body: DispatchRequestUpdate, store: Store = Depends(get_store),
                   user: dict = Depends(require_admin)):
    """
    Partial update. Setting status to in-progress sends the vehicle on a
    trip; done or canceled brings it back to base.
    """
    return dispatch_service.update_request(store, request_id, body.model_dump(exclude_unset=True))


@router.delete("/requests/{request_id}", status_code=204, summary="Delete a request")
def delete_request(request_id: str, store: Store = Depends(get_store), user: dict = Depends(require_admin)):
    dispatch_service.delete_request(store, request_id)

# autopark/routers/users.py
"""
Accounts: self-registration, own profile, the approval queue (admins)
and user management (superadmin). Password hashes never leave the service.
"""

from fastapi import APIRouter, Depends

from autopark.auth import get_current_user, require_admin, require_superadmin
from autopark.schemas.user import (
    ProfileUpdate,
    RegistrationIn,
    RegistrationOut,
    RolePositionUpdate,
    User,
    UserCreate,
    UserOut,
    UserUpdate,
)
from autopark.services import user_service
from autopark.store import Store, get_store

router = APIRouter()


def to_out(user: User) -> UserOut:
    return UserOut.model_validate(user.model_dump(exclude={"password_hash"}))


# ── Registration & own profile ───────────────────────────────────────────────

@router.post("/auth/register", response_model=RegistrationOut, status_code=201,
             summary="Self-registration, pending until approved")
def register(body: RegistrationIn, store: Store = Depends(get_store)):
    user = user_service.register_user(store, body)
    return RegistrationOut(status=user.status, user=to_out(user))


@router.get("/me", response_model=UserOut)
def get_me(store: Store = Depends(get_store), current: dict = Depends(get_current_user)):
    return to_out(user_service.get_user(store, str(current["id"])))


@router.put("/me", response_model=UserOut)
def update_me(body: ProfileUpdate, store: Store = Depends(get_store), current: dict = Depends(get_current_user)):
    return to_out(user_service.update_profile(store, str(current["id"]), body))


# ── Approval queue (admin, superadmin) ───────────────────────────────────────

@router.get("/registrations", response_model=list[UserOut], summary="Pending registrations")
def list_registrations(store: Store = Depends(get_store), current: dict = Depends(require_admin)):
    return [to_out(u) for u in user_service.list_pending(store)]


@router.post("/users/{user_id}/approve", response_model=UserOut)
def approve(user_id: str, store: Store = Depends(get_store), current: dict = Depends(require_admin)):
    return to_out(user_service.approve_user(store, user_id))


@router.post("/users/{user_id}/reject", response_model=UserOut)
def reject(user_id: str, store: Store = Depends(get_store), current: dict = Depends(require_admin)):
    return to_out(user_service.reject_user(store, user_id))


# ── User management (superadmin) ─────────────────────────────────────────────

@router.get("/users", response_model=list[UserOut])
def list_users(store: Store = Depends(get_store), current: dict = Depends(require_superadmin)):
    return [to_out(u) for u in user_service.list_users(store)]


@router.post("/users", response_model=UserOut, status_code=201)
def create_user(body: UserCreate, store: Store = Depends(get_store), current: dict = Depends(require_superadmin)):
    return to_out(user_service.create_user(store, body))


@router.put("/users/{user_id}", response_model=UserOut)
def update_user(user_id: str, body: UserUpdate, store: Store = Depends(get_store),
                current: dict = Depends(require_superadmin)):
    return to_out(user_service.update_user(store, user_id, body))


@router.put("/users/{user_id}/role", response_model=UserOut, summary="Change role and position")
def update_role(user_id: str, body: RolePositionUpdate, store: Store = Depends(get_store),
                current: dict = Depends(require_superadmin)):
    return to_out(user_service.update_role_position(store, user_id, body))


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, store: Store = Depends(get_store), current: dict = Depends(require_superadmin)):
    user_service.delete_user(store, user_id, acting_user_id=str(current["id"]))

# autopark/services/user_service.py
"""
User accounts, self-registration and the approval workflow.

Registration creates a "pending" user; an admin approves ("active") or
rejects ("rejected") it. Account management is superadmin-only and is
guarded so the last superadmin can never be removed.
"""

from datetime import datetime, timezone
from typing import Optional

from autopark.auth import hash_password
from autopark.schemas.user import (
    POSITIONS,
    ROLE_RANK,
    ProfileUpdate,
    RegistrationIn,
    RolePositionUpdate,
    User,
    UserCreate,
    UserRole,
    UserStatus,
    UserUpdate,
)
from autopark.services.errors import ConflictError, NotFoundError, ValidationError
from autopark.store.base import Store
from autopark.utils.ids import new_id
from autopark.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_email(email) -> str:
    return str(email or "").strip().lower()


def find_by_email(store: Store, email: str, exclude_id: Optional[str] = None) -> Optional[User]:
    email = normalize_email(email)
    for user in store.users.list():
        if normalize_email(user.email) == email and str(user.id) != str(exclude_id):
            return user
    return None


def get_user(store: Store, user_id: str) -> User:
    user = store.users.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


# ── Registration & approval ─────────────────────────────────────────────────

def register_user(store: Store, body: RegistrationIn) -> User:
    required = (body.email, body.password, body.last_name, body.first_name, body.middle_name, body.position)
    if not all(required):
        raise ValidationError(
            "All fields are required: email, password, lastName, firstName, middleName, position"
        )
    email = normalize_email(body.email)
    if find_by_email(store, email):
        raise ConflictError("User already exists")
    user = User(
        id=new_id(),
        email=email,
        name=f"{body.last_name} {body.first_name} {body.middle_name}".strip(),
        role=UserRole.USER.value,
        position=body.position,
        status=UserStatus.PENDING.value,
        password_hash=hash_password(body.password),
        created_at=datetime.now(timezone.utc),
    )
    store.users.upsert(user)
    logger.info(f"Registration {user.id} ({user.email}) awaiting approval")
    return user


def list_pending(store: Store) -> list[User]:
    return [u for u in store.users.list() if u.status == UserStatus.PENDING.value]


def set_user_status(store: Store, user_id: str, status: UserStatus) -> User:
    user = get_user(store, user_id)
    updated = user.model_copy(update={"status": UserStatus(status).value})
    store.users.upsert(updated)
    logger.info(f"User {user.id} ({user.email}): {user.status} → {updated.status}")
    return updated


def approve_user(store: Store, user_id: str) -> User:
    return set_user_status(store, user_id, UserStatus.ACTIVE)


def reject_user(store: Store, user_id: str) -> User:
    return set_user_status(store, user_id, UserStatus.REJECTED)


# ── Account management (superadmin) ─────────────────────────────────────────

def list_users(store: Store) -> list[User]:
    return store.users.list()


def create_user(store: Store, body: UserCreate) -> User:
    email = normalize_email(body.email)
    if not email or not body.password:
        raise ValidationError("email and password are required")
    if find_by_email(store, email):
        raise ConflictError("User already exists")
    user = User(
        id=new_id(),
        email=email,
        name=" ".join(p for p in (body.last_name, body.first_name, body.middle_name) if p),
        role=body.role or UserRole.USER.value,
        position=body.position,
        status=UserStatus.ACTIVE.value,
        password_hash=hash_password(body.password),
        created_at=datetime.now(timezone.utc),
    )
    store.users.upsert(user)
    logger.info(f"User {user.id} ({user.email}) created with role {user.role}")
    return user


def update_user(store: Store, user_id: str, body: UserUpdate) -> User:
    current = get_user(store, user_id)
    if body.role and body.role not in ROLE_RANK:
        raise ValidationError("Invalid role")
    update = {}
    if body.email:
        email = normalize_email(body.email)
        if find_by_email(store, email, exclude_id=current.id):
            raise ConflictError("Email already in use")
        update["email"] = email
    if body.name is not None:
        update["name"] = body.name
    if body.role:
        update["role"] = body.role
    if body.password:
        update["password_hash"] = hash_password(body.password)
    user = current.model_copy(update=update)
    store.users.upsert(user)
    return user


def update_role_position(store: Store, user_id: str, body: RolePositionUpdate) -> User:
    current = get_user(store, user_id)
    if body.position not in POSITIONS:
        raise ValidationError("Invalid position")
    user = current.model_copy(update={"role": body.role, "position": body.position})
    store.users.upsert(user)
    logger.info(f"User {user.id}: role={user.role} position={user.position}")
    return user


def delete_user(store: Store, user_id: str, acting_user_id: Optional[str] = None):
    users = store.users.list()
    target = next((u for u in users if str(u.id) == str(user_id)), None)
    if target is None:
        raise NotFoundError("User not found")
    if acting_user_id is not None and str(acting_user_id) == str(user_id):
        raise ValidationError("You cannot delete yourself")
    if target.role == UserRole.SUPERADMIN.value:
        supers = [u for u in users if u.role == UserRole.SUPERADMIN.value]
        if len(supers) <= 1:
            raise ValidationError("Cannot delete the last superadmin")
    store.users.delete(target.id)
    logger.info(f"User {target.id} ({target.email}) deleted")


# ── Own profile ──────────────────────────────────────────────────────────────

def update_profile(store: Store, user_id: str, body: ProfileUpdate) -> User:
    return update_user(store, user_id, UserUpdate(email=body.email, name=body.name, password=body.password))


# ── Maintenance ──────────────────────────────────────────────────────────────

def normalize_users(store: Store) -> int:
    """
    Lowercase every email and merge accounts sharing one. The higher role
    wins; on a tie the first account is kept. Users without a status
    become active. Returns the number of records changed or removed.
    """
    kept = {}
    dropped = []
    changed = 0
    for user in store.users.list():
        email = normalize_email(user.email)
        fixed = user
        if email != user.email or not user.status:
            fixed = user.model_copy(update={"email": email, "status": user.status or UserStatus.ACTIVE.value})
        existing = kept.get(email)
        if existing is None:
            kept[email] = fixed
            if fixed is not user:
                store.users.upsert(fixed)
                changed += 1
            continue
        if ROLE_RANK.get(fixed.role, 0) > ROLE_RANK.get(existing.role, 0):
            dropped.append(existing)
            kept[email] = fixed
            store.users.upsert(fixed)
        else:
            dropped.append(fixed)
    for user in dropped:
        store.users.delete(user.id)
        changed += 1
    if changed:
        logger.info(f"Normalized users: {changed} records updated or merged")
    return changed


def ensure_superadmin(store: Store, email: str, password: Optional[str] = None) -> Optional[User]:
    """
    First-run step: make sure a superadmin exists. An existing account with
    the given email is promoted; otherwise one is created (password
    required). Returns the affected user, or None if nothing was needed.
    """
    users = store.users.list()
    if any(u.role == UserRole.SUPERADMIN.value for u in users):
        return None
    existing = find_by_email(store, email)
    if existing is not None:
        promoted = existing.model_copy(update={
            "role": UserRole.SUPERADMIN.value,
            "status": UserStatus.ACTIVE.value,
        })
        store.users.upsert(promoted)
        logger.warning(f"Promoted existing {promoted.email} to superadmin")
        return promoted
    if not password:
        raise ValidationError(f"No superadmin exists and no password was given for {email}")
    user = User(
        id=new_id(),
        email=normalize_email(email),
        name="Адміністратор",
        role=UserRole.SUPERADMIN.value,
        status=UserStatus.ACTIVE.value,
        password_hash=hash_password(password),
        created_at=datetime.now(timezone.utc),
    )
    store.users.upsert(user)
    logger.warning(f"Created superadmin {user.email}")
    return user

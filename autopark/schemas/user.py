# autopark/schemas/user.py
from enum import Enum
from typing import Optional

from autopark.schemas.base import CamelModel, UtcDatetime


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


# Higher rank wins when duplicate accounts are merged
ROLE_RANK = {UserRole.USER.value: 1, UserRole.ADMIN.value: 2, UserRole.SUPERADMIN.value: 3}


class UserStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    REJECTED = "rejected"


POSITIONS = (
    "Водій",
    "Старший Водій",
    "Механік водій",
    "Начальник автослужби",
    "Старший технік автопарку",
)


class User(CamelModel):
    """Stored account. Carries the password hash, never returned as is."""
    id: str
    email: str = ""
    name: str = ""
    role: str = UserRole.USER.value
    position: Optional[str] = None
    status: Optional[str] = None
    password_hash: Optional[str] = None
    created_at: Optional[UtcDatetime] = None


class UserOut(CamelModel):
    id: str
    email: str
    name: str
    role: str
    position: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[UtcDatetime] = None


class RegistrationIn(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    position: Optional[str] = None


class RegistrationOut(CamelModel):
    ok: bool = True
    status: str
    user: UserOut


class UserCreate(CamelModel):
    email: str
    password: str
    last_name: str = ""
    first_name: str = ""
    middle_name: str = ""
    role: Optional[UserRole] = None
    position: Optional[str] = None


class UserUpdate(CamelModel):
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdate(CamelModel):
    email: Optional[str] = None
    name: Optional[str] = None
    password: Optional[str] = None


class RolePositionUpdate(CamelModel):
    role: UserRole
    position: str

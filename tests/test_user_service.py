# tests/test_user_service.py
"""Unit tests for registration, approval and account management."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from autopark.auth import verify_password
from autopark.schemas.user import RegistrationIn, RolePositionUpdate, User, UserCreate, UserUpdate
from autopark.services import user_service
from autopark.services.errors import ConflictError, NotFoundError, ValidationError
from autopark.store.memory import MemoryStore


def make_registration(email="Ivan@Unit.ua"):
    return RegistrationIn(
        email=email, password="secret", last_name="Петренко", first_name="Іван",
        middle_name="Іванович", position="Водій",
    )


def make_user(user_id, email, role="user", status="active"):
    return User(id=user_id, email=email, name=email, role=role, status=status)


class TestRegistration:
    def test_register_creates_pending_user(self):
        store = MemoryStore()

        user = user_service.register_user(store, make_registration())

        assert user.status == "pending"
        assert user.role == "user"
        assert user.email == "ivan@unit.ua"
        assert user.name == "Петренко Іван Іванович"
        assert user.password_hash != "secret"
        assert verify_password("secret", user.password_hash)

    def test_duplicate_email_is_case_insensitive(self):
        store = MemoryStore()
        user_service.register_user(store, make_registration())

        with pytest.raises(ConflictError):
            user_service.register_user(store, make_registration(email="IVAN@unit.ua "))

    def test_all_fields_required(self):
        body = make_registration()
        body.middle_name = None

        with pytest.raises(ValidationError):
            user_service.register_user(MemoryStore(), body)

    def test_approve_and_reject(self):
        store = MemoryStore()
        first = user_service.register_user(store, make_registration("a@unit.ua"))
        second = user_service.register_user(store, make_registration("b@unit.ua"))
        assert len(user_service.list_pending(store)) == 2

        assert user_service.approve_user(store, first.id).status == "active"
        assert user_service.reject_user(store, second.id).status == "rejected"
        assert user_service.list_pending(store) == []

    def test_approve_unknown_user(self):
        with pytest.raises(NotFoundError):
            user_service.approve_user(MemoryStore(), "nope")


class TestAccountManagement:
    def test_create_user_is_active(self):
        store = MemoryStore()

        user = user_service.create_user(store, UserCreate(
            email="Admin2@Unit.ua", password="pw", last_name="Коваль", first_name="Олег", role="admin",
        ))

        assert user.status == "active"
        assert user.role == "admin"
        assert user.email == "admin2@unit.ua"
        assert user.name == "Коваль Олег"

    def test_update_user_rejects_bad_role(self):
        store = MemoryStore(seed={"users": [make_user("u1", "u1@unit.ua")]})

        with pytest.raises(ValidationError):
            user_service.update_user(store, "u1", UserUpdate(role="general"))

    def test_update_user_email_conflict(self):
        store = MemoryStore(seed={"users": [make_user("u1", "u1@unit.ua"), make_user("u2", "u2@unit.ua")]})

        with pytest.raises(ConflictError):
            user_service.update_user(store, "u2", UserUpdate(email="U1@unit.ua"))

    def test_update_password_rehashes(self):
        store = MemoryStore(seed={"users": [make_user("u1", "u1@unit.ua")]})

        user = user_service.update_user(store, "u1", UserUpdate(password="new-pass"))

        assert verify_password("new-pass", user.password_hash)

    def test_role_position_update(self):
        store = MemoryStore(seed={"users": [make_user("u1", "u1@unit.ua")]})

        user = user_service.update_role_position(store, "u1", RolePositionUpdate(role="admin", position="Механік водій"))

        assert user.role == "admin"
        assert user.position == "Механік водій"

    def test_role_position_rejects_unknown_position(self):
        store = MemoryStore(seed={"users": [make_user("u1", "u1@unit.ua")]})

        with pytest.raises(ValidationError):
            user_service.update_role_position(store, "u1", RolePositionUpdate(role="user", position="Генерал"))

    def test_cannot_delete_self(self):
        store = MemoryStore(seed={"users": [make_user("s1", "s1@unit.ua", role="superadmin"),
                                            make_user("s2", "s2@unit.ua", role="superadmin")]})

        with pytest.raises(ValidationError):
            user_service.delete_user(store, "s1", acting_user_id="s1")

    def test_cannot_delete_last_superadmin(self):
        store = MemoryStore(seed={"users": [make_user("s1", "s1@unit.ua", role="superadmin")]})

        with pytest.raises(ValidationError):
            user_service.delete_user(store, "s1", acting_user_id="other")

    def test_delete_user(self):
        store = MemoryStore(seed={"users": [make_user("s1", "s1@unit.ua", role="superadmin"),
                                            make_user("u1", "u1@unit.ua")]})

        user_service.delete_user(store, "u1", acting_user_id="s1")

        assert store.users.get("u1") is None


class TestMaintenance:
    def test_normalize_users_merges_duplicates_keeping_higher_role(self):
        store = MemoryStore(seed={"users": [
            make_user("u1", "Admin@Local", role="user"),
            make_user("u2", "admin@local", role="admin"),
            User(id="u3", email="Other@Unit.ua", name="Other", role="user", status=None),
        ]})

        user_service.normalize_users(store)

        users = {u.id: u for u in store.users.list()}
        assert set(users) == {"u2", "u3"}
        assert users["u3"].email == "other@unit.ua"
        assert users["u3"].status == "active"

    def test_normalize_users_keeps_first_on_tie(self):
        store = MemoryStore(seed={"users": [
            make_user("u1", "a@unit.ua", role="admin"),
            make_user("u2", "A@unit.ua", role="admin"),
        ]})

        user_service.normalize_users(store)

        assert [u.id for u in store.users.list()] == ["u1"]

    def test_normalize_users_is_idempotent(self):
        store = MemoryStore(seed={"users": [make_user("u1", "a@unit.ua")]})

        assert user_service.normalize_users(store) == 0

    def test_ensure_superadmin_creates_account(self):
        store = MemoryStore()

        user = user_service.ensure_superadmin(store, "Admin@Local", "admin123")

        assert user.role == "superadmin"
        assert user.email == "admin@local"
        assert verify_password("admin123", store.users.get(user.id).password_hash)

    def test_ensure_superadmin_promotes_existing(self):
        store = MemoryStore(seed={"users": [make_user("u1", "admin@local", role="admin")]})

        user = user_service.ensure_superadmin(store, "admin@local")

        assert user.id == "u1"
        assert store.users.get("u1").role == "superadmin"

    def test_ensure_superadmin_noop_when_present(self):
        store = MemoryStore(seed={"users": [make_user("s1", "boss@unit.ua", role="superadmin")]})

        assert user_service.ensure_superadmin(store, "admin@local", "x") is None
        assert len(store.users.list()) == 1

    def test_ensure_superadmin_needs_password_to_create(self):
        with pytest.raises(ValidationError):
            user_service.ensure_superadmin(MemoryStore(), "admin@local")

# tests/test_api.py
"""HTTP tests: routing, access control and error mapping over an in-memory store."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt
from autopark.config import settings
from autopark.main import APIKeyMiddleware, app
from autopark.schemas.dispatch_request import DispatchRequest
from autopark.schemas.driver import Driver
from autopark.schemas.user import User
from autopark.schemas.vehicle import Vehicle
from autopark.store import get_store
from autopark.store.memory import MemoryStore


def make_token(role="admin", user_id="admin-1"):
    claims = {"id": user_id, "email": f"{user_id}@unit.ua", "role": role, "name": user_id}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def auth(role="admin", user_id="admin-1"):
    return {"Authorization": f"Bearer {make_token(role, user_id)}"}


@pytest.fixture
def store():
    store = MemoryStore(seed={
        "vehicles": [Vehicle(id="v1", make="УАЗ", model="469", status="base", registration_number="ВЧ-3234")],
        "drivers": [Driver(id="d1", first_name="Іван", last_name="Петренко", license_number="AB123")],
        "users": [User(id="admin-1", email="admin-1@unit.ua", name="Admin", role="superadmin", status="active")],
        "requests": [DispatchRequest(id="r1", vehicle_id="v1", driver_id="d1", from_="Base", to="Field",
                                     depart_at="2024-01-01T08:00:00Z", status="planned")],
    })
    app.dependency_overrides[get_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


@pytest.fixture
def client(store):
    return TestClient(app)


class TestDispatchEndpoint:
    def test_start_request(self, client, store):
        resp = client.put("/api/requests/r1", json={"status": "in-progress"}, headers=auth())

        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "in-progress"
        assert body["from"] == "Base"
        assert body["vehicleId"] == "v1"
        assert store.vehicles.get("v1").status == "trip"
        trips = client.get("/api/trips", params={"vehicleId": "v1"}, headers=auth("user")).json()
        assert len(trips) == 1
        assert trips[0]["distanceKm"] == 0
        assert trips[0]["notes"] == "[dispatch] старт: Base → Field (request #r1)"

    def test_bogus_status_is_400(self, client, store):
        resp = client.put("/api/requests/r1", json={"status": "bogus"}, headers=auth())

        assert resp.status_code == 400
        assert resp.json() == {"detail": "Invalid status"}
        assert store.requests.get("r1").status == "planned"

    def test_unknown_request_is_404(self, client):
        resp = client.put("/api/requests/nope", json={"status": "done"}, headers=auth())

        assert resp.status_code == 404

    def test_field_update_accepts_camel_case(self, client):
        resp = client.put("/api/requests/r1", json={"from": "HQ", "departAt": "2024-02-01T06:00:00Z"},
                          headers=auth())

        assert resp.status_code == 200
        assert resp.json()["from"] == "HQ"
        assert resp.json()["departAt"].startswith("2024-02-01T06:00:00")

    def test_requires_token(self, client):
        assert client.put("/api/requests/r1", json={"status": "done"}).status_code == 401

    def test_plain_user_forbidden(self, client):
        resp = client.put("/api/requests/r1", json={"status": "done"}, headers=auth("user", "u1"))

        assert resp.status_code == 403

    def test_bad_token(self, client):
        resp = client.get("/api/requests", headers={"Authorization": "Bearer not-a-jwt"})

        assert resp.status_code == 401

    def test_create_and_delete_request(self, client, store):
        resp = client.post("/api/requests", json={"vehicleId": "v1", "driverId": "d1", "from": "A", "to": "B"},
                           headers=auth())
        assert resp.status_code == 201
        new_id = resp.json()["id"]
        assert resp.json()["status"] == "planned"

        assert client.delete(f"/api/requests/{new_id}", headers=auth()).status_code == 204
        assert store.requests.get(new_id) is None

    def test_create_request_with_unknown_driver(self, client):
        resp = client.post("/api/requests", json={"vehicleId": "v1", "driverId": "ghost", "from": "A", "to": "B"},
                           headers=auth())

        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid driver or vehicle"


class TestVehicleEndpoints:
    def test_list_is_open(self, client):
        resp = client.get("/api/vehicles")

        assert resp.status_code == 200
        assert resp.json()[0]["registrationNumber"] == "ВЧ-3234"

    def test_create_needs_admin(self, client):
        body = {"make": "КрАЗ", "model": "6322", "registrationNumber": "ВЧ-1234"}

        assert client.post("/api/vehicles", json=body).status_code == 401
        resp = client.post("/api/vehicles", json=body, headers=auth())
        assert resp.status_code == 201
        assert resp.json()["status"] == "base"

    def test_missing_vehicle(self, client):
        assert client.get("/api/vehicles/nope").status_code == 404


class TestUserEndpoints:
    def test_registration_approval_flow(self, client, store):
        resp = client.post("/api/auth/register", json={
            "email": "New@Unit.ua", "password": "pw", "lastName": "Коваль",
            "firstName": "Олег", "middleName": "Петрович", "position": "Водій",
        })
        assert resp.status_code == 201
        assert resp.json()["status"] == "pending"
        user_id = resp.json()["user"]["id"]

        pending = client.get("/api/registrations", headers=auth()).json()
        assert [u["id"] for u in pending] == [user_id]
        assert all("passwordHash" not in u for u in pending)

        resp = client.post(f"/api/users/{user_id}/approve", headers=auth())
        assert resp.json()["status"] == "active"

    def test_register_requires_all_fields(self, client):
        resp = client.post("/api/auth/register", json={"email": "x@unit.ua", "password": "pw"})

        assert resp.status_code == 400

    def test_user_list_is_superadmin_only(self, client):
        assert client.get("/api/users", headers=auth("admin", "a2")).status_code == 403
        assert client.get("/api/users", headers=auth("superadmin")).status_code == 200

    def test_cannot_delete_self(self, client):
        resp = client.delete("/api/users/admin-1", headers=auth("superadmin"))

        assert resp.status_code == 400

    def test_me(self, client):
        resp = client.get("/api/me", headers=auth("superadmin"))

        assert resp.status_code == 200
        assert resp.json()["email"] == "admin-1@unit.ua"
        assert "passwordHash" not in resp.json()


class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json()["ok"] is True
        assert resp.json()["store"] == "memory"


class TestAPIKeyMiddleware:
    def make_app(self):
        api = FastAPI()
        api.add_middleware(APIKeyMiddleware)

        @api.get("/api/health")
        def health():
            return {"ok": True}

        @api.get("/api/vehicles")
        def vehicles():
            return []

        return api

    def test_key_required_when_configured(self):
        with patch.object(settings, "API_KEY", "s3cret"):
            client = TestClient(self.make_app())
            assert client.get("/api/vehicles").status_code == 401
            assert client.get("/api/vehicles", headers={"X-API-Key": "s3cret"}).status_code == 200
            assert client.get("/api/health").status_code == 200

    def test_disabled_without_key(self):
        with patch.object(settings, "API_KEY", None):
            client = TestClient(self.make_app())
            assert client.get("/api/vehicles").status_code == 200

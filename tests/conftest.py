"""
Shared fixtures for the API tests.

The real lifespan connects to MongoDB; tests swap it for one that wires an
in-memory mongomock database into ``app.state.db``, so every route, auth
dependency and service runs unchanged against an isolated store.
"""

import os
from contextlib import asynccontextmanager

# Must be set before config is imported anywhere.
os.environ["APP_ENV"] = "test"
os.environ.pop("OPEN_ADMIN_PROMOTION", None)

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.database.db import ensure_indexes
from app.utilities.helper import utcnow
from app.utilities.security import create_access_token, hash_password
from config import USER_COLLECTION
from main import app

ADMIN_EMAIL = "admin@dealer.test"
USER_EMAIL = "user@dealer.test"
PASSWORD = "secret1"

# bcrypt is slow on purpose; hash once per session.
PASSWORD_HASH = hash_password(PASSWORD)

CAMRY = {"brand": "Toyota", "model": "Camry", "year": 2022, "price": 25000}


def _insert_user(db, email: str, role: str) -> str:
    now = utcnow()
    result = db[USER_COLLECTION].insert_one({
        "email": email,
        "password": PASSWORD_HASH,
        "role": role,
        "createdAt": now,
        "updatedAt": now,
    })
    return str(result.inserted_id)


@pytest.fixture
def db():
    client = mongomock.MongoClient()
    database = client["autodealer_test"]
    ensure_indexes(database)
    yield database
    client.close()


@pytest.fixture
def client(db):
    @asynccontextmanager
    async def test_lifespan(app):
        app.state.db = db
        yield

    original_lifespan = app.router.lifespan_context
    app.router.lifespan_context = test_lifespan
    with TestClient(app) as test_client:
        yield test_client
    app.router.lifespan_context = original_lifespan


@pytest.fixture
def admin_headers(db) -> dict:
    user_id = _insert_user(db, ADMIN_EMAIL, "admin")
    token = create_access_token(user_id=user_id, email=ADMIN_EMAIL, role="admin")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(db) -> dict:
    user_id = _insert_user(db, USER_EMAIL, "user")
    token = create_access_token(user_id=user_id, email=USER_EMAIL, role="user")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def car(client, admin_headers) -> dict:
    resp = client.post("/api/cars", json=CAMRY, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    return resp.json()

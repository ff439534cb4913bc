from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from shophub.api.deps import (
    get_accounts_repository,
    get_password_hasher,
    get_products_repository,
    get_token_service,
)
from shophub.infrastructure.db.engine import create_schema
from shophub.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository
from shophub.infrastructure.db.repositories.products_repository import SqlProductsRepository
from shophub.infrastructure.security.password_hasher import PasswordHasher
from shophub.infrastructure.security.token_service import JwtTokenService
from shophub.main import app


TEST_JWT_SECRET = "test-signing-secret-with-enough-entropy-0123456789"


@pytest.fixture
def engine(tmp_path):
    db_engine = create_engine(
        f"sqlite:///{tmp_path / 'shophub.db'}",
        future=True,
        connect_args={"check_same_thread": False},
    )
    create_schema(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(jwt_secret=TEST_JWT_SECRET, ttl_days=30)


@pytest.fixture
def client(engine, token_service):
    password_hasher = PasswordHasher()
    app.dependency_overrides[get_accounts_repository] = lambda: SqlAccountsRepository(engine)
    app.dependency_overrides[get_products_repository] = lambda: SqlProductsRepository(engine)
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_token_service] = lambda: token_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def signup_payload() -> dict:
    return {
        "email": "alice@example.com",
        "username": "alice",
        "password": "abcdef",
        "firstname": "Alice",
        "lastname": "Liddell",
        "phone": "555-0100",
    }


@pytest.fixture
def auth_headers(client, signup_payload) -> dict:
    response = client.post("/api/auth/signup", json=signup_payload)
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}

# tests/conftest.py
import os

# Must be in place before anything imports app.core.config.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel

from app.core.config import get_settings
from app.core.sessions import SessionStore, get_session_store
from app.database import get_engine
from app.main import app

COOKIE_NAME = get_settings().SESSION_COOKIE_NAME

ANA = {
    "email": "a@x.com",
    "senha": "secret123",
    "tipo_pessoa": "fisica",
    "nome_completo": "Ana Silva",
    "cpf_cnpj": "11122233344",
}

BRUNO = {
    "email": "b@x.com",
    "senha": "outrasenha",
    "tipo_pessoa": "juridica",
    "nome_completo": "Bruno Ótica LTDA",
    "cpf_cnpj": "12345678000199",
}


@pytest.fixture
def engine():
    engine = get_engine()
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def store():
    return SessionStore(max_age=get_settings().SESSION_MAX_AGE_SECONDS)


@pytest.fixture
def client(engine, store):
    app.dependency_overrides[get_session_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def other_client(client):
    """Second browser: same app and database, separate cookie jar."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register():
    def _register(c: TestClient, data: dict = ANA, **overrides):
        return c.post("/api/cadastro", json={**data, **overrides})

    return _register


@pytest.fixture
def login():
    def _login(c: TestClient, data: dict = ANA):
        resp = c.post("/api/login", json={"email": data["email"], "senha": data["senha"]})
        assert resp.status_code == 200, resp.text
        return c.cookies.get(COOKIE_NAME)

    return _login


@pytest.fixture
def signed_in(client, register, login):
    """``client`` registered and logged in as Ana."""
    assert register(client).status_code == 201
    login(client)
    return client


def use_cookie(c: TestClient, value: str) -> None:
    c.cookies.clear()
    c.cookies.set(COOKIE_NAME, value)

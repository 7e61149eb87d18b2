"""Fixtures for API unit tests: app bound to an in-memory database, AsyncClient."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

from member_registry.infrastructure.database.session import get_db
from member_registry.main import app


@pytest.fixture
def app_with_overrides(session_factory):
    """App with the DB session dependency bound to the per-test database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_with_overrides):
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return {"x-admin-pin": os.environ["ADMIN_PIN"]}


@pytest.fixture
def ana():
    return {"nro_afiliado": "1001", "nombre_completo": "Ana Diaz", "dni": "30111222"}

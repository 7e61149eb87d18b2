"""Shared fixtures: test settings and an in-memory SQLite database."""

import os

# Settings are read once and cached; set them before anything imports the app.
os.environ.setdefault("ADMIN_PIN", "1906")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_CSV_PATH", "does-not-exist.csv")
os.environ.setdefault("CREDENTIAL_LOGO_PATH", "")

import pytest
from sqlalchemy.pool import StaticPool

from member_registry.infrastructure.database.session import (
    build_engine,
    build_sessionmaker,
    init_models,
)


@pytest.fixture
async def db_engine():
    """Fresh in-memory database per test; StaticPool keeps one shared connection."""
    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return build_sessionmaker(db_engine)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session

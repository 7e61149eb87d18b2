# member_registry/infrastructure/database/session.py

from functools import lru_cache

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from member_registry.config.settings import get_settings

Base = declarative_base()


def _engine_kwargs(database_url: str) -> dict:
    # SQLite drivers do not take a sized connection pool.
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}


def build_engine(database_url: str, **overrides) -> AsyncEngine:
    kwargs = {"echo": False, **_engine_kwargs(database_url), **overrides}
    return create_async_engine(database_url, **kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        class_=AsyncSession,
    )


@lru_cache
def get_engine() -> AsyncEngine:
    return build_engine(get_settings().database_url)


@lru_cache
def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    return build_sessionmaker(get_engine())


async def init_models(engine: AsyncEngine) -> None:
    """Create the members and audit tables if they do not exist."""
    # Registers the ORM tables on Base.metadata.
    from member_registry.infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncSession:
    async with get_sessionmaker()() as session:
        yield session

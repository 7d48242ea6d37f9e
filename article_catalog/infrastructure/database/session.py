"""SQLAlchemy database session and engine configuration."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from article_catalog.config import get_settings


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _unicode_lower(value: Any) -> Any:
    return value.casefold() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection: Any, connection_record: Any) -> None:
    """Replace SQLite's ASCII-only lower() so icontains folds every script."""
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine for a sync or async database URL.

    In-memory SQLite keeps a single shared connection so every session sees
    the same database.
    """
    async_url = _get_async_url(url)
    options: dict[str, Any] = {}
    if async_url.startswith("sqlite+aiosqlite://") and ":memory:" in async_url:
        options["poolclass"] = StaticPool
        options["connect_args"] = {"check_same_thread": False}
    engine = create_async_engine(async_url, echo=echo, **options)
    if async_url.startswith("sqlite+aiosqlite://"):
        event.listen(engine.sync_engine, "connect", _register_sqlite_functions)
    return engine


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


settings = get_settings()

engine = build_engine(
    settings.database_url,
    echo=(settings.app_env == "development" and settings.log_level_sql.upper() == "DEBUG"),
)

async_session_factory = build_session_factory(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: yields an async DB session per request."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

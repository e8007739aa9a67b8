"""Engine and session factory for the VolleyTrack store.

``init_db`` is called once from the app lifespan (and by the seed script); it
replaces any engine a previous call created, so tests can start each case on
a fresh in-memory database.
"""
import logging
import os
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./data/volleytrack.db"


class Base(DeclarativeBase):
    pass


engine = None
async_session_maker = None


def resolve_database_url(database_url: str = None) -> str:
    """URL from the argument or $DATABASE_URL, with plain sqlite upgraded to aiosqlite."""
    url = make_url(database_url or os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL))
    if url.drivername == "sqlite":
        url = url.set(drivername="sqlite+aiosqlite")
    return url.render_as_string(hide_password=False)


def _is_memory(url) -> bool:
    return url.database in (None, "", ":memory:")


def _engine_options(database_url: str) -> dict:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    if _is_memory(url):
        # every session must see the same in-memory database
        options["poolclass"] = StaticPool
    else:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return options


async def init_db(database_url: str = None) -> None:
    global engine, async_session_maker

    database_url = resolve_database_url(database_url)

    if engine is not None:
        await engine.dispose()

    engine = create_async_engine(database_url, **_engine_options(database_url))
    async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    from volleytrack import models  # noqa: F401  registers tables on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database ready at {database_url}")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session

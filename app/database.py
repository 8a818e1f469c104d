"""Database wiring for the catalog and saved builds.

One async engine serves both tables: ``components`` (the catalog) and
``builds`` (saved builds, component ids only).  The URL comes from
``settings.database_url``; request handlers get a session through get_db and
the build store opens its own through AsyncSessionLocal.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.config import settings
from app.models import Base, Build, Component  # noqa: F401 - registers both tables on Base.metadata

engine = create_async_engine(settings.database_url, echo=False)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create any missing table.  Existing tables are left alone; alembic owns schema changes."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session

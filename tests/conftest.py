import os
import tempfile

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.builder.store import BuildStore
from app.database import create_tables, get_db
from app.dependencies import get_build_store
from app.main import app
from app.models.base import Base
from app.services.build_service import SessionBuildLoader


@pytest.fixture
async def db_engine():
    db_fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(db_fd)
    test_db_url = f"sqlite+aiosqlite:///{db_path}"
    engine = create_async_engine(test_db_url, connect_args={"check_same_thread": False})
    await create_tables(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
async def db_session(db_engine) -> AsyncSession:
    session_factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def build_store(db_engine) -> BuildStore:
    """A fresh BuildStore whose loader reads from the test database."""
    return BuildStore(SessionBuildLoader(async_sessionmaker(db_engine, expire_on_commit=False)))


@pytest.fixture
async def client() -> AsyncClient:
    """HTTP client that does NOT override the DB (for endpoints that don't need DB)."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_client(db_session: AsyncSession, build_store: BuildStore) -> AsyncClient:
    """HTTP client with the DB and build store overridden to use the test SQLite DB."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_build_store] = lambda: build_store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


"""Integration test fixtures for database and HTTP client operations.

The application runs against an in-memory SQLite database. A single
connection is shared through ``StaticPool`` so the schema created here is
the one every request sees, and the app's session dependency is overridden
to hand out the test's own session.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.moneybook.api.dependencies.db import get_db_session
from src.moneybook.main import create_app
from src.moneybook.models.enums import TenantRole
from src.moneybook.models.public import Tenant, User
from tests.helpers import auth_headers, create_member, create_tenant


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory database with all tables created."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    event.listen(test_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session shared by the test body and every request it makes.

    Services commit through it, so data written by a request is visible to
    the test and vice versa.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def app(db_session: AsyncSession) -> FastAPI:
    application = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    application.dependency_overrides[get_db_session] = _get_test_session
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def tenant(db_session: AsyncSession) -> Tenant:
    return await create_tenant(db_session)


@pytest.fixture
async def other_tenant(db_session: AsyncSession) -> Tenant:
    return await create_tenant(db_session)


@pytest.fixture
async def owner(db_session: AsyncSession, tenant: Tenant) -> User:
    return await create_member(db_session, tenant, TenantRole.OWNER, full_name="Olive Owner")


@pytest.fixture
async def editor(db_session: AsyncSession, tenant: Tenant) -> User:
    return await create_member(db_session, tenant, TenantRole.EDITOR, full_name="Eddie Editor")


@pytest.fixture
async def viewer(db_session: AsyncSession, tenant: Tenant) -> User:
    return await create_member(db_session, tenant, TenantRole.VIEWER, full_name="Vera Viewer")


@pytest.fixture
async def owner_headers(db_session: AsyncSession, owner: User) -> dict[str, str]:
    return await auth_headers(db_session, owner)


@pytest.fixture
async def editor_headers(db_session: AsyncSession, editor: User) -> dict[str, str]:
    return await auth_headers(db_session, editor)


@pytest.fixture
async def viewer_headers(db_session: AsyncSession, viewer: User) -> dict[str, str]:
    return await auth_headers(db_session, viewer)

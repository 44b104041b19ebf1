"""
Pytest fixtures: in-memory SQLite database, FastAPI app and HTTP client.
"""
from collections.abc import AsyncGenerator
from datetime import datetime, timezone

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from contact_manager.core.dto.contact import ContactModel
from contact_manager.core.repositories.contact_repository import ContactRepository
from contact_manager.infrastructure.database.adapters.pg_connection import DatabaseConnection
from contact_manager.main import create_app


@pytest_asyncio.fixture
async def db_connection() -> AsyncGenerator[DatabaseConnection, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    connection = DatabaseConnection(engine=engine)
    await connection.init_db()
    yield connection
    await connection.close()


@pytest_asyncio.fixture
async def db_session(db_connection: DatabaseConnection) -> AsyncGenerator[AsyncSession, None]:
    session = await db_connection.get_session()
    try:
        yield session
    finally:
        await session.close()


@pytest.fixture
def repository(db_session: AsyncSession) -> ContactRepository:
    return ContactRepository(session=db_session)


@pytest.fixture
def app(db_connection: DatabaseConnection):
    application = create_app()
    application.state.db_connection = db_connection
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://localhost:5000",
    ) as http_client:
        yield http_client


@pytest.fixture
def contact_payload() -> dict[str, str]:
    return {
        "name": "Jo Lin",
        "email": "JO@EX.com",
        "phone": "555 123 4567",
        "message": "Met at the conference",
    }


@pytest.fixture
def make_contact():
    """Фабрика ContactModel для клиентских тестов"""
    counter = iter(range(1, 1000))

    def factory(**overrides) -> ContactModel:
        index = next(counter)
        created_at = datetime(2026, 1, index, 12, 0, tzinfo=timezone.utc)
        values = {
            "id": f"{index:024x}",
            "name": f"Contact {index}",
            "email": f"contact{index}@ex.com",
            "phone": f"{5550000000 + index}",
            "message": "",
            "created_at": created_at,
            "updated_at": created_at,
        }
        values.update(overrides)
        return ContactModel(**values)

    return factory

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from app.core.database import Base, create_sessionmaker, get_sessionmaker
from app.main import app
from app import models  # noqa: F401

BASE_URL = "http://127.0.0.1:8080"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    # file backed so every session sees the same tables
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'books.db'}", future=True
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return create_sessionmaker(test_engine)


@pytest.fixture(scope="function")
async def client(session_factory):
    async def override_get_sessionmaker():
        return session_factory

    app.dependency_overrides[get_sessionmaker] = override_get_sessionmaker
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def book_creation_data():
    return {"name": "The Go Programming Language", "auther": "Donovan", "isArchived": False}


@pytest.fixture(scope="function")
async def mock_book(client, book_creation_data):
    response = await client.post("/api/books", json=book_creation_data)
    return response.json()

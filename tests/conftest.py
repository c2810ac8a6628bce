import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base, get_db
from app.models.user import User

TEST_DATABASE_URL = "sqlite+aiosqlite://"

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
async def engine_test():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()

@pytest.fixture
def session_factory(engine_test):
    return async_sessionmaker(engine_test, class_=AsyncSession, expire_on_commit=False)

@pytest.fixture
async def users(session_factory):
    async with session_factory() as session:
        alice = User(email="alice@example.com")
        bob = User(email="bob@example.com")
        session.add_all([alice, bob])
        await session.commit()
        return alice, bob

@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session
    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

@pytest.fixture
async def create_todo(client):
    async def _create(name, user_id):
        res = await client.post("/todos", json={"name": name, "user_id": user_id})
        assert res.status_code == 201
        return res.json()
    return _create

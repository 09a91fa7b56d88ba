import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.session import close_db, init_db
from app.repositories import UserRepository
from app.services.user import UserService

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """
    A fresh in-memory SQLite database for every test.
    StaticPool keeps the single connection (and so the database) alive.
    """
    test_engine = create_async_engine(TEST_DB_URL, poolclass=StaticPool)
    await init_db(test_engine)
    yield test_engine
    await close_db(test_engine)


@pytest_asyncio.fixture
async def session(engine):
    async with async_sessionmaker(engine, expire_on_commit=False)() as db_session:
        yield db_session


@pytest_asyncio.fixture
async def user_repo(session):
    return UserRepository(session)


@pytest_asyncio.fixture
async def user_service(session, user_repo):
    return UserService(session, user_repo)

"""
Shared fixtures: a fresh SQLite store per test plus the layers built on it.
"""
from datetime import date

import httpx
import pytest
from databases import Database

from tracker.app import app
from tracker.modules.database import get_database, init_db
from tracker.modules.users.domain.user import User
from tracker.modules.users.repositories.user_repository import UserRepository
from tracker.modules.users.services.user_service import UserService


@pytest.fixture
async def database(tmp_path):
    """Connected database with the schema created."""
    db = Database(f"sqlite:///{tmp_path / 'tracker.db'}")
    await db.connect()
    await init_db(db)
    yield db
    await db.disconnect()


@pytest.fixture
def repository(database):
    return UserRepository(database)


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
async def client(database):
    """HTTP client talking to the app in-process, bound to the test database."""
    app.dependency_overrides[get_database] = lambda: database
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def ann():
    """Unsaved sample user."""
    return User(
        first_name="Ann",
        last_name="Lee",
        birthdate=date(1990, 1, 1),
        email="ann@x.com",
    )

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.db.Connection import database
from app.db.Connection.database import JSONStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "database.json"


@pytest.fixture
def store(db_path):
    """Creates a fresh JSON-backed store for each test."""
    store = JSONStore(str(db_path))
    store.load()
    return store


@pytest.fixture
def client(store):
    """Creates a test client with overridden store dependency."""
    app.dependency_overrides[database.get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]

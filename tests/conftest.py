import asyncio
import pytest
from starlette.testclient import TestClient
from main import app
from core.registry import TableRegistry
from core.snapshot import SnapshotFile
from core.store import TableStore


@pytest.fixture(scope="function")
def storage_file(tmp_path):
    """Snapshot path inside a per-test directory"""
    return str(tmp_path / "storefront_db.json")


@pytest.fixture(scope="function")
def store(storage_file):
    """Seeded store isolated from every other test"""
    table_store = TableStore(TableRegistry(), SnapshotFile(storage_file))
    table_store.load()
    return table_store


@pytest.fixture(scope="function")
def run():
    return asyncio.run


@pytest.fixture(scope="function")
def client(storage_file):
    """Create a test client backed by a fresh snapshot file"""
    app.state.storage_file = storage_file
    with TestClient(app) as test_client:
        yield test_client

import pytest
from fastapi.testclient import TestClient

from items_api.main import app
from items_api.services.item_repository import ItemRepository, get_item_repository
from items_api.services.storage import JsonFileStorage


@pytest.fixture
def anyio_backend():
    return 'asyncio'


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / 'data.json'


@pytest.fixture
def repository(data_file):
    return ItemRepository(JsonFileStorage(data_file))


@pytest.fixture
def client(repository):
    app.dependency_overrides[get_item_repository] = lambda: repository
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

import pytest
from fastapi.testclient import TestClient

from contact_manager.main import create_app
from contact_manager.store import ContactStore


@pytest.fixture
def store():
    return ContactStore.with_sample_data()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def ann_lee():
    return {
        "first_name": "Ann",
        "last_name": "Lee",
        "phone": "555-0000",
        "email": "a@x.com",
    }

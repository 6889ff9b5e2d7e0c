import pytest
from fastapi.testclient import TestClient

from contacts_api.app.core.config import Settings
from contacts_api.app.core.db import get_connection, init_db
from contacts_api.app.main import create_app
from contacts_api.app.services.contact_service import ContactService
from contacts_api.app.services.store import ContactStore


@pytest.fixture
def test_settings(tmp_path):
    return Settings(database_url=str(tmp_path / "contacts.db"), log_level="DEBUG")


@pytest.fixture
def conn(test_settings):
    connection = get_connection(test_settings.database_url)
    init_db(connection)
    yield connection
    connection.close()


@pytest.fixture
def store(conn):
    return ContactStore(conn)


@pytest.fixture
def service(store):
    return ContactService(store)


@pytest.fixture
def client(test_settings):
    """TestClient over a fresh app; entering it runs the startup hooks."""
    with TestClient(create_app(test_settings)) as c:
        yield c

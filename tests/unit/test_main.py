import sqlite3

import pytest
from fastapi.testclient import TestClient

from contacts_api.app import main


class RecordingConnection:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_connection_closed_when_migrations_fail(monkeypatch, test_settings):
    conn = RecordingConnection()

    def failing_init_db(connection):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(main, "get_connection", lambda url: conn)
    monkeypatch.setattr(main, "init_db", failing_init_db)

    with pytest.raises(sqlite3.OperationalError):
        with TestClient(main.create_app(test_settings)):
            pass
    assert conn.closed


def test_connection_closed_on_shutdown(monkeypatch, test_settings):
    opened = []
    real_get_connection = main.get_connection

    def tracking_get_connection(url):
        connection = real_get_connection(url)
        opened.append(connection)
        return connection

    monkeypatch.setattr(main, "get_connection", tracking_get_connection)
    with TestClient(main.create_app(test_settings)) as client:
        assert client.get("/contacts/").status_code == 200

    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")

"""
This file contains shared fixtures for the test suite.
"""

import pytest
from sqlalchemy import create_engine, event, text

from smilelib.database.config.connection_engine import connect
from smilelib.database.daos.row_dao import RowDao
from smilelib.database.entities.profile import DatabaseProfile


def _create_users_table(db_file, rows):
    engine = create_engine(f"sqlite:///{db_file}")
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE users (id INTEGER, name TEXT, age INTEGER)"))
        for row in rows:
            conn.execute(text("INSERT INTO users (id, name, age) VALUES (:id, :name, :age)"), row)
    engine.dispose()


@pytest.fixture
def profile(tmp_path):
    """Embedded profile for a database holding users(123, 'Ann', 30)."""
    db_file = tmp_path / "users.db"
    _create_users_table(db_file, [{"id": 123, "name": "Ann", "age": 30}])
    return DatabaseProfile(engine_kind="embedded", database=str(db_file))


@pytest.fixture
def empty_profile(tmp_path):
    """Embedded profile for a database with an empty users table."""
    db_file = tmp_path / "empty.db"
    _create_users_table(db_file, [])
    return DatabaseProfile(engine_kind="embedded", database=str(db_file))


@pytest.fixture
def dao(profile):
    return RowDao(profile)


class CountingConnector:
    """
    Connector double that opens real connections and records every
    statement sent to the driver.
    """

    def __init__(self):
        self.connections = 0
        self.statements = []
        self.contexts = []

    def __call__(self, profile):
        self.connections += 1
        conn = connect(profile)
        event.listen(conn, "before_cursor_execute", self._record)
        return conn

    def _record(self, conn, cursor, statement, parameters, context, executemany):
        self.statements.append((statement, parameters))
        self.contexts.append(context)


@pytest.fixture
def counting_connector():
    return CountingConnector()

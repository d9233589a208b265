"""
Connection Engine (SQLAlchemy)

Purpose
-------
Turns a `DatabaseProfile` into a live SQLAlchemy `Connection`:
- Builds the connection URL for the profile's engine kind.
- Creates an Engine without pooling and opens exactly one connection.

Notes
-----
- Uses `URL.create(...)` so credentials are never pasted into a string by hand
  and special characters in passwords are escaped correctly.
- Networked stores: `<driver>://username:password@host:port/database`.
- Embedded stores: `sqlite:///<file path>`; no authentication.
- `NullPool` means every `connect()` opens a fresh driver connection and
  closing the `Connection` really closes it. Callers own the connection and
  must close it; `helpers.connectionManagement.scoped_connection` does that.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from smilelib.database.entities.profile import DatabaseProfile, EngineKind
from smilelib.errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


def build_connection_url(profile: DatabaseProfile) -> URL:
    """
    Construct the SQLAlchemy connection URL for ``profile``.

    Raises
    ------
    UnsupportedEngine
        If the profile's engine kind is unknown.
    """
    kind = profile.kind
    if kind is EngineKind.NETWORKED:
        password = profile.password.get_secret_value() if profile.password is not None else None
        return URL.create(
            drivername=profile.driver,     # e.g., "mysql+pymysql"
            username=profile.username,     # Database username
            password=password,             # Database password
            host=profile.host,             # Hostname or IP of the DB server
            port=profile.port,             # Server port
            database=profile.database,     # Name of the database
        )
    # embedded: only the file path matters
    return URL.create(drivername="sqlite", database=profile.database)


def connect(profile: DatabaseProfile) -> Connection:
    """
    Open a new connection for ``profile``.

    Returns
    -------
    Connection
        A fresh, unpooled SQLAlchemy connection. The caller must close it.

    Raises
    ------
    UnsupportedEngine
        Unknown engine kind.
    DatabaseConnectionError
        The driver could not connect (bad credentials, unreachable host,
        bad file path, missing driver).
    """
    url = build_connection_url(profile)
    try:
        engine = create_engine(url, poolclass=NullPool)
        return engine.connect()
    except (SQLAlchemyError, ImportError) as e:
        logger.error("Could not connect to %s: %s", url.render_as_string(hide_password=True), e)
        raise DatabaseConnectionError(
            f"Could not connect to {url.render_as_string(hide_password=True)}: {e}"
        ) from e

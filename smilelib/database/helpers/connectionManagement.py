"""
Database Connection Management
==============================

This module provides the scoped acquisition used by every DAO call: a
connection is opened when the ``with`` block starts and is always closed
when it ends, whether the block returns normally or raises.

Key features
~~~~~~~~~~~~
- One fresh connection per block, never shared between calls
- Optional commit on success for write statements
- Rollback when the block raises
- Clean connection closure on every exit path

"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterator

from sqlalchemy.engine import Connection

from smilelib.database.config.connection_engine import connect
from smilelib.database.entities.profile import DatabaseProfile

logger = logging.getLogger(__name__)

Connector = Callable[[DatabaseProfile], Connection]


@contextmanager
def scoped_connection(
    profile: DatabaseProfile,
    commit: bool = False,
    connector: Connector = connect,
) -> Iterator[Connection]:
    """
    Open a connection for ``profile`` for the duration of a ``with`` block.

    Parameters
    ----------
    profile : DatabaseProfile
        Profile to connect with.
    commit : bool
        Commit the implicit transaction when the block exits normally.
    connector : callable
        Function that opens the connection; defaults to
        :func:`smilelib.database.config.connection_engine.connect`.

    Example
    -------
    >>> with scoped_connection(profile, commit=True) as conn:
    ...     conn.execute(text("UPDATE users SET age = :age WHERE id = :id"), {"age": 31, "id": 123})
    """
    conn = connector(profile)
    try:
        yield conn
        if commit:
            conn.commit()
    except Exception:
        conn.rollback()  # Rollback on failure
        raise
    finally:
        conn.close()
        logger.debug("Released database connection")

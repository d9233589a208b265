"""
Row DAO

Purpose
-------
Generic single-table data access keyed by a primary-key column:
- Fetch a row (all columns or a chosen list) by primary key
- Fetch one column converted to a Python type
- Update a dynamic set of columns by primary key
- Run raw statements when the shapes above are not enough

Design
------
- Every method opens its own connection through ``scoped_connection`` and
  releases it before returning. No connection, result or row handle is kept.
- Table and column names are trusted identifiers supplied by the caller and
  go into the SQL text. Values, including the primary-key value, are always
  bound parameters.
- Statement text and its ordered parameter list are built together by
  ``build_select_statement`` / ``build_update_statement``; the n-th
  placeholder is always bound to the n-th parameter.
- The primary-key column is not assumed unique. If several rows match, the
  first one the store returns is used.

Usage
-----
.. code-block:: python

    from smilelib.database.entities.profile import DatabaseProfile
    from smilelib.database.daos.row_dao import RowDao

    dao = RowDao(DatabaseProfile(engine_kind="embedded", database="app.db"))

    dao.fetchRow("users", "id", 123, "name", "age")   # {"name": "Ann", "age": 30}
    dao.fetchRow("users", "id", 123)                  # every column, store order
    dao.fetchScalar("users", "id", 123, "age", int)   # 30
    dao.updateRow("users", "id", 123, {"age": 31})    # 1

Error Handling
--------------
- Connection failures raise ``DatabaseConnectionError``.
- Read failures raise ``QueryError``; write failures raise ``UpdateError``.
  Both are logged once here and chained to the driver exception.
- ``updateRow`` with no column values raises ``EmptyUpdate`` before any
  connection is opened.
- ``executeRaw`` is the exception: it logs the failure and returns ``-1``.

Return Values
-------------
- fetchRow(...) -> dict | None (None when no row matches)
- fetchScalar(...) -> value | None
- updateRow(...) -> int (rows reported as modified, 0 is valid)
- executeRaw(...) -> int (-1 on failure)
- executeRawQuery(...) -> list[dict]
"""

import logging
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from smilelib.database.config.connection_engine import connect
from smilelib.database.entities.cell import coerce, to_cell
from smilelib.database.entities.profile import DatabaseProfile
from smilelib.database.helpers.connectionManagement import Connector, scoped_connection
from smilelib.errors import EmptyUpdate, QueryError, SmileLibError, UpdateError

logger = logging.getLogger(__name__)


class Statement(NamedTuple):
    """SQL text with its bound parameters in placeholder order."""

    sql: str
    params: List[Any]

    def bind_map(self) -> Dict[str, Any]:
        """Parameters keyed by placeholder name (``p0``, ``p1``, ...)."""
        return {f"p{index}": value for index, value in enumerate(self.params)}


def build_select_statement(
    table: str, primary_key_column: str, primary_key_value: Any, columns: Sequence[str] = ()
) -> Statement:
    """
    Build ``SELECT <columns or *> FROM <table> WHERE <pk> = :p0``.

    Returns
    -------
    Statement
        The SQL text and ``[primary_key_value]``.
    """
    column_list = ", ".join(columns) if columns else "*"
    sql = f"SELECT {column_list} FROM {table} WHERE {primary_key_column} = :p0"
    return Statement(sql, [primary_key_value])


def build_update_statement(
    table: str, primary_key_column: str, primary_key_value: Any, column_values: Mapping[str, Any]
) -> Statement:
    """
    Build ``UPDATE <table> SET c1 = :p0, c2 = :p1 ... WHERE <pk> = :pN``.

    The mapping is traversed once; the same traversal produces both the SET
    clause and the parameter list, and the primary-key value is bound last.

    Raises
    ------
    EmptyUpdate
        If ``column_values`` is empty.
    """
    if not column_values:
        raise EmptyUpdate(table)
    items = list(column_values.items())
    assignments = ", ".join(f"{column} = :p{index}" for index, (column, _) in enumerate(items))
    params = [value for _, value in items]
    params.append(primary_key_value)
    sql = f"UPDATE {table} SET {assignments} WHERE {primary_key_column} = :p{len(items)}"
    return Statement(sql, params)


class RowDao:
    """
    Data Access Object (DAO) for primary-key reads and updates on any table.
    """

    def __init__(self, profile: DatabaseProfile, connector: Connector = connect):
        """
        Parameters
        ----------
        profile : DatabaseProfile
            Store to talk to.
        connector : callable, optional
            Opens a connection for a profile. Defaults to the SQLAlchemy
            connection engine.
        """
        self.profile = profile
        self.connector = connector

    def fetchRow(
        self, table: str, primary_key_column: str, primary_key_value: Any, *columns: str
    ) -> Optional[Dict[str, Any]]:
        """
        Fetch one row by primary key.

        Parameters
        ----------
        table : str
            Table name.
        primary_key_column : str
            Column compared with ``primary_key_value``.
        primary_key_value : Any
            Value looked up; always bound, never pasted into SQL.
        *columns : str
            Columns to return, in this order. With none, every column is
            returned in the order the store reports them.

        Returns
        -------
        dict | None
            Column name to cell value, or None if no row matches.

        Raises
        ------
        QueryError
            If the statement fails or a requested column is absent from the result.
        """
        statement = build_select_statement(table, primary_key_column, primary_key_value, columns)
        try:
            with scoped_connection(self.profile, connector=self.connector) as conn:
                result = conn.execute(text(statement.sql), statement.bind_map())
                labels = list(result.keys())
                row = result.first()
        except SQLAlchemyError as e:
            logger.error("Error in RowDao.fetchRow. Error Message: %s", e)
            raise QueryError(f"Query on {table!r} failed: {e}") from e

        if row is None:
            return None
        if not columns:
            return {label: to_cell(value) for label, value in zip(labels, row)}

        mapping = row._mapping
        fetched = {}
        for column in columns:
            try:
                fetched[column] = to_cell(mapping[column])
            except KeyError as e:
                raise QueryError(f"Column {column!r} not found in result of {table!r}") from e
        return fetched

    def fetchScalar(
        self, table: str, primary_key_column: str, primary_key_value: Any, column: str, target_type: type
    ) -> Optional[Any]:
        """
        Fetch a single column by primary key, converted to ``target_type``.

        Parameters
        ----------
        column : str
            Column to read.
        target_type : type
            ``str``, ``int``, ``float``, ``bool`` or ``bytes``.

        Returns
        -------
        Any | None
            The converted value; None when no row matches or the cell is NULL.

        Raises
        ------
        QueryError
            If the read fails.
        TypeMismatchError
            If the cell cannot be converted to ``target_type``.
        """
        row = self.fetchRow(table, primary_key_column, primary_key_value, column)
        if row is None or column not in row:
            return None
        return coerce(row[column], target_type, column)

    def updateRow(
        self, table: str, primary_key_column: str, primary_key_value: Any, column_values: Mapping[str, Any]
    ) -> int:
        """
        Update the given columns of the rows matching the primary key.

        Parameters
        ----------
        column_values : Mapping[str, Any]
            Column name to new value; must not be empty.

        Returns
        -------
        int
            Number of rows the store reports as modified (0 when nothing matched).

        Raises
        ------
        EmptyUpdate
            If ``column_values`` is empty. No statement is issued.
        UpdateError
            If the statement fails. The store is left unchanged.
        """
        statement = build_update_statement(table, primary_key_column, primary_key_value, column_values)
        try:
            with scoped_connection(self.profile, commit=True, connector=self.connector) as conn:
                result = conn.execute(text(statement.sql), statement.bind_map())
                affected = result.rowcount
        except SQLAlchemyError as e:
            logger.error("Error in RowDao.updateRow. Error Message: %s", e)
            raise UpdateError(f"Update on {table!r} failed: {e}") from e
        return affected

    def executeRaw(self, sql: str) -> int:
        """
        Run a raw write statement (INSERT, UPDATE, DELETE, DDL) and commit.

        The statement is passed to the driver as is with ``no_parameters``,
        so a literal ``%`` is never read as a format placeholder.

        Returns
        -------
        int
            Rows affected, or ``-1`` if the statement or the connection
            failed. The failure is logged, not raised; use ``updateRow`` when
            the error detail matters.
        """
        try:
            with scoped_connection(self.profile, commit=True, connector=self.connector) as conn:
                affected = conn.execution_options(no_parameters=True).exec_driver_sql(sql).rowcount
        except (SQLAlchemyError, SmileLibError) as e:
            logger.error("Error in RowDao.executeRaw. Error Message: %s", e)
            return -1
        return affected

    def executeRawQuery(self, sql: str) -> List[Dict[str, Any]]:
        """
        Run a raw read statement and return every row as a dict.

        All rows are read before the connection is released.

        Raises
        ------
        QueryError
            If the statement fails or does not return rows.
        """
        try:
            with scoped_connection(self.profile, connector=self.connector) as conn:
                result = conn.execution_options(no_parameters=True).exec_driver_sql(sql)
                labels = list(result.keys())
                rows = result.fetchall()
        except SQLAlchemyError as e:
            logger.error("Error in RowDao.executeRawQuery. Error Message: %s", e)
            raise QueryError(f"Raw query failed: {e}") from e
        return [{label: to_cell(value) for label, value in zip(labels, row)} for row in rows]

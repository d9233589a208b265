"""
The `database` package is responsible for all interactions with relational stores.
It provides configuration, profile and value definitions, data access, and
utilities that open and release connections.

Contents:
    - config:
        Settings and the connection engine that turns a profile into a
        live SQLAlchemy connection.

    - entities:
        ``DatabaseProfile`` and the cell value vocabulary used by rows.

    - daos:
        ``RowDao`` with primary-key reads, typed reads and updates.

    - helpers:
        Scoped connection handling shared by the DAOs.
"""

"""
The `helpers` package provides utilities that support database operations.

Contents
--------
- connectionManagement
    Provides ``scoped_connection``, a context manager that:
        - opens one connection per call through the connection engine
        - commits on success when asked to
        - rolls back on errors
        - always closes the connection, so nothing outlives the call
"""

"""
The `daos` package contains the Data Access Objects of the library.

Contents:
    - row_dao: ``RowDao`` for primary-key reads and updates on any table,
      plus the pure statement builders it uses
"""

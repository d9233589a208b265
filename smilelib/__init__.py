"""
`smilelib` is a small utility layer for host applications.

Contents:
    - documents:
        Dotted-path access to parsed configuration trees, and YAML/JSON
        config file helpers.

    - database:
        Settings, connection engine, and a generic DAO for primary-key reads
        and updates with dynamic column lists.

    - logger:
        Logging façade with colored console output, a shutdown log file and
        a Discord webhook for errors.

    - lifecycle:
        Explicit enable / disable hooks for the host.

    - errors:
        The library's exception hierarchy.
"""

__version__ = "0.1.0"

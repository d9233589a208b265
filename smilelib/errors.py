"""
Error taxonomy
==============

Every failure raised by ``smilelib`` derives from :class:`SmileLibError`, so a
host can catch the whole family in one place while still distinguishing the
individual cases below.

Document side
-------------
- ``InvalidPath``      malformed or empty dotted path
- ``PathConflict``     an intermediate segment is missing or not a mapping
- ``ConfigFileError``  a YAML/JSON file could not be read or written

Database side
-------------
- ``UnsupportedEngine``        unknown engine kind in a profile
- ``DatabaseConnectionError``  the driver refused to connect
- ``QueryError``               a read statement failed
- ``TypeMismatchError``        a cell cannot be coerced to the requested type
- ``EmptyUpdate``              update requested with no column values
- ``UpdateError``              a write statement failed
"""


class SmileLibError(Exception):
    """Base class for all library errors."""


class InvalidPath(SmileLibError, ValueError):
    """Raised when a dotted path is empty or has an empty segment."""

    def __init__(self, path: str, reason: str = "path must not be empty"):
        self.path = path
        super().__init__(f"Invalid path {path!r}: {reason}")


class PathConflict(SmileLibError):
    """
    Raised when a segment before the last one does not resolve to a mapping.

    Attributes
    ----------
    segment : str
        The offending segment.
    path : str
        The full dotted path being resolved.
    """

    def __init__(self, segment: str, path: str, found=None, missing: bool = False):
        self.segment = segment
        self.path = path
        if missing:
            detail = "is missing"
        else:
            detail = f"holds a {type(found).__name__}, not a mapping"
        super().__init__(f"Key {segment!r} {detail}, cannot set {path!r}")


class ConfigFileError(SmileLibError):
    """Raised when a configuration file cannot be read, parsed or written."""

    def __init__(self, file_path, action: str):
        self.file_path = str(file_path)
        super().__init__(f"Failed to {action} config file: {self.file_path}")


class UnsupportedEngine(SmileLibError):
    """Raised when a profile names an engine kind that has no connection recipe."""

    def __init__(self, engine_kind):
        self.engine_kind = engine_kind
        super().__init__(f"Unsupported database engine: {engine_kind!r}")


class DatabaseConnectionError(SmileLibError, ConnectionError):
    """Raised when the driver fails to open a connection."""


class QueryError(SmileLibError):
    """Raised when preparing or executing a read statement fails."""


class TypeMismatchError(SmileLibError, TypeError):
    """
    Raised when a cell that was read successfully cannot be converted.

    Attributes
    ----------
    column : str
        Column the cell came from.
    requested : str
        Name of the requested target type.
    actual : str
        Name of the cell's runtime type.
    """

    def __init__(self, column: str, requested, actual):
        self.column = column
        self.requested = getattr(requested, "__name__", str(requested))
        self.actual = getattr(actual, "__name__", str(actual))
        super().__init__(
            f"Column {column!r} holds {self.actual}, cannot convert to {self.requested}"
        )


class EmptyUpdate(SmileLibError, ValueError):
    """Raised when an update is requested without any column values."""

    def __init__(self, table: str):
        self.table = table
        super().__init__(f"No column values given for update of {table!r}")


class UpdateError(SmileLibError):
    """Raised when preparing or executing a write statement fails."""

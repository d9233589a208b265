"""
Cell Values
===========

Rows returned by the DAO only ever hold values of six kinds:

============  ==========================
CellKind      Python value
============  ==========================
``TEXT``      ``str``
``INTEGER``   ``int``
``FLOAT``     ``float``
``BOOLEAN``   ``bool``
``NULL``      ``None``
``BINARY``    ``bytes``
============  ==========================

``to_cell`` folds whatever the driver hands back into that vocabulary, and
``coerce`` converts a cell to a requested Python type through an explicit
table. Any pair missing from the table is a ``TypeMismatchError``.
"""

import datetime
import uuid
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Optional

from smilelib.errors import QueryError, TypeMismatchError


class CellKind(str, Enum):
    """Closed set of cell value kinds."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    BINARY = "binary"


def kind_of(value: Any) -> CellKind:
    """Classify an already normalized cell value."""
    if value is None:
        return CellKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return CellKind.BOOLEAN
    if isinstance(value, int):
        return CellKind.INTEGER
    if isinstance(value, float):
        return CellKind.FLOAT
    if isinstance(value, str):
        return CellKind.TEXT
    if isinstance(value, bytes):
        return CellKind.BINARY
    raise QueryError(f"Unsupported cell type: {type(value).__name__}")


def to_cell(value: Any) -> Any:
    """
    Normalize a raw driver value into one of the six cell kinds.

    Integral decimals become ints and fractional ones floats (a fractional
    DECIMAL wider than a double loses precision), temporal values become
    ISO 8601 text, UUIDs become text and binary buffers become ``bytes``.

    Raises
    ------
    QueryError
        If the driver returned a type outside this vocabulary.
    """
    if value is None or isinstance(value, (bool, int, float, str, bytes)):
        return value
    if isinstance(value, Decimal):
        # integral decimals keep full precision as int
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, uuid.UUID):
        return str(value)
    raise QueryError(f"Unsupported cell type: {type(value).__name__}")


def _float_to_int(value: float) -> int:
    if not value.is_integer():
        raise ValueError(value)
    return int(value)


def _int_to_bool(value: int) -> bool:
    if value not in (0, 1):
        raise ValueError(value)
    return bool(value)


def _text_to_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1"):
        return True
    if lowered in ("false", "0"):
        return False
    raise ValueError(value)


def _text_to_int(value: str) -> int:
    return int(value.strip())


def _text_to_float(value: str) -> float:
    return float(value.strip())


def _identity(value: Any) -> Any:
    return value


CONVERSIONS: Dict[type, Dict[CellKind, Callable[[Any], Any]]] = {
    str: {
        CellKind.TEXT: _identity,
        CellKind.INTEGER: str,
        CellKind.FLOAT: str,
        CellKind.BOOLEAN: str,
    },
    int: {
        CellKind.INTEGER: _identity,
        CellKind.BOOLEAN: int,
        CellKind.FLOAT: _float_to_int,
        CellKind.TEXT: _text_to_int,
    },
    float: {
        CellKind.FLOAT: _identity,
        CellKind.INTEGER: float,
        CellKind.TEXT: _text_to_float,
    },
    bool: {
        CellKind.BOOLEAN: _identity,
        CellKind.INTEGER: _int_to_bool,
        CellKind.TEXT: _text_to_bool,
    },
    bytes: {
        CellKind.BINARY: _identity,
        CellKind.TEXT: lambda value: value.encode("utf-8"),
    },
}
"""Conversion table: target type -> source cell kind -> converter."""


def coerce(value: Any, target: type, column: str) -> Optional[Any]:
    """
    Convert a cell to ``target``.

    Parameters
    ----------
    value : Any
        A normalized cell value (see :func:`to_cell`).
    target : type
        One of ``str``, ``int``, ``float``, ``bool``, ``bytes``.
    column : str
        Column name, used in the error message.

    Returns
    -------
    Any | None
        The converted value; ``None`` for a NULL cell whatever the target.

    Raises
    ------
    TypeMismatchError
        If the target is not supported or the cell cannot be converted.
    """
    kind = kind_of(value)
    if kind is CellKind.NULL:
        return None
    converters = CONVERSIONS.get(target)
    converter = converters.get(kind) if converters is not None else None
    if converter is None:
        raise TypeMismatchError(column, target, type(value))
    try:
        return converter(value)
    except (ValueError, UnicodeError) as e:
        raise TypeMismatchError(column, target, type(value)) from e

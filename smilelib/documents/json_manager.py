"""
JSON Files
==========

Small helpers for treating a JSON file like a top-level object: read it,
write it, change or drop one key. Files are read and written as UTF-8 and
pretty printed.
"""

import json
from pathlib import Path
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel

from smilelib.errors import ConfigFileError

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_json(file_path) -> Any:
    """Parse a JSON file. An empty file gives ``None``."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError as e:
        raise ConfigFileError(file_path, "find") from e
    except OSError as e:
        raise ConfigFileError(file_path, "read") from e
    if not content.strip():
        return None
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigFileError(file_path, "parse") from e


def write_json(file_path, data: Any) -> None:
    """Write ``data`` to ``file_path``, creating parent directories if needed."""
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except (OSError, TypeError) as e:
        raise ConfigFileError(file_path, "write") from e


def create_json_file(file_path, initial_data: Any) -> bool:
    """Create the file with ``initial_data`` if it does not exist yet."""
    if Path(file_path).exists():
        return False
    write_json(file_path, initial_data)
    return True


def update_json_value(file_path, key: str, value: Any) -> None:
    """
    Set a top-level ``key``. A document that is not an object is replaced by
    an empty object first.
    """
    document = read_json(file_path)
    if not isinstance(document, dict):
        document = {}
    document[key] = value
    write_json(file_path, document)


def delete_json_key(file_path, key: str) -> None:
    """Remove a top-level ``key``. Non-object documents are left alone."""
    document = read_json(file_path)
    if isinstance(document, dict):
        document.pop(key, None)
        write_json(file_path, document)


def from_json(file_path, model: Type[ModelT]) -> Optional[ModelT]:
    """Read a JSON file into ``model``; ``None`` for an empty file."""
    document = read_json(file_path)
    if document is None:
        return None
    return model.model_validate(document)

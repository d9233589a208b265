"""
YAML Config Files
=================

Thin file layer around PyYAML for configuration documents.

Functions
---------
- ``read_config``          parse a file into a dict (empty file -> ``{}``)
- ``load_config``          parse and validate into a pydantic model
- ``write_config``         dump data, replacing the file content
- ``create_config``        write initial data only if the file does not exist
- ``update_config_value``  read, set one dotted key, write back

Output is block style with a 2-space indent and keys kept in insertion order,
so round-tripping a hand-written file keeps it readable.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml
from pydantic import BaseModel

from smilelib.documents.dotted_path import set_value
from smilelib.errors import ConfigFileError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_config(file_path) -> Dict[str, Any]:
    """
    Read a YAML file and return its content as a dict.

    Raises
    ------
    ConfigFileError
        If the file is missing, unreadable or not valid YAML.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigFileError(file_path, "find") from e
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(file_path, "read") from e


def load_config(file_path, model: Type[ModelT]) -> ModelT:
    """Read a YAML file and validate it into ``model``."""
    return model.model_validate(read_config(file_path))


def write_config(file_path, data: Any) -> None:
    """Write ``data`` to ``file_path`` as YAML, overwriting the file."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                data,
                f,
                indent=2,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except (OSError, yaml.YAMLError) as e:
        raise ConfigFileError(file_path, "write") from e


def create_config(file_path, data: Any) -> bool:
    """
    Create ``file_path`` with ``data`` unless it already exists.

    Returns
    -------
    bool
        True if the file was created, False if it was already there.
    """
    path = Path(file_path)
    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigFileError(file_path, "create") from e
    write_config(path, data)
    logger.debug("Created config file %s", path)
    return True


def update_config_value(file_path, key: str, value: Any) -> None:
    """
    Set a dotted ``key`` in a YAML file to ``value``.

    The file is only rewritten if the key resolves; ``InvalidPath`` and
    ``PathConflict`` propagate and leave the file as it was.
    """
    config = read_config(file_path)
    set_value(config, key, value)
    write_config(file_path, config)

"""
Dotted Path Access
==================

Reads and writes values inside an already-parsed configuration tree using
keys such as ``"database.host"``. The tree is plain Python data as produced
by ``yaml.safe_load`` or ``json.load``: mappings, lists and scalars.

Rules
-----
- The path is split on ``.``; every segment must be non-empty.
- All segments but the last must already resolve to mappings. Nothing is
  created on the way down; a missing or non-mapping segment raises
  ``PathConflict``.
- The whole descent happens before the single write, so a failing call leaves
  the tree unchanged.

Usage
-----
.. code-block:: python

    tree = {"database": {"host": "localhost"}}
    set_value(tree, "database.port", 3306)
    get_value(tree, "database.port")   # -> 3306
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, List

from smilelib.errors import InvalidPath, PathConflict

_MISSING = object()


def split_path(path: str) -> List[str]:
    """
    Split a dotted path into its segments.

    Raises
    ------
    InvalidPath
        If the path is not a string, is empty, or contains an empty segment.
    """
    if not isinstance(path, str) or path == "":
        raise InvalidPath(path)
    segments = path.split(".")
    if any(segment == "" for segment in segments):
        raise InvalidPath(path, "empty segment")
    return segments


def _descend(tree: Mapping, segments: List[str], path: str) -> Mapping:
    """Walk every segment but the last and return the parent mapping."""
    node = tree
    for segment in segments[:-1]:
        child = node.get(segment, _MISSING)
        if child is _MISSING:
            raise PathConflict(segment, path, missing=True)
        if not isinstance(child, Mapping):
            raise PathConflict(segment, path, found=child)
        node = child
    return node


def set_value(tree: MutableMapping, path: str, value: Any) -> None:
    """
    Set ``value`` at ``path`` inside ``tree``, overwriting any previous value.

    Parameters
    ----------
    tree : MutableMapping
        Root of the parsed document.
    path : str
        Dotted path, e.g. ``"a.b.c"``. A path without dots sets on the root.
    value : Any
        New value for the last segment.

    Raises
    ------
    InvalidPath
        Malformed path.
    PathConflict
        An intermediate segment is missing or is not a mapping.
    """
    segments = split_path(path)
    parent = _descend(tree, segments, path)
    parent[segments[-1]] = value


def get_value(tree: Mapping, path: str, default: Any = None) -> Any:
    """
    Return the value at ``path``, or ``default`` if any segment is absent.

    Unlike :func:`set_value` this never raises ``PathConflict``; a scalar in
    the middle of the path simply means the value is not there.
    """
    node = tree
    for segment in split_path(path):
        if not isinstance(node, Mapping) or segment not in node:
            return default
        node = node[segment]
    return node

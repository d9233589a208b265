"""Tests for dotted-path access on parsed configuration trees."""

import copy

import pytest

from smilelib.documents.dotted_path import get_value, set_value, split_path
from smilelib.errors import InvalidPath, PathConflict


@pytest.fixture
def tree():
    return {
        "database": {"host": "localhost", "port": 3306, "options": {"ssl": False}},
        "plugins": ["economy", "chat"],
        "motd": "hello",
    }


def test_set_nested_value_overwrites(tree):
    set_value(tree, "database.host", "db.example.com")
    assert tree["database"]["host"] == "db.example.com"


def test_set_creates_missing_leaf(tree):
    set_value(tree, "database.options.timeout", 30)
    assert tree["database"]["options"] == {"ssl": False, "timeout": 30}


def test_single_segment_sets_on_root(tree):
    set_value(tree, "motd", "welcome")
    set_value(tree, "new_key", {"a": 1})
    assert tree["motd"] == "welcome"
    assert tree["new_key"] == {"a": 1}


@pytest.mark.parametrize(
    "path, value",
    [
        ("motd", "bye"),
        ("database.port", 5432),
        ("database.options.ssl", True),
        ("database.options.extra", [1, 2, 3]),
        ("database.credentials", {"user": "root"}),
    ],
)
def test_set_then_get_returns_value(tree, path, value):
    set_value(tree, path, value)
    assert get_value(tree, path) == value


@pytest.mark.parametrize("path", ["motd.color", "plugins.first", "database.port.number"])
def test_non_mapping_intermediate_raises_conflict(tree, path):
    before = copy.deepcopy(tree)
    with pytest.raises(PathConflict) as excinfo:
        set_value(tree, path, "x")
    assert excinfo.value.path == path
    assert excinfo.value.segment == path.split(".")[-2]
    assert tree == before


def test_missing_intermediate_is_not_created(tree):
    before = copy.deepcopy(tree)
    with pytest.raises(PathConflict) as excinfo:
        set_value(tree, "cache.redis.host", "localhost")
    assert excinfo.value.segment == "cache"
    assert "cache" not in tree
    assert tree == before


@pytest.mark.parametrize("path", ["", ".", "a..b", ".a", "a."])
def test_malformed_paths_are_invalid(tree, path):
    with pytest.raises(InvalidPath):
        set_value(tree, path, 1)


def test_non_string_path_is_invalid(tree):
    with pytest.raises(InvalidPath):
        set_value(tree, None, 1)


def test_get_missing_returns_default(tree):
    assert get_value(tree, "database.user") is None
    assert get_value(tree, "motd.color", "n/a") == "n/a"


def test_split_path():
    assert split_path("a.b.c") == ["a", "b", "c"]
    assert split_path("single") == ["single"]

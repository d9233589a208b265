"""Tests for YAML and JSON config file helpers."""

import pytest
import yaml
from pydantic import BaseModel

from smilelib.database.entities.profile import DatabaseProfile, EngineKind
from smilelib.documents.json_manager import (
    create_json_file,
    delete_json_key,
    from_json,
    read_json,
    update_json_value,
    write_json,
)
from smilelib.documents.yaml_manager import (
    create_config,
    load_config,
    read_config,
    update_config_value,
    write_config,
)
from smilelib.errors import ConfigFileError, PathConflict


class PluginConfig(BaseModel):
    database: DatabaseProfile
    debug: bool = False


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yml"
    write_config(
        path,
        {
            "database": {"dbType": "sqlite", "database": "plugin.db"},
            "messages": {"welcome": "hi"},
            "debug": False,
        },
    )
    return path


# --- YAML -------------------------------------------------------------------


def test_write_uses_block_style_and_keeps_order(config_file):
    content = config_file.read_text(encoding="utf-8")
    assert content.splitlines()[0] == "database:"
    assert "  dbType: sqlite" in content
    assert content.index("database:") < content.index("messages:") < content.index("debug:")


def test_read_config(config_file):
    assert read_config(config_file)["messages"] == {"welcome": "hi"}


def test_read_empty_file_gives_empty_dict(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert read_config(path) == {}


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(ConfigFileError) as excinfo:
        read_config(tmp_path / "missing.yml")
    assert excinfo.value.file_path.endswith("missing.yml")


def test_read_invalid_yaml_raises(tmp_path):
    path = tmp_path / "broken.yml"
    path.write_text("a: [1, 2", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        read_config(path)


def test_load_config_into_model(config_file):
    config = load_config(config_file, PluginConfig)
    assert config.database.kind is EngineKind.EMBEDDED
    assert config.database.database == "plugin.db"
    assert config.debug is False


def test_update_config_value_nested(config_file):
    update_config_value(config_file, "messages.welcome", "welcome back")
    update_config_value(config_file, "debug", True)
    data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    assert data["messages"]["welcome"] == "welcome back"
    assert data["debug"] is True


def test_failed_update_leaves_file_untouched(config_file):
    before = config_file.read_text(encoding="utf-8")
    with pytest.raises(PathConflict):
        update_config_value(config_file, "debug.level", 3)
    assert config_file.read_text(encoding="utf-8") == before


def test_create_config_only_when_missing(tmp_path):
    path = tmp_path / "nested" / "dir" / "config.yml"
    assert create_config(path, {"version": 1}) is True
    assert create_config(path, {"version": 2}) is False
    assert read_config(path) == {"version": 1}


# --- JSON -------------------------------------------------------------------


def test_json_operations(tmp_path):
    path = tmp_path / "temp_test.json"
    write_json(path, {"appName": "TestApp"})
    assert read_json(path)["appName"] == "TestApp"

    update_json_value(path, "version", "1.0.0")
    assert read_json(path)["version"] == "1.0.0"

    delete_json_key(path, "appName")
    assert "appName" not in read_json(path)


def test_write_json_creates_parent_directories(tmp_path):
    path = tmp_path / "a" / "b" / "data.json"
    write_json(path, [1, 2])
    assert read_json(path) == [1, 2]


def test_update_json_replaces_non_object_document(tmp_path):
    path = tmp_path / "list.json"
    write_json(path, [1, 2, 3])
    update_json_value(path, "key", "value")
    assert read_json(path) == {"key": "value"}


def test_delete_json_key_ignores_non_object_document(tmp_path):
    path = tmp_path / "list.json"
    write_json(path, [1, 2, 3])
    delete_json_key(path, "key")
    assert read_json(path) == [1, 2, 3]


def test_create_json_file_keeps_existing(tmp_path):
    path = tmp_path / "init.json"
    assert create_json_file(path, {"a": 1}) is True
    assert create_json_file(path, {"a": 2}) is False
    assert read_json(path) == {"a": 1}


def test_from_json_into_model(tmp_path):
    path = tmp_path / "db.json"
    write_json(path, {"engine_kind": "embedded", "database": "x.db"})
    profile = from_json(path, DatabaseProfile)
    assert profile.database == "x.db"

    empty = tmp_path / "empty.json"
    empty.write_text("", encoding="utf-8")
    assert from_json(empty, DatabaseProfile) is None


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        read_json(path)

"""Tests for configuration management."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tasktrack_cli.config import Config, ConfigManager, get_config_manager


def test_default_config():
    config = Config()
    assert config.storage.file == "Tasks.json"
    assert config.task_file == Path("Tasks.json")
    assert config.output.color is True
    assert config.output.clear_screen is True
    assert config.output.recent_count == 5


def test_recent_count_bounds():
    with pytest.raises(ValidationError):
        Config(output={"recent_count": 0})


def test_config_file_lives_in_user_config_dir(tmp_path):
    manager = ConfigManager()
    assert manager.config_file == tmp_path / "config" / "config.json"


def test_missing_file_gives_defaults():
    assert ConfigManager().config == Config()


def test_config_save_load():
    manager = ConfigManager()
    config = Config(storage={"file": "~/tasks.json"}, output={"color": False})
    manager.save_config(config)

    reloaded = ConfigManager().config
    assert reloaded.storage.file == "~/tasks.json"
    assert reloaded.output.color is False
    assert reloaded.task_file == Path("~/tasks.json").expanduser()


def test_partial_file_keeps_other_defaults():
    manager = ConfigManager()
    manager.config_dir.mkdir(parents=True)
    manager.config_file.write_text(json.dumps({"output": {"recent_count": 10}}))

    config = manager.config
    assert config.output.recent_count == 10
    assert config.storage.file == "Tasks.json"


@pytest.mark.parametrize("content", ["{ broken", "[]", json.dumps({"output": {"recent_count": -3}})])
def test_corrupted_config_falls_back_to_defaults(content, tmp_path):
    manager = ConfigManager()
    manager.config_dir.mkdir(parents=True)
    manager.config_file.write_text(content)

    assert manager.config == Config()
    assert "ignoring unreadable config" in (tmp_path / "logs" / "tasktrack.log").read_text()


def test_get_config_manager_is_shared():
    assert get_config_manager() is get_config_manager()


def test_seed_config_writes_defaults_on_first_run():
    manager = ConfigManager()
    manager.seed_config()

    assert json.loads(manager.config_file.read_text()) == Config().model_dump()


def test_seed_config_keeps_existing_file():
    manager = ConfigManager()
    manager.config_dir.mkdir(parents=True)
    manager.config_file.write_text(json.dumps({"output": {"color": False}}))

    manager.seed_config()

    assert json.loads(manager.config_file.read_text()) == {"output": {"color": False}}


def test_seed_config_tolerates_unwritable_dir(tmp_path):
    manager = ConfigManager()
    manager.config_dir.parent.mkdir(parents=True, exist_ok=True)
    manager.config_dir.write_text("a file, not a directory")

    manager.seed_config()

    assert manager.config == Config()
    assert "cannot write default config" in (tmp_path / "logs" / "tasktrack.log").read_text()

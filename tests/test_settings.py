"""Tests for the JSON settings file."""
from __future__ import annotations

import json

import pytest

from settings import Settings


def test_defaults_written_on_first_load(tmp_path):
    path = tmp_path / "config.json"

    settings = Settings(str(path))

    assert path.exists()
    assert json.loads(path.read_text()) == Settings.DEFAULT_SETTINGS
    assert settings.database_path == "taskify.db"
    assert settings.page_size == 12
    assert settings.tick_rate == 0.25
    assert settings.logging_enabled is True
    assert settings.write_logs is True
    assert settings.print_logs is False
    assert settings.log_path == "taskify.log"
    assert settings.log_level == "INFO"


def test_partial_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"database": {"path": "other.db"}, "ui": {"page_size": 5}}))

    settings = Settings(str(path))

    assert settings.database_path == "other.db"
    assert settings.page_size == 5
    assert settings.tick_rate == 0.25
    assert settings.log_path == "taskify.log"


def test_defaults_are_not_shared_between_instances(tmp_path):
    first = Settings(str(tmp_path / "a.json"))
    first.set("ui", "page_size", 3)

    second = Settings(str(tmp_path / "b.json"))

    assert second.page_size == 12
    assert Settings.DEFAULT_SETTINGS["ui"]["page_size"] == 12


def test_page_size_setter_persists(settings):
    settings.page_size = 20

    reloaded = Settings(settings.config_file)
    assert reloaded.page_size == 20


def test_page_size_setter_validates(settings):
    with pytest.raises(ValueError):
        settings.page_size = 0

"""Tests for the taskify command line."""
from __future__ import annotations

import logging

import pytest

import taskify
from database import Database


@pytest.fixture
def cli_paths(tmp_path):
    root = logging.getLogger()
    handlers = root.handlers[:]
    config = tmp_path / "config.json"
    db_path = tmp_path / "cli.db"
    yield ["--config", str(config), "--db", str(db_path)], db_path
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers


def test_add_and_list_projects(cli_paths, capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    args, db_path = cli_paths

    taskify.main(["add-project", "Website", "--description", "Homepage relaunch"] + args)
    taskify.main(["add-project", "Backend"] + args)
    out = capsys.readouterr().out
    assert "Project 'Website' created" in out

    taskify.main(["list-projects"] + args)
    out = capsys.readouterr().out
    assert "page 1, 2 in total" in out
    assert "Website" in out
    assert "Homepage relaunch" in out
    assert "Backend" in out

    db = Database(str(db_path))
    try:
        assert db.count_projects() == 2
    finally:
        db.close()


def test_list_projects_empty(cli_paths, capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    args, _ = cli_paths

    taskify.main(["list-projects"] + args)

    assert "No projects found" in capsys.readouterr().out


def test_add_project_requires_name(cli_paths, capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    args, _ = cli_paths

    with pytest.raises(SystemExit) as excinfo:
        taskify.main(["add-project"] + args)

    assert excinfo.value.code == 1
    assert "Please specify a project name" in capsys.readouterr().out


def test_add_project_rejects_long_name(cli_paths, capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    args, _ = cli_paths

    with pytest.raises(SystemExit) as excinfo:
        taskify.main(["add-project", "x" * 40] + args)

    assert excinfo.value.code == 1
    assert "at most 32 characters" in capsys.readouterr().out


def test_tui_is_default_command(cli_paths, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    args, _ = cli_paths
    started = []
    monkeypatch.setattr(taskify, "run_tui", lambda db, settings: started.append(settings.page_size))

    taskify.main(args)

    assert started == [12]

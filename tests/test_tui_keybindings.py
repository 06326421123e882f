"""Unit tests for keybinding resolution."""
from __future__ import annotations

import pytest

from tui.actions import Action
from tui.errors import ConfigurationError
from tui.keybindings import ESCAPE_KEY, KeyMap, Keybinding, QUIT_KEY, help_text


def test_keymap_resolves_declared_keys():
    keymap = KeyMap([
        Keybinding("p", "View Projects", Action.HOME_GOTO_PROJECTS),
        Keybinding("r", "Refresh", Action.PROJECT_REFRESH),
    ])

    assert keymap.resolve("p") == Action.HOME_GOTO_PROJECTS
    assert keymap.resolve("r") == Action.PROJECT_REFRESH
    assert len(keymap) == 2
    assert "p" in keymap


def test_keymap_unknown_key_is_none():
    keymap = KeyMap([Keybinding("p", "View Projects", Action.HOME_GOTO_PROJECTS)])

    assert keymap.resolve("x") is None
    assert keymap.resolve(QUIT_KEY) is None


def test_keymap_duplicate_trigger_is_configuration_error():
    """Two bindings on the same key are rejected, not resolved."""
    with pytest.raises(ConfigurationError) as excinfo:
        KeyMap(
            [
                Keybinding("p", "View Projects", Action.HOME_GOTO_PROJECTS),
                Keybinding("p", "Prev page", Action.PROJECT_PREV_PAGE),
            ],
            owner="HOME",
        )

    assert "HOME" in str(excinfo.value)
    assert "'p'" in str(excinfo.value)


def test_keymap_keeps_declaration_order():
    bindings = [
        Keybinding("n", "Next page", Action.PROJECT_NEXT_PAGE),
        Keybinding("b", "Prev page", Action.PROJECT_PREV_PAGE),
    ]

    assert list(KeyMap(bindings)) == bindings


def test_help_text_lists_screen_then_global_keys():
    text = help_text("HOME", [Keybinding("p", "View Projects", Action.HOME_GOTO_PROJECTS)])

    assert text == "HOME | p:View Projects  ESC:Back  q:Quit"


def test_help_text_without_bindings():
    assert help_text("PROJECTS", []) == "PROJECTS | ESC:Back  q:Quit"


def test_navigator_triggers():
    assert QUIT_KEY == "q"
    assert ESCAPE_KEY == "escape"

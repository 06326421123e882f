"""
Keybinding definitions and per-screen key resolution for the TUI
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from tui.actions import Action
from tui.errors import ConfigurationError

# Navigator-level triggers, recognized on every screen
QUIT_KEY = 'q'
ESCAPE_KEY = 'escape'

GLOBAL_KEYS = {
    QUIT_KEY: 'Quit',
    ESCAPE_KEY: 'Back',
}


@dataclass(frozen=True)
class Keybinding:
    """A trigger key, the label shown in the status bar and the action it produces"""

    key: str
    label: str
    action: Action


class KeyMap:
    """Lookup table for one screen's bindings, rejecting ambiguous declarations"""

    def __init__(self, bindings: Iterable[Keybinding], owner: str = "screen"):
        self.owner = owner
        self._bindings: List[Keybinding] = []
        self._by_key: Dict[str, Keybinding] = {}

        for binding in bindings:
            existing = self._by_key.get(binding.key)
            if existing is not None:
                raise ConfigurationError(
                    f"{owner} binds '{binding.key}' twice "
                    f"({existing.action.name} and {binding.action.name})"
                )
            self._by_key[binding.key] = binding
            self._bindings.append(binding)

    def resolve(self, key: str) -> Optional[Action]:
        """Get the action bound to a key, or None"""
        binding = self._by_key.get(key)
        return binding.action if binding else None

    def __iter__(self) -> Iterator[Keybinding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, key: str) -> bool:
        return key in self._by_key


def key_label(key: str) -> str:
    """Short display form of a textual key name"""
    if key == ESCAPE_KEY:
        return 'ESC'
    return key


def help_text(title: str, bindings: Iterable[Keybinding]) -> str:
    """
    Build the status bar line for a screen

    Screen bindings come first, followed by the global quit/back triggers:
    "PROJECTS | n:Next page  r:Refresh  ESC:Back  q:Quit"
    """
    parts = [f"{key_label(b.key)}:{b.label}" for b in bindings]
    parts.append(f"{key_label(ESCAPE_KEY)}:{GLOBAL_KEYS[ESCAPE_KEY]}")
    parts.append(f"{key_label(QUIT_KEY)}:{GLOBAL_KEYS[QUIT_KEY]}")
    return f"{title} | " + "  ".join(parts)

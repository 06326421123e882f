"""
Common behaviour for navigator screens
"""
from typing import ClassVar, List

from rich.console import RenderableType
from textual.geometry import Size

from tui.actions import Action, Event, NO_EVENT
from tui.keybindings import Keybinding
from tui.ports import DataPort


class BaseScreen:
    """
    A unit of navigable UI state

    Screens are built with empty data, then the navigator awaits ``init``
    once before calling anything else on them. ``action`` and ``tick`` must
    not block; all I/O happens in ``init``.
    """

    NAME: ClassVar[str] = "SCREEN"
    BINDINGS: ClassVar[List[Keybinding]] = []

    @classmethod
    def create(cls, **options) -> "BaseScreen":
        """Build a fresh, uninitialized screen"""
        return cls()

    def display_name(self) -> str:
        return self.NAME

    def keybindings(self) -> List[Keybinding]:
        """Bindings valid right now. Must not change any state."""
        return list(self.BINDINGS)

    @property
    def stale(self) -> bool:
        """True when the screen wants ``init`` to run again"""
        return False

    async def init(self, data_port: DataPort) -> None:
        pass

    def tick(self) -> Event:
        return NO_EVENT

    def action(self, action: Action) -> Event:
        return NO_EVENT

    def render(self, area: Size) -> RenderableType:
        raise NotImplementedError

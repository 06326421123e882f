"""
Home screen: the static landing page
"""
from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text
from textual.geometry import Size

from tui.actions import Action, Event, Goto, NO_EVENT, ScreenId
from tui.keybindings import Keybinding, QUIT_KEY
from tui.screens.base import BaseScreen


class HomeScreen(BaseScreen):
    """Landing screen. Root of the navigation, so escape does nothing here."""

    NAME = "HOME"
    BINDINGS = [
        Keybinding('p', "View Projects", Action.HOME_GOTO_PROJECTS),
    ]

    def action(self, action: Action) -> Event:
        if action == Action.HOME_GOTO_PROJECTS:
            return Goto(ScreenId.PROJECT)
        return NO_EVENT

    def render(self, area: Size) -> RenderableType:
        body = Text(justify="center")
        body.append("\nWelcome to ")
        body.append("Taskify!", style="bold underline")
        body.append("\nThe ")
        body.append("modern CLI", style="bold underline italic")
        body.append(" way to handle tasks, time manage and be productive!\n\n")
        body.append(f"Press {QUIT_KEY} to exit at any time", style="italic")

        return Panel(
            Align.center(body),
            title=" [Taskify CLI] ",
            title_align="center",
            style="white",
        )

"""
Main TUI application for Taskify
"""
import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Header, Static

from database import Database
from settings import Settings
from tui.errors import DataUnavailable
from tui.keybindings import help_text
from tui.navigator import Navigator

logger = logging.getLogger(__name__)


class TaskifyApp(App):
    """Hosts the navigator: pumps keys and ticks into it and draws its active screen"""

    CSS = """
    Screen {
        background: $surface;
    }

    #view-container {
        height: 1fr;
        padding: 1;
    }

    #view {
        height: 100%;
    }

    #status-bar {
        dock: bottom;
        background: $boost;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(self, db: Database, settings: Settings):
        super().__init__()
        self.db = db
        self.settings = settings
        self.navigator = Navigator(db, page_size=settings.page_size)
        self._tick_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        """Create child widgets"""
        yield Header()
        yield Container(Static("", id="view"), id="view-container")
        yield Static("", id="status-bar")

    async def on_mount(self) -> None:
        """Called when app is mounted"""
        self.title = "Taskify"
        self.sub_title = "modern CLI task management"
        if not await self.start_navigator():
            return

        self.redraw()
        self._tick_timer = self.set_interval(self.settings.tick_rate, self.tick)

    async def start_navigator(self) -> bool:
        """Load the first screen, exiting with the error if it cannot be loaded"""
        try:
            await self.navigator.start()
        except DataUnavailable as e:
            logger.error("Could not start: %s", e)
            self.exit(message=str(e))
            return False
        return True

    def on_unmount(self) -> None:
        self.stop_ticking()

    def stop_ticking(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None

    async def on_key(self, event: events.Key) -> None:
        """Forward every key press to the navigator"""
        if self.navigator.active is None:
            return
        event.stop()
        running = await self.navigator.dispatch_key(event.key)
        self.after_dispatch(running)

    async def tick(self) -> None:
        """Periodic tick from the interval timer"""
        if not self.is_running or self.navigator.active is None or not self.navigator.running:
            return
        running = await self.navigator.dispatch_tick()
        self.after_dispatch(running)

    def on_resize(self, event: events.Resize) -> None:
        self.redraw()

    def after_dispatch(self, running: bool) -> None:
        if not running:
            self.stop_ticking()
            self.exit()
            return

        if self.navigator.error is not None:
            self.notify(str(self.navigator.error), title="Load failed", severity="error")

        self.redraw()

    def redraw(self) -> None:
        """Render the active screen and its status bar"""
        screen = self.navigator.active
        if screen is None or not self.is_running:
            return
        try:
            view = self.query_one("#view", Static)
            status = self.query_one("#status-bar", Static)
        except NoMatches:
            # Widgets are already gone while the app shuts down
            return

        view.update(screen.render(view.size))
        status.update(help_text(screen.display_name(), screen.keybindings()))

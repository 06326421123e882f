"""
Navigator: owns the active screen, routes input to it and runs transitions
"""
import asyncio
import logging
from typing import Dict, Optional, Type

from tui.actions import Action, Event, Goto, ScreenId
from tui.errors import ConfigurationError, DataUnavailable, UnmappedAction
from tui.keybindings import ESCAPE_KEY, KeyMap, QUIT_KEY
from tui.ports import DataPort
from tui.screens.base import BaseScreen
from tui.screens.project import DEFAULT_PAGE_SIZE
from tui.screens.registry import SCREENS

logger = logging.getLogger(__name__)


class Navigator:
    """
    Single-screen state machine

    Exactly one screen is active at a time and it has always finished its
    ``init`` before it sees a key, a tick or a render. A ``Goto`` builds the
    target screen, awaits its ``init`` against the data port and only then
    swaps it in; if loading fails the current screen stays active and the
    error is kept in ``error`` for the UI to show until the next key or tick.

    Dispatch calls are serialized: a key or tick arriving while a screen is
    loading waits for the load to finish.
    """

    def __init__(self, data_port: DataPort, page_size: int = DEFAULT_PAGE_SIZE,
                 screens: Optional[Dict[ScreenId, Type[BaseScreen]]] = None,
                 initial: ScreenId = ScreenId.HOME):
        self.data_port = data_port
        self.page_size = page_size
        self.screens = dict(SCREENS if screens is None else screens)
        self.initial = initial
        self.running = True
        self.active: Optional[BaseScreen] = None
        self.error: Optional[DataUnavailable] = None
        self._lock = asyncio.Lock()

        self._check_screens()

    def _check_screens(self):
        """Every screen id must have a screen and every screen unambiguous bindings"""
        missing = [sid.name for sid in ScreenId if sid not in self.screens]
        if missing:
            raise ConfigurationError(f"No screen registered for: {', '.join(missing)}")
        for screen_cls in self.screens.values():
            KeyMap(screen_cls.BINDINGS, owner=screen_cls.NAME)

    async def start(self) -> bool:
        """Load the initial screen. DataUnavailable propagates: there is nothing to fall back to."""
        async with self._lock:
            screen = self._build(self.initial)
            await screen.init(self.data_port)
            self.active = screen
            logger.info("Started on %s", screen.display_name())
        return self.running

    def quit(self):
        self.running = False

    async def dispatch_key(self, code: str) -> bool:
        """Handle one key press. Returns whether the app is still running."""
        async with self._lock:
            self.error = None
            if not self.running:
                return False
            if code == QUIT_KEY:
                logger.info("Quit requested from %s", self._active_name())
                self.quit()
                return self.running

            self._require_active()
            if code == ESCAPE_KEY:
                action = Action.ESCAPE
            else:
                keymap = KeyMap(self.active.keybindings(), owner=self.active.display_name())
                action = keymap.resolve(code)
                if action is None:
                    logger.debug("Ignoring unbound key %r on %s", code, self._active_name())
                    return self.running

            event = self.active.action(action)
            await self._process(event, action)
        return self.running

    async def dispatch_tick(self) -> bool:
        """Advance the active screen by one timer tick"""
        async with self._lock:
            self.error = None
            if not self.running:
                return False
            self._require_active()
            event = self.active.tick()
            await self._process(event, None)
        return self.running

    async def _process(self, event: Event, action: Optional[Action]):
        if not isinstance(event, Event):
            source = action.name if action else "tick"
            raise UnmappedAction(
                f"{self._active_name()} returned {event!r} for {source} instead of an Event"
            )

        if isinstance(event, Goto):
            await self._goto(event.screen)
        elif self.active.stale:
            await self._reload()

    async def _goto(self, screen_id: ScreenId):
        screen = self._build(screen_id)
        logger.debug("Loading %s", screen.display_name())
        try:
            await screen.init(self.data_port)
        except DataUnavailable as e:
            self._report(e)
            return

        if not self.running:
            logger.info("Dropping %s, quit while it was loading", screen.display_name())
            return

        previous = self._active_name()
        self.active = screen
        logger.info("Screen %s -> %s", previous, screen.display_name())

    async def _reload(self):
        try:
            await self.active.init(self.data_port)
        except DataUnavailable as e:
            self._report(e)

    def _report(self, error: DataUnavailable):
        logger.warning("%s (staying on %s)", error, self._active_name())
        self.error = error

    def _build(self, screen_id: ScreenId) -> BaseScreen:
        try:
            screen_cls = self.screens[screen_id]
        except KeyError:
            raise ConfigurationError(f"No screen registered for {screen_id.name}") from None
        return screen_cls.create(page_size=self.page_size)

    def _require_active(self):
        if self.active is None:
            raise RuntimeError("Navigator.start() must complete before dispatching input")

    def _active_name(self) -> str:
        return self.active.display_name() if self.active else "<none>"

"""
Project screen: paginated list of stored projects
"""
import logging
from typing import List

from rich.console import RenderableType
from rich.table import Table
from textual.geometry import Size

from database import DataError
from tui.actions import Action, Event, Goto, NO_EVENT, ScreenId
from tui.errors import DataUnavailable
from tui.keybindings import Keybinding
from tui.ports import DataPort, Record
from tui.screens.base import BaseScreen

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 12

NEXT_PAGE = Keybinding('n', "Next page", Action.PROJECT_NEXT_PAGE)
PREV_PAGE = Keybinding('b', "Prev page", Action.PROJECT_PREV_PAGE)
REFRESH = Keybinding('r', "Refresh", Action.PROJECT_REFRESH)


class ProjectScreen(BaseScreen):
    """
    One page of projects at a time

    Changing page only records the requested page and marks the screen
    stale; the navigator then re-runs ``init``, which fetches the page and
    commits it. A failed fetch leaves ``page`` and ``records`` as they were.
    """

    NAME = "PROJECTS"
    BINDINGS = [NEXT_PAGE, PREV_PAGE, REFRESH]

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        self.page_size = page_size
        self.records: List[Record] = []
        self.page = 0
        self._requested_page = 0
        self._reload = False

    @classmethod
    def create(cls, page_size: int = DEFAULT_PAGE_SIZE, **options) -> "ProjectScreen":
        return cls(page_size=page_size)

    @property
    def stale(self) -> bool:
        return self._reload or self._requested_page != self.page

    @property
    def has_next_page(self) -> bool:
        # A short page means there is nothing after it
        return len(self.records) == self.page_size

    @property
    def has_prev_page(self) -> bool:
        return self.page > 0

    def keybindings(self) -> List[Keybinding]:
        bindings = []
        if self.has_next_page:
            bindings.append(NEXT_PAGE)
        if self.has_prev_page:
            bindings.append(PREV_PAGE)
        bindings.append(REFRESH)
        return bindings

    async def init(self, data_port: DataPort) -> None:
        page = self._requested_page
        try:
            records = await data_port.list_records(page, self.page_size)
        except DataError as e:
            self._requested_page = self.page
            self._reload = False
            raise DataUnavailable(self.display_name(), e) from e

        self.records = list(records)
        self.page = page
        self._reload = False
        logger.debug("Loaded %d projects (page %d)", len(self.records), page)

    def action(self, action: Action) -> Event:
        if action == Action.ESCAPE:
            return Goto(ScreenId.HOME)
        if action == Action.PROJECT_NEXT_PAGE and self.has_next_page:
            self._requested_page = self.page + 1
        elif action == Action.PROJECT_PREV_PAGE and self.has_prev_page:
            self._requested_page = self.page - 1
        elif action == Action.PROJECT_REFRESH:
            self._reload = True
        return NO_EVENT

    def render(self, area: Size) -> RenderableType:
        if not self.records:
            if self.page == 0:
                return "[dim]No projects yet. Add one with 'taskify add-project NAME'.[/dim]"
            return f"[dim]Page {self.page + 1} is empty.[/dim]"

        # Leave room for the other columns
        desc_width = max(10, area.width - 32 - 12 - 8)

        table = Table(box=None, padding=(0, 1), caption=f"Page {self.page + 1}")
        table.add_column("Name", width=32, style="bold cyan")
        table.add_column("Description", width=desc_width)
        table.add_column("Created", width=10, style="dim")

        for project in self.records:
            description = project.description or ""
            if len(description) > desc_width:
                description = description[:desc_width - 3] + "..."
            created = project.created.strftime('%d.%m.%Y') if project.created else ""
            table.add_row(project.name, description, created)

        return table

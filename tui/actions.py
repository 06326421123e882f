"""
Actions, screen ids and events exchanged between screens and the navigator
"""
from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """User intents, independent of any screen"""

    QUIT = "quit"
    ESCAPE = "escape"
    HOME_GOTO_PROJECTS = "home_goto_projects"
    PROJECT_NEXT_PAGE = "project_next_page"
    PROJECT_PREV_PAGE = "project_prev_page"
    PROJECT_REFRESH = "project_refresh"


class ScreenId(Enum):
    """Kinds of screen the navigator knows how to build"""

    HOME = "home"
    PROJECT = "project"


@dataclass(frozen=True)
class Event:
    """Outcome of a screen handling an action or a tick. The base value has no effect."""


@dataclass(frozen=True)
class Goto(Event):
    """Request navigation to another screen"""

    screen: ScreenId


NO_EVENT = Event()

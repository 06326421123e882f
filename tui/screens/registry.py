"""
Screen id to screen class mapping
"""
from typing import Dict, Type

from tui.actions import ScreenId
from tui.screens.base import BaseScreen
from tui.screens.home import HomeScreen
from tui.screens.project import ProjectScreen

SCREENS: Dict[ScreenId, Type[BaseScreen]] = {
    ScreenId.HOME: HomeScreen,
    ScreenId.PROJECT: ProjectScreen,
}

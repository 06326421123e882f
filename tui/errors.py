"""
Errors raised by the screen state machine
"""


class DataUnavailable(Exception):
    """The data port failed while a screen was loading. Recoverable."""

    def __init__(self, screen_name: str, cause: Exception = None):
        self.screen_name = screen_name
        self.cause = cause
        message = f"Could not load {screen_name}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ConfigurationError(Exception):
    """A screen declared its keybindings or registration incorrectly"""


class UnmappedAction(Exception):
    """A screen was asked to handle an action it does not know"""

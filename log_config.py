"""
Logger wiring for taskify
"""
import logging
import os
from pathlib import Path
from typing import Optional

from settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(settings: Settings) -> Optional[Path]:
    """Configure the root logger from the ``logger`` settings section.

    Returns the log file path when logs are written to a file.

    - Disabled logging installs a NullHandler so nothing reaches the terminal.
    - Console output goes to stderr and is off by default, since the TUI
      owns the screen.
    - Safe to call more than once (it resets handlers).
    """

    root = logging.getLogger()
    root.handlers = []

    if not settings.logging_enabled:
        root.addHandler(logging.NullHandler())
        return None

    level = getattr(logging, settings.log_level, logging.INFO)
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    log_file = None
    if settings.write_logs:
        log_file = Path(settings.log_path)
        if log_file.parent and not log_file.parent.exists():
            log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if settings.print_logs:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    logging.getLogger("taskify").info(
        "Logging enabled and initialized (file=%s, level=%s)",
        os.fspath(log_file) if log_file else None,
        settings.log_level,
    )
    return log_file

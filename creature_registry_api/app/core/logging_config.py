"""
Logging configuration for the application.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger and rejects unknown level names.
Every module obtains its own logger through ``logging.getLogger(__name__)``.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Raises ``ValueError`` for names the ``logging`` module does not know,
    so a typo in ``LOG_LEVEL`` fails at startup.
    """
    numeric_level = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric_level


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> List[logging.Handler]:
    """Configure the root logger and return the handlers added.

    If the root logger already has handlers (from a previous call, a
    test runner or an embedding application), only the level is
    applied and no handlers are added, so repeated calls to
    ``create_app`` do not duplicate output.
    """
    numeric_level = parse_level(level)
    root = logging.getLogger()
    root.setLevel(numeric_level)
    if root.handlers:
        return []

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return handlers

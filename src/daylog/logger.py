# SPDX-License-Identifier: MIT

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from daylog.configuration import APP_NAME, DEFAULT_LOG_LEVEL, LOG_LEVELS


def resolve_log_level(level: Any) -> str:
    """Configured level name, or the default when config.yaml holds an unknown one."""
    if isinstance(level, str) and level.upper() in LOG_LEVELS:
        return level.upper()
    return DEFAULT_LOG_LEVEL


def configure_logging(level: Any = DEFAULT_LOG_LEVEL) -> None:
    """Route the application's log records to stderr through rich."""
    app_logger = logging.getLogger(APP_NAME)
    app_logger.setLevel(resolve_log_level(level))
    if not any(isinstance(handler, RichHandler) for handler in app_logger.handlers):
        app_logger.addHandler(
            RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=True,
            )
        )

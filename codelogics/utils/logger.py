"""Route application and library logging into Loguru.

Project modules log with ``from loguru import logger``.  The HTTP
libraries and the ASGI server log through the standard ``logging``
module; their named loggers are handed to :class:`InterceptHandler` so
provider timeouts and request lines land in the same sinks.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from ..config.app_config import AppConfig, get_app_config

# Third-party loggers whose records are forwarded to Loguru.
BRIDGED_LOGGERS: Sequence[str] = (
    "httpx",
    "httpcore",
    "openai",
    "uvicorn",
    "uvicorn.error",
    "uvicorn.access",
)

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{line} | {message}"


class InterceptHandler(logging.Handler):
    """Re-emit a standard logging record through Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def bridge_loggers(names: Sequence[str], level: int) -> None:
    """Point each named stdlib logger at Loguru only."""
    handler = InterceptHandler()
    for name in names:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.setLevel(level)
        std_logger.propagate = False


def setup_logging(app_config: Optional[AppConfig] = None) -> None:
    """Install the console sink, the optional file sink and the bridges.

    Library loggers are capped at WARNING unless the app runs in debug
    mode, so a provider outage is visible without per-request noise.
    """
    app_config = app_config or get_app_config()

    logger.remove()
    logger.add(
        sys.stderr,
        level=app_config.log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
        diagnose=app_config.app_debug,
    )

    if app_config.log_file:
        Path(app_config.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            app_config.log_file,
            level=app_config.log_level,
            format=FILE_FORMAT,
            rotation="5 MB",
            retention=5,
            enqueue=True,
        )

    library_level = logging.DEBUG if app_config.app_debug else logging.WARNING
    bridge_loggers(BRIDGED_LOGGERS, library_level)

    logger.info("Logging ready ({}, level {})", app_config.app_env, app_config.log_level)

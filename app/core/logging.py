"""Structured logging configuration.

Installs a single stdout handler on the root logger.  Event-style messages
(``student_created``, ``payload_validation_failed``) carry their details in
``extra=`` fields; the level comes from ``settings.LOG_LEVEL`` unless given.
"""

import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Chatty HTTP layers under the Supabase client
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "postgrest", "uvicorn.access")


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger for the application.

    Calling it again replaces the previously installed handler.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

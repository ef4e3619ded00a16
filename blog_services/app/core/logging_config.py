"""
Logging for the posts and comments services.

Both services may run in one process (see ``run.py``), so every log
line carries the name of the service that emitted it.  Records from
loggers that are not bound to a service, such as the stores or
uvicorn itself, are tagged with ``-``.

uvicorn is started with ``log_config=None`` so that its loggers
propagate to the root handlers configured here instead of installing
their own.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(service)s): %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class ServiceFilter(logging.Filter):
    """Give every record a ``service`` attribute for the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = "-"
        return True


def service_logger(service: str) -> logging.LoggerAdapter:
    """Return a logger whose records are tagged with ``service``."""
    return logging.LoggerAdapter(logging.getLogger(f"blog_services.{service}"), {"service": service})


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Console handler plus an optional file handler, both service-tagged."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ServiceFilter())
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and align uvicorn's loggers with it.

    uvicorn's levels follow ``level`` on every call.  Handlers are only
    attached if the root logger has none yet, so building the second
    application does not duplicate output.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(numeric_level)
    for handler in build_handlers(logfile):
        root.addHandler(handler)

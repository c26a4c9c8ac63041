"""Logging helpers for ddlplatform.

Library loggers live under the ``ddlplatform`` namespace and carry no handler
until the application calls :func:`configure_logging`. Records emitted while a
dialect descriptor is being built are tagged with the id of that
initialization run.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

NO_INITIALIZATION = "-"

_initialization_id: ContextVar[str | None] = ContextVar("initialization_id", default=None)

logging.getLogger("ddlplatform").addHandler(logging.NullHandler())


class InitializationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.initialization_id = current_initialization_id()
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger("ddlplatform")
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(initialization_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(InitializationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"ddlplatform.{name}")


def current_initialization_id() -> str:
    return _initialization_id.get() or NO_INITIALIZATION


@contextmanager
def initialization_scope(platform_name: str) -> Iterator[str]:
    """
    Tag log records emitted while building ``platform_name``'s descriptor.
    """
    run_id = f"{platform_name}:{uuid.uuid4().hex[:8]}"
    token = _initialization_id.set(run_id)
    try:
        yield run_id
    finally:
        _initialization_id.reset(token)

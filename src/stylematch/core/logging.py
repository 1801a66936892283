"""
Structured logging for the preference engine.

Engine modules log through structlog with event names and keyword context;
the embedding application decides the output format once at startup.

Usage:
    from stylematch.core.logging import configure_logging, get_logger, user_context

    configure_logging(json_logs=True, log_level="INFO")
    logger = get_logger(__name__)

    with user_context("user-1"):
        logger.info("quiz_completed", archetype="The Modernist")  # carries user_id
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

import structlog
from structlog.types import Processor


def _processors(json_logs: bool, include_timestamp: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
    ]
    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if json_logs:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        json_logs: JSON lines (production) instead of console output
        log_level: Minimum level name (DEBUG ... CRITICAL)
        include_timestamp: Prefix events with a UTC ISO timestamp
    """
    structlog.configure(
        processors=_processors(json_logs, include_timestamp),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    # Redis client is chatty at DEBUG
    logging.getLogger("redis").setLevel(logging.WARNING)


def configure_from_settings(settings: Any) -> None:
    """Configure logging from a ``Settings`` instance."""
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach context to every following log event in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


@contextmanager
def user_context(user_id: str, **extra: Any) -> Iterator[None]:
    """
    Bind ``user_id`` (and any extra keys) for the duration of the block.

    Values that were already bound under the same keys are restored on exit,
    so nested blocks for the same user leave the outer context intact.
    """
    keys = {"user_id": user_id, **extra}
    current = structlog.contextvars.get_contextvars()
    previous = {k: current[k] for k in keys if k in current}

    bind_context(**keys)
    try:
        yield
    finally:
        unbind_context(*keys)
        if previous:
            bind_context(**previous)


class LoggerMixin:
    """Gives a class a ``logger`` named after the class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)

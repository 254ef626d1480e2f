"""Structured logging for Poll Retry.

Library modules obtain loggers from get_logger(), which wraps a standard
library logger. Until the host application configures logging, events
follow the stdlib defaults (debug and info are dropped, nothing is written
to stdout). configure_logging() installs structlog rendering for hosts
that want it: JSON in production, plain console output otherwise.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

from poll_retry.config import settings


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger backed by logging.getLogger(name)."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    event_dict["app"] = settings.APP_NAME
    return event_dict


def configure_logging(
    log_level: str | None = None,
    environment: str | None = None,
    stream=None,
) -> None:
    """Route structlog events through a root handler.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (settings.LOG_LEVEL when omitted)
        environment: "production" selects JSON output (settings.ENVIRONMENT when omitted)
        stream: Handler stream, stdout when omitted
    """
    log_level = log_level or settings.LOG_LEVEL
    environment = environment or settings.ENVIRONMENT
    level = getattr(logging, log_level.upper(), logging.INFO)
    as_json = environment.lower() == "production"

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
    ]
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if as_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if as_json else "console",
    )

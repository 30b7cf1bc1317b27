"""Logging setup for the scoring service.

structlog owns the event format. uvicorn and FastAPI log through the stdlib,
so a ProcessorFormatter routes those records through the same chain. Every
entry carries the service name and, inside a request, the X-Request-ID.
"""

import logging
import logging.config

import structlog
from asgi_correlation_id.context import correlation_id

from nct.core.config import Settings


def add_correlation_id(logger, method, event_dict):
    """Copy the current request's correlation id onto the event, if any."""
    cid = correlation_id.get(None)
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def service_name_adder(name: str):
    """Processor that stamps every event with the given service name."""

    def add_service(logger, method, event_dict):
        event_dict.setdefault("service", name)
        return event_dict

    return add_service


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger from settings.

    Debug mode renders colored console lines at DEBUG; otherwise one JSON
    object per line at settings.log_level, with tracebacks flattened into
    the "exception" key. Must run before the first structlog logger is used.
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        service_name_adder(settings.app_name),
        add_correlation_id,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.debug:
        level = "DEBUG"
        final_processors = [structlog.dev.ConsoleRenderer()]
    else:
        level = settings.log_level.upper()
        final_processors = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "nct": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    *final_processors,
                ],
                "foreign_pre_chain": shared_processors,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "nct",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["stdout"], "level": level},
        # Request lines are already covered by the correlation middleware.
        "loggers": {"uvicorn.access": {"level": "WARNING"}},
    })

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

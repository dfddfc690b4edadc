"""Logging setup for applications and scripts using the client."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import structlog

from prediction_guard.config import Settings

# Applied to both structlog events and records from plain stdlib loggers (httpx).
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _attach_renderer(handler: logging.Handler, renderer) -> logging.Handler:
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def _file_handler(settings: Settings) -> RotatingFileHandler:
    path = Path(settings.log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        filename=path,
        maxBytes=settings.log_file_max_bytes,
        backupCount=settings.log_file_backup_count,
        encoding="utf-8",
    )


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through the handlers ``settings`` asks for.

    The console always gets human readable output. When ``settings.log_file``
    is set, a rotating file handler is added that receives the same events
    as JSON lines. The library only emits through ``structlog.get_logger()``;
    call this once from the application entrypoint.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handlers = [_attach_renderer(logging.StreamHandler(), structlog.dev.ConsoleRenderer())]
    if settings.log_file:
        handlers.append(
            _attach_renderer(_file_handler(settings), structlog.processors.JSONRenderer())
        )

    # force replaces (and closes) whatever handlers a previous call installed
    logging.basicConfig(level=level, handlers=handlers, force=True)

    # httpx logs every request line at INFO
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

"""
Logging Configuration - Shared Layer

Library modules only ask for loggers through :func:`get_logger` and emit
dotted events (``karotz.request``, ``karotz.ears.position`` ...). Nothing is
rendered until the embedding application, or the bundled CLI, calls
:func:`configure_logging`. Per-invocation context such as the CLI command
and target rabbit is attached with :func:`bind_log_context` and shows up on
every event, including the ones emitted by the gateway.
"""

import logging
import os
import sys
from typing import IO, Any, Iterable, List, Optional

import structlog
from structlog.types import Processor

from openkarotz.shared.consts import EnumEnvironment, EnumLogLevel

# Third-party loggers that log every HTTP exchange at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def _resolve_level(level: Optional[str]) -> int:
    name = level or os.environ.get("LOG_LEVEL") or EnumLogLevel.INFO.value
    return getattr(logging, name.upper(), logging.INFO)


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = EnumEnvironment.DEVELOPMENT.value,
    noisy_loggers: Iterable[str] = NOISY_LOGGERS,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Route structlog events and stdlib records through the same handlers.

    Args:
        level: Log level name; falls back to ``LOG_LEVEL``, then ``INFO``.
        file_path: Optional log file, falls back to ``LOG_FILE_PATH``.
        environment: ``production`` renders JSON lines, anything else the
            colored console renderer.
        noisy_loggers: Loggers held at WARNING unless ``level`` is DEBUG.
        stream: Console stream, stdout by default. The CLI logs to stderr so
            that its JSON results stay alone on stdout.
    """
    numeric_level = _resolve_level(level)
    log_file = file_path or os.environ.get("LOG_FILE_PATH")

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_renderer(environment),
        foreign_pre_chain=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_shared_processors(),
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    noisy_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in noisy_loggers:
        logging.getLogger(name).setLevel(noisy_level)

    get_logger(__name__).debug(
        "logging.configured",
        level=logging.getLevelName(numeric_level),
        file_path=log_file,
        environment=environment,
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from an ``AppSettings`` instance."""
    configure_logging(
        level=getattr(settings.logging.level, "value", settings.logging.level),
        file_path=settings.logging.file_path,
        environment=getattr(settings.environment, "value", settings.environment),
    )


def bind_log_context(**values: Any) -> None:
    """Attach key/values to every event logged from the current context."""
    structlog.contextvars.bind_contextvars(**values)


def clear_log_context() -> None:
    structlog.contextvars.clear_contextvars()


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, optionally pre-bound with ``initial_values``."""
    return structlog.get_logger(name, **initial_values)

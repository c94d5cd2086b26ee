"""
Structured logging for the Bittrex client.

Uses structlog routed through stdlib handlers with rotating files. The client
binds the operation name and API version to every event of one dispatch via
log_context, and credentials bound to an event are masked before rendering.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

CREDENTIAL_KEYS = frozenset({"apikey", "api_key", "api_secret", "apisign"})


def redact_credentials(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask Bittrex credentials and signatures bound to a log event."""
    for key in CREDENTIAL_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path | None = None,
    log_to_console: bool = True,
    log_to_file: bool = True,
    json_logs: bool = False,
) -> None:
    """
    Configure the logging system.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files (default: ./logs)
        log_to_console: Whether to log to console
        log_to_file: Whether to log to file
        json_logs: Whether to use JSON format for logs
    """
    if log_dir is None:
        log_dir = Path("logs")
    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)

    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = []

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level_int)
        handlers.append(console_handler)

    if log_to_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "bittrex.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level_int)
        handlers.append(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            log_dir / "error.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        redact_credentials,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=log_to_console,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    # Route structlog output through stdlib so the handlers above receive it
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level_int),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=log_level_int,
        handlers=handlers,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


class LoggerMixin:
    """Mixin class to add logging capabilities to any class"""

    @property
    def logger(self) -> structlog.BoundLogger:
        return get_logger(self.__class__.__name__)


class log_context:
    """
    Context manager for adding context to logs.

    Usage:
        with log_context(api_version="v2.0", operation="trade_buy"):
            logger.info("Placing order")
    """

    def __init__(self, **kwargs: Any) -> None:
        self.context = kwargs

    def __enter__(self) -> None:
        structlog.contextvars.bind_contextvars(**self.context)

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())

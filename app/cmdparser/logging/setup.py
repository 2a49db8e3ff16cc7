"""Structlog setup for cmdparser.

Importing cmdparser never configures logging. Modules log through
get_module_logger(), which wraps a standard library logger, so the host
application's logging configuration decides what gets emitted. Applications
that want structlog rendering call configure_logging() once at startup.

Usage:
    from cmdparser.logging import configure_logging, get_module_logger

    # At application startup (optional)
    configure_logging()

    # In a module
    logger = get_module_logger(__name__)
    logger.debug("event_name", key="value")
"""

import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from cmdparser.configuration import Settings
from cmdparser.services.providers import get_settings

PACKAGE_LOGGER_NAME = "cmdparser"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structlog and standard logging for an application.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.
        settings: Optional Settings instance. Defaults to get_settings().

    Returns:
        Configured logger instance
    """
    settings = settings or get_settings()
    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger(module_name: str) -> BoundLogger:
    """Get a logger for a module, bound with component and module path.

    The logger is resolved lazily, so configuration done after import
    (by configure_logging or by the host application) still applies.

    Example:
        # In cmdparser/parsing/tokenizer.py
        logger = get_module_logger(__name__)
        # context: {"component": "tokenizer", "module_path": "cmdparser.parsing.tokenizer"}
    """
    return structlog.wrap_logger(
        logging.getLogger(module_name),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )

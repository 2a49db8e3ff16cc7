"""Structured logging infrastructure.

Public API:
    - configure_logging(): Opt-in logging setup for applications
    - get_module_logger(): Get a logger bound to a module name

Example:
    from cmdparser.logging import get_module_logger

    logger = get_module_logger(__name__)
    logger.debug("module_initialized")
"""

from cmdparser.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
]

"""Structlog loggers for the localization package.

Importing the package never touches global logging state. Module loggers are
lazy structlog proxies, so they follow whatever configuration the host
application installs, before or after import. Standalone programs can opt in
to the package defaults with `configure_logging()`.

Usage:
    from localization.logging import get_module_logger

    logger = get_module_logger(__name__)
    logger.info("event_name", key="value")
"""

import logging
import sys
from typing import Any, Optional

import structlog

from localization.config import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> Any:
    """Install structlog and stdlib logging defaults for standalone use.

    Console output in development, JSON in production. Output is suppressed
    while running under pytest.

    Args:
        log_level: Override for settings.LOG_LEVEL.
        is_production: Override for settings.is_production.

    Returns:
        Logger for the localization package.
    """
    if _is_test_environment():
        structlog.configure(
            processors=[structlog.stdlib.add_log_level],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return get_module_logger("localization")

    prod_mode = is_production if is_production is not None else settings.is_production
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    level = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level, logging.INFO),
    )

    return get_module_logger("localization")


def get_module_logger(module_name: str) -> Any:
    """Get a logger bound to a module.

    Args:
        module_name: Dotted module name, usually `__name__`.

    Returns:
        Lazy logger carrying `component` and `module_path`, e.g.
        {"component": "registry", "module_path": "localization.registry"}
    """
    return structlog.get_logger(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )

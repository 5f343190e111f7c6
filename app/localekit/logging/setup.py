"""Structlog setup for localekit.

Usage:
    from localekit.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")
    logger = get_module_logger()
    logger.info("translations_loaded", translation_count=12)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from localekit.configuration import get_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _build_processors(json_output: bool) -> List[Processor]:
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
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
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the stdlib logger factory.

    Production renders JSON lines, other environments use the console
    renderer. Under pytest every record is dropped at the root logger.

    Args:
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production.

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
        force = True
    else:
        settings = get_settings()
        json_output = settings.is_production if is_production is None else is_production
        processors = _build_processors(json_output)
        level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
        force = False

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Return a logger bound to the calling module.

    Binds ``component`` (last dotted segment of the module name) and
    ``module_path``, e.g. ``engine`` and ``localekit.i18n.engine``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )

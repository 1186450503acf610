from __future__ import annotations

from application.ports.logger import LoggerPort
from infrastructure.config.settings import Settings
from infrastructure.logging.composite_logger import CompositeLogger
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.loguru_logger import LoguruLogger, setup_logging


def build_logger(settings: Settings) -> LoggerPort:
    """APITESTER_LOG_FORMAT picks the sink: loguru, console, or both."""
    if settings.log_format == "console":
        return ConsoleLogger(level=settings.log_level.lower())

    setup_logging(settings.log_level)
    if settings.log_format == "both":
        return CompositeLogger([LoguruLogger(), ConsoleLogger(level=settings.log_level.lower())])
    return LoguruLogger()

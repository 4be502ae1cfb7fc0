import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog

from editor_events.config.schemas import LogDestination, LoggingConfig


class DetailedFormatter(structlog.stdlib.ProcessorFormatter):
    """Formatter that renders structlog events and adds caller information."""

    def format(self, record: logging.LogRecord) -> str:
        # Add method name and line number to the record
        record.caller_info = f"{record.module}.{record.funcName}:{record.lineno}"
        return super().format(record)


def _build_formatter(log_format: str) -> DetailedFormatter:
    return DetailedFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ],
        fmt=log_format,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging section of the application configuration.
               If None, it is loaded through ConfigurationManager.
    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        # Imported here to keep the config package free of logging imports
        from editor_events.config.manager import ConfigurationManager

        config = ConfigurationManager().get_app_config().logging

    destination = LogDestination(config.destination)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    handlers: list[logging.Handler] = []

    if destination in (LogDestination.FILE, LogDestination.BOTH):
        log_file = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(_build_formatter(config.format))
        handlers.append(file_handler)

    if destination in (LogDestination.STDOUT, LogDestination.BOTH):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_build_formatter(config.format))
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = get_logger("editor_events")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)

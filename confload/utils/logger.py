"""
Logging Utilities
=================

Logging driven by the ``logging`` section of a loaded config part::

    logging:
      level: INFO
      file: logs/frontend.log
      max_file_size: 10MB
      backup_count: 5
      loggers:
        confload.config: DEBUG

Debug mode (``APP_DEBUG``) forces every configured level to DEBUG.
"""

import logging
import logging.handlers
import os
import sys
import warnings
from typing import Any, Mapping, Optional, Union

APP_LOGGER = "confload"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_SIZE_UNITS = {'KB': 1024, 'MB': 1024 ** 2, 'GB': 1024 ** 3}

# handlers installed by configure_logging, replaced on the next call
_installed_handlers = []


def parse_size(size: Union[int, str]) -> int:
    """Parse a size such as ``512``, ``'2KB'`` or ``'10MB'`` to bytes."""
    if isinstance(size, int):
        return size
    text = str(size).strip().upper()
    for unit, factor in _SIZE_UNITS.items():
        if text.endswith(unit):
            return int(float(text[:-len(unit)]) * factor)
    return int(text)


def _level(value: Any, default: int = logging.INFO) -> int:
    if isinstance(value, int):
        return value
    return getattr(logging, str(value).upper(), default)


def widen_verbosity():
    """Show everything: root logger at DEBUG and all warnings displayed."""
    logging.getLogger().setLevel(logging.DEBUG)
    warnings.simplefilter("default")


def configure_logging(section: Optional[Mapping[str, Any]] = None, debug: Optional[bool] = None) -> logging.Logger:
    """
    Apply a config ``logging`` section to the root logger.

    A console handler is always installed; ``file`` adds a rotating file
    handler. Handlers installed by a previous call are removed first, other
    handlers on the root logger are left alone.

    Args:
        section: The ``logging`` mapping of a loaded config
        debug: Force DEBUG levels when true

    Returns:
        The package logger
    """
    section = section or {}
    level = logging.DEBUG if debug else _level(section.get('level', 'INFO'))
    log_file = section.get('file')

    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(section.get('format', LOG_FORMAT), datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=parse_size(section.get('max_file_size', '10MB')),
            backupCount=int(section.get('backup_count', 5)),
            encoding='utf-8'
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)
    root_logger.setLevel(level)

    for name, logger_level in (section.get('loggers') or {}).items():
        logging.getLogger(name).setLevel(logging.DEBUG if debug else _level(logger_level))

    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.debug(f"Logging configured - Level: {logging.getLevelName(level)}, File: {log_file}")
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger."""
    return logging.getLogger(f"{APP_LOGGER}.{name}")

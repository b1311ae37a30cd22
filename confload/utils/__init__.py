"""
Utilities Module
================

Logging helpers.
"""

from .logger import configure_logging, get_logger, parse_size, widen_verbosity

__all__ = [
    'configure_logging',
    'get_logger',
    'parse_size',
    'widen_verbosity',
]

"""
Environment Bootstrap
=====================

Loads an optional ``.env`` file into the process environment and fixes the
process-wide debug flag and environment name from ``APP_DEBUG`` and
``APP_ENV``. Both values are fixed at most once; later bootstraps leave them
untouched.
"""

import logging
import os
import threading
from pathlib import Path
from typing import Any, Optional, Union

from dotenv import load_dotenv

from ..utils.logger import widen_verbosity
from .exceptions import RequiredEnvMissing

logger = logging.getLogger(__name__)

DEBUG_VAR = "APP_DEBUG"
ENV_VAR = "APP_ENV"
DEFAULT_ENV = "dev"
ENV_FILE = ".env"

_FALSE_STRINGS = {"", "0", "false", "no", "off"}


def to_bool(value: Any) -> bool:
    """Interpret an environment value as a boolean."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


class Environment:
    """Process-wide debug flag and environment name, each fixed once."""

    def __init__(self):
        self._debug: Optional[bool] = None
        self._name: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def debug(self) -> Optional[bool]:
        return self._debug

    @property
    def name(self) -> Optional[str]:
        return self._name

    def fix_debug(self, value: bool) -> bool:
        """Fix the debug flag unless already fixed. Returns the flag in effect."""
        with self._lock:
            if self._debug is None:
                self._debug = bool(value)
                logger.debug(f"Debug mode fixed to {self._debug}")
            return self._debug

    def fix_name(self, value: str) -> Optional[str]:
        """Fix the environment name unless already fixed. Returns the name in effect."""
        with self._lock:
            if self._name is None and value:
                self._name = value
                logger.debug(f"Environment name fixed to '{self._name}'")
            return self._name


_environment = Environment()


def get_environment() -> Environment:
    """Return the process-wide environment state."""
    return _environment


def environment_name() -> str:
    """Current environment name, ``dev`` when none was fixed."""
    name = get_environment().name
    return DEFAULT_ENV if name is None else name


def init_env(directory: Optional[Union[str, os.PathLike]] = None) -> Environment:
    """
    Initialize the process environment.

    If *directory* contains a ``.env`` file it is loaded first, without
    overwriting variables that are already set. ``APP_DEBUG`` and ``APP_ENV``
    then fix the debug flag and environment name if they are not fixed yet;
    an empty ``APP_ENV`` is ignored.
    In debug mode the root logger is set to DEBUG and warnings are shown.

    Args:
        directory: Directory to look for a ``.env`` file in

    Returns:
        The process-wide environment state
    """
    if directory is not None:
        env_file = Path(directory) / ENV_FILE
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            logger.debug(f"Loaded environment file {env_file}")

    state = get_environment()

    debug = os.getenv(DEBUG_VAR)
    if debug is not None and state.debug is None:
        if state.fix_debug(to_bool(debug)):
            widen_verbosity()

    name = os.getenv(ENV_VAR)
    if name:
        state.fix_name(name)

    return state


def env(name: str, default: Any = None, required: bool = False) -> Any:
    """
    Get an environment variable or a default value if it is not set.

    Args:
        name: Variable name
        default: Value returned when the variable is not set
        required: Raise instead of returning *default* when not set

    Returns:
        The variable's value, or *default*

    Raises:
        RequiredEnvMissing: If *required* and the variable is not set
    """
    value = os.getenv(name)
    if value is None:
        if required:
            raise RequiredEnvMissing(name)
        return default
    return value

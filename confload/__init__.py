"""
confload - Layered Configuration Loader
=======================================

Loads ``main``, ``<part>``, ``<part>_<env>`` and optional local override
files from a config directory and merges them into one mapping.

Modules:
- config: ConfigLoader, environment bootstrap, merging and file loaders
- utils: Logging setup
"""

__version__ = "1.0.0"

from .config import (
    ConfigError,
    ConfigFileNotFound,
    ConfigFormatError,
    ConfigLoader,
    Environment,
    RequiredEnvMissing,
    ReplaceValue,
    UNSET,
    env,
    environment_name,
    get_environment,
    init_env,
    load_file,
    merge,
)
from .utils.logger import configure_logging

__all__ = [
    "ConfigLoader",
    "ConfigError",
    "ConfigFileNotFound",
    "ConfigFormatError",
    "RequiredEnvMissing",
    "Environment",
    "ReplaceValue",
    "UNSET",
    "env",
    "environment_name",
    "get_environment",
    "init_env",
    "load_file",
    "merge",
    "configure_logging",
]

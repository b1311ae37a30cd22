"""Configuration package.

Provides the layered ConfigLoader plus environment bootstrap and merge helpers.
"""
from .config_loader import ConfigLoader  # noqa: F401
from .environment import Environment, env, environment_name, get_environment, init_env  # noqa: F401
from .exceptions import ConfigError, ConfigFileNotFound, ConfigFormatError, RequiredEnvMissing  # noqa: F401
from .file_loaders import load_file  # noqa: F401
from .merge import UNSET, ReplaceValue, merge  # noqa: F401

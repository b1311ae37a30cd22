"""
Configuration Errors
====================

Error kinds raised while resolving and loading layered configuration.
Errors coming from reading or parsing a file that exists (``OSError``,
``yaml.YAMLError``, ``json.JSONDecodeError``) are not wrapped.
"""

from pathlib import Path
from typing import Union


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigFileNotFound(ConfigError, FileNotFoundError):
    """The mandatory file for a requested part does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Config file '{self.path}' does not exist")

    def __str__(self) -> str:
        return self.args[0]


class RequiredEnvMissing(ConfigError, KeyError):
    """A required environment variable is not set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Required environment variable '{name}' is missing")

    def __str__(self) -> str:
        # KeyError would quote the message
        return self.args[0]


class ConfigFormatError(ConfigError, ValueError):
    """A config file does not describe a mapping."""

    def __init__(self, path: Union[str, Path], found: type):
        self.path = Path(path)
        super().__init__(
            f"Config file '{self.path}' must contain a mapping, got {found.__name__}"
        )

    def __str__(self) -> str:
        return self.args[0]

#!/usr/bin/env python3
"""Layered ConfigLoader.

Builds the configuration for one application *part* (``frontend``,
``backend``, ``console``, ...) from the files found in a config directory.
Files are merged in this order, later files overriding earlier ones:

- common files: ``main.yaml`` plus any extra common names
- ``<part>.yaml`` (required)
- ``<part>_<env>.yaml``
- ``local_<part>.yaml`` and ``local_<part>_<env>.yaml`` when local
  overrides are enabled (argument, or the ``ENABLE_LOCALCONF`` env var)

``<env>`` is the process-wide environment name (``APP_ENV``, default ``dev``).
A caller supplied mapping is merged last.
"""
from __future__ import annotations
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from . import environment
from .exceptions import ConfigFileNotFound
from .file_loaders import get_file_loader
from .merge import merge
from ..utils.logger import configure_logging

logger = logging.getLogger(__name__)

LOCAL_CONF_VAR = "ENABLE_LOCALCONF"


class ConfigLoader:
    """Loads and merges the layered config files of a directory."""

    common_config_files: List[str] = ["main"]

    def __init__(
        self,
        directory: str | os.PathLike[str],
        common_config_files: Optional[Iterable[str]] = None,
        local: Optional[bool] = None,
        init_env: bool = True,
        extension: str = ".yaml",
    ):
        """
        Args:
            directory: Directory holding the config files
            common_config_files: Extra common file names, loaded after ``main``
            local: Whether to load local overrides. ``None`` checks the
                ``ENABLE_LOCALCONF`` env var on first use
            init_env: Whether to bootstrap the environment from ``directory``
            extension: Config file extension (``.yaml``, ``.yml`` or ``.json``)
        """
        self.directory = Path(directory)
        if isinstance(common_config_files, str):
            common_config_files = [common_config_files]
        self.common_config_files = list(type(self).common_config_files) + list(common_config_files or [])
        self.extension = extension
        self._file_loader = get_file_loader(extension)
        self._local = local
        self._local_lock = threading.Lock()

        if init_env:
            self.init_env(self.directory)

    # ------------------------------------------------------------------
    @property
    def local(self) -> bool:
        """Whether local overrides are loaded; resolved once, then cached."""
        if self._local is None:
            with self._local_lock:
                if self._local is None:
                    self._local = environment.to_bool(self.env(LOCAL_CONF_VAR, False))
                    logger.debug(f"Local config overrides enabled: {self._local}")
        return self._local

    # ------------------------------------------------------------------
    def config_names(self, part: str) -> List[str]:
        """Candidate file names for *part*, lowest precedence first."""
        env = environment.environment_name()
        names = list(self.common_config_files)
        names.append(part)
        names.append(f"{part}_{env}")
        if self.local:
            names.append(f"local_{part}")
            names.append(f"local_{part}_{env}")
        return names

    def config_file(self, name: str, required: bool = True) -> Optional[Path]:
        """
        Resolve a config file name to its path.

        Args:
            name: File name without extension
            required: Whether the file must exist

        Returns:
            The path, or ``None`` if the file is missing and not required

        Raises:
            ConfigFileNotFound: If the file is required and missing
        """
        path = self.directory / f"{name}{self.extension}"
        if not path.is_file():
            if required:
                raise ConfigFileNotFound(path)
            return None
        return path

    def config_files(self, part: str) -> List[Path]:
        """Existing config files for *part* in merge order."""
        files = []
        for name in self.config_names(part):
            path = self.config_file(name, required=name == part)
            if path is not None:
                files.append(path)
        logger.debug(f"Config files for '{part}': {[str(f) for f in files]}")
        return files

    # ------------------------------------------------------------------
    def merge_files(self, files: Iterable[Path], config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Load *files* and merge them, then *config* on top."""
        configs = [self._file_loader(path) for path in files]
        configs.append(config or {})
        return merge(*configs)

    def load_config(self, part: str, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Build the configuration for *part*.

        Args:
            part: Config part name, e.g. ``frontend``
            config: Mapping merged on top of all files

        Returns:
            The merged configuration

        Raises:
            ConfigFileNotFound: If ``<part><extension>`` does not exist
        """
        return self.merge_files(self.config_files(part), config)

    def setup_logging(self, part: str, config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Load *part* and configure logging from its ``logging`` section.

        Returns the loaded configuration.
        """
        loaded = self.load_config(part, config)
        configure_logging(loaded.get("logging"), debug=environment.get_environment().debug)
        return loaded

    # ------------------------------------------------------------------
    @staticmethod
    def init_env(directory: Optional[str | os.PathLike[str]] = None) -> environment.Environment:
        return environment.init_env(directory)

    @staticmethod
    def env(name: str, default: Any = None, required: bool = False) -> Any:
        return environment.env(name, default, required)

    def __repr__(self) -> str:
        return f"ConfigLoader(directory={str(self.directory)!r}, common_config_files={self.common_config_files!r})"


__all__ = ["ConfigLoader", "LOCAL_CONF_VAR"]

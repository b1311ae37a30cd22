"""Shared pytest fixtures."""

import logging
import os

import pytest
import yaml

from confload.config import environment
from confload.utils import logger as logger_module

MANAGED_VARS = ("APP_ENV", "APP_DEBUG", "ENABLE_LOCALCONF")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate process environment, environment state and root logging per test."""
    saved_environ = os.environ.copy()
    for name in MANAGED_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(environment, "_environment", environment.Environment())

    monkeypatch.setattr(logger_module, "_installed_handlers", [])

    root_logger = logging.getLogger()
    saved_level = root_logger.level
    saved_handlers = root_logger.handlers[:]

    yield

    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)

    os.environ.clear()
    os.environ.update(saved_environ)


@pytest.fixture
def write_config(tmp_path):
    """Write ``<name>.yaml`` into the temporary config directory."""
    def _write(name, data, extension=".yaml"):
        path = tmp_path / f"{name}{extension}"
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path
    return _write

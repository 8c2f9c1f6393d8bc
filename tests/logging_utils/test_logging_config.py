"""Tests for proxygraph logging configuration."""

import logging
import os
from unittest.mock import patch

import pytest

from proxygraph.logging import DEFAULT_FORMAT, TRACE, configure_logging, get_logging_config


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger("proxygraph")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


class TestGetLoggingConfig:
    def test_defaults(self):
        with patch.dict(os.environ, clear=True):
            config = get_logging_config()
        assert config == {"level": logging.WARNING, "format": DEFAULT_FORMAT}

    def test_environment(self):
        env = {"PROXYGRAPH_LOG_LEVEL": "trace", "PROXYGRAPH_LOG_FORMAT": "%(message)s"}
        with patch.dict(os.environ, env, clear=True):
            config = get_logging_config()
        assert config == {"level": TRACE, "format": "%(message)s"}

    def test_invalid_level_falls_back(self):
        with patch.dict(os.environ, {"PROXYGRAPH_LOG_LEVEL": "LOUD"}, clear=True):
            assert get_logging_config()["level"] == logging.WARNING


class TestConfigureLogging:
    def test_installs_single_handler(self):
        package_logger = configure_logging("DEBUG")
        configure_logging("INFO")

        installed = [
            h for h in package_logger.handlers if getattr(h, "_proxygraph_handler", False)
        ]
        assert len(installed) == 1
        assert package_logger.level == logging.INFO
        assert installed[0].level == logging.INFO

    def test_numeric_level(self):
        assert configure_logging(TRACE).level == TRACE

"""Pytest configuration and fixtures for aceargs tests."""

import logging

import pytest

from aceargs import ArgParser
from aceargs.constants import ENV_COLOR, ENV_FORCE_COLOR, ENV_NO_COLOR, LOGGER_NAME
from aceargs.logging_utils import setup_logging


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch):
    """Keep colour decisions independent of the developer's terminal settings."""
    for key in (ENV_COLOR, ENV_NO_COLOR, ENV_FORCE_COLOR):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_aceargs_logger():
    """Restore the aceargs logger after tests that attach file handlers."""
    yield
    setup_logging(None)
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


@pytest.fixture
def make_parser():
    """Build a parser over the given tokens with the sample catalogs declared."""

    def _make(*tokens: str) -> ArgParser:
        return (
            ArgParser.from_argv(["app", *tokens])
            .with_name("app")
            .with_version("1.0.0")
            .add_command("start", "Start now")
            .add_command("help", "Show help")
            .add_option("--config", "Use configuration file")
            .add_option("--duration", ["Set duration of test", "example (1ms, 1s)"])
            .add_option("--timeout", "Set timeout")
        )

    return _make

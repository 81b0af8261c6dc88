"""Tests for colour configuration."""

import io

import pytest

from aceargs.config import ColorMode, color_mode_from_env, parse_color_mode, should_colorize
from aceargs.errors import ConfigError


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("auto", ColorMode.AUTO),
        ("ALWAYS", ColorMode.ALWAYS),
        ("  never ", ColorMode.NEVER),
    ],
)
def test_parse_color_mode_accepts_known_values(raw: str, expected: ColorMode) -> None:
    assert parse_color_mode(raw) == expected


def test_parse_color_mode_rejects_unknown_value() -> None:
    with pytest.raises(ConfigError, match="Unknown color mode 'rainbow'"):
        parse_color_mode("rainbow")


def test_color_mode_from_env_defaults_to_auto() -> None:
    assert color_mode_from_env({}) == ColorMode.AUTO
    assert color_mode_from_env({"ACEARGS_COLOR": " "}) == ColorMode.AUTO


def test_color_mode_from_env_reads_variable() -> None:
    assert color_mode_from_env({"ACEARGS_COLOR": "never"}) == ColorMode.NEVER


def test_explicit_modes_ignore_environment() -> None:
    stream = io.StringIO()
    assert should_colorize(ColorMode.ALWAYS, stream, {"NO_COLOR": "1"}) is True
    assert should_colorize(ColorMode.NEVER, _TtyStream(), {"FORCE_COLOR": "1"}) is False


def test_auto_mode_follows_tty() -> None:
    assert should_colorize(ColorMode.AUTO, _TtyStream(), {}) is True
    assert should_colorize(ColorMode.AUTO, io.StringIO(), {}) is False


def test_auto_mode_no_color_wins_over_force_color() -> None:
    env = {"NO_COLOR": "1", "FORCE_COLOR": "1"}
    assert should_colorize(ColorMode.AUTO, _TtyStream(), env) is False


def test_auto_mode_force_color_without_tty() -> None:
    assert should_colorize(ColorMode.AUTO, io.StringIO(), {"FORCE_COLOR": "1"}) is True

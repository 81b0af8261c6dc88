"""Colour configuration for diagnostic output."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import StrEnum
from typing import TextIO

from .constants import ENV_COLOR, ENV_FORCE_COLOR, ENV_NO_COLOR
from .errors import ConfigError


class ColorMode(StrEnum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def parse_color_mode(raw: str) -> ColorMode:
    token = raw.strip().lower()
    for mode in ColorMode:
        if mode.value == token:
            return mode
    choices = ", ".join(mode.value for mode in ColorMode)
    raise ConfigError(f"Unknown color mode '{raw}'. Expected one of: {choices}.")


def color_mode_from_env(environ: Mapping[str, str] | None = None) -> ColorMode:
    """Read the colour mode from ACEARGS_COLOR, defaulting to auto."""
    env = os.environ if environ is None else environ
    raw = env.get(ENV_COLOR, "")
    if not raw.strip():
        return ColorMode.AUTO
    return parse_color_mode(raw)


def should_colorize(
    mode: ColorMode,
    stream: TextIO,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Decide whether ANSI escapes should be written to stream.

    NO_COLOR wins over FORCE_COLOR in auto mode; explicit modes ignore both.
    """
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False

    env = os.environ if environ is None else environ
    if env.get(ENV_NO_COLOR):
        return False
    if env.get(ENV_FORCE_COLOR):
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())

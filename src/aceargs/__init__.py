"""aceargs - a small invocation argument helper."""

from __future__ import annotations

import logging

from .config import ColorMode
from .constants import LOGGER_NAME
from .errors import AceArgsError, ConfigError, DeclarationError
from .models import Declaration
from .parser import ArgParser

__version__ = "0.3.0"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "AceArgsError",
    "ArgParser",
    "ColorMode",
    "ConfigError",
    "Declaration",
    "DeclarationError",
    "__version__",
]

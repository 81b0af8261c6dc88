"""Centralized constants for aceargs."""

from __future__ import annotations

# Help layout
HELP_INDENT = "    "
HELP_COLUMN_GAP = "    "
HELP_USAGE_TEMPLATE = "Usage:\n" + HELP_INDENT + "{program} [COMMAND] [OPTION]"
HELP_COMMAND_HEADING = "Command:"
HELP_OPTION_HEADING = "Option:"
HELP_SEGMENT_SEPARATOR = "\n\n"

# Version line
VERSION_WORD = "version"

# Error output
ERROR_PREFIX = "error: "
ERROR_INVALID_COMMAND_TEMPLATE = "'{token}' is not a valid command"
# Wording for an empty argument list is kept as shipped.
ERROR_NO_COMMAND = "valid command"
ERROR_TRY_TEMPLATE = "try:\n" + HELP_INDENT + "'{program} {suggested}'"

# ANSI escapes
ANSI_BOLD_RED = "\x1b[1;31m"
ANSI_RESET = "\x1b[0m"

# Environment
ENV_COLOR = "ACEARGS_COLOR"
ENV_NO_COLOR = "NO_COLOR"
ENV_FORCE_COLOR = "FORCE_COLOR"

# Logging
LOGGER_NAME = "aceargs"

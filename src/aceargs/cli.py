"""Demo CLI wiring every parser operation together."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from . import __version__
from .errors import AceArgsError
from .logging_utils import log_event, setup_logging
from .parser import ArgParser

APP_NAME = "aceargs"
APP_DESCRIPTION = "Classify invocation arguments into a command and option values."

COMMAND_START = "start"
COMMAND_HELP = "help"
COMMAND_VERSION = "version"
OPTION_CONFIG = "--config"
OPTION_DURATION = "--duration"
OPTION_TIMEOUT = "--timeout"
OPTION_LOG = "--log"


def build_parser(argv: Sequence[str] | None = None) -> ArgParser:
    return (
        ArgParser.from_argv(argv)
        .with_name(APP_NAME)
        .with_version(__version__)
        .with_description(APP_DESCRIPTION)
        .add_command(COMMAND_START, "Start now")
        .add_command(COMMAND_HELP, "Display help information")
        .add_command(COMMAND_VERSION, "Display version information")
        .add_option(OPTION_CONFIG, "Use configuration file")
        .add_option(
            OPTION_DURATION,
            ["Set duration of test", "example (1ms, 1s, 1m, 1h, 1d)"],
        )
        .add_option(OPTION_TIMEOUT, "Set timeout")
        .add_option(OPTION_LOG, "Write debug events to a log file")
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo app. A --log file handler is detached again on return."""
    logging_configured = False
    try:
        parser = build_parser(argv)
        log_values = parser.value(OPTION_LOG)
        if log_values:
            setup_logging(log_values[0])
            logging_configured = True
        return _dispatch(parser)
    except AceArgsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    finally:
        if logging_configured:
            setup_logging(None)


def _dispatch(parser: ArgParser) -> int:
    command = parser.command()
    log_event("dispatch", command=command, args=parser.args())

    if command is None:
        for token in parser.args():
            print(token)
        return 0
    if command == COMMAND_START:
        for line in _render_start(parser):
            print(line)
        return 0
    if command == COMMAND_HELP:
        parser.print_help()
        return 0
    if command == COMMAND_VERSION:
        parser.print_version()
        return 0

    parser.print_error_try(COMMAND_HELP)
    return 1


def _render_start(parser: ArgParser) -> list[str]:
    lines: list[str] = []
    for option in parser.options:
        values = parser.value(option.name)
        if values is None:
            continue
        lines.append(f"{option.name}: {' '.join(values)}".rstrip())
    if not lines:
        lines.append("No options given.")
    return lines

"""Text rendering for version, help and error output.

Renderers are pure and return strings; printing lives on ArgParser.
"""

from __future__ import annotations

from collections.abc import Sequence

from .constants import (
    ANSI_BOLD_RED,
    ANSI_RESET,
    ERROR_INVALID_COMMAND_TEMPLATE,
    ERROR_NO_COMMAND,
    ERROR_PREFIX,
    ERROR_TRY_TEMPLATE,
    HELP_COLUMN_GAP,
    HELP_COMMAND_HEADING,
    HELP_INDENT,
    HELP_OPTION_HEADING,
    HELP_SEGMENT_SEPARATOR,
    HELP_USAGE_TEMPLATE,
    VERSION_WORD,
)
from .models import Declaration


def render_version(*, name: str | None, version: str | None) -> str:
    if not version:
        return ""
    if name:
        return f"{name} {VERSION_WORD} {version}"
    return f"{VERSION_WORD} {version}"


def render_title(*, name: str | None, version: str | None) -> str:
    return " ".join(part for part in (name, version) if part)


def render_usage(program: str) -> str:
    return HELP_USAGE_TEMPLATE.format(program=program)


def render_catalog_rows(declarations: Sequence[Declaration]) -> list[str]:
    """Render one catalog as aligned rows.

    The name column is as wide as the longest name in this catalog only.
    Continuation lines line up under the first description line.
    """
    if not declarations:
        return []

    width = max(len(declaration.name) for declaration in declarations)
    continuation = " " * (len(HELP_INDENT) + width + len(HELP_COLUMN_GAP))

    rows: list[str] = []
    for declaration in declarations:
        row = f"{HELP_INDENT}{declaration.name:<{width}}{HELP_COLUMN_GAP}{declaration.first_line}"
        rows.append(row.rstrip())
        for line in declaration.extra_lines:
            rows.append(f"{continuation}{line}".rstrip())
    return rows


def render_help(
    *,
    program: str,
    name: str | None,
    version: str | None,
    description: str | None,
    commands: Sequence[Declaration],
    options: Sequence[Declaration],
) -> str:
    segments: list[str] = []

    title = render_title(name=name, version=version)
    if title:
        segments.append(title)
    if description:
        segments.append(description)
    segments.append(render_usage(program))
    if commands:
        segments.append("\n".join([HELP_COMMAND_HEADING, *render_catalog_rows(commands)]))
    if options:
        segments.append("\n".join([HELP_OPTION_HEADING, *render_catalog_rows(options)]))

    return HELP_SEGMENT_SEPARATOR.join(segments)


def render_error(first_token: str | None, *, color: bool = False) -> str:
    prefix = f"{ANSI_BOLD_RED}{ERROR_PREFIX}{ANSI_RESET}" if color else ERROR_PREFIX
    if first_token is None:
        return f"{prefix}{ERROR_NO_COMMAND}"
    return prefix + ERROR_INVALID_COMMAND_TEMPLATE.format(token=first_token)


def render_error_try(
    first_token: str | None,
    *,
    program: str,
    suggested: str,
    color: bool = False,
) -> str:
    hint = ERROR_TRY_TEMPLATE.format(program=program, suggested=suggested)
    return f"{render_error(first_token, color=color)}\n{hint}"

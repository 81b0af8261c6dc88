"""Invocation argument parser with a fluent builder."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace

from pydantic import ValidationError

from . import formatter
from .config import ColorMode, color_mode_from_env, should_colorize
from .errors import DeclarationError
from .logging_utils import log_event
from .models import Declaration, Description, names_of


@dataclass(frozen=True)
class ArgParser:
    """Classifies invocation arguments into a command and option values.

    Build it with from_argv() and the with_*/add_* chain, then query it. Each
    builder call returns a new parser; queries never mutate state.
    """

    program: str = ""
    invocation_args: tuple[str, ...] = ()
    commands: tuple[Declaration, ...] = ()
    options: tuple[Declaration, ...] = ()
    name: str | None = None
    version: str | None = None
    description: str | None = None
    color: ColorMode = ColorMode.AUTO

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None) -> ArgParser:
        """Capture argv, splitting off the program path at index 0.

        None reads sys.argv.
        """
        raw = list(sys.argv if argv is None else argv)
        program = raw[0] if raw else ""
        return cls(
            program=program,
            invocation_args=tuple(raw[1:]),
            color=color_mode_from_env(),
        )

    # Builder

    def with_name(self, name: str) -> ArgParser:
        return replace(self, name=name)

    def with_version(self, version: str) -> ArgParser:
        return replace(self, version=version)

    def with_description(self, description: str) -> ArgParser:
        return replace(self, description=description)

    def with_color(self, color: ColorMode) -> ArgParser:
        return replace(self, color=color)

    def add_command(self, name: str, description: Description) -> ArgParser:
        return replace(self, commands=(*self.commands, _declare(name, description)))

    def add_option(self, name: str, description: Description) -> ArgParser:
        return replace(self, options=(*self.options, _declare(name, description)))

    # Queries

    @property
    def option_names(self) -> frozenset[str]:
        return names_of(self.options)

    def command(self) -> str | None:
        """Return the first token unless it is a declared option."""
        resolved: str | None = None
        if self.invocation_args and self.invocation_args[0] not in self.option_names:
            resolved = self.invocation_args[0]
        log_event("command_resolved", command=resolved)
        return resolved

    def is_command(self, name: str) -> bool:
        return self.command() == name

    def value(self, name: str) -> list[str] | None:
        """Return the tokens following the first occurrence of name.

        Collection stops before the next declared option or at end of input.
        An empty list means name was given without values; None means name
        was not given at all.
        """
        try:
            start = self.invocation_args.index(name) + 1
        except ValueError:
            log_event("value_lookup", name=name, found=False)
            return None

        option_names = self.option_names
        values: list[str] = []
        for token in self.invocation_args[start:]:
            if token in option_names:
                break
            values.append(token)

        log_event("value_lookup", name=name, found=True, count=len(values))
        return values

    def has(self, name: str) -> bool:
        return name in self.invocation_args

    def args(self) -> list[str]:
        return list(self.invocation_args)

    def command_args(self) -> list[str]:
        """Return every token after the resolved command."""
        if self.command() is None:
            return []
        return list(self.invocation_args[1:])

    # Output

    def render_version(self) -> str:
        return formatter.render_version(name=self.name, version=self.version)

    def render_help(self) -> str:
        return formatter.render_help(
            program=self.program,
            name=self.name,
            version=self.version,
            description=self.description,
            commands=self.commands,
            options=self.options,
        )

    def print_version(self) -> None:
        print(self.render_version())

    def print_help(self) -> None:
        print(self.render_help())

    def print_error(self) -> None:
        stream = sys.stderr
        color = should_colorize(self.color, stream)
        print(formatter.render_error(self._first_token(), color=color), file=stream)

    def print_error_try(self, suggested: str) -> None:
        stream = sys.stderr
        color = should_colorize(self.color, stream)
        text = formatter.render_error_try(
            self._first_token(),
            program=self.program,
            suggested=suggested,
            color=color,
        )
        print(text, file=stream)

    def _first_token(self) -> str | None:
        return self.invocation_args[0] if self.invocation_args else None


def _declare(name: str, description: Description) -> Declaration:
    try:
        return Declaration(name=name, description=description)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise DeclarationError(str(name), f"{field}: {first['msg']}") from exc

"""Domain models for aceargs."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, field_validator

Description = str | Sequence[str]


class Declaration(BaseModel):
    """A named command or option with one or more lines of help text."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: tuple[str, ...]

    @field_validator("description", mode="before")
    @classmethod
    def _normalize_description(cls, value: object) -> object:
        # A bare string is one line; an empty list still renders one row.
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)) and not value:
            return ("",)
        return value

    @property
    def first_line(self) -> str:
        return self.description[0]

    @property
    def extra_lines(self) -> tuple[str, ...]:
        return self.description[1:]


def names_of(declarations: Sequence[Declaration]) -> frozenset[str]:
    """Return the set of declared names in a catalog."""
    return frozenset(declaration.name for declaration in declarations)

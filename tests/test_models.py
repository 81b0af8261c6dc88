"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from aceargs.models import Declaration, names_of


def test_single_line_description_becomes_one_line() -> None:
    declaration = Declaration(name="start", description="Start now")
    assert declaration.description == ("Start now",)
    assert declaration.first_line == "Start now"
    assert declaration.extra_lines == ()


def test_multi_line_description_keeps_order() -> None:
    declaration = Declaration(name="--duration", description=["Set duration", "example (1s)"])
    assert declaration.description == ("Set duration", "example (1s)")
    assert declaration.first_line == "Set duration"
    assert declaration.extra_lines == ("example (1s)",)


def test_empty_description_list_renders_as_one_blank_line() -> None:
    declaration = Declaration(name="x", description=[])
    assert declaration.description == ("",)


def test_non_string_description_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Declaration(name="x", description=5)


def test_declaration_is_frozen() -> None:
    declaration = Declaration(name="start", description="Start now")
    with pytest.raises(ValidationError):
        declaration.name = "stop"


def test_names_of_collapses_duplicates() -> None:
    catalog = [
        Declaration(name="--a", description="one"),
        Declaration(name="--a", description="two"),
        Declaration(name="--b", description="three"),
    ]
    assert names_of(catalog) == frozenset({"--a", "--b"})


@pytest.mark.parametrize("raw", [b"", b"Start now"])
def test_bytes_description_is_rejected(raw: bytes) -> None:
    with pytest.raises(ValidationError):
        Declaration(name="x", description=raw)

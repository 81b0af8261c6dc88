"""Custom exception types for aceargs."""

from __future__ import annotations


class AceArgsError(Exception):
    """Base class for all aceargs errors."""


class DeclarationError(AceArgsError):
    def __init__(self, name: str, detail: str) -> None:
        super().__init__(f"Invalid declaration '{name}': {detail}")


class ConfigError(AceArgsError):
    def __init__(self, message: str) -> None:
        super().__init__(message)

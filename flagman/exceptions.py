# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagman.

Two severities exist. `AbortError` and its subclasses are fatal: they are
logged where they are raised and then absorbed by the top-level handlers in
`CommandManager.run`, `CommandManager.listen` and `python -m flagman`, so the
user sees a clean message instead of a traceback. Everything else is a regular
error that propagates normally.

Exception Hierarchy:
- FlagmanError
    ├── ArgumentDeclarationError
    ├── ConfigError
    └── AbortError
        ├── CommandValidationError
        ├── MissingArgumentError
        ├── MissingFlagError
        └── InvalidValueError
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flagman.parser.validator import Validation


class FlagmanError(Exception):
    """Base exception for Flagman."""


class ArgumentDeclarationError(FlagmanError):
    """Exception raised when a declaration entry cannot be normalized."""


class ConfigError(FlagmanError):
    """Exception raised when a configuration file is invalid."""


class AbortError(FlagmanError):
    """Fatal condition that has already been reported to the user."""


class CommandValidationError(AbortError):
    """Exception raised when a command fails validation on registration."""

    def __init__(self, command_name: str, validation: "Validation"):
        self.command_name = command_name
        self.validation = validation
        super().__init__(f"Command '{command_name}' failed validation.")


class MissingArgumentError(AbortError):
    """Exception raised when a required positional argument has no token."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected {expected} arguments, but got {actual}. "
            f"An argument for '{name}' was not provided."
        )


class MissingFlagError(AbortError):
    """Exception raised when a required flag is absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"An argument for flag '{name}' was not provided.")


class InvalidValueError(AbortError):
    """Exception raised when a parser callable rejects a raw value."""

    def __init__(self, name: str, value: Any, error: Exception):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value '{value}' for '{name}': {error}")

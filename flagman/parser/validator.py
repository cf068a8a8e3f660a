# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Structural validation of command declarations.

`validate()` normalizes a command's positional and flag declarations and runs
five independent checks, collecting every violation instead of stopping at
the first one:

- required arguments cannot carry defaults
- required flags cannot carry defaults
- required positional arguments must come before optional ones
- duplicate argument names/labels
- duplicate flag names/labels (compared with their prefix)

Errors are keyed by declared name, so a later error for the same name replaces
an earlier one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from flagman.parser.argument import Argument, normalize

if TYPE_CHECKING:
    from flagman.command import Command


@dataclass
class ValidationErrors:
    args: dict[str, str] = field(default_factory=dict)
    flags: dict[str, str] = field(default_factory=dict)

    def items(self) -> list[tuple[str, str, str]]:
        """Flatten to `(group, name, message)` triples, args first."""
        return [("args", name, message) for name, message in self.args.items()] + [
            ("flags", name, message) for name, message in self.flags.items()
        ]


@dataclass
class Validation:
    state: bool
    errors: ValidationErrors = field(default_factory=ValidationErrors)


def _check_required_defaults(
    arguments: list[Argument], errors: dict[str, str], message: str
) -> None:
    for arg in arguments:
        if arg.required and arg.has_default:
            errors[arg.name] = message


def _check_positional_order(arguments: list[Argument], errors: dict[str, str]) -> None:
    seen_required = False
    for arg in arguments:
        if arg.required:
            seen_required = True
        elif seen_required:
            errors[arg.name] = "required arguments must be before optional arguments"


def _check_duplicate_args(arguments: list[Argument], errors: dict[str, str]) -> None:
    # Labels are only recorded on a repeated name, and a repeated name is only
    # reported when its label was also seen. Kept as is.
    seen: set[str | None] = set()
    for arg in arguments:
        if arg.name in seen:
            if arg.label:
                if arg.label in seen:
                    errors[arg.name] = "duplicate argument name"
                seen.add(arg.label)
        else:
            if arg.label in seen:
                errors[arg.name] = "duplicate argument label"
            seen.add(arg.name)


def _check_duplicate_flags(flags: list[Argument], errors: dict[str, str]) -> None:
    seen: set[str] = set()
    for flag in flags:
        prefix = flag.prefix or ""
        name_id = f"{prefix}{flag.name}"
        label_id = f"{prefix}{flag.label or ''}"
        if name_id in seen:
            if label_id in seen:
                errors[flag.name] = "duplicate flag name"
            seen.add(label_id)
        else:
            if label_id in seen:
                errors[flag.name] = "duplicate flag label"
            seen.add(name_id)


def validate(command: Command) -> Validation:
    """
    Check a command's declarations for structural errors.

    Args:
        command (Command): The command to check.

    Returns:
        Validation: `state` is True iff no errors were recorded.
    """
    errors = ValidationErrors()
    args = normalize(command.args)
    flags = normalize(command.flags)

    _check_required_defaults(args, errors.args, "required arguments cannot have defaults")
    _check_required_defaults(flags, errors.flags, "required flags cannot have defaults")
    _check_positional_order(args, errors.args)
    _check_duplicate_args(args, errors.args)
    _check_duplicate_flags(flags, errors.flags)

    return Validation(state=not errors.args and not errors.flags, errors=errors)

# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Converts raw string tokens into a typed `Context`.

Flags are resolved first and their tokens removed, then positional arguments
consume the remaining tokens by index. Flag tokens have the shape
`<prefix><label>=<value>`; a flag that is not required may also appear bare
as `<prefix><label>`, which stores `True`.

Type conversion is left entirely to each descriptor's parser. A parser that
raises `ValueError` or `TypeError` is reported as `InvalidValueError`.

Example:
    context = parse(
        ["Alice", "--loud=true"],
        normalize({"name": str}),
        normalize({"loud": {"parser": coerce_bool, "required": False, "default": False}}),
    )
    # context == Context(args={"name": "Alice"}, flags={"loud": True})
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Sequence

from flagman.exceptions import InvalidValueError, MissingArgumentError, MissingFlagError
from flagman.logger import logger
from flagman.parser.argument import Argument, identity


@dataclass
class Context:
    """Parsed values handed to a command's `execute` callable."""

    args: dict[str, Any] = field(default_factory=dict)
    flags: dict[str, Any] = field(default_factory=dict)


def flag_matcher(flag: Argument) -> re.Pattern[str]:
    """Build the pattern a whole token must match for `flag`."""
    prefix = re.escape(flag.prefix or "")
    label = re.escape(flag.display_name)
    optional = "" if flag.required else "?"
    return re.compile(rf"{prefix}{label}(?:=(.+)){optional}")


def _apply(arg: Argument, raw: str) -> Any:
    parser = arg.parser or identity
    try:
        return parser(raw)
    except (ValueError, TypeError) as error:
        logger.error("Invalid value '%s' for '%s': %s", raw, arg.name, error)
        raise InvalidValueError(arg.name, raw, error) from error


def _parse_flags(tokens: list[str], flags: list[Argument]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for flag in flags:
        matcher = flag_matcher(flag)
        index = next(
            (i for i, token in enumerate(tokens) if matcher.fullmatch(token)), None
        )
        if index is None:
            if flag.has_default:
                result[flag.name] = flag.default
            if flag.required:
                logger.error("An argument for flag '%s' was not provided.", flag.name)
                raise MissingFlagError(flag.name)
            continue

        token = tokens.pop(index)
        value = matcher.fullmatch(token).group(1)  # type: ignore[union-attr]
        result[flag.name] = True if value is None else _apply(flag, value)
    return result


def _parse_positional(tokens: list[str], positional: list[Argument]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for index, arg in enumerate(positional):
        if index >= len(tokens):
            if arg.has_default:
                result[arg.name] = arg.default
            if arg.required:
                logger.error(
                    "Expected %d arguments, but got %d. "
                    "An argument for '%s' was not provided.",
                    len(positional),
                    len(tokens),
                    arg.name,
                )
                raise MissingArgumentError(arg.name, len(positional), len(tokens))
            continue
        result[arg.name] = _apply(arg, tokens[index])
    return result


def parse(
    tokens: Sequence[str],
    positional: list[Argument],
    flags: list[Argument],
) -> Context:
    """
    Parse raw tokens against normalized declarations.

    Args:
        tokens (Sequence[str]): Raw tokens. Not mutated.
        positional (list[Argument]): Normalized positional declarations.
        flags (list[Argument]): Normalized flag declarations.

    Returns:
        Context: Parsed args and flags keyed by declared name.

    Raises:
        MissingFlagError: If a required flag has no token.
        MissingArgumentError: If a required positional argument has no token.
        InvalidValueError: If a parser rejects its raw value.
    """
    remaining = list(tokens)
    flag_values = _parse_flags(remaining, flags)
    arg_values = _parse_positional(remaining, positional)
    return Context(args=arg_values, flags=flag_values)

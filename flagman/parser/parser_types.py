# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Ready-made value parsers for argument declarations.

`PARSERS` maps short names to parser callables so configuration files can say
`parser: int` instead of a dotted import path. `resolve_parser()` accepts
either form.

Contents:
- `coerce_bool`: strict boolean parsing (`true/yes/on/1`, `false/no/off/0`).
- `coerce_datetime`: flexible date/time parsing via `dateutil`.
- `PARSERS`: name -> parser mapping.
- `resolve_parser`: turn a name or dotted path into a callable.
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from dateutil import parser as date_parser

from flagman.parser.argument import identity

TRUE_VALUES = frozenset({"true", "t", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "f", "0", "no", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Raises:
        ValueError: If the value is not a recognized truthy or falsy string.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def coerce_datetime(value: str) -> datetime:
    try:
        return date_parser.parse(value)
    except (OverflowError, date_parser.ParserError) as error:
        raise ValueError(f"'{value}' is not a valid date/time") from error


PARSERS: dict[str, Callable[[str], Any]] = {
    "str": identity,
    "string": identity,
    "int": int,
    "float": float,
    "bool": coerce_bool,
    "datetime": coerce_datetime,
    "path": Path,
}


def resolve_parser(reference: str | Callable[[str], Any]) -> Callable[[str], Any]:
    """
    Resolve a parser by short name or dotted import path.

    Raises:
        ImportError: If a dotted path cannot be imported.
        TypeError: If the resolved object is not callable.
    """
    if callable(reference):
        return reference
    if reference in PARSERS:
        return PARSERS[reference]

    from flagman.utils import import_object

    parser = import_object(reference)
    if not callable(parser):
        raise TypeError(f"Parser '{reference}' is not callable")
    return parser

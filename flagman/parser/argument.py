# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass that describes one positional argument or flag,
and `normalize()`, which expands a declaration into a list of fully populated
`Argument` descriptors.

A declaration maps argument names to one of:
- a bare parser callable (shorthand), e.g. `{"count": int}`
- an `Argument` with only some fields set, e.g. `{"count": Argument(parser=int, required=False)}`
- a mapping of `Argument` field names, e.g. `{"count": {"parser": int, "required": False}}`

Declarations may also be given as an iterable of `(name, spec)` pairs, or as a
list of already named `Argument` objects. Entry order is preserved; for
positional arguments it defines the position each entry consumes.

Fields that were not supplied hold `UNSET` until normalization fills them.
`default` stays `UNSET` when no default was declared, so `None`, `False`, `0`
and `""` are all real defaults.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any, Callable, Union

from flagman.exceptions import ArgumentDeclarationError


class Unset:
    """Marker type for fields that were not supplied."""

    _instance: Unset | None = None

    def __new__(cls) -> Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()

DEFAULT_PREFIX = "--"
DEFAULT_TYPE = "string"


def identity(value: str) -> str:
    """Default parser: returns the raw token unchanged."""
    return value


@dataclass
class Argument:
    """
    Represents a positional argument or a flag.

    Attributes:
        name (str): Declared name, used as the key in the parsed context.
            Filled in by `normalize()`.
        label (str): Alternate name shown in usage and matched for flags.
        description (str): Help text.
        parser (Callable[[str], Any]): Converts the raw token to a typed value.
        prefix (str): Flag marker, e.g. `--`. Only meaningful for flags.
        default (Any): Fallback value when no token is given.
        required (bool): True if a token must be supplied.
        type (str): Display type name used in usage text.
    """

    name: str = ""
    label: str | None | Unset = UNSET
    description: str | Unset = UNSET
    parser: Callable[[str], Any] | Unset = UNSET
    prefix: str | Unset = UNSET
    default: Any = UNSET
    required: bool | Unset = UNSET
    type: str | Unset = UNSET

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET

    @property
    def display_name(self) -> str:
        """Label if one is set, otherwise the declared name."""
        return self.label or self.name

    @property
    def display_type(self) -> str:
        return self.type or DEFAULT_TYPE


ArgSpec = Union[Callable[[str], Any], Argument, Mapping[str, Any]]
Declaration = Union[Mapping[str, ArgSpec], Iterable[tuple[str, ArgSpec]], Iterable[Argument]]

FIELD_NAMES = frozenset(field.name for field in fields(Argument))


def _iter_entries(declaration: Declaration | None) -> list[tuple[str, ArgSpec]]:
    if declaration is None:
        return []
    if isinstance(declaration, Mapping):
        return list(declaration.items())
    entries: list[tuple[str, ArgSpec]] = []
    for entry in declaration:
        if isinstance(entry, Argument):
            if not entry.name:
                raise ArgumentDeclarationError(
                    "Argument entries given as a list must carry a name"
                )
            entries.append((entry.name, entry))
        elif isinstance(entry, tuple) and len(entry) == 2:
            entries.append(entry)
        else:
            raise ArgumentDeclarationError(
                f"Invalid declaration entry {entry!r}: expected an Argument "
                "or a (name, spec) pair"
            )
    return entries


def _supplied_fields(name: str, spec: Argument | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(spec, Argument):
        supplied = {
            field.name: getattr(spec, field.name)
            for field in fields(Argument)
            if getattr(spec, field.name) is not UNSET
        }
    else:
        unknown = set(spec) - FIELD_NAMES
        if unknown:
            raise ArgumentDeclarationError(
                f"Unknown field(s) for '{name}': {', '.join(sorted(unknown))}"
            )
        supplied = dict(spec)
    supplied.pop("name", None)
    return supplied


def normalize(
    declaration: Declaration | None, prefix: str = DEFAULT_PREFIX
) -> list[Argument]:
    """
    Expand a declaration into fully populated `Argument` descriptors.

    Bare callables become required arguments with that parser and an unset
    display type. Partial descriptors get every unset field filled with its
    default, and explicitly supplied fields always win. The input is never
    mutated.

    Args:
        declaration (Declaration | None): The declaration to expand.
        prefix (str): Prefix given to entries that do not set one.

    Returns:
        list[Argument]: One descriptor per entry, in declaration order.

    Raises:
        ArgumentDeclarationError: If an entry is not a callable, `Argument`
            or mapping, or a mapping names an unknown field.
    """
    arguments: list[Argument] = []
    for name, spec in _iter_entries(declaration):
        if isinstance(spec, (Argument, Mapping)):
            values: dict[str, Any] = {
                "required": True,
                "label": name,
                "description": "",
                "prefix": prefix,
                "type": DEFAULT_TYPE,
                "parser": identity,
            }
            values.update(_supplied_fields(name, spec))
            arguments.append(Argument(name=name, **values))
        elif callable(spec):
            arguments.append(
                Argument(
                    name=name,
                    label=name,
                    description="",
                    parser=spec,
                    prefix=prefix,
                    required=True,
                )
            )
        else:
            raise ArgumentDeclarationError(
                f"Invalid spec for '{name}': expected a callable, Argument or "
                f"mapping, got {type(spec).__name__}"
            )
    return arguments

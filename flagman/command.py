# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command model registered with a `CommandManager`.

A Command pairs a name with positional and flag declarations and an `execute`
callable that receives the parsed `Context`. Declarations are stored exactly as
given; they are normalized on every validation, parse and usage call.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from flagman.parser.argument import Argument, Declaration, normalize
from flagman.parser.command_parser import Context, parse
from flagman.parser.usage import Usage, render_usage


class Command(BaseModel):
    """
    Represents a named command with its argument declarations.

    Attributes:
        name (str): Name the command is dispatched by.
        description (str): Short description for help output.
        execute (Callable[[Context], Any]): Handler invoked with the parsed context.
        args (Declaration | None): Positional argument declaration.
        flags (Declaration | None): Flag declaration.
    """

    name: str
    description: str = ""
    execute: Callable[[Context], Any]
    args: Any = None
    flags: Any = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        if not name or any(char.isspace() for char in name):
            raise ValueError("Command name must be non-empty and contain no whitespace")
        return name

    @field_validator("execute", mode="before")
    @classmethod
    def validate_execute(cls, execute: Any) -> Any:
        if not callable(execute):
            raise ValueError("execute must be callable")
        return execute

    @field_validator("args", "flags", mode="before")
    @classmethod
    def freeze_pair_iterables(cls, declaration: Any) -> Declaration | None:
        if declaration is None or isinstance(declaration, dict):
            return declaration
        if isinstance(declaration, Mapping):
            return dict(declaration)
        if isinstance(declaration, Iterable) and not isinstance(declaration, (str, bytes)):
            return list(declaration)
        raise ValueError("Declarations must be a mapping or an iterable of entries")

    def positional(self) -> list[Argument]:
        return normalize(self.args)

    def flag_arguments(self) -> list[Argument]:
        return normalize(self.flags)

    def parse_args(self, raw_args: list[str]) -> Context:
        return parse(raw_args, self.positional(), self.flag_arguments())

    def usage(self, footnotes: bool = False) -> Usage:
        return render_usage(self.positional(), self.flag_arguments(), footnotes)

    def __str__(self) -> str:
        return f"Command(name='{self.name}', description='{self.description}')"

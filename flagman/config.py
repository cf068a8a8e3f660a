# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Flagman commands.

A configuration file (YAML or TOML) names the program and lists its commands.
Handlers are given as dotted import paths, and parsers as a short name from
`flagman.parser.PARSERS` or a dotted import path:

    name: greeter
    commands:
      - name: greet
        description: Say hello
        execute: my_module.greet
        args:
          - name: name
        flags:
          - name: loud
            parser: bool
            required: false
            default: false
            description: be loud

Argument entries are kept as an ordered list, so a repeated name is reported by
command validation instead of being silently merged.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flagman.command import Command
from flagman.exceptions import ConfigError
from flagman.logger import logger
from flagman.manager import CommandManager
from flagman.parser.parser_types import resolve_parser
from flagman.utils import import_object


class RawArgument(BaseModel):
    """Raw argument or flag entry. Only supplied fields reach normalization."""

    name: str
    label: str | None = None
    description: str = ""
    parser: str = "str"
    prefix: str = "--"
    default: Any = None
    required: bool = True
    type: str = "string"

    model_config = ConfigDict(extra="forbid")

    def to_entry(self) -> tuple[str, dict[str, Any]]:
        spec = {
            field: getattr(self, field)
            for field in self.model_fields_set
            if field != "name"
        }
        if "parser" in spec:
            try:
                spec["parser"] = resolve_parser(self.parser)
            except (ImportError, TypeError) as error:
                raise ConfigError(
                    f"Cannot resolve parser '{self.parser}' for '{self.name}': {error}"
                ) from error
        return self.name, spec


class RawCommand(BaseModel):
    """Raw command model for Flagman configuration."""

    name: str
    description: str = ""
    execute: str
    args: list[RawArgument] = Field(default_factory=list)
    flags: list[RawArgument] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_command(self) -> Command:
        try:
            execute = import_object(self.execute)
        except ImportError as error:
            raise ConfigError(
                f"Could not import '{self.execute}' for command '{self.name}': {error}"
            ) from error
        if not callable(execute):
            raise ConfigError(f"Handler '{self.execute}' is not callable")

        return Command(
            name=self.name,
            description=self.description,
            execute=execute,
            args=[arg.to_entry() for arg in self.args],
            flags=[flag.to_entry() for flag in self.flags],
        )


class FlagmanConfig(BaseModel):
    """Flagman configuration model."""

    name: str
    commands: list[RawCommand] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def to_manager(self) -> CommandManager:
        manager = CommandManager(self.name)
        for raw_command in self.commands:
            manager.add(raw_command.to_command())
        return manager


def load_raw_config(path: Path) -> dict[str, Any]:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping with a name and a list of "
            "commands.\n"
            "Example:\n"
            "name: 'greeter'\n"
            "commands:\n"
            "  - name: 'greet'\n"
            "    execute: 'my_module.greet'"
        )
    return raw_config


def loader(file_path: Path | str) -> CommandManager:
    """
    Load a `CommandManager` from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        CommandManager: A manager with every configured command registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported.
        ConfigError: If the content is malformed or an import path cannot be resolved.
        CommandValidationError: If a command's declarations are invalid.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = load_raw_config(path)
    try:
        config = FlagmanConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}:\n{error}") from error

    logger.debug("Loaded %d command(s) from %s", len(config.commands), path)
    return config.to_manager()

# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for registering and dispatching Flagman commands.

`CommandManager` owns an ordered, append-only registry of validated commands
and provides:

- Registration with full declaration validation (`add`, `add_command`)
- First-match lookup (`get`)
- Token parsing and handler dispatch (`execute`)
- Usage rendering (`usage`) and Rich help output (`render_help`)
- A process entry point mirroring `sys.argv` (`run`)
- A line-oriented input loop for interactive or scripted use (`listen`)

Fatal conditions (validation failures, missing required values, rejected
values) are raised as `AbortError` after being logged. `run` and `listen`
are the top-level handlers that absorb them. An unknown command is only
logged, and `execute` returns None.

The manager is not thread-safe: finish registering commands before sharing
it between threads.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Iterator, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from flagman.command import Command
from flagman.completer import CommandCompleter
from flagman.console import console as default_console
from flagman.exceptions import AbortError, CommandValidationError
from flagman.logger import logger
from flagman.parser.argument import Declaration, normalize
from flagman.parser.command_parser import Context
from flagman.parser.usage import Usage, render_usage
from flagman.parser.validator import Validation, validate
from flagman.themes import OneColors


class CommandManager:
    """
    Registry and dispatcher for named commands.

    Args:
        name (str): Program name expected as the first token of every invocation.
        console (Console | None): Rich console used for help output.
    """

    def __init__(self, name: str, console: Console | None = None) -> None:
        self.name: str = name
        self.console: Console = console or default_console
        self.commands: list[Command] = []

    def validate(self, command: Command) -> Validation:
        return validate(command)

    def add(self, command: Command) -> CommandManager:
        """
        Validate and register a command.

        Returns:
            CommandManager: `self`, so registrations can be chained.

        Raises:
            CommandValidationError: If the declarations are invalid. Every
                error is logged before raising.
        """
        validation = self.validate(command)
        if not validation.state:
            logger.error("Command '%s' validation failed.", command.name)
            for group, name, message in validation.errors.items():
                logger.error("%s.%s: %s", group, name, message)
            raise CommandValidationError(command.name, validation)

        if self.get(command.name) is not None:
            logger.warning(
                "Command '%s' is already registered; lookups resolve to the first one.",
                command.name,
            )
        self.commands.append(command)
        logger.info("Command '%s' registered.", command.name)
        return self

    def add_command(
        self,
        name: str,
        execute: Callable[[Context], Any],
        description: str = "",
        args: Declaration | None = None,
        flags: Declaration | None = None,
    ) -> CommandManager:
        """Build a `Command` from keyword arguments and register it."""
        return self.add(
            Command(
                name=name,
                description=description,
                execute=execute,
                args=args,
                flags=flags,
            )
        )

    def get(self, name: str) -> Command | None:
        return next((command for command in self.commands if command.name == name), None)

    def execute(self, name: str, raw_args: Sequence[str]) -> Any:
        """
        Parse `raw_args` for the named command and run its handler.

        Returns:
            Any: The handler's result, or None if the command does not exist.

        Raises:
            AbortError: If a required value is missing or a value is rejected.
        """
        command = self.get(name)
        if command is None:
            logger.error("Command '%s' not found.", name)
            return None

        context = command.parse_args(list(raw_args))
        logger.debug("[Command:%s] Parsed context: %s", name, context)
        return command.execute(context)

    def usage(
        self,
        positional: Declaration | None,
        flags: Declaration | None,
        footnotes: bool = False,
    ) -> Usage:
        return render_usage(normalize(positional), normalize(flags), footnotes)

    def run(self, tokens: Sequence[str] | None = None) -> Any:
        """
        Dispatch a process-style argument vector.

        `tokens[0]` must equal the manager name, `tokens[1]` names the command
        and the rest are its raw arguments. Exits with status 1 on a name
        mismatch or an `AbortError`, and with status 2 on any other error.
        """
        tokens = list(sys.argv if tokens is None else tokens)
        if not tokens or tokens[0] != self.name:
            logger.error(
                "Expected program name '%s', got '%s'.",
                self.name,
                tokens[0] if tokens else "",
            )
            sys.exit(1)

        if len(tokens) < 2:
            self.render_help()
            sys.exit(1)

        try:
            return self.execute(tokens[1], tokens[2:])
        except AbortError:
            sys.exit(1)
        except Exception:
            logger.exception("Unexpected error while running '%s'.", tokens[1])
            sys.exit(2)

    def listen(self, stream: Iterable[str] | None = None) -> None:
        """
        Dispatch newline-delimited input until the stream ends.

        Lines are split on single spaces and ignored unless the first token is
        the manager name. Errors from one line never stop the loop. Reads from
        a prompt_toolkit session when stdin is a terminal.

        Exits with status 0 at end of stream, or 1 if reading fails.
        """
        if stream is None:
            stream = self._prompt_lines() if sys.stdin.isatty() else sys.stdin

        try:
            for line in stream:
                self._dispatch_line(line)
        except OSError as error:
            logger.error("Failed reading input: %s", error)
            sys.exit(1)

        logger.info("Input closed. Exiting.")
        sys.exit(0)

    def _prompt_lines(self) -> Iterator[str]:
        session: PromptSession = PromptSession(
            message=f"{self.name} > ",
            history=InMemoryHistory(),
            completer=CommandCompleter(self),
        )
        while True:
            try:
                yield session.prompt()
            except KeyboardInterrupt:
                continue
            except EOFError:
                return

    def _dispatch_line(self, line: str) -> None:
        tokens = line.strip().split(" ")
        if tokens[0] != self.name:
            return
        if len(tokens) < 2:
            self.render_help()
            return

        try:
            result = self.execute(tokens[1], tokens[2:])
        except AbortError:
            return
        except Exception:
            logger.exception("Unexpected error while running '%s'.", tokens[1])
            return

        if result is not None:
            logger.debug("[Command:%s] Result: %r", tokens[1], result)

    def render_help(self, name: str | None = None) -> None:
        """Print an overview of all commands, or the usage of one."""
        if name is None:
            self._render_overview()
            return

        command = self.get(name)
        if command is None:
            self.console.print(f"[{OneColors.DARK_RED}]❌ Command '{escape(name)}' not found.")
            return

        usage = command.usage(footnotes=True)
        self.console.print(
            f"[{OneColors.CYAN_b}]usage:[/] {escape(self.name)} "
            f"[{OneColors.BLUE_b}]{escape(command.name)}[/] {escape(usage.usage)}".rstrip()
        )
        if command.description:
            self.console.print(f"\n{escape(command.description)}")
        if usage.footnotes:
            self.console.print()
            for footnote in usage.footnotes:
                self.console.print(f"  {escape(footnote)}", style=OneColors.MAGENTA)

    def _render_overview(self) -> None:
        table = Table(title=f"[{OneColors.BLUE_b}]{escape(self.name)}[/]", box=box.SIMPLE)
        table.add_column("Command", style=OneColors.BLUE_b)
        table.add_column("Usage", style=OneColors.CYAN)
        table.add_column("Description")
        for command in self.commands:
            table.add_row(
                escape(command.name),
                escape(command.usage().usage),
                escape(command.description),
            )
        self.console.print(table)

    def __str__(self) -> str:
        return f"CommandManager(name='{self.name}', commands={len(self.commands)})"

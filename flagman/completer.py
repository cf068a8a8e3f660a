# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `CommandCompleter`, the prompt_toolkit completer used by
`CommandManager.listen()` when reading from a terminal.

Input lines look like `<program> <command> [tokens...]`, so completion offers:
- the program name for the first word
- registered command names for the second word
- `<prefix><label>=` tokens for flags of that command not typed yet
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from flagman.parser.command_parser import flag_matcher

if TYPE_CHECKING:
    from flagman.manager import CommandManager


class CommandCompleter(Completer):
    """
    Prompt Toolkit completer for Flagman input lines.

    Args:
        manager (CommandManager): The manager providing command declarations.
    """

    def __init__(self, manager: "CommandManager"):
        self.manager = manager

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split(" ")
        stub = tokens[-1]

        if len(tokens) == 1:
            yield from self._complete([self.manager.name], stub)
            return

        if tokens[0] != self.manager.name:
            return

        if len(tokens) == 2:
            names = list(dict.fromkeys(command.name for command in self.manager.commands))
            yield from self._complete(names, stub)
            return

        command = self.manager.get(tokens[1])
        if command is None:
            return

        typed = tokens[2:-1]
        suggestions = []
        for flag in command.flag_arguments():
            matcher = flag_matcher(flag)
            if any(matcher.fullmatch(token) for token in typed):
                continue
            suggestions.append(f"{flag.prefix or ''}{flag.display_name}=")
        yield from self._complete(suggestions, stub)

    def _complete(self, candidates: list[str], stub: str) -> Iterable[Completion]:
        for candidate in candidates:
            if candidate.startswith(stub):
                yield Completion(candidate, start_position=-len(stub))

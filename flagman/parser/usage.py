# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Single-line usage rendering with optional footnotes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flagman.parser.argument import Argument


@dataclass
class Usage:
    usage: str
    footnotes: list[str] = field(default_factory=list)


def format_default(value: Any) -> str:
    """Render a default the way it would be typed on the command line."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_usage(
    positional: list[Argument],
    flags: list[Argument],
    footnotes: bool = False,
) -> Usage:
    """
    Render normalized declarations as `<name: type> ?<--flag: type>*`.

    Optional entries are prefixed with `?`. With footnotes enabled, each entry
    that has a default or a description gets one more `*` than the previous
    annotated entry, and a matching footnote line.
    """
    tokens: list[str] = []
    notes: list[str] = []

    def render(arguments: list[Argument], is_flag: bool) -> None:
        for arg in arguments:
            optional = "" if arg.required else "?"
            prefix = (arg.prefix or "") if is_flag else ""
            annotated = footnotes and (arg.has_default or bool(arg.description))
            stars = "*" * (len(notes) + 1) if annotated else ""
            tokens.append(
                f"{optional}<{prefix}{arg.display_name}: {arg.display_type}>{stars}"
            )
            if annotated:
                default = (
                    f"default={format_default(arg.default)}; " if arg.has_default else ""
                )
                notes.append(f"*{arg.display_name}: {default}{arg.description or ''}")

    render(positional, is_flag=False)
    render(flags, is_flag=True)

    return Usage(usage=" ".join(tokens), footnotes=notes if footnotes else [])

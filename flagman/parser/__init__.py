"""
Flagman CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import UNSET, Argument, identity, normalize
from .command_parser import Context, parse
from .parser_types import PARSERS, coerce_bool, coerce_datetime, resolve_parser
from .usage import Usage, format_default, render_usage
from .validator import Validation, ValidationErrors, validate

__all__ = [
    "Argument",
    "UNSET",
    "identity",
    "normalize",
    "Context",
    "parse",
    "PARSERS",
    "coerce_bool",
    "coerce_datetime",
    "resolve_parser",
    "Usage",
    "format_default",
    "render_usage",
    "Validation",
    "ValidationErrors",
    "validate",
]

"""
Flagman CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command
from .exceptions import (
    AbortError,
    CommandValidationError,
    FlagmanError,
    InvalidValueError,
    MissingArgumentError,
    MissingFlagError,
)
from .manager import CommandManager
from .parser import Argument, Context, Usage, Validation

logger = logging.getLogger("flagman")


__all__ = [
    "CommandManager",
    "Command",
    "Argument",
    "Context",
    "Usage",
    "Validation",
    "FlagmanError",
    "AbortError",
    "CommandValidationError",
    "MissingArgumentError",
    "MissingFlagError",
    "InvalidValueError",
]

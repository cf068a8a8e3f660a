# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import importlib
import logging
import os
from typing import Any

import pythonjsonlogger.json
from rich.console import Console
from rich.logging import RichHandler

from flagman.themes import get_nord_theme


def import_object(dotted_path: str) -> Any:
    """
    Import an attribute from a dotted path like 'my.module.func'.

    Raises:
        ImportError: If the path is malformed, the module cannot be imported,
            or the module has no such attribute.
    """
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path or not attr:
        raise ImportError(f"Invalid import path: '{dotted_path}'")
    module = importlib.import_module(module_path)
    try:
        return getattr(module, attr)
    except AttributeError as error:
        raise ImportError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Configure logging with either CLI-friendly or structured JSON output.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `FLAGMAN_LOG_MODE` environment variable
            or fallback based on container detection.
        log_filename (str | None):
            Optional path of a log file. No file handler is added when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("FLAGMAN_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            console=Console(stderr=True, theme=get_nord_theme()),
            rich_tracebacks=True,
            show_time=False,
            show_level=True,
            show_path=False,
            markup=False,
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("flagman")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)

"""
Flagman CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from argparse import REMAINDER, ArgumentParser
from pathlib import Path
from typing import Any

from flagman.config import loader
from flagman.exceptions import AbortError, FlagmanError
from flagman.logger import logger
from flagman.utils import setup_logging
from flagman.version import __version__


def find_flagman_config() -> Path | None:
    candidates = [
        Path(os.environ["FLAGMAN_CONFIG"]) if os.environ.get("FLAGMAN_CONFIG") else None,
        Path.cwd() / "flagman.yaml",
        Path.cwd() / "flagman.toml",
        Path.cwd() / ".flagman.yaml",
        Path.cwd() / ".flagman.toml",
    ]
    return next((p for p in candidates if p is not None and p.is_file()), None)


def bootstrap(config_path: Path) -> Path:
    """Make modules next to the config file importable by its handler paths."""
    parent = str(config_path.resolve().parent)
    if parent not in sys.path:
        sys.path.insert(0, parent)
    return config_path


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="flagman",
        description="Run commands declared in a Flagman configuration file.",
    )
    parser.add_argument("--version", action="version", version=f"flagman {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="Path to a YAML or TOML config")
    parser.add_argument(
        "--listen",
        action="store_true",
        help="Read '<name> <command> [args...]' lines from standard input",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Console log format"
    )
    parser.add_argument("tokens", nargs=REMAINDER, help="Command name and its arguments")
    return parser


def main(argv: list[str] | None = None) -> Any:
    args = get_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    config_path = args.config or find_flagman_config()
    if not config_path:
        logger.error("No flagman.yaml or flagman.toml found; pass --config.")
        sys.exit(1)

    try:
        manager = loader(bootstrap(config_path))
    except AbortError:
        sys.exit(1)
    except (FlagmanError, FileNotFoundError, ValueError) as error:
        logger.error("%s", error)
        sys.exit(1)

    if args.listen:
        return manager.listen()
    return manager.run([manager.name, *args.tokens])


if __name__ == "__main__":
    main()

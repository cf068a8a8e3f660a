# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Flagman CLI applications."""
from rich.console import Console

from flagman.themes import get_nord_theme

console = Console(color_system="truecolor", theme=get_nord_theme())

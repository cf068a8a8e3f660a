# Flagman CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Flagman."""
import logging

logger: logging.Logger = logging.getLogger("flagman")

"""Filesystem helpers for Hyperlane Validator Setup."""

import logging
import os
import sys

from rich.console import Console


class FileSystemService:
    """Encapsulates file and directory side effects."""

    def __init__(self, logger: logging.Logger, console: Console):
        self.logger = logger
        self.console = console

    def ensure_directory(self, path: str, mode: int) -> bool:
        """Creates ``path`` with ``mode`` if missing. Returns True if created."""
        if os.path.isdir(path):
            return False

        os.makedirs(path, exist_ok=True)
        if sys.platform != "win32":
            os.chmod(path, mode)
        self.logger.debug("Created directory %s with mode %o", path, mode)
        return True

    def is_writable_dir(self, path: str) -> bool:
        return os.path.isdir(path) and os.access(path, os.W_OK)

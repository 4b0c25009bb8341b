"""Startup preconditions for Hyperlane Validator Setup."""

import os

from hyperlanesetup.constants import DB_DIR_MODE
from hyperlanesetup.errors import SetupError
from hyperlanesetup.errors_catalog import actionable_error


class EnvironmentGuard:
    """Checks privileges and writable paths before any provisioning."""

    def __init__(self, context, filesystem_service, logger, console, os_module=os):
        self.context = context
        self.filesystem_service = filesystem_service
        self.logger = logger
        self.console = console
        self.os = os_module

    def check(self):
        if self.os.geteuid() != 0:
            raise SetupError(actionable_error("not_root"))

        log_dir = os.path.dirname(os.path.abspath(self.context.log_file))
        if not self.filesystem_service.is_writable_dir(log_dir):
            raise SetupError(actionable_error("log_path_not_writable", path=log_dir))

    def prepare_database_dir(self):
        db_dir = self.context.db_dir
        try:
            created = self.filesystem_service.ensure_directory(db_dir, DB_DIR_MODE)
        except OSError as exc:
            raise SetupError(actionable_error("db_dir_failed", path=db_dir)) from exc

        if created:
            message = f"Database directory created: {db_dir}"
        else:
            message = f"Database directory already exists: {db_dir}"
        self.console.print(f"[green]{message}[/green]")
        self.logger.info(message)

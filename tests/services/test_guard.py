import os
import stat

import pytest

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import SetupContext
from hyperlanesetup.services.filesystem import FileSystemService
from hyperlanesetup.services.guard import EnvironmentGuard


class FakeOs:
    def __init__(self, euid):
        self.euid = euid

    def geteuid(self):
        return self.euid


def _guard(context, logger, console, euid=0):
    return EnvironmentGuard(
        context=context,
        filesystem_service=FileSystemService(logger=logger, console=console),
        logger=logger,
        console=console,
        os_module=FakeOs(euid),
    )


def test_guard_rejects_non_root(context, logger, console):
    with pytest.raises(SetupError, match="root privileges"):
        _guard(context, logger, console, euid=1000).check()


def test_guard_rejects_missing_log_dir(context, logger, console):
    with pytest.raises(SetupError, match="Log path is not writable"):
        _guard(context, logger, console).check()


def test_guard_rejects_unwritable_log_dir(tmp_path, logger, console, monkeypatch):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    context = SetupContext(log_file=str(log_dir / "setup.log"), db_dir=str(tmp_path / "db"))
    monkeypatch.setattr(os, "access", lambda *_args, **_kwargs: False)

    with pytest.raises(SetupError, match="Log path is not writable"):
        _guard(context, logger, console).check()


def test_guard_passes_for_root_with_writable_log_dir(tmp_path, logger, console):
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    context = SetupContext(log_file=str(log_dir / "setup.log"), db_dir=str(tmp_path / "db"))

    _guard(context, logger, console).check()


def test_prepare_database_dir_creates_world_writable_dir(context, logger, console):
    guard = _guard(context, logger, console)

    guard.prepare_database_dir()

    mode = stat.S_IMODE(os.stat(context.db_dir).st_mode)
    assert mode == 0o777
    assert f"Database directory created: {context.db_dir}" in logger.messages

    guard.prepare_database_dir()

    assert f"Database directory already exists: {context.db_dir}" in logger.messages


def test_prepare_database_dir_failure_is_fatal(tmp_path, logger, console):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    context = SetupContext(log_file=str(tmp_path / "setup.log"), db_dir=str(blocker / "db"))

    with pytest.raises(SetupError, match="Failed to create database directory"):
        _guard(context, logger, console).prepare_database_dir()

"""Subprocess execution service for Hyperlane Validator Setup."""

import os
import shutil
import subprocess
from typing import Dict, Iterable, List, Optional

from hyperlanesetup.errors import SetupError
from hyperlanesetup.errors_catalog import actionable_error


class CommandRunner:
    """Runs external commands with consistent error handling.

    The runner owns the environment handed to every child process, so
    PATH changes made by one installer step are visible to the next.
    """

    def __init__(
        self,
        logger,
        default_timeout: Optional[float] = None,
        env: Optional[Dict[str, str]] = None,
        subprocess_module=subprocess,
    ):
        self.logger = logger
        self.default_timeout = default_timeout
        self.env = dict(os.environ if env is None else env)
        self.subprocess = subprocess_module

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name, path=self.env.get("PATH", os.defpath))

    def prepend_path(self, directory: str):
        current = self.env.get("PATH", "")
        parts = [part for part in current.split(os.pathsep) if part]
        if directory in parts:
            return
        self.env["PATH"] = os.pathsep.join([directory] + parts)
        self.logger.debug("Prepended to PATH: %s", directory)

    def run(
        self,
        cmd: List[str],
        check: bool = True,
        capture_output: bool = False,
        timeout: Optional[float] = None,
        input_text: Optional[str] = None,
        redact: Iterable[str] = (),
    ) -> subprocess.CompletedProcess:
        cmd_str = self._format(cmd, redact)
        self.logger.debug("Executing: %s", cmd_str)

        effective_timeout = timeout if timeout is not None else self.default_timeout

        try:
            result = self.subprocess.run(
                cmd,
                text=True,
                capture_output=capture_output,
                timeout=effective_timeout,
                input=input_text,
                env=self.env,
            )
        except FileNotFoundError as exc:
            raise SetupError(actionable_error("command_not_found", command=cmd[0])) from exc
        except subprocess.TimeoutExpired as exc:
            raise SetupError(f"Command timed out after {effective_timeout}s: {cmd_str}") from exc
        except OSError as exc:
            raise SetupError(f"Failed to execute command: {cmd_str}. {exc}") from exc

        if capture_output and result.stdout:
            self.logger.debug("Command output: %s", result.stdout.strip())

        if result.returncode == 0:
            return result

        stderr = (result.stderr or "").strip() if capture_output else ""
        message = f"Command failed ({result.returncode}): {cmd_str}"
        if stderr:
            message = f"{message}\n{stderr}"

        if check:
            raise SetupError(message)

        self.logger.debug(message)
        return result

    def stream(self, cmd: List[str]) -> int:
        """Runs a command attached to the terminal until it exits."""
        self.logger.debug("Streaming: %s", " ".join(cmd))
        try:
            return self.subprocess.call(cmd, env=self.env)
        except FileNotFoundError as exc:
            raise SetupError(actionable_error("command_not_found", command=cmd[0])) from exc

    @staticmethod
    def _format(cmd: List[str], redact: Iterable[str]) -> str:
        hidden = {value for value in redact if value}
        return " ".join("***" if part in hidden else part for part in cmd)

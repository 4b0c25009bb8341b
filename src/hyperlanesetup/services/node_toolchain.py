"""nvm and Node.js installation."""

import os
from typing import Optional

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import StepStatus


class NodeToolchainInstaller:
    """Ensures nvm and the pinned Node.js major version are available.

    nvm is a shell function rather than an executable, so its presence is
    probed through ``$NVM_DIR/nvm.sh`` and every nvm call runs in a bash
    that sources that file first. Once Node is resolved its bin directory
    is prepended to the runner PATH so that later steps can call ``npm``.
    """

    name = "node"

    def __init__(self, context, runner, fetcher, logger, console):
        self.context = context
        self.runner = runner
        self.fetcher = fetcher
        self.logger = logger
        self.console = console

    @property
    def nvm_dir(self) -> str:
        if self.context.nvm_dir:
            return self.context.nvm_dir
        return self.runner.env.get("NVM_DIR") or os.path.join(os.path.expanduser("~"), ".nvm")

    @property
    def nvm_script(self) -> str:
        return os.path.join(self.nvm_dir, "nvm.sh")

    def nvm_installed(self) -> bool:
        return os.path.isfile(self.nvm_script)

    def node_installed(self) -> bool:
        return self.runner.which("node") is not None

    def ensure(self) -> StepStatus:
        acted = self._ensure_nvm()
        self._activate_node()
        acted = self._ensure_node() or acted
        return StepStatus.INSTALLED if acted else StepStatus.SKIPPED

    def _ensure_nvm(self) -> bool:
        if self.nvm_installed():
            self._done("NVM is already installed. Skipping this step.")
            return False

        self._progress("Installing NVM...")
        script = self.fetcher.fetch(self.context.nvm_install_url, "NVM installer")
        self.runner.env["NVM_DIR"] = self.nvm_dir
        try:
            self.runner.run(["bash"], input_text=script, capture_output=True)
        except SetupError as exc:
            raise SetupError(f"Failed to install NVM. {exc}") from exc

        if not self.nvm_installed():
            raise SetupError(f"Failed to install NVM. {self.nvm_script} was not created.")
        self._done("NVM successfully installed!")
        return True

    def _ensure_node(self) -> bool:
        if self.node_installed():
            self._done("Node.js is already installed. Skipping this step.")
            return False

        major = self.context.node_major_version
        self._progress(f"Installing Node.js v{major}...")
        try:
            self._nvm(f"nvm install {major}")
        except SetupError as exc:
            raise SetupError(f"Failed to install Node.js. {exc}") from exc

        self._activate_node()
        self._done("Node.js successfully installed!")
        return True

    def _activate_node(self):
        if not self.nvm_installed():
            return

        node_bin = self._resolve_node_bin()
        if node_bin:
            self.runner.prepend_path(node_bin)

    def _resolve_node_bin(self) -> Optional[str]:
        result = self._nvm(f"nvm which {self.context.node_major_version}", check=False)
        if result.returncode != 0:
            return None
        lines = (result.stdout or "").strip().splitlines()
        if not lines:
            return None
        return os.path.dirname(lines[-1].strip())

    def _nvm(self, command: str, check: bool = True):
        script = f'export NVM_DIR="{self.nvm_dir}"; . "$NVM_DIR/nvm.sh" && {command}'
        return self.runner.run(["bash", "-c", script], check=check, capture_output=True)

    def _progress(self, message: str):
        self.console.print(f"[yellow]{message}[/yellow]")
        self.logger.info(message)

    def _done(self, message: str):
        self.console.print(f"[green]{message}[/green]")
        self.logger.info(message)

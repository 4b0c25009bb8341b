"""Foundry smart-contract toolchain installation."""

import os

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import StepStatus


class FoundryInstaller:
    name = "foundry"

    def __init__(self, context, runner, fetcher, logger, console):
        self.context = context
        self.runner = runner
        self.fetcher = fetcher
        self.logger = logger
        self.console = console

    @property
    def foundry_bin(self) -> str:
        home = self.runner.env.get("HOME") or os.path.expanduser("~")
        return os.path.join(home, ".foundry", "bin")

    def is_installed(self) -> bool:
        return self.runner.which("foundryup") is not None

    def ensure(self) -> StepStatus:
        if self.is_installed():
            self.console.print("[green]Foundry is already installed. Skipping this step.[/green]")
            self.logger.info("Foundry is already installed. Skipping this step.")
            return StepStatus.SKIPPED

        self.console.print("[yellow]Installing Foundry...[/yellow]")
        self.logger.info("Installing Foundry...")

        script = self.fetcher.fetch(self.context.foundry_install_url, "Foundry installer")
        try:
            self.runner.run(["bash"], input_text=script, capture_output=True)
        except SetupError as exc:
            raise SetupError(f"Failed to install Foundry. {exc}") from exc

        self.runner.prepend_path(self.foundry_bin)

        try:
            self.runner.run(["bash", "-c", "source ~/.bashrc"], capture_output=True)
        except SetupError as exc:
            raise SetupError(f"Failed to source ~/.bashrc. {exc}") from exc

        try:
            self.runner.run(["foundryup"], capture_output=True)
        except SetupError as exc:
            raise SetupError(f"Failed to initialize Foundry. {exc}") from exc

        self.console.print("[green]Foundry successfully installed![/green]")
        self.logger.info("Foundry successfully installed!")
        return StepStatus.INSTALLED

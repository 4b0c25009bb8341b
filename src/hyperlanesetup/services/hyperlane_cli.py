"""Hyperlane CLI and agent image installation."""

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import StepStatus


class HyperlaneCliInstaller:
    """Installs the Hyperlane CLI via npm and pulls the agent image."""

    name = "hyperlane_cli"

    def __init__(self, context, runner, container_service, logger, console):
        self.context = context
        self.runner = runner
        self.container_service = container_service
        self.logger = logger
        self.console = console

    def ensure(self) -> StepStatus:
        acted = self._ensure_cli()
        acted = self._ensure_image() or acted
        return StepStatus.INSTALLED if acted else StepStatus.SKIPPED

    def _ensure_cli(self) -> bool:
        if self.runner.which("hyperlane") is not None:
            self._report("green", "Hyperlane CLI is already installed. Skipping this step.")
            return False

        self._report("yellow", "Installing Hyperlane CLI...")
        try:
            self.runner.run(
                ["npm", "install", "-g", self.context.hyperlane_cli_package],
                capture_output=True,
            )
        except SetupError as exc:
            raise SetupError(f"Failed to install Hyperlane CLI. {exc}") from exc

        self._report("green", "Hyperlane CLI successfully installed!")
        return True

    def _ensure_image(self) -> bool:
        if self.container_service.image_exists():
            self._report("green", "Hyperlane image already exists. Skipping this step.")
            return False

        self._report("yellow", "Pulling Hyperlane image...")
        self.container_service.pull_image()
        self._report("green", "Hyperlane image successfully pulled!")
        return True

    def _report(self, color: str, message: str):
        self.console.print(f"[{color}]{message}[/{color}]")
        self.logger.info(message)

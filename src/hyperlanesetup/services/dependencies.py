"""Base OS package installation."""

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import StepStatus


class DependencyInstaller:
    """Refreshes the apt index and installs the base utilities.

    Every base package ships an executable of the same name, so the step is
    skipped when all of them already resolve on PATH.
    """

    name = "dependencies"

    def __init__(self, context, runner, logger, console):
        self.context = context
        self.runner = runner
        self.logger = logger
        self.console = console

    def missing_packages(self):
        return [
            package
            for group in self.context.base_package_groups
            for package in group
            if self.runner.which(package) is None
        ]

    def ensure(self) -> StepStatus:
        if not self.missing_packages():
            self.console.print("[green]All required dependencies are already installed.[/green]")
            self.logger.info("All required dependencies are already installed. Skipping this step.")
            return StepStatus.SKIPPED

        self.console.print("[yellow]Installing required dependencies...[/yellow]")
        self.logger.info("Installing required dependencies...")

        self._apt(["update"], "Failed to update package list")
        for group in self.context.base_package_groups:
            packages = " and ".join(group)
            self._apt(["install", "-y", *group], f"Failed to install {packages}")

        self.console.print("[green]All required dependencies are installed![/green]")
        self.logger.info("All required dependencies are installed!")
        return StepStatus.INSTALLED

    def _apt(self, args, failure_message: str):
        try:
            self.runner.run(["apt-get", *args], capture_output=True)
        except SetupError as exc:
            raise SetupError(f"{failure_message}. {exc}") from exc

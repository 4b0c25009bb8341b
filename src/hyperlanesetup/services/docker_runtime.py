"""Docker runtime services for Hyperlane Validator Setup."""

from typing import List

from hyperlanesetup.errors import SetupError
from hyperlanesetup.errors_catalog import actionable_error
from hyperlanesetup.models import StepStatus


class DockerInstaller:
    """Installs docker.io and enables the service when docker is missing."""

    name = "docker"

    def __init__(self, runner, logger, console):
        self.runner = runner
        self.logger = logger
        self.console = console

    def is_installed(self) -> bool:
        return self.runner.which("docker") is not None

    def ensure(self) -> StepStatus:
        if self.is_installed():
            self.console.print("[green]Docker is already installed. Skipping this step.[/green]")
            self.logger.info("Docker is already installed. Skipping this step.")
            return StepStatus.SKIPPED

        self.console.print("[yellow]Installing Docker...[/yellow]")
        self.logger.info("Installing Docker...")

        self.runner.run(["apt-get", "update"], check=False, capture_output=True)
        self._required(["apt-get", "install", "-y", "docker.io"], "Failed to install Docker")
        self._required(["systemctl", "start", "docker"], "Failed to start Docker service")
        self._required(["systemctl", "enable", "docker"], "Failed to enable Docker at startup")

        self.console.print("[green]Docker successfully installed and started![/green]")
        self.logger.info("Docker successfully installed and started!")
        return StepStatus.INSTALLED

    def _required(self, cmd: List[str], failure_message: str):
        try:
            self.runner.run(cmd, capture_output=True)
        except SetupError as exc:
            raise SetupError(f"{failure_message}. {exc}") from exc


class ContainerService:
    """Container and image lifecycle helpers built on the docker CLI."""

    def __init__(self, context, runner, logger, console):
        self.context = context
        self.runner = runner
        self.logger = logger
        self.console = console

    def image_exists(self) -> bool:
        result = self.runner.run(
            ["docker", "images", "-q", self.context.image],
            capture_output=True,
        )
        return bool((result.stdout or "").strip())

    def pull_image(self):
        try:
            self.runner.run(
                ["docker", "pull", "--platform", self.context.image_platform, self.context.image],
                capture_output=True,
            )
        except SetupError as exc:
            raise SetupError(f"Failed to pull Hyperlane image. {exc}") from exc

    def container_exists(self, name: str) -> bool:
        result = self.runner.run(
            ["docker", "ps", "-a", "--format", "{{.Names}}"],
            capture_output=True,
        )
        names = [line.strip() for line in (result.stdout or "").splitlines()]
        return name in names

    def remove_container(self, name: str):
        try:
            self.runner.run(["docker", "rm", "-f", name], capture_output=True)
        except SetupError as exc:
            raise SetupError(f"Failed to remove the old container. {exc}") from exc

    def follow_logs(self):
        name = self.context.container_name
        self.console.print("[yellow]Viewing runtime logs...[/yellow]")
        self.logger.info("Viewing runtime logs...")

        if not self.container_exists(name):
            raise SetupError(actionable_error("container_not_started", name=name))

        returncode = self.runner.stream(["docker", "logs", "-f", name])
        if returncode != 0:
            raise SetupError(f"Failed to view logs (exit code {returncode}).")

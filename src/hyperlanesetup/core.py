import logging
from typing import Optional

import requests
from rich.console import Console

from .errors import SetupError
from .menu import MenuController
from .models import SetupContext
from .services.command_runner import CommandRunner
from .services.dependencies import DependencyInstaller
from .services.docker_runtime import ContainerService, DockerInstaller
from .services.download import ScriptFetcher
from .services.filesystem import FileSystemService
from .services.foundry import FoundryInstaller
from .services.guard import EnvironmentGuard
from .services.hyperlane_cli import HyperlaneCliInstaller
from .services.node_toolchain import NodeToolchainInstaller
from .services.pipeline import PipelineResult, ProvisioningPipeline
from .services.prompts import Prompter, RichPrompter
from .services.validator import ValidatorLauncher

console = Console()
logger = logging.getLogger("hyperlanesetup")

LOG_FILE_FORMAT = "%(asctime)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def attach_log_file(log_file: str, verbose: bool = False) -> logging.FileHandler:
    """Mirrors every log record into ``log_file`` with a timestamp prefix."""
    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(file_handler)
    if logger.level == logging.NOTSET or logger.level > file_handler.level:
        logger.setLevel(file_handler.level)
    return file_handler


class HyperlaneSetup:
    def __init__(
        self,
        context: Optional[SetupContext] = None,
        prompter: Optional[Prompter] = None,
        runner: Optional[CommandRunner] = None,
        verbose: bool = False,
        requests_module=requests,
    ):
        self.context = context or SetupContext()
        self.verbose = verbose
        self.prompter = prompter or RichPrompter(console)
        self.command_runner = runner or CommandRunner(
            logger=logger,
            default_timeout=self.context.command_timeout,
        )

        self.filesystem_service = FileSystemService(logger=logger, console=console)
        self.guard = EnvironmentGuard(
            context=self.context,
            filesystem_service=self.filesystem_service,
            logger=logger,
            console=console,
        )
        self.script_fetcher = ScriptFetcher(
            logger=logger,
            timeout=self.context.download_timeout,
            requests_module=requests_module,
        )
        self.container_service = ContainerService(
            context=self.context,
            runner=self.command_runner,
            logger=logger,
            console=console,
        )

        self.dependency_installer = DependencyInstaller(
            context=self.context,
            runner=self.command_runner,
            logger=logger,
            console=console,
        )
        self.docker_installer = DockerInstaller(
            runner=self.command_runner,
            logger=logger,
            console=console,
        )
        self.node_installer = NodeToolchainInstaller(
            context=self.context,
            runner=self.command_runner,
            fetcher=self.script_fetcher,
            logger=logger,
            console=console,
        )
        self.foundry_installer = FoundryInstaller(
            context=self.context,
            runner=self.command_runner,
            fetcher=self.script_fetcher,
            logger=logger,
            console=console,
        )
        self.hyperlane_cli_installer = HyperlaneCliInstaller(
            context=self.context,
            runner=self.command_runner,
            container_service=self.container_service,
            logger=logger,
            console=console,
        )
        self.validator_launcher = ValidatorLauncher(
            context=self.context,
            runner=self.command_runner,
            container_service=self.container_service,
            prompter=self.prompter,
            logger=logger,
            console=console,
        )

    def build_pipeline(self) -> ProvisioningPipeline:
        return ProvisioningPipeline(
            steps=[
                self.dependency_installer,
                self.docker_installer,
                self.node_installer,
                self.foundry_installer,
                self.hyperlane_cli_installer,
                self.validator_launcher,
            ],
            logger=logger,
        )

    def check_environment(self):
        """Runs the startup guard, then starts mirroring logs to the log file."""
        self.guard.check()
        attach_log_file(self.context.log_file, verbose=self.verbose)
        self.guard.prepare_database_dir()

    def install_all(self) -> PipelineResult:
        console.print("[yellow]Starting full installation process...[/yellow]")
        logger.info("Starting full installation process...")

        result = self.build_pipeline().run()
        if not result.ok:
            raise SetupError(result.error)

        console.print("[green]All steps completed successfully![/green]")
        logger.info("All steps completed successfully!")
        return result

    def view_logs(self):
        self.container_service.follow_logs()

    def run(self) -> int:
        try:
            self.check_environment()
            return MenuController(
                app=self,
                prompter=self.prompter,
                console=console,
                runner=self.command_runner,
            ).run()
        except SetupError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error("Error: %s", exc)
            return 1
        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1

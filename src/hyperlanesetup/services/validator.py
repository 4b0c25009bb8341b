"""Validator configuration and container launch."""

import re
from typing import List

from hyperlanesetup.constants import PRIVATE_KEY_PATTERN
from hyperlanesetup.errors import SetupError
from hyperlanesetup.errors_catalog import actionable_error
from hyperlanesetup.models import StepStatus, ValidatorInput

_PRIVATE_KEY_RE = re.compile(PRIVATE_KEY_PATTERN)


def is_valid_private_key(value: str) -> bool:
    return bool(_PRIVATE_KEY_RE.fullmatch(value or ""))


def build_run_command(context, container_name: str, validator_input: ValidatorInput) -> List[str]:
    chain = context.origin_chain_name
    key = validator_input.private_key
    return [
        "docker",
        "run",
        "-d",
        "-it",
        "--name",
        container_name,
        "--mount",
        f"type=bind,source={context.db_dir},target={context.container_db_path}",
        context.image,
        context.validator_binary,
        "--db",
        context.container_db_path,
        "--originChainName",
        chain,
        "--reorgPeriod",
        str(context.reorg_period),
        "--validator.id",
        validator_input.validator_name,
        "--checkpointSyncer.type",
        context.checkpoint_syncer_type,
        "--checkpointSyncer.folder",
        context.checkpoint_syncer_folder,
        "--checkpointSyncer.path",
        context.checkpoint_syncer_path,
        "--validator.key",
        key,
        f"--chains.{chain}.signer.key",
        key,
        f"--chains.{chain}.customRpcUrls",
        validator_input.rpc_url,
    ]


class ValidatorLauncher:
    """Collects operator input and starts the validator container."""

    name = "validator"

    def __init__(self, context, runner, container_service, prompter, logger, console):
        self.context = context
        self.runner = runner
        self.container_service = container_service
        self.prompter = prompter
        self.logger = logger
        self.console = console

    def ensure(self) -> StepStatus:
        self.launch()
        return StepStatus.INSTALLED

    def launch(self) -> str:
        self.console.print("[yellow]Configuring and starting the Validator...[/yellow]")
        self.logger.info("Configuring and starting the Validator...")

        validator_input = self.collect_input()
        container_name = self.resolve_container_name()

        cmd = build_run_command(self.context, container_name, validator_input)
        try:
            self.runner.run(cmd, capture_output=True, redact=[validator_input.private_key])
        except SetupError as exc:
            message = str(exc).replace(validator_input.private_key, "***")
            raise SetupError(f"Failed to start the Validator. {message}") from None

        message = f"Validator configured and started! Container name: {container_name}"
        self.console.print(f"[green]{message}[/green]")
        self.logger.info(message)
        return container_name

    def collect_input(self) -> ValidatorInput:
        validator_name = self.prompter.ask("Enter Validator Name")
        private_key = self.ask_private_key()
        rpc_url = self.prompter.ask("Enter RPC URL")
        return ValidatorInput(
            validator_name=validator_name,
            private_key=private_key,
            rpc_url=rpc_url,
        )

    def ask_private_key(self) -> str:
        attempts = self.context.max_key_attempts
        for _ in range(attempts):
            value = self.prompter.ask(
                "Enter Private Key (format: 0x followed by 64 hex characters)",
                password=True,
            ).strip()
            if is_valid_private_key(value):
                return value

            message = actionable_error("invalid_private_key")
            self.console.print(f"[red]{message}[/red]")
            self.logger.error(message)

        raise SetupError(actionable_error("private_key_attempts_exhausted", attempts=str(attempts)))

    def resolve_container_name(self) -> str:
        default_name = self.context.container_name
        if not self.container_service.container_exists(default_name):
            return default_name

        self.console.print(
            f"[yellow]An existing container named '{default_name}' was found.[/yellow]"
        )
        self.logger.info("An existing container named '%s' was found.", default_name)

        if self.prompter.confirm("Do you want to remove the old container and continue?"):
            self.container_service.remove_container(default_name)
            self.console.print("[green]Old container removed. Proceeding to start a new container.[/green]")
            self.logger.info("Old container removed. Proceeding to start a new container.")
            return default_name

        new_name = self.prompter.ask("Enter a new container name").strip()
        if not new_name:
            raise SetupError(actionable_error("empty_container_name"))
        return new_name

"""Shared domain models for Hyperlane Validator Setup."""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from . import constants


@dataclass(frozen=True)
class SetupContext:
    """Fixed configuration for one run, passed to every service."""

    log_file: str = constants.LOG_FILE
    db_dir: str = constants.DB_DIR
    container_name: str = constants.CONTAINER_NAME
    image_repository: str = constants.IMAGE_REPOSITORY
    image_tag: str = constants.IMAGE_TAG
    image_platform: str = constants.IMAGE_PLATFORM
    container_db_path: str = constants.CONTAINER_DB_PATH
    validator_binary: str = constants.VALIDATOR_BINARY
    origin_chain_name: str = constants.ORIGIN_CHAIN_NAME
    reorg_period: int = constants.REORG_PERIOD
    checkpoint_syncer_type: str = constants.CHECKPOINT_SYNCER_TYPE
    nvm_version: str = constants.NVM_VERSION
    nvm_dir: Optional[str] = None
    node_major_version: str = constants.NODE_MAJOR_VERSION
    foundry_install_url: str = constants.FOUNDRY_INSTALL_URL
    hyperlane_cli_package: str = constants.HYPERLANE_CLI_PACKAGE
    base_package_groups: Tuple[Tuple[str, ...], ...] = constants.BASE_PACKAGE_GROUPS
    max_key_attempts: int = constants.MAX_KEY_ATTEMPTS
    download_timeout: float = constants.DOWNLOAD_TIMEOUT
    command_timeout: Optional[float] = None

    @property
    def image(self) -> str:
        return f"{self.image_repository}:{self.image_tag}"

    @property
    def nvm_install_url(self) -> str:
        return constants.NVM_INSTALL_URL.format(version=self.nvm_version)

    @property
    def checkpoint_syncer_folder(self) -> str:
        return self.origin_chain_name

    @property
    def checkpoint_syncer_path(self) -> str:
        return f"{self.container_db_path}/{self.origin_chain_name}_checkpoints"


@dataclass(frozen=True)
class ValidatorInput:
    """Operator-supplied launch parameters. Held in memory only."""

    validator_name: str
    private_key: str
    rpc_url: str

    def __repr__(self) -> str:
        return (
            f"ValidatorInput(validator_name={self.validator_name!r}, "
            f"private_key='***', rpc_url={self.rpc_url!r})"
        )


class StepStatus(str, enum.Enum):
    INSTALLED = "installed"
    SKIPPED = "skipped"
    FAILED = "failed"

"""Default values for Hyperlane Validator Setup."""

LOG_FILE = "/var/log/hyperlane_setup.log"
DB_DIR = "/opt/hyperlane_db_base"
DB_DIR_MODE = 0o777

CONTAINER_NAME = "hyperlane"
IMAGE_REPOSITORY = "gcr.io/abacus-labs-dev/hyperlane-agent"
IMAGE_TAG = "agents-v1.0.0"
IMAGE_PLATFORM = "linux/amd64"

CONTAINER_DB_PATH = "/hyperlane_db_base"
VALIDATOR_BINARY = "./validator"
ORIGIN_CHAIN_NAME = "base"
REORG_PERIOD = 1
CHECKPOINT_SYNCER_TYPE = "localStorage"

NVM_VERSION = "v0.40.0"
NVM_INSTALL_URL = "https://raw.githubusercontent.com/nvm-sh/nvm/{version}/install.sh"
NODE_MAJOR_VERSION = "20"
FOUNDRY_INSTALL_URL = "https://foundry.paradigm.xyz"
HYPERLANE_CLI_PACKAGE = "@hyperlane-xyz/cli"

BASE_PACKAGE_GROUPS = (("wget", "curl"), ("toilet",))

PRIVATE_KEY_PATTERN = r"^0x[0-9a-fA-F]{64}$"
MAX_KEY_ATTEMPTS = 5
DOWNLOAD_TIMEOUT = 60.0

DEFAULT_CONFIG_FILE = ".hyperlanesetup.yml"

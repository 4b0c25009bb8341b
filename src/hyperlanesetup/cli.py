import logging
import os
from dataclasses import fields

import click
from rich.logging import RichHandler

from .constants import DEFAULT_CONFIG_FILE
from .core import HyperlaneSetup, SetupError
from .models import SetupContext
from .services.config_loader import ConfigLoader

_CONTEXT_FIELDS = {item.name for item in fields(SetupContext)}


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


def build_context(config_values, **overrides) -> SetupContext:
    values = {key: value for key, value in config_values.items() if key in _CONTEXT_FIELDS}
    for key, value in overrides.items():
        resolved = _resolve_option(value, config_values, key)
        if resolved is not None:
            values[key] = resolved

    if values.get("max_key_attempts", 1) < 1:
        raise SetupError("max_key_attempts must be at least 1.")

    return SetupContext(**values)


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option("--log-file", type=click.Path(), help="Path to log file (default: /var/log/hyperlane_setup.log)")
@click.option(
    "--db-dir",
    type=click.Path(),
    help="Host directory mounted as the validator database (default: /opt/hyperlane_db_base)",
)
@click.option(
    "--max-key-attempts",
    type=int,
    default=None,
    help="Number of private key entries allowed before giving up.",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
def main(config, log_file, db_dir, max_key_attempts, verbose):
    """Provision this host and launch a Hyperlane validator container."""
    logger = logging.getLogger("hyperlanesetup")

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
        context = build_context(
            config_values,
            log_file=log_file,
            db_dir=db_dir,
            max_key_attempts=max_key_attempts,
        )
    except SetupError as exc:
        raise click.ClickException(str(exc)) from exc

    verbose = bool(_resolve_option(verbose, config_values, "verbose", default=False))
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    app = HyperlaneSetup(context=context, verbose=verbose)
    raise SystemExit(app.run())


if __name__ == "__main__":
    main()

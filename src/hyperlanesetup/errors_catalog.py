"""Actionable error catalog for Hyperlane Validator Setup."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "not_root": {
        "what": "Please run this script with root privileges!",
        "next": "Re-run the command with `sudo` or as the root user.",
    },
    "log_path_not_writable": {
        "what": "Log path is not writable: {path}",
        "next": "Check permissions or adjust the path with `--log-file`.",
    },
    "db_dir_failed": {
        "what": "Failed to create database directory: {path}",
        "next": "Check that the parent directory exists and is writable, or use `--db-dir`.",
    },
    "invalid_private_key": {
        "what": "Invalid Private Key format!",
        "next": "Ensure it starts with '0x' and is followed by 64 hex characters.",
    },
    "private_key_attempts_exhausted": {
        "what": "No valid private key entered after {attempts} attempts.",
        "next": "Check the key format (0x followed by 64 hex characters) and start again.",
    },
    "empty_container_name": {
        "what": "Container name cannot be empty!",
        "next": "Enter a new container name or allow removal of the old container.",
    },
    "container_not_started": {
        "what": "The '{name}' container does not exist.",
        "next": "Ensure it has been started with option 1 before viewing logs.",
    },
    "command_not_found": {
        "what": "Required command not found: {command}",
        "next": "Install it or run the full installation first.",
    },
    "insecure_url": {
        "what": "{label} must be downloaded over HTTPS: {url}",
        "next": "Configure an `https://` URL for this installer.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"

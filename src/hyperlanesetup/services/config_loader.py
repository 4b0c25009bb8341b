"""Configuration loader for Hyperlane Validator Setup."""

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Union, get_args, get_origin

import yaml

from hyperlanesetup.errors import SetupError
from hyperlanesetup.models import SetupContext

_NOT_CONFIGURABLE = {"base_package_groups"}


def _configurable_types() -> Dict[str, Any]:
    types = {
        item.name: item.type
        for item in fields(SetupContext)
        if item.name not in _NOT_CONFIGURABLE
    }
    types["verbose"] = bool
    return types


class ConfigLoader:
    """Loads YAML configuration files and checks values against SetupContext."""

    FIELD_TYPES = _configurable_types()
    SUPPORTED_KEYS = set(FIELD_TYPES)

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise SetupError(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise SetupError(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise SetupError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise SetupError(f"Unknown configuration keys: {unknown_list}")

        return {key: self._coerce(key, value) for key, value in parsed.items()}

    def _coerce(self, key: str, value: Any) -> Any:
        expected = self.FIELD_TYPES[key]
        nullable = False
        if get_origin(expected) is Union:
            args = [arg for arg in get_args(expected) if arg is not type(None)]
            nullable = len(args) < len(get_args(expected))
            expected = args[0]

        if value is None:
            if nullable:
                return None
            raise SetupError(f"Configuration key '{key}' must have a value.")

        if expected is bool:
            if isinstance(value, bool):
                return value
        elif expected is int:
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        elif expected is float:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return float(value)
        elif expected is str:
            if isinstance(value, (str, int, float)) and not isinstance(value, bool):
                text = str(value).strip()
                if text:
                    return text

        type_name = getattr(expected, "__name__", str(expected))
        raise SetupError(f"Configuration key '{key}' must be a {type_name}, got {value!r}.")

"""
redfish_proxy Config - Loading from file and environment.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from redfish_proxy.config.constants import CONFIG_FILE
from redfish_proxy.config.models import Config
from redfish_proxy.core.exceptions import ConfigurationError

# Environment variable -> connector setting
ENV_MAPPINGS = {
    "REDFISH_PROXY_BASE_URL": "base_url",
    "REDFISH_PROXY_USERNAME": "username",
    "REDFISH_PROXY_PASSWORD": "password",
    "REDFISH_PROXY_AUTH_TOKEN": "auth_token",
    "REDFISH_PROXY_VERIFY_SSL": "verify_ssl",
    "REDFISH_PROXY_TIMEOUT": "timeout",
}


def _read_file(path: Path) -> dict[str, Any]:
    """Read the JSON config file, returning an empty dict when absent."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ConfigurationError(f"Cannot read config file: {e}", {"path": str(path)}) from e
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a JSON object", {"path": str(path)})
    return data


def load_config(path: Path | str | None = None) -> Config:
    """
    Load configuration.

    Priority:
    1. Environment variables (REDFISH_PROXY_*)
    2. Config file (~/.redfish_proxy/config.json unless path is given)
    3. Defaults

    Raises:
        ConfigurationError: If the file is unreadable or a value is invalid
    """
    config_path = Path(path) if path is not None else CONFIG_FILE
    data = _read_file(config_path)

    connector_data = data.get("connector") or {}
    if not isinstance(connector_data, dict):
        raise ConfigurationError("'connector' must be a JSON object", {"path": str(config_path)})
    connector_data = dict(connector_data)
    for env_var, key in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        if key == "verify_ssl":
            connector_data[key] = value.lower() in ("1", "true", "yes", "on")
        else:
            # pydantic coerces numeric strings for timeout
            connector_data[key] = value
    data["connector"] = connector_data

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        # Only locations and messages, never the offending input values
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e.error_count()} error(s)", {"errors": errors}) from e

    logger.debug(f"Loaded config for {config.connector.base_url} from {config_path}")
    return config

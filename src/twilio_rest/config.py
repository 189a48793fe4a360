"""
Client Configuration Loading

Builds ClientConfig from a YAML file or from environment variables.

YAML layout (section name defaults to "twilio"):

    twilio:
      account_sid: ${TWILIO_ACCOUNT_SID}
      auth_token: ${TWILIO_AUTH_TOKEN}
      endpoint: ${TWILIO_ENDPOINT:https://api.twilio.com}
      connect_timeout: 10
      read_timeout: 300

Substitution syntax:
- ${VAR_NAME} - environment variable, empty when unset
- ${VAR_NAME:default} - environment variable with default value

A .env file next to the config file or in the working directory is loaded
first; it never overrides variables already set in the process environment.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import msgspec
import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .structs import ClientConfig

ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")

DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_SECTION = "twilio"
DEFAULT_ENV_PREFIX = "TWILIO_"
REQUIRED_KEYS = ("account_sid", "auth_token")

logger = logging.getLogger(__name__)


def substitute_env_vars(content: str) -> str:
    """Replace ${VAR} and ${VAR:default} references with environment values."""
    def replace_var(match):
        name, default = match.group(1).strip(), match.group(2)
        value = os.getenv(name)
        if value is not None:
            return value
        if default is None:
            logger.warning(f"Environment variable {name} not set - using empty value")
        return default or ""

    return ENV_VAR_PATTERN.sub(replace_var, content)


def _load_env_files(config_path: Path) -> None:
    for env_path in (config_path.parent / ".env", Path.cwd() / ".env"):
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            logger.info(f"Loaded environment variables from: {env_path}")
            return
    logger.debug("No .env file found - using system environment variables only")


def _build_config(data: Dict[str, Any], config_name: str) -> ClientConfig:
    missing_keys = [key for key in REQUIRED_KEYS if key not in data]
    if missing_keys:
        raise ConfigurationError(
            f"Missing required keys in {config_name}: {missing_keys}",
            config_name
        )

    # Empty endpoint/timeouts (e.g. unset env vars) fall back to defaults
    values = {key: value for key, value in data.items()
              if key in REQUIRED_KEYS or value not in (None, "")}
    try:
        config = msgspec.convert(values, ClientConfig, strict=False)
    except msgspec.ValidationError as e:
        raise ConfigurationError(f"Invalid {config_name} configuration: {e}", config_name) from e

    config.validate()
    return config


def load_client_config(
    config_path: Optional[Union[str, Path]] = None,
    section: str = DEFAULT_SECTION
) -> ClientConfig:
    """
    Load ClientConfig from a YAML file.

    Args:
        config_path: Path to YAML file (defaults to ./config.yaml)
        section: Top-level section holding the client settings

    Raises:
        ConfigurationError: If the file is missing, invalid or incomplete
    """
    path = Path(config_path) if config_path is not None else Path.cwd() / DEFAULT_CONFIG_FILE
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    _load_env_files(path)

    try:
        content = substitute_env_vars(path.read_text(encoding="utf-8"))
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e

    section_data = data.get(section) if isinstance(data, dict) else None
    if not isinstance(section_data, dict):
        raise ConfigurationError(f"Section '{section}' not found in {path}", section)

    return _build_config(section_data, section)


def client_config_from_env(prefix: str = DEFAULT_ENV_PREFIX) -> ClientConfig:
    """
    Build ClientConfig from <prefix>ACCOUNT_SID, <prefix>AUTH_TOKEN,
    <prefix>ENDPOINT, <prefix>CONNECT_TIMEOUT and <prefix>READ_TIMEOUT.
    """
    data: Dict[str, Any] = {
        "account_sid": os.getenv(f"{prefix}ACCOUNT_SID", ""),
        "auth_token": os.getenv(f"{prefix}AUTH_TOKEN", ""),
    }
    for key in ("endpoint", "connect_timeout", "read_timeout"):
        value = os.getenv(f"{prefix}{key.upper()}")
        if value:
            data[key] = value

    return _build_config(data, f"{prefix}* environment")

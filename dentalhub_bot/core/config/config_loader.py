"""Configuration loader with YAML and environment variable support."""

import os
import re
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from ..environment import Environment
from ..exceptions import ConfigurationError
from .config_models import AppConfig

EXAMPLE_CONFIG_PATH = Path("config/config.example.yaml")

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def load_env_variables() -> None:
    """Load environment variables from .env file in the working directory."""
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)
        logger.debug(f"Loaded environment variables from {env_path}")


def substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute ${VAR_NAME} placeholders with environment variables.

    Unset variables become empty strings.

    Args:
        value: Configuration value (string, dict, list, etc.)

    Returns:
        Value with environment variables substituted
    """
    if isinstance(value, str):
        for match in _ENV_PATTERN.findall(value):
            env_value = os.getenv(match)
            if env_value is None:
                logger.debug(f"Environment variable '{match}' not set, using empty string")
                env_value = ""
            value = value.replace(f"${{{match}}}", env_value)
        return value
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    return value


def _resolve_config_file(config_path: str) -> Path:
    config_file = Path(config_path)
    if config_file.exists():
        return config_file

    if Environment.is_production():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    if EXAMPLE_CONFIG_PATH.exists():
        logger.warning(
            f"Config file not found: {config_path}. Falling back to {EXAMPLE_CONFIG_PATH}"
        )
        return EXAMPLE_CONFIG_PATH

    raise FileNotFoundError(
        f"Config file not found: {config_path} and no example config available"
    )


def load_config(config_path: str = "config/config.yaml") -> AppConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated AppConfig

    Raises:
        FileNotFoundError: If no config file can be found
        ConfigurationError: If the YAML or its values are invalid
    """
    load_env_variables()

    config_file = _resolve_config_file(config_path)
    logger.info(f"Loading config from {config_file} in {Environment.current()} environment")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    raw: Dict[str, Any] = substitute_env_vars(config_data) if isinstance(config_data, dict) else {}

    try:
        return AppConfig.from_dict(raw)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_file}", details={"errors": e.errors()}
        ) from e

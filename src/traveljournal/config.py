"""Configuration loader with YAML and environment variable support.

Reads ~/.config/traveljournal/config.yaml when present and applies
TRAVELJOURNAL_* environment overrides on top.

Environment variables:
- TRAVELJOURNAL_API_BASE_URL: Override api.base_url
- TRAVELJOURNAL_API_ACCESS_TOKEN: Override api.access_token
- TRAVELJOURNAL_API_TIMEOUT: Override api.timeout (seconds)
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from traveljournal.models.config import Config
from traveljournal.utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "traveljournal" / "config.yaml"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    A missing file is not an error: defaults plus environment overrides
    are used.

    Args:
        config_path: Path to config file. If None, uses ~/.config/traveljournal/config.yaml

    Returns:
        Validated Config object

    Raises:
        ValueError: If the file is not valid YAML or validation fails
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    logger.info("config_loading", path=str(config_path))

    if config_path.exists():
        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error("config_yaml_error", path=str(config_path), error=str(e))
            raise ValueError(f"Configuration file is not valid YAML: {e}") from e
    else:
        data = {}

    data = _apply_env_overrides(data)

    try:
        config = Config(**data)
    except ValidationError as e:
        logger.error("config_validation_error", path=str(config_path), error=str(e))
        raise ValueError(f"Configuration validation failed: {e}") from e

    logger.info("config_loaded", path=str(config_path), base_url=str(config.api.base_url))
    return config


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration data.

    Environment variables use the format: TRAVELJOURNAL_SECTION_KEY
    For example: TRAVELJOURNAL_API_BASE_URL sets data['api']['base_url']

    Args:
        data: Base configuration dictionary from YAML

    Returns:
        Configuration dictionary with environment overrides applied
    """
    if data.get("api") is None:
        data["api"] = {}

    if env_base_url := os.getenv("TRAVELJOURNAL_API_BASE_URL"):
        data["api"]["base_url"] = env_base_url

    if env_token := os.getenv("TRAVELJOURNAL_API_ACCESS_TOKEN"):
        data["api"]["access_token"] = env_token

    if env_timeout := os.getenv("TRAVELJOURNAL_API_TIMEOUT"):
        try:
            data["api"]["timeout"] = float(env_timeout)
        except ValueError:
            pass  # Invalid value, ignore

    return data

"""
Configuration loader
"""
import logging
import os
from pathlib import Path

import yaml

from codereg.models import Settings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/codereg.yaml"


def load_settings(config_path: str = DEFAULT_CONFIG_PATH) -> Settings:
    """
    Load settings from YAML file

    Args:
        config_path: Path to config file

    Returns:
        Settings object

    Raises:
        FileNotFoundError: If config file not found
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return Settings(**data)


def resolve_settings() -> Settings:
    """Settings from $CODEREG_CONFIG (or the default path), defaults if absent"""
    config_path = os.getenv("CODEREG_CONFIG", DEFAULT_CONFIG_PATH)
    try:
        return load_settings(config_path)
    except FileNotFoundError:
        logger.warning(f"⚠️ {config_path} not found, using default settings")
        return Settings()

"""Configuration file loader with validation"""

import yaml
import os
from pathlib import Path
from typing import Dict, Any, Optional
from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = "config/fairlens.yaml"

REQUIRED_KEYS = ['version', 'data_source', 'retry', 'logging']

SECTION_DEFAULTS = {
    'data_source': {
        'backend': 'fixture',
        'fixture_dir': 'tests/fixtures',
        'decisions_file': 'sample_decisions.json',
        'alerts_file': 'sample_fraud_alerts.json',
        'cache_ttl_seconds': 30,
    },
    'retry': {
        'max_retries': 3,
        'base_delay': 1,
        'max_delay': 8,
    },
    'logging': {
        'level': 'INFO',
    },
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load YAML configuration file with validation.
    FAIRLENS_CONFIG overrides the default location.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary with configuration

    Raises:
        ConfigurationError: If file doesn't exist or invalid YAML
    """
    if config_path is None:
        config_path = os.getenv("FAIRLENS_CONFIG", DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")

    missing_keys = [key for key in REQUIRED_KEYS if key not in config]
    if missing_keys:
        raise ConfigurationError(f"Missing required configuration keys: {missing_keys}")

    return config


def save_config(config_path: str, config: Dict[str, Any]) -> None:
    """
    Save configuration to YAML file

    Args:
        config_path: Path to configuration file
        config: Configuration dictionary

    Raises:
        ConfigurationError: If unable to write file
    """
    try:
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w') as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}") from e


def get_section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """
    Get a configuration section merged over its defaults

    Args:
        config: Full configuration dictionary
        name: Section name (data_source, retry, logging)

    Returns:
        Section dictionary
    """
    section = dict(SECTION_DEFAULTS.get(name, {}))
    section.update(config.get(name) or {})
    return section

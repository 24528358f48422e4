"""Utility modules"""

from .config_loader import load_config, save_config, get_section
from .errors import (
    FairLensError,
    InvalidRecord,
    DataUnavailable,
    InvalidStatusTransition,
    ConfigurationError
)

__all__ = [
    "load_config",
    "save_config",
    "get_section",
    "FairLensError",
    "InvalidRecord",
    "DataUnavailable",
    "InvalidStatusTransition",
    "ConfigurationError"
]

"""Data source adapters"""

from typing import Any, Dict

from fairlens.sources.base import DecisionDataSource
from fairlens.sources.cached_source import CachedDecisionSource
from fairlens.sources.fixture_source import FixtureDataSource
from fairlens.utils.config_loader import get_section
from fairlens.utils.errors import ConfigurationError
from fairlens.utils.logging import get_logger

logger = get_logger(__name__)


def get_data_source(config: Dict[str, Any]) -> DecisionDataSource:
    """
    Build the configured data source.

    Args:
        config: Full configuration dictionary

    Returns:
        Data source, wrapped in a decision cache when cache_ttl_seconds > 0

    Raises:
        ConfigurationError: If the backend is unknown
    """
    settings = get_section(config, "data_source")
    backend = settings["backend"]

    if backend == "fixture":
        source = FixtureDataSource(
            fixture_dir=settings["fixture_dir"],
            decisions_file=settings["decisions_file"],
            alerts_file=settings["alerts_file"],
        )
    else:
        raise ConfigurationError(f"Unknown data source backend: {backend}")

    ttl = settings["cache_ttl_seconds"]
    if ttl and ttl > 0:
        logger.info("Decision cache enabled", ttl_seconds=ttl)
        return CachedDecisionSource(source, ttl_seconds=ttl)
    return source


__all__ = [
    "DecisionDataSource",
    "CachedDecisionSource",
    "FixtureDataSource",
    "get_data_source",
]

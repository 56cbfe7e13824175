"""Configuration module for the search coach.

Factory functions live in :mod:`search_coach.config.factory`; components
import the models from here, so the factory is not re-exported.
"""

from search_coach.config.loader import get_default_config_path, load_config
from search_coach.config.models import (
    BingSearchConfig,
    FilterConfig,
    GraphConfig,
    LoggingConfig,
    SearchCoachConfig,
)

__all__ = [
    "BingSearchConfig",
    "FilterConfig",
    "GraphConfig",
    "LoggingConfig",
    "SearchCoachConfig",
    "get_default_config_path",
    "load_config",
]

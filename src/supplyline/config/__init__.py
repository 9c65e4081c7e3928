"""
Configuration management with typed Pydantic models.

Sheet layout, cell coordinates and the source locator are all
configuration values, loaded from YAML with environment interpolation.
"""

from supplyline.config.loader import load_config
from supplyline.config.settings import (
    AppConfig,
    LoggingConfig,
    MasterTableConfig,
    SourceConfig,
    SupplyCellsConfig,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "MasterTableConfig",
    "SourceConfig",
    "SupplyCellsConfig",
    "load_config",
]

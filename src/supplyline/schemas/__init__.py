"""
Data contracts for resolved configurations.

ConfigRecord is the in-memory contract; ResolvedConfigSchema guards
the tabular export of the same data.
"""

from supplyline.schemas.output import ResolvedConfigSchema, records_to_frame
from supplyline.schemas.records import REQUIRED_FIELDS, ConfigRecord

__all__ = [
    "REQUIRED_FIELDS",
    "ConfigRecord",
    "ResolvedConfigSchema",
    "records_to_frame",
]

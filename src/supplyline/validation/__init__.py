"""Aggregate validation of resolved configurations."""

from supplyline.validation.core import (
    ValidationOutcome,
    check_configs,
    is_absolute_url,
    validate_configs,
)

__all__ = [
    "ValidationOutcome",
    "check_configs",
    "is_absolute_url",
    "validate_configs",
]

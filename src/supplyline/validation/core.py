"""
Aggregate validation of resolved configurations.

Validation is strict and fail-fast: the first violation ends the check
and no later record is inspected.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from supplyline.assembly import is_missing
from supplyline.errors import (
    EmptyDatasetError,
    InvalidWebhookUrlError,
    MissingRequiredFieldError,
    SupplylineError,
)
from supplyline.schemas.records import REQUIRED_FIELDS, ConfigRecord
from supplyline.utils.logging import get_logger

log = get_logger(__name__)

_URL_ADAPTER = TypeAdapter(AnyUrl)

ConfigLike = ConfigRecord | Mapping[str, Any]


@dataclass(frozen=True)
class ValidationOutcome:
    """Whole-batch validation result: records on success, one error otherwise."""

    records: Sequence[ConfigLike] | None
    error: SupplylineError | None

    @property
    def ok(self) -> bool:
        """Whether the batch passed validation."""
        return self.error is None


def _get_field(record: ConfigLike, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def is_absolute_url(value: str) -> bool:
    """Return True if value parses as a URL with both scheme and host."""
    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return bool(url.scheme) and bool(url.host)


def _check_record(index: int, record: ConfigLike) -> SupplylineError | None:
    for name in REQUIRED_FIELDS:
        if is_missing(_get_field(record, name)):
            return MissingRequiredFieldError(index, name)

    webhook_url = _get_field(record, "webhook_url")
    if not isinstance(webhook_url, str) or not is_absolute_url(webhook_url):
        return InvalidWebhookUrlError(index, str(webhook_url))

    return None


def check_configs(records: Any) -> ValidationOutcome:
    """
    Validate a list of configurations without raising.

    Checks, in order and stopping at the first failure:
        1. records is a non-empty list or tuple
        2. per record: every required field is present
        3. per record: webhook_url is an absolute URL

    Args:
        records: ConfigRecords or mappings with the same field names.

    Returns:
        ValidationOutcome holding the records or the first error.
    """
    if not isinstance(records, (list, tuple)):
        error = EmptyDatasetError(
            "Configuration must be a list of sheet configurations"
        )
        return ValidationOutcome(records=None, error=error)

    if not records:
        error = EmptyDatasetError(
            "Configuration must contain at least one sheet configuration"
        )
        return ValidationOutcome(records=None, error=error)

    for index, record in enumerate(records):
        error = _check_record(index, record)
        if error is not None:
            log.error("Configuration validation failed", index=index, error=str(error))
            return ValidationOutcome(records=None, error=error)

    log.info("Configuration validation passed", sheets=len(records))
    return ValidationOutcome(records=records, error=None)


def validate_configs(records: Any) -> Sequence[ConfigLike]:
    """
    Validate a list of configurations, raising on the first violation.

    Args:
        records: ConfigRecords or mappings with the same field names.

    Returns:
        The same list, unchanged.

    Raises:
        EmptyDatasetError: If records is not a list or is empty.
        MissingRequiredFieldError: If a record lacks a required field.
        InvalidWebhookUrlError: If a webhook URL is not absolute.
    """
    outcome = check_configs(records)
    if outcome.error is not None:
        raise outcome.error
    return records

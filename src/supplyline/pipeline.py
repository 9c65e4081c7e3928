"""
Configuration load pipeline.

Sequences the resolution stages for the Commander Database:
    1. Read the master sheet locator from the environment
    2. Extract the master sheet ID
    3. Fetch the master table through a TableProvider
    4. Map header columns
    5. Assemble rows (lenient, skips bad rows)
    6. Validate the assembled records (strict, fail-fast)

Any failure is re-raised once as ConfigLoadError.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from supplyline.assembly import SkippedRow, assemble_rows
from supplyline.config.settings import AppConfig
from supplyline.errors import ConfigLoadError, EmptyDatasetError, MissingEnvVarError
from supplyline.identifiers import extract_sheet_id
from supplyline.ingestion.base import TableProvider
from supplyline.normalization.columns import map_columns
from supplyline.schemas.records import ConfigRecord
from supplyline.utils.logging import get_logger, log_context
from supplyline.validation.core import validate_configs

log = get_logger(__name__)


@dataclass
class LoadResult:
    """Result of one configuration load."""

    sheet_id: str
    records: list[ConfigRecord]
    skipped: list[SkippedRow] = field(default_factory=list)


def resolve_source(
    config: AppConfig,
    environ: Mapping[str, str] | None = None,
) -> str:
    """
    Read the master sheet locator from the environment.

    Args:
        config: Application configuration naming the environment variable.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        The raw locator string (URL or ID).

    Raises:
        MissingEnvVarError: If the variable is unset or blank.
    """
    env = os.environ if environ is None else environ
    value = env.get(config.source.env_var)
    if value is None or not value.strip():
        raise MissingEnvVarError(config.source.env_var)
    return value.strip()


def _run_stages(
    provider: TableProvider,
    config: AppConfig,
    source: str | None,
    environ: Mapping[str, str] | None,
) -> LoadResult:
    locator = source if source is not None else resolve_source(config, environ)
    sheet_id = extract_sheet_id(locator)
    master = config.master_table

    with log_context(sheet_id=sheet_id, sheet_name=master.sheet_name):
        log.info("Loading configuration from Commander Database")

        table = provider.get_table(sheet_id, master.sheet_name)
        if not table:
            msg = f"No data found in {master.sheet_name}"
            raise EmptyDatasetError(msg)

        column_map = map_columns(
            table[0],
            master.required_columns,
            table_name=master.sheet_name,
        )
        assembled = assemble_rows(
            table[1:],
            column_map,
            master,
            config.supply_cells,
        )
        if not assembled.records:
            msg = f"No valid army configurations found in {master.sheet_name}"
            raise EmptyDatasetError(msg)

        validate_configs(assembled.records)

        log.info("Loaded army configurations", count=len(assembled.records))

    return LoadResult(
        sheet_id=sheet_id,
        records=assembled.records,
        skipped=assembled.skipped,
    )


def run_load(
    provider: TableProvider,
    config: AppConfig | None = None,
    *,
    source: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> LoadResult:
    """
    Run a full configuration load.

    Args:
        provider: Table provider used to fetch the master table.
        config: Application configuration (defaults to AppConfig()).
        source: Master sheet URL or ID; overrides the environment when given.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        LoadResult with the master sheet ID, validated records and skipped rows.

    Raises:
        ConfigLoadError: On any failure, wrapping the original error.
    """
    config = config or AppConfig()
    try:
        return _run_stages(provider, config, source, environ)
    except Exception as e:
        log.error(
            "Failed to load configuration",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise ConfigLoadError(e) from e


def load_configs(
    provider: TableProvider,
    config: AppConfig | None = None,
    *,
    source: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[ConfigRecord]:
    """
    Load and validate army configurations.

    Args:
        provider: Table provider used to fetch the master table.
        config: Application configuration (defaults to AppConfig()).
        source: Master sheet URL or ID; overrides the environment when given.
        environ: Environment mapping (defaults to os.environ).

    Returns:
        Validated ConfigRecords in master table order.

    Raises:
        ConfigLoadError: On any failure, wrapping the original error.
    """
    return run_load(provider, config, source=source, environ=environ).records

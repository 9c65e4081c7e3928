"""
Row assembly for the master table.

Turns data rows into ConfigRecords. Assembly is lenient: a row with
missing cells or an unusable army URL is skipped with a diagnostic and
the rest of the batch continues.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum

from supplyline.config.settings import MasterTableConfig, SupplyCellsConfig
from supplyline.errors import SupplylineError
from supplyline.identifiers import extract_sheet_id
from supplyline.schemas.records import ConfigRecord
from supplyline.utils.logging import get_logger

log = get_logger(__name__)


class SkipReason(str, Enum):
    """Why a data row produced no record."""

    MISSING_DATA = "missing_data"
    INVALID_ARMY_URL = "invalid_army_url"


@dataclass(frozen=True)
class SkippedRow:
    """A data row that was dropped during assembly."""

    row_index: int  # position in the raw table; header is row 0
    reason: SkipReason
    name: str | None
    detail: str


@dataclass(frozen=True)
class RowOutcome:
    """Result of assembling one row: exactly one of record or skipped is set."""

    record: ConfigRecord | None = None
    skipped: SkippedRow | None = None

    @property
    def ok(self) -> bool:
        """Whether the row produced a record."""
        return self.record is not None


@dataclass
class AssemblyResult:
    """Records and skipped rows from one assembly pass, in table order."""

    records: list[ConfigRecord] = field(default_factory=list)
    skipped: list[SkippedRow] = field(default_factory=list)


def is_missing(value: object) -> bool:
    """
    Canonical "missing" check shared by assembly and validation.

    None and strings that are empty after stripping whitespace are missing.
    Any other value is present.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _cell(row: Sequence[str], index: int) -> str | None:
    """Return the cell at index, or None if the row is too short."""
    return row[index] if index < len(row) else None


def assemble_row(
    row: Sequence[str],
    row_index: int,
    column_map: Mapping[str, int],
    master_table: MasterTableConfig,
    supply_cells: SupplyCellsConfig,
) -> RowOutcome:
    """
    Assemble one data row into a record or a skip.

    Args:
        row: Cell values of the row.
        row_index: Position of the row in the raw table (header is 0).
        column_map: Column name to index mapping from map_columns.
        master_table: Names of the columns playing each role.
        supply_cells: Cell coordinates injected into every record.

    Returns:
        RowOutcome carrying either a ConfigRecord or a SkippedRow.
    """
    name = _cell(row, column_map[master_table.name_column])
    army_url = _cell(row, column_map[master_table.army_url_column])
    webhook_url = _cell(row, column_map[master_table.webhook_url_column])

    if is_missing(name) or is_missing(army_url) or is_missing(webhook_url):
        log.debug("Skipping row - missing required data", row=row_index)
        return RowOutcome(
            skipped=SkippedRow(
                row_index=row_index,
                reason=SkipReason.MISSING_DATA,
                name=None if is_missing(name) else name.strip(),
                detail="missing required data",
            )
        )

    try:
        sheet_id = extract_sheet_id(army_url.strip())
    except SupplylineError as e:
        log.warning("Skipping row", row=row_index, name=name, error=str(e))
        return RowOutcome(
            skipped=SkippedRow(
                row_index=row_index,
                reason=SkipReason.INVALID_ARMY_URL,
                name=name.strip(),
                detail=str(e),
            )
        )

    record = ConfigRecord(
        name=name.strip(),
        sheet_id=sheet_id,
        webhook_url=webhook_url.strip(),
        current_supplies_cell=supply_cells.current_supplies,
        daily_consumption_cell=supply_cells.daily_consumption,
    )
    return RowOutcome(record=record)


def assemble_rows(
    rows: Sequence[Sequence[str]],
    column_map: Mapping[str, int],
    master_table: MasterTableConfig,
    supply_cells: SupplyCellsConfig,
    *,
    first_row_index: int = 1,
) -> AssemblyResult:
    """
    Assemble all data rows, skipping malformed ones.

    Never raises for a bad row. An empty ``records`` list is returned
    as-is; deciding whether that is fatal is up to the caller.

    Args:
        rows: Data rows (the table without its header).
        column_map: Column name to index mapping from map_columns.
        master_table: Names of the columns playing each role.
        supply_cells: Cell coordinates injected into every record.
        first_row_index: Table index of ``rows[0]`` (1 when the header is row 0).

    Returns:
        AssemblyResult with records and skipped rows in table order.
    """
    result = AssemblyResult()

    for offset, row in enumerate(rows):
        outcome = assemble_row(
            row,
            first_row_index + offset,
            column_map,
            master_table,
            supply_cells,
        )
        if outcome.record is not None:
            result.records.append(outcome.record)
        elif outcome.skipped is not None:
            result.skipped.append(outcome.skipped)

    log.info(
        "Assembled rows",
        records=len(result.records),
        skipped=len(result.skipped),
    )
    return result

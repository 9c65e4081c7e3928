"""
Spreadsheet providers backed by CSV exports.

GoogleSheetsCsvProvider reads a tab through its public CSV export URL;
LocalCsvProvider reads ``<directory>/<sheet name>.csv`` for offline runs.
"""

from pathlib import Path
from urllib.parse import quote

import pandas as pd

from supplyline.config.settings import SourceConfig
from supplyline.ingestion.base import TableProvider
from supplyline.utils.logging import get_logger

log = get_logger(__name__)


def _read_csv(source: str | Path) -> pd.DataFrame:
    """Read a CSV with every cell as a literal string and no header row."""
    return pd.read_csv(
        source,
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=False,
        encoding="utf-8",
    )


class GoogleSheetsCsvProvider(TableProvider):
    """Fetch tabs through the Google Sheets CSV export endpoint."""

    def __init__(self, source: SourceConfig | None = None) -> None:
        """
        Initialize provider.

        Args:
            source: Source configuration holding the export URL template.
        """
        self.source = source or SourceConfig()

    def export_url(self, sheet_id: str, sheet_name: str) -> str:
        """Build the CSV export URL for one tab."""
        return self.source.export_url.format(
            sheet_id=quote(sheet_id, safe=""),
            sheet_name=quote(sheet_name, safe=""),
        )

    def _fetch(self, sheet_id: str, sheet_name: str) -> pd.DataFrame:
        url = self.export_url(sheet_id, sheet_name)
        log.debug("Reading CSV export", url=url)
        try:
            return _read_csv(url)
        except pd.errors.EmptyDataError:
            return pd.DataFrame()


class LocalCsvProvider(TableProvider):
    """Read tabs from CSV files named after the sheet in a directory."""

    def __init__(self, directory: Path) -> None:
        """
        Initialize provider.

        Args:
            directory: Directory containing one ``<sheet name>.csv`` per tab.
        """
        self.directory = directory

    def resolve_path(self, sheet_name: str) -> Path:
        """Return the CSV path for a tab."""
        return self.directory / f"{sheet_name}.csv"

    def _fetch(self, sheet_id: str, sheet_name: str) -> pd.DataFrame:
        path = self.resolve_path(sheet_name)
        if not path.exists():
            msg = f"Table file not found: {path}"
            raise FileNotFoundError(msg)

        log.debug("Reading local CSV", path=str(path), sheet_id=sheet_id)
        try:
            return _read_csv(path)
        except pd.errors.EmptyDataError:
            return pd.DataFrame()

"""
Base classes and utilities for spreadsheet table providers.

A provider fetches one tab of a spreadsheet as a fully materialized
RawTable: a list of rows, header first, every cell a string.
"""

from abc import ABC, abstractmethod

import pandas as pd

from supplyline.utils.logging import get_logger

log = get_logger(__name__)

RawTable = list[list[str]]


class TableProvider(ABC):
    """
    Abstract base class for spreadsheet table providers.

    Providers only fetch; they never interpret headers or rows.
    """

    @abstractmethod
    def _fetch(self, sheet_id: str, sheet_name: str) -> pd.DataFrame:
        """Fetch the raw tab contents. Implemented by subclasses."""
        ...

    def get_table(self, sheet_id: str, sheet_name: str) -> RawTable:
        """
        Fetch a spreadsheet tab as a RawTable.

        Args:
            sheet_id: Spreadsheet ID.
            sheet_name: Tab name inside the spreadsheet.

        Returns:
            Rows of string cells, header row first. Empty if the tab is empty.
        """
        log.info(
            "Fetching table",
            provider=self.__class__.__name__,
            sheet_id=sheet_id,
            sheet_name=sheet_name,
        )
        df = self._fetch(sheet_id, sheet_name)
        table = frame_to_table(df)
        log.info("Fetched table", rows=len(table))
        return table


def frame_to_table(df: pd.DataFrame) -> RawTable:
    """
    Convert a headerless string DataFrame into a RawTable.

    Trailing empty cells are dropped from every row and fully empty
    trailing rows are removed, matching what the Sheets API returns.

    Args:
        df: DataFrame read with ``header=None`` and string dtype.

    Returns:
        List of rows of string cells.
    """
    table: RawTable = []
    for values in df.fillna("").astype(str).itertuples(index=False, name=None):
        row = list(values)
        while row and row[-1] == "":
            row.pop()
        table.append(row)

    while table and not table[-1]:
        table.pop()

    return table

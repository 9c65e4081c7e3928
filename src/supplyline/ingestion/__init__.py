"""
Spreadsheet table providers.

All raw table fetching happens through this module; interpretation of
headers and rows is left to the resolution pipeline.
"""

from supplyline.ingestion.base import RawTable, TableProvider, frame_to_table
from supplyline.ingestion.sheets import GoogleSheetsCsvProvider, LocalCsvProvider

__all__ = [
    "GoogleSheetsCsvProvider",
    "LocalCsvProvider",
    "RawTable",
    "TableProvider",
    "frame_to_table",
]

"""Tests for spreadsheet table providers."""

from pathlib import Path

import pandas as pd
import pytest

from supplyline.config import SourceConfig
from supplyline.ingestion import GoogleSheetsCsvProvider, LocalCsvProvider, frame_to_table


class TestFrameToTable:
    """Tests for frame_to_table."""

    def test_trims_trailing_empty_cells(self) -> None:
        """Trailing empty cells and trailing empty rows are dropped."""
        df = pd.DataFrame(
            [
                ["Name", "Army URL", "Webhook URL"],
                ["A", "", ""],
                ["", "", ""],
            ]
        )
        assert frame_to_table(df) == [["Name", "Army URL", "Webhook URL"], ["A"]]

    def test_interior_empty_cells_kept(self) -> None:
        """Empty cells before a value keep their position."""
        df = pd.DataFrame([["", "x", ""]])
        assert frame_to_table(df) == [["", "x"]]

    def test_nan_becomes_empty(self) -> None:
        """NaN cells read as empty strings."""
        df = pd.DataFrame([["a", None, "c"]])
        assert frame_to_table(df) == [["a", "", "c"]]

    def test_empty_frame(self) -> None:
        """An empty frame is an empty table."""
        assert frame_to_table(pd.DataFrame()) == []


class TestLocalCsvProvider:
    """Tests for LocalCsvProvider."""

    def test_reads_sheet_file(self, tmp_path: Path) -> None:
        """Cells are read verbatim as strings."""
        (tmp_path / "Commander Database.csv").write_text(
            "Name,Army URL,Webhook URL\n"
            "007,NA,https://h.example/a\n"
            "Beta,,\n",
            encoding="utf-8",
        )
        provider = LocalCsvProvider(tmp_path)
        table = provider.get_table("ignored", "Commander Database")
        assert table == [
            ["Name", "Army URL", "Webhook URL"],
            ["007", "NA", "https://h.example/a"],
            ["Beta"],
        ]

    def test_empty_file(self, tmp_path: Path) -> None:
        """An empty file yields an empty table."""
        (tmp_path / "Empty.csv").write_text("", encoding="utf-8")
        assert LocalCsvProvider(tmp_path).get_table("x", "Empty") == []

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing sheet file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Nope.csv"):
            LocalCsvProvider(tmp_path).get_table("x", "Nope")


class TestGoogleSheetsCsvProvider:
    """Tests for GoogleSheetsCsvProvider."""

    def test_export_url_quotes_sheet_name(self) -> None:
        """Sheet names with spaces are URL-encoded."""
        provider = GoogleSheetsCsvProvider()
        url = provider.export_url("ABC_1", "Commander Database")
        assert url == (
            "https://docs.google.com/spreadsheets/d/ABC_1"
            "/gviz/tq?tqx=out:csv&sheet=Commander%20Database"
        )

    def test_custom_template(self) -> None:
        """The export URL template comes from configuration."""
        source = SourceConfig(export_url="http://mirror.local/{sheet_id}/{sheet_name}.csv")
        provider = GoogleSheetsCsvProvider(source)
        assert provider.export_url("X", "Tab") == "http://mirror.local/X/Tab.csv"

    def test_fetch_reads_export_url(self, tmp_path: Path) -> None:
        """The provider reads whatever the export URL points at."""
        sheet_dir = tmp_path / "ID1"
        sheet_dir.mkdir()
        (sheet_dir / "Tab.csv").write_text("Name,Army URL\nA,B\n", encoding="utf-8")
        source = SourceConfig(export_url=str(tmp_path) + "/{sheet_id}/{sheet_name}.csv")

        table = GoogleSheetsCsvProvider(source).get_table("ID1", "Tab")
        assert table == [["Name", "Army URL"], ["A", "B"]]

"""Tests for header-driven column mapping."""

import pytest

from supplyline.errors import MissingColumnsError
from supplyline.normalization import map_columns


class TestMapColumns:
    """Tests for map_columns."""

    def test_maps_required_columns(self, header: list[str]) -> None:
        """Each required column maps to its header index."""
        mapping = map_columns(header, ["Name", "Army URL", "Webhook URL"])
        assert mapping == {"Name": 0, "Army URL": 1, "Webhook URL": 2}

    def test_order_independent(self) -> None:
        """Required names may be given in any order."""
        header = ["Webhook URL", "Notes", "Name", "Army URL"]
        mapping = map_columns(header, {"Army URL", "Name", "Webhook URL"})
        assert mapping == {"Name": 2, "Army URL": 3, "Webhook URL": 0}

    def test_first_match_wins(self) -> None:
        """Duplicate header names resolve to the first position."""
        header = ["Name", "Army URL", "Name", "Webhook URL"]
        mapping = map_columns(header, ["Name", "Army URL", "Webhook URL"])
        assert mapping["Name"] == 0

    def test_extra_columns_ignored(self) -> None:
        """Columns not in the schema are not part of the mapping."""
        header = ["Notes", "Name", "Army URL", "Webhook URL"]
        mapping = map_columns(header, ["Name", "Army URL", "Webhook URL"])
        assert set(mapping) == {"Name", "Army URL", "Webhook URL"}

    def test_alternate_schema(self) -> None:
        """Any schema can be supplied."""
        mapping = map_columns(["a", "b", "c"], ["c", "a"])
        assert mapping == {"c": 2, "a": 0}

    def test_missing_column_lists_full_schema(self) -> None:
        """The error enumerates every required column, not just the missing one."""
        with pytest.raises(MissingColumnsError) as exc_info:
            map_columns(
                ["Name", "Webhook URL"],
                ["Name", "Army URL", "Webhook URL"],
                table_name="Commander Database",
            )
        message = str(exc_info.value)
        assert "Commander Database must have columns" in message
        assert "Name, Army URL, Webhook URL" in message
        assert exc_info.value.missing == ["Army URL"]
        assert exc_info.value.required == ["Name", "Army URL", "Webhook URL"]

    def test_match_is_exact(self) -> None:
        """Header matching is case and whitespace sensitive."""
        with pytest.raises(MissingColumnsError) as exc_info:
            map_columns(["name", "Army URL ", "Webhook URL"], ["Name", "Army URL", "Webhook URL"])
        assert exc_info.value.missing == ["Name", "Army URL"]

    def test_empty_header(self) -> None:
        """An empty header is missing everything."""
        with pytest.raises(MissingColumnsError):
            map_columns([], ["Name"])

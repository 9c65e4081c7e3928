"""Tests for record models and the export schema."""

import pandas as pd
import pytest
from pandera.errors import SchemaError, SchemaErrors
from pydantic import ValidationError

from supplyline.schemas import REQUIRED_FIELDS, ConfigRecord, ResolvedConfigSchema, records_to_frame


def _record(**overrides: str) -> ConfigRecord:
    data = {
        "name": "Alpha",
        "sheet_id": "S1-x_y",
        "webhook_url": "https://discord.com/api/webhooks/1/abc",
        "current_supplies_cell": "C9",
        "daily_consumption_cell": "C11",
    }
    data.update(overrides)
    return ConfigRecord(**data)


class TestConfigRecord:
    """Tests for ConfigRecord."""

    def test_fields(self) -> None:
        """All required fields are model fields in declaration order."""
        assert tuple(ConfigRecord.model_fields) == REQUIRED_FIELDS

    def test_empty_field_rejected(self) -> None:
        """Records cannot be built with empty fields."""
        with pytest.raises(ValidationError):
            _record(name="  ")

    def test_frozen(self) -> None:
        """Records are immutable."""
        record = _record()
        with pytest.raises(ValidationError):
            record.name = "Beta"  # type: ignore[misc]


class TestResolvedConfigSchema:
    """Tests for ResolvedConfigSchema."""

    def test_valid_frame(self) -> None:
        """A frame built from valid records passes."""
        df = records_to_frame([_record(), _record(name="Beta", sheet_id="S2")])
        result = ResolvedConfigSchema.validate(df)
        assert list(result.columns) == list(REQUIRED_FIELDS)
        assert list(result["name"]) == ["Alpha", "Beta"]

    def test_relative_webhook_rejected(self) -> None:
        """Webhook URLs must carry a scheme and host."""
        df = records_to_frame([_record(webhook_url="hooks/1")])
        with pytest.raises(SchemaError):
            ResolvedConfigSchema.validate(df)

    def test_bad_cell_rejected(self) -> None:
        """Cell columns must be A1 references."""
        df = records_to_frame([_record(current_supplies_cell="row 9")])
        with pytest.raises(SchemaError):
            ResolvedConfigSchema.validate(df)

    def test_extra_column_rejected(self) -> None:
        """The export schema is strict about columns."""
        df = records_to_frame([_record()])
        df["extra"] = "x"
        with pytest.raises((SchemaError, SchemaErrors)):
            ResolvedConfigSchema.validate(df)

    def test_empty_record_list(self) -> None:
        """No records gives an empty frame with the canonical columns."""
        df = records_to_frame([])
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == list(REQUIRED_FIELDS)
        assert df.empty

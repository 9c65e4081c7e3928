"""
Pandera schema for the resolved configuration table.

Used when validated records are exported as a flat table.
"""

from collections.abc import Sequence

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from supplyline.schemas.records import REQUIRED_FIELDS, ConfigRecord


class ResolvedConfigSchema(pa.DataFrameModel):
    """
    Schema for exported army configurations.

    One row per ConfigRecord, in master table order.
    """

    name: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Army name",
    )
    sheet_id: Series[str] = pa.Field(
        str_matches=r"^[A-Za-z0-9_-]+$",
        description="Spreadsheet ID of the army sheet",
    )
    webhook_url: Series[str] = pa.Field(
        str_matches=r"^[A-Za-z][A-Za-z0-9+.-]*://[^/\s]+",
        description="Absolute webhook URL",
    )
    current_supplies_cell: Series[str] = pa.Field(
        str_matches=r"^[A-Z]{1,3}[1-9][0-9]*$",
        description="Cell holding current supplies",
    )
    daily_consumption_cell: Series[str] = pa.Field(
        str_matches=r"^[A-Z]{1,3}[1-9][0-9]*$",
        description="Cell holding daily consumption",
    )

    class Config:
        """Schema configuration."""

        name = "ResolvedConfigSchema"
        strict = True
        ordered = True


def records_to_frame(records: Sequence[ConfigRecord]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per record and the canonical column order.

    Args:
        records: Validated configuration records.

    Returns:
        DataFrame with columns in REQUIRED_FIELDS order.
    """
    rows = [record.model_dump() for record in records]
    return pd.DataFrame(rows, columns=list(REQUIRED_FIELDS), dtype=str)

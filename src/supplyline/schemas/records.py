"""
Configuration record model.

A ConfigRecord describes one army spreadsheet the notifier should read.
"""

from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS: tuple[str, ...] = (
    "name",
    "sheet_id",
    "webhook_url",
    "current_supplies_cell",
    "daily_consumption_cell",
)


class ConfigRecord(BaseModel):
    """Resolved, immutable configuration for one army spreadsheet."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, description="Army name as listed in the master table")
    sheet_id: str = Field(min_length=1, description="Spreadsheet ID of the army sheet")
    webhook_url: str = Field(min_length=1, description="Notification webhook URL")
    current_supplies_cell: str = Field(min_length=1)
    daily_consumption_cell: str = Field(min_length=1)

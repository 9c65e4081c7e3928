"""
Typed configuration models using Pydantic.

All sheet names, column names and cell coordinates live here so that
the resolution pipeline never depends on compiled-in constants.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_CELL_PATTERN = re.compile(r"^[A-Z]{1,3}[1-9][0-9]*$")


class MasterTableConfig(BaseModel):
    """Layout of the Commander Database master table."""

    model_config = ConfigDict(frozen=True)

    sheet_name: str = Field(
        default="Commander Database",
        min_length=1,
        description="Tab name of the master table",
    )
    name_column: str = Field(default="Name", min_length=1)
    army_url_column: str = Field(default="Army URL", min_length=1)
    webhook_url_column: str = Field(default="Webhook URL", min_length=1)

    @property
    def required_columns(self) -> list[str]:
        """Header names that must be present, in display order."""
        return [self.name_column, self.army_url_column, self.webhook_url_column]


class SupplyCellsConfig(BaseModel):
    """Cell addresses of supply data inside each army spreadsheet."""

    model_config = ConfigDict(frozen=True)

    current_supplies: str = Field(default="C9", description="Current supplies cell")
    daily_consumption: str = Field(
        default="C11", description="Daily consumption cell"
    )

    @field_validator("current_supplies", "daily_consumption")
    @classmethod
    def validate_cell(cls, v: str) -> str:
        """Ensure the value is an A1-style cell reference."""
        v = v.strip().upper()
        if not _CELL_PATTERN.match(v):
            msg = f"Expected an A1-style cell reference, got: {v!r}"
            raise ValueError(msg)
        return v


class SourceConfig(BaseModel):
    """Where the master table locator and contents come from."""

    model_config = ConfigDict(frozen=True)

    env_var: str = Field(
        default="GOOGLE_SHEET_URL",
        min_length=1,
        description="Environment variable holding the master sheet URL or ID",
    )
    export_url: str = Field(
        default=(
            "https://docs.google.com/spreadsheets/d/{sheet_id}"
            "/gviz/tq?tqx=out:csv&sheet={sheet_name}"
        ),
        description="CSV export URL template with {sheet_id} and {sheet_name}",
    )

    @field_validator("export_url")
    @classmethod
    def validate_export_url(cls, v: str) -> str:
        """Ensure both placeholders are present."""
        missing = [p for p in ("{sheet_id}", "{sheet_name}") if p not in v]
        if missing:
            msg = f"export_url is missing placeholders: {', '.join(missing)}"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_output: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return v


class AppConfig(BaseModel):
    """Complete application configuration.

    Every section has defaults, so ``AppConfig()`` reproduces the stock
    Commander Database layout.
    """

    model_config = ConfigDict(frozen=True)

    master_table: MasterTableConfig = Field(default_factory=MasterTableConfig)
    supply_cells: SupplyCellsConfig = Field(default_factory=SupplyCellsConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

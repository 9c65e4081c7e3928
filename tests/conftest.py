"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pandas as pd
import pytest
import structlog

from supplyline.config import AppConfig
from supplyline.ingestion.base import RawTable, TableProvider

HEADER = ["Name", "Army URL", "Webhook URL"]

SHEET_URL = "https://docs.google.com/spreadsheets/d/MASTER_id-01/edit#gid=0"


class InMemoryProvider(TableProvider):
    """Provider returning a fixed table and recording calls."""

    def __init__(self, table: RawTable | None = None, error: Exception | None = None) -> None:
        self.table = table or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def _fetch(self, sheet_id: str, sheet_name: str) -> pd.DataFrame:
        raise NotImplementedError

    def get_table(self, sheet_id: str, sheet_name: str) -> RawTable:
        self.calls.append((sheet_id, sheet_name))
        if self.error is not None:
            raise self.error
        return [list(row) for row in self.table]


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore default structlog configuration around every test."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def app_config() -> AppConfig:
    """Default application configuration."""
    return AppConfig()


@pytest.fixture
def header() -> list[str]:
    """Standard Commander Database header."""
    return list(HEADER)


@pytest.fixture
def sample_table() -> RawTable:
    """Master table with two valid rows and two that must be skipped."""
    return [
        list(HEADER),
        [
            "  1st Legion ",
            "https://docs.google.com/spreadsheets/d/ARMY_one-1/edit",
            " https://discord.com/api/webhooks/1/aaa ",
        ],
        ["", "https://docs.google.com/spreadsheets/d/ARMY_two/edit", "https://h.example/2"],
        ["Broken", "https://example.com/not-a-sheet", "https://h.example/3"],
        ["3rd Fleet", "ARMY_three", "https://discord.com/api/webhooks/3/ccc"],
    ]


@pytest.fixture
def make_provider() -> Callable[..., InMemoryProvider]:
    """Factory for in-memory table providers."""

    def _make(table: RawTable | None = None, error: Exception | None = None) -> InMemoryProvider:
        return InMemoryProvider(table, error)

    return _make


@pytest.fixture
def environ() -> dict[str, str]:
    """Environment mapping with the master sheet URL set."""
    return {"GOOGLE_SHEET_URL": SHEET_URL}

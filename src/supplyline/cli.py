"""Command-line interface for supplyline."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from supplyline.config.settings import AppConfig
    from supplyline.ingestion.base import TableProvider

app = typer.Typer(
    name="supplyline",
    help="Resolve and validate army configurations from the Commander Database.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file. Defaults are used if omitted.",
        exists=True,
        dir_okay=False,
    ),
]
SourceOption = Annotated[
    str | None,
    typer.Option(
        "--source",
        "-s",
        help="Master sheet URL or ID. Overrides the configured environment variable.",
    ),
]
TableDirOption = Annotated[
    Path | None,
    typer.Option(
        "--table-dir",
        "-t",
        help="Read '<sheet name>.csv' from this directory instead of Google Sheets.",
        exists=True,
        file_okay=False,
    ),
]


def _setup(config: Path | None) -> "AppConfig":
    from supplyline.config.loader import load_config
    from supplyline.utils.logging import configure_logging

    app_config = load_config(config)
    configure_logging(
        level=app_config.logging.level,
        json_output=app_config.logging.json_output,
    )
    return app_config


def _provider(app_config: "AppConfig", table_dir: Path | None) -> "TableProvider":
    from supplyline.ingestion import GoogleSheetsCsvProvider, LocalCsvProvider

    if table_dir is not None:
        return LocalCsvProvider(table_dir)
    return GoogleSheetsCsvProvider(app_config.source)


@app.command("sheet-id")
def sheet_id(
    value: Annotated[str, typer.Argument(help="Google Sheets URL or spreadsheet ID.")],
) -> None:
    """Print the spreadsheet ID contained in a URL."""
    from supplyline.errors import SupplylineError
    from supplyline.identifiers import extract_sheet_id

    try:
        console.print(extract_sheet_id(value))
    except SupplylineError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def resolve(
    config: ConfigOption = None,
    source: SourceOption = None,
    table_dir: TableDirOption = None,
) -> None:
    """Load, validate and display army configurations."""
    from supplyline.errors import ConfigLoadError
    from supplyline.pipeline import run_load
    from supplyline.reporter import ConsoleReporter

    app_config = _setup(config)

    try:
        result = run_load(_provider(app_config, table_dir), app_config, source=source)
    except ConfigLoadError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    ConsoleReporter(console).print_result(result)


@app.command()
def export(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the resolved configurations CSV.",
            dir_okay=False,
        ),
    ],
    config: ConfigOption = None,
    source: SourceOption = None,
    table_dir: TableDirOption = None,
) -> None:
    """Load, validate and export army configurations as CSV."""
    from pandera.errors import SchemaError, SchemaErrors

    from supplyline.errors import ConfigLoadError
    from supplyline.pipeline import run_load
    from supplyline.schemas.output import ResolvedConfigSchema, records_to_frame

    app_config = _setup(config)

    try:
        result = run_load(_provider(app_config, table_dir), app_config, source=source)
    except ConfigLoadError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    try:
        df = ResolvedConfigSchema.validate(records_to_frame(result.records))
    except (SchemaError, SchemaErrors) as e:
        console.print(f"[red]Export schema validation failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output, index=False)

    console.print(f"[green]Saved {len(df)} configurations to: {output}[/green]")
    if result.skipped:
        console.print(f"[yellow]Skipped {len(result.skipped)} rows[/yellow]")


if __name__ == "__main__":
    app()

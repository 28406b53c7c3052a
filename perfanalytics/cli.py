"""perfanalytics command-line interface."""

from __future__ import annotations

import math
from pathlib import Path

import pandas as pd
import typer

from perfanalytics.core.analytics import drawdowns, max_drawdown, performance_table
from perfanalytics.core.config import AppConfig, load_config
from perfanalytics.core.data.loaders import load_returns_csv, split_benchmark
from perfanalytics.core.utils.errors import exit_code_for_exception
from perfanalytics.core.utils.logging import configure_logging, get_logger
from perfanalytics.core.utils.plotting import save_drawdown_plot

app = typer.Typer(help="perfanalytics CLI", no_args_is_help=True)

CONFIG_OPTION = typer.Option(
    ...,
    "--config",
    file_okay=True,
    dir_okay=False,
    resolve_path=True,
    help="Path to YAML configuration file.",
)
LOG_LEVEL_OPTION = typer.Option("INFO", "--log-level", help="Logging level.")


@app.callback()
def callback() -> None:
    """perfanalytics CLI commands."""


def _format_value(value: float) -> str:
    """Format a table cell, keeping NaN and infinities readable."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.4f}"


def _print_table(table: pd.DataFrame) -> None:
    """Print the summary table as ``stat | asset=value`` lines in row order."""
    asset_columns = [column for column in table.columns if column != "Stat"]
    for _, row in table.iterrows():
        cells = " | ".join(
            f"{column}={_format_value(float(row[column]))}" for column in asset_columns
        )
        typer.echo(f"{row['Stat']} | {cells}")


def _handle_cli_exception(logger_name: str, context: str, exc: Exception) -> None:
    """Log diagnostics and exit with typed code."""
    logger = get_logger(logger_name)
    logger.exception("%s failed: %s", context, exc)
    raise typer.Exit(code=exit_code_for_exception(exc)) from None


def _load_inputs(app_config: AppConfig) -> tuple[pd.DataFrame, pd.Series]:
    """Load asset returns and benchmark series described by the config."""
    data_config = app_config.data
    asset_columns = data_config.assets or None

    if data_config.benchmark_path is None:
        columns = [*asset_columns, data_config.benchmark_column] if asset_columns else None
        frame = load_returns_csv(
            data_config.returns_path,
            date_column=data_config.date_column,
            columns=columns,
        )
        return split_benchmark(frame, data_config.benchmark_column)

    assets = load_returns_csv(
        data_config.returns_path,
        date_column=data_config.date_column,
        columns=asset_columns,
    )
    benchmark_frame = load_returns_csv(
        data_config.benchmark_path,
        date_column=data_config.date_column,
        columns=[data_config.benchmark_column],
    )
    return assets, benchmark_frame[data_config.benchmark_column]


@app.command("table")
def table(
    config: Path = CONFIG_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Compute the performance table and write it as CSV."""
    configure_logging(log_level)
    logger_name = __name__
    artifact_paths: list[Path] = []

    try:
        app_config = load_config(config)
        assets, benchmark = _load_inputs(app_config)
        analytics = app_config.analytics
        summary = performance_table(
            assets,
            benchmark,
            periods_per_year=analytics.periods_per_year,
            thresh_value=analytics.thresh_value,
            corrected=analytics.corrected,
        )

        output_dir = app_config.output.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        table_path = output_dir / app_config.output.table_filename
        summary.to_csv(table_path, index=False)
        artifact_paths.append(table_path)

        if app_config.output.save_drawdown_plot:
            plot_path = save_drawdown_plot(
                drawdowns(assets),
                output_dir=output_dir,
                filename=app_config.output.drawdown_plot_filename,
            )
            artifact_paths.append(plot_path)
    except Exception as exc:
        _handle_cli_exception(logger_name=logger_name, context="Table command", exc=exc)

    typer.echo(f"assets={','.join(str(column) for column in assets.columns)}")
    typer.echo(f"periods={assets.shape[0]}")
    _print_table(summary)
    for path in artifact_paths:
        typer.echo(f"artifact={path}")


@app.command("drawdowns")
def show_drawdowns(
    config: Path = CONFIG_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
) -> None:
    """Print the maximum drawdown of each asset."""
    configure_logging(log_level)
    logger_name = __name__

    try:
        app_config = load_config(config)
        assets, _ = _load_inputs(app_config)
        worst = max_drawdown(assets)
    except Exception as exc:
        _handle_cli_exception(logger_name=logger_name, context="Drawdowns command", exc=exc)

    for asset, value in worst.items():
        typer.echo(f"{asset}={_format_value(float(value))}")


def main() -> None:
    """CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()

"""CSV loading for time-indexed return series."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from perfanalytics.core.utils.errors import DataLoadError
from perfanalytics.core.utils.logging import get_logger

_LOGGER_NAME = "perfanalytics.core.data.loaders"


def _normalize_return_frame(frame: pd.DataFrame, date_column: str) -> pd.DataFrame:
    """Index by parsed timestamps and coerce every value column to float."""
    if date_column not in frame.columns:
        raise DataLoadError(
            f"Date column '{date_column}' not found; columns: {list(frame.columns)}"
        )

    normalized = frame.copy()
    normalized[date_column] = pd.to_datetime(normalized[date_column], errors="coerce")
    unparsed = int(normalized[date_column].isna().sum())
    if unparsed:
        raise DataLoadError(f"Column '{date_column}' has {unparsed} unparseable timestamps.")

    normalized = normalized.set_index(date_column)
    normalized.index.name = date_column

    for column in normalized.columns:
        normalized[column] = pd.to_numeric(normalized[column], errors="coerce")

    normalized = normalized.sort_index(kind="mergesort")
    normalized = normalized.loc[~normalized.index.duplicated(keep="last")]
    return normalized.astype(float)


def load_returns_csv(
    path: Path,
    date_column: str = "date",
    columns: Sequence[str] | None = None,
) -> pd.DataFrame:
    """
    Load a wide CSV of period returns.

    Args:
        path: CSV path with one timestamp column and one column per series.
        date_column: Name of the timestamp column.
        columns: Optional subset of value columns to keep, in this order.

    Returns:
        Float dataframe indexed by ascending, unique timestamps. Unparseable
        cells become NaN.
    """
    resolved_path = path.expanduser().resolve()
    if not resolved_path.is_file():
        raise DataLoadError(f"Return file not found: {resolved_path}")

    try:
        raw = pd.read_csv(resolved_path)
    except (OSError, ValueError) as exc:
        raise DataLoadError(f"Failed to read return file {resolved_path}: {exc}") from exc

    frame = _normalize_return_frame(raw, date_column)
    if columns:
        missing = [column for column in columns if column not in frame.columns]
        if missing:
            raise DataLoadError(f"Return file {resolved_path} is missing columns: {missing}")
        frame = frame.loc[:, list(columns)]

    get_logger(_LOGGER_NAME).info(
        "Loaded %s: %d rows x %d columns", resolved_path.name, frame.shape[0], frame.shape[1]
    )
    return frame


def split_benchmark(frame: pd.DataFrame, benchmark_column: str) -> tuple[pd.DataFrame, pd.Series]:
    """
    Split one wide return frame into asset returns and the benchmark series.

    Args:
        frame: Return frame containing the benchmark as one of its columns.
        benchmark_column: Name of the benchmark column.

    Returns:
        Tuple of (asset returns in original column order, benchmark series).
    """
    if benchmark_column not in frame.columns:
        raise DataLoadError(f"Benchmark column '{benchmark_column}' not found.")
    assets = frame.drop(columns=[benchmark_column])
    if assets.shape[1] == 0:
        raise DataLoadError("No asset columns remain after removing the benchmark column.")
    return assets, frame[benchmark_column]

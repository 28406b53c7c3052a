"""Input normalization and validation shared by the analytics functions."""

from __future__ import annotations

from typing import Union

import pandas as pd
from pandas.api.types import is_numeric_dtype

from perfanalytics.core.utils.errors import DataValidationError

SeriesLike = Union[pd.DataFrame, pd.Series]
DEFAULT_SERIES_NAME = "returns"


def as_frame(data: SeriesLike, context: str = "Input") -> pd.DataFrame:
    """
    Return ``data`` as a dataframe with unique column names.

    A series is promoted to a one-column frame named after the series
    (``returns`` when unnamed). The input object is never modified.

    Args:
        data: Time-indexed series or dataframe.
        context: Label used in error messages.

    Returns:
        Dataframe view of the input.
    """
    if isinstance(data, pd.Series):
        name = data.name if data.name is not None else DEFAULT_SERIES_NAME
        return data.to_frame(name=name)
    if not isinstance(data, pd.DataFrame):
        raise DataValidationError(
            f"{context} must be a pandas DataFrame or Series, got {type(data).__name__}."
        )
    if data.columns.has_duplicates:
        duplicated = sorted({str(name) for name in data.columns[data.columns.duplicated()]})
        raise DataValidationError(f"{context} has duplicate column names: {duplicated}")
    return data


def require_numeric(frame: pd.DataFrame, context: str = "Input") -> None:
    """Ensure every column of ``frame`` has a numeric dtype."""
    non_numeric = [str(column) for column in frame.columns if not is_numeric_dtype(frame[column])]
    if non_numeric:
        raise DataValidationError(
            f"{context} must contain numeric data; offending columns: {non_numeric}"
        )


def require_no_nan(frame: pd.DataFrame, context: str = "Input") -> None:
    """Ensure ``frame`` has no missing values."""
    missing = frame.isna().any(axis=0)
    if bool(missing.any()):
        offending = [str(column) for column in missing.index[missing.to_numpy()]]
        raise DataValidationError(f"{context} contains NaN values in columns: {offending}")


def as_benchmark_series(benchmark: SeriesLike) -> pd.Series:
    """
    Return the benchmark as a numeric series.

    Args:
        benchmark: Series or one-column dataframe of benchmark returns.

    Returns:
        Benchmark series sharing the input index.
    """
    if isinstance(benchmark, pd.DataFrame):
        if benchmark.shape[1] != 1:
            raise DataValidationError(
                f"Benchmark must have exactly one column, got {benchmark.shape[1]}."
            )
        benchmark = benchmark.iloc[:, 0]
    if not isinstance(benchmark, pd.Series):
        raise DataValidationError(
            f"Benchmark must be a pandas Series or DataFrame, got {type(benchmark).__name__}."
        )
    if not is_numeric_dtype(benchmark):
        raise DataValidationError("Benchmark must contain numeric data.")
    return benchmark

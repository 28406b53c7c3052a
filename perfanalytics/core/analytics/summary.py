"""Per-asset summary statistics table."""

from __future__ import annotations

import pandas as pd

from perfanalytics.core.analytics.annualized import (
    annual_return,
    annual_sharpe_ratio,
    annual_stdev,
)
from perfanalytics.core.analytics.capture import down_capture, overall_capture, up_capture
from perfanalytics.core.analytics.downside import sortino_ratio
from perfanalytics.core.analytics.drawdown import max_drawdown
from perfanalytics.core.analytics.validation import SeriesLike, as_benchmark_series, as_frame
from perfanalytics.core.utils.errors import AlignmentError, DataValidationError
from perfanalytics.core.utils.logging import get_logger

_LOGGER_NAME = "perfanalytics.core.analytics.summary"
STAT_COLUMN = "Stat"
STAT_NAMES: tuple[str, ...] = (
    "Annual Return",
    "Annual StDev",
    "Sharpe Ratio",
    "Sortino Ratio",
    "Max Drawdowns",
    "Down Capture",
    "Up Capture",
    "Overall Capture",
)


def performance_table(
    returns: SeriesLike,
    benchmark: SeriesLike,
    *,
    periods_per_year: int,
    thresh_value: float = 0.0,
    corrected: bool = True,
) -> pd.DataFrame:
    """
    Build the summary performance table for each asset.

    Every statistic is multiplied by 100, capture ratios included. The
    Sortino ratio uses ``thresh_value`` as the minimum acceptable return.

    Args:
        returns: Asset returns, one column per asset.
        benchmark: Benchmark returns on the same index.
        periods_per_year: Number of return periods in a year.
        thresh_value: Market threshold for capture ratios and Sortino MAR.
        corrected: Use Bessel's correction for the downside deviation.

    Returns:
        Dataframe with a leading ``Stat`` label column followed by one column per
        asset in input order, with one row per entry of ``STAT_NAMES``.
    """
    frame = as_frame(returns, context="Returns")
    benchmark_series = as_benchmark_series(benchmark)
    if frame.shape[0] != benchmark_series.shape[0]:
        raise AlignmentError("Asset returns and benchmark row counts do not match.")
    if STAT_COLUMN in frame.columns:
        raise DataValidationError(f"Asset column name '{STAT_COLUMN}' is reserved.")

    logger = get_logger(_LOGGER_NAME)
    logger.debug(
        "Building performance table for %d assets over %d periods",
        frame.shape[1],
        frame.shape[0],
    )

    statistics = [
        annual_return(frame, periods_per_year),
        annual_stdev(frame, periods_per_year),
        annual_sharpe_ratio(frame, periods_per_year),
        sortino_ratio(frame, mar=thresh_value, corrected=corrected),
        max_drawdown(frame),
        down_capture(frame, benchmark_series, thresh_value),
        up_capture(frame, benchmark_series, thresh_value),
        overall_capture(frame, benchmark_series, thresh_value),
    ]

    table = pd.DataFrame(
        [statistic.to_numpy(dtype=float) for statistic in statistics],
        columns=frame.columns.copy(),
        dtype=float,
    )
    table = table * 100.0
    table.insert(0, STAT_COLUMN, list(STAT_NAMES))
    return table

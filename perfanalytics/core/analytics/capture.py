"""Benchmark-relative down, up, and overall capture ratios."""

from __future__ import annotations

import numpy as np
import pandas as pd

from perfanalytics.core.analytics.validation import (
    SeriesLike,
    as_benchmark_series,
    as_frame,
    require_numeric,
)
from perfanalytics.core.utils.errors import AlignmentError
from perfanalytics.core.utils.logging import get_logger

_LOGGER_NAME = "perfanalytics.core.analytics.capture"


def _aligned_inputs(
    returns: SeriesLike,
    benchmark: SeriesLike,
) -> tuple[pd.DataFrame, pd.Series]:
    """Normalize inputs and require identical timestamp indices."""
    frame = as_frame(returns, context="Returns")
    require_numeric(frame, context="Returns")
    benchmark_series = as_benchmark_series(benchmark)
    if not frame.index.equals(benchmark_series.index):
        raise AlignmentError("The timestamps of returns and benchmark returns must match.")
    return frame, benchmark_series


def _capture_ratio(
    frame: pd.DataFrame,
    benchmark: pd.Series,
    market_mask: np.ndarray,
    regime: str,
) -> pd.Series:
    """Average asset return over average benchmark return within one market regime."""
    logger = get_logger(_LOGGER_NAME)
    if not market_mask.any():
        logger.debug("No %s-market periods found; capture is undefined.", regime)
        return pd.Series(np.nan, index=frame.columns.copy(), dtype=float)

    avg_benchmark = float(benchmark.to_numpy(dtype=float, na_value=np.nan)[market_mask].mean())
    if avg_benchmark == 0.0:
        logger.debug("Average benchmark %s-market return is zero; capture is undefined.", regime)
        return pd.Series(np.nan, index=frame.columns.copy(), dtype=float)

    avg_portfolio = frame.loc[market_mask].mean(axis=0, skipna=False).astype(float)
    return avg_portfolio / avg_benchmark


def down_capture(
    returns: SeriesLike,
    benchmark: SeriesLike,
    thresh_value: float = 0.0,
) -> pd.Series:
    """
    Compute down capture of each column against the benchmark.

    Down-market periods are rows where the benchmark is strictly below
    ``thresh_value``.

    Args:
        returns: Portfolio returns, one column per asset.
        benchmark: Benchmark returns on the same index.
        thresh_value: Threshold separating down markets.

    Returns:
        Series of down capture ratios; all NaN when no down-market period exists.
    """
    frame, benchmark_series = _aligned_inputs(returns, benchmark)
    down_market = (benchmark_series < thresh_value).to_numpy(dtype=bool, na_value=False)
    return _capture_ratio(frame, benchmark_series, down_market, "down").rename("down_capture")


def up_capture(
    returns: SeriesLike,
    benchmark: SeriesLike,
    thresh_value: float = 0.0,
) -> pd.Series:
    """
    Compute up capture of each column against the benchmark.

    Up-market periods are rows where the benchmark is strictly above
    ``thresh_value``.

    Args:
        returns: Portfolio returns, one column per asset.
        benchmark: Benchmark returns on the same index.
        thresh_value: Threshold separating up markets.

    Returns:
        Series of up capture ratios; all NaN when no up-market period exists.
    """
    frame, benchmark_series = _aligned_inputs(returns, benchmark)
    up_market = (benchmark_series > thresh_value).to_numpy(dtype=bool, na_value=False)
    return _capture_ratio(frame, benchmark_series, up_market, "up").rename("up_capture")


def overall_capture(
    returns: SeriesLike,
    benchmark: SeriesLike,
    thresh_value: float = 0.0,
) -> pd.Series:
    """Compute up capture over down capture for each column."""
    dc = down_capture(returns, benchmark, thresh_value)
    uc = up_capture(returns, benchmark, thresh_value)
    return (uc / dc).rename("overall_capture")

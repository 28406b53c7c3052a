"""Downside deviation and Sortino ratio against a minimum acceptable return."""

from __future__ import annotations

import numpy as np
import pandas as pd

from perfanalytics.core.analytics.validation import SeriesLike, as_frame, require_numeric


def downside_deviation(
    returns: SeriesLike,
    mar: float = 0.0,
    corrected: bool = True,
) -> pd.Series:
    """
    Calculate the downside deviation of each column.

    Only observations strictly below ``mar`` contribute; NaN never does. A
    column with no such observation has a downside deviation of exactly 0.0.

    Args:
        returns: Period returns, one column per asset.
        mar: Minimum acceptable return.
        corrected: Use ``count - 1`` (Bessel's correction) as the denominator.

    Returns:
        Series of downside deviations indexed by column name.
    """
    frame = as_frame(returns, context="Returns")
    require_numeric(frame, context="Returns")

    results: list[float] = []
    for position in range(frame.shape[1]):
        values = frame.iloc[:, position].to_numpy(dtype=float, na_value=np.nan)
        below = values[values < mar]
        if below.size == 0:
            results.append(0.0)
            continue

        squared_deviations = (below - mar) ** 2
        denominator = below.size - 1 if corrected else below.size
        # One downside observation with correction divides by zero -> inf.
        with np.errstate(divide="ignore", invalid="ignore"):
            downside_var = np.float64(squared_deviations.sum()) / np.float64(denominator)
            results.append(float(np.sqrt(downside_var)))

    return pd.Series(results, index=frame.columns.copy(), dtype=float, name="downside_deviation")


def sortino_ratio(
    returns: SeriesLike,
    mar: float = 0.0,
    corrected: bool = True,
) -> pd.Series:
    """
    Compute the Sortino ratio of each column.

    Args:
        returns: Period returns, one column per asset.
        mar: Minimum acceptable return.
        corrected: Use Bessel's correction for the downside deviation.

    Returns:
        Series of ``mean(returns) / downside_deviation``; NaN where the downside
        deviation is 0.
    """
    frame = as_frame(returns, context="Returns")
    down_dev = downside_deviation(frame, mar=mar, corrected=corrected)
    mean_returns = frame.mean(axis=0, skipna=False).astype(float)

    guarded = down_dev.where(down_dev != 0.0)
    return (mean_returns / guarded).rename("sortino_ratio")

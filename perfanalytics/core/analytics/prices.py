"""Price reconstruction and windowed percentage change."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from perfanalytics.core.analytics.validation import SeriesLike, as_frame, require_numeric
from perfanalytics.core.utils.errors import InvalidArgumentError


def returns_to_prices(returns: SeriesLike, init_value: float = 1) -> pd.DataFrame:
    """
    Compound a return series into a price index, preserving NaN locations.

    Each column keeps its own running level starting at ``init_value``. A NaN
    return emits NaN and leaves the running level untouched, so the next
    observed return compounds onto the last valid level.

    Args:
        returns: Period returns as decimals, one column per asset.
        init_value: Starting index level.

    Returns:
        Price frame with the same index and column names as ``returns``.
    """
    frame = as_frame(returns, context="Returns")
    require_numeric(frame, context="Returns")

    values = frame.to_numpy(dtype=float, na_value=np.nan)
    levels = np.empty_like(values)
    for col in range(values.shape[1]):
        cumulative = float(init_value)
        for row in range(values.shape[0]):
            value = values[row, col]
            if math.isnan(value):
                levels[row, col] = np.nan
                continue
            cumulative *= 1.0 + value
            levels[row, col] = cumulative

    return pd.DataFrame(levels, index=frame.index.copy(), columns=frame.columns.copy())


def pct_change(prices: SeriesLike, window: int = 1) -> pd.DataFrame:
    """
    Calculate the percentage change of prices over ``window`` periods.

    Missing or unparseable values become NaN. The first ``window`` rows are NaN
    and the output keeps the full length of the input.

    Args:
        prices: Price levels, one column per asset.
        window: Lag in rows; must be at least 1.

    Returns:
        Frame of ``price[t] / price[t - window] - 1``.
    """
    if isinstance(window, bool) or not isinstance(window, (int, np.integer)):
        raise InvalidArgumentError(f"Window size must be an integer, got {window!r}.")
    if window < 1:
        raise InvalidArgumentError("Window size must be at least 1.")

    frame = as_frame(prices, context="Prices")
    normalized = pd.DataFrame(
        {
            position: pd.to_numeric(frame.iloc[:, position], errors="coerce").to_numpy(
                dtype=float, na_value=np.nan
            )
            for position in range(frame.shape[1])
        },
        index=frame.index.copy(),
    )
    normalized.columns = frame.columns.copy()

    lagged = normalized.shift(int(window))
    return normalized / lagged - 1.0

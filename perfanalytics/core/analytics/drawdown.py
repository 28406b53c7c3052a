"""Drawdown curves and maximum drawdown."""

from __future__ import annotations

import pandas as pd

from perfanalytics.core.analytics.prices import returns_to_prices
from perfanalytics.core.analytics.validation import (
    SeriesLike,
    as_frame,
    require_no_nan,
    require_numeric,
)


def drawdowns(returns: SeriesLike) -> pd.DataFrame:
    """
    Compute drawdown curves for a return series.

    Args:
        returns: NaN-free period returns, one column per asset.

    Returns:
        Frame of ``price / running_max - 1`` (always <= 0) with the input's
        index and column names.
    """
    frame = as_frame(returns, context="Returns")
    require_numeric(frame, context="Returns")
    require_no_nan(frame, context="Returns")

    prices = returns_to_prices(frame)
    running_max = prices.cummax(axis=0)
    curves = prices / running_max - 1.0
    curves.columns = frame.columns.copy()
    return curves


def max_drawdown(returns: SeriesLike) -> pd.Series:
    """
    Compute the maximum drawdown of each column as a positive magnitude.

    Args:
        returns: NaN-free period returns, one column per asset.

    Returns:
        Series indexed by column name; 0 means no drawdown.
    """
    worst = drawdowns(returns).min(axis=0)
    return (-worst).rename("max_drawdown")

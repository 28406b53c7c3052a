"""Annualized return, volatility, and Sharpe ratio."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from perfanalytics.core.analytics.prices import returns_to_prices
from perfanalytics.core.analytics.validation import SeriesLike, as_frame, require_numeric
from perfanalytics.core.utils.errors import DataValidationError, InvalidArgumentError


def _validate_periods_per_year(periods_per_year: int) -> None:
    """Ensure the annualization factor is a positive integer."""
    if isinstance(periods_per_year, bool) or not isinstance(periods_per_year, (int, np.integer)):
        raise InvalidArgumentError(
            f"periods_per_year must be an integer, got {periods_per_year!r}."
        )
    if periods_per_year <= 0:
        raise InvalidArgumentError("periods_per_year must be greater than 0.")


def annual_return(returns: SeriesLike, periods_per_year: int) -> pd.Series:
    """
    Compute the compound annualized return of each column.

    Args:
        returns: Period returns, one column per asset.
        periods_per_year: Number of return periods in a year (252 for daily).

    Returns:
        Series of ``final_price ** (periods_per_year / n_rows) - 1``.
    """
    _validate_periods_per_year(periods_per_year)
    frame = as_frame(returns, context="Returns")
    if frame.shape[0] < 2:
        raise DataValidationError("Returns must contain at least two data points.")

    prices = returns_to_prices(frame)
    n_periods = prices.shape[0]
    final_prices = prices.iloc[-1]
    annualized = final_prices ** (periods_per_year / n_periods) - 1.0
    return annualized.astype(float).rename("annual_return")


def annual_stdev(returns: SeriesLike, periods_per_year: int) -> pd.Series:
    """Compute the annualized sample standard deviation of each column."""
    _validate_periods_per_year(periods_per_year)
    frame = as_frame(returns, context="Returns")
    require_numeric(frame, context="Returns")

    std_dev = frame.std(axis=0, ddof=1, skipna=False)
    return (std_dev * math.sqrt(periods_per_year)).astype(float).rename("annual_stdev")


def annual_sharpe_ratio(returns: SeriesLike, periods_per_year: int) -> pd.Series:
    """Compute annual return over annual volatility; zero volatility yields NaN or inf."""
    ratio = annual_return(returns, periods_per_year) / annual_stdev(returns, periods_per_year)
    return ratio.rename("sharpe_ratio")

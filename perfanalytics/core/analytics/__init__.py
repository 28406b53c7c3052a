"""Performance analytics exports."""

from perfanalytics.core.analytics.annualized import (
    annual_return,
    annual_sharpe_ratio,
    annual_stdev,
)
from perfanalytics.core.analytics.capture import down_capture, overall_capture, up_capture
from perfanalytics.core.analytics.downside import downside_deviation, sortino_ratio
from perfanalytics.core.analytics.drawdown import drawdowns, max_drawdown
from perfanalytics.core.analytics.prices import pct_change, returns_to_prices
from perfanalytics.core.analytics.summary import STAT_NAMES, performance_table

__all__ = [
    "STAT_NAMES",
    "annual_return",
    "annual_sharpe_ratio",
    "annual_stdev",
    "down_capture",
    "downside_deviation",
    "drawdowns",
    "max_drawdown",
    "overall_capture",
    "pct_change",
    "performance_table",
    "returns_to_prices",
    "sortino_ratio",
    "up_capture",
]

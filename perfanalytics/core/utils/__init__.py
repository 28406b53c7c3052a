"""Utility helpers."""

from perfanalytics.core.utils.errors import (
    AlignmentError,
    ArtifactError,
    ConfigLoadError,
    DataLoadError,
    DataValidationError,
    InvalidArgumentError,
    PerfAnalyticsError,
    exit_code_for_exception,
)
from perfanalytics.core.utils.logging import configure_logging, get_logger
from perfanalytics.core.utils.plotting import get_matplotlib_pyplot, save_drawdown_plot

__all__ = [
    "AlignmentError",
    "ArtifactError",
    "ConfigLoadError",
    "DataLoadError",
    "DataValidationError",
    "InvalidArgumentError",
    "PerfAnalyticsError",
    "configure_logging",
    "exit_code_for_exception",
    "get_logger",
    "get_matplotlib_pyplot",
    "save_drawdown_plot",
]

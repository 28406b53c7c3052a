"""Portfolio performance analytics for periodic return series."""

__version__ = "0.1.0"

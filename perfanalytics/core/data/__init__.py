"""Return series loading helpers."""

from perfanalytics.core.data.loaders import load_returns_csv, split_benchmark

__all__ = ["load_returns_csv", "split_benchmark"]

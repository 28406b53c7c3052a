"""Test helpers for deterministic return series."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pandas as pd


def make_index(periods: int, start: str = "2020-01-01") -> pd.DatetimeIndex:
    """Build a daily UTC index."""
    return pd.date_range(start, periods=periods, freq="D", tz="UTC", name="date")


def make_returns(columns: Mapping[str, Sequence[float]]) -> pd.DataFrame:
    """Build a float return frame preserving column order."""
    lengths = {len(values) for values in columns.values()}
    if len(lengths) != 1:
        raise ValueError("All return columns must have the same length.")
    index = make_index(lengths.pop())
    return pd.DataFrame(
        {name: list(values) for name, values in columns.items()},
        index=index,
        dtype=float,
    )


def make_benchmark(values: Sequence[float], name: str = "benchmark") -> pd.Series:
    """Build a float benchmark series on the default index."""
    return pd.Series(list(values), index=make_index(len(values)), dtype=float, name=name)

"""Unit tests for return CSV loading."""

from __future__ import annotations

import math
import tempfile
import textwrap
import unittest
from pathlib import Path

from perfanalytics.core.data.loaders import load_returns_csv, split_benchmark
from perfanalytics.core.utils.errors import DataLoadError

_CSV_TEXT = textwrap.dedent("""
    date,growth,value,benchmark
    2023-03-31,0.03,n/a,0.02
    2023-01-31,0.01,0.02,0.015
    2023-02-28,-0.02,-0.01,-0.01
    2023-03-31,0.04,0.01,0.03
    """).strip() + "\n"


class TestLoaders(unittest.TestCase):
    """Validate CSV parsing, ordering, and benchmark splitting."""

    def _write(self, root: Path, text: str = _CSV_TEXT) -> Path:
        path = root / "returns.csv"
        path.write_text(text, encoding="utf-8")
        return path

    def test_load_sorts_dedupes_and_coerces(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            frame = load_returns_csv(self._write(Path(temp_dir)))

        self.assertEqual(list(frame.columns), ["growth", "value", "benchmark"])
        self.assertTrue(frame.index.is_monotonic_increasing)
        self.assertTrue(frame.index.is_unique)
        self.assertEqual(len(frame), 3)
        self.assertAlmostEqual(float(frame["growth"].iloc[-1]), 0.04, places=12)
        self.assertAlmostEqual(float(frame["value"].iloc[-1]), 0.01, places=12)

    def test_unparseable_cells_become_nan(self) -> None:
        text = "date,a\n2023-01-31,0.01\n2023-02-28,oops\n"
        with tempfile.TemporaryDirectory() as temp_dir:
            frame = load_returns_csv(self._write(Path(temp_dir), text))
        self.assertTrue(math.isnan(frame["a"].iloc[1]))

    def test_duplicate_headers_load_as_distinct_columns(self) -> None:
        text = "date,a,a\n2023-01-31,0.01,0.02\n2023-02-28,0.03,0.04\n"
        with tempfile.TemporaryDirectory() as temp_dir:
            frame = load_returns_csv(self._write(Path(temp_dir), text))

        self.assertEqual(list(frame.columns), ["a", "a.1"])
        self.assertAlmostEqual(float(frame["a.1"].iloc[1]), 0.04, places=12)

    def test_column_subset_keeps_requested_order(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            frame = load_returns_csv(self._write(Path(temp_dir)), columns=["value", "growth"])
        self.assertEqual(list(frame.columns), ["value", "growth"])

    def test_failures_raise_data_load_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            path = self._write(root)
            with self.assertRaises(DataLoadError):
                load_returns_csv(root / "missing.csv")
            with self.assertRaises(DataLoadError):
                load_returns_csv(path, date_column="timestamp")
            with self.assertRaises(DataLoadError):
                load_returns_csv(path, columns=["growth", "missing"])

    def test_split_benchmark(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            frame = load_returns_csv(self._write(Path(temp_dir)))

        assets, benchmark = split_benchmark(frame, "benchmark")

        self.assertEqual(list(assets.columns), ["growth", "value"])
        self.assertEqual(benchmark.name, "benchmark")
        self.assertTrue(assets.index.equals(benchmark.index))
        with self.assertRaises(DataLoadError):
            split_benchmark(frame, "spx")


if __name__ == "__main__":
    unittest.main()

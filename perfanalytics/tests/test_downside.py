"""Unit tests for downside deviation and Sortino ratio."""

from __future__ import annotations

import math
import unittest

import pandas as pd

from perfanalytics.core.analytics.downside import downside_deviation, sortino_ratio
from perfanalytics.core.utils.errors import DataValidationError
from perfanalytics.tests.helpers import make_index, make_returns


class TestDownsideDeviation(unittest.TestCase):
    """Validate downside deviation against a minimum acceptable return."""

    def test_bessel_correction_toggle(self) -> None:
        returns = make_returns({"a": [0.02, -0.01, -0.03, 0.04]})

        corrected = downside_deviation(returns, mar=0.0)
        uncorrected = downside_deviation(returns, mar=0.0, corrected=False)

        self.assertAlmostEqual(float(corrected["a"]), math.sqrt(0.001 / 1), places=12)
        self.assertAlmostEqual(float(uncorrected["a"]), math.sqrt(0.001 / 2), places=12)

    def test_mar_shifts_threshold_and_deviation(self) -> None:
        returns = make_returns({"a": [0.02, -0.01, -0.03, 0.04]})

        result = downside_deviation(returns, mar=0.01, corrected=False)

        expected = math.sqrt(((-0.01 - 0.01) ** 2 + (-0.03 - 0.01) ** 2) / 2)
        self.assertAlmostEqual(float(result["a"]), expected, places=12)

    def test_no_downside_is_exactly_zero(self) -> None:
        returns = make_returns({"up": [0.01, 0.02, 0.0], "down": [0.01, -0.02, -0.01]})

        result = downside_deviation(returns)

        self.assertEqual(float(result["up"]), 0.0)
        self.assertGreater(float(result["down"]), 0.0)
        self.assertEqual(list(result.index), ["up", "down"])

    def test_nan_is_never_downside(self) -> None:
        with_nan = make_returns({"a": [float("nan"), -0.02, -0.04, 0.01]})
        without_nan = make_returns({"a": [-0.02, -0.04, 0.01]})

        self.assertAlmostEqual(
            float(downside_deviation(with_nan)["a"]),
            float(downside_deviation(without_nan)["a"]),
            places=12,
        )

    def test_single_downside_observation_with_correction_is_infinite(self) -> None:
        returns = make_returns({"a": [0.02, -0.01, 0.03]})

        corrected = downside_deviation(returns)
        uncorrected = downside_deviation(returns, corrected=False)

        self.assertTrue(math.isinf(corrected["a"]))
        self.assertAlmostEqual(float(uncorrected["a"]), 0.01, places=12)

    def test_non_numeric_column_raises(self) -> None:
        frame = pd.DataFrame({"a": [0.1, 0.2], "b": ["x", "y"]}, index=make_index(2))
        with self.assertRaises(DataValidationError):
            downside_deviation(frame)


class TestSortinoRatio(unittest.TestCase):
    """Validate the guarded Sortino ratio."""

    def test_sortino_is_mean_over_downside_deviation(self) -> None:
        returns = make_returns({"a": [0.02, -0.01, -0.03, 0.04]})

        result = sortino_ratio(returns, mar=0.0)

        self.assertAlmostEqual(float(result["a"]), 0.005 / math.sqrt(0.001), places=12)

    def test_nan_exactly_when_downside_deviation_is_zero(self) -> None:
        returns = make_returns(
            {
                "up": [0.01, 0.02, 0.03],
                "mixed": [0.01, -0.02, -0.01],
                "flat": [0.0, 0.0, 0.0],
            }
        )

        down_dev = downside_deviation(returns, mar=0.0)
        ratios = sortino_ratio(returns, mar=0.0)

        for column in returns.columns:
            with self.subTest(column=column):
                self.assertEqual(math.isnan(ratios[column]), float(down_dev[column]) == 0.0)

    def test_nan_observation_makes_sortino_nan(self) -> None:
        returns = make_returns(
            {"gappy": [0.01, float("nan"), -0.02, -0.03], "full": [0.01, 0.02, -0.02, -0.03]}
        )

        down_dev = downside_deviation(returns)
        ratios = sortino_ratio(returns)

        self.assertAlmostEqual(float(down_dev["gappy"]), float(down_dev["full"]), places=12)
        self.assertTrue(math.isnan(ratios["gappy"]))
        self.assertFalse(math.isnan(ratios["full"]))


if __name__ == "__main__":
    unittest.main()

"""Unit tests for logging setup."""

from __future__ import annotations

import logging
import unittest
import warnings

from perfanalytics.core.utils.logging import configure_logging, get_logger


class TestLogging(unittest.TestCase):
    """Validate level parsing, logger naming, and warning capture."""

    def tearDown(self) -> None:
        logging.captureWarnings(False)
        logging.getLogger().setLevel(logging.WARNING)

    def test_level_accepts_names_and_numbers(self) -> None:
        configure_logging("debug")
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

        configure_logging(logging.ERROR)
        self.assertEqual(logging.getLogger().level, logging.ERROR)

    def test_invalid_level_raises(self) -> None:
        with self.assertRaises(ValueError):
            configure_logging("loud")

    def test_loggers_share_the_package_namespace(self) -> None:
        self.assertEqual(
            get_logger("perfanalytics.core.analytics.capture").name,
            "perfanalytics.core.analytics.capture",
        )
        self.assertEqual(get_logger("__main__").name, "perfanalytics.__main__")
        self.assertEqual(get_logger("perfanalytics").name, "perfanalytics")

    def test_warnings_are_routed_to_logging(self) -> None:
        configure_logging("INFO")
        with warnings.catch_warnings():
            warnings.simplefilter("always")
            with self.assertLogs("py.warnings", level="WARNING") as captured:
                warnings.warn("divide by zero encountered", RuntimeWarning, stacklevel=1)

        self.assertTrue(any("divide by zero" in line for line in captured.output))

    def test_third_party_loggers_are_quieted(self) -> None:
        configure_logging("DEBUG")
        self.assertEqual(logging.getLogger("matplotlib").level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()

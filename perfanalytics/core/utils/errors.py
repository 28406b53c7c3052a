"""Domain-specific error taxonomy for perfanalytics."""

from __future__ import annotations


class PerfAnalyticsError(Exception):
    """Base perfanalytics error with CLI exit-code metadata."""

    exit_code: int = 1
    error_code: str = "perfanalytics_error"


class ConfigLoadError(PerfAnalyticsError, ValueError):
    """Configuration loading/validation error."""

    exit_code = 2
    error_code = "config_error"


class DataLoadError(PerfAnalyticsError, ValueError):
    """Return series file read/parse error."""

    exit_code = 3
    error_code = "data_load_error"


class DataValidationError(PerfAnalyticsError, ValueError):
    """Input series content or size is unsuitable for a computation."""

    exit_code = 4
    error_code = "data_validation_error"


class InvalidArgumentError(PerfAnalyticsError, ValueError):
    """Scalar argument outside its allowed domain."""

    exit_code = 5
    error_code = "invalid_argument"


class AlignmentError(PerfAnalyticsError, ValueError):
    """Return and benchmark series are not aligned."""

    exit_code = 6
    error_code = "alignment_error"


class ArtifactError(PerfAnalyticsError, RuntimeError):
    """Artifact write/read error."""

    exit_code = 7
    error_code = "artifact_error"


def exit_code_for_exception(exc: Exception) -> int:
    """
    Resolve process exit code for an exception.

    Args:
        exc: Raised exception.

    Returns:
        Integer process exit code.
    """
    return int(getattr(exc, "exit_code", 1))

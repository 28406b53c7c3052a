"""Configuration models and YAML loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

from perfanalytics.core.utils.errors import ConfigLoadError


class DataConfig(BaseModel):
    """Return series input settings."""

    returns_path: Path
    benchmark_path: Path | None = None
    benchmark_column: str = "benchmark"
    date_column: str = "date"
    assets: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_columns(self) -> DataConfig:
        """Ensure column names are usable and asset names are unique."""
        if not self.benchmark_column.strip():
            raise ValueError("data.benchmark_column must be non-empty.")
        if not self.date_column.strip():
            raise ValueError("data.date_column must be non-empty.")
        normalized_assets = [asset.strip() for asset in self.assets if asset.strip()]
        if len(set(normalized_assets)) != len(normalized_assets):
            raise ValueError("data.assets must not contain duplicates.")
        if self.benchmark_path is None and self.benchmark_column in normalized_assets:
            raise ValueError("data.assets must not include the benchmark column.")
        self.assets = normalized_assets
        return self


class AnalyticsConfig(BaseModel):
    """Metric computation settings."""

    periods_per_year: int = 252
    thresh_value: float = 0.0
    corrected: bool = True

    @model_validator(mode="after")
    def validate_analytics(self) -> AnalyticsConfig:
        """Validate annualization settings."""
        if self.periods_per_year <= 0:
            raise ValueError("analytics.periods_per_year must be > 0.")
        return self


class OutputConfig(BaseModel):
    """Output and artifact settings."""

    output_dir: Path = Path("artifacts")
    table_filename: str = "performance_table.csv"
    save_drawdown_plot: bool = True
    drawdown_plot_filename: str = "drawdowns.png"

    @model_validator(mode="after")
    def validate_output(self) -> OutputConfig:
        """Ensure output filenames are valid."""
        if not self.table_filename.strip():
            raise ValueError("output.table_filename must be non-empty.")
        if not self.drawdown_plot_filename.strip():
            raise ValueError("output.drawdown_plot_filename must be non-empty.")
        return self


class AppConfig(BaseModel):
    """Top-level application configuration."""

    data: DataConfig
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def _resolve_config_path(path: Path) -> Path:
    """Resolve and validate a config file path."""
    resolved_path = path.expanduser().resolve()
    if not resolved_path.exists():
        raise ConfigLoadError(f"Config file not found: {resolved_path}")
    if not resolved_path.is_file():
        raise ConfigLoadError(f"Config path is not a file: {resolved_path}")
    return resolved_path


def _resolve_relative(path: Path, base_dir: Path) -> Path:
    """Resolve ``path`` against ``base_dir`` unless it is already absolute."""
    if path.is_absolute():
        return path.expanduser().resolve()
    return (base_dir / path.expanduser()).resolve()


def load_config(path: Path) -> AppConfig:
    """
    Load and validate application config from YAML.

    Relative paths are resolved from the YAML file parent directory.

    Args:
        path: YAML config file path.

    Returns:
        Validated application config.
    """
    config_path = _resolve_config_path(path)
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw_config: Any = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise ConfigLoadError(f"Failed to read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Invalid YAML in config file {config_path}: {exc}") from exc

    if not isinstance(raw_config, dict):
        raise ConfigLoadError("YAML root must be a mapping/object.")

    return _build_config(raw_config, config_path.parent)


def _build_config(raw_config: dict[str, Any], base_dir: Path) -> AppConfig:
    """Build and path-resolve config from raw data."""
    try:
        config = AppConfig.model_validate(raw_config)
    except Exception as exc:
        raise ConfigLoadError(f"Config validation failed: {exc}") from exc

    benchmark_path = config.data.benchmark_path
    updated_data = config.data.model_copy(
        update={
            "returns_path": _resolve_relative(config.data.returns_path, base_dir),
            "benchmark_path": (
                _resolve_relative(benchmark_path, base_dir) if benchmark_path is not None else None
            ),
        }
    )
    updated_output = config.output.model_copy(
        update={"output_dir": _resolve_relative(config.output.output_dir, base_dir)}
    )
    return config.model_copy(update={"data": updated_data, "output": updated_output})


def load_config_from_yaml_text(yaml_text: str, base_dir: Path | None = None) -> AppConfig:
    """
    Load and validate config from YAML text.

    Args:
        yaml_text: YAML string.
        base_dir: Base directory for relative paths.

    Returns:
        Validated application config.
    """
    try:
        raw_config: Any = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Invalid YAML text: {exc}") from exc
    if not isinstance(raw_config, dict):
        raise ConfigLoadError("YAML root must be a mapping/object.")
    resolved_base_dir = (base_dir or Path.cwd()).expanduser().resolve()
    return _build_config(raw_config, resolved_base_dir)


def dump_config_to_yaml(config: AppConfig) -> str:
    """
    Serialize config to canonical YAML for reproducibility.

    Args:
        config: App config.

    Returns:
        YAML string.
    """
    payload = config.model_dump(mode="json")
    return yaml.safe_dump(payload, sort_keys=True, default_flow_style=False)

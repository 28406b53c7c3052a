"""Plotting utilities for drawdown artifacts."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pandas as pd

from perfanalytics.core.utils.errors import ArtifactError


def get_matplotlib_pyplot() -> Any:
    """
    Import and return ``matplotlib.pyplot`` with a writable config directory.

    The non-interactive ``Agg`` backend is selected so plots can be written
    from headless sessions.

    Returns:
        Imported pyplot module.
    """
    if "MPLCONFIGDIR" not in os.environ:
        mpl_config_dir = Path("/tmp/perfanalytics-mplconfig")
        mpl_config_dir.mkdir(parents=True, exist_ok=True)
        os.environ["MPLCONFIGDIR"] = str(mpl_config_dir)

    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    return plt


def save_drawdown_plot(
    drawdown_curves: pd.DataFrame,
    output_dir: Path,
    filename: str = "drawdowns.png",
) -> Path:
    """
    Save a drawdown curve plot with one line per asset.

    Args:
        drawdown_curves: Drawdown frame indexed by timestamp (values <= 0).
        output_dir: Artifact directory.
        filename: Output image filename.

    Returns:
        Saved plot path.
    """
    plt = get_matplotlib_pyplot()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        plot_path = output_dir / filename

        figure, axis = plt.subplots(figsize=(10, 4))
        for column in drawdown_curves.columns:
            axis.plot(
                drawdown_curves.index,
                drawdown_curves[column].to_numpy() * 100.0,
                linewidth=1.2,
                label=str(column),
            )
        axis.set_title("Drawdowns")
        axis.set_xlabel("Date")
        axis.set_ylabel("Drawdown (%)")
        axis.grid(alpha=0.25, linestyle="--", linewidth=0.7)
        if len(drawdown_curves.columns) > 1:
            axis.legend(loc="lower left", fontsize="small")
        figure.tight_layout()
        figure.savefig(plot_path, dpi=150)
        plt.close(figure)
        return plot_path
    except Exception as exc:
        raise ArtifactError(
            f"Failed to save drawdown plot to {output_dir / filename}: {exc}"
        ) from exc

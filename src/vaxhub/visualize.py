"""
Lightweight visualizations for quick inspection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import matplotlib

# Use a non-interactive backend to avoid display issues in headless environments.
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd

from .config import DAY_NAMES


def plot_allocation(df: pd.DataFrame, distribution: Dict[str, float], outfile: Optional[Path] = None) -> None:
    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))

    # People allocated per day, stacked by hub
    if df.empty:
        axes[0].text(0.5, 0.5, "nobody allocated", ha="center", va="center")
    else:
        per_day = df.groupby(["day_name", "hub"]).size().unstack(fill_value=0)
        per_day.reindex(DAY_NAMES, fill_value=0).plot(kind="bar", stacked=True, ax=axes[0])
    axes[0].set_title("Allocations per day")
    axes[0].set_ylabel("People")

    # Share of allocated people by age band
    if distribution:
        pd.Series(distribution, dtype=float).plot(kind="bar", ax=axes[1], color="tab:purple")
    axes[1].set_title("Allocated people by age interval")
    axes[1].set_ylim(0, 1)

    fig.tight_layout()
    if outfile:
        fig.savefig(outfile, dpi=150)
    else:
        plt.show()
    plt.close(fig)

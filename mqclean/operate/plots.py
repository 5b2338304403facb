"""Histograms of a cleaned proteinGroups table."""

import logging
from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from mqclean.core.common import LOG2_PREFIX, QVALUE_COLUMN

logger = logging.getLogger(__name__)


def _save_figure(fig, save_path: Union[Path, str]) -> None:
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(save_path, bbox_inches="tight")
    plt.close(fig)
    logger.info(f"Saved plot to {save_path}")


def plot_qvalue_distribution(
    df: pd.DataFrame, save_path: Union[Path, str], bins: int = 50
) -> None:
    """Histogram of protein Q-values; unparseable cells are left out"""
    qvalues = pd.to_numeric(df[QVALUE_COLUMN], errors="coerce").dropna()

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(qvalues, bins=bins, color="#0F2080")
    ax.set_xlabel("Q-value")
    ax.set_ylabel("Protein groups")
    ax.set_title(f"Q-value distribution (n={len(qvalues):,})")
    _save_figure(fig, save_path)


def plot_log2_intensity_distribution(
    df: pd.DataFrame,
    save_path: Union[Path, str],
    log_prefix: str = LOG2_PREFIX,
    bins: int = 50,
) -> None:
    """Overlaid histograms of every LOG2.<sample> column"""
    log_cols = [col for col in df.columns if col.startswith(log_prefix)]
    if not log_cols:
        raise ValueError(
            f"No columns starting with '{log_prefix}' to plot, "
            f"found: {list(df.columns)}"
        )

    fig, ax = plt.subplots(figsize=(8, 5))
    for col in log_cols:
        values = df[col].to_numpy(dtype="float64")
        values = values[np.isfinite(values)]
        ax.hist(
            values,
            bins=bins,
            alpha=0.4,
            histtype="stepfilled",
            label=col[len(log_prefix) :],
        )
    ax.set_xlabel("log2 LFQ intensity")
    ax.set_ylabel("Protein groups")
    ax.set_title("log2 intensity distribution per sample")
    ax.legend(fontsize="small")
    _save_figure(fig, save_path)

"""matplotlib views of sampled sinusoids and phasors.

Both helpers draw on a caller-supplied Axes and return it, so they compose with
existing figures; nothing here creates or shows a figure.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from phasor_analyzer.analysis.sampling import SamplingConfig
from phasor_analyzer.models.complex import Complex


def plot_samples(ax, table: pd.DataFrame, config: Optional[SamplingConfig] = None):
    """Plot every value column of a :func:`sample_table` result against time.

    Parameters
    ----------
    ax : matplotlib Axes
    table : DataFrame
        Output of :func:`~phasor_analyzer.analysis.sampling.sample_table`.
    config : SamplingConfig, optional
        Must match the config used to build ``table``.
    """
    cfg = config or SamplingConfig()
    if cfg.time_column not in table.columns:
        raise KeyError(f"Missing time column {cfg.time_column!r} in sample table")

    t = table[cfg.time_column].to_numpy()
    for col in table.columns:
        if col == cfg.time_column:
            continue
        if col == cfg.sum_column:
            ax.plot(t, table[col].to_numpy(), "k-", lw=1.6, label=col)
        else:
            ax.plot(t, table[col].to_numpy(), "-", lw=0.9, alpha=0.8, label=col)

    ax.set_xlabel(cfg.time_column)
    ax.grid(True, alpha=0.3)
    ax.legend(fontsize=8)
    return ax


def plot_phasors(ax, phasors: Sequence[Complex], labels: Optional[Sequence[str]] = None):
    """Draw phasors as arrows from the origin on an equal-aspect Axes."""
    if labels is not None and len(labels) != len(phasors):
        raise ValueError(f"labels must have length {len(phasors)}, got {len(labels)}")

    colors = [f"C{i % 10}" for i in range(len(phasors))]
    r_max = 0.0
    for i, p in enumerate(phasors):
        x, y = float(p.real), float(p.imag)
        r_max = max(r_max, float(np.hypot(x, y)))
        ax.annotate(
            "",
            xy=(x, y),
            xytext=(0.0, 0.0),
            arrowprops=dict(arrowstyle="->", color=colors[i], lw=1.4),
        )
        if labels is not None:
            ax.text(x, y, f" {labels[i]}", color=colors[i], fontsize=8)

    lim = 1.1 * r_max if r_max > 0 else 1.0
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.axhline(0.0, color="grey", lw=0.5)
    ax.axvline(0.0, color="grey", lw=0.5)
    ax.set_aspect("equal")
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    return ax

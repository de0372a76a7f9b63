"""Vectorised sampling of sinusoids.

The scalar :meth:`~phasor_analyzer.models.sinusoid.Sinusoid.sample_range` walks one
sample at a time through the capability providers. The helpers here produce the
same values on numpy arrays and tabulate them with pandas.

Functions
---------
sample_times
    Half-open time grid ``start + i/sample_rate < end``.
sample_array
    Evaluate one sinusoid on a time array (same formula as ``Sinusoid.sample``).
sample_table
    DataFrame with the time column, one column per sinusoid and their pointwise sum.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from phasor_analyzer.models.sinusoid import Sinusoid
from phasor_analyzer.numeric.capabilities import (
    ArithmeticOps,
    FractionOps,
    Trig,
    combined_scalar_type,
    require_all,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SamplingConfig:
    """
    Options for tabulated sampling.

    time_column:
      Name of the time column in :func:`sample_table` output.
    value_column:
      Name of the value column when a single unnamed sinusoid is tabulated.
    sum_column:
      Name of the pointwise-sum column (only written for two or more sinusoids).
    dtype:
      numpy dtype of the output arrays. None follows the first sinusoid's scalar.
    """
    time_column: str = "t"
    value_column: str = "value"
    sum_column: str = "sum"
    dtype: Optional[np.dtype] = None


def _dtype_for(sinusoid: Sinusoid, dtype: Optional[np.dtype]) -> np.dtype:
    if dtype is not None:
        return np.dtype(dtype)
    return np.dtype(combined_scalar_type((sinusoid.amplitude, sinusoid.frequency, sinusoid.phase)))


def sample_times(start: float, end: float, sample_rate: float, *, dtype=np.float64) -> np.ndarray:
    """Return ``start + i/sample_rate`` for every ``i`` with a value below ``end``.

    Parameters
    ----------
    start, end:
        Half-open interval ``[start, end)``. ``end <= start`` gives an empty array.
    sample_rate:
        Samples per unit time. Must be > 0.
    dtype:
        Output dtype.
    """
    if not (sample_rate > 0):
        raise ValueError(f"sample_rate must be > 0, got {sample_rate}")

    tp = np.dtype(dtype).type
    start_t, end_t, rate_t = tp(start), tp(end), tp(sample_rate)
    span = float(end_t) - float(start_t)
    if not (span > 0):
        return np.empty(0, dtype=dtype)

    # one extra candidate absorbs rounding in the ceil; the mask keeps the contract
    n = int(math.ceil(span * float(rate_t))) + 1
    t = start_t + np.arange(n, dtype=dtype) / rate_t
    return t[t < end_t]


def sample_array(sinusoid: Sinusoid, times, *, dtype: Optional[np.dtype] = None) -> np.ndarray:
    """Evaluate ``sinusoid`` at every entry of ``times``.

    Uses the same modulo-wrapped formula as ``Sinusoid.sample``:
    ``A * cos(2*pi*f * (t mod 1/f) + phase)``.
    """
    require_all((sinusoid.amplitude, sinusoid.frequency, sinusoid.phase), FractionOps, ArithmeticOps, Trig)
    dt = _dtype_for(sinusoid, dtype)
    tp = dt.type

    t = np.asarray(times, dtype=dt)
    freq = tp(sinusoid.frequency)
    period = tp(1) / freq
    omega = tp(2.0 * np.pi) * freq
    return tp(sinusoid.amplitude) * np.cos(omega * np.mod(t, period) + tp(sinusoid.phase))


def sample_table(
    sinusoids: Union[Sinusoid, Sequence[Sinusoid], Mapping[str, Sinusoid]],
    start: float,
    end: float,
    sample_rate: float,
    config: Optional[SamplingConfig] = None,
) -> pd.DataFrame:
    """Tabulate one or more sinusoids on a shared time grid.

    Parameters
    ----------
    sinusoids:
        A single sinusoid, a sequence (columns ``s0, s1, ...``) or a mapping
        ``{column_name: sinusoid}``.
    start, end, sample_rate:
        Time grid, see :func:`sample_times`.
    config:
        Column names and dtype. Defaults to :class:`SamplingConfig()`.

    Returns
    -------
    pandas.DataFrame
        Time column first, then one column per sinusoid, then the pointwise sum
        when more than one sinusoid is given. Frequencies may differ.
    """
    cfg = config or SamplingConfig()

    if isinstance(sinusoids, Sinusoid):
        named = {cfg.value_column: sinusoids}
    elif isinstance(sinusoids, Mapping):
        named = dict(sinusoids)
    else:
        named = {f"s{i}": s for i, s in enumerate(sinusoids)}

    if not named:
        raise ValueError("sample_table needs at least one sinusoid")
    reserved = {cfg.time_column, cfg.sum_column}
    clash = sorted(reserved.intersection(named))
    if clash:
        raise ValueError(f"Sinusoid names collide with reserved columns: {clash}")

    first = next(iter(named.values()))
    dt = _dtype_for(first, cfg.dtype)
    t = sample_times(start, end, sample_rate, dtype=dt)

    cols = {cfg.time_column: t}
    for name, s in named.items():
        cols[name] = sample_array(s, t, dtype=dt)
    if len(named) > 1:
        cols[cfg.sum_column] = np.sum([cols[name] for name in named], axis=0)

    logger.debug("sample_table: %d sinusoid(s), %d samples", len(named), t.size)
    return pd.DataFrame(cols)

"""Phasor-domain superposition of same-frequency sinusoids."""

from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable

import pandas as pd

from phasor_analyzer.models.sinusoid import Sinusoid

logger = logging.getLogger(__name__)

PHASOR_COLUMNS = ("amplitude", "frequency", "phase", "real", "imag")


def superpose(sinusoids: Iterable[Sinusoid]) -> Sinusoid:
    """Fold :meth:`Sinusoid.add` over ``sinusoids``.

    Raises
    ------
    ValueError
        If ``sinusoids`` is empty.
    DifferentFrequencyError
        If any frequency differs from the first one.
    """
    items = list(sinusoids)
    if not items:
        raise ValueError("superpose needs at least one sinusoid")

    logger.debug("superpose: folding %d sinusoid(s)", len(items))
    return reduce(Sinusoid.add, items)


def phasor_table(sinusoids: Iterable[Sinusoid]) -> pd.DataFrame:
    """One row per sinusoid with its polar and rectangular phasor components."""
    rows = []
    for s in sinusoids:
        p = s.to_phasor()
        rows.append(
            {
                "amplitude": s.amplitude,
                "frequency": s.frequency,
                "phase": s.phase,
                "real": p.real,
                "imag": p.imag,
            }
        )
    return pd.DataFrame(rows, columns=list(PHASOR_COLUMNS))

"""Array-level analysis built on the scalar value types.

Design principle:
  - ``models`` holds the generic scalar value types (Complex, Sinusoid).
  - ``analysis`` evaluates and combines them on numpy arrays and pandas tables.

Plotting lives in :mod:`phasor_analyzer.analysis.plotting` and is not imported
here, so matplotlib is only loaded when plots are requested.
"""

from .sampling import SamplingConfig, sample_array, sample_table, sample_times
from .superposition import phasor_table, superpose

__all__ = [
    "SamplingConfig",
    "sample_array",
    "sample_table",
    "sample_times",
    "phasor_table",
    "superpose",
]

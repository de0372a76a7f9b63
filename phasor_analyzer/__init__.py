"""Phasor Analyzer -- generic complex and sinusoid value types for signal analysis.

This package provides:
- Numeric capability bundles (ArithmeticOps, SignedArithmeticOps, Trig, Pow,
  FractionOps) resolved per scalar type, so the value types work with Python
  floats, numpy floating scalars and, for complex arithmetic, integers
- A complex number type with rectangular and polar forms
- A real sinusoid type with sampling and phasor-domain addition
- numpy/pandas helpers to sample, tabulate and superpose sinusoids

Key principles:
- Value types are immutable; every operation returns a new value
- Scalar edge cases (zero division, zero frequency, atan2(0, 0)) are not
  validated; they behave the way the scalar's arithmetic does
- The only domain error is DifferentFrequencyError from Sinusoid.add

Main subpackages:
- numeric: capability bundles and the scalar provider registry
- models: Complex, Sinusoid and their errors
- analysis: vectorised sampling, sample tables, superposition, plotting
"""

import logging

from .models import AddSinusoidError, Complex, DifferentFrequencyError, Sinusoid
from .numeric import CapabilityError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AddSinusoidError",
    "CapabilityError",
    "Complex",
    "DifferentFrequencyError",
    "Sinusoid",
]

"""Real sinusoid value type and phasor-domain addition.

:class:`Sinusoid` samples ``A*cos(2*pi*f*t + phase)`` and adds two sinusoids of
equal frequency by summing their phasors. Capability lookup uses the combined
scalar type of every field involved in an operation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterator, List, Tuple, TypeVar

from phasor_analyzer.models.complex import Complex
from phasor_analyzer.numeric.capabilities import ArithmeticOps, FractionOps, Pow, Trig, require_all

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AddSinusoidError(ValueError):
    """Base class for failures of :meth:`Sinusoid.add`."""


class DifferentFrequencyError(AddSinusoidError):
    """The two operands of :meth:`Sinusoid.add` do not share the same frequency."""

    def __init__(self, left: Any, right: Any) -> None:
        super().__init__(f"Cannot add sinusoids of different frequency: {left!r} != {right!r}")
        self.left = left
        self.right = right


@dataclass(frozen=True)
class Sinusoid(Generic[T]):
    """Real sinusoid ``amplitude * cos(2*pi*frequency*t + phase)``.

    Generic over a floating scalar providing ``Trig``, ``Pow``, ``FractionOps`` and
    ``ArithmeticOps``. Construction is total; the capability check happens when an
    operation needs it.

    Notes
    -----
    ``frequency == 0`` is not guarded. :meth:`period` and :meth:`sample` then
    propagate the scalar's division-by-zero behaviour.
    """

    amplitude: T
    frequency: T
    phase: T

    @classmethod
    def new(cls, amplitude: T, frequency: T, phase: T) -> "Sinusoid[T]":
        return cls(amplitude, frequency, phase)

    @classmethod
    def from_phasor(cls, phasor: Complex[T], frequency: T) -> "Sinusoid[T]":
        """Re-attach a frequency to a phasor (inverse of :meth:`to_phasor`)."""
        amplitude, phase = phasor.to_polar()
        return cls(amplitude, frequency, phase)

    def _ops(self, *bundles, extra: Tuple[Any, ...] = ()):
        return require_all((self.amplitude, self.frequency, self.phase) + tuple(extra), *bundles)

    def period(self) -> T:
        return self._ops(FractionOps).recip(self.frequency)

    def radial_frequency(self) -> T:
        ops = self._ops(FractionOps, ArithmeticOps)
        return ops.multiply(ops.two_pi(), self.frequency)

    def sample(self, t: T) -> T:
        """Value at time ``t``.

        ``t`` is wrapped modulo the period before the cosine is evaluated. The
        result is unchanged mathematically but the trig argument stays bounded.
        """
        ops = self._ops(FractionOps, ArithmeticOps, Trig, extra=(t,))
        omega = ops.multiply(ops.two_pi(), self.frequency)
        arg = ops.add(ops.multiply(omega, ops.remainder(t, ops.recip(self.frequency))), self.phase)
        return ops.multiply(ops.cos(arg), self.amplitude)

    def iter_samples(self, start: T, end: T, sample_rate: T) -> Iterator[T]:
        """Lazily sample at ``t = start + i/sample_rate`` while ``t < end``.

        Inclusive of ``start``, exclusive of ``end``. Inputs are not validated:
        ``end <= start`` yields nothing and ``sample_rate <= 0`` with ``end > start``
        never terminates.
        """
        ops = self._ops(ArithmeticOps, extra=(start, end, sample_rate))
        i = 0
        while True:
            t = ops.add(start, ops.divide(ops.from_int(i), sample_rate))
            if t >= end:
                return
            yield self.sample(t)
            i += 1

    def sample_range(self, start: T, end: T, sample_rate: T) -> List[T]:
        """Eager form of :meth:`iter_samples`; ``ceil((end-start)*sample_rate)`` values."""
        return list(self.iter_samples(start, end, sample_rate))

    def to_phasor(self) -> Complex[T]:
        """``amplitude * exp(i*phase)``. The frequency is dropped."""
        ops = self._ops(Trig, ArithmeticOps)
        return Complex(ops.multiply(self.amplitude, ops.cos(self.phase)), ops.multiply(self.amplitude, ops.sin(self.phase)))

    def add(self, other: "Sinusoid[T]") -> "Sinusoid[T]":
        """Sum of two sinusoids of the same frequency, computed in the phasor domain.

        ``A1 cos(wt + p1) + A2 cos(wt + p2) = Re[(A1 e^{ip1} + A2 e^{ip2}) e^{iwt}]``,
        so the sum is the sinusoid whose phasor is the sum of both phasors.

        Frequencies are compared with exact ``==``. Two frequencies that are equal
        mathematically but were computed along different floating-point paths can
        differ in the last bit and will be rejected.

        Raises
        ------
        DifferentFrequencyError
            If ``self.frequency != other.frequency``.
        """
        if self.frequency != other.frequency:
            logger.debug("Rejecting sinusoid addition: frequency %r != %r", self.frequency, other.frequency)
            raise DifferentFrequencyError(self.frequency, other.frequency)

        self._ops(Trig, Pow, ArithmeticOps, extra=(other.amplitude, other.frequency, other.phase))
        total = self.to_phasor() + other.to_phasor()
        return Sinusoid.from_phasor(total, self.frequency)

    def __add__(self, other: "Sinusoid[T]") -> "Sinusoid[T]":
        if not isinstance(other, Sinusoid):
            return NotImplemented
        return self.add(other)

"""Generic complex number value type.

:class:`Complex` holds a ``(real, imag)`` pair of any registered scalar type and
resolves the capability provider from the combined type of the components it
touches, so ``Complex(0, 2.5)`` behaves as a float complex throughout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Tuple, TypeVar

import numpy as np

from phasor_analyzer.numeric.capabilities import (
    ArithmeticOps,
    Pow,
    SignedArithmeticOps,
    Trig,
    require_all,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Complex(Generic[T]):
    """Complex number ``real + i*imag`` generic over the scalar type ``T``.

    Every operation returns a new value. Each one asks the scalar provider only for
    the capability bundle it needs, so integer components support ``+``, ``-``,
    ``*`` and (signed only) ``/``, ``-z`` and :meth:`conjugate`, while
    :meth:`magnitude` and :meth:`angle` require a floating scalar.

    Notes
    -----
    - Nothing is validated: NaN, overflow and division by ``Complex(0, 0)`` behave
      the way the scalar's own arithmetic does (``ZeroDivisionError`` for Python
      numbers, ``inf``/``nan`` with a ``RuntimeWarning`` for numpy floats).
    - Python ``/`` is true division, so dividing integer complexes yields float
      components.
    """

    real: T
    imag: T

    @classmethod
    def new(cls, real: T, imag: T) -> "Complex[T]":
        return cls(real, imag)

    @classmethod
    def from_polar(cls, r: T, theta: T) -> "Complex[T]":
        """Build ``(r*cos(theta), r*sin(theta))``.

        Inverse of :meth:`to_polar` up to the scalar's trigonometric rounding.
        """
        ops = require_all((r, theta), ArithmeticOps, Trig)
        return cls(ops.multiply(r, ops.cos(theta)), ops.multiply(r, ops.sin(theta)))

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex[float]":
        z = complex(z)
        return cls(z.real, z.imag)

    def _ops(self, *bundles, other: "Complex | None" = None):
        values = (self.real, self.imag) if other is None else (self.real, self.imag, other.real, other.imag)
        return require_all(values, *bundles)

    # ------------------------------------------------------------------
    # Polar form
    # ------------------------------------------------------------------

    def conjugate(self) -> "Complex[T]":
        ops = self._ops(SignedArithmeticOps)
        return Complex(self.real, ops.negate(self.imag))

    def magnitude(self) -> T:
        ops = self._ops(ArithmeticOps, Pow)
        return ops.sqrt(ops.add(ops.powi(self.real, 2), ops.powi(self.imag, 2)))

    def angle(self) -> T:
        """Argument in ``(-pi, pi]`` via ``atan2(imag, real)``.

        ``Complex(0, 0).angle()`` is whatever the scalar's ``atan2(0, 0)`` returns.
        """
        ops = self._ops(Trig)
        return ops.atan2(self.imag, self.real)

    def to_polar(self) -> Tuple[T, T]:
        return self.magnitude(), self.angle()

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: "Complex[T]") -> "Complex[T]":
        if not isinstance(other, Complex):
            return NotImplemented
        ops = self._ops(ArithmeticOps, other=other)
        return Complex(ops.add(self.real, other.real), ops.add(self.imag, other.imag))

    def __sub__(self, other: "Complex[T]") -> "Complex[T]":
        if not isinstance(other, Complex):
            return NotImplemented
        ops = self._ops(ArithmeticOps, other=other)
        return Complex(ops.subtract(self.real, other.real), ops.subtract(self.imag, other.imag))

    def __mul__(self, other: "Complex[T]") -> "Complex[T]":
        if not isinstance(other, Complex):
            return NotImplemented
        ops = self._ops(ArithmeticOps, other=other)
        a, b = self.real, self.imag
        c, d = other.real, other.imag
        return Complex(
            ops.subtract(ops.multiply(a, c), ops.multiply(b, d)),
            ops.add(ops.multiply(a, d), ops.multiply(b, c)),
        )

    def __truediv__(self, other: "Complex[T]") -> "Complex[T]":
        if not isinstance(other, Complex):
            return NotImplemented
        ops = self._ops(SignedArithmeticOps, other=other)
        conj = other.conjugate()
        num = self * conj
        denom = (other * conj).real  # |other|^2, unchecked
        return Complex(ops.divide(num.real, denom), ops.divide(num.imag, denom))

    def __neg__(self) -> "Complex[T]":
        ops = self._ops(SignedArithmeticOps)
        return Complex(ops.negate(self.real), ops.negate(self.imag))

    # ------------------------------------------------------------------
    # Interop
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        yield self.real
        yield self.imag

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imag))

    def is_close(self, other: "Complex[T]", *, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        """Componentwise :func:`numpy.isclose` on the native components.

        ``|a - b| <= abs_tol + rel_tol * |b|`` with ``b`` taken from ``other``.
        """
        return bool(
            np.isclose(self.real, other.real, rtol=rel_tol, atol=abs_tol)
            and np.isclose(self.imag, other.imag, rtol=rel_tol, atol=abs_tol)
        )

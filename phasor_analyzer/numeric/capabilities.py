"""Numeric capability bundles for the generic value types.

A *capability bundle* is the minimal set of operations a scalar type must supply
for a given operation on :class:`~phasor_analyzer.models.complex.Complex` or
:class:`~phasor_analyzer.models.sinusoid.Sinusoid`. Python scalars do not carry
``sin``/``sqrt``/``recip`` methods, so each bundle is expressed as a protocol for
a *provider* object registered per scalar type. The provider forwards to the
scalar's native operations (operators, :mod:`math`, or numpy ufuncs).

Bundles
-------
ArithmeticOps
    add, subtract, multiply, divide, remainder (and ``from_int`` for loop indices).
SignedArithmeticOps
    ArithmeticOps + negate.
Trig
    sin, cos, tan, asin, acos, atan2.
Pow
    powi, powf, sqrt.
FractionOps
    recip, pi, two_pi, half_pi, zero.

Shipped providers
-----------------
- ``float``: every bundle, via :mod:`math`.
- numpy floating scalars: every bundle, via ufuncs; results keep the dtype.
- ``int`` and numpy signed integers: ArithmeticOps, SignedArithmeticOps.
- numpy unsigned integers: ArithmeticOps only.

Asking for a bundle a provider does not implement raises :class:`CapabilityError`.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Dict, Iterable, Protocol, Type, runtime_checkable

import numpy as np


class CapabilityError(TypeError):
    """Raised when a scalar type lacks a capability bundle required by an operation."""


# =====================================================================
#  Bundles
# =====================================================================

@runtime_checkable
class ArithmeticOps(Protocol):
    def add(self, a: Any, b: Any) -> Any: ...

    def subtract(self, a: Any, b: Any) -> Any: ...

    def multiply(self, a: Any, b: Any) -> Any: ...

    def divide(self, a: Any, b: Any) -> Any: ...

    def remainder(self, a: Any, b: Any) -> Any: ...

    def from_int(self, i: int) -> Any: ...


@runtime_checkable
class SignedArithmeticOps(ArithmeticOps, Protocol):
    def negate(self, a: Any) -> Any: ...


@runtime_checkable
class Trig(Protocol):
    def sin(self, x: Any) -> Any: ...

    def cos(self, x: Any) -> Any: ...

    def tan(self, x: Any) -> Any: ...

    def asin(self, x: Any) -> Any: ...

    def acos(self, x: Any) -> Any: ...

    def atan2(self, y: Any, x: Any) -> Any: ...


@runtime_checkable
class Pow(Protocol):
    def powi(self, x: Any, n: int) -> Any: ...

    def powf(self, x: Any, y: Any) -> Any: ...

    def sqrt(self, x: Any) -> Any: ...


@runtime_checkable
class FractionOps(Protocol):
    def recip(self, x: Any) -> Any: ...

    def pi(self) -> Any: ...

    def two_pi(self) -> Any: ...

    def half_pi(self) -> Any: ...

    def zero(self) -> Any: ...


# =====================================================================
#  Providers
# =====================================================================

class OperatorArithmetic:
    """ArithmeticOps through the scalar's own operators.

    Used as-is for unsigned integers, which have no meaningful negation.
    """

    def __init__(self, scalar_type: type) -> None:
        self.scalar_type = scalar_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.scalar_type.__name__})"

    add = staticmethod(operator.add)
    subtract = staticmethod(operator.sub)
    multiply = staticmethod(operator.mul)
    divide = staticmethod(operator.truediv)
    remainder = staticmethod(operator.mod)

    def from_int(self, i: int) -> Any:
        return self.scalar_type(i)


class SignedOperatorArithmetic(OperatorArithmetic):
    """SignedArithmeticOps: operator arithmetic plus unary negation."""

    negate = staticmethod(operator.neg)


class MathFloatScalar(SignedOperatorArithmetic):
    """Every bundle for Python ``float`` through :mod:`math`."""

    def __init__(self) -> None:
        super().__init__(float)

    sin = staticmethod(math.sin)
    cos = staticmethod(math.cos)
    tan = staticmethod(math.tan)
    asin = staticmethod(math.asin)
    acos = staticmethod(math.acos)
    atan2 = staticmethod(math.atan2)

    def powi(self, x: float, n: int) -> float:
        return x ** int(n)

    powf = staticmethod(math.pow)
    sqrt = staticmethod(math.sqrt)

    def recip(self, x: float) -> float:
        return 1.0 / x

    def pi(self) -> float:
        return math.pi

    def two_pi(self) -> float:
        return math.tau

    def half_pi(self) -> float:
        return math.pi / 2.0

    def zero(self) -> float:
        return 0.0


class NumpyFloatScalar(SignedOperatorArithmetic):
    """Every bundle for a numpy floating scalar type through ufuncs.

    Results are cast back to ``scalar_type`` so a ``float32`` computation stays in
    ``float32``. Division by zero follows numpy (``inf``/``nan`` plus a
    ``RuntimeWarning``), it is not trapped here.
    """

    def _cast(self, x: Any) -> Any:
        return self.scalar_type(x)

    def sin(self, x):
        return self._cast(np.sin(x))

    def cos(self, x):
        return self._cast(np.cos(x))

    def tan(self, x):
        return self._cast(np.tan(x))

    def asin(self, x):
        return self._cast(np.arcsin(x))

    def acos(self, x):
        return self._cast(np.arccos(x))

    def atan2(self, y, x):
        return self._cast(np.arctan2(y, x))

    def powi(self, x, n: int):
        return self._cast(np.power(self._cast(x), self._cast(int(n))))

    def powf(self, x, y):
        return self._cast(np.power(x, y))

    def sqrt(self, x):
        return self._cast(np.sqrt(x))

    def recip(self, x):
        return self._cast(np.reciprocal(self._cast(x)))

    def pi(self):
        return self._cast(np.pi)

    def two_pi(self):
        return self._cast(2.0 * np.pi)

    def half_pi(self):
        return self._cast(np.pi / 2.0)

    def zero(self):
        return self._cast(0)


# =====================================================================
#  Registry
# =====================================================================

_REGISTRY: Dict[type, Any] = {}


def register_scalar(scalar_type: type, provider: Any) -> None:
    """Register (or replace) the capability provider for ``scalar_type``.

    Lookup walks the type's MRO, so registering a base class covers its subclasses
    unless a subclass has its own entry.
    """
    if not isinstance(provider, ArithmeticOps):
        raise CapabilityError(f"Provider for {scalar_type.__name__} must implement at least ArithmeticOps")
    _REGISTRY[scalar_type] = provider


def provider_for(value: Any) -> Any:
    """Return the provider registered for ``value`` (a scalar or a scalar type)."""
    tp = value if isinstance(value, type) else type(value)
    for base in tp.__mro__:
        provider = _REGISTRY.get(base)
        if provider is not None:
            return provider
    raise CapabilityError(f"No numeric capabilities registered for scalar type {tp.__name__}")


def require(value: Any, *bundles: Type[Any]) -> Any:
    """Return the provider for ``value`` after checking it implements every bundle.

    Raises
    ------
    CapabilityError
        If the scalar type is unregistered or a bundle is missing.
    """
    provider = provider_for(value)
    for bundle in bundles:
        if not isinstance(provider, bundle):
            tp = value if isinstance(value, type) else type(value)
            raise CapabilityError(f"Scalar type {tp.__name__} does not provide {bundle.__name__}")
    return provider


def combined_scalar_type(values: Iterable[Any]) -> type:
    """Scalar type that ``values`` promote to when combined.

    A single type is returned as-is (so registered non-numpy types such as
    ``Fraction`` keep their provider). Python ``int``/``float`` mixes promote to
    ``float``. Anything involving numpy scalars follows :func:`numpy.result_type`,
    where Python numbers are weak, e.g. ``float32`` with ``2.0`` stays ``float32``.
    """
    values = tuple(values)
    if not values:
        raise CapabilityError("No scalar values given")

    types = {type(v) for v in values}
    if len(types) == 1:
        return types.pop()
    if all(tp in (bool, int, float) for tp in types):
        return float if float in types else int
    try:
        return np.result_type(*values).type
    except (TypeError, ValueError) as exc:
        names = ", ".join(sorted(tp.__name__ for tp in types))
        raise CapabilityError(f"Scalar types {names} have no common numeric type") from exc


def require_all(values: Iterable[Any], *bundles: Type[Any]) -> Any:
    """:func:`require` on the combined scalar type of ``values``.

    Operations over several fields use this so capability gating does not depend
    on which field happens to be read first.
    """
    return require(combined_scalar_type(values), *bundles)


def supports(value: Any, bundle: Type[Any]) -> bool:
    try:
        require(value, bundle)
    except CapabilityError:
        return False
    return True


def _register_defaults() -> None:
    register_scalar(float, MathFloatScalar())
    register_scalar(int, SignedOperatorArithmetic(int))

    for tp in (np.float16, np.float32, np.float64, np.longdouble):
        register_scalar(tp, NumpyFloatScalar(tp))
    for tp in (np.int8, np.int16, np.int32, np.int64):
        register_scalar(tp, SignedOperatorArithmetic(tp))
    for tp in (np.uint8, np.uint16, np.uint32, np.uint64):
        register_scalar(tp, OperatorArithmetic(tp))


_register_defaults()

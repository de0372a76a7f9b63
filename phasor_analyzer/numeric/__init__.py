"""Scalar capability bundles and the per-type provider registry."""

from .capabilities import (
    ArithmeticOps,
    CapabilityError,
    FractionOps,
    Pow,
    SignedArithmeticOps,
    Trig,
    provider_for,
    register_scalar,
    require,
    require_all,
    supports,
)

__all__ = [
    "ArithmeticOps",
    "CapabilityError",
    "FractionOps",
    "Pow",
    "SignedArithmeticOps",
    "Trig",
    "provider_for",
    "register_scalar",
    "require",
    "require_all",
    "supports",
]

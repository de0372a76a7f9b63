from .complex import Complex
from .sinusoid import AddSinusoidError, DifferentFrequencyError, Sinusoid

__all__ = [
    "Complex",
    "Sinusoid",
    "AddSinusoidError",
    "DifferentFrequencyError",
]

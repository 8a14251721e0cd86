"""Public package surface for the tails seedable random generator."""

from .draws import DrawConfig, run_draws
from .prng import Sfc32, create_prng
from .seeding import Xmur3

__all__ = [
    "DrawConfig",
    "Sfc32",
    "Xmur3",
    "create_prng",
    "run_draws",
]

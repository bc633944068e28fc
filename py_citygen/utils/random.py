"""
Random number generation utilities.

Layout stages never call Python's ``random`` or NumPy's global generator.
They receive a :class:`RandomSource` explicitly, normally an
:class:`~py_citygen.core.alea_prng.AleaPRNG` built by :func:`create_prng`,
so the same seed always produces the same city.
"""

import uuid
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Draws the layout stages depend on."""

    def random(self) -> float:
        ...

    def rand_int(self, low: int, high: int) -> int:
        ...

    def rand_float_spread(self, spread: float) -> float:
        ...


def new_seed() -> str:
    """Short random seed string for runs that did not ask for one."""
    return str(uuid.uuid4())[:8]


def create_prng(seed: Optional[str] = None):
    """
    Build a fresh Alea PRNG.

    Args:
        seed: Seed string to use. A random one is chosen when omitted.

    Returns:
        AleaPRNG instance
    """
    from ..core.alea_prng import AleaPRNG

    return AleaPRNG(seed if seed is not None else new_seed())

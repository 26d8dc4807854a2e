"""System random source using ``os.urandom()``.

Cryptographically secure and always available on all platforms, but cannot
be seeded, so draws are never reproducible.
"""

from __future__ import annotations

import os

from weighted_select.sources.base import RandomSource
from weighted_select.sources.registry import register_random_source

# 53 random bits fill the mantissa of a float64 exactly.
_FLOAT_BITS = 53
_FLOAT_SCALE = 1.0 / (1 << _FLOAT_BITS)


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``os.urandom()`` wrapper. Always available and cryptographically secure."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def random(self) -> float:
        """Return a float in ``[0, 1)`` built from 7 bytes of OS entropy.

        The top 53 of the 56 bits are kept, giving every representable
        multiple of ``2**-53`` equal probability.
        """
        bits = int.from_bytes(os.urandom(7), "big") >> (56 - _FLOAT_BITS)
        return bits * _FLOAT_SCALE

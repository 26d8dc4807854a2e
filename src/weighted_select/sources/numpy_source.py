"""PCG64-backed random source using ``numpy.random.Generator``.

This is the default source. It is fast and reproducible when seeded, but
not cryptographically secure.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from weighted_select.sources.base import RandomSource
from weighted_select.sources.registry import register_random_source


@register_random_source("numpy")
class NumpyRandomSource(RandomSource):
    """Wrapper around ``numpy.random.default_rng``.

    Args:
        seed: Optional int or ``SeedSequence``. ``None`` seeds from OS entropy.
    """

    seedable = True

    def __init__(self, seed: int | np.random.SeedSequence | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'numpy'``."""
        return "numpy"

    @property
    def generator(self) -> np.random.Generator:
        """The wrapped generator."""
        return self._rng

    def random(self) -> float:
        """Return one float from ``Generator.random()``, in ``[0, 1)``."""
        return float(self._rng.random())

    def health_check(self) -> dict[str, Any]:
        """Return health status including the bit generator in use."""
        return {
            "source": self.name,
            "healthy": True,
            "bit_generator": type(self._rng.bit_generator).__name__,
            "seeded": self._seed is not None,
        }

"""Abstract base class for all random sources.

Every uniform random source used by the selector implements this interface.
Subclasses must implement ``name`` and ``random()``; the ABC derives
``uniform()`` from ``random()`` and provides concrete ``close()`` and
``health_check()`` methods.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any


class RandomSource(ABC):
    """Abstract base for uniform random sources.

    The selector only ever calls :meth:`uniform`, so any object with a
    compatible ``uniform(low, high)`` can be used in place of a subclass.
    """

    seedable: bool = False
    """Whether the constructor accepts a ``seed`` keyword."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'numpy'``, ``'system'``)."""

    @abstractmethod
    def random(self) -> float:
        """Return one float uniformly drawn from ``[0, 1)``."""

    def uniform(self, low: float, high: float) -> float:
        """Return one float uniformly drawn from ``[low, high)``.

        Uses plain float arithmetic, so non-finite bounds propagate into the
        result instead of raising. When rounding lands exactly on a finite
        *high*, the result is moved to the next float below it.

        Args:
            low: Inclusive lower bound.
            high: Exclusive upper bound.

        Returns:
            A float in ``[low, high)`` for finite bounds with ``low < high``.
        """
        value = low + (high - low) * self.random()
        if value >= high and math.isfinite(high) and low < high:
            value = math.nextafter(high, low)
        return value

    def close(self) -> None:
        """Release resources. No-op unless a subclass holds any."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": True}

"""Scripted random source for deterministic tests.

Replays a fixed sequence of draws so that a selection can be checked
against a hand-computed cumulative scan.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from weighted_select.exceptions import RandomSourceExhaustedError
from weighted_select.sources.base import RandomSource

if TYPE_CHECKING:
    from collections.abc import Iterable


class ScriptedRandomSource(RandomSource):
    """Random source that returns pre-recorded draws in order.

    Draws are returned verbatim from both :meth:`uniform` and
    :meth:`random`; the requested bounds are recorded but never applied.
    This lets a test state the exact absolute value the selector compares
    against its cumulative weights.

    Args:
        draws: Values to replay, in order.
    """

    def __init__(self, draws: Iterable[float]) -> None:
        self._draws: deque[float] = deque(draws)
        self._requests: list[tuple[float, float]] = []

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    @property
    def remaining(self) -> int:
        """Number of draws not yet consumed."""
        return len(self._draws)

    @property
    def requests(self) -> list[tuple[float, float]]:
        """``(low, high)`` bounds of every :meth:`uniform` call so far."""
        return list(self._requests)

    def random(self) -> float:
        """Return the next scripted draw.

        Raises:
            RandomSourceExhaustedError: If every draw has been consumed.
        """
        if not self._draws:
            raise RandomSourceExhaustedError("Scripted random source has no draws left")
        return self._draws.popleft()

    def uniform(self, low: float, high: float) -> float:
        """Record the bounds and return the next scripted draw unscaled."""
        self._requests.append((low, high))
        return self.random()

    def health_check(self) -> dict[str, Any]:
        """Report unhealthy once the script is exhausted."""
        return {"source": self.name, "healthy": bool(self._draws), "remaining": len(self._draws)}

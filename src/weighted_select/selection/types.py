"""Data types for the selection subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Choice(Generic[T]):
    """One weighted entry held by a WeightedSelector.

    Attributes:
        weight: Relative likelihood as supplied by the caller. Its magnitude
            counts towards the selector's total mass; its sign is used as-is
            during the cumulative scan.
        value: Caller-owned payload returned when this choice is selected.
    """

    weight: float
    value: T

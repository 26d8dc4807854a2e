"""Weighted selector with an optional "no selection" outcome.

Choices are accumulated with a builder-style API, then sampled by
cumulative-weight inversion: one uniform draw ``x`` in ``[0, total_weight)``
is compared against the running sum of choice weights, and the first choice
whose cumulative sum exceeds ``x`` wins.

Example::

    selector = (
        WeightedSelector()
        .add_choice(1.0, "A")
        .add_choice(1.5, "B")
        .add_none_mass(2.5)
    )
    value = selector.select()
    # value is None half of the time, and "B" is 50% more likely than "A".

If you have already normalized your weights, ``set_total_up_to`` sets the
total mass in one call; the remainder becomes no-selection mass::

    selector = WeightedSelector().add_choice(0.1, "A").add_choice(0.2, "B").set_total_up_to(1.0)

Weight accounting:
    ``total_weight`` grows by ``abs(weight)`` on every add, while the scan
    accumulates the raw signed weight. A negative weight therefore inflates
    the total but pulls the running sum down, which can make that choice and
    later ones unreachable. NaN and infinite weights are not rejected; they
    flow through standard float comparison, where NaN never matches.
"""

from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

from weighted_select.selection.types import Choice
from weighted_select.sources.default import get_default_source

T = TypeVar("T")


class SupportsUniform(Protocol):
    """Anything that can draw a uniform float from ``[low, high)``.

    ``RandomSource`` subclasses, ``random.Random`` and
    ``numpy.random.Generator`` all satisfy this protocol.
    """

    def uniform(self, low: float, high: float) -> float: ...


class WeightedSelector(Generic[T]):
    """Randomly select a value from weighted choices, or nothing.

    The ``add_*`` methods mutate the selector in place and return it, so
    calls can be chained. Selection never mutates, so a selector that is no
    longer being built can be shared between threads freely. Concurrent
    adds and selects need external locking.
    """

    __slots__ = ("_choices", "_total_weight")

    def __init__(self) -> None:
        self._choices: list[Choice[T]] = []
        self._total_weight: float = 0.0

    @classmethod
    def default(cls) -> WeightedSelector[Any]:
        """Return an empty selector (no choices, zero total weight)."""
        return cls()

    @property
    def choices(self) -> tuple[Choice[T], ...]:
        """Choices in insertion order."""
        return tuple(self._choices)

    @property
    def total_weight(self) -> float:
        """Total selectable mass, including any no-selection mass."""
        return self._total_weight

    # --- Building ---

    def add_choice(self, weight: float, value: T) -> WeightedSelector[T]:
        """Append a choice and add ``abs(weight)`` to the total.

        Args:
            weight: Relative likelihood. Not validated.
            value: Payload returned when this choice is drawn.

        Returns:
            This selector.
        """
        self._choices.append(Choice(weight, value))
        self._total_weight += abs(weight)
        return self

    def add_none_mass(self, weight: float) -> WeightedSelector[T]:
        """Reserve ``abs(weight)`` of mass for the no-selection outcome.

        Args:
            weight: Mass to add to the total without adding a choice.

        Returns:
            This selector.
        """
        self._total_weight += abs(weight)
        return self

    def set_total_up_to(self, total_weight: float) -> WeightedSelector[T]:
        """Override the total mass, so choices are completed with None.

        Discards the accumulated total. Useful when choice weights are
        already normalized, e.g. summing to at most 1.0. An override below
        the sum of choice weights is accepted; trailing choices then become
        partly or wholly unreachable.

        Args:
            total_weight: New total; its absolute value is used.

        Returns:
            This selector.
        """
        self._total_weight = abs(total_weight)
        return self

    with_choice = add_choice
    add_none = add_none_mass
    with_none = add_none_mass
    with_none_up_to = set_total_up_to

    # --- Sampling ---

    def select(self) -> T | None:
        """Select a random value using this thread's default source.

        Returns:
            The selected payload, or ``None`` for no selection.
        """
        return self.select_with(get_default_source())

    def select_with(self, source: SupportsUniform) -> T | None:
        """Select a random value using the source of your choice.

        Args:
            source: Object drawing uniform floats from ``[low, high)``.

        Returns:
            The selected payload, or ``None`` for no selection.
        """
        index = self.select_index_with(source)
        if index is None:
            return None
        return self._choices[index].value

    select_with_rng = select_with

    def select_index(self) -> int | None:
        """Like :meth:`select` but return the position of the chosen choice."""
        return self.select_index_with(get_default_source())

    def select_index_with(self, source: SupportsUniform) -> int | None:
        """Draw once from *source* and locate the matching choice.

        A zero total returns ``None`` without consuming a draw. Otherwise
        one value ``x`` is drawn from ``[0, total_weight)`` and the choices
        are scanned in insertion order, accumulating raw weights. The first
        choice with ``x < cumulative`` wins; equality moves on to the next.

        Args:
            source: Object drawing uniform floats from ``[low, high)``.

        Returns:
            Index into :attr:`choices`, or ``None`` for no selection.
        """
        if self._total_weight == 0.0:
            return None
        x = source.uniform(0.0, self._total_weight)
        cumulative = 0.0
        for index, choice in enumerate(self._choices):
            cumulative += choice.weight
            if x < cumulative:
                return index
        return None

    # --- Value semantics ---

    def copy(self) -> WeightedSelector[T]:
        """Return an independent selector with the same choices and total.

        Payloads are shared, not copied.
        """
        clone: WeightedSelector[T] = type(self)()
        clone._choices = list(self._choices)
        clone._total_weight = self._total_weight
        return clone

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._choices)

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedSelector):
            return NotImplemented
        return self._choices == other._choices and self._total_weight == other._total_weight

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(choices={len(self._choices)}, "
            f"total_weight={self._total_weight!r})"
        )


# Alias.
RandomSelector = WeightedSelector

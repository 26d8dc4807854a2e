"""Sampling session: a selector bound to a random source and a logger.

Orchestrates repeated draws from one WeightedSelector::

    selector -> source draw -> cumulative scan -> SelectionRecord -> logger

The selector stays a plain value; the sampler owns the source it draws
from, so a seeded config gives a reproducible sequence of selections
independent of the process-wide default source.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import numpy as np

from weighted_select.config import WeightedSelectConfig, config_hash, resolve_config
from weighted_select.logging.logger import SelectionLogger
from weighted_select.logging.types import SelectionRecord
from weighted_select.sources.registry import RandomSourceRegistry

if TYPE_CHECKING:
    from weighted_select.selection.selector import WeightedSelector
    from weighted_select.sources.base import RandomSource

logger = logging.getLogger("weighted_select")

T = TypeVar("T")


class SelectionSampler(Generic[T]):
    """Draw repeatedly from a selector with diagnostics.

    Args:
        selector: The selector to draw from. Not copied; choices added to it
            later are visible to subsequent draws.
        config: Configuration. ``None`` loads it from the environment.
        source: Random source to use. ``None`` builds
            ``config.default_source`` from the registry, seeded with
            ``config.seed``.
    """

    def __init__(
        self,
        selector: WeightedSelector[T],
        config: WeightedSelectConfig | None = None,
        source: RandomSource | None = None,
    ) -> None:
        self._selector = selector
        self._config = config if config is not None else WeightedSelectConfig()
        self._config_hash = config_hash(self._config)
        self._owns_source = source is None
        if source is None:
            source = RandomSourceRegistry.build(self._config.default_source, seed=self._config.seed)
        self._source = source
        self._logger = SelectionLogger(self._config)
        logger.debug(
            "SelectionSampler ready: source=%s choices=%d total_weight=%r",
            self._source.name,
            len(self._selector),
            self._selector.total_weight,
        )

    @property
    def selector(self) -> WeightedSelector[T]:
        """The selector being sampled."""
        return self._selector

    @property
    def source(self) -> RandomSource:
        """The random source draws are taken from."""
        return self._source

    @property
    def logger(self) -> SelectionLogger:
        """Diagnostic logger holding records when ``diagnostic_mode`` is on."""
        return self._logger

    def draw(self, overrides: dict[str, Any] | None = None) -> T | None:
        """Select once and log the outcome.

        Args:
            overrides: Per-call config overrides (``log_level``,
                ``diagnostic_mode``).

        Returns:
            The selected payload, or ``None`` for no selection.

        Raises:
            ConfigValidationError: If *overrides* are invalid.
        """
        index = self._draw_index(self._config_for(overrides))
        if index is None:
            return None
        return self._selector.choices[index].value

    def draw_many(self, n: int, overrides: dict[str, Any] | None = None) -> list[T | None]:
        """Select *n* times.

        Args:
            n: Number of draws. Zero returns an empty list.
            overrides: Per-call config overrides applied to every draw.

        Returns:
            Selected payloads in draw order, ``None`` for no selection.

        Raises:
            ValueError: If *n* is negative.
            ConfigValidationError: If *overrides* are invalid.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        call_config = self._config_for(overrides)
        choices = self._selector.choices
        results: list[T | None] = []
        for _ in range(n):
            index = self._draw_index(call_config)
            results.append(None if index is None else choices[index].value)
        return results

    def frequencies(self, n: int) -> dict[int | None, float]:
        """Estimate selection frequencies empirically.

        Each draw is logged and, in diagnostic mode, recorded like a
        ``draw()`` call.

        Args:
            n: Number of draws (must be positive).

        Returns:
            Mapping of choice index to observed frequency, with key ``None``
            for no selection. Every index and ``None`` are present, even
            when never drawn.

        Raises:
            ValueError: If *n* is not positive.
        """
        if n <= 0:
            raise ValueError(f"n must be positive, got {n}")
        num_choices = len(self._selector)
        # No selection is counted in the slot after the last choice.
        indices = np.empty(n, dtype=np.int64)
        for i in range(n):
            index = self._draw_index(None)
            indices[i] = num_choices if index is None else index
        counts = np.bincount(indices, minlength=num_choices + 1) / n
        result: dict[int | None, float] = {i: float(counts[i]) for i in range(num_choices)}
        result[None] = float(counts[num_choices])
        return result

    def close(self) -> None:
        """Close the source if this sampler built it."""
        if self._owns_source:
            self._source.close()

    def _config_for(self, overrides: dict[str, Any] | None) -> WeightedSelectConfig | None:
        """Resolve per-call overrides, or None when there are none."""
        if not overrides:
            return None
        return resolve_config(self._config, overrides)

    def _draw_index(self, call_config: WeightedSelectConfig | None) -> int | None:
        t_start = time.perf_counter()
        index = self._selector.select_index_with(self._source)
        draw_ms = (time.perf_counter() - t_start) * 1000.0
        self._logger.log_selection(
            SelectionRecord(
                timestamp_ns=time.time_ns(),
                draw_ms=draw_ms,
                source_name=self._source.name,
                total_weight=self._selector.total_weight,
                num_choices=len(self._selector),
                choice_index=index,
                config_hash=self._config_hash,
            ),
            call_config,
        )
        return index

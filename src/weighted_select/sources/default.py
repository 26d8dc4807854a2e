"""Process-wide default random source.

``WeightedSelector.select()`` draws from the source returned by
:func:`get_default_source`. Each thread lazily builds its own instance from
the active :class:`~weighted_select.config.WeightedSelectConfig`, so the
default path needs no locking by callers.

When the config carries a seed, every thread's source is spawned from one
``numpy.random.SeedSequence``: streams are independent across threads and
reproducible for a given thread creation order.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

import numpy as np

from weighted_select.config import WeightedSelectConfig
from weighted_select.sources.registry import RandomSourceRegistry

# Built-in sources register themselves on import.
from weighted_select.sources import numpy_source as _numpy_source  # noqa: F401
from weighted_select.sources import system as _system  # noqa: F401

if TYPE_CHECKING:
    from weighted_select.sources.base import RandomSource

logger = logging.getLogger("weighted_select")

_lock = threading.Lock()
_local = threading.local()

# Guarded by _lock.
_config: WeightedSelectConfig | None = None
_seed_sequence: np.random.SeedSequence | None = None
_generation: int = 0


def get_default_config() -> WeightedSelectConfig:
    """Return the active config, loading it from the environment on first use."""
    global _config
    with _lock:
        if _config is None:
            _config = WeightedSelectConfig()
        return _config


def configure_default_source(config: WeightedSelectConfig | None = None) -> None:
    """Replace the config used to build default sources.

    Sources already cached by any thread are discarded and rebuilt on their
    next use. Passing ``None`` reloads the config from the environment.

    Args:
        config: New configuration, or ``None`` to reload lazily.
    """
    global _config, _seed_sequence, _generation
    with _lock:
        _config = config
        _seed_sequence = None
        _generation += 1
    logger.debug("Default random source reconfigured (generation %d)", _generation)


def get_default_source() -> RandomSource:
    """Return this thread's default random source, creating it if needed.

    Returns:
        A source private to the calling thread.

    Raises:
        KeyError: If the configured ``default_source`` is not registered.
    """
    source: RandomSource | None = getattr(_local, "source", None)
    if source is not None and _local.generation == _generation:
        return source

    source, generation = _build_thread_source()
    _local.source = source
    _local.generation = generation
    return source


def _build_thread_source() -> tuple[RandomSource, int]:
    """Build a source for the calling thread from the active config.

    Returns:
        Tuple of (new source, config generation it was built for).
    """
    global _config, _seed_sequence
    with _lock:
        if _config is None:
            _config = WeightedSelectConfig()
        config = _config
        generation = _generation
        seed: np.random.SeedSequence | None = None
        if config.seed is not None:
            if _seed_sequence is None:
                _seed_sequence = np.random.SeedSequence(config.seed)
            seed = _seed_sequence.spawn(1)[0]

    source = RandomSourceRegistry.build(config.default_source, seed=seed)
    logger.debug(
        "Created default random source %r for thread %s (seeded=%s)",
        source.name,
        threading.current_thread().name,
        seed is not None,
    )
    return source, generation

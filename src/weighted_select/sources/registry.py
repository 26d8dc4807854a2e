"""Turning a source name from config into a live random source.

``RandomSourceRegistry.build`` is what the default source and
``SelectionSampler`` call with the ``default_source`` and ``seed`` fields
of a ``WeightedSelectConfig``. Names resolve against classes decorated with
``@register_random_source`` first. Installed distributions can contribute
more under the ``weighted_select.random_sources`` entry-point group; that
group is read once, the first time a name is missing or the full list of
names is requested.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from numpy.random import SeedSequence

    from weighted_select.sources.base import RandomSource

logger = logging.getLogger("weighted_select")

PLUGIN_GROUP = "weighted_select.random_sources"


class RandomSourceRegistry:
    """Source classes keyed by name, and construction of instances."""

    _sources: ClassVar[dict[str, type[RandomSource]]] = {}
    _plugins_scanned: ClassVar[bool] = False

    @classmethod
    def build(cls, name: str, seed: int | SeedSequence | None = None) -> RandomSource:
        """Create a new source of the kind registered as *name*.

        A class with ``seedable = True`` is called with ``seed=seed``. Any
        other class is called with no arguments, so a seed meant for it
        has no effect.

        Args:
            name: Source name, e.g. ``config.default_source``.
            seed: Seed for seedable sources. ``None`` draws one from the OS.

        Returns:
            A fresh, unshared source instance.

        Raises:
            KeyError: If *name* is unknown.
        """
        source_cls = cls.get(name)
        if source_cls.seedable:
            source = source_cls(seed=seed)  # type: ignore[call-arg]
        else:
            if seed is not None:
                logger.debug("Random source %r takes no seed; %r has no effect", name, seed)
            source = source_cls()
        logger.debug(
            "Built random source %r (seeded=%s)", name, source_cls.seedable and seed is not None
        )
        return source

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Return the class registered as *name*, scanning plugins on a miss.

        Raises:
            KeyError: If *name* is unknown, with the known names in the message.
        """
        source_cls = cls._sources.get(name)
        if source_cls is None and not cls._plugins_scanned:
            cls._scan_plugins()
            source_cls = cls._sources.get(name)
        if source_cls is None:
            known = ", ".join(sorted(cls._sources)) or "(none)"
            raise KeyError(f"Unknown random source: {name!r}. Available: {known}")
        return source_cls

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Class decorator filing a source class under *name*.

        Registering a name twice keeps the later class.

        Example::

            @register_random_source("lcg")
            class LcgSource(RandomSource):
                seedable = True
                ...
        """

        def add(source_cls: type[RandomSource]) -> type[RandomSource]:
            cls._sources[name] = source_cls
            return source_cls

        return add

    @classmethod
    def list_available(cls) -> list[str]:
        """Sorted names of all built-in and plugin sources."""
        if not cls._plugins_scanned:
            cls._scan_plugins()
        return sorted(cls._sources)

    @classmethod
    def _scan_plugins(cls) -> None:
        """Add plugin sources whose names are not taken yet.

        A name already registered in-process wins over a plugin of the same
        name. A plugin that fails to import is skipped with a warning.
        """
        cls._plugins_scanned = True
        try:
            advertised = importlib.metadata.entry_points(group=PLUGIN_GROUP)
        except Exception:
            logger.warning("Could not read %s entry points", PLUGIN_GROUP, exc_info=True)
            return

        for ep in [ep for ep in advertised if ep.name not in cls._sources]:
            try:
                source_cls = ep.load()
            except Exception:
                logger.warning(
                    "Skipping random source plugin %r (%s)", ep.name, ep.value, exc_info=True
                )
                continue
            cls._sources[ep.name] = source_cls
            logger.debug("Registered random source plugin %r from %s", ep.name, ep.value)

    @classmethod
    def _reset(cls) -> None:
        """Forget every source and allow plugins to be scanned again. Tests only."""
        cls._sources.clear()
        cls._plugins_scanned = False


register_random_source = RandomSourceRegistry.register

"""Random source subsystem for weighted-select.

Re-exports the ABC, registry, built-in sources and the process-wide default
source accessors::

    from weighted_select.sources import RandomSource, RandomSourceRegistry
    from weighted_select.sources import NumpyRandomSource, SystemRandomSource
"""

from weighted_select.sources.base import RandomSource
from weighted_select.sources.default import (
    configure_default_source,
    get_default_config,
    get_default_source,
)
from weighted_select.sources.numpy_source import NumpyRandomSource
from weighted_select.sources.registry import RandomSourceRegistry, register_random_source
from weighted_select.sources.scripted import ScriptedRandomSource
from weighted_select.sources.system import SystemRandomSource

__all__ = [
    "NumpyRandomSource",
    "RandomSource",
    "RandomSourceRegistry",
    "ScriptedRandomSource",
    "SystemRandomSource",
    "configure_default_source",
    "get_default_config",
    "get_default_source",
    "register_random_source",
]

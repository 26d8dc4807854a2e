"""weighted-select: weighted random selection with an optional "no selection" outcome.

Build a WeightedSelector once from (weight, value) pairs, then draw from it
repeatedly using the process-wide default random source or any source that
provides ``uniform(low, high)``.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("weighted-select")
except PackageNotFoundError:
    __version__ = "0.0.0"

from weighted_select.config import WeightedSelectConfig, resolve_config, validate_overrides
from weighted_select.exceptions import (
    ConfigValidationError,
    RandomSourceError,
    RandomSourceExhaustedError,
    WeightedSelectError,
)
from weighted_select.sampler import SelectionSampler
from weighted_select.selection import Choice, RandomSelector, SupportsUniform, WeightedSelector
from weighted_select.sources import (
    NumpyRandomSource,
    RandomSource,
    ScriptedRandomSource,
    SystemRandomSource,
    configure_default_source,
    get_default_source,
)

__all__ = [
    "Choice",
    "ConfigValidationError",
    "NumpyRandomSource",
    "RandomSelector",
    "RandomSource",
    "RandomSourceError",
    "RandomSourceExhaustedError",
    "ScriptedRandomSource",
    "SelectionSampler",
    "SupportsUniform",
    "SystemRandomSource",
    "WeightedSelectConfig",
    "WeightedSelectError",
    "WeightedSelector",
    "__version__",
    "configure_default_source",
    "get_default_source",
    "resolve_config",
    "validate_overrides",
]

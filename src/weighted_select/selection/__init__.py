"""Selection subsystem for weighted-select.

Cumulative-weight inversion sampling over an ordered set of weighted
choices, driven by any uniform random source.
"""

from weighted_select.selection.selector import RandomSelector, SupportsUniform, WeightedSelector
from weighted_select.selection.types import Choice

__all__ = [
    "Choice",
    "RandomSelector",
    "SupportsUniform",
    "WeightedSelector",
]

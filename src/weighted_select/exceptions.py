"""Exception hierarchy for weighted-select.

The selector itself never raises: malformed weights are handled numerically.
These exceptions cover the supporting layers (configuration and random
sources). All derive from WeightedSelectError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class WeightedSelectError(Exception):
    """Base exception for all weighted-select errors."""


class ConfigValidationError(WeightedSelectError):
    """Configuration field validation failed.

    Raised when override keys are unknown, attempt to override an
    infrastructure field, or fail type validation.
    """


class RandomSourceError(WeightedSelectError):
    """A random source could not produce a draw."""


class RandomSourceExhaustedError(RandomSourceError):
    """A finite random source has no draws left.

    Raised by ScriptedRandomSource once every scripted draw is consumed.
    """

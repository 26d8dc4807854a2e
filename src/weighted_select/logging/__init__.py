"""Diagnostic logging subsystem for weighted-select.

Provides immutable per-selection records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from weighted_select.logging.logger import SelectionLogger
from weighted_select.logging.types import SelectionRecord

__all__ = [
    "SelectionLogger",
    "SelectionRecord",
]

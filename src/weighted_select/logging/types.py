"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single selection.

    Attributes:
        timestamp_ns: Wall-clock time of the selection (nanoseconds since epoch).
        draw_ms: Time spent drawing and scanning (milliseconds).
        source_name: Name of the random source that provided the draw.
        total_weight: Selector total weight at the time of the draw.
        num_choices: Number of choices held by the selector.
        choice_index: Index of the selected choice, ``None`` for no selection.
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    timestamp_ns: int
    draw_ms: float
    source_name: str
    total_weight: float
    num_choices: int
    choice_index: int | None
    config_hash: str

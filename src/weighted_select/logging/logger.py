"""Diagnostic logger for selection events.

Uses the standard ``logging`` module with the ``"weighted_select"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc frequency analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from weighted_select.config import WeightedSelectConfig
    from weighted_select.logging.types import SelectionRecord

logger = logging.getLogger("weighted_select")


class SelectionLogger:
    """Per-selection diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One DEBUG line per selection with the chosen index,
        total weight and source.

        ``"full"``: DEBUG JSON dump of all record fields.

    Diagnostic mode stores all records in memory for ``get_diagnostic_data()``
    and ``get_summary_stats()``.
    """

    def __init__(self, config: WeightedSelectConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    def log_selection(
        self,
        record: SelectionRecord,
        config: WeightedSelectConfig | None = None,
    ) -> None:
        """Log a single selection event.

        Args:
            record: Immutable record of the selection.
            config: Per-call configuration whose ``log_level`` and
                ``diagnostic_mode`` replace this logger's for this record
                only. Stored records always land in this logger.
        """
        log_level = self._log_level if config is None else config.log_level
        diagnostic_mode = self._diagnostic_mode if config is None else config.diagnostic_mode

        if diagnostic_mode:
            self._records.append(record)

        if log_level == "none":
            return

        if log_level == "summary":
            logger.debug(
                "choice=%s of=%d total=%r source=%s draw=%.3fms",
                "none" if record.choice_index is None else record.choice_index,
                record.num_choices,
                record.total_weight,
                record.source_name,
                record.draw_ms,
            )
        elif log_level == "full":
            logger.debug("selection_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all SelectionRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        counts = Counter(r.choice_index for r in self._records)
        none_count = counts.pop(None, 0)
        draw_times = [r.draw_ms for r in self._records]
        return {
            "total_selections": n,
            "none_count": none_count,
            "none_rate": none_count / n,
            "choice_counts": dict(sorted(counts.items())),
            "mean_draw_ms": sum(draw_times) / n,
            "max_draw_ms": max(draw_times),
        }

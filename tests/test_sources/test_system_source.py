"""Tests for SystemRandomSource."""

from __future__ import annotations

from unittest.mock import patch

from weighted_select.sources.system import SystemRandomSource


class TestSystemRandomSource:
    """Tests for the os.urandom() wrapper."""

    def test_name(self) -> None:
        assert SystemRandomSource().name == "system"

    def test_not_seedable(self) -> None:
        assert SystemRandomSource.seedable is False

    def test_random_in_unit_interval(self) -> None:
        source = SystemRandomSource()
        values = [source.random() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_consecutive_calls_differ(self) -> None:
        """Statistically near-impossible for 10 draws to repeat exactly."""
        source = SystemRandomSource()
        assert len({source.random() for _ in range(10)}) > 1

    def test_all_zero_bytes_give_zero(self) -> None:
        with patch("os.urandom", return_value=b"\x00" * 7):
            assert SystemRandomSource().random() == 0.0

    def test_all_one_bytes_stay_below_one(self) -> None:
        with patch("os.urandom", return_value=b"\xff" * 7):
            value = SystemRandomSource().random()
        assert value == 1.0 - 2.0**-53

    def test_uniform_in_range(self) -> None:
        source = SystemRandomSource()
        assert all(0.0 <= source.uniform(0.0, 5.0) < 5.0 for _ in range(1000))

    def test_close_is_noop(self) -> None:
        source = SystemRandomSource()
        source.close()  # Should not raise.
        # Source should still work after close.
        assert 0.0 <= source.random() < 1.0

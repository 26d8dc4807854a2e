"""Shared pytest fixtures for weighted-select tests.

Provides reusable selectors, seeded random sources and configuration
objects used across multiple test modules.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from weighted_select.config import WeightedSelectConfig
from weighted_select.selection.selector import WeightedSelector
from weighted_select.sources.default import configure_default_source
from weighted_select.sources.numpy_source import NumpyRandomSource


@pytest.fixture(autouse=True)
def _reset_default_source() -> Iterator[None]:
    """Drop any default-source configuration a test installed."""
    yield
    configure_default_source(None)


@pytest.fixture
def two_choice_selector() -> WeightedSelector[str]:
    """Return 'A' (weight 1.0) and 'B' (weight 1.5); total weight 2.5."""
    return WeightedSelector().add_choice(1.0, "A").add_choice(1.5, "B")


@pytest.fixture
def none_mass_selector() -> WeightedSelector[str]:
    """Return the two-choice selector plus 2.5 of no-selection mass (total 5.0)."""
    return WeightedSelector().add_choice(1.0, "A").add_choice(1.5, "B").add_none_mass(2.5)


@pytest.fixture
def seeded_source() -> NumpyRandomSource:
    """Return a NumpyRandomSource with a fixed seed for reproducibility."""
    return NumpyRandomSource(seed=42)


@pytest.fixture
def silent_config() -> WeightedSelectConfig:
    """Return a config with no logging and no stored records."""
    return WeightedSelectConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> WeightedSelectConfig:
    """Return a seeded config with full logging and diagnostic mode enabled."""
    return WeightedSelectConfig(
        _env_file=None,
        seed=7,
        log_level="full",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )

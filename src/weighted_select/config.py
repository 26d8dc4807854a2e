"""Configuration system for weighted-select.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (WSEL_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields that
decide how the default random source is built are protected from per-call
override.
"""

from __future__ import annotations

import hashlib
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from weighted_select.exceptions import ConfigValidationError

# Fields that can be overridden per call (SelectionSampler.draw overrides).
# The source fields are excluded: a live source cannot change its type or
# seed mid-stream.
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class WeightedSelectConfig(BaseSettings):
    """Configuration for weighted-select.

    Resolution order: init kwargs -> env vars (WSEL_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Infrastructure**: which random source backs ``select()`` and how it
      is seeded. NOT overridable per call.
    - **Diagnostics**: logging verbosity and in-memory record keeping.
      Overridable per call.
    """

    model_config = SettingsConfigDict(
        env_prefix="WSEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT per-call overridable) ---

    default_source: str = Field(
        default="numpy",
        description="Registry name of the process-wide default random source",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Seed for the default random source (None = OS entropy)",
    )

    # --- Diagnostics (per-call overridable) ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(WeightedSelectConfig.model_fields.keys())


def config_hash(config: WeightedSelectConfig) -> str:
    """Compute a short hash of the config for logging.

    Args:
        config: The configuration to hash.

    Returns:
        First 16 hex characters of the SHA-256 digest of the config dump.
    """
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Mapping of field name to override value.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable.
    """
    for field_name in overrides:
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{field_name}'")
        if field_name not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{field_name}' is an infrastructure field and cannot be "
                f"overridden per call"
            )


def resolve_config(
    defaults: WeightedSelectConfig,
    overrides: dict[str, Any] | None,
) -> WeightedSelectConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration.
        overrides: Per-call overrides keyed by field name.

    Returns:
        *defaults* itself when there is nothing to override, otherwise a new
        WeightedSelectConfig with overrides applied.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable, or
            a value fails type validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces and
    # rejects bad values.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return WeightedSelectConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc

"""
Configuration management for Wiqayah library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the WIQAYAH_ prefix.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Hard bounds for the user-selectable daily limit
MIN_DAILY_LIMIT_MINUTES = 30
MAX_DAILY_LIMIT_MINUTES = 120


class WiqayahSettings(BaseSettings):
    """
    Configuration settings for Wiqayah library.

    All settings can be overridden via environment variables with WIQAYAH_ prefix.

    Example:
        export WIQAYAH_DAILY_LIMIT_MINUTES="90"
        export WIQAYAH_TIER_BOUNDARIES="[15, 30, 45, 60]"
        export WIQAYAH_REPETITION_MATCH_THRESHOLD="0.75"
    """

    model_config = SettingsConfigDict(
        env_prefix="WIQAYAH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Usage Limits ============

    daily_limit_minutes: int = Field(
        default=60,
        description="Default daily usage limit for a new ledger (minutes)",
        ge=MIN_DAILY_LIMIT_MINUTES,
        le=MAX_DAILY_LIMIT_MINUTES,
    )

    free_unlock_limit: int = Field(
        default=15,
        description="Verified unlocks per day for non-premium users",
        ge=0,
    )

    max_emergency_bypasses: int = Field(
        default=3,
        description="Emergency bypasses granted at each day reset",
        ge=0,
        le=3,
    )

    max_debt_multiplier: int = Field(
        default=3,
        description="Ceiling for the repetition multiplier applied by dhikr debt",
        ge=1,
        le=3,
    )

    approaching_limit_ratio: float = Field(
        default=0.8,
        description="Fraction of the daily limit at which usage counts as approaching it",
        ge=0.0,
        le=1.0,
    )

    # ============ Tier Settings ============

    tier_boundaries: list[int] = Field(
        default=[20, 40, 55, 60],
        description="Upper minute bound (exclusive) of each recitation tier",
        min_length=1,
    )

    # ============ Verification Settings ============

    default_threshold: float = Field(
        default=0.7,
        description="Acceptance threshold for catalog entries not listed as strict",
        gt=0.0,
        le=1.0,
    )

    strict_threshold: float = Field(
        default=0.75,
        description="Acceptance threshold for strict catalog entries (Ayat al-Kursi)",
        gt=0.0,
        le=1.0,
    )

    repetition_match_threshold: float = Field(
        default=0.7,
        description="Minimum similarity for a fuzzy repetition window to count",
        ge=0.0,
        le=1.0,
    )

    partial_band: float = Field(
        default=0.2,
        description="Width below the acceptance threshold reported as a partial match",
        ge=0.0,
        le=1.0,
    )

    # ============ Storage Settings ============

    ledger_path: Path = Field(
        default=Path("wiqayah_ledger.json"),
        description="File used by JsonLedgerStore when no path is given",
    )

    # ============ Validators ============

    @field_validator("tier_boundaries")
    @classmethod
    def boundaries_ascending(cls, v: list[int]) -> list[int]:
        """Tier boundaries must be positive and strictly ascending."""
        if any(b <= 0 for b in v):
            raise ValueError("tier boundaries must be positive")
        if any(later <= earlier for earlier, later in zip(v, v[1:])):
            raise ValueError("tier boundaries must be strictly ascending")
        return v

    @field_validator("ledger_path", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v


def clamp_daily_limit(minutes: int) -> int:
    """
    Clamp a requested daily limit into the supported range.

    The ledger never re-validates its limit, so callers pass user input
    through this before storing it.

    Args:
        minutes: Requested daily limit

    Returns:
        int: The limit clamped to [30, 120]
    """
    return max(MIN_DAILY_LIMIT_MINUTES, min(MAX_DAILY_LIMIT_MINUTES, minutes))


# Default settings instance
_default_settings: WiqayahSettings | None = None


def get_settings() -> WiqayahSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        WiqayahSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = WiqayahSettings()
    return _default_settings


def configure(**kwargs) -> WiqayahSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        WiqayahSettings: The new settings instance
    """
    global _default_settings
    _default_settings = WiqayahSettings(**kwargs)
    return _default_settings

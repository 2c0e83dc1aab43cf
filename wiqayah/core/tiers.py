"""
Usage-based tier policy.

Maps cumulative daily usage to the recitation required for the next unlock
and applies the dhikr-debt multiplier.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from wiqayah.config import WiqayahSettings, get_settings
from wiqayah.core.catalog import (
    AYAT_AL_KURSI,
    KAHF_FIRST_5,
    MORNING_ADHKAR,
    SUBHANALLAH,
    build_catalog,
    with_multiplier,
)
from wiqayah.exceptions import ConfigurationError
from wiqayah.models import DhikrRequirement

# Requirements for the default four tiers, lowest usage first
DEFAULT_TIER_REQUIREMENTS: tuple[DhikrRequirement, ...] = (
    SUBHANALLAH,
    AYAT_AL_KURSI,
    KAHF_FIRST_5,
    MORNING_ADHKAR,
)


@dataclass(frozen=True)
class Tier:
    """A usage band [previous upper bound, upper_minutes) and its requirement."""

    upper_minutes: int
    requirement: DhikrRequirement


class TierPolicy:
    """
    Decides which dhikr is required for a given amount of daily usage.

    Tiers are half-open minute bands in ascending order. Usage at or beyond
    the last boundary maps to the last (ceiling) tier.

    Example:
        policy = TierPolicy()
        policy.required_tier(25).id          # "ayat_al_kursi"
        policy.required_dhikr(10, debt=1)    # Subhanallah, 6 repetitions
    """

    def __init__(
        self,
        tiers: Optional[Sequence[Tier]] = None,
        max_debt_multiplier: Optional[int] = None,
        settings: Optional[WiqayahSettings] = None,
    ):
        """
        Args:
            tiers: Explicit tiers (defaults to settings.tier_boundaries paired with
                the default requirements, at the configured thresholds)
            max_debt_multiplier: Ceiling for the debt multiplier
            settings: Settings to read defaults from
        """
        settings = settings or get_settings()

        if tiers is None:
            boundaries = settings.tier_boundaries
            if len(boundaries) != len(DEFAULT_TIER_REQUIREMENTS):
                raise ConfigurationError(
                    f"Expected {len(DEFAULT_TIER_REQUIREMENTS)} tier boundaries, "
                    f"got {len(boundaries)}; pass explicit tiers instead"
                )
            catalog = build_catalog(settings)
            tiers = [
                Tier(upper, catalog[requirement.id])
                for upper, requirement in zip(boundaries, DEFAULT_TIER_REQUIREMENTS)
            ]

        if not tiers:
            raise ConfigurationError("A tier policy needs at least one tier")
        uppers = [t.upper_minutes for t in tiers]
        if any(later <= earlier for earlier, later in zip(uppers, uppers[1:])):
            raise ConfigurationError(f"Tier boundaries must ascend: {uppers}")

        self.tiers: tuple[Tier, ...] = tuple(tiers)
        self.max_debt_multiplier = (
            max_debt_multiplier
            if max_debt_multiplier is not None
            else settings.max_debt_multiplier
        )

    def tier_index(self, minutes_used_today: int) -> int:
        """Zero-based index of the tier covering minutes_used_today."""
        for index, tier in enumerate(self.tiers):
            if minutes_used_today < tier.upper_minutes:
                return index
        return len(self.tiers) - 1

    def required_tier(self, minutes_used_today: int) -> DhikrRequirement:
        """
        Base requirement for the given usage, before any debt.

        Args:
            minutes_used_today: Cumulative usage since the last reset

        Returns:
            The tier's catalog requirement
        """
        return self.tiers[self.tier_index(minutes_used_today)].requirement

    def debt_multiplier(self, debt: int) -> int:
        """Repetition multiplier for the given debt (1 when there is none)."""
        if debt <= 0:
            return 1
        return min(debt + 1, self.max_debt_multiplier)

    def apply_debt(self, base: DhikrRequirement, debt: int) -> DhikrRequirement:
        """
        Multiply the repetitions of base according to outstanding debt.

        Args:
            base: Requirement chosen by ``required_tier``
            debt: Outstanding dhikr debt

        Returns:
            base itself when debt is zero, otherwise a multiplied copy
        """
        if debt > 0:
            return with_multiplier(base, self.debt_multiplier(debt))
        return base

    def required_dhikr(self, minutes_used_today: int, debt: int = 0) -> DhikrRequirement:
        """Requirement for the next unlock, debt included."""
        return self.apply_debt(self.required_tier(minutes_used_today), debt)

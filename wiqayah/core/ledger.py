"""
Usage ledger: the per-user state machine that gates unlocks.

``UsageLedger`` wraps a ``UsageLedgerState`` record and mutates it in place.
Each method is a short synchronous update; when the host application is
multithreaded the caller must serialize access to one ledger instance.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from wiqayah.config import WiqayahSettings, get_settings
from wiqayah.models import DailyStats, UsageLedgerState

logger = logging.getLogger(__name__)

# Decides whether two instants fall on the same usage day
SameDay = Callable[[datetime, datetime], bool]


def same_calendar_day(a: datetime, b: datetime) -> bool:
    """
    Whether a and b share a calendar date.

    Timezone-aware instants are compared in b's zone; naive instants are
    compared as given.
    """
    if a.tzinfo is not None and b.tzinfo is not None:
        a = a.astimezone(b.tzinfo)
    return a.date() == b.date()


def new_ledger_state(
    settings: Optional[WiqayahSettings] = None,
    now: Optional[datetime] = None,
) -> UsageLedgerState:
    """
    Create the first ledger record for a user from settings defaults.

    Args:
        settings: Settings to read limits from
        now: Initial reset timestamp (defaults to the current time)

    Returns:
        A fresh UsageLedgerState
    """
    settings = settings or get_settings()
    return UsageLedgerState(
        daily_limit_minutes=settings.daily_limit_minutes,
        free_unlock_limit=settings.free_unlock_limit,
        emergency_bypasses_remaining=settings.max_emergency_bypasses,
        last_reset_timestamp=now or datetime.now(),
    )


class UsageLedger:
    """
    Daily usage, unlock quota, emergency bypasses and dhikr debt.

    Operations never raise. Policy checks (``can_unlock``) are separate
    from mutations (``record_unlock``); callers check before they record.

    Example:
        ledger = UsageLedger()
        ledger.reset_for_new_day(fajr)
        if ledger.can_unlock():
            ...verify dhikr...
            ledger.record_unlock()
    """

    def __init__(
        self,
        state: Optional[UsageLedgerState] = None,
        settings: Optional[WiqayahSettings] = None,
        same_day: SameDay = same_calendar_day,
    ):
        """
        Args:
            state: Existing record to operate on (a new one is created if None)
            settings: Settings for bypass and debt limits
            same_day: Day-boundary rule used by reset_for_new_day
        """
        self.settings = settings or get_settings()
        self.state = state if state is not None else new_ledger_state(self.settings)
        self.same_day = same_day

    # ============ Limits ============

    @property
    def max_emergency_bypasses(self) -> int:
        return self.settings.max_emergency_bypasses

    @property
    def max_debt(self) -> int:
        """Debt is capped one below the multiplier ceiling."""
        return self.settings.max_debt_multiplier - 1

    # ============ Queries ============

    def can_unlock(self) -> bool:
        """Whether a verified unlock is currently allowed."""
        s = self.state
        has_quota = s.is_premium_unlimited or s.unlocks_used_today < s.free_unlock_limit
        return has_quota and s.minutes_used_today < s.daily_limit_minutes

    @property
    def remaining_unlocks(self) -> Optional[int]:
        """Unlocks left today, or None when premium makes them unlimited."""
        if self.state.is_premium_unlimited:
            return None
        return max(0, self.state.free_unlock_limit - self.state.unlocks_used_today)

    @property
    def remaining_minutes(self) -> int:
        return max(0, self.state.daily_limit_minutes - self.state.minutes_used_today)

    @property
    def usage_percentage(self) -> float:
        """Share of the daily limit used so far, capped at 1.0."""
        return min(1.0, self.state.minutes_used_today / self.state.daily_limit_minutes)

    @property
    def has_reached_limit(self) -> bool:
        return self.state.minutes_used_today >= self.state.daily_limit_minutes

    @property
    def is_approaching_limit(self) -> bool:
        """Usage is past the warning ratio but the limit is not reached yet."""
        warning = self.state.daily_limit_minutes * self.settings.approaching_limit_ratio
        return self.state.minutes_used_today >= warning and not self.has_reached_limit

    @property
    def has_debt(self) -> bool:
        return self.state.dhikr_debt > 0

    @property
    def debt_multiplier(self) -> int:
        return min(self.state.dhikr_debt + 1, self.settings.max_debt_multiplier)

    @property
    def can_use_emergency_bypass(self) -> bool:
        return self.state.emergency_bypasses_remaining > 0

    def usage_for_app(self, app_id: str) -> int:
        """Minutes used today by one app."""
        return self.state.app_usage.get(app_id, 0)

    # ============ Mutations ============

    def record_unlock(self) -> None:
        """Count one verified unlock. Does not re-check ``can_unlock``."""
        self.state.unlocks_used_today += 1
        logger.debug("Unlock recorded (%d today)", self.state.unlocks_used_today)

    def record_usage_minutes(self, app_id: str, minutes: int) -> None:
        """
        Add usage for an app to today's totals.

        Args:
            app_id: App identifier (e.g. a bundle id)
            minutes: Minutes to add; negative values are ignored
        """
        if minutes < 0:
            logger.warning("Ignoring negative usage of %d minutes for %s", minutes, app_id)
            minutes = 0
        self.state.minutes_used_today += minutes
        self.state.app_usage[app_id] = self.state.app_usage.get(app_id, 0) + minutes
        logger.debug(
            "Usage recorded: %s +%d min (%d/%d today)",
            app_id,
            minutes,
            self.state.minutes_used_today,
            self.state.daily_limit_minutes,
        )

    def consume_emergency_bypass(self) -> bool:
        """
        Spend one emergency bypass and accrue one unit of debt.

        Returns:
            True if a bypass was available and consumed, False otherwise
            (the state is then unchanged)
        """
        if self.state.emergency_bypasses_remaining <= 0:
            logger.warning("Emergency bypass refused: none remaining")
            return False

        self.state.emergency_bypasses_remaining -= 1
        self.state.dhikr_debt = min(self.state.dhikr_debt + 1, self.max_debt)
        self.state.bypasses_used_today += 1
        logger.debug(
            "Emergency bypass used (%d left, debt=%d)",
            self.state.emergency_bypasses_remaining,
            self.state.dhikr_debt,
        )
        return True

    def pay_down_debt(self) -> None:
        """Reduce dhikr debt by one after a verified, multiplied recitation."""
        if self.state.dhikr_debt > 0:
            self.state.dhikr_debt -= 1
            logger.debug("Debt paid down to %d", self.state.dhikr_debt)

    def record_dhikr_completion(self) -> None:
        """Count one successful verification for today's statistics."""
        self.state.dhikr_completed_today += 1

    def reset_for_new_day(self, reset_instant: datetime) -> Optional[DailyStats]:
        """
        Start a new usage day if reset_instant is on a different day.

        The day rule is ``self.same_day`` (calendar day unless a prayer-time
        boundary was injected). Calling it again for the same day is a no-op.

        Args:
            reset_instant: Instant of the reset (e.g. the latest Fajr)

        Returns:
            Statistics of the day that was closed, or None if no reset happened
        """
        if self.same_day(self.state.last_reset_timestamp, reset_instant):
            return None

        closed = self.to_daily_stats()
        s = self.state
        s.minutes_used_today = 0
        s.unlocks_used_today = 0
        s.emergency_bypasses_remaining = self.max_emergency_bypasses
        s.dhikr_debt = 0
        s.app_usage = {}
        s.dhikr_completed_today = 0
        s.bypasses_used_today = 0
        s.last_reset_timestamp = reset_instant

        logger.info("Usage day reset at %s (closed %s)", reset_instant.isoformat(), closed)
        return closed

    # ============ Snapshots ============

    def to_daily_stats(self) -> DailyStats:
        """Statistics for the current day, dated by the last reset."""
        s = self.state
        return DailyStats(
            day=s.last_reset_timestamp.date(),
            total_minutes_used=s.minutes_used_today,
            unlocks_used=s.unlocks_used_today,
            dhikr_completed=s.dhikr_completed_today,
            bypasses_used=s.bypasses_used_today,
            app_usage_breakdown=dict(s.app_usage),
        )

    def snapshot(self) -> UsageLedgerState:
        """Deep copy of the current record, safe to hand to a persistence layer."""
        return self.state.model_copy(deep=True)

    def __repr__(self) -> str:
        return f"UsageLedger({self.state})"

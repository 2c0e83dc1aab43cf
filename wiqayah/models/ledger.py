"""
Usage ledger record.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UsageLedgerState(BaseModel):
    """
    Persistent per-user record of usage, unlocks, bypasses and debt.

    Field constraints are checked when a record is constructed or loaded.
    Mutations made through ``UsageLedger`` are not re-validated, so the
    daily limit must be clamped by the caller before it is stored.

    Attributes:
        daily_limit_minutes: Allowed usage per day (30-120)
        minutes_used_today: Cumulative usage since the last reset
        unlocks_used_today: Verified unlocks since the last reset
        free_unlock_limit: Unlocks per day for non-premium users
        is_premium_unlimited: Premium users are not bound by the unlock limit
        emergency_bypasses_remaining: Bypasses left until the next reset (0-3)
        dhikr_debt: Outstanding debt from bypasses (0-2)
        last_reset_timestamp: Instant of the last day reset
        app_usage: Minutes used today per app identifier
        dhikr_completed_today: Successful verifications since the last reset
        bypasses_used_today: Emergency bypasses consumed since the last reset
    """

    daily_limit_minutes: int = Field(
        default=60,
        description="Allowed usage per day in minutes",
        ge=30,
        le=120,
    )
    minutes_used_today: int = Field(
        default=0,
        description="Cumulative usage minutes since the last reset",
        ge=0,
    )
    unlocks_used_today: int = Field(
        default=0,
        description="Verified unlocks since the last reset",
        ge=0,
    )
    free_unlock_limit: int = Field(
        default=15,
        description="Unlocks per day for non-premium users",
        ge=0,
    )
    is_premium_unlimited: bool = Field(
        default=False,
        description="Whether the unlock limit is lifted",
    )
    emergency_bypasses_remaining: int = Field(
        default=3,
        description="Emergency bypasses left until the next reset",
        ge=0,
        le=3,
    )
    dhikr_debt: int = Field(
        default=0,
        description="Outstanding dhikr debt accrued by bypasses",
        ge=0,
        le=2,
    )
    last_reset_timestamp: datetime = Field(
        default_factory=datetime.now,
        description="Instant of the last day reset",
    )
    app_usage: dict[str, int] = Field(
        default_factory=dict,
        description="Minutes used today per app identifier",
    )
    dhikr_completed_today: int = Field(
        default=0,
        description="Successful verifications since the last reset",
        ge=0,
    )
    bypasses_used_today: int = Field(
        default=0,
        description="Emergency bypasses consumed since the last reset",
        ge=0,
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "daily_limit_minutes": 60,
                    "minutes_used_today": 25,
                    "unlocks_used_today": 4,
                    "free_unlock_limit": 15,
                    "is_premium_unlimited": False,
                    "emergency_bypasses_remaining": 2,
                    "dhikr_debt": 1,
                    "last_reset_timestamp": "2024-06-21T04:12:00+03:00",
                    "app_usage": {"com.burbn.instagram": 25},
                }
            ]
        }
    }

    def __str__(self) -> str:
        return (
            f"UsageLedgerState({self.minutes_used_today}/{self.daily_limit_minutes} min, "
            f"unlocks={self.unlocks_used_today}, debt={self.dhikr_debt})"
        )

"""
Daily statistics and verification attempt records.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from wiqayah.models.dhikr import DhikrCategory


class DailyStats(BaseModel):
    """
    Summary of one closed (or in-progress) usage day.

    Attributes:
        day: Day the statistics belong to
        total_minutes_used: Usage minutes across all apps
        unlocks_used: Verified unlocks
        dhikr_completed: Successful verifications
        bypasses_used: Emergency bypasses consumed
        app_usage_breakdown: Minutes per app identifier
    """

    day: date
    total_minutes_used: int = Field(default=0, ge=0)
    unlocks_used: int = Field(default=0, ge=0)
    dhikr_completed: int = Field(default=0, ge=0)
    bypasses_used: int = Field(default=0, ge=0)
    app_usage_breakdown: dict[str, int] = Field(default_factory=dict)

    @property
    def dhikr_completion_rate(self) -> float:
        """Share of unlocks that were earned by a completed dhikr (1.0 with no unlocks)."""
        if self.unlocks_used == 0:
            return 1.0
        return self.dhikr_completed / self.unlocks_used

    @property
    def most_used_app(self) -> Optional[str]:
        """App identifier with the most minutes, or None if nothing was used."""
        if not self.app_usage_breakdown:
            return None
        return max(self.app_usage_breakdown, key=self.app_usage_breakdown.__getitem__)

    def __str__(self) -> str:
        return f"DailyStats({self.day.isoformat()}, {self.total_minutes_used} min)"


class DhikrSession(BaseModel):
    """
    Record of one verification attempt.

    Attributes:
        id: Unique attempt identifier
        timestamp: When the attempt was made
        dhikr_id: Catalog id of the requirement
        dhikr_name: Display name of the requirement
        category: Requirement category
        was_successful: Whether the verdict was a success
        attempt_count: Number of attempts folded into this record
        recognition_accuracy: Best similarity score seen (0.0-1.0)
        app_id: App whose unlock triggered the attempt
    """

    id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=datetime.now)
    dhikr_id: str
    dhikr_name: str
    category: DhikrCategory
    was_successful: bool = False
    attempt_count: int = Field(default=1, ge=1)
    recognition_accuracy: float = Field(default=0.0, ge=0.0, le=1.0)
    app_id: Optional[str] = None

    @property
    def accuracy_percentage(self) -> str:
        return f"{int(self.recognition_accuracy * 100)}%"

    def __str__(self) -> str:
        status = "ok" if self.was_successful else "failed"
        return f"DhikrSession({self.dhikr_id}, {status}, {self.accuracy_percentage})"

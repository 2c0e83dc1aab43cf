"""
Aggregates over closed usage days and verification attempts.
"""

from datetime import date, timedelta
from typing import Iterable, Sequence

from wiqayah.models import DailyStats, DhikrSession


def last_week(stats: Iterable[DailyStats], today: date) -> list[DailyStats]:
    """
    Statistics for the seven days ending today, oldest first.

    Days without a record are filled with empty statistics.

    Args:
        stats: Known daily statistics (any order)
        today: Last day of the window

    Returns:
        Exactly seven DailyStats
    """
    by_day = {s.day: s for s in stats}
    window = [today - timedelta(days=days_ago) for days_ago in range(6, -1, -1)]
    return [by_day.get(day) or DailyStats(day=day) for day in window]


def weekly_total_minutes(week: Sequence[DailyStats]) -> int:
    return sum(s.total_minutes_used for s in week)


def average_daily_minutes(week: Sequence[DailyStats]) -> int:
    if not week:
        return 0
    return weekly_total_minutes(week) // len(week)


def current_streak(stats: Iterable[DailyStats]) -> int:
    """Consecutive most-recent days (by record) on which a dhikr was completed."""
    streak = 0
    for s in sorted(stats, key=lambda s: s.day, reverse=True):
        if s.dhikr_completed == 0:
            break
        streak += 1
    return streak


def success_rate(sessions: Sequence[DhikrSession]) -> float:
    if not sessions:
        return 0.0
    return sum(1 for s in sessions if s.was_successful) / len(sessions)


def average_accuracy(sessions: Sequence[DhikrSession]) -> float:
    if not sessions:
        return 0.0
    return sum(s.recognition_accuracy for s in sessions) / len(sessions)


def sessions_for(sessions: Iterable[DhikrSession], dhikr_id: str) -> list[DhikrSession]:
    return [s for s in sessions if s.dhikr_id == dhikr_id]

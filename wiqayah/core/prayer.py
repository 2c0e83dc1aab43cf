"""
Fajr prayer time lookup and a Fajr-based usage-day boundary.

The usage day can start at Fajr instead of midnight. ``FajrDayBoundary``
plugs into ``UsageLedger(same_day=...)``, and ``latest_reset_time`` gives
the instant to pass to ``reset_for_new_day``.

Prayer times come from adhanpy.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Optional

from adhanpy.PrayerTimes import PrayerTimes
from adhanpy.calculation.CalculationMethod import CalculationMethod as AdhanMethod

logger = logging.getLogger(__name__)

# Used when the caller has no location
MAKKAH_LATITUDE = 21.4225
MAKKAH_LONGITUDE = 39.8262


class CalculationMethod(str, Enum):
    """Convention for the sun depression angle that defines Fajr."""

    MUSLIM_WORLD_LEAGUE = "mwl"
    ISNA = "isna"
    EGYPT = "egypt"
    MAKKAH = "makkah"
    KARACHI = "karachi"

    @property
    def adhan_method(self) -> AdhanMethod:
        return _ADHAN_METHODS[self]


_ADHAN_METHODS: dict[CalculationMethod, AdhanMethod] = {
    CalculationMethod.MUSLIM_WORLD_LEAGUE: AdhanMethod.MUSLIM_WORLD_LEAGUE,
    CalculationMethod.ISNA: AdhanMethod.NORTH_AMERICA,
    CalculationMethod.EGYPT: AdhanMethod.EGYPTIAN,
    CalculationMethod.MAKKAH: AdhanMethod.UMM_AL_QURA,
    CalculationMethod.KARACHI: AdhanMethod.KARACHI,
}


def fajr_time(
    latitude: float,
    longitude: float,
    on: date,
    utc_offset_hours: float = 0.0,
    method: CalculationMethod = CalculationMethod.MUSLIM_WORLD_LEAGUE,
) -> Optional[datetime]:
    """
    Compute Fajr for a location and date.

    Args:
        latitude: Degrees north
        longitude: Degrees east
        on: Local calendar date
        utc_offset_hours: Local offset from UTC (e.g. 3 for Makkah)
        method: Fajr angle convention

    Returns:
        Timezone-aware Fajr instant in the given offset, or None where the
        sun gives no Fajr for that date (polar day or night)
    """
    try:
        times = PrayerTimes((latitude, longitude), on, method.adhan_method)
    except RuntimeError as e:
        # adhanpy raises when the date has no sunrise or sunset to anchor on
        logger.debug("No prayer times at (%s, %s) on %s: %s", latitude, longitude, on, e)
        return None

    # adhanpy returns aware UTC datetimes
    tz = timezone(timedelta(hours=utc_offset_hours))
    return times.fajr.astimezone(tz).replace(microsecond=0)


class FajrDayBoundary:
    """
    Usage-day rule where each day runs from one Fajr to the next.

    Instances are callables ``(a, b) -> bool`` suitable for
    ``UsageLedger(same_day=...)``. When Fajr is undefined for a date the
    rule falls back to the calendar day.

    Example:
        boundary = FajrDayBoundary(51.5, -0.13, utc_offset_hours=1)
        ledger = UsageLedger(state, same_day=boundary)
        ledger.reset_for_new_day(boundary.latest_reset_time(datetime.now(tz)))
    """

    def __init__(
        self,
        latitude: float = MAKKAH_LATITUDE,
        longitude: float = MAKKAH_LONGITUDE,
        utc_offset_hours: Optional[float] = None,
        method: CalculationMethod = CalculationMethod.MUSLIM_WORLD_LEAGUE,
    ):
        """
        Args:
            latitude: Degrees north
            longitude: Degrees east
            utc_offset_hours: Local offset; if None, aware instants use their own
                offset and naive instants are taken as UTC
            method: Fajr angle convention
        """
        self.latitude = latitude
        self.longitude = longitude
        self.utc_offset_hours = utc_offset_hours
        self.method = method

    def _localize(self, instant: datetime) -> tuple[datetime, float]:
        if instant.tzinfo is None:
            offset = self.utc_offset_hours or 0.0
            tz = timezone(timedelta(hours=offset))
            return instant.replace(tzinfo=tz), offset

        if self.utc_offset_hours is not None:
            offset = self.utc_offset_hours
        else:
            offset = instant.utcoffset().total_seconds() / 3600
        return instant.astimezone(timezone(timedelta(hours=offset))), offset

    def fajr_on(self, day: date, utc_offset_hours: float) -> Optional[datetime]:
        return fajr_time(self.latitude, self.longitude, day, utc_offset_hours, self.method)

    def prayer_day(self, instant: datetime) -> date:
        """Calendar date of the Fajr that opened the usage day containing instant."""
        local, offset = self._localize(instant)
        day = local.date()
        fajr = self.fajr_on(day, offset)
        if fajr is None or local >= fajr:
            return day
        return day - timedelta(days=1)

    def __call__(self, a: datetime, b: datetime) -> bool:
        return self.prayer_day(a) == self.prayer_day(b)

    def latest_reset_time(self, now: datetime) -> datetime:
        """Most recent Fajr at or before now (local midnight if Fajr is undefined)."""
        local, offset = self._localize(now)
        day = self.prayer_day(now)
        fajr = self.fajr_on(day, offset)
        if fajr is None:
            return datetime.combine(day, time(0), tzinfo=local.tzinfo)
        return fajr

    def next_reset_time(self, now: datetime) -> datetime:
        """First Fajr strictly after now (next local midnight if Fajr is undefined)."""
        local, offset = self._localize(now)
        for days_ahead in (0, 1):
            day = local.date() + timedelta(days=days_ahead)
            fajr = self.fajr_on(day, offset)
            if fajr is not None and fajr > local:
                return fajr
        return datetime.combine(local.date() + timedelta(days=1), time(0), tzinfo=local.tzinfo)

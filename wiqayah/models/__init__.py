"""
Pydantic data models for Wiqayah library.

These models represent the core data structures used throughout the library:
- DhikrRequirement: A recitation required to unlock an app
- VerificationVerdict: Outcome of one verification attempt
- UsageLedgerState: Persistent record of daily usage, unlocks, bypasses and debt
- DailyStats / DhikrSession: Statistics and attempt history
"""

from wiqayah.models.dhikr import DhikrCategory, DhikrRequirement
from wiqayah.models.verdict import (
    VERDICT_ADAPTER,
    Failure,
    FailureReason,
    Partial,
    Success,
    VerificationVerdict,
)
from wiqayah.models.ledger import UsageLedgerState
from wiqayah.models.stats import DailyStats, DhikrSession

__all__ = [
    "DhikrCategory",
    "DhikrRequirement",
    "VERDICT_ADAPTER",
    "Failure",
    "FailureReason",
    "Partial",
    "Success",
    "VerificationVerdict",
    "UsageLedgerState",
    "DailyStats",
    "DhikrSession",
]

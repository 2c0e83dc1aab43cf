"""
وقاية (Wiqayah) - Gate app usage behind a spoken dhikr.

Usage:
    from wiqayah.core import DhikrGate, UsageLedger
    from wiqayah.storage import JsonLedgerStore

    store = JsonLedgerStore("ledger.json")
    ledger = UsageLedger(store.load_or_create())
    gate = DhikrGate(ledger)

    # Start a new usage day when needed
    gate.check_reset(datetime.now())

    # Ask for the required dhikr, then verify the speech-to-text transcript
    requirement = gate.required_dhikr()
    verdict = gate.submit(transcript, requirement, app_id="com.burbn.instagram")
    if verdict.is_success:
        ...  # lift the block
    store.save(ledger.snapshot())
"""

from wiqayah.models import (
    DailyStats,
    DhikrCategory,
    DhikrRequirement,
    DhikrSession,
    Failure,
    FailureReason,
    Partial,
    Success,
    UsageLedgerState,
    VerificationVerdict,
)
from wiqayah.config import WiqayahSettings, get_settings, configure, clamp_daily_limit
from wiqayah.exceptions import (
    WiqayahError,
    ConfigurationError,
    UnknownDhikrError,
    LedgerStoreError,
)

__version__ = "1.0.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "DailyStats",
    "DhikrCategory",
    "DhikrRequirement",
    "DhikrSession",
    "Failure",
    "FailureReason",
    "Partial",
    "Success",
    "UsageLedgerState",
    "VerificationVerdict",
    # Config
    "WiqayahSettings",
    "get_settings",
    "configure",
    "clamp_daily_limit",
    # Exceptions
    "WiqayahError",
    "ConfigurationError",
    "UnknownDhikrError",
    "LedgerStoreError",
]

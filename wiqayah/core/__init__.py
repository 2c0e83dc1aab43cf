"""
Core modules for Wiqayah library.

This package contains the core business logic for:
- Arabic text normalization and similarity matching
- Repetition counting and dhikr verification
- Usage tiers, the dhikr catalog and the usage ledger

Primary API:
    from wiqayah.core import DhikrGate, UsageLedger

    gate = DhikrGate(UsageLedger())
    requirement = gate.required_dhikr()
    verdict = gate.submit(transcript, requirement)
"""

# Primary API - what most users need
from wiqayah.core.gate import DhikrGate
from wiqayah.core.ledger import UsageLedger, new_ledger_state, same_calendar_day
from wiqayah.core.tiers import Tier, TierPolicy
from wiqayah.core.verifier import VerificationEngine, VerificationReport, verify

# Text utilities
from wiqayah.core.arabic import normalize_arabic
from wiqayah.core.matcher import similarity
from wiqayah.core.repetition import count_repetitions

# Catalog
from wiqayah.core.catalog import CATALOG, build_catalog, get_dhikr, list_dhikr, with_multiplier

# Day boundaries
from wiqayah.core.prayer import CalculationMethod, FajrDayBoundary, fajr_time

__all__ = [
    # Primary API
    "DhikrGate",
    "UsageLedger",
    "new_ledger_state",
    "same_calendar_day",
    "Tier",
    "TierPolicy",
    "VerificationEngine",
    "VerificationReport",
    "verify",
    # Text utilities
    "normalize_arabic",
    "similarity",
    "count_repetitions",
    # Catalog
    "CATALOG",
    "build_catalog",
    "get_dhikr",
    "list_dhikr",
    "with_multiplier",
    # Day boundaries
    "CalculationMethod",
    "FajrDayBoundary",
    "fajr_time",
]

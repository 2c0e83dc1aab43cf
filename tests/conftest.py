"""
Shared fixtures and test configuration for Wiqayah tests.
"""

from datetime import datetime

import pytest

import wiqayah.config
from wiqayah.config import WiqayahSettings
from wiqayah.core import DhikrGate, TierPolicy, UsageLedger, VerificationEngine
from wiqayah.models import DhikrCategory, DhikrRequirement, UsageLedgerState


@pytest.fixture(autouse=True)
def reset_default_settings():
    """Make sure no test leaks a configure() call into the next one."""
    wiqayah.config._default_settings = None
    yield
    wiqayah.config._default_settings = None


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return WiqayahSettings(_env_file=None)


@pytest.fixture
def start_of_day():
    return datetime(2024, 6, 21, 4, 15)


@pytest.fixture
def ledger(settings, start_of_day):
    """A fresh ledger whose day started at start_of_day."""
    state = UsageLedgerState(last_reset_timestamp=start_of_day)
    return UsageLedger(state, settings=settings)


@pytest.fixture
def engine(settings):
    return VerificationEngine(settings=settings)


@pytest.fixture
def policy(settings):
    return TierPolicy(settings=settings)


@pytest.fixture
def gate(ledger, policy, engine):
    return DhikrGate(ledger, policy=policy, engine=engine)


@pytest.fixture
def latin_requirement_25():
    """Single-recitation requirement over 25 distinct letters (none of them 'z')."""
    return DhikrRequirement(
        id="latin_25",
        display_name="Latin 25",
        script_text="abcdefghijklmnopqrstuvwxy",
        repetitions=1,
        acceptance_threshold=0.7,
        category=DhikrCategory.VERSE,
    )


@pytest.fixture
def latin_requirement_20():
    """Single-recitation requirement over 20 distinct letters (none of them 'z')."""
    return DhikrRequirement(
        id="latin_20",
        display_name="Latin 20",
        script_text="abcdefghijklmnopqrst",
        repetitions=1,
        acceptance_threshold=0.7,
        category=DhikrCategory.VERSE,
    )


@pytest.fixture
def normalization_test_cases():
    """Test cases for Arabic normalization."""
    return [
        ("سُبْحَانَ ٱللَّٰهِ", "سبحان الله"),
        ("ٱلْحَمْدُ لِلَّٰهِ", "الحمد لله"),
        ("ٱللَّٰهُ أَكْبَرُ", "الله اكبر"),
        ("مَّـٰكِثِينَ فِيهِ أَبَدًا ﴿٣﴾", "مكثين فيه ابدا"),
    ]

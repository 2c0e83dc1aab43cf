"""
Unlock gate: wires the tier policy, verification engine and usage ledger.

This is the call path an app-blocking front end uses. The gate owns no
global state; each user session constructs one around its own ledger.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from wiqayah.config import WiqayahSettings, get_settings
from wiqayah.core.ledger import UsageLedger
from wiqayah.core.tiers import TierPolicy
from wiqayah.core.verifier import VerificationEngine
from wiqayah.models import DailyStats, DhikrRequirement, DhikrSession, VerificationVerdict

logger = logging.getLogger(__name__)


class DhikrGate:
    """
    Decides what must be recited, verifies it and records the outcome.

    Example:
        gate = DhikrGate(UsageLedger(state))
        gate.check_reset(latest_fajr)
        if gate.can_unlock():
            requirement = gate.required_dhikr()
            verdict = gate.submit(transcript, requirement, app_id="com.burbn.instagram")
    """

    def __init__(
        self,
        ledger: UsageLedger,
        policy: Optional[TierPolicy] = None,
        engine: Optional[VerificationEngine] = None,
        settings: Optional[WiqayahSettings] = None,
        on_session: Optional[Callable[[DhikrSession], None]] = None,
    ):
        """
        Args:
            ledger: The user's ledger (mutated by submit and emergency_bypass)
            policy: Tier policy (default built from settings)
            engine: Verification engine (default built from settings)
            settings: Settings used for the defaults
            on_session: Called with each attempt record, e.g. to persist it
        """
        settings = settings or get_settings()
        self.ledger = ledger
        self.policy = policy or TierPolicy(settings=settings)
        self.engine = engine or VerificationEngine(settings=settings)
        self.on_session = on_session
        self.sessions: list[DhikrSession] = []

    def required_dhikr(self) -> DhikrRequirement:
        """Requirement for the next unlock given today's usage and debt."""
        state = self.ledger.state
        return self.policy.required_dhikr(state.minutes_used_today, state.dhikr_debt)

    def can_unlock(self) -> bool:
        return self.ledger.can_unlock()

    def submit(
        self,
        transcript: str,
        requirement: Optional[DhikrRequirement] = None,
        app_id: Optional[str] = None,
    ) -> VerificationVerdict:
        """
        Verify a transcript and record the result in the ledger.

        On success the unlock is counted, one unit of debt is paid down and
        the completion is counted. Every attempt is appended to ``sessions``.

        Args:
            transcript: Speech-to-text output for the attempt
            requirement: Requirement shown to the user (defaults to required_dhikr())
            app_id: App whose unlock was requested

        Returns:
            The verdict
        """
        requirement = requirement or self.required_dhikr()
        report = self.engine.evaluate(transcript, requirement)
        verdict = report.verdict

        if verdict.is_success:
            self.ledger.record_unlock()
            self.ledger.pay_down_debt()
            self.ledger.record_dhikr_completion()

        session = DhikrSession(
            dhikr_id=requirement.id,
            dhikr_name=requirement.display_name,
            category=requirement.category,
            was_successful=verdict.is_success,
            recognition_accuracy=report.similarity if verdict.is_success else 0.0,
            app_id=app_id,
        )
        self.sessions.append(session)
        if self.on_session is not None:
            self.on_session(session)

        logger.info("Dhikr attempt for %s: %s", app_id or "unknown app", report)
        return verdict

    def emergency_bypass(self) -> bool:
        """Unlock without verification, accruing debt. False if none are left."""
        return self.ledger.consume_emergency_bypass()

    @property
    def remaining_bypasses(self) -> int:
        return self.ledger.state.emergency_bypasses_remaining

    @property
    def remaining_unlocks(self) -> Optional[int]:
        return self.ledger.remaining_unlocks

    def check_reset(self, reset_instant: datetime) -> Optional[DailyStats]:
        """
        Run the day-boundary check; call at least once per activation.

        ``sessions`` only holds the current day's attempts, so it is cleared
        when a new day starts. Use ``on_session`` to keep a longer history.
        """
        closed = self.ledger.reset_for_new_day(reset_instant)
        if closed is not None:
            self.sessions.clear()
        return closed

"""
Unit tests for data models.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError
from wiqayah.models import (
    VERDICT_ADAPTER,
    DailyStats,
    DhikrCategory,
    DhikrRequirement,
    DhikrSession,
    Failure,
    FailureReason,
    Partial,
    Success,
    UsageLedgerState,
)


class TestDhikrRequirement:
    """Test DhikrRequirement model."""

    def test_creation(self):
        """Test creating a requirement with defaults."""
        req = DhikrRequirement(id="x", display_name="X", script_text="سبحان الله", repetitions=3)
        assert req.acceptance_threshold == 0.7
        assert req.category == DhikrCategory.SIMPLE
        assert req.display_text == "X (3×)"
        assert str(req) == "Dhikr(x, 3×)"

    def test_single_display_text(self):
        """Test the display text of a single recitation."""
        req = DhikrRequirement(id="x", display_name="X", script_text="abc")
        assert req.display_text == "X"

    @pytest.mark.parametrize("field,value", [
        ("repetitions", 0),
        ("acceptance_threshold", 0.0),
        ("acceptance_threshold", 1.5),
        ("script_text", ""),
        ("id", ""),
    ])
    def test_invalid_values(self, field, value):
        """Test out-of-range values are rejected."""
        data = {"id": "x", "display_name": "X", "script_text": "abc", field: value}
        with pytest.raises(ValidationError):
            DhikrRequirement(**data)

    def test_frozen(self):
        """Test requirements are immutable."""
        req = DhikrRequirement(id="x", display_name="X", script_text="abc")
        with pytest.raises(ValidationError):
            req.repetitions = 5

    @pytest.mark.parametrize("category", list(DhikrCategory))
    def test_categories(self, category):
        """Test every category is accepted."""
        req = DhikrRequirement(id="x", display_name="X", script_text="abc", category=category)
        assert req.category == category


class TestVerdicts:
    """Test the verdict variants."""

    def test_success(self):
        """Test the success verdict."""
        verdict = Success()
        assert verdict.is_success
        assert not verdict.should_retry
        assert verdict.remaining_count is None
        assert "Barakallahu feek" in verdict.message

    def test_partial(self):
        """Test the partial verdict and its remaining count."""
        verdict = Partial(detected=1, required=3)
        assert verdict.is_partial
        assert verdict.should_retry
        assert verdict.remaining_count == 2
        assert verdict.message == "1/3 detected. Please repeat 2 more time(s)."

    @pytest.mark.parametrize("reason,message", [
        (FailureReason.NO_SPEECH, "No speech detected"),
        (FailureReason.LOW_CONFIDENCE, "Could not understand clearly"),
        (FailureReason.WRONG_PHRASE, "Incorrect phrase detected"),
    ])
    def test_failure_messages(self, reason, message):
        """Test the message of each failure reason."""
        verdict = Failure(reason=reason)
        assert verdict.is_failure
        assert verdict.should_retry
        assert verdict.message == message

    def test_partial_requires_one(self):
        """Test a partial needs at least one required recitation."""
        with pytest.raises(ValidationError):
            Partial(detected=0, required=0)

    def test_adapter_dispatches_on_kind(self):
        """Test the verdict adapter selects the variant by kind."""
        verdict = VERDICT_ADAPTER.validate_python({"kind": "failure", "reason": "no_speech"})
        assert verdict == Failure(reason=FailureReason.NO_SPEECH)
        raw = VERDICT_ADAPTER.dump_json(Partial(detected=2, required=3))
        assert VERDICT_ADAPTER.validate_json(raw) == Partial(detected=2, required=3)


class TestUsageLedgerState:
    """Test UsageLedgerState model."""

    def test_defaults(self):
        """Test the default field values."""
        state = UsageLedgerState()
        assert state.daily_limit_minutes == 60
        assert state.free_unlock_limit == 15
        assert state.emergency_bypasses_remaining == 3
        assert state.dhikr_debt == 0
        assert state.app_usage == {}

    @pytest.mark.parametrize("field,value", [
        ("daily_limit_minutes", 29),
        ("daily_limit_minutes", 121),
        ("dhikr_debt", 3),
        ("emergency_bypasses_remaining", 4),
        ("minutes_used_today", -1),
    ])
    def test_invalid_values(self, field, value):
        """Test out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            UsageLedgerState(**{field: value})


class TestDailyStats:
    """Test DailyStats model."""

    def test_completion_rate(self):
        """Test the share of unlocks that completed a dhikr."""
        stats = DailyStats(day=date(2024, 6, 21), unlocks_used=4, dhikr_completed=3)
        assert stats.dhikr_completion_rate == 0.75

    def test_completion_rate_without_unlocks(self):
        """Test the completion rate of a day without unlocks."""
        assert DailyStats(day=date(2024, 6, 21)).dhikr_completion_rate == 1.0

    def test_most_used_app(self):
        """Test the app with the most minutes."""
        stats = DailyStats(day=date(2024, 6, 21), app_usage_breakdown={"a": 5, "b": 12})
        assert stats.most_used_app == "b"
        assert DailyStats(day=date(2024, 6, 21)).most_used_app is None


class TestDhikrSession:
    """Test DhikrSession model."""

    def test_defaults(self):
        """Test the default field values."""
        session = DhikrSession(dhikr_id="subhanallah", dhikr_name="Subhanallah", category=DhikrCategory.SIMPLE)
        assert isinstance(session.timestamp, datetime)
        assert session.attempt_count == 1
        assert session.accuracy_percentage == "0%"

    def test_unique_ids(self):
        """Test every session gets its own id."""
        a = DhikrSession(dhikr_id="x", dhikr_name="X", category=DhikrCategory.SIMPLE)
        b = DhikrSession(dhikr_id="x", dhikr_name="X", category=DhikrCategory.SIMPLE)
        assert a.id != b.id

    def test_accuracy_percentage(self):
        """Test the rounded accuracy display."""
        session = DhikrSession(
            dhikr_id="x", dhikr_name="X", category=DhikrCategory.SIMPLE, recognition_accuracy=0.874
        )
        assert session.accuracy_percentage == "87%"

    def test_accuracy_bounds(self):
        """Test accuracy above 1.0 is rejected."""
        with pytest.raises(ValidationError):
            DhikrSession(dhikr_id="x", dhikr_name="X", category=DhikrCategory.SIMPLE, recognition_accuracy=1.2)

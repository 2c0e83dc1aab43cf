"""
Unit tests for JSON ledger persistence.
"""

from datetime import datetime, timedelta, timezone

import pytest
from wiqayah.config import WiqayahSettings
from wiqayah.core.ledger import UsageLedger
from wiqayah.exceptions import LedgerStoreError
from wiqayah.models import UsageLedgerState
from wiqayah.storage import JsonLedgerStore


@pytest.fixture
def store(tmp_path):
    return JsonLedgerStore(tmp_path / "ledger.json")


class TestJsonLedgerStore:
    """Test JsonLedgerStore persistence."""

    def test_load_missing_returns_none(self, store):
        """Test loading before the first save."""
        assert store.load() is None

    def test_save_then_load(self, store, ledger):
        """Test a saved record loads back unchanged."""
        ledger.record_usage_minutes("com.burbn.instagram", 17)
        ledger.consume_emergency_bypass()
        store.save(ledger.snapshot())

        loaded = store.load()
        assert loaded == ledger.state
        assert loaded.app_usage == {"com.burbn.instagram": 17}

    def test_aware_timestamp_survives(self, store):
        """Test the reset timestamp keeps its offset."""
        stamp = datetime(2024, 6, 21, 4, 14, tzinfo=timezone(timedelta(hours=3)))
        store.save(UsageLedgerState(last_reset_timestamp=stamp))
        assert store.load().last_reset_timestamp == stamp

    def test_save_replaces_previous(self, store):
        """Test a save replaces the previous record."""
        store.save(UsageLedgerState(minutes_used_today=5))
        store.save(UsageLedgerState(minutes_used_today=9))
        assert store.load().minutes_used_today == 9
        assert not store.path.with_suffix(".json.tmp").exists()

    def test_save_creates_parent_directory(self, tmp_path):
        """Test missing parent directories are created."""
        store = JsonLedgerStore(tmp_path / "nested" / "dir" / "ledger.json")
        store.save(UsageLedgerState())
        assert store.path.exists()

    def test_corrupt_file(self, store):
        """Test malformed JSON raises LedgerStoreError."""
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LedgerStoreError) as exc_info:
            store.load()
        assert exc_info.value.path == str(store.path)

    def test_undecodable_file(self, store):
        """Test a file that is not valid UTF-8 raises LedgerStoreError."""
        store.path.write_bytes(b'{"daily_limit_minutes": 60, "x": "\xff\xfe"}')
        with pytest.raises(LedgerStoreError):
            store.load()

    def test_invalid_record(self, store):
        """Test a record failing validation raises LedgerStoreError."""
        store.path.write_text('{"dhikr_debt": 7}', encoding="utf-8")
        with pytest.raises(LedgerStoreError):
            store.load()

    def test_load_or_create(self, tmp_path):
        """Test a missing file yields a fresh record from settings."""
        settings = WiqayahSettings(_env_file=None, daily_limit_minutes=45)
        store = JsonLedgerStore(tmp_path / "ledger.json", settings=settings)
        state = store.load_or_create()
        assert state.daily_limit_minutes == 45
        assert not store.path.exists()

    def test_default_path_from_settings(self, tmp_path):
        """Test the path defaults to the configured one."""
        settings = WiqayahSettings(_env_file=None, ledger_path=str(tmp_path / "from_settings.json"))
        store = JsonLedgerStore(settings=settings)
        assert store.path == tmp_path / "from_settings.json"

    def test_round_trip_through_ledger(self, store, settings):
        """Test a ledger reloads its saved unlock count."""
        ledger = UsageLedger(store.load_or_create(), settings=settings)
        ledger.record_unlock()
        store.save(ledger.snapshot())
        assert UsageLedger(store.load(), settings=settings).state.unlocks_used_today == 1

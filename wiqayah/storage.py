"""
JSON file persistence for the usage ledger record.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from wiqayah.config import WiqayahSettings, get_settings
from wiqayah.core.ledger import new_ledger_state
from wiqayah.exceptions import LedgerStoreError
from wiqayah.models import UsageLedgerState

logger = logging.getLogger(__name__)


class JsonLedgerStore:
    """
    Stores one UsageLedgerState as a JSON document.

    Example:
        store = JsonLedgerStore("ledger.json")
        ledger = UsageLedger(store.load_or_create())
        ...
        store.save(ledger.snapshot())
    """

    def __init__(self, path: str | Path | None = None, settings: Optional[WiqayahSettings] = None):
        self.settings = settings or get_settings()
        self.path = Path(path) if path is not None else self.settings.ledger_path

    def load(self) -> Optional[UsageLedgerState]:
        """
        Read the stored record.

        Returns:
            The record, or None if nothing has been saved yet

        Raises:
            LedgerStoreError: If the file cannot be read or does not hold a valid record
        """
        if not self.path.exists():
            return None
        try:
            raw = self.path.read_text(encoding="utf-8")
            return UsageLedgerState.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            raise LedgerStoreError(str(self.path), str(e)) from e

    def load_or_create(self) -> UsageLedgerState:
        """Read the stored record, or build a new one from settings defaults."""
        state = self.load()
        if state is None:
            logger.info("No ledger at %s, creating a new one", self.path)
            state = new_ledger_state(self.settings)
        return state

    def save(self, state: UsageLedgerState) -> None:
        """
        Write the record, replacing any previous one.

        Raises:
            LedgerStoreError: If the file cannot be written
        """
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(state.model_dump_json(indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            raise LedgerStoreError(str(self.path), str(e)) from e
        logger.debug("Ledger saved to %s", self.path)

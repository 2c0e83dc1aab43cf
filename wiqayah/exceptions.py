"""
Exceptions raised by the Wiqayah library.

Verification outcomes are never exceptions; these cover programmer errors
(bad configuration, unknown catalog ids) and persistence failures.
"""


class WiqayahError(Exception):
    """Base class for all Wiqayah errors."""


class ConfigurationError(WiqayahError):
    """Raised when components are wired with inconsistent configuration."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownDhikrError(WiqayahError, KeyError):
    """Raised when a dhikr id is not present in the catalog."""

    def __init__(self, dhikr_id: str):
        self.dhikr_id = dhikr_id
        super().__init__(f"Unknown dhikr id: {dhikr_id!r}")

    def __str__(self) -> str:
        return self.args[0]


class LedgerStoreError(WiqayahError):
    """Raised when a persisted ledger record cannot be read or written."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Ledger store error for {path}: {reason}")

"""Custom exception hierarchy for ledgerkit."""


class LedgerKitError(Exception):
    """Base exception for all ledgerkit errors."""


class InvalidArgumentError(LedgerKitError):
    """Raised when an operation receives an unusable argument."""


class DuplicateAccountError(InvalidArgumentError):
    """Raised when an account id is already registered in the ledger."""


class DuplicateRecordError(InvalidArgumentError):
    """Raised when a record id is already present in a registry that rejects duplicates."""


class InvalidStateError(LedgerKitError):
    """Raised when an entity is in an invalid state for the operation."""


class InsufficientFundsError(LedgerKitError):
    """Raised when a withdrawal would take a balance below its floor."""


class ConfigurationError(LedgerKitError):
    """Raised when configuration is invalid or missing."""


class SinkError(LedgerKitError):
    """Raised when a sink operation fails."""

"""Domain models for ledgerkit."""

from ledgerkit.models.banking import (
    Account,
    AccountStatus,
    AccountType,
    EntryDirection,
    LedgerEntry,
)
from ledgerkit.models.registry import GroupSummary, Record, RegistryReport

__all__ = [
    "Account",
    "AccountStatus",
    "AccountType",
    "EntryDirection",
    "GroupSummary",
    "LedgerEntry",
    "Record",
    "RegistryReport",
]

"""Banking domain models."""

from ledgerkit.models.banking.account import Account
from ledgerkit.models.banking.entry import LedgerEntry
from ledgerkit.models.banking.enums import AccountStatus, AccountType, EntryDirection

__all__ = [
    "Account",
    "AccountStatus",
    "AccountType",
    "EntryDirection",
    "LedgerEntry",
]

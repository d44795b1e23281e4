"""Ledger posting model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from ledgerkit.models.banking.enums import EntryDirection


@dataclass(frozen=True)
class LedgerEntry:
    """One balance movement on one account.

    Every successful deposit or withdrawal writes exactly one entry; a
    transfer writes a DEBIT and a CREDIT sharing the same ``transfer_id``.
    """

    entry_id: int
    account_id: str
    direction: EntryDirection
    amount: Decimal
    balance_after: Decimal
    transfer_id: str | None = None
    created_at: datetime = field(default_factory=datetime.now)

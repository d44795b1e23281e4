"""In-memory stores for accounts and records."""

from ledgerkit.store.ledger import Ledger
from ledgerkit.store.registry import Registry

__all__ = ["Ledger", "Registry"]

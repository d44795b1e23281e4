"""ledgerkit: in-memory ledger and queryable record registry."""

from ledgerkit.config import LedgerKitConfig
from ledgerkit.store import Ledger, Registry

__all__ = ["Ledger", "LedgerKitConfig", "Registry"]

__version__ = "0.1.0"

"""Bank transfer scenario: two accounts, two deposits, one transfer."""

import logging
import random
from decimal import Decimal
from typing import Any

from ledgerkit.config import LedgerConfig
from ledgerkit.generators import AccountGenerator
from ledgerkit.models.banking import AccountType
from ledgerkit.store import Ledger

logger = logging.getLogger(__name__)


class BankTransferScenario:
    """Open A001 (SAVINGS) and A002 (CHECKING), fund them and transfer.

    Ends with both accounts at 35000 and four ledger entries. With
    ``num_accounts`` set, that many generated accounts are also
    registered and each gets one opening deposit.
    """

    def __init__(
        self,
        config: LedgerConfig | None = None,
        transfer_amount: Decimal = Decimal("15000"),
        num_accounts: int = 0,
        seed: int | None = None,
    ) -> None:
        """Initialize the bank scenario.

        Parameters
        ----------
        config : LedgerConfig | None
            Ledger policy configuration.
        transfer_amount : Decimal
            Amount moved from A001 to A002.
        num_accounts : int
            Number of extra generated accounts.
        seed : int | None
            Random seed for the generated accounts and their deposits.
        """
        self.ledger = Ledger(config=config or LedgerConfig())
        self.transfer_amount = transfer_amount
        self.num_accounts = num_accounts
        self.seed = seed

    def generate(self) -> Ledger:
        """Run the deposits and the transfer, returning the ledger."""
        savings = self.ledger.open_account("A001", AccountType.SAVINGS)
        checking = self.ledger.open_account("A002", AccountType.CHECKING)

        self.ledger.deposit(savings, Decimal("50000"))
        self.ledger.deposit(checking, Decimal("20000"))
        self.ledger.transfer(savings, checking, self.transfer_amount)

        logger.info("After transfer: %s, %s", savings, checking)

        if self.num_accounts:
            self._open_generated_accounts()
        return self.ledger

    def _open_generated_accounts(self) -> None:
        generator = AccountGenerator(seed=self.seed, min_balance=self.ledger.config.min_balance)
        for account in generator.generate_batch(self.num_accounts):
            self.ledger.add_account(account)
            self.ledger.deposit(account, random.randint(1, 500) * 1000)

        logger.info("Opened %d generated accounts", self.num_accounts)

    def export(self, sinks: list[Any]) -> None:
        """Export accounts and ledger entries to sinks."""
        for sink in sinks:
            sink.write_batch("accounts", list(self.ledger.accounts.values()))
            sink.write_batch("ledger_entries", self.ledger.entries)

        logger.info("Exported ledger to %d sinks", len(sinks))

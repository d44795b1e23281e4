"""Account generator for the banking domain."""

import random
from decimal import Decimal
from typing import Iterator

from ledgerkit.config import DEFAULT_MIN_BALANCE
from ledgerkit.generators.base import BaseGenerator
from ledgerkit.generators.pool import FakerPool
from ledgerkit.models.banking import Account, AccountType


class AccountGenerator(BaseGenerator):
    """Generate synthetic ACTIVE accounts with zero balance.

    Account types:
    - CHECKING: ~65%
    - SAVINGS: ~35%
    """

    ACCOUNT_TYPES = [AccountType.CHECKING, AccountType.SAVINGS]
    ACCOUNT_TYPE_WEIGHTS = [0.65, 0.35]

    def __init__(
        self,
        seed: int | None = None,
        pool: FakerPool | None = None,
        min_balance: Decimal = DEFAULT_MIN_BALANCE,
    ) -> None:
        super().__init__(seed, pool=pool)
        self.min_balance = min_balance

    def generate(self) -> Account:
        """Generate a single account."""
        account_type = random.choices(
            self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
        )[0]
        return Account(
            account_id=self.pool.uuid(),
            account_type=account_type,
            min_balance=self.min_balance,
        )

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate multiple accounts."""
        for _ in range(count):
            yield self.generate()

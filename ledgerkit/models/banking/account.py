"""Account model for the banking domain."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from ledgerkit.config import DEFAULT_MIN_BALANCE
from ledgerkit.exceptions import InvalidArgumentError
from ledgerkit.models.banking.enums import AccountStatus, AccountType


@dataclass(eq=False)
class Account:
    """Monetary account held by a ``Ledger``.

    Identity is the account id: two accounts with the same id compare
    equal and hash alike whatever their balance or status.

    Status only moves towards more restrictive values:
    - ACTIVE: deposits and withdrawals allowed
    - FROZEN: no money movement, may still be closed
    - CLOSED: terminal
    """

    account_id: str
    account_type: AccountType
    status: AccountStatus = AccountStatus.ACTIVE
    balance: Decimal = field(default_factory=lambda: Decimal("0"))
    min_balance: Decimal = DEFAULT_MIN_BALANCE
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.account_id, str) or not self.account_id.strip():
            raise InvalidArgumentError("Account id must be a non-blank string")
        if self.account_type is None:
            raise InvalidArgumentError("Account type is required")
        try:
            self.account_type = AccountType(self.account_type)
            self.status = AccountStatus(self.status)
        except ValueError as exc:
            raise InvalidArgumentError(str(exc)) from exc

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self.account_id == other.account_id

    def __hash__(self) -> int:
        return hash(self.account_id)

    def __str__(self) -> str:
        return (
            f"Account{{id='{self.account_id}', type='{self.account_type.value}', "
            f"status='{self.status.value}', balance='{self.balance}', "
            f"minBalance='{self.min_balance}'}}"
        )

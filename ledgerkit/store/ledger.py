"""Ledger: in-memory account store with balance invariants and transfers."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation

from ledgerkit.config import LedgerConfig
from ledgerkit.exceptions import (
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
    LedgerKitError,
)
from ledgerkit.models.banking import (
    Account,
    AccountStatus,
    AccountType,
    EntryDirection,
    LedgerEntry,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _rejected(error: LedgerKitError) -> LedgerKitError:
    logger.warning("Rejected: %s", error)
    return error


@dataclass
class Ledger:
    """In-memory store for accounts with controlled balance mutation.

    Invariants:
    - account ids are unique within a ledger
    - a balance never drops below its floor (zero, or the account's
      ``min_balance`` when ``config.enforce_min_balance`` is set)
    - money only moves while an account is ACTIVE
    - ``transfer`` is all-or-nothing: both legs are validated before
      either account is touched

    Not thread-safe. Concurrent callers must serialize mutations.
    """

    config: LedgerConfig = field(default_factory=LedgerConfig)
    accounts: dict[str, Account] = field(default_factory=dict)
    entries: list[LedgerEntry] = field(init=False, default_factory=list)

    _account_entries: dict[str, list[int]] = field(init=False, default_factory=dict)
    _transfer_seq: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        # constructor-supplied accounts go through the same checks as add_account
        supplied = self.accounts
        self.accounts = {}
        for account in supplied.values():
            self.add_account(account)

    def add_account(self, account: Account) -> Account:
        """Register an externally constructed account."""
        if account is None:
            raise _rejected(InvalidArgumentError("Account required"))
        if account.account_id in self.accounts:
            raise _rejected(DuplicateAccountError(f"Account {account.account_id} already exists"))

        self.accounts[account.account_id] = account
        self._account_entries[account.account_id] = []
        logger.debug("Registered account %s (%s)", account.account_id, account.account_type.value)
        return account

    def open_account(self, account_id: str, account_type: AccountType) -> Account:
        """Create and register a new ACTIVE account with a zero balance."""
        account = Account(
            account_id=account_id,
            account_type=account_type,
            min_balance=self.config.min_balance,
        )
        return self.add_account(account)

    def get_account(self, account_id: str) -> Account | None:
        """Return the account with the given id, or None."""
        return self.accounts.get(account_id)

    def deposit(self, account: Account | str, amount: Decimal | int | str) -> LedgerEntry:
        """Credit ``amount`` to an ACTIVE account."""
        target = self._resolve(account)
        self._require_active(target)
        value = self._to_amount(amount)
        return self._post(target, EntryDirection.CREDIT, value)

    def withdraw(self, account: Account | str, amount: Decimal | int | str) -> LedgerEntry:
        """Debit ``amount`` from an ACTIVE account with sufficient funds."""
        source = self._resolve(account)
        self._require_active(source)
        value = self._to_amount(amount)
        self._require_funds(source, value)
        return self._post(source, EntryDirection.DEBIT, value)

    def freeze(self, account: Account | str) -> Account:
        """Move an ACTIVE account to FROZEN."""
        target = self._resolve(account)
        if target.status != AccountStatus.ACTIVE:
            raise _rejected(
                InvalidStateError(f"Account {target.account_id} cannot be frozen from {target.status.value}")
            )
        return self._set_status(target, AccountStatus.FROZEN)

    def close(self, account: Account | str) -> Account:
        """Move an ACTIVE or FROZEN account to CLOSED."""
        target = self._resolve(account)
        if target.status == AccountStatus.CLOSED:
            raise _rejected(InvalidStateError(f"Account {target.account_id} is already CLOSED"))
        return self._set_status(target, AccountStatus.CLOSED)

    def transfer(
        self,
        source: Account | str | None,
        target: Account | str | None,
        amount: Decimal | int | str,
    ) -> tuple[LedgerEntry, LedgerEntry]:
        """Move ``amount`` from ``source`` to ``target``.

        Every precondition of both legs is checked before the debit is
        posted, so a failed transfer leaves both balances untouched.

        Returns
        -------
        tuple[LedgerEntry, LedgerEntry]
            The DEBIT entry on ``source`` and the CREDIT entry on ``target``.
        """
        debit_account = self._resolve(source)
        credit_account = self._resolve(target)
        if debit_account.account_id == credit_account.account_id:
            raise _rejected(InvalidArgumentError("Cannot transfer to the same account"))

        value = self._to_amount(amount)
        self._require_active(debit_account)
        self._require_active(credit_account)
        self._require_funds(debit_account, value)

        self._transfer_seq += 1
        transfer_id = f"T{self._transfer_seq:06d}"
        debit = self._post(debit_account, EntryDirection.DEBIT, value, transfer_id)
        credit = self._post(credit_account, EntryDirection.CREDIT, value, transfer_id)
        logger.info(
            "Transfer %s: %s -> %s amount=%s",
            transfer_id,
            debit_account.account_id,
            credit_account.account_id,
            value,
            extra={"transfer_id": transfer_id, "amount": value},
        )
        return debit, credit

    # Query methods
    def get_account_entries(self, account_id: str) -> list[LedgerEntry]:
        """Get all entries posted to an account, oldest first."""
        indices = self._account_entries.get(account_id, [])
        return [self.entries[i] for i in indices]

    def total_balance(self) -> Decimal:
        """Sum of all account balances."""
        return sum((a.balance for a in self.accounts.values()), ZERO)

    def summary(self) -> dict[str, int]:
        """Return summary counts of accounts per status and of entries."""
        counts = {"accounts": len(self.accounts)}
        for status in AccountStatus:
            counts[status.value.lower()] = sum(
                1 for a in self.accounts.values() if a.status == status
            )
        counts["entries"] = len(self.entries)
        return counts

    # Internal helpers
    def _resolve(self, account: Account | str | None) -> Account:
        if account is None:
            raise _rejected(InvalidArgumentError("Account required"))
        account_id = account.account_id if isinstance(account, Account) else account
        held = self.accounts.get(account_id)
        if held is None:
            raise _rejected(InvalidArgumentError(f"Account {account_id} is not held by this ledger"))
        return held

    def _floor(self, account: Account) -> Decimal:
        return account.min_balance if self.config.enforce_min_balance else ZERO

    def _require_active(self, account: Account) -> None:
        if account.status != AccountStatus.ACTIVE:
            raise _rejected(
                InvalidStateError(f"Account {account.account_id} is not active: {account.status.value}")
            )

    def _require_funds(self, account: Account, amount: Decimal) -> None:
        floor = self._floor(account)
        if account.balance - amount < floor:
            raise _rejected(
                InsufficientFundsError(
                    f"Insufficient funds in {account.account_id}: balance {account.balance}, "
                    f"requested {amount}, floor {floor}"
                )
            )

    @staticmethod
    def _to_amount(amount: Decimal | int | str) -> Decimal:
        # bool is an int subclass; floats are not accepted
        if isinstance(amount, bool) or not isinstance(amount, (Decimal, int, str)):
            raise _rejected(InvalidArgumentError(f"Amount must be Decimal, int or str, got {amount!r}"))
        try:
            value = Decimal(amount)
        except InvalidOperation as exc:
            raise _rejected(InvalidArgumentError(f"Amount is not a number: {amount!r}")) from exc
        if not value.is_finite() or value <= 0:
            raise _rejected(InvalidArgumentError(f"Amount must be > 0, got {amount!r}"))
        return value

    def _post(
        self,
        account: Account,
        direction: EntryDirection,
        amount: Decimal,
        transfer_id: str | None = None,
    ) -> LedgerEntry:
        if direction == EntryDirection.CREDIT:
            new_balance = account.balance + amount
        else:
            new_balance = account.balance - amount

        entry = LedgerEntry(
            entry_id=len(self.entries) + 1,
            account_id=account.account_id,
            direction=direction,
            amount=amount,
            balance_after=new_balance,
            transfer_id=transfer_id,
        )
        self._account_entries.setdefault(account.account_id, []).append(len(self.entries))
        self.entries.append(entry)
        account.balance = new_balance
        account.updated_at = entry.created_at
        logger.debug(
            "%s %s %s -> balance %s",
            direction.value,
            account.account_id,
            amount,
            account.balance,
            extra={"account_id": account.account_id, "amount": amount, "transfer_id": transfer_id},
        )
        return entry

    def _set_status(self, account: Account, status: AccountStatus) -> Account:
        previous = account.status
        account.status = status
        account.updated_at = datetime.now()
        logger.info(
            "Account %s: %s -> %s",
            account.account_id,
            previous.value,
            status.value,
            extra={"account_id": account.account_id, "status": status.value},
        )
        return account

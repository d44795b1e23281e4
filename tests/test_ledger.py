"""Tests for the Ledger store."""

import logging
from decimal import Decimal

import pytest

from ledgerkit.config import LedgerConfig
from ledgerkit.exceptions import (
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidArgumentError,
    InvalidStateError,
)
from ledgerkit.models.banking import Account, AccountStatus, AccountType, EntryDirection
from ledgerkit.store import Ledger


class TestAccountRegistration:
    """Tests for opening and looking up accounts."""

    def test_open_account(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)

        assert account.status == AccountStatus.ACTIVE
        assert account.balance == Decimal("0")
        assert ledger.get_account("A001") is account

    def test_open_account_uses_configured_min_balance(self) -> None:
        ledger = Ledger(config=LedgerConfig(min_balance=Decimal("250")))

        account = ledger.open_account("A001", AccountType.CHECKING)

        assert account.min_balance == Decimal("250")

    def test_duplicate_id_rejected(self, ledger: Ledger) -> None:
        ledger.open_account("A001", AccountType.SAVINGS)

        with pytest.raises(DuplicateAccountError):
            ledger.add_account(Account(account_id="A001", account_type=AccountType.CHECKING))
        assert ledger.get_account("A001").account_type == AccountType.SAVINGS

    def test_add_none_rejected(self, ledger: Ledger) -> None:
        with pytest.raises(InvalidArgumentError):
            ledger.add_account(None)

    def test_constructor_accounts_are_registered(self) -> None:
        """Accounts passed to the constructor can be posted to and journaled."""
        a1 = Account(account_id="A001", account_type=AccountType.SAVINGS)
        a2 = Account(account_id="A002", account_type=AccountType.CHECKING)
        ledger = Ledger(accounts={"A001": a1, "A002": a2})

        ledger.deposit("A001", Decimal("10"))
        ledger.transfer("A001", "A002", Decimal("4"))

        assert a1.balance == Decimal("6")
        assert a2.balance == Decimal("4")
        assert [e.direction for e in ledger.get_account_entries("A001")] == [
            EntryDirection.CREDIT,
            EntryDirection.DEBIT,
        ]
        assert len(ledger.get_account_entries("A002")) == 1
        assert len(ledger.entries) == 3

    def test_constructor_accounts_keyed_by_their_own_id(self) -> None:
        account = Account(account_id="A001", account_type=AccountType.SAVINGS)

        ledger = Ledger(accounts={"wrong-key": account})

        assert ledger.get_account("A001") is account
        assert ledger.get_account("wrong-key") is None

    def test_constructor_duplicate_ids_rejected(self) -> None:
        with pytest.raises(DuplicateAccountError):
            Ledger(
                accounts={
                    "x": Account(account_id="A001", account_type=AccountType.SAVINGS),
                    "y": Account(account_id="A001", account_type=AccountType.CHECKING),
                }
            )

    def test_journal_fields_not_constructor_arguments(self) -> None:
        with pytest.raises(TypeError):
            Ledger(_transfer_seq=5)
        with pytest.raises(TypeError):
            Ledger(entries=[])

    def test_account_inserted_directly_still_journaled(self, ledger: Ledger) -> None:
        account = Account(account_id="A009", account_type=AccountType.SAVINGS)
        ledger.accounts["A009"] = account

        ledger.deposit(account, Decimal("7"))

        assert account.balance == Decimal("7")
        assert ledger.get_account_entries("A009")[0].balance_after == Decimal("7")

    def test_get_missing_account_returns_none(self, ledger: Ledger) -> None:
        assert ledger.get_account("nope") is None


class TestDeposit:
    """Tests for Ledger.deposit."""

    def test_deposit_increases_balance(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)

        entry = ledger.deposit(account, Decimal("50000"))

        assert account.balance == Decimal("50000")
        assert entry.direction == EntryDirection.CREDIT
        assert entry.balance_after == Decimal("50000")
        assert account.updated_at is not None

    def test_deposit_by_id(self, ledger: Ledger) -> None:
        ledger.open_account("A001", AccountType.SAVINGS)

        ledger.deposit("A001", 100)

        assert ledger.get_account("A001").balance == Decimal("100")

    def test_deposit_accepts_numeric_string(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)

        ledger.deposit(account, "12.50")

        assert account.balance == Decimal("12.50")

    @pytest.mark.parametrize("amount", [0, -1, Decimal("-0.01"), "0", "abc", None, 1.5, True, "NaN", "Infinity"])
    def test_invalid_amount_rejected(self, ledger: Ledger, amount) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)

        with pytest.raises(InvalidArgumentError):
            ledger.deposit(account, amount)
        assert account.balance == Decimal("0")
        assert ledger.entries == []

    @pytest.mark.parametrize("freeze_first", [True, False])
    def test_deposit_into_inactive_account_rejected(self, ledger: Ledger, freeze_first: bool) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.deposit(account, Decimal("10"))
        if freeze_first:
            ledger.freeze(account)
        else:
            ledger.close(account)

        with pytest.raises(InvalidStateError):
            ledger.deposit(account, Decimal("5"))
        assert account.balance == Decimal("10")

    def test_inactive_checked_before_amount(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.freeze(account)

        with pytest.raises(InvalidStateError):
            ledger.deposit(account, Decimal("-1"))

    def test_unknown_account_rejected(self, ledger: Ledger) -> None:
        stray = Account(account_id="X999", account_type=AccountType.SAVINGS)

        with pytest.raises(InvalidArgumentError):
            ledger.deposit(stray, Decimal("10"))
        with pytest.raises(InvalidArgumentError):
            ledger.deposit(None, Decimal("10"))


class TestWithdraw:
    """Tests for Ledger.withdraw."""

    def test_withdraw_decreases_balance(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.deposit(account, Decimal("100"))

        entry = ledger.withdraw(account, Decimal("40"))

        assert account.balance == Decimal("60")
        assert entry.direction == EntryDirection.DEBIT
        assert entry.balance_after == Decimal("60")

    def test_withdraw_to_exactly_zero(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.deposit(account, Decimal("100"))

        ledger.withdraw(account, Decimal("100"))

        assert account.balance == Decimal("0")

    def test_overdraw_rejected_and_balance_unchanged(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.deposit(account, Decimal("100"))

        with pytest.raises(InsufficientFundsError):
            ledger.withdraw(account, Decimal("100.01"))
        assert account.balance == Decimal("100")
        assert len(ledger.entries) == 1

    def test_withdraw_from_frozen_rejected(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.deposit(account, Decimal("100"))
        ledger.freeze(account)

        with pytest.raises(InvalidStateError):
            ledger.withdraw(account, Decimal("1"))
        assert account.balance == Decimal("100")

    def test_enforced_min_balance_floor(self) -> None:
        ledger = Ledger(config=LedgerConfig(min_balance=Decimal("1000"), enforce_min_balance=True))
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.deposit(account, Decimal("1500"))

        ledger.withdraw(account, Decimal("500"))
        with pytest.raises(InsufficientFundsError):
            ledger.withdraw(account, Decimal("0.01"))
        assert account.balance == Decimal("1000")

    def test_balance_never_negative_over_sequence(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.CHECKING)
        operations = [
            ("deposit", 30),
            ("withdraw", 10),
            ("withdraw", 25),
            ("deposit", 5),
            ("withdraw", 25),
            ("withdraw", 1),
        ]
        for op, amount in operations:
            try:
                getattr(ledger, op)(account, amount)
            except InsufficientFundsError:
                pass
            assert account.balance >= 0

        assert account.balance == Decimal("0")


class TestStatusTransitions:
    """Tests for freeze/close state machine."""

    def test_freeze_active(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)

        ledger.freeze(account)

        assert account.status == AccountStatus.FROZEN
        assert not account.is_active

    def test_close_active(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)

        ledger.close(account)

        assert account.status == AccountStatus.CLOSED

    def test_close_frozen(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.freeze(account)

        ledger.close(account)

        assert account.status == AccountStatus.CLOSED

    def test_freeze_frozen_rejected(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.freeze(account)

        with pytest.raises(InvalidStateError):
            ledger.freeze(account)

    def test_closed_is_terminal(self, ledger: Ledger) -> None:
        account = ledger.open_account("A001", AccountType.SAVINGS)
        ledger.close(account)

        with pytest.raises(InvalidStateError):
            ledger.freeze(account)
        with pytest.raises(InvalidStateError):
            ledger.close(account)
        assert account.status == AccountStatus.CLOSED

    def test_closed_account_kept(self, ledger: Ledger) -> None:
        ledger.open_account("A001", AccountType.SAVINGS)
        ledger.close("A001")

        assert ledger.get_account("A001") is not None


class TestTransfer:
    """Tests for Ledger.transfer."""

    def test_end_to_end_example(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        a1, a2 = funded_pair

        ledger.transfer(a1, a2, Decimal("15000"))

        assert a1.balance == Decimal("35000")
        assert a2.balance == Decimal("35000")

    def test_transfer_entries(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        a1, a2 = funded_pair

        debit, credit = ledger.transfer("A001", "A002", "100")

        assert debit.direction == EntryDirection.DEBIT
        assert debit.account_id == "A001"
        assert credit.direction == EntryDirection.CREDIT
        assert credit.account_id == "A002"
        assert debit.transfer_id == credit.transfer_id is not None
        assert ledger.get_account_entries("A001")[-1] == debit

    def test_sum_invariant(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        a1, a2 = funded_pair
        before = ledger.total_balance()

        ledger.transfer(a2, a1, Decimal("19999.99"))

        assert ledger.total_balance() == before
        assert a2.balance == Decimal("0.01")

    def test_same_account_rejected(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        a1, _ = funded_pair

        with pytest.raises(InvalidArgumentError):
            ledger.transfer(a1, a1, Decimal("10"))
        with pytest.raises(InvalidArgumentError):
            ledger.transfer(a1, "A001", Decimal("10"))
        assert a1.balance == Decimal("50000")

    def test_missing_account_rejected(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        a1, a2 = funded_pair

        with pytest.raises(InvalidArgumentError):
            ledger.transfer(None, a2, Decimal("10"))
        with pytest.raises(InvalidArgumentError):
            ledger.transfer(a1, None, Decimal("10"))
        with pytest.raises(InvalidArgumentError):
            ledger.transfer(a1, "ghost", Decimal("10"))
        assert a1.balance == Decimal("50000")

    def test_frozen_target_leaves_source_untouched(
        self, ledger: Ledger, funded_pair: tuple[Account, Account]
    ) -> None:
        a1, a2 = funded_pair
        ledger.freeze(a2)
        entries_before = len(ledger.entries)

        with pytest.raises(InvalidStateError):
            ledger.transfer(a1, a2, Decimal("15000"))

        assert a1.balance == Decimal("50000")
        assert a2.balance == Decimal("20000")
        assert len(ledger.entries) == entries_before

    def test_closed_source_rejected(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        a1, a2 = funded_pair
        ledger.close(a1)

        with pytest.raises(InvalidStateError):
            ledger.transfer(a1, a2, Decimal("1"))
        assert a2.balance == Decimal("20000")

    def test_insufficient_funds_rejected(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        a1, a2 = funded_pair

        with pytest.raises(InsufficientFundsError):
            ledger.transfer(a2, a1, Decimal("20000.01"))
        assert a1.balance == Decimal("50000")
        assert a2.balance == Decimal("20000")

    def test_rejection_logged_as_warning(
        self, ledger: Ledger, funded_pair: tuple[Account, Account], caplog: pytest.LogCaptureFixture
    ) -> None:
        a1, _ = funded_pair

        with caplog.at_level(logging.WARNING, logger="ledgerkit"):
            with pytest.raises(InvalidArgumentError):
                ledger.transfer(a1, a1, Decimal("1"))

        assert any("same account" in r.getMessage() for r in caplog.records)


class TestQueries:
    """Tests for ledger query helpers."""

    def test_get_account_entries(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        entries = ledger.get_account_entries("A001")

        assert len(entries) == 1
        assert entries[0].amount == Decimal("50000")
        assert ledger.get_account_entries("unknown") == []

    def test_entry_ids_sequential(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        ledger.transfer("A001", "A002", 1)

        assert [e.entry_id for e in ledger.entries] == [1, 2, 3, 4]

    def test_summary(self, ledger: Ledger, funded_pair: tuple[Account, Account]) -> None:
        ledger.open_account("A003", AccountType.SAVINGS)
        ledger.freeze("A002")
        ledger.close("A003")

        assert ledger.summary() == {
            "accounts": 3,
            "active": 1,
            "frozen": 1,
            "closed": 1,
            "entries": 2,
        }

    def test_total_balance_empty(self, ledger: Ledger) -> None:
        assert ledger.total_balance() == Decimal("0")

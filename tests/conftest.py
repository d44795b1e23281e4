"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from ledgerkit.models.banking import Account, AccountType
from ledgerkit.models.registry import Record
from ledgerkit.store import Ledger, Registry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def ledger() -> Ledger:
    """Create a fresh ledger for each test."""
    return Ledger()


@pytest.fixture
def funded_pair(ledger: Ledger) -> tuple[Account, Account]:
    """A001 (SAVINGS, 50000) and A002 (CHECKING, 20000)."""
    a1 = ledger.open_account("A001", AccountType.SAVINGS)
    a2 = ledger.open_account("A002", AccountType.CHECKING)
    ledger.deposit(a1, Decimal("50000"))
    ledger.deposit(a2, Decimal("20000"))
    return a1, a2


@pytest.fixture
def students() -> list[Record]:
    """The six sample students."""
    return [
        Record(101, "An", 19, "CS", 3.4),
        Record(102, "Binh", 20, "Math", 3.8),
        Record(103, "Chi", 21, "CS", 3.9),
        Record(104, "Dung", 20, "Physics", 3.2),
        Record(105, "Hoa", 19, "Math", 3.1),
        Record(106, "Linh", 22, "CS", 3.7),
    ]


@pytest.fixture
def registry(students: list[Record]) -> Registry:
    """Registry seeded with the sample students."""
    reg = Registry()
    for s in students:
        reg.add(s)
    return reg

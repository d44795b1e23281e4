"""Enumeration types for banking entities."""

from enum import Enum


class AccountType(str, Enum):
    SAVINGS = "SAVINGS"
    CHECKING = "CHECKING"


class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    FROZEN = "FROZEN"
    CLOSED = "CLOSED"


class EntryDirection(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"

"""End-to-end scenarios exercising the ledger and the registry."""

from ledgerkit.scenarios.banking import BankTransferScenario
from ledgerkit.scenarios.registry import SAMPLE_STUDENTS, StudentRegistryScenario

__all__ = ["BankTransferScenario", "SAMPLE_STUDENTS", "StudentRegistryScenario"]

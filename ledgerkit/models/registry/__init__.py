"""Registry domain models."""

from ledgerkit.models.registry.record import Record
from ledgerkit.models.registry.report import GroupSummary, RegistryReport

__all__ = ["GroupSummary", "Record", "RegistryReport"]

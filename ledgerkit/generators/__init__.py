"""Synthetic data generators."""

from ledgerkit.generators.banking import AccountGenerator
from ledgerkit.generators.pool import FakerPool
from ledgerkit.generators.registry import RecordGenerator

__all__ = ["AccountGenerator", "FakerPool", "RecordGenerator"]

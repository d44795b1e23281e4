"""Output sinks for exporting ledger and registry data."""

from ledgerkit.sinks.console import ConsoleSink
from ledgerkit.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "JsonFileSink"]

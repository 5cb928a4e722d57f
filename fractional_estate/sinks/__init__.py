"""Output sinks for exporting ledger events."""

from fractional_estate.sinks.console import ConsoleSink
from fractional_estate.sinks.json_file import JsonFileSink
from fractional_estate.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]

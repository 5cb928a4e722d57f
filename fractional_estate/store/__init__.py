"""In-memory state shared by the ledger components."""

from fractional_estate.store.state import LedgerState

__all__ = ["LedgerState"]

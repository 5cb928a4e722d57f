"""fractional-estate: fractional-ownership ledger for registered properties."""

from fractional_estate.ledger.service import FractionalLedger

__version__ = "0.1.0"

__all__ = ["FractionalLedger", "__version__"]

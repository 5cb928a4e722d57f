"""Ledger components and the FractionalLedger facade."""

from fractional_estate.ledger.authorization import AuthorizationGate
from fractional_estate.ledger.events import EventJournal
from fractional_estate.ledger.governance import GovernanceEngine
from fractional_estate.ledger.income import IncomeDistributor
from fractional_estate.ledger.marketplace import Marketplace
from fractional_estate.ledger.ownership import OwnershipLedger
from fractional_estate.ledger.registry import PropertyRegistry
from fractional_estate.ledger.service import FractionalLedger

__all__ = [
    "AuthorizationGate",
    "EventJournal",
    "FractionalLedger",
    "GovernanceEngine",
    "IncomeDistributor",
    "Marketplace",
    "OwnershipLedger",
    "PropertyRegistry",
]

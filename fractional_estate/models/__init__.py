"""Domain models for the fractional-ownership ledger."""

from fractional_estate.models.base import Event
from fractional_estate.models.enums import PropertyStatus, ProposalStatus, Role
from fractional_estate.models.listing import Listing
from fractional_estate.models.property import Property, PropertyMetadata
from fractional_estate.models.proposal import Proposal
from fractional_estate.models.statement import OwnershipRecord, RentalIncomeRecord

__all__ = [
    "Event",
    "Listing",
    "OwnershipRecord",
    "Property",
    "PropertyMetadata",
    "PropertyStatus",
    "Proposal",
    "ProposalStatus",
    "RentalIncomeRecord",
    "Role",
]

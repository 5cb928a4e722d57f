"""Per-holder statement records."""

from dataclasses import dataclass


@dataclass
class OwnershipRecord:
    property_id: int
    property_name: str
    shares: int


@dataclass
class RentalIncomeRecord:
    property_id: int
    property_name: str
    income: int

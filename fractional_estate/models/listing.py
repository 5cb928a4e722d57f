"""Marketplace listing model."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Listing:
    """Open sell offer for shares of a property.

    The amount is not escrowed; the seller's balance is checked again
    when a purchase settles.
    """

    property_id: int
    seller: str
    amount: int
    price_per_share: int
    listed_at: datetime = field(default_factory=datetime.now)

    @property
    def total_price(self) -> int:
        return self.amount * self.price_per_share

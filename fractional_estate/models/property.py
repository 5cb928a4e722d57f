"""Property model for fractional ownership."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from fractional_estate.models.enums import PropertyStatus


@dataclass
class PropertyMetadata:
    """Free-form descriptive fields. Mutable, no invariants."""

    location: str
    description: str


@dataclass
class Property:
    """Registered property split into a fixed number of shares.

    ``shares_available`` counts shares not yet issued to any holder and
    always stays within ``0..total_shares``.
    """

    property_id: int
    name: str
    total_shares: int
    shares_available: int
    metadata: PropertyMetadata
    status: PropertyStatus = PropertyStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def shares_issued(self) -> int:
        return self.total_shares - self.shares_available

    def snapshot(self) -> "Property":
        """Return a detached copy safe to hand out to callers."""
        return replace(self, metadata=replace(self.metadata))

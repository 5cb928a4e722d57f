"""Property generator for fractional offerings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from fractional_estate.generators.base import BaseGenerator
from fractional_estate.models import PropertyMetadata


@dataclass
class PropertyOffering:
    """Arguments for registering a synthetic property."""

    name: str
    total_shares: int
    metadata: PropertyMetadata


class PropertyGenerator(BaseGenerator):
    """Generate synthetic properties to register on a ledger."""

    PROPERTY_KINDS = ["Apartments", "Lofts", "Residences", "Plaza", "Court", "Tower"]
    SHARE_COUNTS = [100, 250, 500, 1000, 10000]

    def generate(self) -> PropertyOffering:
        """Generate a single property offering.

        Returns
        -------
        PropertyOffering
            Name, share count and metadata for ``register_property``.
        """
        street = self.fake.street_name()
        return PropertyOffering(
            name=f"{street} {self.rng.choice(self.PROPERTY_KINDS)}",
            total_shares=self.rng.choice(self.SHARE_COUNTS),
            metadata=PropertyMetadata(
                location=f"{self.fake.city()}, {self.fake.country_code()}",
                description=self.fake.sentence(nb_words=10),
            ),
        )

    def generate_batch(self, count: int) -> Iterator[PropertyOffering]:
        for _ in range(count):
            yield self.generate()

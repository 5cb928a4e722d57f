"""Investor identity generator."""

from __future__ import annotations

from fractional_estate.generators.base import BaseGenerator


class InvestorGenerator(BaseGenerator):
    """Generate opaque investor identities."""

    def generate(self) -> str:
        return self.fake.uuid4()

    def generate_batch(self, count: int) -> list[str]:
        """Generate ``count`` distinct identities."""
        identities: list[str] = []
        seen: set[str] = set()
        while len(identities) < count:
            identity = self.generate()
            if identity not in seen:
                seen.add(identity)
                identities.append(identity)
        return identities

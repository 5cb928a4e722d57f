"""Process-wide ledger state with explicit ownership."""

from dataclasses import dataclass, field

from fractional_estate.models import Listing, Property, Proposal, Role

# (property_id, holder)
HolderKey = tuple[int, str]


@dataclass
class LedgerState:
    """In-memory maps backing every ledger component.

    One instance is created per ledger and injected into each component.
    Components mutate it only through their own operations; the facade
    never hands these containers to callers.
    """

    # Registry
    properties: dict[int, Property] = field(default_factory=dict)

    # Ownership: absent and zero mean the same thing
    ownership: dict[HolderKey, int] = field(default_factory=dict)

    # Income
    rental_income: dict[int, int] = field(default_factory=dict)
    unclaimed_income: dict[HolderKey, int] = field(default_factory=dict)

    # Marketplace, insertion ordered
    listings: list[Listing] = field(default_factory=list)

    # Governance
    proposals: dict[int, Proposal] = field(default_factory=dict)

    # Authorization
    roles: dict[str, Role] = field(default_factory=dict)
    kyc: dict[str, bool] = field(default_factory=dict)
    bootstrapped: bool = False

    _next_property_id: int = 1
    _next_proposal_id: int = 1

    def allocate_property_id(self) -> int:
        """Return the next property id and advance the counter."""
        property_id = self._next_property_id
        self._next_property_id += 1
        return property_id

    def allocate_proposal_id(self) -> int:
        """Return the next proposal id and advance the counter."""
        proposal_id = self._next_proposal_id
        self._next_proposal_id += 1
        return proposal_id

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "properties": len(self.properties),
            "holdings": sum(1 for shares in self.ownership.values() if shares > 0),
            "listings": len(self.listings),
            "proposals": len(self.proposals),
            "unclaimed_entitlements": sum(
                1 for income in self.unclaimed_income.values() if income > 0
            ),
            "role_assignments": len(self.roles),
        }

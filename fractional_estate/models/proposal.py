"""Governance proposal model."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from fractional_estate.models.enums import ProposalStatus


@dataclass
class Proposal:
    """Share-weighted proposal for a property.

    ``votes`` maps voter identity to choice (True = yes) and enforces one
    vote per identity. Tallies hold the voter's balance at vote time.
    """

    proposal_id: int
    property_id: int
    proposer: str
    description: str
    status: ProposalStatus = ProposalStatus.OPEN
    yes_votes: int = 0
    no_votes: int = 0
    votes: dict[str, bool] = field(default_factory=dict)
    kind: str = "general"
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_open(self) -> bool:
        return self.status == ProposalStatus.OPEN

    def snapshot(self) -> "Proposal":
        """Return a detached copy safe to hand out to callers."""
        return replace(self, votes=dict(self.votes))

"""Share-weighted proposals and voting."""

import logging
from typing import Callable

from fractional_estate.exceptions import NotExecutableError, NotVotableError
from fractional_estate.ledger.ownership import OwnershipLedger
from fractional_estate.models import Proposal, ProposalStatus
from fractional_estate.store import LedgerState

logger = logging.getLogger(__name__)

ExecutionHandler = Callable[[Proposal], None]


class GovernanceEngine:
    """Proposal lifecycle: OPEN -> EXECUTED or OPEN -> REJECTED.

    Votes are weighted by the voter's balance at the moment of voting.
    APPROVED is only a passing label during execution and is never stored.
    """

    def __init__(self, state: LedgerState, ledger: OwnershipLedger) -> None:
        self._state = state
        self._ledger = ledger
        self._handlers: dict[str, ExecutionHandler] = {}

    def register_handler(self, kind: str, handler: ExecutionHandler) -> None:
        """Run ``handler`` when a proposal of ``kind`` is executed.

        The handler receives a copy of the executed proposal once the status
        change is committed. An error it raises is logged and does not
        reopen the proposal.
        """
        self._handlers[kind] = handler

    def submit(
        self,
        property_id: int,
        description: str,
        proposer: str,
        kind: str = "general",
    ) -> Proposal:
        proposal_id = self._state.allocate_proposal_id()
        proposal = Proposal(
            proposal_id=proposal_id,
            property_id=property_id,
            proposer=proposer,
            description=description,
            kind=kind,
        )
        self._state.proposals[proposal_id] = proposal
        logger.info("Proposal %d submitted for property %d by %s", proposal_id, property_id, proposer)
        return proposal.snapshot()

    def vote(self, proposal_id: int, voter: str, choice: bool) -> int:
        """Record a vote and return the weight it was counted with."""
        proposal = self._state.proposals.get(proposal_id)
        if proposal is None or not proposal.is_open or voter in proposal.votes:
            raise NotVotableError(
                f"Proposal {proposal_id} not found, not open, or already voted on by {voter}"
            )
        weight = self._ledger.balance(proposal.property_id, voter)
        if weight == 0:
            raise NotVotableError(
                f"{voter} holds no shares of property {proposal.property_id}"
            )

        proposal.votes[voter] = choice
        if choice:
            proposal.yes_votes += weight
        else:
            proposal.no_votes += weight
        logger.info(
            "%s voted %s on proposal %d with weight %d",
            voter,
            "yes" if choice else "no",
            proposal_id,
            weight,
        )
        return weight

    def execute(self, proposal_id: int) -> Proposal:
        """Close an open proposal by simple majority. Ties reject."""
        proposal = self._state.proposals.get(proposal_id)
        if proposal is None or not proposal.is_open:
            raise NotExecutableError(f"Proposal {proposal_id} not found or not open")

        if proposal.yes_votes > proposal.no_votes:
            proposal.status = ProposalStatus.EXECUTED
            logger.info(
                "Proposal %d approved and executed (%d yes / %d no)",
                proposal_id,
                proposal.yes_votes,
                proposal.no_votes,
            )
        else:
            proposal.status = ProposalStatus.REJECTED
            logger.info(
                "Proposal %d rejected (%d yes / %d no)",
                proposal_id,
                proposal.yes_votes,
                proposal.no_votes,
            )
        return proposal.snapshot()

    def run_handler(self, proposal: Proposal) -> bool:
        """Invoke the handler for an executed proposal's kind.

        Returns
        -------
        bool
            False if the handler raised. The proposal stays EXECUTED either way.
        """
        if proposal.status != ProposalStatus.EXECUTED:
            return True
        handler = self._handlers.get(proposal.kind)
        if handler is None:
            return True
        try:
            handler(proposal.snapshot())
        except Exception:
            logger.exception(
                "Handler for %s proposal %d failed", proposal.kind, proposal.proposal_id
            )
            return False
        return True

    def get(self, proposal_id: int) -> Proposal | None:
        proposal = self._state.proposals.get(proposal_id)
        return proposal.snapshot() if proposal else None

    def proposals(self, property_id: int) -> list[Proposal]:
        return [
            proposal.snapshot()
            for proposal in sorted(self._state.proposals.values(), key=lambda p: p.proposal_id)
            if proposal.property_id == property_id
        ]

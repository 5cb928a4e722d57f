"""Operation surface of the fractional-ownership ledger."""

import logging

from fractional_estate.config import LedgerConfig
from fractional_estate.ledger.authorization import AuthorizationGate
from fractional_estate.ledger.events import EventJournal
from fractional_estate.ledger.governance import ExecutionHandler, GovernanceEngine
from fractional_estate.ledger.income import IncomeDistributor
from fractional_estate.ledger.marketplace import Marketplace
from fractional_estate.ledger.ownership import OwnershipLedger
from fractional_estate.ledger.registry import PropertyRegistry
from fractional_estate.models import (
    Listing,
    OwnershipRecord,
    Property,
    PropertyMetadata,
    PropertyStatus,
    Proposal,
    RentalIncomeRecord,
    Role,
)
from fractional_estate.store import LedgerState

logger = logging.getLogger(__name__)


class FractionalLedger:
    """All ledger components wired against one shared state.

    Every operation runs to completion before the next starts and checks
    all of its preconditions before its first write, so a raised error
    always leaves the state as it was. Each committed mutation is recorded
    in ``journal``.

    Callers pass identities that a transport layer has already
    authenticated; the ledger itself only resolves them to roles.
    """

    def __init__(
        self,
        config: LedgerConfig | None = None,
        journal: EventJournal | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        self.journal = journal or EventJournal(
            source=self.config.event_source,
            history_limit=self.config.history_limit,
        )

        self._state = LedgerState()
        self.gate = AuthorizationGate(self._state)
        self.registry = PropertyRegistry(
            self._state,
            self.gate,
            restrict_registration=self.config.restrict_registration,
        )
        self.ownership = OwnershipLedger(self._state, self.registry)
        self.marketplace = Marketplace(
            self._state,
            self.ownership,
            purge_stale_listings=self.config.purge_stale_listings,
        )
        self.income = IncomeDistributor(self._state, self.registry, self.ownership)
        self.governance = GovernanceEngine(self._state, self.ownership)

    # Identity and roles

    def bootstrap_admin(self, identity: str) -> None:
        self.gate.bootstrap_admin(identity)
        self.journal.record("admin.bootstrapped", identity)

    def set_role(self, actor: str, identity: str, role: Role) -> None:
        self.gate.set_role(actor, identity, role)
        self.journal.record("role.assigned", identity, role=role, actor=actor)

    def set_kyc_status(self, actor: str, identity: str, verified: bool) -> None:
        self.gate.set_kyc_status(actor, identity, verified)
        self.journal.record("kyc.updated", identity, verified=verified, actor=actor)

    def get_role(self, identity: str) -> Role:
        return self.gate.role_of(identity)

    def is_kyc_verified(self, identity: str) -> bool:
        return self.gate.kyc_of(identity)

    # Property registry

    def register_property(
        self,
        name: str,
        total_shares: int,
        metadata: PropertyMetadata,
        actor: str | None = None,
    ) -> Property:
        prop = self.registry.register(name, total_shares, metadata, actor=actor)
        self.journal.record(
            "property.registered",
            prop.property_id,
            name=name,
            total_shares=total_shares,
        )
        return prop

    def update_property_metadata(self, property_id: int, metadata: PropertyMetadata, actor: str) -> None:
        self.registry.update_metadata(property_id, metadata, actor)
        self.journal.record(
            "property.updated",
            property_id,
            location=metadata.location,
            description=metadata.description,
            actor=actor,
        )

    def update_property_status(self, property_id: int, status: PropertyStatus, actor: str) -> None:
        self.registry.update_status(property_id, status, actor)
        self.journal.record("property.updated", property_id, status=status, actor=actor)

    def get_property(self, property_id: int) -> Property | None:
        return self.registry.get(property_id)

    # Ownership

    def issue_shares(self, property_id: int, holder: str, amount: int) -> None:
        self.ownership.issue(property_id, holder, amount)
        self.journal.record("shares.issued", property_id, holder=holder, amount=amount)

    def transfer_shares(self, property_id: int, sender: str, recipient: str, amount: int) -> None:
        self.ownership.transfer(property_id, sender, recipient, amount)
        self.journal.record(
            "shares.transferred",
            property_id,
            sender=sender,
            recipient=recipient,
            amount=amount,
        )

    def get_ownership(self, property_id: int, holder: str) -> int:
        return self.ownership.balance(property_id, holder)

    # Marketplace

    def list_shares_for_sale(
        self,
        property_id: int,
        seller: str,
        amount: int,
        price_per_share: int,
    ) -> Listing:
        listing = self.marketplace.list(property_id, seller, amount, price_per_share)
        self.journal.record(
            "listing.created",
            property_id,
            seller=seller,
            amount=amount,
            price_per_share=price_per_share,
        )
        return listing

    def buy_shares(self, property_id: int, seller: str, buyer: str, amount: int) -> Listing:
        filled = self.marketplace.buy(property_id, seller, buyer, amount)
        self.journal.record(
            "listing.filled",
            property_id,
            seller=seller,
            buyer=buyer,
            amount=amount,
            price_per_share=filled.price_per_share,
        )
        return filled

    def get_marketplace_listings(self, property_id: int | None = None) -> list[Listing]:
        return self.marketplace.listings(property_id)

    # Income

    def deposit_rental_income(self, property_id: int, amount: int) -> dict[str, int]:
        allocations = self.income.deposit(property_id, amount)
        self.journal.record(
            "income.deposited",
            property_id,
            amount=amount,
            allocations=allocations,
        )
        return allocations

    def claim_income(self, property_id: int, holder: str) -> int:
        claimed = self.income.claim(property_id, holder)
        if claimed:
            self.journal.record("income.claimed", property_id, holder=holder, amount=claimed)
        return claimed

    def get_unclaimed_income(self, property_id: int, holder: str) -> int:
        return self.income.unclaimed(property_id, holder)

    # Governance

    def register_execution_handler(self, kind: str, handler: ExecutionHandler) -> None:
        self.governance.register_handler(kind, handler)

    def submit_proposal(
        self,
        property_id: int,
        description: str,
        proposer: str,
        kind: str = "general",
    ) -> Proposal:
        proposal = self.governance.submit(property_id, description, proposer, kind=kind)
        self.journal.record(
            "proposal.submitted",
            proposal.proposal_id,
            property_id=property_id,
            proposer=proposer,
            kind=kind,
        )
        return proposal

    def vote_on_proposal(self, proposal_id: int, voter: str, choice: bool) -> None:
        weight = self.governance.vote(proposal_id, voter, choice)
        self.journal.record("proposal.voted", proposal_id, voter=voter, choice=choice, weight=weight)

    def execute_proposal(self, proposal_id: int) -> Proposal:
        proposal = self.governance.execute(proposal_id)
        self.journal.record(
            f"proposal.{proposal.status.value.lower()}",
            proposal_id,
            yes_votes=proposal.yes_votes,
            no_votes=proposal.no_votes,
        )
        self.governance.run_handler(proposal)
        return proposal

    def get_proposal(self, proposal_id: int) -> Proposal | None:
        return self.governance.get(proposal_id)

    def get_proposals(self, property_id: int) -> list[Proposal]:
        return self.governance.proposals(property_id)

    # Statements

    def get_ownership_statement(self, holder: str) -> list[OwnershipRecord]:
        return [
            OwnershipRecord(
                property_id=property_id,
                property_name=self.registry.name_of(property_id),
                shares=shares,
            )
            for property_id, shares in self.ownership.holdings(holder)
        ]

    def get_rental_income_statement(self, holder: str) -> list[RentalIncomeRecord]:
        return [
            RentalIncomeRecord(
                property_id=property_id,
                property_name=self.registry.name_of(property_id),
                income=income,
            )
            for property_id, income in self.income.entitlements(holder)
        ]

    # Audit

    def audit(self) -> list[str]:
        """Check share conservation for every property.

        Returns
        -------
        list[str]
            One message per violated property; empty when consistent.
        """
        problems = []
        for prop in self.registry.all():
            held = self.ownership.total_held(prop.property_id)
            if not 0 <= prop.shares_available <= prop.total_shares:
                problems.append(
                    f"Property {prop.property_id}: shares_available {prop.shares_available} "
                    f"outside 0..{prop.total_shares}"
                )
            if prop.shares_available + held != prop.total_shares:
                problems.append(
                    f"Property {prop.property_id}: available {prop.shares_available} + held {held} "
                    f"!= total {prop.total_shares}"
                )
        for problem in problems:
            logger.error("Audit failure: %s", problem)
        return problems

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {**self._state.summary(), "events": self.journal.recorded}

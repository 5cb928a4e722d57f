"""Randomized market activity against a fractional ledger."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable

from fractional_estate.config import LedgerConfig
from fractional_estate.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InsufficientBalanceError,
    InsufficientSupplyError,
    InvalidEntityStateError,
)
from fractional_estate.generators import InvestorGenerator, PropertyGenerator
from fractional_estate.ledger import FractionalLedger

logger = logging.getLogger(__name__)

# Rejections a well-behaved ledger produces for random requests
EXPECTED_REJECTIONS = (
    EntityNotFoundError,
    InsufficientBalanceError,
    InsufficientSupplyError,
    InvalidEntityStateError,
)


@dataclass
class ScenarioResult:
    """Outcome of a scenario run."""

    ledger: FractionalLedger
    operations: dict[str, int] = field(default_factory=dict)
    rejections: dict[str, int] = field(default_factory=dict)
    income_deposited: int = 0
    income_claimed: int = 0
    audit_problems: list[str] = field(default_factory=list)

    @property
    def consistent(self) -> bool:
        return not self.audit_problems


class MarketActivityScenario:
    """Simulate issuance, trading, income and governance.

    Each round picks one action at random with the weights in ``ACTIONS``.
    Requests are drawn without looking at ledger state first, so some are
    rejected; rejections are counted, never hidden.
    """

    ACTIONS = {
        "issue": 0.20,
        "transfer": 0.15,
        "list": 0.15,
        "buy": 0.15,
        "deposit": 0.10,
        "claim": 0.10,
        "propose": 0.05,
        "vote": 0.07,
        "execute": 0.03,
    }

    ADMIN = "admin"

    def __init__(
        self,
        num_properties: int = 5,
        num_investors: int = 20,
        num_rounds: int = 200,
        seed: int | None = None,
        locale: str = "en_US",
        config: LedgerConfig | None = None,
    ) -> None:
        """Initialize market activity scenario.

        Parameters
        ----------
        num_properties : int
            Number of properties to register.
        num_investors : int
            Number of investor identities.
        num_rounds : int
            Number of random actions to run.
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale for generated names.
        config : LedgerConfig | None
            Ledger behavior switches.

        Raises
        ------
        ConfigurationError
            If there would be no property or investor to act on, or the
            round count is negative.
        """
        if num_properties < 1 or num_investors < 1:
            raise ConfigurationError(
                f"Scenario needs at least one property and one investor, "
                f"got {num_properties} and {num_investors}"
            )
        if num_rounds < 0:
            raise ConfigurationError(f"num_rounds must be non-negative, got {num_rounds}")

        self.num_properties = num_properties
        self.num_investors = num_investors
        self.num_rounds = num_rounds
        self.seed = seed

        self.rng = random.Random(seed)
        self.ledger = FractionalLedger(config=config)
        self._property_gen = PropertyGenerator(seed=seed, locale=locale)
        self._investor_gen = InvestorGenerator(seed=seed, locale=locale)

        self.property_ids: list[int] = []
        self.investors: list[str] = []
        self.proposal_ids: list[int] = []
        self._handlers: dict[str, Callable[[], Any]] = {
            "issue": self._issue,
            "transfer": self._transfer,
            "list": self._list,
            "buy": self._buy,
            "deposit": self._deposit,
            "claim": self._claim,
            "propose": self._propose,
            "vote": self._vote,
            "execute": self._execute,
        }

    def run(self) -> ScenarioResult:
        """Set up the ledger and run all rounds.

        Returns
        -------
        ScenarioResult
            Counters and the final audit.
        """
        logger.info(
            "Starting market activity scenario: %d properties, %d investors, %d rounds",
            self.num_properties,
            self.num_investors,
            self.num_rounds,
        )
        result = ScenarioResult(ledger=self.ledger)
        self._setup()

        actions = list(self.ACTIONS)
        weights = list(self.ACTIONS.values())
        for _ in range(self.num_rounds):
            action = self.rng.choices(actions, weights=weights, k=1)[0]
            try:
                outcome = self._handlers[action]()
            except EXPECTED_REJECTIONS as exc:
                result.rejections[action] = result.rejections.get(action, 0) + 1
                logger.debug("Rejected %s: %s", action, exc)
                continue

            result.operations[action] = result.operations.get(action, 0) + 1
            if action == "deposit":
                result.income_deposited += outcome
            elif action == "claim":
                result.income_claimed += outcome

        result.audit_problems = self.ledger.audit()
        logger.info(
            "Scenario complete: %d operations, %d rejections, %d audit problems",
            sum(result.operations.values()),
            sum(result.rejections.values()),
            len(result.audit_problems),
        )
        return result

    def _setup(self) -> None:
        self.ledger.bootstrap_admin(self.ADMIN)
        for offering in self._property_gen.generate_batch(self.num_properties):
            prop = self.ledger.register_property(
                offering.name,
                offering.total_shares,
                offering.metadata,
                actor=self.ADMIN,
            )
            self.property_ids.append(prop.property_id)
        self.investors = self._investor_gen.generate_batch(self.num_investors)
        for investor in self.investors:
            self.ledger.set_kyc_status(self.ADMIN, investor, self.rng.random() < 0.9)

    def _pick_property(self) -> int:
        return self.rng.choice(self.property_ids)

    def _pick_investor(self) -> str:
        return self.rng.choice(self.investors)

    def _pick_proposal(self) -> int:
        # Id 1 when nothing was submitted yet, which the ledger rejects
        return self.rng.choice(self.proposal_ids) if self.proposal_ids else 1

    def _issue(self) -> None:
        property_id = self._pick_property()
        prop = self.ledger.get_property(property_id)
        amount = self.rng.randint(1, max(1, prop.total_shares // 10))
        self.ledger.issue_shares(property_id, self._pick_investor(), amount)

    def _transfer(self) -> None:
        property_id = self._pick_property()
        sender = self._pick_investor()
        owned = self.ledger.get_ownership(property_id, sender)
        amount = self.rng.randint(1, max(1, owned))
        self.ledger.transfer_shares(property_id, sender, self._pick_investor(), amount)

    def _list(self) -> None:
        property_id = self._pick_property()
        seller = self._pick_investor()
        owned = self.ledger.get_ownership(property_id, seller)
        amount = self.rng.randint(1, max(1, owned))
        self.ledger.list_shares_for_sale(property_id, seller, amount, self.rng.randint(10, 500))

    def _buy(self) -> None:
        listings = self.ledger.get_marketplace_listings()
        if not listings:
            self.ledger.buy_shares(self._pick_property(), self._pick_investor(), self._pick_investor(), 1)
            return
        listing = self.rng.choice(listings)
        amount = self.rng.randint(1, max(1, listing.amount))
        self.ledger.buy_shares(listing.property_id, listing.seller, self._pick_investor(), amount)

    def _deposit(self) -> int:
        amount = self.rng.randint(100, 10000)
        self.ledger.deposit_rental_income(self._pick_property(), amount)
        return amount

    def _claim(self) -> int:
        return self.ledger.claim_income(self._pick_property(), self._pick_investor())

    def _propose(self) -> None:
        proposal = self.ledger.submit_proposal(
            self._pick_property(),
            self._property_gen.fake.sentence(nb_words=8),
            self._pick_investor(),
        )
        self.proposal_ids.append(proposal.proposal_id)

    def _vote(self) -> None:
        proposal_id = self._pick_proposal()
        self.ledger.vote_on_proposal(proposal_id, self._pick_investor(), self.rng.random() < 0.6)

    def _execute(self) -> None:
        proposal_id = self._pick_proposal()
        self.ledger.execute_proposal(proposal_id)

"""Rental income accrual and proportional distribution."""

import logging

from fractional_estate.exceptions import PropertyNotFoundError
from fractional_estate.ledger.ownership import OwnershipLedger
from fractional_estate.ledger.registry import PropertyRegistry
from fractional_estate.ledger.validation import require_non_negative
from fractional_estate.store import LedgerState

logger = logging.getLogger(__name__)


class IncomeDistributor:
    """Allocate deposited income to current holders.

    Each holder's entitlement grows by ``amount * balance // total_shares``
    at deposit time. The floor remainder is not distributed or carried
    forward. Later ownership changes never adjust past entitlements.
    """

    def __init__(
        self,
        state: LedgerState,
        registry: PropertyRegistry,
        ledger: OwnershipLedger,
    ) -> None:
        self._state = state
        self._registry = registry
        self._ledger = ledger

    def deposit(self, property_id: int, amount: int) -> dict[str, int]:
        """Record ``amount`` of income and allocate it to holders.

        Returns
        -------
        dict[str, int]
            Amount allocated to each holder by this deposit.
        """
        require_non_negative("amount", amount)
        prop = self._registry.require(property_id)
        if prop.total_shares == 0:
            raise PropertyNotFoundError(f"Property {property_id} has no shares to distribute over")

        total_shares = prop.total_shares
        self._state.rental_income[property_id] = self.total_deposited(property_id) + amount

        allocations: dict[str, int] = {}
        for holder, shares in self._ledger.holders(property_id):
            share_of_income = amount * shares // total_shares
            key = (property_id, holder)
            self._state.unclaimed_income[key] = self._state.unclaimed_income.get(key, 0) + share_of_income
            allocations[holder] = share_of_income

        logger.info(
            "Deposited %d income for property %d: %d allocated to %d holders",
            amount,
            property_id,
            sum(allocations.values()),
            len(allocations),
        )
        return allocations

    def claim(self, property_id: int, holder: str) -> int:
        """Pay out and zero the holder's unclaimed income."""
        claimed = self._state.unclaimed_income.pop((property_id, holder), 0)
        if claimed:
            logger.info("%s claimed %d income from property %d", holder, claimed, property_id)
        return claimed

    def unclaimed(self, property_id: int, holder: str) -> int:
        return self._state.unclaimed_income.get((property_id, holder), 0)

    def total_deposited(self, property_id: int) -> int:
        return self._state.rental_income.get(property_id, 0)

    def entitlements(self, holder: str) -> list[tuple[int, int]]:
        """Properties with positive unclaimed income for ``holder``."""
        return [
            (pid, income)
            for (pid, owner), income in self._state.unclaimed_income.items()
            if owner == holder and income > 0
        ]

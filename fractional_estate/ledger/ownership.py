"""Ownership ledger: the single source of truth for who owns what."""

import logging

from fractional_estate.exceptions import InsufficientBalanceError, InsufficientSupplyError
from fractional_estate.ledger.registry import PropertyRegistry
from fractional_estate.ledger.validation import require_non_negative
from fractional_estate.store import LedgerState

logger = logging.getLogger(__name__)


class OwnershipLedger:
    """Per-(property, holder) share balances.

    For every property ``shares_available + sum(balances) == total_shares``.
    Issuance is the only path that moves shares out of the unissued pool;
    transfers move them between holders without changing the sum.
    """

    def __init__(self, state: LedgerState, registry: PropertyRegistry) -> None:
        self._state = state
        self._registry = registry

    def balance(self, property_id: int, holder: str) -> int:
        return self._state.ownership.get((property_id, holder), 0)

    def issue(self, property_id: int, to: str, amount: int) -> None:
        """Move ``amount`` unissued shares of a property to ``to``."""
        require_non_negative("amount", amount)
        prop = self._registry.require(property_id)
        if amount > prop.shares_available:
            raise InsufficientSupplyError(
                f"Property {property_id} has {prop.shares_available} shares available, "
                f"{amount} requested"
            )

        prop.shares_available -= amount
        self._credit(property_id, to, amount)
        logger.info("Issued %d shares of property %d to %s", amount, property_id, to)

    def transfer(self, property_id: int, sender: str, recipient: str, amount: int) -> None:
        """Move ``amount`` shares between holders.

        Transferring to oneself is a successful no-op when the balance
        covers ``amount``.
        """
        require_non_negative("amount", amount)
        owned = self.balance(property_id, sender)
        if owned < amount:
            raise InsufficientBalanceError(
                f"{sender} holds {owned} shares of property {property_id}, {amount} requested"
            )
        if sender == recipient:
            return

        self._debit(property_id, sender, amount)
        self._credit(property_id, recipient, amount)
        logger.info(
            "Transferred %d shares of property %d from %s to %s",
            amount,
            property_id,
            sender,
            recipient,
        )

    def holders(self, property_id: int) -> list[tuple[str, int]]:
        """Holders with a positive balance, in first-credit order."""
        return [
            (holder, shares)
            for (pid, holder), shares in self._state.ownership.items()
            if pid == property_id and shares > 0
        ]

    def holdings(self, holder: str) -> list[tuple[int, int]]:
        """Properties in which ``holder`` has a positive balance."""
        return [
            (pid, shares)
            for (pid, owner), shares in self._state.ownership.items()
            if owner == holder and shares > 0
        ]

    def total_held(self, property_id: int) -> int:
        return sum(shares for _, shares in self.holders(property_id))

    def _credit(self, property_id: int, holder: str, amount: int) -> None:
        if amount == 0:
            return
        key = (property_id, holder)
        self._state.ownership[key] = self._state.ownership.get(key, 0) + amount

    def _debit(self, property_id: int, holder: str, amount: int) -> None:
        key = (property_id, holder)
        remaining = self._state.ownership.get(key, 0) - amount
        if remaining:
            self._state.ownership[key] = remaining
        else:
            self._state.ownership.pop(key, None)

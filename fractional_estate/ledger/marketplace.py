"""Peer-to-peer share marketplace settling against the ownership ledger."""

from __future__ import annotations

import logging
from dataclasses import replace

from fractional_estate.exceptions import InsufficientBalanceError, ListingNotFoundError
from fractional_estate.ledger.ownership import OwnershipLedger
from fractional_estate.ledger.validation import require_non_negative
from fractional_estate.models import Listing
from fractional_estate.store import LedgerState

logger = logging.getLogger(__name__)


class Marketplace:
    """Open sell offers matched first-come, first-served.

    Listing does not escrow shares. A purchase re-checks the seller's live
    balance, so an offer can outlive the shares backing it. With
    ``purge_stale_listings`` such an offer is dropped on the failed
    purchase; otherwise it stays listed.
    """

    def __init__(
        self,
        state: LedgerState,
        ledger: OwnershipLedger,
        purge_stale_listings: bool = False,
    ) -> None:
        self._state = state
        self._ledger = ledger
        self.purge_stale_listings = purge_stale_listings

    def list(self, property_id: int, seller: str, amount: int, price_per_share: int) -> Listing:
        """Offer ``amount`` shares at ``price_per_share``."""
        require_non_negative("amount", amount)
        require_non_negative("price_per_share", price_per_share)
        owned = self._ledger.balance(property_id, seller)
        if owned < amount:
            raise InsufficientBalanceError(
                f"{seller} holds {owned} shares of property {property_id}, cannot list {amount}"
            )

        listing = Listing(
            property_id=property_id,
            seller=seller,
            amount=amount,
            price_per_share=price_per_share,
        )
        self._state.listings.append(listing)
        logger.info(
            "Listed %d shares of property %d by %s at %d per share",
            amount,
            property_id,
            seller,
            price_per_share,
        )
        return replace(listing)

    def buy(self, property_id: int, seller: str, buyer: str, amount: int) -> Listing:
        """Fill ``amount`` shares from the seller's first listing large enough.

        Returns
        -------
        Listing
            The filled portion: the matched offer with ``amount`` set to the
            quantity bought.
        """
        require_non_negative("amount", amount)
        position = self._find(property_id, seller, amount)
        if position is None:
            raise ListingNotFoundError(
                f"No listing of property {property_id} by {seller} covers {amount} shares"
            )
        listing = self._state.listings[position]

        owned = self._ledger.balance(property_id, seller)
        if owned < amount:
            if self.purge_stale_listings:
                del self._state.listings[position]
                logger.warning(
                    "Purged stale listing of property %d by %s: seller holds %d",
                    property_id,
                    seller,
                    owned,
                )
            raise InsufficientBalanceError(
                f"{seller} holds {owned} shares of property {property_id}, cannot sell {amount}"
            )

        self._ledger.transfer(property_id, seller, buyer, amount)
        filled = replace(listing, amount=amount)
        if listing.amount == amount:
            del self._state.listings[position]
        else:
            listing.amount -= amount

        logger.info(
            "%s bought %d shares of property %d from %s at %d per share",
            buyer,
            amount,
            property_id,
            seller,
            listing.price_per_share,
        )
        return filled

    def listings(self, property_id: int | None = None) -> list[Listing]:
        """Open listings in insertion order, optionally for one property."""
        return [
            replace(listing)
            for listing in self._state.listings
            if property_id is None or listing.property_id == property_id
        ]

    def _find(self, property_id: int, seller: str, amount: int) -> int | None:
        for position, listing in enumerate(self._state.listings):
            if (
                listing.property_id == property_id
                and listing.seller == seller
                and listing.amount >= amount
            ):
                return position
        return None

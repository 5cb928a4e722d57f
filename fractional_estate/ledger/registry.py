"""Property registry."""

import logging

from fractional_estate.exceptions import PropertyNotFoundError
from fractional_estate.ledger.authorization import AuthorizationGate
from fractional_estate.ledger.validation import require_non_negative
from fractional_estate.models import Property, PropertyMetadata, PropertyStatus, Role
from fractional_estate.store import LedgerState

logger = logging.getLogger(__name__)


class PropertyRegistry:
    """Create and look up property records."""

    def __init__(
        self,
        state: LedgerState,
        gate: AuthorizationGate,
        restrict_registration: bool = False,
    ) -> None:
        self._state = state
        self._gate = gate
        self.restrict_registration = restrict_registration

    def register(
        self,
        name: str,
        total_shares: int,
        metadata: PropertyMetadata,
        actor: str | None = None,
    ) -> Property:
        """Register a property with all of its shares unissued.

        A property with zero shares is legal but can never receive income.
        When ``restrict_registration`` is set, ``actor`` must be a manager
        or admin.
        """
        require_non_negative("total_shares", total_shares)
        if self.restrict_registration:
            self._gate.require(actor or "", Role.MANAGER, Role.ADMIN, action="register properties")

        property_id = self._state.allocate_property_id()
        prop = Property(
            property_id=property_id,
            name=name,
            total_shares=total_shares,
            shares_available=total_shares,
            metadata=metadata,
        )
        self._state.properties[property_id] = prop
        logger.info("Registered property %d (%s) with %d shares", property_id, name, total_shares)
        return prop.snapshot()

    def get(self, property_id: int) -> Property | None:
        prop = self._state.properties.get(property_id)
        return prop.snapshot() if prop else None

    def require(self, property_id: int) -> Property:
        """Return the live record or raise PropertyNotFoundError."""
        prop = self._state.properties.get(property_id)
        if prop is None:
            raise PropertyNotFoundError(f"Property {property_id} not found")
        return prop

    def name_of(self, property_id: int) -> str:
        prop = self._state.properties.get(property_id)
        return prop.name if prop else ""

    def update_metadata(self, property_id: int, metadata: PropertyMetadata, actor: str) -> None:
        self._gate.require(actor, Role.ADMIN, action="update property metadata")
        self.require(property_id).metadata = metadata
        logger.info("Metadata of property %d updated by %s", property_id, actor)

    def update_status(self, property_id: int, status: PropertyStatus, actor: str) -> None:
        self._gate.require(actor, Role.ADMIN, action="update property status")
        self.require(property_id).status = status
        logger.info("Status of property %d set to %s by %s", property_id, status.value, actor)

    def all(self) -> list[Property]:
        return [prop.snapshot() for prop in self._state.properties.values()]

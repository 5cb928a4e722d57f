"""Role and KYC resolution for caller identities."""

import logging

from fractional_estate.exceptions import AlreadyBootstrappedError, UnauthorizedError
from fractional_estate.models import Role
from fractional_estate.store import LedgerState

logger = logging.getLogger(__name__)


class AuthorizationGate:
    """Resolve identities to roles and KYC flags.

    Both lookups are total: identities without an assignment are plain
    users and not KYC verified.
    """

    DEFAULT_ROLE = Role.USER
    DEFAULT_KYC = False

    def __init__(self, state: LedgerState) -> None:
        self._state = state

    def role_of(self, identity: str) -> Role:
        return self._state.roles.get(identity, self.DEFAULT_ROLE)

    def kyc_of(self, identity: str) -> bool:
        return self._state.kyc.get(identity, self.DEFAULT_KYC)

    def require(self, identity: str, *allowed: Role, action: str = "perform this action") -> None:
        """Raise UnauthorizedError unless the identity holds one of ``allowed``."""
        role = self.role_of(identity)
        if role not in allowed:
            names = "/".join(r.value.lower() for r in allowed)
            raise UnauthorizedError(f"Only {names} can {action} (caller {identity} is {role.value})")

    def bootstrap_admin(self, identity: str) -> None:
        """Grant ADMIN to ``identity``. Allowed exactly once per ledger."""
        if self._state.bootstrapped:
            raise AlreadyBootstrappedError("Admin already bootstrapped")
        self._state.roles[identity] = Role.ADMIN
        self._state.bootstrapped = True
        logger.info("Bootstrapped admin %s", identity)

    def set_role(self, actor: str, identity: str, role: Role) -> None:
        self.require(actor, Role.ADMIN, action="set roles")
        self._state.roles[identity] = role
        logger.info("Role of %s set to %s by %s", identity, role.value, actor)

    def set_kyc_status(self, actor: str, identity: str, verified: bool) -> None:
        self.require(actor, Role.ADMIN, action="set KYC status")
        self._state.kyc[identity] = verified
        logger.info("KYC of %s set to %s by %s", identity, verified, actor)

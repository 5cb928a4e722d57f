"""Custom exception hierarchy for fractional-estate."""


class FractionalEstateError(Exception):
    """Base exception for all fractional-estate errors."""


class EntityNotFoundError(FractionalEstateError):
    """Raised when a referenced entity does not exist."""


class PropertyNotFoundError(EntityNotFoundError):
    """Raised when a property id is unknown or cannot take part in the operation."""


class ListingNotFoundError(EntityNotFoundError):
    """Raised when no open listing matches a purchase request."""


class UnauthorizedError(FractionalEstateError):
    """Raised when the caller's role does not meet the operation's requirement."""


class InsufficientBalanceError(FractionalEstateError):
    """Raised when a holder does not own enough shares."""


class InsufficientSupplyError(FractionalEstateError):
    """Raised when a property has fewer unissued shares than requested."""


class AlreadyBootstrappedError(FractionalEstateError):
    """Raised when the one-time admin bootstrap runs a second time."""


class InvalidEntityStateError(FractionalEstateError):
    """Raised when an entity is in an invalid state for the operation."""


class NotVotableError(InvalidEntityStateError):
    """Raised when a vote cannot be recorded on a proposal."""


class NotExecutableError(InvalidEntityStateError):
    """Raised when a proposal cannot be executed."""


class InvalidAmountError(FractionalEstateError, ValueError):
    """Raised when a share count, price or income amount is negative."""


class ConfigurationError(FractionalEstateError):
    """Raised when configuration is invalid or missing."""


class SinkError(FractionalEstateError):
    """Raised when a sink operation fails."""

"""Input checks shared by the ledger components."""

from typing import Any

from fractional_estate.exceptions import InvalidAmountError


def require_non_negative(name: str, value: Any) -> None:
    """Reject anything but a non-negative int before any state is touched."""
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmountError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidAmountError(f"{name} must be non-negative, got {value}")

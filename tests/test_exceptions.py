"""Tests for custom exception hierarchy."""

from fractional_estate.exceptions import (
    AlreadyBootstrappedError,
    ConfigurationError,
    EntityNotFoundError,
    FractionalEstateError,
    InsufficientBalanceError,
    InsufficientSupplyError,
    InvalidAmountError,
    InvalidEntityStateError,
    ListingNotFoundError,
    NotExecutableError,
    NotVotableError,
    PropertyNotFoundError,
    SinkError,
    UnauthorizedError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_error_is_exception(self) -> None:
        assert isinstance(FractionalEstateError("test"), Exception)

    def test_not_found_errors(self) -> None:
        for cls in (PropertyNotFoundError, ListingNotFoundError):
            err = cls("test")
            assert isinstance(err, EntityNotFoundError)
            assert isinstance(err, FractionalEstateError)

    def test_lifecycle_errors_are_invalid_state(self) -> None:
        assert isinstance(NotVotableError("test"), InvalidEntityStateError)
        assert isinstance(NotExecutableError("test"), InvalidEntityStateError)

    def test_quantity_errors_are_distinct(self) -> None:
        assert not isinstance(InsufficientBalanceError("x"), InsufficientSupplyError)
        assert not isinstance(InsufficientSupplyError("x"), InsufficientBalanceError)

    def test_invalid_amount_is_value_error(self) -> None:
        err = InvalidAmountError("amount must be non-negative")
        assert isinstance(err, ValueError)
        assert isinstance(err, FractionalEstateError)

    def test_other_errors_are_fractional_estate_errors(self) -> None:
        for cls in (
            UnauthorizedError,
            AlreadyBootstrappedError,
            ConfigurationError,
            SinkError,
        ):
            assert isinstance(cls("test"), FractionalEstateError)

    def test_exception_message(self) -> None:
        err = PropertyNotFoundError("Property 7 not found")
        assert str(err) == "Property 7 not found"

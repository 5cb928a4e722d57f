"""Tests for rental income distribution and claims."""

import pytest

from fractional_estate.exceptions import InvalidAmountError, PropertyNotFoundError
from fractional_estate.ledger import FractionalLedger
from fractional_estate.models import PropertyMetadata


class TestDepositRentalIncome:
    """Tests for proportional allocation."""

    def test_floor_division_loss(self, ledger: FractionalLedger, property_id: int) -> None:
        allocations = ledger.deposit_rental_income(property_id, 101)

        assert allocations == {"alice": 60, "bob": 40}
        assert ledger.get_unclaimed_income(property_id, "alice") == 60
        assert ledger.get_unclaimed_income(property_id, "bob") == 40
        assert ledger.income.total_deposited(property_id) == 101

    def test_deposits_accumulate(self, ledger: FractionalLedger, property_id: int) -> None:
        ledger.deposit_rental_income(property_id, 101)
        ledger.deposit_rental_income(property_id, 50)

        assert ledger.get_unclaimed_income(property_id, "alice") == 90
        assert ledger.get_unclaimed_income(property_id, "bob") == 60
        assert ledger.income.total_deposited(property_id) == 151

    def test_unissued_shares_receive_nothing(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        prop = ledger.register_property("Half", 100, metadata)
        ledger.issue_shares(prop.property_id, "alice", 50)

        allocations = ledger.deposit_rental_income(prop.property_id, 1000)

        assert allocations == {"alice": 500}

    def test_small_holder_truncated_to_zero(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        prop = ledger.register_property("Big", 1000, metadata)
        ledger.issue_shares(prop.property_id, "alice", 999)
        ledger.issue_shares(prop.property_id, "bob", 1)

        ledger.deposit_rental_income(prop.property_id, 500)

        assert ledger.get_unclaimed_income(prop.property_id, "alice") == 499
        assert ledger.get_unclaimed_income(prop.property_id, "bob") == 0

    def test_snapshot_at_deposit_time(self, ledger: FractionalLedger, property_id: int) -> None:
        ledger.deposit_rental_income(property_id, 100)
        ledger.transfer_shares(property_id, "bob", "alice", 40)

        assert ledger.get_unclaimed_income(property_id, "bob") == 40

        ledger.deposit_rental_income(property_id, 100)

        assert ledger.get_unclaimed_income(property_id, "alice") == 160
        assert ledger.get_unclaimed_income(property_id, "bob") == 40

    def test_unknown_property(self, ledger: FractionalLedger) -> None:
        with pytest.raises(PropertyNotFoundError):
            ledger.deposit_rental_income(99, 100)
        assert ledger.income.total_deposited(99) == 0

    def test_zero_share_property_treated_as_missing(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        prop = ledger.register_property("Empty", 0, metadata)

        with pytest.raises(PropertyNotFoundError):
            ledger.deposit_rental_income(prop.property_id, 100)
        assert ledger.income.total_deposited(prop.property_id) == 0

    def test_negative_amount(self, ledger: FractionalLedger, property_id: int) -> None:
        with pytest.raises(InvalidAmountError):
            ledger.deposit_rental_income(property_id, -1)


class TestClaimIncome:
    """Tests for claiming entitlements."""

    def test_claim_is_idempotent(self, ledger: FractionalLedger, property_id: int) -> None:
        ledger.deposit_rental_income(property_id, 101)

        assert ledger.claim_income(property_id, "alice") == 60
        assert ledger.claim_income(property_id, "alice") == 0
        assert ledger.get_unclaimed_income(property_id, "alice") == 0
        assert ledger.get_unclaimed_income(property_id, "bob") == 40

    def test_claim_without_entitlement(self, ledger: FractionalLedger) -> None:
        assert ledger.claim_income(5, "nobody") == 0

    def test_claim_then_new_deposit(self, ledger: FractionalLedger, property_id: int) -> None:
        ledger.deposit_rental_income(property_id, 100)
        ledger.claim_income(property_id, "bob")
        ledger.deposit_rental_income(property_id, 10)

        assert ledger.claim_income(property_id, "bob") == 4

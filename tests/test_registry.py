"""Tests for the property registry and authorization gate."""

import pytest

from fractional_estate.config import LedgerConfig
from fractional_estate.exceptions import (
    AlreadyBootstrappedError,
    InvalidAmountError,
    PropertyNotFoundError,
    UnauthorizedError,
)
from fractional_estate.ledger import FractionalLedger
from fractional_estate.models import PropertyMetadata, PropertyStatus, Role


class TestAuthorizationGate:
    """Tests for role and KYC resolution."""

    def test_defaults_for_unknown_identity(self, ledger: FractionalLedger) -> None:
        assert ledger.get_role("nobody") == Role.USER
        assert ledger.is_kyc_verified("nobody") is False

    def test_bootstrap_admin_once(self, ledger: FractionalLedger) -> None:
        ledger.bootstrap_admin("root")

        assert ledger.get_role("root") == Role.ADMIN
        with pytest.raises(AlreadyBootstrappedError):
            ledger.bootstrap_admin("intruder")
        assert ledger.get_role("intruder") == Role.USER

    def test_admin_sets_role_and_kyc(self, ledger: FractionalLedger) -> None:
        ledger.bootstrap_admin("root")

        ledger.set_role("root", "mia", Role.MANAGER)
        ledger.set_kyc_status("root", "mia", True)

        assert ledger.get_role("mia") == Role.MANAGER
        assert ledger.is_kyc_verified("mia") is True

    def test_non_admin_cannot_set_role(self, ledger: FractionalLedger) -> None:
        with pytest.raises(UnauthorizedError):
            ledger.set_role("mallory", "mallory", Role.ADMIN)
        assert ledger.get_role("mallory") == Role.USER

    def test_non_admin_cannot_set_kyc(self, ledger: FractionalLedger) -> None:
        with pytest.raises(UnauthorizedError):
            ledger.set_kyc_status("mallory", "mallory", True)
        assert ledger.is_kyc_verified("mallory") is False


class TestRegisterProperty:
    """Tests for property registration."""

    def test_register_assigns_sequential_ids(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        first = ledger.register_property("One", 100, metadata)
        second = ledger.register_property("Two", 50, metadata)

        assert first.property_id == 1
        assert second.property_id == 2

    def test_register_starts_fully_available(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        prop = ledger.register_property("One", 100, metadata)

        assert prop.total_shares == 100
        assert prop.shares_available == 100
        assert prop.shares_issued == 0
        assert prop.status == PropertyStatus.ACTIVE
        assert prop.metadata == metadata

    def test_register_zero_shares_is_legal(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        prop = ledger.register_property("Empty", 0, metadata)

        assert ledger.get_property(prop.property_id).total_shares == 0

    def test_register_negative_shares_rejected(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        with pytest.raises(InvalidAmountError):
            ledger.register_property("Bad", -1, metadata)
        assert ledger.get_property(1) is None

    def test_restricted_registration_requires_manager(self, metadata: PropertyMetadata) -> None:
        ledger = FractionalLedger(config=LedgerConfig(restrict_registration=True))
        ledger.bootstrap_admin("root")
        ledger.set_role("root", "mia", Role.MANAGER)

        with pytest.raises(UnauthorizedError):
            ledger.register_property("One", 100, metadata, actor="bob")
        with pytest.raises(UnauthorizedError):
            ledger.register_property("One", 100, metadata)

        assert ledger.register_property("One", 100, metadata, actor="mia").property_id == 1
        assert ledger.register_property("Two", 100, metadata, actor="root").property_id == 2

    def test_get_property_unknown(self, ledger: FractionalLedger) -> None:
        assert ledger.get_property(99) is None

    def test_get_property_returns_copy(
        self, ledger: FractionalLedger, metadata: PropertyMetadata
    ) -> None:
        prop = ledger.register_property("One", 100, metadata)

        prop.shares_available = 0
        prop.metadata.location = "elsewhere"

        stored = ledger.get_property(prop.property_id)
        assert stored.shares_available == 100
        assert stored.metadata.location == metadata.location


class TestUpdateProperty:
    """Tests for admin-only metadata and status edits."""

    @pytest.fixture
    def admin_ledger(self, ledger: FractionalLedger, metadata: PropertyMetadata) -> FractionalLedger:
        ledger.bootstrap_admin("root")
        ledger.register_property("One", 100, metadata)
        return ledger

    def test_admin_updates_metadata(self, admin_ledger: FractionalLedger) -> None:
        new = PropertyMetadata(location="Porto, PT", description="Renovated")

        admin_ledger.update_property_metadata(1, new, "root")

        assert admin_ledger.get_property(1).metadata == new

    def test_admin_updates_status(self, admin_ledger: FractionalLedger) -> None:
        admin_ledger.update_property_status(1, PropertyStatus.MAINTENANCE, "root")

        assert admin_ledger.get_property(1).status == PropertyStatus.MAINTENANCE

    def test_non_admin_rejected(self, admin_ledger: FractionalLedger) -> None:
        with pytest.raises(UnauthorizedError):
            admin_ledger.update_property_status(1, PropertyStatus.SOLD, "bob")
        with pytest.raises(UnauthorizedError):
            admin_ledger.update_property_metadata(1, PropertyMetadata("x", "y"), "bob")

        assert admin_ledger.get_property(1).status == PropertyStatus.ACTIVE

    def test_manager_is_not_enough(self, admin_ledger: FractionalLedger) -> None:
        admin_ledger.set_role("root", "mia", Role.MANAGER)

        with pytest.raises(UnauthorizedError):
            admin_ledger.update_property_status(1, PropertyStatus.SOLD, "mia")

    def test_unknown_property(self, admin_ledger: FractionalLedger) -> None:
        with pytest.raises(PropertyNotFoundError):
            admin_ledger.update_property_status(42, PropertyStatus.SOLD, "root")
        with pytest.raises(PropertyNotFoundError):
            admin_ledger.update_property_metadata(42, PropertyMetadata("x", "y"), "root")

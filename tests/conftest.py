"""Pytest configuration and fixtures."""

import pytest

from fractional_estate.ledger import FractionalLedger
from fractional_estate.models import PropertyMetadata


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def metadata() -> PropertyMetadata:
    """Sample property metadata."""
    return PropertyMetadata(location="Lisbon, PT", description="Six-unit riverside block")


@pytest.fixture
def ledger() -> FractionalLedger:
    """Fresh ledger for each test."""
    return FractionalLedger()


@pytest.fixture
def property_id(ledger: FractionalLedger, metadata: PropertyMetadata) -> int:
    """100-share property with 60 issued to alice and 40 to bob."""
    prop = ledger.register_property("Riverside", 100, metadata)
    ledger.issue_shares(prop.property_id, "alice", 60)
    ledger.issue_shares(prop.property_id, "bob", 40)
    return prop.property_id

"""Tests for the market activity scenario."""

import pytest

from fractional_estate.config import LedgerConfig
from fractional_estate.exceptions import ConfigurationError
from fractional_estate.scenarios import MarketActivityScenario


class TestMarketActivityScenario:
    """Tests for MarketActivityScenario."""

    def test_run_keeps_ledger_consistent(self, seed: int) -> None:
        scenario = MarketActivityScenario(
            num_properties=3,
            num_investors=8,
            num_rounds=300,
            seed=seed,
        )

        result = scenario.run()

        assert result.consistent
        assert result.audit_problems == []
        assert len(scenario.property_ids) == 3
        assert len(scenario.investors) == 8
        assert sum(result.operations.values()) + sum(result.rejections.values()) == 300

    def test_run_exercises_core_operations(self, seed: int) -> None:
        result = MarketActivityScenario(
            num_properties=2,
            num_investors=5,
            num_rounds=400,
            seed=seed,
        ).run()

        assert result.operations.get("issue", 0) > 0
        assert result.operations.get("deposit", 0) > 0
        assert result.operations.get("propose", 0) > 0

    def test_claimed_never_exceeds_deposited(self, seed: int) -> None:
        result = MarketActivityScenario(num_rounds=300, seed=seed).run()

        assert result.income_claimed <= result.income_deposited

    def test_events_recorded(self, seed: int) -> None:
        result = MarketActivityScenario(num_properties=2, num_rounds=50, seed=seed).run()

        journal = result.ledger.journal
        assert journal.of_type("admin.bootstrapped")
        assert len(journal.of_type("property.registered")) == 2

    def test_runs_with_purging_enabled(self, seed: int) -> None:
        result = MarketActivityScenario(
            num_rounds=300,
            seed=seed,
            config=LedgerConfig(purge_stale_listings=True),
        ).run()

        assert result.consistent

    @pytest.mark.parametrize(
        "counts",
        [
            {"num_properties": 0, "num_investors": 3},
            {"num_properties": 2, "num_investors": 0},
            {"num_properties": 2, "num_investors": 3, "num_rounds": -1},
        ],
    )
    def test_invalid_counts_rejected(self, counts: dict, seed: int) -> None:
        with pytest.raises(ConfigurationError):
            MarketActivityScenario(seed=seed, **counts)

    def test_zero_rounds_only_sets_up(self, seed: int) -> None:
        result = MarketActivityScenario(num_properties=1, num_investors=1, num_rounds=0, seed=seed).run()

        assert result.operations == {}
        assert result.consistent

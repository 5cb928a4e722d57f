"""Scenarios driving a ledger with synthetic activity."""

from fractional_estate.scenarios.market_activity import MarketActivityScenario, ScenarioResult

__all__ = ["MarketActivityScenario", "ScenarioResult"]

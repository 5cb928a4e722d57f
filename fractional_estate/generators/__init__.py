"""Synthetic data generators for simulations."""

from fractional_estate.generators.investor import InvestorGenerator
from fractional_estate.generators.property import PropertyGenerator, PropertyOffering

__all__ = ["InvestorGenerator", "PropertyGenerator", "PropertyOffering"]

"""
Tests for money helpers, party codes and SKU uniqueness.
"""

from decimal import Decimal

import pytest

from inflow_mock.builder import EntityGraphBuilder
from inflow_mock.config import resolve_config
from inflow_mock.exceptions import UniquenessError
from inflow_mock.generators import Level2Generator
from inflow_mock.generators.level_2_product import SKU_SPACE
from inflow_mock.helpers import party_code, sum_money, to_money


class TestMoney:
    """Decimal cents."""

    def test_rounds_half_up(self):
        assert to_money("2.345") == Decimal("2.35")
        assert to_money("2.344") == Decimal("2.34")

    def test_int_and_float(self):
        assert to_money(3) == Decimal("3.00")
        assert to_money(0.5) == Decimal("0.50")

    def test_sum_exact(self):
        values = [Decimal("0.10")] * 3
        assert sum_money(values) == Decimal("0.30")

    def test_sum_empty(self):
        assert sum_money([]) == Decimal("0.00")


class TestPartyCode:
    """Word-initial codes."""

    def test_initials(self):
        assert party_code("Precision Fasteners Inc") == "PFI"

    def test_lowercase_words(self):
        assert party_code("acme tool and die") == "ATAD"


class TestSkuUniqueness:
    """SKU draws retry on collision and give up when the space is full."""

    @pytest.fixture
    def generator(self):
        """Level 2 generator over a context that has run Levels 0-1."""
        config = resolve_config(products=1, vendors=1, customers=1, seed=11, as_of="2024-06-30")
        builder = EntityGraphBuilder(config)
        for gen in builder._generators[:2]:
            gen.generate()
        return Level2Generator(builder.ctx)

    def test_draws_unused_sku(self, generator):
        generator.ctx.sku_ids["HB-1000"] = "taken"
        sku = generator._unique_sku("HB")
        assert sku != "HB-1000"
        assert sku.startswith("HB-")

    def test_issued_skus_counted_on_context(self, generator):
        """SKUs can be drawn before generate() runs; counts live on the context."""
        first = generator._unique_sku("HB")
        second = generator._unique_sku("HB")
        assert first != second
        assert generator.ctx.sku_counts == {"HB": 2}

    def test_full_prefix_raises(self, generator):
        generator.ctx.sku_counts["HB"] = SKU_SPACE
        with pytest.raises(UniquenessError):
            generator._unique_sku("HB")

    def test_retry_budget_exhausted(self, generator):
        for n in range(1000, 10000):
            generator.ctx.sku_ids[f"HB-{n}"] = "taken"
        with pytest.raises(UniquenessError, match="1000 attempts"):
            generator._unique_sku("HB")

"""
Tests for EntityGraphBuilder and generate().

Covers determinism, the small/42 scenario, presets and overrides, pool
clamping, error propagation and immutability of the result.
"""

from datetime import datetime, timezone

import pytest

from inflow_mock import (
    ConfigurationError,
    EmptySequenceError,
    EntityGraph,
    EntityGraphBuilder,
    GenerateOptions,
    generate,
)
from inflow_mock.constants import CUSTOMERS, LOCATIONS, VENDORS
from inflow_mock.schema import COLLECTIONS

AS_OF = datetime(2024, 6, 30, tzinfo=timezone.utc)


def _small(**overrides):
    """Generate a reduced graph pinned to AS_OF."""
    options = {"products": 20, "vendors": 3, "customers": 3, "seed": 7, "as_of": AS_OF}
    options.update(overrides)
    return generate(options)


class TestDeterminism:
    """Same options, same graph."""

    def test_same_config_same_graph(self, small_config, small_graph):
        """Rebuilding from the same config reproduces every record."""
        again = EntityGraphBuilder(small_config).build()
        assert again.to_dict() == small_graph.to_dict()

    def test_generate_matches_builder(self, small_graph):
        graph = generate(preset="small", seed=42, as_of=AS_OF)
        assert graph.to_dict() == small_graph.to_dict()

    def test_name_and_sku_list_reproducible(self, small_graph):
        graph = generate(preset="small", seed=42, as_of=AS_OF)
        expected = [(p["name"], p["sku"]) for p in small_graph.products]
        assert [(p["name"], p["sku"]) for p in graph.products] == expected

    def test_different_seed_differs(self, small_graph):
        other = generate(preset="small", seed=43, as_of=AS_OF)
        assert [p["sku"] for p in other.products] != [p["sku"] for p in small_graph.products]

    def test_as_of_changes_dates_only_through_clock(self):
        """Shifting as_of shifts timestamps but not the random draws."""
        a = _small(as_of="2024-06-30")
        b = _small(as_of="2025-01-15")
        assert [p["sku"] for p in a.products] == [p["sku"] for p in b.products]
        assert a.products[0]["timestamp"] != b.products[0]["timestamp"]

    def test_builder_is_single_use(self, small_config):
        builder = EntityGraphBuilder(small_config)
        builder.build()
        with pytest.raises(RuntimeError):
            builder.build()


class TestSmallScenario:
    """small preset, seed 42."""

    def test_one_base_currency(self, small_graph):
        assert sum(1 for c in small_graph.currencies if c["is_base_currency"]) == 1

    def test_twelve_categories(self, small_graph):
        assert len(small_graph.categories) == 12

    def test_preset_counts(self, small_graph):
        assert len(small_graph.products) == 100
        assert len(small_graph.vendors) == 15
        assert len(small_graph.customers) == 20
        assert len(small_graph.locations) == 3

    def test_purchase_orders_two_per_vendor(self, small_graph):
        assert len(small_graph.purchase_orders) == 2 * len(small_graph.vendors)

    def test_sales_orders_three_per_customer(self, small_graph):
        assert len(small_graph.sales_orders) == 3 * len(small_graph.customers)

    def test_manufacturing_orders_half_of_manufacturable(self, small_graph):
        manufacturable = sum(1 for p in small_graph.products if p["is_manufacturable"])
        assert len(small_graph.manufacturing_orders) == manufacturable // 2

    def test_all_collections_present(self, small_graph):
        assert list(small_graph) == list(COLLECTIONS)
        assert len(small_graph) == 38

    def test_timestamps_frozen_at_as_of(self, small_graph):
        stamps = {p["timestamp"] for p in small_graph.products}
        assert stamps == {"2024-06-30T00:00:00.000Z"}

    def test_order_dates_within_window(self, small_graph):
        dates = [po["order_date"] for po in small_graph.purchase_orders]
        assert all("2024-04-01" <= d <= "2024-06-30" for d in dates)

    def test_ids_are_counter_prefixed(self, small_graph):
        assert small_graph.currencies[0]["currency_id"].startswith("00000001-")


class TestPresets:
    """Preset sizing and override precedence."""

    @pytest.mark.parametrize(
        "preset,products,locations",
        [("small", 100, 3), ("medium", 500, 4), ("large", 1000, 5)],
    )
    def test_preset_product_count(self, preset, products, locations):
        graph = generate(preset=preset, seed=1, as_of=AS_OF)
        assert len(graph.products) == products
        assert len(graph.locations) == locations

    def test_overrides_win_over_preset(self):
        graph = generate(preset="medium", products=10, seed=1, as_of=AS_OF)
        assert len(graph.products) == 10
        assert len(graph.locations) == 4

    def test_options_object_accepted(self):
        options = GenerateOptions(products=12, vendors=2, customers=2, seed=5, as_of=AS_OF)
        graph = generate(options)
        assert len(graph.products) == 12
        assert len(graph.vendors) == 2

    def test_keyword_overrides_win_over_options(self):
        graph = generate({"products": 50, "seed": 5, "as_of": AS_OF}, products=15)
        assert len(graph.products) == 15


class TestClamping:
    """Requests above the fixed pools are clamped, not errors."""

    def test_vendors_clamped(self):
        graph = _small(vendors=100)
        assert len(graph.vendors) == len(VENDORS)
        assert len(graph.purchase_orders) == 2 * len(VENDORS)

    def test_customers_clamped(self):
        graph = _small(customers=100)
        assert len(graph.customers) == len(CUSTOMERS)

    def test_locations_clamped(self):
        graph = _small(locations=10)
        assert len(graph.locations) == len(LOCATIONS)

    def test_clamp_reported_when_verbose(self, capsys):
        _small(vendors=100, verbose=True)
        out = capsys.readouterr().out
        assert "clamped to pool size" in out

    def test_vendor_names_distinct(self):
        graph = _small(vendors=len(VENDORS))
        names = [v["name"] for v in graph.vendors]
        assert len(set(names)) == len(names)


class TestSizes:
    """Unusual but valid sizes."""

    def test_single_location_skips_transfers(self):
        graph = _small(locations=1)
        assert graph.stock_transfers == ()
        assert graph.stock_transfer_lines == ()

    def test_zero_customers(self):
        graph = _small(customers=0)
        assert graph.customers == ()
        assert graph.sales_orders == ()


class TestErrors:
    """Errors abort the whole call."""

    def test_zero_locations_raises(self):
        with pytest.raises(EmptySequenceError):
            _small(locations=0)

    def test_zero_vendors_raises(self):
        with pytest.raises(EmptySequenceError):
            _small(vendors=0)

    def test_zero_products_raises(self):
        """Order lines need products to choose from."""
        with pytest.raises(EmptySequenceError):
            _small(products=0)

    def test_unknown_category_raises(self):
        with pytest.raises(ConfigurationError, match="Widgets"):
            _small(product_categories=["Widgets"])

    def test_empty_category_selection_raises(self):
        with pytest.raises(ConfigurationError, match="at least one category"):
            _small(product_categories=[])

    def test_manufacturable_only_selection_raises(self):
        """BOM components must come from non-manufacturable products."""
        with pytest.raises(EmptySequenceError, match="non-manufacturable"):
            _small(product_categories=["Motors"])

    def test_category_selection_limits_templates(self):
        graph = _small(product_categories=["Fasteners", "Motors"])
        prefixes = {p["sku"].split("-")[0] for p in graph.products}
        assert prefixes <= {"HB", "SC", "HN", "MT"}

    def test_uninstantiated_category_falls_back(self):
        """Motors is beyond the first twelve categories; products still get one."""
        graph = _small(product_categories=["Fasteners", "Motors"])
        category_ids = {c["category_id"] for c in graph.categories}
        assert all(p["category_id"] in category_ids for p in graph.products)


class TestImmutability:
    """The returned graph cannot be changed."""

    def test_graph_type(self, small_graph):
        assert isinstance(small_graph, EntityGraph)
        assert small_graph.seed == 42

    def test_collections_are_tuples(self, small_graph):
        assert isinstance(small_graph.products, tuple)
        assert small_graph["products"] is small_graph.products

    def test_records_read_only(self, small_graph):
        with pytest.raises(TypeError):
            small_graph.products[0]["sku"] = "XX-0000"

    def test_attributes_read_only(self, small_graph):
        with pytest.raises(AttributeError):
            small_graph.products = ()

    def test_unknown_collection_attribute(self, small_graph):
        with pytest.raises(AttributeError):
            small_graph.widgets

    def test_to_dict_is_a_copy(self, small_graph):
        data = small_graph.to_dict()
        data["products"][0]["sku"] = "XX-0000"
        assert small_graph.products[0]["sku"] != "XX-0000"

    def test_row_counts(self, small_graph):
        counts = small_graph.row_counts()
        assert counts["products"] == 100
        assert sum(counts.values()) == small_graph.total_rows()


class TestVerbose:
    """Progress output is gated by verbose."""

    def test_quiet_by_default(self, capsys):
        _small()
        assert capsys.readouterr().out == ""

    def test_verbose_prints_levels(self, capsys):
        _small(verbose=True)
        out = capsys.readouterr().out
        for level in range(7):
            assert f"Level {level}:" in out
        assert "Total rows:" in out

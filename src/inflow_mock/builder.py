"""
EntityGraphBuilder - orchestrates generation of the full entity graph.

Generation follows 7 levels (0-6) in foreign-key dependency order:

    0  reference data, team members, custom fields
    1  vendors, customers
    2  products + barcodes, inventory, prices, reorder settings, vendor items
    3  BOMs, product operations
    4  purchase / sales / manufacturing orders
    5  transfers, adjustments, cost adjustments, stock counts
    6  product summary

Each level reads only collections produced by earlier levels. The graph is
frozen and returned only after every level has succeeded; any error aborts
the whole run.

Usage:
    from inflow_mock import generate

    graph = generate(preset="small", seed=42)
    graph.row_counts()
"""

from __future__ import annotations

import time
from typing import Any, Mapping

from faker import Faker

from .config import GenerateConfig, GenerateOptions, resolve_config, select_templates
from .generators import LEVEL_GENERATORS, GeneratorContext
from .graph import EntityGraph
from .random_source import LCG_MASK, SeededRandom, frozen_clock

FAKER_LOCALE = "en_US"

LEVEL_COLLECTIONS: dict[int, tuple[str, ...]] = {
    0: ("currencies", "payment_terms", "pricing_schemes", "taxing_schemes", "tax_codes",
        "adjustment_reasons", "operation_types", "categories", "locations", "team_members",
        "custom_field_definitions", "custom_field_dropdown_options", "custom_fields"),
    1: ("vendors", "customers"),
    2: ("products", "product_barcodes", "inventory_lines", "product_prices",
        "reorder_settings", "vendor_items"),
    3: ("item_boms", "product_operations"),
    4: ("purchase_orders", "purchase_order_lines", "sales_orders", "sales_order_lines",
        "manufacturing_orders"),
    5: ("stock_transfers", "stock_transfer_lines", "stock_adjustments",
        "stock_adjustment_lines", "product_cost_adjustments",
        "product_cost_adjustment_lines", "stock_counts", "count_sheets", "count_sheet_lines"),
    6: ("product_summary",),
}


class EntityGraphBuilder:
    """
    Builds one EntityGraph from a resolved configuration.

    The builder owns the run's SeededRandom (clocked at config.as_of) and a
    Faker instance seeded from it, so the graph depends only on the config.
    A builder is single-use: call build() once.
    """

    def __init__(self, config: GenerateConfig):
        self.config = config

        rng = SeededRandom(config.seed, unique_ids=True, clock=frozen_clock(config.as_of))
        fake = Faker(FAKER_LOCALE)
        fake.seed_instance(rng.range(0, LCG_MASK))

        self.ctx = GeneratorContext(
            config=config,
            rng=rng,
            fake=fake,
            templates=select_templates(config.product_categories),
        )
        self.ctx.init_data_tables()

        self._generators = [cls(self.ctx) for cls in LEVEL_GENERATORS]

    def _print(self, message: str = "") -> None:
        if self.config.verbose:
            print(message)

    def build(self) -> EntityGraph:
        """
        Generate all levels in order and freeze the result.

        Raises:
            ConfigurationError: Invalid product category selection
            EmptySequenceError: A level had to choose from an empty collection
            UniquenessError: SKU space exhausted
        """
        if self.ctx.generated_levels:
            raise RuntimeError("EntityGraphBuilder.build() can only be called once")

        cfg = self.config
        self._print("=" * 60)
        self._print("inflow-mock - Entity Graph Generation")
        self._print("=" * 60)
        self._print(f"Seed: {cfg.seed}")
        self._print(f"As of: {cfg.as_of.date().isoformat()}")
        self._print(
            f"Preset: {cfg.preset} (products={cfg.products}, vendors={cfg.vendors}, "
            f"customers={cfg.customers}, locations={cfg.locations})"
        )
        self._print()

        gen_start = time.time()
        for level, generator in enumerate(self._generators):
            level_start = time.time()
            generator.generate()
            self._report_level_stats(level, time.time() - level_start)
        gen_elapsed = time.time() - gen_start

        graph = EntityGraph(self.ctx.data, seed=cfg.seed)

        self._print()
        self._print(f"Total rows: {graph.total_rows():,} across {len(graph)} collections")
        self._print(f"Total time: {gen_elapsed:.2f}s")
        return graph

    def _report_level_stats(self, level: int, elapsed: float) -> None:
        rows = sum(len(self.ctx.data[t]) for t in LEVEL_COLLECTIONS[level])
        self._print(f"    {elapsed:.2f}s ({rows:,} rows)")


def generate(
    options: GenerateOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> EntityGraph:
    """
    Generate a complete entity graph.

    Args:
        options: GenerateOptions or mapping (preset, products, vendors,
            customers, locations, seed, as_of, product_categories, verbose)
        **overrides: Same keys; win over `options`

    Returns:
        Immutable EntityGraph

    Example:
        graph = generate({"preset": "medium"}, seed=7)
    """
    config = resolve_config(options, **overrides)
    return EntityGraphBuilder(config).build()

"""
Base classes for the level generators.

This module provides:
- GeneratorContext: Shared state dataclass passed to all level generators
- BaseLevelGenerator: Abstract base class for level-specific generators

Design Principles:
- Context owns all mutable state (data storage, SKU index, on-hand totals, indexes)
- Generators hold no state of their own; they read/write the context
- Every random draw goes through ctx.rng, in a fixed order
- Lookup indexes are built by the context once the collections they cover
  are complete (ctx.build_indexes(level))
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from faker import Faker

from ..config import GenerateConfig
from ..exceptions import EmptySequenceError
from ..lookup_builder import LookupBuilder, LookupIndex
from ..random_source import SeededRandom
from ..schema import COLLECTIONS


@dataclass
class GeneratorContext:
    """
    Shared state for all level generators.

    Generators receive this context and can:
    - Read/write to the shared data dict
    - Track issued SKUs (the uniqueness index)
    - Read the FK lookup indexes built after Level 2

    Attributes:
        config: Resolved configuration for this run
        rng: The run's single SeededRandom
        fake: Faker instance seeded from rng (contact names and addresses)
        templates: Product templates in play for this run
        generated_levels: Set of levels already generated
        data: Shared data storage - collection name -> list of row dicts
    """

    # ==========================================================================
    # Core Random State
    # ==========================================================================
    config: GenerateConfig
    rng: SeededRandom
    fake: Faker
    templates: tuple = ()

    # ==========================================================================
    # Generation Tracking
    # ==========================================================================
    generated_levels: set[int] = field(default_factory=set)

    # ==========================================================================
    # Shared Data Storage
    # ==========================================================================
    data: dict[str, list[dict]] = field(default_factory=dict)

    # ==========================================================================
    # SKU tracking - Level 2
    # ==========================================================================
    # SKU -> product_id; also the SKU uniqueness index
    sku_ids: dict[str, str] = field(default_factory=dict)
    # SKUs issued per prefix, to detect an exhausted suffix space
    sku_counts: dict[str, int] = field(default_factory=dict)

    # Running on-hand total per product_id, summed over its inventory lines
    on_hand_totals: dict[str, int] = field(default_factory=dict)

    # ==========================================================================
    # Lookup indexes - built by build_indexes() after Level 2
    # ==========================================================================
    vendor_items_by_product: LookupIndex | None = field(default=None, repr=False)
    prices_by_product: LookupIndex | None = field(default=None, repr=False)
    inventory_by_product_location: LookupIndex | None = field(default=None, repr=False)

    @property
    def verbose(self) -> bool:
        return self.config.verbose

    def init_data_tables(self) -> None:
        """Initialize empty lists for all 38 collections."""
        for name in COLLECTIONS:
            self.data[name] = []

    def build_indexes(self, level: int) -> None:
        """
        Build the lookup indexes that become valid once `level` is complete.

        Level 2 completes vendor items, prices and inventory lines, which
        Levels 4-6 look up by product (and location).

        Args:
            level: Generation level just completed (0-6)
        """
        if level == 2:
            self.vendor_items_by_product = LookupBuilder.build_vendor_items_by_product(
                self.data["vendor_items"]
            )
            self.prices_by_product = LookupBuilder.build_prices_by_product(
                self.data["product_prices"]
            )
            self.inventory_by_product_location = LookupBuilder.build_inventory_by_product_location(
                self.data["inventory_lines"]
            )

    def primary_location(self) -> dict[str, Any]:
        """
        The first location; reorder settings and summaries live here.

        Raises:
            EmptySequenceError: If no locations were generated
        """
        locations = self.data["locations"]
        if not locations:
            raise EmptySequenceError("locations")
        return locations[0]

    def base_currency(self) -> dict[str, Any]:
        return next(c for c in self.data["currencies"] if c["is_base_currency"])


class BaseLevelGenerator(ABC):
    """
    Abstract base class for level-specific generators.

    Each level generator implements generate(), which reads from and
    writes to the shared GeneratorContext.

    Subclasses should:
    1. Read required data from ctx.data (earlier levels only)
    2. Generate new rows and append to the appropriate collections
    3. Register natural keys that must stay unique (e.g., ctx.sku_ids[sku] = product_id)
    4. Mark the level complete: self.ctx.generated_levels.add(self.LEVEL)
    """

    LEVEL: int = -1

    def __init__(self, ctx: GeneratorContext) -> None:
        self.ctx = ctx

    @abstractmethod
    def generate(self) -> None:
        """Generate data for this level."""
        pass

    def report(self, message: str) -> None:
        """Print a progress line when the run is verbose."""
        if self.ctx.verbose:
            print(message)

    def new_id(self) -> str:
        return self.ctx.rng.uuid()

    def now(self) -> str:
        return self.ctx.rng.timestamp()

    @property
    def rng(self) -> SeededRandom:
        """Convenience accessor for the run's random source."""
        return self.ctx.rng

    @property
    def fake(self) -> Faker:
        """Convenience accessor for Faker instance."""
        return self.ctx.fake

    @property
    def data(self) -> dict[str, list[dict]]:
        """Convenience accessor for shared data storage."""
        return self.ctx.data

"""
Generators Package - Level generators for the entity graph.

Base Classes:
- GeneratorContext: Shared state dataclass passed to all generators
- BaseLevelGenerator: Abstract base class for level-specific generators

Level Generators (run in order; each reads earlier levels only):
- Level0Generator: Reference data (currencies, schemes, categories, locations,
  team members, custom fields)
- Level1Generator: Parties (vendors, customers)
- Level2Generator: Products and per-product details
- Level3Generator: Manufacturing structure (BOMs, operations)
- Level4Generator: Orders (purchase, sales, manufacturing)
- Level5Generator: Stock operations and cost adjustments
- Level6Generator: Product summary
"""

from .base import BaseLevelGenerator, GeneratorContext
from .level_0_reference import Level0Generator
from .level_1_parties import Level1Generator
from .level_2_product import Level2Generator
from .level_3_manufacturing import Level3Generator
from .level_4_orders import Level4Generator
from .level_5_stock import Level5Generator
from .level_6_summary import Level6Generator

LEVEL_GENERATORS = (
    Level0Generator,
    Level1Generator,
    Level2Generator,
    Level3Generator,
    Level4Generator,
    Level5Generator,
    Level6Generator,
)

__all__ = [
    # Base classes
    "GeneratorContext",
    "BaseLevelGenerator",
    # Levels
    "Level0Generator",
    "Level1Generator",
    "Level2Generator",
    "Level3Generator",
    "Level4Generator",
    "Level5Generator",
    "Level6Generator",
    "LEVEL_GENERATORS",
]

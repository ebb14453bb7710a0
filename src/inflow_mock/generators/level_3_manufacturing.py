"""
Level 3 Generator: Manufacturing structure.

Tables generated:
- item_boms (2-5 components per manufacturable product)
- product_operations (1-3 operations per manufacturable product)

BOM components are drawn only from non-manufacturable products, so every
BOM has depth one and the product/component graph is acyclic.
"""

from .base import BaseLevelGenerator
from ..exceptions import EmptySequenceError
from ..helpers import to_money

BOM_COMPONENT_RANGE = (2, 5)
BOM_QUANTITY_RANGE = (1, 10)
OPERATION_COUNT_RANGE = (1, 3)
OPERATION_MINUTES_RANGE = (15, 120)
OPERATION_COST_RANGE = (10, 100)


class Level3Generator(BaseLevelGenerator):
    """Generate Level 3 BOMs and routing operations."""

    LEVEL = 3

    def generate(self) -> None:
        self.report("  Level 3: Manufacturing structure (BOMs, operations)")

        products = self.data["products"]
        manufacturable = [p for p in products if p["is_manufacturable"]]
        stock = [p for p in products if not p["is_manufacturable"]]

        if manufacturable and not stock:
            raise EmptySequenceError("non-manufacturable products")

        for product in manufacturable:
            self._generate_bom(product, stock)
            self._generate_operations(product)

        self.ctx.generated_levels.add(self.LEVEL)
        self.report(
            f"    Generated: {len(self.data['item_boms'])} BOM lines, "
            f"{len(self.data['product_operations'])} operations "
            f"for {len(manufacturable)} manufacturable products"
        )

    def _generate_bom(self, product: dict, stock: list[dict]) -> None:
        count = self.rng.range(*BOM_COMPONENT_RANGE)
        for component in self.rng.pick_multiple(stock, count):
            self.data["item_boms"].append(
                {
                    "item_bom_id": self.new_id(),
                    "product_id": product["product_id"],
                    "child_product_id": component["product_id"],
                    "quantity": self.rng.range(*BOM_QUANTITY_RANGE),
                    "uom_name": component["standard_uom_name"],
                    "timestamp": self.now(),
                }
            )

    def _generate_operations(self, product: dict) -> None:
        count = self.rng.range(*OPERATION_COUNT_RANGE)
        ops = self.rng.pick_multiple(self.data["operation_types"], count)
        for line_num, op in enumerate(ops, 1):
            self.data["product_operations"].append(
                {
                    "product_operation_id": self.new_id(),
                    "product_id": product["product_id"],
                    "operation_type_id": op["operation_type_id"],
                    "line_num": line_num,
                    "instructions": f"Perform {op['name']} operation",
                    "estimated_minutes": self.rng.range(*OPERATION_MINUTES_RANGE),
                    "cost": to_money(self.rng.range_float(*OPERATION_COST_RANGE)),
                    "timestamp": self.now(),
                }
            )

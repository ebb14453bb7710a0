"""
Level 6 Generator: Computed product summary.

Tables generated:
- product_summary (one row per product, at the primary location)

Aggregates per product:
- quantity_on_hand: sum of the product's inventory lines (Level 2 total)
- quantity_on_purchase_order: ordered but not yet received on POs
- quantity_reserved: ordered but not yet shipped on SOs
- quantity_on_order: not yet completed on manufacturing orders
- quantity_available: on hand less reserved, floored at 0
"""

from .base import BaseLevelGenerator
from ..lookup_builder import LookupBuilder


class Level6Generator(BaseLevelGenerator):
    """Generate the Level 6 product summary."""

    LEVEL = 6

    def generate(self) -> None:
        self.report("  Level 6: Product summary")

        po_lines_by_product = LookupBuilder.build(self.data["purchase_order_lines"], "product_id")
        so_lines_by_product = LookupBuilder.build(self.data["sales_order_lines"], "product_id")
        mos_by_product = LookupBuilder.build(self.data["manufacturing_orders"], "product_id")

        if self.data["products"]:
            location_id = self.ctx.primary_location()["location_id"]

        for product in self.data["products"]:
            product_id = product["product_id"]
            on_hand = self.ctx.on_hand_totals.get(product_id, 0)
            on_po = sum(
                line["quantity"] - line["quantity_received"]
                for line in po_lines_by_product.get(product_id)
            )
            reserved = sum(
                line["quantity"] - line["quantity_shipped"]
                for line in so_lines_by_product.get(product_id)
            )
            on_order = sum(
                mo["quantity"] - (mo["quantity_completed"] or 0)
                for mo in mos_by_product.get(product_id)
            )

            self.data["product_summary"].append(
                {
                    "product_summary_id": self.new_id(),
                    "product_id": product_id,
                    "location_id": location_id,
                    "quantity_on_hand": on_hand,
                    "quantity_available": max(0, on_hand - reserved),
                    "quantity_on_order": on_order,
                    "quantity_on_purchase_order": on_po,
                    "quantity_reserved": reserved,
                }
            )

        self.ctx.generated_levels.add(self.LEVEL)
        self.report(f"    Generated: {len(self.data['product_summary'])} summary rows")

"""
Level 2 Generator: Products and their per-product detail records.

Tables generated:
- products
- product_barcodes (p=0.8 per product)
- inventory_lines (one per location with non-zero quantity)
- product_prices (one per pricing scheme)
- reorder_settings (one per product, at the primary location)
- vendor_items (one per product, from its supplying vendor)

SKUs are <prefix>-<4 digits>, unique across the run (retry on collision).
After generation, builds the vendor-item, price and inventory indexes used
by Levels 4-6.
"""

from decimal import Decimal

from .base import BaseLevelGenerator
from ..constants import DIMENSIONS, PRICING_SCHEMES
from ..exceptions import UniquenessError
from ..helpers import to_money
from ..lookup_builder import LookupBuilder

BARCODE_PROBABILITY = 0.8
INVENTORY_QTY_RANGE = (0, 200)
COST_RATIO_RANGE = (0.4, 0.7)
VENDOR_LEAD_TIME_RANGE = (3, 21)
SKU_SUFFIX_RANGE = (1000, 9999)
SKU_SPACE = SKU_SUFFIX_RANGE[1] - SKU_SUFFIX_RANGE[0] + 1
MAX_SKU_ATTEMPTS = 1000

PRICE_MULTIPLIERS = {s["name"]: Decimal(s["multiplier"]) for s in PRICING_SCHEMES}


class Level2Generator(BaseLevelGenerator):
    """
    Generate Level 2 product data.

    Each product draws, in order: template, size token, category (fallback
    only), vendor, then its own fields, then its detail records.
    """

    LEVEL = 2

    def generate(self) -> None:
        self.report(f"  Level 2: Products ({self.ctx.config.products} requested)")

        category_by_name = LookupBuilder.build_categories_by_name(self.data["categories"])

        for _ in range(self.ctx.config.products):
            self._generate_product(category_by_name)

        self.ctx.build_indexes(self.LEVEL)
        self.ctx.generated_levels.add(self.LEVEL)
        manufacturable = sum(1 for p in self.data["products"] if p["is_manufacturable"])
        self.report(
            f"    Generated: {len(self.data['products'])} products "
            f"({manufacturable} manufacturable), "
            f"{len(self.data['inventory_lines'])} inventory lines, "
            f"{len(self.data['product_barcodes'])} barcodes"
        )

    def _unique_sku(self, prefix: str) -> str:
        """
        Draw a <prefix>-NNNN SKU not yet used in this run.

        Raises:
            UniquenessError: If the prefix's suffix space is full or no free
                SKU was drawn within MAX_SKU_ATTEMPTS
        """
        if self.ctx.sku_counts.get(prefix, 0) >= SKU_SPACE:
            raise UniquenessError(f"sku for prefix {prefix}", 0)
        for _ in range(MAX_SKU_ATTEMPTS):
            sku = f"{prefix}-{self.rng.range(*SKU_SUFFIX_RANGE)}"
            if sku not in self.ctx.sku_ids:
                self.ctx.sku_counts[prefix] = self.ctx.sku_counts.get(prefix, 0) + 1
                return sku
        raise UniquenessError(f"sku for prefix {prefix}", MAX_SKU_ATTEMPTS)

    def _generate_product(self, category_by_name: dict) -> None:
        template = self.rng.pick(self.ctx.templates)
        size = self.rng.pick(DIMENSIONS[template["sizes"]])
        category = category_by_name.get(template["category"])
        if category is None:
            category = self.rng.pick(self.data["categories"])
        vendor = self.rng.pick(self.data["vendors"])

        product_id = self.new_id()
        sku = self._unique_sku(template["prefix"])
        self.ctx.sku_ids[sku] = product_id
        unit_price = to_money(self.rng.range_float(*template["price_range"]))
        cost = to_money(unit_price * Decimal(self.rng.range_float(*COST_RATIO_RANGE)))
        kind = template["name_pattern"].format(size="").strip()

        self.data["products"].append(
            {
                "product_id": product_id,
                "name": template["name_pattern"].format(size=size),
                "description": f"{kind} - {size} size",
                "sku": sku,
                "item_type": "Assembly" if template["manufacturable"] else "Stock",
                "is_active": True,
                "category_id": category["category_id"],
                "standard_uom_name": template["uom"],
                "is_manufacturable": template["manufacturable"],
                "timestamp": self.now(),
            }
        )

        if self.rng.boolean(BARCODE_PROBABILITY):
            self.data["product_barcodes"].append(
                {
                    "product_barcode_id": self.new_id(),
                    "product_id": product_id,
                    "barcode": self.rng.barcode(),
                    "line_num": 1,
                    "timestamp": self.now(),
                }
            )

        total_on_hand = 0
        for location in self.data["locations"]:
            qty = self.rng.range(*INVENTORY_QTY_RANGE)
            if qty > 0:
                self.data["inventory_lines"].append(
                    {
                        "inventory_line_id": self.new_id(),
                        "product_id": product_id,
                        "location_id": location["location_id"],
                        "quantity_on_hand": qty,
                        "timestamp": self.now(),
                    }
                )
                total_on_hand += qty
        self.ctx.on_hand_totals[product_id] = total_on_hand

        for scheme in self.data["pricing_schemes"]:
            self.data["product_prices"].append(
                {
                    "product_price_id": self.new_id(),
                    "product_id": product_id,
                    "pricing_scheme_id": scheme["pricing_scheme_id"],
                    "price_type": "Fixed",
                    "unit_price": to_money(unit_price * PRICE_MULTIPLIERS[scheme["name"]]),
                    "timestamp": self.now(),
                }
            )

        reorder_lo, reorder_hi = template["reorder_range"]
        self.data["reorder_settings"].append(
            {
                "reorder_settings_id": self.new_id(),
                "product_id": product_id,
                "location_id": self.ctx.primary_location()["location_id"],
                "vendor_id": vendor["vendor_id"],
                "enable_reordering": True,
                "reorder_method": "ReorderPoint",
                "reorder_point": self.rng.range(reorder_lo, reorder_hi),
                "reorder_quantity": self.rng.range(reorder_hi, reorder_hi * 4),
                "timestamp": self.now(),
            }
        )

        self.data["vendor_items"].append(
            {
                "vendor_item_id": self.new_id(),
                "vendor_id": vendor["vendor_id"],
                "product_id": product_id,
                "vendor_item_code": sku,
                "cost": cost,
                "lead_time_days": self.rng.range(*VENDOR_LEAD_TIME_RANGE),
                "line_num": 1,
                "timestamp": self.now(),
            }
        )

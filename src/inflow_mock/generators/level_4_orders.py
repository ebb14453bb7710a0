"""
Level 4 Generator: Order documents.

Tables generated:
- purchase_orders, purchase_order_lines (2 per vendor, 1-5 lines each)
- sales_orders, sales_order_lines (3 per customer, 1-5 lines each)
- manufacturing_orders (half of the manufacturable products, rounded down)

Line unit cost/price is copied from the product's vendor item / Standard
price, falling back to a fresh random value when the product has none.
Header subtotal and total are set only after all of the header's lines
exist, as the exact sum of their line totals.
"""

from .base import BaseLevelGenerator
from ..helpers import STATUS_WEIGHTS, sum_money, to_money

PO_PER_VENDOR = 2
SO_PER_CUSTOMER = 3
MO_PER_MANUFACTURABLE = 0.5

ORDER_LINE_RANGE = (1, 5)
PO_QTY_RANGE = (10, 100)
SO_QTY_RANGE = (1, 50)
MO_QTY_RANGE = (10, 100)
FALLBACK_UNIT_COST_RANGE = (5, 100)
FALLBACK_UNIT_PRICE_RANGE = (10, 200)

PO_NUMBER_BASE = 1000
SO_NUMBER_BASE = 2000
MO_NUMBER_BASE = 3000


class Level4Generator(BaseLevelGenerator):
    """Generate Level 4 purchase, sales and manufacturing orders."""

    LEVEL = 4

    def generate(self) -> None:
        self.report("  Level 4: Orders (purchase, sales, manufacturing)")

        self._generate_purchase_orders()
        self._generate_sales_orders()
        self._generate_manufacturing_orders()

        self.ctx.generated_levels.add(self.LEVEL)
        self.report(
            f"    Generated: {len(self.data['purchase_orders'])} POs "
            f"({len(self.data['purchase_order_lines'])} lines), "
            f"{len(self.data['sales_orders'])} SOs "
            f"({len(self.data['sales_order_lines'])} lines), "
            f"{len(self.data['manufacturing_orders'])} MOs"
        )

    def _status(self, doc_type: str) -> str:
        values, weights = STATUS_WEIGHTS[doc_type]
        return self.rng.weighted_pick(values, weights)

    def _generate_purchase_orders(self) -> None:
        currency = self.ctx.base_currency()
        po_count = PO_PER_VENDOR * len(self.data["vendors"])

        for i in range(po_count):
            vendor = self.rng.pick(self.data["vendors"])
            location = self.rng.pick(self.data["locations"])
            po_id = self.new_id()
            status = self._status("purchase_order")

            header = {
                "purchase_order_id": po_id,
                "order_number": f"PO-{PO_NUMBER_BASE + i}",
                "vendor_id": vendor["vendor_id"],
                "status": status,
                "order_date": self.rng.date(90),
                "expected_date": self.rng.date(30),
                "location_id": location["location_id"],
                "currency_id": currency["currency_id"],
                "exchange_rate": currency["exchange_rate"],
                "subtotal": None,
                "total": None,
                "timestamp": self.now(),
            }
            self.data["purchase_orders"].append(header)

            lines = []
            count = self.rng.range(*ORDER_LINE_RANGE)
            for line_num, product in enumerate(self.rng.pick_multiple(self.data["products"], count), 1):
                vendor_item = self.ctx.vendor_items_by_product.get_first(product["product_id"])
                qty = self.rng.range(*PO_QTY_RANGE)
                if vendor_item is not None:
                    unit_cost = vendor_item["cost"]
                else:
                    unit_cost = to_money(self.rng.range_float(*FALLBACK_UNIT_COST_RANGE))

                if status == "Received":
                    received = qty
                elif status == "PartiallyReceived":
                    received = self.rng.range(1, qty - 1)
                else:
                    received = 0

                lines.append(
                    {
                        "purchase_order_line_id": self.new_id(),
                        "purchase_order_id": po_id,
                        "product_id": product["product_id"],
                        "line_num": line_num,
                        "description": product["name"],
                        "quantity": qty,
                        "unit_cost": unit_cost,
                        "line_total": to_money(unit_cost * qty),
                        "quantity_received": received,
                        "timestamp": self.now(),
                    }
                )
            self.data["purchase_order_lines"].extend(lines)

            subtotal = sum_money(line["line_total"] for line in lines)
            header["subtotal"] = subtotal
            header["total"] = subtotal

    def _generate_sales_orders(self) -> None:
        currency = self.ctx.base_currency()
        so_count = SO_PER_CUSTOMER * len(self.data["customers"])

        for i in range(so_count):
            customer = self.rng.pick(self.data["customers"])
            location = self.rng.pick(self.data["locations"])
            so_id = self.new_id()
            status = self._status("sales_order")

            header = {
                "sales_order_id": so_id,
                "order_number": f"SO-{SO_NUMBER_BASE + i}",
                "customer_id": customer["customer_id"],
                "status": status,
                "order_date": self.rng.date(90),
                "expected_ship_date": self.rng.date(14),
                "location_id": location["location_id"],
                "currency_id": currency["currency_id"],
                "exchange_rate": currency["exchange_rate"],
                "subtotal": None,
                "total": None,
                "timestamp": self.now(),
            }
            self.data["sales_orders"].append(header)

            lines = []
            count = self.rng.range(*ORDER_LINE_RANGE)
            for line_num, product in enumerate(self.rng.pick_multiple(self.data["products"], count), 1):
                price = self.ctx.prices_by_product.get_first(product["product_id"])
                qty = self.rng.range(*SO_QTY_RANGE)
                if price is not None:
                    unit_price = price["unit_price"]
                else:
                    unit_price = to_money(self.rng.range_float(*FALLBACK_UNIT_PRICE_RANGE))

                if status == "Shipped":
                    picked, shipped = qty, qty
                elif status == "PartiallyShipped":
                    picked, shipped = qty, self.rng.range(0, qty - 1)
                else:
                    picked, shipped = 0, 0

                lines.append(
                    {
                        "sales_order_line_id": self.new_id(),
                        "sales_order_id": so_id,
                        "product_id": product["product_id"],
                        "line_num": line_num,
                        "description": product["name"],
                        "quantity": qty,
                        "unit_price": unit_price,
                        "line_total": to_money(unit_price * qty),
                        "quantity_picked": picked,
                        "quantity_shipped": shipped,
                        "timestamp": self.now(),
                    }
                )
            self.data["sales_order_lines"].extend(lines)

            subtotal = sum_money(line["line_total"] for line in lines)
            header["subtotal"] = subtotal
            header["total"] = subtotal

    def _generate_manufacturing_orders(self) -> None:
        manufacturable = [p for p in self.data["products"] if p["is_manufacturable"]]
        mo_count = int(len(manufacturable) * MO_PER_MANUFACTURABLE)

        for i in range(mo_count):
            product = self.rng.pick(manufacturable)
            location = self.rng.pick(self.data["locations"])
            status = self._status("manufacturing_order")
            qty = self.rng.range(*MO_QTY_RANGE)

            self.data["manufacturing_orders"].append(
                {
                    "manufacturing_order_id": self.new_id(),
                    "order_number": f"MO-{MO_NUMBER_BASE + i}",
                    "product_id": product["product_id"],
                    "status": status,
                    "quantity": qty,
                    "quantity_completed": qty if status == "Completed" else None,
                    "order_date": self.rng.date(60),
                    "expected_date": self.rng.date(30),
                    "location_id": location["location_id"],
                    "timestamp": self.now(),
                }
            )

"""
Level 5 Generator: Stock operations and cost adjustments.

Tables generated:
- stock_transfers, stock_transfer_lines (only with 2+ locations)
- stock_adjustments, stock_adjustment_lines
- product_cost_adjustments, product_cost_adjustment_lines
- stock_counts, count_sheets, count_sheet_lines

Count sheet lines snapshot the inventory-line quantity of the product at
the count's location (0 when the product has no stock there). A counted
quantity is recorded only once the count is InReview or Completed.
"""

from decimal import Decimal

from .base import BaseLevelGenerator
from ..helpers import STATUS_WEIGHTS, to_money

TRANSFER_COUNT_RANGE = (5, 10)
TRANSFER_LINE_RANGE = (1, 4)
TRANSFER_QTY_RANGE = (5, 50)

ADJUSTMENT_COUNT_RANGE = (5, 10)
ADJUSTMENT_LINE_RANGE = (1, 3)
ADJUSTMENT_QTY_RANGE = (1, 20)

COST_ADJUSTMENT_COUNT_RANGE = (2, 5)
COST_ADJUSTMENT_LINE_RANGE = (2, 6)
COST_CHANGE_RANGE = (0.9, 1.15)
FALLBACK_OLD_COST = Decimal("10.00")

STOCK_COUNT_RANGE = (2, 4)
SHEETS_PER_COUNT_RANGE = (1, 3)
LINES_PER_SHEET_RANGE = (3, 8)
COUNT_VARIANCE_RANGE = (-5, 5)
COUNTED_STATUSES = frozenset({"InReview", "Completed"})

TRANSFER_NUMBER_BASE = 4000
ADJUSTMENT_NUMBER_BASE = 5000
COST_ADJUSTMENT_NUMBER_BASE = 6000
STOCK_COUNT_NUMBER_BASE = 7000


class Level5Generator(BaseLevelGenerator):
    """Generate Level 5 stock transfers, adjustments, cost adjustments and counts."""

    LEVEL = 5

    def generate(self) -> None:
        self.report("  Level 5: Stock operations (transfers, adjustments, counts)")

        self._generate_transfers()
        self._generate_adjustments()
        self._generate_cost_adjustments()
        self._generate_stock_counts()

        self.ctx.generated_levels.add(self.LEVEL)
        self.report(
            f"    Generated: {len(self.data['stock_transfers'])} transfers, "
            f"{len(self.data['stock_adjustments'])} adjustments, "
            f"{len(self.data['product_cost_adjustments'])} cost adjustments, "
            f"{len(self.data['stock_counts'])} stock counts "
            f"({len(self.data['count_sheet_lines'])} count lines)"
        )

    def _status(self, doc_type: str) -> str:
        values, weights = STATUS_WEIGHTS[doc_type]
        return self.rng.weighted_pick(values, weights)

    def _generate_transfers(self) -> None:
        locations = self.data["locations"]
        if len(locations) < 2:
            self.report("    Skipping transfers: fewer than 2 locations")
            return

        for i in range(self.rng.range(*TRANSFER_COUNT_RANGE)):
            from_loc, to_loc = self.rng.pick_multiple(locations, 2)
            transfer_id = self.new_id()
            self.data["stock_transfers"].append(
                {
                    "stock_transfer_id": transfer_id,
                    "transfer_number": f"TR-{TRANSFER_NUMBER_BASE + i}",
                    "status": self._status("stock_transfer"),
                    "transfer_date": self.rng.date(30),
                    "from_location_id": from_loc["location_id"],
                    "to_location_id": to_loc["location_id"],
                    "timestamp": self.now(),
                }
            )

            count = self.rng.range(*TRANSFER_LINE_RANGE)
            for line_num, product in enumerate(self.rng.pick_multiple(self.data["products"], count), 1):
                self.data["stock_transfer_lines"].append(
                    {
                        "stock_transfer_line_id": self.new_id(),
                        "stock_transfer_id": transfer_id,
                        "product_id": product["product_id"],
                        "line_num": line_num,
                        "quantity": self.rng.range(*TRANSFER_QTY_RANGE),
                        "timestamp": self.now(),
                    }
                )

    def _generate_adjustments(self) -> None:
        for i in range(self.rng.range(*ADJUSTMENT_COUNT_RANGE)):
            location = self.rng.pick(self.data["locations"])
            reason = self.rng.pick(self.data["adjustment_reasons"])
            adjustment_id = self.new_id()
            self.data["stock_adjustments"].append(
                {
                    "stock_adjustment_id": adjustment_id,
                    "adjustment_number": f"ADJ-{ADJUSTMENT_NUMBER_BASE + i}",
                    "adjustment_date": self.rng.date(60),
                    "location_id": location["location_id"],
                    "adjustment_reason_id": reason["adjustment_reason_id"],
                    "timestamp": self.now(),
                }
            )

            count = self.rng.range(*ADJUSTMENT_LINE_RANGE)
            for line_num, product in enumerate(self.rng.pick_multiple(self.data["products"], count), 1):
                sign = 1 if self.rng.boolean(0.5) else -1
                self.data["stock_adjustment_lines"].append(
                    {
                        "stock_adjustment_line_id": self.new_id(),
                        "stock_adjustment_id": adjustment_id,
                        "product_id": product["product_id"],
                        "line_num": line_num,
                        "quantity": sign * self.rng.range(*ADJUSTMENT_QTY_RANGE),
                        "timestamp": self.now(),
                    }
                )

    def _generate_cost_adjustments(self) -> None:
        for i in range(self.rng.range(*COST_ADJUSTMENT_COUNT_RANGE)):
            adjustment_id = self.new_id()
            self.data["product_cost_adjustments"].append(
                {
                    "product_cost_adjustment_id": adjustment_id,
                    "adjustment_number": f"CA-{COST_ADJUSTMENT_NUMBER_BASE + i}",
                    "adjustment_date": self.rng.date(90),
                    "remarks": "Periodic cost review",
                    "timestamp": self.now(),
                }
            )

            count = self.rng.range(*COST_ADJUSTMENT_LINE_RANGE)
            for line_num, product in enumerate(self.rng.pick_multiple(self.data["products"], count), 1):
                vendor_item = self.ctx.vendor_items_by_product.get_first(product["product_id"])
                old_cost = vendor_item["cost"] if vendor_item is not None else FALLBACK_OLD_COST
                change = Decimal(self.rng.range_float(*COST_CHANGE_RANGE))
                self.data["product_cost_adjustment_lines"].append(
                    {
                        "product_cost_adjustment_line_id": self.new_id(),
                        "product_cost_adjustment_id": adjustment_id,
                        "product_id": product["product_id"],
                        "line_num": line_num,
                        "old_cost": old_cost,
                        "new_cost": to_money(old_cost * change),
                        "timestamp": self.now(),
                    }
                )

    def _generate_stock_counts(self) -> None:
        for i in range(self.rng.range(*STOCK_COUNT_RANGE)):
            location = self.rng.pick(self.data["locations"])
            assignee = self.rng.pick(self.data["team_members"])
            stock_count_id = self.new_id()
            status = self._status("stock_count")

            self.data["stock_counts"].append(
                {
                    "stock_count_id": stock_count_id,
                    "stock_count_number": f"SC-{STOCK_COUNT_NUMBER_BASE + i}",
                    "status": status,
                    "location_id": location["location_id"],
                    "assigned_to_team_member_id": assignee["team_member_id"],
                    "is_prepared": True,
                    "is_started": status != "Open",
                    "is_reviewed": status in COUNTED_STATUSES,
                    "is_completed": status == "Completed",
                    "is_cancelled": False,
                    "started_date": self.rng.date(30) if status != "Open" else None,
                    "completed_date": self.rng.date(7) if status == "Completed" else None,
                    "timestamp": self.now(),
                }
            )

            for sheet_number in range(1, self.rng.range(*SHEETS_PER_COUNT_RANGE) + 1):
                self._generate_count_sheet(stock_count_id, sheet_number, status, location)

    def _generate_count_sheet(
        self,
        stock_count_id: str,
        sheet_number: int,
        count_status: str,
        location: dict,
    ) -> None:
        count_sheet_id = self.new_id()
        assignee = self.rng.pick(self.data["team_members"])
        if count_status == "Completed":
            sheet_status = "Completed"
        else:
            sheet_status = self._status("count_sheet")

        self.data["count_sheets"].append(
            {
                "count_sheet_id": count_sheet_id,
                "stock_count_id": stock_count_id,
                "sheet_number": sheet_number,
                "status": sheet_status,
                "assigned_to_team_member_id": assignee["team_member_id"],
                "is_cancelled": False,
                "is_completed": count_status == "Completed",
                "timestamp": self.now(),
            }
        )

        inventory = self.ctx.inventory_by_product_location
        count = self.rng.range(*LINES_PER_SHEET_RANGE)
        for product in self.rng.pick_multiple(self.data["products"], count):
            inv_line = inventory.get_first((product["product_id"], location["location_id"]))
            snapshot = inv_line["quantity_on_hand"] if inv_line is not None else 0
            variance = self.rng.range(*COUNT_VARIANCE_RANGE)
            counted = max(0, snapshot + variance) if count_status in COUNTED_STATUSES else None

            self.data["count_sheet_lines"].append(
                {
                    "count_sheet_line_id": self.new_id(),
                    "count_sheet_id": count_sheet_id,
                    "product_id": product["product_id"],
                    "description": product["name"],
                    "counted_quantity": counted,
                    "counted_uom": product["standard_uom_name"],
                    "snapshot_quantity": snapshot,
                    "snapshot_uom": product["standard_uom_name"],
                    "timestamp": self.now(),
                }
            )

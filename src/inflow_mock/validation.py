"""
Validation checks for a generated entity graph.

Contains:
- Row count validation (cardinalities implied by the generation rules)
- Reference flag validation (base currency, default scheme/tax code)
- Referential integrity over the full foreign-key map
- Order total validation (header totals = sum of line totals)
- BOM validation (depth-one, acyclic)
- Count sheet snapshot validation
- SKU uniqueness validation
- Product summary validation

Every check returns (passed, message). The validator accepts an EntityGraph
or any mapping of collection name -> rows (e.g. graph.to_dict()), so checks
can be exercised against deliberately corrupted copies.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Any, Mapping, Sequence

import networkx as nx

from .config import GenerateConfig
from .constants import (
    ADJUSTMENT_REASONS,
    CURRENCIES,
    LOCATIONS,
    MAX_CATEGORIES,
    OPERATION_TYPES,
    PAYMENT_TERMS,
    PRICING_SCHEMES,
    TAXING_SCHEMES,
    TEAM_MEMBERS,
)
from .helpers import sum_money
from .lookup_builder import LookupBuilder
from .schema import FOREIGN_KEYS, HEADER_LINES, PRIMARY_KEYS

SKU_PATTERN = re.compile(r"^[A-Z]{2}-\d{4}$")
COUNTED_STATUSES = frozenset({"InReview", "Completed"})
MAX_COUNT_VARIANCE = 5

FIXED_ROW_COUNTS = {
    "currencies": len(CURRENCIES),
    "payment_terms": len(PAYMENT_TERMS),
    "pricing_schemes": len(PRICING_SCHEMES),
    "taxing_schemes": len(TAXING_SCHEMES),
    "tax_codes": sum(len(s["tax_codes"]) for s in TAXING_SCHEMES),
    "adjustment_reasons": len(ADJUSTMENT_REASONS),
    "operation_types": len(OPERATION_TYPES),
    "categories": MAX_CATEGORIES,
    "team_members": len(TEAM_MEMBERS),
    "custom_fields": 1,
}


class GraphValidator:
    """
    Validator for a generated entity graph.

    Args:
        data: EntityGraph or mapping of collection name -> rows
        config: Optional configuration the graph was built from; enables
            the requested-count checks
    """

    def __init__(
        self,
        data: Mapping[str, Sequence[Mapping[str, Any]]],
        config: GenerateConfig | None = None,
    ) -> None:
        self.data = data
        self.config = config

    def _rows(self, name: str) -> Sequence[Mapping[str, Any]]:
        return self.data.get(name, ())

    def validate_row_counts(self) -> tuple[bool, str]:
        """
        Check cardinalities implied by the generation rules.

        Returns:
            Tuple of (passed, message)
        """
        errors = []
        for name, expected in FIXED_ROW_COUNTS.items():
            actual = len(self._rows(name))
            if actual != expected:
                errors.append(f"{name}: {actual} (expected {expected})")

        products = len(self._rows("products"))
        per_product = {
            "product_prices": products * len(self._rows("pricing_schemes")),
            "reorder_settings": products,
            "vendor_items": products,
            "product_summary": products,
        }
        for name, expected in per_product.items():
            actual = len(self._rows(name))
            if actual != expected:
                errors.append(f"{name}: {actual} (expected {expected})")

        if len(self._rows("purchase_orders")) != 2 * len(self._rows("vendors")):
            errors.append("purchase_orders != 2 x vendors")
        if len(self._rows("sales_orders")) != 3 * len(self._rows("customers")):
            errors.append("sales_orders != 3 x customers")
        if len(self._rows("product_barcodes")) > products:
            errors.append("more barcodes than products")
        if any(line["quantity_on_hand"] <= 0 for line in self._rows("inventory_lines")):
            errors.append("inventory_lines: non-positive quantity_on_hand")

        if self.config is not None:
            cfg = self.config
            if products != cfg.products:
                errors.append(f"products: {products} (requested {cfg.products})")
            expected_locations = min(cfg.locations, len(LOCATIONS))
            if len(self._rows("locations")) != expected_locations:
                errors.append(
                    f"locations: {len(self._rows('locations'))} (expected {expected_locations})"
                )

        total = sum(len(self._rows(name)) for name in PRIMARY_KEYS)
        if not errors:
            return True, f"{total:,} rows across {len(PRIMARY_KEYS)} collections"
        return False, "; ".join(errors)

    def validate_reference_flags(self) -> tuple[bool, str]:
        """Exactly one base currency, at most one default pricing scheme, one default tax code per scheme."""
        errors = []

        base = sum(1 for c in self._rows("currencies") if c["is_base_currency"])
        if base != 1:
            errors.append(f"{base} base currencies")

        defaults = sum(1 for s in self._rows("pricing_schemes") if s["is_default"])
        if defaults > 1:
            errors.append(f"{defaults} default pricing schemes")

        per_scheme = Counter(
            code["taxing_scheme_id"] for code in self._rows("tax_codes") if code["is_default"]
        )
        for scheme in self._rows("taxing_schemes"):
            n = per_scheme.get(scheme["taxing_scheme_id"], 0)
            if n != 1:
                errors.append(f"taxing scheme {scheme['name']}: {n} default tax codes")

        if not errors:
            return True, "Reference flags consistent"
        return False, "; ".join(errors)

    def validate_referential_integrity(self) -> tuple[bool, str]:
        """
        Check every foreign key resolves and every primary key is unique.

        Returns:
            Tuple of (passed, message)
        """
        errors = []
        ids: dict[str, set] = {}
        for name, pk in PRIMARY_KEYS.items():
            values = [row[pk] for row in self._rows(name)]
            ids[name] = set(values)
            if len(ids[name]) != len(values):
                errors.append(f"{name}: duplicate {pk}")

        all_ids = [row[pk] for name, pk in PRIMARY_KEYS.items() for row in self._rows(name)]
        if len(set(all_ids)) != len(all_ids):
            errors.append("identifiers are not unique across collections")

        checked = 0
        for name, fks in FOREIGN_KEYS.items():
            for field, target in fks:
                bad = [row for row in self._rows(name) if row[field] not in ids[target]]
                checked += len(self._rows(name))
                if bad:
                    errors.append(f"{name}.{field}: {len(bad)} invalid {target} refs")

        if not errors:
            return True, f"{checked:,} FK references resolved"
        return False, "; ".join(errors)

    def validate_order_totals(self) -> tuple[bool, str]:
        """Header subtotal/total equal the sum of line totals; line totals equal qty x unit."""
        errors = []
        checked = 0
        for header_name, unit_field in (("purchase_orders", "unit_cost"), ("sales_orders", "unit_price")):
            line_name, fk = HEADER_LINES[header_name]
            pk = PRIMARY_KEYS[header_name]
            lines_by_header = LookupBuilder.build(self._rows(line_name), fk)

            for line in self._rows(line_name):
                if line["line_total"] != line[unit_field] * line["quantity"]:
                    errors.append(f"{line_name} {line[PRIMARY_KEYS[line_name]]}: line_total mismatch")

            for header in self._rows(header_name):
                lines = lines_by_header.get(header[pk])
                expected = sum_money(line["line_total"] for line in lines)
                checked += 1
                if not lines:
                    errors.append(f"{header['order_number']}: no lines")
                if header["subtotal"] != expected or header["total"] != expected:
                    errors.append(
                        f"{header['order_number']}: subtotal {header['subtotal']} "
                        f"!= sum of lines {expected}"
                    )

        if not errors:
            return True, f"{checked:,} order totals match their lines"
        return False, "; ".join(errors[:10])

    def validate_bom_acyclic(self) -> tuple[bool, str]:
        """
        BOMs belong to manufacturable products, use only non-manufacturable
        components, and form a DAG.
        """
        errors = []
        products = LookupBuilder.build_unique(self._rows("products"), "product_id")
        G = nx.DiGraph()
        for bom in self._rows("item_boms"):
            parent = products.get(bom["product_id"])
            child = products.get(bom["child_product_id"])
            if parent is None or child is None:
                errors.append(f"BOM {bom['item_bom_id']}: unknown product")
                continue
            if not parent["is_manufacturable"]:
                errors.append(f"BOM parent {parent['sku']} is not manufacturable")
            if child["is_manufacturable"]:
                errors.append(f"BOM component {child['sku']} is manufacturable")
            G.add_edge(bom["product_id"], bom["child_product_id"])

        if G.number_of_nodes() and not nx.is_directed_acyclic_graph(G):
            errors.append("BOM graph contains a cycle")

        if not errors:
            return True, f"{len(self._rows('item_boms')):,} BOM lines, acyclic"
        return False, "; ".join(errors[:10])

    def validate_count_snapshots(self) -> tuple[bool, str]:
        """Snapshot = inventory at the count's location; counted only once in review."""
        errors = []
        inventory = LookupBuilder.build_inventory_by_product_location(self._rows("inventory_lines"))
        counts = LookupBuilder.build_unique(self._rows("stock_counts"), "stock_count_id")
        sheets = LookupBuilder.build_unique(self._rows("count_sheets"), "count_sheet_id")

        for line in self._rows("count_sheet_lines"):
            count = counts[sheets[line["count_sheet_id"]]["stock_count_id"]]
            inv = inventory.get_first((line["product_id"], count["location_id"]))
            expected = inv["quantity_on_hand"] if inv is not None else 0
            if line["snapshot_quantity"] != expected:
                errors.append(
                    f"{count['stock_count_number']}: snapshot {line['snapshot_quantity']} != {expected}"
                )

            counted = line["counted_quantity"]
            if count["status"] in COUNTED_STATUSES:
                if counted is None:
                    errors.append(f"{count['stock_count_number']}: missing counted quantity")
                elif counted < 0 or (
                    counted > 0 and abs(counted - expected) > MAX_COUNT_VARIANCE
                ) or (counted == 0 and expected > MAX_COUNT_VARIANCE):
                    errors.append(
                        f"{count['stock_count_number']}: counted {counted} outside variance of {expected}"
                    )
            elif counted is not None:
                errors.append(
                    f"{count['stock_count_number']}: counted quantity present while {count['status']}"
                )

        if not errors:
            return True, f"{len(self._rows('count_sheet_lines')):,} count lines consistent"
        return False, "; ".join(errors[:10])

    def validate_sku_uniqueness(self) -> tuple[bool, str]:
        """SKUs match <prefix>-<4 digits> and are unique."""
        skus = [p["sku"] for p in self._rows("products")]
        malformed = [s for s in skus if not SKU_PATTERN.match(s)]
        duplicates = [s for s, n in Counter(skus).items() if n > 1]
        if malformed:
            return False, f"Malformed SKUs: {', '.join(malformed[:5])}"
        if duplicates:
            return False, f"Duplicate SKUs: {', '.join(duplicates[:5])}"
        return True, f"{len(skus):,} unique SKUs"

    def validate_product_summary(self) -> tuple[bool, str]:
        """One summary per product; on hand = sum of its inventory lines."""
        errors = []
        lines_by_product = LookupBuilder.build(self._rows("inventory_lines"), "product_id")
        per_product = Counter(s["product_id"] for s in self._rows("product_summary"))
        for product in self._rows("products"):
            if per_product.get(product["product_id"], 0) != 1:
                errors.append(f"{product['sku']}: {per_product.get(product['product_id'], 0)} summaries")

        for summary in self._rows("product_summary"):
            expected = sum(line["quantity_on_hand"] for line in lines_by_product.get(summary["product_id"]))
            if summary["quantity_on_hand"] != expected:
                errors.append(f"summary {summary['product_summary_id']}: on hand {summary['quantity_on_hand']} != {expected}")
            if summary["quantity_available"] > summary["quantity_on_hand"]:
                errors.append(f"summary {summary['product_summary_id']}: available exceeds on hand")

        if not errors:
            return True, f"{len(self._rows('product_summary')):,} summaries consistent"
        return False, "; ".join(errors[:10])

    def run_all_validations(self) -> list[tuple[str, bool, str]]:
        """
        Run all validation checks.

        Returns:
            List of (check_name, passed, message) tuples
        """
        validations = [
            ("Row counts", self.validate_row_counts),
            ("Reference flags", self.validate_reference_flags),
            ("Referential integrity", self.validate_referential_integrity),
            ("Order totals", self.validate_order_totals),
            ("BOM acyclic", self.validate_bom_acyclic),
            ("Count snapshots", self.validate_count_snapshots),
            ("SKU uniqueness", self.validate_sku_uniqueness),
            ("Product summary", self.validate_product_summary),
        ]

        results = []
        for name, validator in validations:
            passed, message = validator()
            results.append((name, passed, message))

        return results

    def print_validation_report(self) -> bool:
        """
        Run all validations and print a formatted report.

        Returns:
            True if all validations passed, False otherwise
        """
        print("\n" + "=" * 60)
        print("Validation Report")
        print("=" * 60)

        results = self.run_all_validations()
        all_passed = True

        for name, passed, message in results:
            status = "PASS" if passed else "FAIL"
            symbol = "✓" if passed else "✗"
            print(f"  {symbol} {name}: {status}")
            print(f"    {message}")
            if not passed:
                all_passed = False

        print("=" * 60)
        if all_passed:
            print("All validations PASSED")
        else:
            print("Some validations FAILED")
        print("=" * 60 + "\n")

        return all_passed

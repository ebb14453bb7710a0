"""
LookupIndex and LookupBuilder - O(1) FK lookups for entity generation.

Every "find the record for this product" step in the builder goes through an
index built once, right after the collection it indexes is complete, instead
of scanning the collection per lookup.

Before (O(N) per lookup):
    vendor_item = next(vi for vi in data["vendor_items"] if vi["product_id"] == pid)

After (O(1) per lookup):
    vendor_items_by_product = LookupBuilder.build(data["vendor_items"], "product_id")
    vendor_item = vendor_items_by_product.get_first(pid)

Usage:
    builder = LookupBuilder()

    # Grouped index
    lines_by_order = builder.build(data["purchase_order_lines"], "purchase_order_id")
    lines = lines_by_order.get(po_id)

    # Composite key lookup
    inv_idx = builder.build_composite(data["inventory_lines"], ["product_id", "location_id"])
    line = inv_idx.get_first((product_id, location_id))
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Generic, Hashable, Iterable, Mapping, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Row = Mapping[str, Any]


class LookupIndex(Generic[K, V]):
    """
    Generic O(1) lookup index for grouped rows.

    Wraps a dict mapping keys to lists of values. Lists keep the insertion
    order of the source collection, so get_first() returns the earliest
    generated row for a key.

    Attributes:
        _index: Internal dict mapping keys to lists of values
        _key_name: Name of the key field(s) for debugging
    """

    __slots__ = ("_index", "_key_name")

    def __init__(
        self,
        index: dict[K, list[V]],
        key_name: str | tuple[str, ...] = "key",
    ) -> None:
        self._index: dict[K, list[V]] = index
        self._key_name = key_name

    def get(self, key: K, default: list[V] | None = None) -> list[V]:
        """
        Get all values for a key.

        Args:
            key: Lookup key
            default: Default value if key not found (empty list if None)

        Returns:
            List of values matching the key
        """
        if default is None:
            default = []
        return self._index.get(key, default)

    def get_first(self, key: K, default: V | None = None) -> V | None:
        """Get the first value for a key (1:1 and "primary record" lookups)."""
        values = self._index.get(key)
        if values:
            return values[0]
        return default

    def __repr__(self) -> str:
        return f"LookupIndex(key={self._key_name}, unique_keys={len(self._index)})"


class LookupBuilder:
    """
    Factory for building LookupIndex instances from row collections.

    Provides generic building methods plus named builders for the indexes
    the entity graph builder needs between levels.
    """

    @staticmethod
    def build(
        rows: Iterable[Row],
        key_field: str,
    ) -> LookupIndex[Any, Row]:
        """
        Build a lookup index for a single-column key.

        Rows whose key is None are not indexed.

        Example:
            lines_by_po = LookupBuilder.build(po_lines, "purchase_order_id")
            lines = lines_by_po.get(po_id)
        """
        index: dict[Any, list[Row]] = defaultdict(list)
        for row in rows:
            key = row.get(key_field)
            if key is not None:
                index[key].append(row)
        return LookupIndex(dict(index), key_field)

    @staticmethod
    def build_composite(
        rows: Iterable[Row],
        key_fields: list[str] | tuple[str, ...],
    ) -> LookupIndex[tuple, Row]:
        """
        Build a lookup index for a composite (multi-column) key.

        Example:
            inv_idx = LookupBuilder.build_composite(
                inventory_lines, ["product_id", "location_id"]
            )
            line = inv_idx.get_first((product_id, location_id))
        """
        index: dict[tuple, list[Row]] = defaultdict(list)
        key_fields_tuple = tuple(key_fields)

        for row in rows:
            key = tuple(row.get(f) for f in key_fields_tuple)
            # Only index if all key parts are present
            if None not in key:
                index[key].append(row)

        return LookupIndex(dict(index), key_fields_tuple)

    @staticmethod
    def build_unique(
        rows: Iterable[Row],
        key_field: str,
    ) -> dict[Any, Row]:
        """
        Build a flat dict for unique keys (1:1 relationship).

        Raises:
            ValueError: If duplicate keys are found

        Example:
            category_by_name = LookupBuilder.build_unique(categories, "name")
            category = category_by_name.get("Fasteners")
        """
        index: dict[Any, Row] = {}
        for row in rows:
            key = row.get(key_field)
            if key is not None:
                if key in index:
                    raise ValueError(
                        f"Duplicate key found: {key_field}={key}"
                    )
                index[key] = row
        return index

    # =========================================================================
    # Pre-defined builders for the entity graph
    # =========================================================================

    @classmethod
    def build_vendor_items_by_product(
        cls,
        vendor_items: Iterable[Row],
    ) -> LookupIndex[str, Row]:
        """
        Vendor items by product ID.

        Used in Level 4 (PO line unit cost) and Level 5 (cost adjustment
        old cost).
        """
        return cls.build(vendor_items, "product_id")

    @classmethod
    def build_prices_by_product(
        cls,
        product_prices: Iterable[Row],
    ) -> LookupIndex[str, Row]:
        """
        Product prices by product ID, in pricing-scheme order.

        The first price for a product is its Standard price. Used in Level 4
        (SO line unit price).
        """
        return cls.build(product_prices, "product_id")

    @classmethod
    def build_inventory_by_product_location(
        cls,
        inventory_lines: Iterable[Row],
    ) -> LookupIndex[tuple, Row]:
        """
        Inventory lines by (product_id, location_id).

        Used in Level 5 (count sheet snapshot quantity).
        """
        return cls.build_composite(inventory_lines, ("product_id", "location_id"))

    @classmethod
    def build_categories_by_name(
        cls,
        categories: Iterable[Row],
    ) -> dict[str, Row]:
        """Categories by name. Used in Level 2 to resolve template categories."""
        return cls.build_unique(categories, "name")

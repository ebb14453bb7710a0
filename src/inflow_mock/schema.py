"""
Collection layout of the entity graph.

Single source of truth for:
- COLLECTIONS: the 38 collection names in generation/insert order
- PRIMARY_KEYS: the identifier field of each collection
- FOREIGN_KEYS: (field, target collection) pairs per collection
- HEADER_LINES: header collection -> (line collection, owning FK field)

The validator checks referential closure against FOREIGN_KEYS and the SQL
writer orders its COPY blocks with insertion_order().
"""

from __future__ import annotations

import networkx as nx

COLLECTIONS: tuple[str, ...] = (
    # Reference
    "currencies",
    "payment_terms",
    "pricing_schemes",
    "taxing_schemes",
    "tax_codes",
    "adjustment_reasons",
    "operation_types",
    "categories",
    "locations",
    # Team & custom fields
    "team_members",
    "custom_field_definitions",
    "custom_field_dropdown_options",
    "custom_fields",
    # Parties
    "vendors",
    "customers",
    # Products
    "products",
    # Product details
    "product_barcodes",
    "inventory_lines",
    "product_prices",
    "reorder_settings",
    "vendor_items",
    "item_boms",
    "product_operations",
    # Orders
    "purchase_orders",
    "purchase_order_lines",
    "sales_orders",
    "sales_order_lines",
    "manufacturing_orders",
    # Stock operations
    "stock_transfers",
    "stock_transfer_lines",
    "stock_adjustments",
    "stock_adjustment_lines",
    "stock_counts",
    "count_sheets",
    "count_sheet_lines",
    # Cost adjustments
    "product_cost_adjustments",
    "product_cost_adjustment_lines",
    # Computed
    "product_summary",
)

PRIMARY_KEYS: dict[str, str] = {
    "currencies": "currency_id",
    "payment_terms": "payment_terms_id",
    "pricing_schemes": "pricing_scheme_id",
    "taxing_schemes": "taxing_scheme_id",
    "tax_codes": "tax_code_id",
    "adjustment_reasons": "adjustment_reason_id",
    "operation_types": "operation_type_id",
    "categories": "category_id",
    "locations": "location_id",
    "team_members": "team_member_id",
    "custom_field_definitions": "custom_field_definition_id",
    "custom_field_dropdown_options": "custom_field_dropdown_option_id",
    "custom_fields": "custom_fields_id",
    "vendors": "vendor_id",
    "customers": "customer_id",
    "products": "product_id",
    "product_barcodes": "product_barcode_id",
    "inventory_lines": "inventory_line_id",
    "product_prices": "product_price_id",
    "reorder_settings": "reorder_settings_id",
    "vendor_items": "vendor_item_id",
    "item_boms": "item_bom_id",
    "product_operations": "product_operation_id",
    "purchase_orders": "purchase_order_id",
    "purchase_order_lines": "purchase_order_line_id",
    "sales_orders": "sales_order_id",
    "sales_order_lines": "sales_order_line_id",
    "manufacturing_orders": "manufacturing_order_id",
    "stock_transfers": "stock_transfer_id",
    "stock_transfer_lines": "stock_transfer_line_id",
    "stock_adjustments": "stock_adjustment_id",
    "stock_adjustment_lines": "stock_adjustment_line_id",
    "stock_counts": "stock_count_id",
    "count_sheets": "count_sheet_id",
    "count_sheet_lines": "count_sheet_line_id",
    "product_cost_adjustments": "product_cost_adjustment_id",
    "product_cost_adjustment_lines": "product_cost_adjustment_line_id",
    "product_summary": "product_summary_id",
}

FOREIGN_KEYS: dict[str, tuple[tuple[str, str], ...]] = {
    "tax_codes": (("taxing_scheme_id", "taxing_schemes"),),
    "vendors": (
        ("currency_id", "currencies"),
        ("payment_terms_id", "payment_terms"),
        ("taxing_scheme_id", "taxing_schemes"),
    ),
    "customers": (
        ("currency_id", "currencies"),
        ("pricing_scheme_id", "pricing_schemes"),
        ("payment_terms_id", "payment_terms"),
        ("taxing_scheme_id", "taxing_schemes"),
    ),
    "products": (("category_id", "categories"),),
    "product_barcodes": (("product_id", "products"),),
    "inventory_lines": (
        ("product_id", "products"),
        ("location_id", "locations"),
    ),
    "product_prices": (
        ("product_id", "products"),
        ("pricing_scheme_id", "pricing_schemes"),
    ),
    "reorder_settings": (
        ("product_id", "products"),
        ("location_id", "locations"),
        ("vendor_id", "vendors"),
    ),
    "vendor_items": (
        ("vendor_id", "vendors"),
        ("product_id", "products"),
    ),
    "item_boms": (
        ("product_id", "products"),
        ("child_product_id", "products"),
    ),
    "product_operations": (
        ("product_id", "products"),
        ("operation_type_id", "operation_types"),
    ),
    "purchase_orders": (
        ("vendor_id", "vendors"),
        ("location_id", "locations"),
        ("currency_id", "currencies"),
    ),
    "purchase_order_lines": (
        ("purchase_order_id", "purchase_orders"),
        ("product_id", "products"),
    ),
    "sales_orders": (
        ("customer_id", "customers"),
        ("location_id", "locations"),
        ("currency_id", "currencies"),
    ),
    "sales_order_lines": (
        ("sales_order_id", "sales_orders"),
        ("product_id", "products"),
    ),
    "manufacturing_orders": (
        ("product_id", "products"),
        ("location_id", "locations"),
    ),
    "stock_transfers": (
        ("from_location_id", "locations"),
        ("to_location_id", "locations"),
    ),
    "stock_transfer_lines": (
        ("stock_transfer_id", "stock_transfers"),
        ("product_id", "products"),
    ),
    "stock_adjustments": (
        ("location_id", "locations"),
        ("adjustment_reason_id", "adjustment_reasons"),
    ),
    "stock_adjustment_lines": (
        ("stock_adjustment_id", "stock_adjustments"),
        ("product_id", "products"),
    ),
    "stock_counts": (
        ("location_id", "locations"),
        ("assigned_to_team_member_id", "team_members"),
    ),
    "count_sheets": (
        ("stock_count_id", "stock_counts"),
        ("assigned_to_team_member_id", "team_members"),
    ),
    "count_sheet_lines": (
        ("count_sheet_id", "count_sheets"),
        ("product_id", "products"),
    ),
    "product_cost_adjustment_lines": (
        ("product_cost_adjustment_id", "product_cost_adjustments"),
        ("product_id", "products"),
    ),
    "product_summary": (
        ("product_id", "products"),
        ("location_id", "locations"),
    ),
}

HEADER_LINES: dict[str, tuple[str, str]] = {
    "purchase_orders": ("purchase_order_lines", "purchase_order_id"),
    "sales_orders": ("sales_order_lines", "sales_order_id"),
    "stock_transfers": ("stock_transfer_lines", "stock_transfer_id"),
    "stock_adjustments": ("stock_adjustment_lines", "stock_adjustment_id"),
    "stock_counts": ("count_sheets", "stock_count_id"),
    "count_sheets": ("count_sheet_lines", "count_sheet_id"),
    "product_cost_adjustments": ("product_cost_adjustment_lines", "product_cost_adjustment_id"),
}


def dependency_graph() -> nx.DiGraph:
    """
    Build the collection dependency DAG.

    Nodes are collection names; an edge A -> B means B holds a foreign key
    into A, so A must be inserted first.
    """
    G = nx.DiGraph()
    G.add_nodes_from(COLLECTIONS)
    for collection, fks in FOREIGN_KEYS.items():
        for _field, target in fks:
            if target != collection:
                G.add_edge(target, collection)
    return G


def insertion_order() -> list[str]:
    """
    Collections in foreign-key-safe insert order.

    Topological over dependency_graph(); ties are broken by generation order.
    """
    position = {name: i for i, name in enumerate(COLLECTIONS)}
    return list(nx.lexicographical_topological_sort(dependency_graph(), key=position.__getitem__))

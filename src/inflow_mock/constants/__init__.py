"""
Constants Package - Template tables for mock data generation.

All tables are immutable (tuples of MappingProxyType) and loaded once at
import time.

Modules:
- reference: currencies, payment terms, pricing/taxing schemes, reasons,
  operation types, categories, locations, team members, custom fields
- parties: vendor and customer name pools, contact vocabularies
- catalog: product templates and dimension vocabularies

Usage:
    from inflow_mock.constants import PRODUCT_TEMPLATES, CATEGORIES
"""

from .catalog import DIMENSIONS, PRODUCT_TEMPLATES
from .parties import AREA_CODES, CUSTOMERS, EMAIL_DOMAINS, VENDORS
from .reference import (
    ADJUSTMENT_REASONS,
    CATEGORIES,
    CURRENCIES,
    CUSTOM_FIELD_DEFINITIONS,
    CUSTOM_FIELD_DROPDOWN_OPTIONS,
    CUSTOM_FIELD_PRINT_FLAGS,
    LOCATIONS,
    MAX_CATEGORIES,
    OPERATION_TYPES,
    PAYMENT_TERMS,
    PRICING_SCHEMES,
    RECEIVABLE_LOCATIONS,
    SHIPPABLE_LOCATIONS,
    TAXING_SCHEMES,
    TEAM_MEMBERS,
)

__all__ = [
    # Reference data
    "CURRENCIES",
    "PAYMENT_TERMS",
    "PRICING_SCHEMES",
    "TAXING_SCHEMES",
    "ADJUSTMENT_REASONS",
    "OPERATION_TYPES",
    "CATEGORIES",
    "MAX_CATEGORIES",
    "LOCATIONS",
    "SHIPPABLE_LOCATIONS",
    "RECEIVABLE_LOCATIONS",
    "TEAM_MEMBERS",
    "CUSTOM_FIELD_DEFINITIONS",
    "CUSTOM_FIELD_DROPDOWN_OPTIONS",
    "CUSTOM_FIELD_PRINT_FLAGS",
    # Parties
    "VENDORS",
    "CUSTOMERS",
    "EMAIL_DOMAINS",
    "AREA_CODES",
    # Catalog
    "PRODUCT_TEMPLATES",
    "DIMENSIONS",
]

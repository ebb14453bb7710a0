"""
Reference/lookup data with fixed cardinality.

Each table is an immutable tuple of read-only mappings. The first entry of a
role-bearing table (base currency, default pricing scheme, default tax code
per scheme) is the one marked for that role.
"""

from types import MappingProxyType

CURRENCIES = (
    MappingProxyType({
        "name": "US Dollar",
        "code": "USD",
        "symbol": "$",
        "exchange_rate": "1.00",
    }),
)

PAYMENT_TERMS = (
    MappingProxyType({"name": "Net 30", "net_days": 30, "discount_days": None, "discount_percent": None}),
    MappingProxyType({"name": "Net 60", "net_days": 60, "discount_days": None, "discount_percent": None}),
    MappingProxyType({"name": "Due on Receipt", "net_days": 0, "discount_days": None, "discount_percent": None}),
    MappingProxyType({"name": "2/10 Net 30", "net_days": 30, "discount_days": 10, "discount_percent": "2.00"}),
)

# Price multiplier applied to a product's base unit price per scheme
PRICING_SCHEMES = (
    MappingProxyType({"name": "Standard", "multiplier": "1.00"}),
    MappingProxyType({"name": "Wholesale", "multiplier": "0.85"}),
    MappingProxyType({"name": "Preferred", "multiplier": "0.90"}),
)

# Tax codes are listed under their scheme; the first code per scheme is default
TAXING_SCHEMES = (
    MappingProxyType({
        "name": "Standard Tax",
        "tax_codes": (
            MappingProxyType({"name": "Sales Tax", "rate": "8.25"}),
            MappingProxyType({"name": "Reduced Rate", "rate": "5.00"}),
        ),
    }),
    MappingProxyType({
        "name": "Tax Exempt",
        "tax_codes": (
            MappingProxyType({"name": "Exempt", "rate": "0.00"}),
        ),
    }),
)

ADJUSTMENT_REASONS = (
    "Damaged Goods",
    "Cycle Count Adjustment",
    "Shrinkage",
    "Found Inventory",
    "Quality Rejection",
    "Expired Product",
    "Customer Return",
    "Sample/Demo",
)

OPERATION_TYPES = (
    "Assembly",
    "Machining",
    "Welding",
    "Painting",
    "Inspection",
    "Packaging",
    "Testing",
    "Heat Treatment",
)

CATEGORIES = (
    MappingProxyType({"name": "Fasteners", "description": "Bolts, nuts, screws, and related hardware"}),
    MappingProxyType({"name": "Raw Materials", "description": "Steel, aluminum, plastics, and other base materials"}),
    MappingProxyType({"name": "Bearings", "description": "Ball bearings, roller bearings, bushings"}),
    MappingProxyType({"name": "Electronics", "description": "Circuit boards, sensors, controllers"}),
    MappingProxyType({"name": "Hydraulics", "description": "Pumps, valves, cylinders, hoses"}),
    MappingProxyType({"name": "Seals & Gaskets", "description": "O-rings, gaskets, sealing compounds"}),
    MappingProxyType({"name": "Safety Equipment", "description": "PPE, guards, safety devices"}),
    MappingProxyType({"name": "Tooling", "description": "Cutting tools, dies, fixtures"}),
    MappingProxyType({"name": "Electrical", "description": "Wiring, connectors, switches, motors"}),
    MappingProxyType({"name": "Lubricants", "description": "Oils, greases, cutting fluids"}),
    MappingProxyType({"name": "Abrasives", "description": "Grinding wheels, sandpaper, polishing compounds"}),
    MappingProxyType({"name": "Packaging", "description": "Boxes, pallets, stretch wrap, labels"}),
    MappingProxyType({"name": "Pneumatics", "description": "Air cylinders, fittings, regulators"}),
    MappingProxyType({"name": "Motors", "description": "AC, DC, servo and gear motors"}),
    MappingProxyType({"name": "Pumps", "description": "Centrifugal, diaphragm and gear pumps"}),
)

# Only the first MAX_CATEGORIES entries are instantiated per run
MAX_CATEGORIES = 12

LOCATIONS = (
    MappingProxyType({"name": "Main Warehouse", "abbreviation": "MAIN"}),
    MappingProxyType({"name": "Secondary Storage", "abbreviation": "SEC"}),
    MappingProxyType({"name": "Production Floor", "abbreviation": "PROD"}),
    MappingProxyType({"name": "Receiving Dock", "abbreviation": "RECV"}),
    MappingProxyType({"name": "Shipping Area", "abbreviation": "SHIP"}),
)

SHIPPABLE_LOCATIONS = frozenset({"SHIP"})
RECEIVABLE_LOCATIONS = frozenset({"RECV", "MAIN"})

TEAM_MEMBERS = (
    MappingProxyType({"name": "John Smith", "email": "jsmith@company.com"}),
    MappingProxyType({"name": "Sarah Johnson", "email": "sjohnson@company.com"}),
    MappingProxyType({"name": "Mike Williams", "email": "mwilliams@company.com"}),
    MappingProxyType({"name": "Emily Davis", "email": "edavis@company.com"}),
    MappingProxyType({"name": "Robert Brown", "email": "rbrown@company.com"}),
)

CUSTOM_FIELD_DEFINITIONS = (
    MappingProxyType({"label": "Project Code", "property_name": "custom1", "custom_field_type": "text", "entity_type": "salesOrder"}),
    MappingProxyType({"label": "Priority", "property_name": "custom2", "custom_field_type": "dropdown", "entity_type": "salesOrder"}),
    MappingProxyType({"label": "Approved By", "property_name": "custom1", "custom_field_type": "text", "entity_type": "purchaseOrder"}),
    MappingProxyType({"label": "Bin Location", "property_name": "custom1", "custom_field_type": "text", "entity_type": "product"}),
)

CUSTOM_FIELD_DROPDOWN_OPTIONS = (
    MappingProxyType({
        "entity_type": "salesOrder",
        "property_name": "custom2",
        "options": ("Low", "Medium", "High", "Critical"),
    }),
)

# Print flags for custom fields on each document type (custom1..custom3)
CUSTOM_FIELD_PRINT_FLAGS = MappingProxyType({
    "purchase_order": (True, False, False),
    "sales_order": (True, True, False),
    "stock_adjustment": (False, False, False),
    "stock_transfer": (False, False, False),
    "work_order": (False, False, False),
})

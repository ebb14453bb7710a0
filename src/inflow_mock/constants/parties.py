"""
Fixed name pools for vendors and customers.

Names are drawn without replacement; requests larger than a pool are
clamped to the pool size.
"""

from types import MappingProxyType

VENDORS = (
    MappingProxyType({"name": "Precision Fasteners Inc", "specialization": "hardware", "lead_time": 7}),
    MappingProxyType({"name": "Allied Steel Supply", "specialization": "metals", "lead_time": 14}),
    MappingProxyType({"name": "Midwest Industrial Components", "specialization": "components", "lead_time": 10}),
    MappingProxyType({"name": "Global Electronics Distributors", "specialization": "electronics", "lead_time": 21}),
    MappingProxyType({"name": "National Bearing Company", "specialization": "bearings", "lead_time": 5}),
    MappingProxyType({"name": "Thompson Plastics", "specialization": "plastics", "lead_time": 12}),
    MappingProxyType({"name": "Valley Machine Parts", "specialization": "machined", "lead_time": 18}),
    MappingProxyType({"name": "Premier Rubber Products", "specialization": "rubber", "lead_time": 8}),
    MappingProxyType({"name": "Central Hydraulics", "specialization": "hydraulics", "lead_time": 14}),
    MappingProxyType({"name": "United Electrical Supply", "specialization": "electrical", "lead_time": 7}),
    MappingProxyType({"name": "American Tubing Corp", "specialization": "tubing", "lead_time": 10}),
    MappingProxyType({"name": "Quality Seal Systems", "specialization": "seals", "lead_time": 6}),
    MappingProxyType({"name": "Industrial Adhesives Ltd", "specialization": "adhesives", "lead_time": 5}),
    MappingProxyType({"name": "Metro Packaging Solutions", "specialization": "packaging", "lead_time": 3}),
    MappingProxyType({"name": "Coastal Abrasives", "specialization": "abrasives", "lead_time": 7}),
)

CUSTOMERS = (
    "Acme Manufacturing",
    "Summit Industries",
    "Pinnacle Products",
    "Atlas Fabrication",
    "Frontier Engineering",
    "Apex Machining",
    "Prime Assembly",
    "Titan Manufacturing",
    "Sterling Products",
    "Vanguard Industries",
    "Eagle Precision",
    "Liberty Manufacturing",
    "Patriot Products",
    "Champion Industries",
    "Victory Manufacturing",
    "Horizon Fabrication",
    "Pioneer Products",
    "Guardian Manufacturing",
    "Sentinel Industries",
    "Phoenix Assembly",
)

# Contact details
EMAIL_DOMAINS = ("company.com", "sales.net", "industrial.com", "supply.co", "parts.com")

# US manufacturing-region area codes
AREA_CODES = ("216", "313", "414", "317", "614", "419", "440", "330", "248", "734")

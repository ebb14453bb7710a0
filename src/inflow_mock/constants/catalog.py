"""
Product templates and dimension vocabularies.

A template describes one kind of product: its name pattern, SKU prefix,
category, unit of measure, whether it can be manufactured, and the ranges
its price and reorder point are drawn from. `sizes` names the vocabulary in
DIMENSIONS that supplies the {size} token of the name pattern.

Templates whose category is not instantiated for a run (e.g. "Motors",
which falls outside the first 12 categories) are assigned a random
instantiated category instead.
"""

from types import MappingProxyType

DIMENSIONS = MappingProxyType({
    "sizes": ("Small", "Medium", "Large", "XL", '1/4"', '3/8"', '1/2"', '3/4"', '1"', "M6", "M8", "M10", "M12"),
    "bolt_sizes": ("M4", "M5", "M6", "M8", "M10", "M12", "M16", "M20", "1/4-20", "5/16-18", "3/8-16", "1/2-13"),
    "lengths": ("10mm", "15mm", "20mm", "25mm", "30mm", "40mm", "50mm", '1"', '1.5"', '2"', '3"', '4"'),
    "thicknesses": ('1/8"', '1/4"', '3/8"', '1/2"', '3/4"', '1"', "3mm", "6mm", "10mm", "12mm"),
    "diameters": ('1/4"', '3/8"', '1/2"', '3/4"', '1"', '1.5"', '2"', "6mm", "10mm", "12mm", "16mm", "20mm", "25mm"),
    "grits": ("40", "60", "80", "100", "120", "150", "180", "220", "320"),
    "colors": ("Black", "Red", "Blue", "Green", "White", "Yellow"),
    "materials": ("Steel", "Stainless", "Aluminum", "Brass", "Bronze", "Nylon", "UHMW", "Delrin"),
})


def _template(
    prefix: str,
    name_pattern: str,
    category: str,
    uom: str,
    manufacturable: bool,
    price_range: tuple[float, float],
    reorder_range: tuple[int, int],
    sizes: str = "sizes",
) -> MappingProxyType:
    return MappingProxyType({
        "prefix": prefix,
        "name_pattern": name_pattern,
        "category": category,
        "uom": uom,
        "manufacturable": manufacturable,
        "price_range": price_range,
        "reorder_range": reorder_range,
        "sizes": sizes,
    })


PRODUCT_TEMPLATES = (
    _template("HB", "Hex Bolt {size}", "Fasteners", "EA", False, (0.05, 2.00), (100, 1000), "bolt_sizes"),
    _template("SC", "Socket Cap Screw {size}", "Fasteners", "EA", False, (0.10, 3.00), (50, 500), "bolt_sizes"),
    _template("HN", "Hex Nut {size}", "Fasteners", "EA", False, (0.02, 0.50), (200, 2000), "bolt_sizes"),
    _template("SP", "Steel Plate {size}", "Raw Materials", "EA", False, (50, 500), (5, 20), "thicknesses"),
    _template("AB", "Aluminum Bar {size}", "Raw Materials", "EA", False, (20, 200), (10, 50), "diameters"),
    _template("BB", "Ball Bearing {size}", "Bearings", "EA", False, (5, 150), (10, 100)),
    _template("RB", "Roller Bearing {size}", "Bearings", "EA", False, (15, 300), (5, 50)),
    _template("PS", "Proximity Sensor {size}", "Electronics", "EA", False, (25, 250), (5, 20)),
    _template("MC", "Motor Controller {size}", "Electronics", "EA", True, (50, 500), (2, 10)),
    _template("HC", "Hydraulic Cylinder {size}", "Hydraulics", "EA", True, (100, 1500), (1, 5), "diameters"),
    _template("HH", "Hydraulic Hose {size}", "Hydraulics", "EA", False, (15, 150), (5, 25), "lengths"),
    _template("OR", "O-Ring {size}", "Seals & Gaskets", "EA", False, (0.10, 5.00), (50, 500), "materials"),
    _template("GS", "Gasket Set {size}", "Seals & Gaskets", "EA", True, (15, 150), (5, 25)),
    _template("SG", "Safety Glasses {size}", "Safety Equipment", "EA", False, (5, 50), (10, 50), "colors"),
    _template("WG", "Work Gloves {size}", "Safety Equipment", "PR", False, (5, 30), (20, 100)),
    _template("EM", "End Mill {size}", "Tooling", "EA", False, (15, 200), (5, 25), "diameters"),
    _template("DB", "Drill Bit {size}", "Tooling", "EA", False, (5, 100), (10, 50), "diameters"),
    _template("WR", "Wire Spool {size}", "Electrical", "RL", False, (20, 200), (5, 25), "colors"),
    _template("MT", "Motor {size}", "Motors", "EA", True, (100, 2000), (1, 5)),
    _template("GW", "Grinding Wheel {size}", "Abrasives", "EA", False, (10, 150), (5, 25), "grits"),
)

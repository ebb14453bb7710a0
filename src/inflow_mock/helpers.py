"""
Helper functions for entity generation.

Contains:
- to_money(): Quantize a float/Decimal to a 2-place Decimal
- sum_money(): Exact Decimal sum of money values
- party_code(): Uppercase word-initials code for a vendor/customer name
- STATUS_WEIGHTS: Status distributions per document type
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: float | int | str | Decimal) -> Decimal:
    """
    Quantize to cents (ROUND_HALF_UP).

    Floats are converted through their exact binary value, so the result
    depends only on the float, not on repr() formatting.
    """
    if not isinstance(value, Decimal):
        value = Decimal(value)
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    """Exact sum of already-quantized money values (0.00 when empty)."""
    return to_money(sum(values, ZERO))


def party_code(name: str) -> str:
    """
    Uppercase initials of each whitespace-separated word.

    Example:
        party_code("Precision Fasteners Inc")  # "PFI"
    """
    return "".join(word[0] for word in name.split()).upper()


# (values, weights) per document type; weights mirror the observed status mix
STATUS_WEIGHTS = {
    "purchase_order": (("Open", "Received", "PartiallyReceived"), (3, 2, 1)),
    "sales_order": (("Open", "Shipped", "PartiallyShipped"), (2, 3, 1)),
    "manufacturing_order": (("Open", "InProgress", "Completed"), (2, 2, 1)),
    "stock_transfer": (("Open", "InTransit", "Completed"), (1, 1, 2)),
    "stock_count": (("Open", "InProgress", "InReview", "Completed"), (1, 1, 1, 1)),
    "count_sheet": (("Open", "InProgress"), (1, 1)),
}

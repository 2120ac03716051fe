"""Price parsing and cart total verification."""

from .parser import (
    calculate_expected_total,
    compare_prices,
    format_price,
    parse_price,
    round_to_two_decimals,
    try_parse_price,
)
from .verification import PRICE_TOLERANCE, verify, verify_item

__all__ = [
    "PRICE_TOLERANCE",
    "calculate_expected_total",
    "compare_prices",
    "format_price",
    "parse_price",
    "round_to_two_decimals",
    "try_parse_price",
    "verify",
    "verify_item",
]

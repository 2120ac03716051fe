"""Price text parsing and small money helpers."""

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Protocol

# A sign only counts when it touches the digits, so "Sub-Total: 10" stays positive.
_PRICE_TOKEN = re.compile(r"-?(?:\d[\d,]*(?:\.\d+)?|\.\d+)")
CENT = Decimal("0.01")


class PricedQuantity(Protocol):
    """Anything with a unit price and a quantity, e.g. a product fixture."""

    price: float
    quantity: int


def try_parse_price(text: str | None) -> float | None:
    """
    Extract the first number from currency-formatted text.

    Labels, currency symbols and thousands commas are ignored:
    ``"$1,234.56"`` and ``"Sub-Total: 1234.56"`` both give ``1234.56``.
    Returns None when the text is empty or holds no number.
    """
    if not text:
        return None

    match = _PRICE_TOKEN.search(text)
    if not match:
        return None

    try:
        return float(match.group().replace(",", ""))
    except ValueError:
        return None


def parse_price(text: str | None) -> float:
    """Like try_parse_price, but defaults to 0.0."""
    value = try_parse_price(text)
    return 0.0 if value is None else value


def format_price(value: float) -> str:
    return f"{value:.2f}"


def round_to_two_decimals(value: float) -> float:
    """Round to the cent, halves away from zero."""
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def compare_prices(actual: float, expected: float, tolerance: float = 0.01) -> bool:
    """Whether two prices match within tolerance (inclusive)."""
    return abs(actual - expected) <= tolerance


def calculate_expected_total(products: Iterable[PricedQuantity]) -> float:
    """Sum of price x quantity."""
    return sum(product.price * product.quantity for product in products)

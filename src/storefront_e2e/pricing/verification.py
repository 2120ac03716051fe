"""Recompute cart totals and cross-check them against the displayed values."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..models import ItemVerification, LineItem, OrderAggregates, VerificationReport

# One cent
PRICE_TOLERANCE = 0.01

# Float noise from x * qty or a + b lies far below this
_GRAIN = Decimal("0.000001")


def _exact(value: float) -> Decimal:
    return Decimal(str(value)).quantize(_GRAIN, rounding=ROUND_HALF_UP)


def _matches(expected: float, actual: float, tolerance: float) -> bool:
    """Strict ``|expected - actual| < tolerance``, free of binary float error."""
    return abs(_exact(expected) - _exact(actual)) < Decimal(str(tolerance))


def verify_item(item: LineItem, tolerance: float = PRICE_TOLERANCE) -> ItemVerification:
    """Check that a line's displayed subtotal equals unit price x quantity."""
    expected = item.unit_price * item.quantity
    return ItemVerification(
        name=item.name,
        unit_price=item.unit_price,
        quantity=item.quantity,
        expected_subtotal=expected,
        actual_subtotal=item.subtotal,
        is_correct=_matches(expected, item.subtotal, tolerance),
    )


def verify(
    items: Iterable[LineItem],
    aggregates: OrderAggregates,
    tolerance: float = PRICE_TOLERANCE,
) -> VerificationReport:
    """
    Cross-check scraped line items against the order summary.

    Three independent checks are made, each with a strict ``< tolerance``
    comparison:

    - every line: ``unit_price * quantity`` vs. the displayed line subtotal
    - the displayed order sub-total vs. the sum of the displayed line
      subtotals (not of recomputed ones, so a mispriced line and a mis-summed
      order show up as separate failures)
    - the displayed total vs. ``subtotal + shipping + tax - discount``

    Never raises; a failed check only sets its flag to False.
    """
    checked = tuple(verify_item(item, tolerance) for item in items)

    calculated_subtotal = sum(check.actual_subtotal for check in checked)
    subtotal_match = _matches(calculated_subtotal, aggregates.subtotal, tolerance)

    expected_total = aggregates.subtotal + aggregates.shipping + aggregates.tax - aggregates.discount
    total_match = _matches(expected_total, aggregates.total, tolerance)

    return VerificationReport(
        items=checked,
        calculated_subtotal=calculated_subtotal,
        order_subtotal=aggregates.subtotal,
        subtotal_match=subtotal_match,
        shipping=aggregates.shipping,
        tax=aggregates.tax,
        discount=aggregates.discount,
        expected_total=expected_total,
        order_total=aggregates.total,
        total_match=total_match,
        all_calculations_correct=subtotal_match and total_match and all(c.is_correct for c in checked),
    )

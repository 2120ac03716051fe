"""Scrape line items and order totals from a rendered cart."""

import re
from dataclasses import dataclass

from ..models import AggregateField, AggregateReadout, LineItem, OrderAggregates, ScrapeResult, SkippedRow
from ..pricing.parser import parse_price, try_parse_price
from .elements import ElementLike, read_or_none


@dataclass(frozen=True)
class CartSelectors:
    """CSS selectors of the cart table and totals block."""

    rows: str = ".cart tbody tr"
    name: str = ".product-name"
    unit_price: str = ".product-unit-price"
    quantity: str = ".qty-input"
    subtotal: str = ".product-subtotal"
    total_rows: str = ".cart-total tr"
    total_label: str = ".cart-total-left"
    total_value: str = ".cart-total-right"


CART_SELECTORS = CartSelectors()


def _scrape_row(row: ElementLike, selectors: CartSelectors) -> LineItem | tuple[str, ...]:
    """Build a LineItem, or return the names of the parts that were missing."""
    lookups = {
        "name": selectors.name,
        "unit_price": selectors.unit_price,
        "quantity": selectors.quantity,
        "subtotal": selectors.subtotal,
    }
    parts = {key: read_or_none(lambda s=selector: row.query_selector(s)) for key, selector in lookups.items()}
    missing = tuple(key for key, element in parts.items() if element is None)
    if missing:
        return missing

    name = read_or_none(parts["name"].text_content)
    price = read_or_none(parts["unit_price"].text_content)
    quantity_text = read_or_none(parts["quantity"].input_value)
    subtotal = read_or_none(parts["subtotal"].text_content)

    try:
        quantity = int((quantity_text or "").strip())
    except ValueError:
        return ("quantity",)

    return LineItem(
        name=(name or "").strip(),
        unit_price=parse_price(price),
        quantity=quantity,
        subtotal=parse_price(subtotal),
    )


def scrape_cart_rows(root: ElementLike, selectors: CartSelectors = CART_SELECTORS) -> ScrapeResult:
    """
    Extract one LineItem per cart row, in DOM order.

    Rows lacking any of name, unit price, quantity input or subtotal (or that
    detach while being read) are left out without raising; they are listed in
    ``ScrapeResult.skipped``.
    """
    items: list[LineItem] = []
    skipped: list[SkippedRow] = []

    rows = read_or_none(lambda: root.query_selector_all(selectors.rows)) or []
    for index, row in enumerate(rows):
        result = _scrape_row(row, selectors)
        if isinstance(result, LineItem):
            items.append(result)
        else:
            skipped.append(SkippedRow(index=index, missing=result))

    return ScrapeResult(items=tuple(items), skipped=tuple(skipped))


def aggregate_field_for_label(label: str) -> AggregateField | None:
    """Map a totals-table label such as ``"Sub-Total:"`` to its field."""
    key = re.sub(r"\(.*?\)", "", " ".join(label.split())).strip().lower().rstrip(":").strip()

    # "Total" must be exact, every other label is a prefix match
    if key in ("total", "order total"):
        return AggregateField.TOTAL
    if key.startswith(("sub-total", "subtotal", "sub total")):
        return AggregateField.SUBTOTAL
    if key.startswith("shipping"):
        return AggregateField.SHIPPING
    if key.startswith("tax"):
        return AggregateField.TAX
    if key.startswith("discount"):
        return AggregateField.DISCOUNT
    return None


def read_order_aggregates(root: ElementLike, selectors: CartSelectors = CART_SELECTORS) -> AggregateReadout:
    """
    Read sub-total, shipping, tax, discount and total from the totals table.

    Each field is read on its own: an absent row or a value that is not a
    number ("Calculated during checkout") leaves that field at 0.0 and lists
    it in ``missing``. Discount is kept as an unsigned amount.
    """
    values: dict[AggregateField, float] = {}

    rows = read_or_none(lambda: root.query_selector_all(selectors.total_rows)) or []
    for row in rows:
        label_el = read_or_none(lambda: row.query_selector(selectors.total_label))
        value_el = read_or_none(lambda: row.query_selector(selectors.total_value))
        if label_el is None or value_el is None:
            continue

        field = aggregate_field_for_label(read_or_none(label_el.text_content) or "")
        if field is None or field in values:
            continue

        value = try_parse_price(read_or_none(value_el.text_content))
        if value is not None:
            values[field] = abs(value) if field is AggregateField.DISCOUNT else value

    aggregates = OrderAggregates(**{field.value: amount for field, amount in values.items()})
    missing = tuple(field for field in AggregateField if field not in values)
    return AggregateReadout(aggregates=aggregates, missing=missing)

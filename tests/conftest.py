"""Shared fixtures: cart page HTML in the shape the demo web shop renders."""

import pytest


def cart_row(name, unit_price, quantity, subtotal, *, omit=()):
    """One ``<tr>`` of the cart table; ``omit`` drops cells by name."""
    cells = {
        "name": f'<td class="product"><a class="product-name" href="/p">{name}</a></td>',
        "unit_price": f'<td class="unit-price nobr"><span class="product-unit-price">{unit_price}</span></td>',
        "quantity": f'<td class="qty nobr"><input class="qty-input" name="itemquantity1" type="text" value="{quantity}"></td>',
        "subtotal": f'<td class="subtotal nobr end"><span class="product-subtotal">{subtotal}</span></td>',
    }
    remove = '<td class="remove-from-cart"><input type="checkbox" name="removefromcart" value="1"></td>'
    return "<tr>" + remove + "".join(cell for key, cell in cells.items() if key not in omit) + "</tr>"


def totals_row(label, value):
    return (
        '<tr><td class="cart-total-left"><span class="nobr">'
        f"{label}</span></td>"
        '<td class="cart-total-right"><span class="nobr">'
        f'<span class="product-price">{value}</span></span></td></tr>'
    )


def cart_page(rows, totals):
    """Full cart page: cart table plus totals table."""
    return f"""
    <html>
    <body>
        <div class="order-summary-content">
            <form action="/cart" method="post">
                <table class="cart">
                    <thead><tr><th>Remove</th><th>Product(s)</th><th>Price</th><th>Qty.</th><th>Total</th></tr></thead>
                    <tbody>{''.join(rows)}</tbody>
                </table>
            </form>
            <div class="totals">
                <table class="cart-total"><tbody>{''.join(totals_row(l, v) for l, v in totals)}</tbody></table>
            </div>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def make_cart_row():
    return cart_row


@pytest.fixture
def make_cart_page():
    return cart_page


@pytest.fixture
def consistent_cart_html():
    """Two books whose prices, sub-total and total all agree."""
    return cart_page(
        rows=[
            cart_row("Computing and Internet", "10.00", 2, "20.00"),
            cart_row("Fiction", "24.00", 1, "24.00"),
        ],
        totals=[
            ("Sub-Total:", "44.00"),
            ("Shipping:", "5.00"),
            ("Tax:", "3.00"),
            ("Total:", "52.00"),
        ],
    )

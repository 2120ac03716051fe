"""Scraping of cart rows and order totals from live pages or saved HTML."""

from .cart import CART_SELECTORS, CartSelectors, aggregate_field_for_label, read_order_aggregates, scrape_cart_rows
from .elements import ElementLike, SoupDocument, SoupElement, read_or_none
from .products import PRODUCT_TILE_SELECTORS, ProductTileSelectors, scrape_product_tiles
from .snapshot import SnapshotVerification, verify_cart_html, verify_cart_snapshot

__all__ = [
    "CART_SELECTORS",
    "CartSelectors",
    "PRODUCT_TILE_SELECTORS",
    "ProductTileSelectors",
    "ElementLike",
    "SnapshotVerification",
    "SoupDocument",
    "SoupElement",
    "aggregate_field_for_label",
    "read_or_none",
    "read_order_aggregates",
    "scrape_cart_rows",
    "scrape_product_tiles",
    "verify_cart_html",
    "verify_cart_snapshot",
]

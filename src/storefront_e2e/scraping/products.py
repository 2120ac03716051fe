"""Scrape product tiles from category and home page grids."""

from dataclasses import dataclass

from ..models import ProductListing
from ..pricing.parser import parse_price
from .elements import ElementLike, read_or_none


@dataclass(frozen=True)
class ProductTileSelectors:
    item: str = ".product-item"
    title: str = ".product-title a"
    price: str = ".actual-price"


PRODUCT_TILE_SELECTORS = ProductTileSelectors()


def scrape_product_tiles(
    root: ElementLike,
    selectors: ProductTileSelectors = PRODUCT_TILE_SELECTORS,
) -> list[ProductListing]:
    """One ProductListing per tile; a missing title or price reads as empty."""
    products = []
    for tile in read_or_none(lambda: root.query_selector_all(selectors.item)) or []:
        title_el = read_or_none(lambda: tile.query_selector(selectors.title))
        price_el = read_or_none(lambda: tile.query_selector(selectors.price))

        title = read_or_none(title_el.text_content) if title_el else None
        url = read_or_none(lambda: title_el.get_attribute("href")) if title_el else None
        price = read_or_none(price_el.text_content) if price_el else None

        products.append(ProductListing(title=(title or "").strip(), price=parse_price(price), url=url or ""))
    return products

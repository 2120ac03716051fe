"""Tests for scraping product tiles from category and home page grids."""

from unittest.mock import MagicMock

from playwright.sync_api import Error as PlaywrightError

from storefront_e2e.models import ProductListing
from storefront_e2e.scraping import ProductTileSelectors, SoupDocument, scrape_product_tiles

GRID = """
<div class="product-grid">
    <div class="item-box"><div class="product-item">
        <h2 class="product-title"><a href="/fiction">
            Fiction
        </a></h2>
        <div class="prices"><span class="price actual-price">24.00</span></div>
    </div></div>
    <div class="item-box"><div class="product-item">
        <h2 class="product-title"><a href="/141-inch-laptop">14.1-inch Laptop</a></h2>
        <div class="prices"><span class="price actual-price">$1,590.00</span></div>
    </div></div>
    <div class="item-box"><div class="product-item"></div></div>
</div>
"""


class TestScrapeProductTiles:
    def test_reads_every_tile_in_order(self):
        products = scrape_product_tiles(SoupDocument(GRID))

        assert products == [
            ProductListing("Fiction", 24.0, "/fiction"),
            ProductListing("14.1-inch Laptop", 1590.0, "/141-inch-laptop"),
            ProductListing("", 0.0, ""),
        ]

    def test_no_grid(self):
        assert scrape_product_tiles(SoupDocument("<html><body></body></html>")) == []

    def test_custom_selectors(self):
        html = '<ul><li class="card"><b><a href="/pen">Pen</a></b><i>2.50</i></li></ul>'
        selectors = ProductTileSelectors(item=".card", title="b a", price="i")

        assert scrape_product_tiles(SoupDocument(html), selectors) == [ProductListing("Pen", 2.5, "/pen")]

    def test_detached_tile_reads_as_empty(self):
        first = SoupDocument(GRID).query_selector_all(".product-item")[0]
        detached = MagicMock()
        detached.query_selector.side_effect = PlaywrightError("Element is not attached to the DOM")
        root = MagicMock()
        root.query_selector_all.return_value = [first, detached]

        assert scrape_product_tiles(root) == [ProductListing("Fiction", 24.0, "/fiction"), ProductListing("", 0.0, "")]

    def test_title_detached_after_lookup(self):
        title = MagicMock()
        title.text_content.side_effect = PlaywrightError("Element is not attached to the DOM")
        title.get_attribute.side_effect = PlaywrightError("Element is not attached to the DOM")
        price = MagicMock()
        price.text_content.return_value = "5.00"
        tile = MagicMock()
        tile.query_selector.side_effect = lambda selector: title if selector == ".product-title a" else price
        root = MagicMock()
        root.query_selector_all.return_value = [tile]

        assert scrape_product_tiles(root) == [ProductListing("", 5.0, "")]

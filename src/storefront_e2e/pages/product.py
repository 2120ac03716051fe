"""Page object for product listings and product detail pages."""

from dataclasses import dataclass

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from ..errors import ElementNotFoundError
from ..models import Category, ProductListing
from ..pricing.parser import parse_price
from ..scraping.products import scrape_product_tiles
from .actions import PageActions
from .chrome import SiteChrome


@dataclass(frozen=True)
class ProductSelectors:
    product_item: str = ".product-item"
    product_title: str = ".product-title a"
    add_to_cart_button: str = "input.button-2.product-box-add-to-cart-button"
    product_name: str = ".product-name h1"
    product_detail_price: str = ".product-price span"
    product_essential: str = ".product-essential"
    product_sku: str = ".sku .value"
    sort_dropdown: str = "#products-orderby"
    page_size_dropdown: str = "#products-pagesize"
    bar_notification: str = "#bar-notification"
    notification_content: str = "#bar-notification .content"


class ProductPage:
    """Category grids and the product detail view."""

    selectors = ProductSelectors()

    def __init__(self, page: Page, actions: PageActions | None = None):
        self.page = page
        self.actions = actions or PageActions(page)
        self.chrome = SiteChrome(self.actions)

    def go_to_category(self, category: Category | str) -> None:
        path = category.value if isinstance(category, Category) else category
        self.actions.navigate(f"/{path.lstrip('/')}")
        self.actions.wait_for_page_load()

    def get_products(self) -> list[ProductListing]:
        return scrape_product_tiles(self.page)

    def click_product(self, product_title: str) -> None:
        self.actions.click(f'{self.selectors.product_title}:has-text("{product_title}")')
        self.actions.wait_for_page_load()

    def click_product_by_index(self, index: int) -> None:
        titles = self.actions.query_all(self.selectors.product_title)
        if not 0 <= index < len(titles):
            raise ElementNotFoundError("Product", index)
        titles[index].click()
        self.actions.wait_for_page_load()

    def add_to_cart_from_listing(self, index: int) -> str | None:
        buttons = self.actions.query_all(f"{self.selectors.product_item} {self.selectors.add_to_cart_button}")
        if not 0 <= index < len(buttons):
            raise ElementNotFoundError("Add to cart button", index)
        buttons[index].click()
        return self.wait_for_notification()

    def get_product_name(self) -> str | None:
        return self.actions.get_text(self.selectors.product_name)

    def get_product_detail_price(self) -> float:
        return parse_price(self.actions.get_text(self.selectors.product_detail_price))

    def set_quantity(self, quantity: int) -> None:
        self.page.get_by_label("Qty:").fill(str(quantity))

    def get_quantity(self) -> int:
        return int(self.page.get_by_label("Qty:").input_value())

    def add_to_cart_from_detail_page(self) -> str | None:
        section = self.page.locator(self.selectors.product_essential)
        section.get_by_role("button", name="Add to cart").click()
        return self.wait_for_notification()

    def wait_for_notification(self) -> str | None:
        """Wait for the "added to cart" bar and return its message."""
        self.actions.wait_for_element(self.selectors.bar_notification)
        return self.actions.get_text(self.selectors.notification_content)

    def close_notification(self) -> None:
        try:
            close_button = self.page.locator(self.selectors.bar_notification).get_by_role("link", name="close")
            if close_button.is_visible():
                close_button.click()
        except PlaywrightError:
            # The bar fades out on its own
            pass

    def sort_products(self, option: str) -> None:
        self.actions.select_option(self.selectors.sort_dropdown, option)
        self.actions.wait_for_page_load()

    def set_page_size(self, size: str) -> None:
        self.actions.select_option(self.selectors.page_size_dropdown, size)
        self.actions.wait_for_page_load()

    def go_to_product_detail(self, product_url: str) -> None:
        self.actions.navigate(product_url)
        self.actions.wait_for_page_load()

    def get_product_sku(self) -> str:
        return (self.actions.get_text(self.selectors.product_sku) or "").strip()

"""Page object for the storefront home page."""

import re
from dataclasses import dataclass

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from ..errors import UnknownCategoryError
from ..models import Category, ProductListing
from ..scraping.products import scrape_product_tiles
from .actions import PageActions
from .chrome import SiteChrome


@dataclass(frozen=True)
class HomeSelectors:
    cart_link: str = ".ico-cart"
    cart_quantity: str = ".cart-qty"
    search_box: str = "#small-searchterms"
    search_button: str = "input.search-box-button"
    login_link: str = "a.ico-login"
    register_link: str = "a.ico-register"
    logout_link: str = "a.ico-logout"
    account_link: str = "a.ico-account"
    bar_notification: str = "#bar-notification"
    close_notification: str = "#bar-notification .close"


class HomePage:
    """Home page: header navigation, search and featured products."""

    selectors = HomeSelectors()

    def __init__(self, page: Page, actions: PageActions | None = None):
        self.page = page
        self.actions = actions or PageActions(page)
        self.chrome = SiteChrome(self.actions)

    def go_to_home_page(self) -> None:
        self.actions.navigate("/")
        self.actions.wait_for_page_load()

    def is_user_logged_in(self) -> bool:
        return self.actions.is_visible(self.selectors.logout_link)

    def get_logged_in_user_email(self) -> str | None:
        if self.is_user_logged_in():
            return self.actions.get_text(self.selectors.account_link)
        return None

    def click_login(self) -> None:
        self.actions.click(self.selectors.login_link)

    def click_register(self) -> None:
        self.actions.click(self.selectors.register_link)

    def click_logout(self) -> None:
        self.actions.click(self.selectors.logout_link)

    def go_to_cart(self) -> None:
        self.actions.click(self.selectors.cart_link)

    def get_cart_quantity(self) -> int:
        """Number shown in the header cart badge, e.g. ``(3)``."""
        text = self.actions.get_text(self.selectors.cart_quantity) or ""
        match = re.search(r"\((\d+)\)", text)
        return int(match.group(1)) if match else 0

    def search_product(self, search_term: str) -> None:
        self.actions.fill(self.selectors.search_box, search_term)
        self.actions.click(self.selectors.search_button)

    def go_to_category(self, category: Category | str) -> None:
        """Open a category from the top menu."""
        if not isinstance(category, Category):
            found = Category.lookup(category)
            if found is None:
                raise UnknownCategoryError(category)
            category = found

        self.actions.click(category.menu_selector)
        self.actions.wait_for_page_load()

    def get_featured_products(self) -> list[ProductListing]:
        return scrape_product_tiles(self.page)

    def close_notification_bar(self) -> None:
        """Close the notification bar if it shows up within 5s."""
        try:
            self.actions.wait_for_element(self.selectors.bar_notification, timeout=5000)
            self.actions.click(self.selectors.close_notification)
        except PlaywrightError:
            # Notification may not appear
            pass

    def wait_for_success_notification(self) -> str | None:
        self.actions.wait_for_element(self.selectors.bar_notification)
        return self.actions.get_text(self.selectors.bar_notification)

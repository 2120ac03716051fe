"""Page objects for the demo web shop."""

from dataclasses import dataclass

from playwright.sync_api import Page

from ..config import Config
from .actions import PageActions
from .cart import CartPage
from .checkout import CheckoutPage
from .chrome import SiteChrome
from .home import HomePage
from .login import LoginPage
from .product import ProductPage
from .register import RegisterPage


@dataclass
class StorefrontPages:
    """All page objects for one browser page, sharing one PageActions."""

    actions: PageActions
    home: HomePage
    login: LoginPage
    register: RegisterPage
    product: ProductPage
    cart: CartPage
    checkout: CheckoutPage

    @classmethod
    def for_page(cls, page: Page, config: Config | None = None) -> "StorefrontPages":
        config = config or Config()
        actions = PageActions(page, config.base_url, config.artifacts.screenshot_dir)
        return cls(
            actions=actions,
            home=HomePage(page, actions),
            login=LoginPage(page, actions),
            register=RegisterPage(page, actions),
            product=ProductPage(page, actions),
            cart=CartPage(page, actions, tolerance=config.verification.tolerance),
            checkout=CheckoutPage(page, actions),
        )


__all__ = [
    "CartPage",
    "CheckoutPage",
    "HomePage",
    "LoginPage",
    "PageActions",
    "ProductPage",
    "RegisterPage",
    "SiteChrome",
    "StorefrontPages",
]

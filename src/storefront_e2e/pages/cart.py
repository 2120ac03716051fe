"""Page object for the shopping cart, including price verification."""

from dataclasses import dataclass

from playwright.sync_api import Page

from ..errors import ElementNotFoundError
from ..models import AggregateReadout, LineItem, OrderAggregates, ScrapeResult, VerificationReport
from ..pricing.verification import PRICE_TOLERANCE, verify
from ..scraping.cart import CART_SELECTORS, read_order_aggregates, scrape_cart_rows
from .actions import PageActions
from .chrome import SiteChrome

EMPTY_CART_TEXT = "Your Shopping Cart is empty"


@dataclass(frozen=True)
class CartPageSelectors:
    quantity_input: str = CART_SELECTORS.quantity
    remove_checkbox: str = 'input[name="removefromcart"]'
    update_cart_button: str = 'input[name="updatecart"]'
    discount_coupon_input: str = "#discountcouponcode"
    apply_coupon_button: str = 'input[name="applydiscountcouponcode"]'
    discount_message: str = ".message-success, .message-error"
    gift_card_input: str = "#giftcardcouponcode"
    apply_gift_card_button: str = 'input[name="applygiftcardcouponcode"]'
    continue_shopping_button: str = 'input[name="continueshopping"]'
    terms_of_service: str = "#termsofservice"
    empty_cart_message: str = ".order-summary-content"
    country_select: str = "#CountryId"
    state_select: str = "#StateProvinceId"
    zip_input: str = "#ZipPostalCode"
    estimate_shipping_button: str = 'input[name="estimateshipping"]'


class CartPage:
    """Cart contents, cart edits and the totals block."""

    selectors = CartPageSelectors()

    def __init__(self, page: Page, actions: PageActions | None = None, tolerance: float = PRICE_TOLERANCE):
        self.page = page
        self.actions = actions or PageActions(page)
        self.chrome = SiteChrome(self.actions)
        self.tolerance = tolerance

    def go_to_cart(self) -> None:
        self.actions.navigate("/cart")
        self.actions.wait_for_page_load()

    def is_cart_empty(self) -> bool:
        content = self.actions.get_text(self.selectors.empty_cart_message) or ""
        return EMPTY_CART_TEXT in content

    # Line items

    def scrape(self) -> ScrapeResult:
        """Line items plus any rows skipped for missing cells."""
        return scrape_cart_rows(self.page)

    def scrape_cart_items(self) -> list[LineItem]:
        return list(self.scrape().items)

    get_cart_items = scrape_cart_items

    def get_cart_item_count(self) -> int:
        return len(self.scrape_cart_items())

    def _after_cart_update(self) -> None:
        self.actions.click(self.selectors.update_cart_button)
        self.actions.wait_for_page_load()
        # WebKit re-renders the table after network idle
        self.actions.pause(500)

    def update_item_quantity(self, item_index: int, new_quantity: int) -> None:
        inputs = self.actions.query_all(self.selectors.quantity_input)
        if not 0 <= item_index < len(inputs):
            raise ElementNotFoundError("Item", item_index)
        inputs[item_index].fill(str(new_quantity))
        self._after_cart_update()

    def remove_item(self, item_index: int) -> None:
        checkboxes = self.actions.query_all(self.selectors.remove_checkbox)
        if not 0 <= item_index < len(checkboxes):
            raise ElementNotFoundError("Item", item_index)
        checkboxes[item_index].check()
        self._after_cart_update()

    # Totals

    def read_aggregate_readout(self) -> AggregateReadout:
        self.actions.wait_for_page_load()
        return read_order_aggregates(self.page)

    def read_aggregates(self) -> OrderAggregates:
        return self.read_aggregate_readout().aggregates

    def get_order_subtotal(self) -> float:
        return self.read_aggregates().subtotal

    def get_shipping_cost(self) -> float:
        return self.read_aggregates().shipping

    def get_tax(self) -> float:
        return self.read_aggregates().tax

    def get_discount_amount(self) -> float:
        return self.read_aggregates().discount

    def get_order_total(self) -> float:
        return self.read_aggregates().total

    def verify_price_calculations(self) -> VerificationReport:
        """Snapshot the cart and cross-check every displayed total."""
        return verify(self.scrape_cart_items(), self.read_aggregates(), self.tolerance)

    # Discounts and shipping

    def apply_coupon(self, coupon_code: str) -> str:
        """Apply a discount code and return the shop's response message."""
        self.actions.fill(self.selectors.discount_coupon_input, coupon_code)
        self.actions.click(self.selectors.apply_coupon_button)
        self.actions.wait_for_page_load()
        return self.actions.get_text(self.selectors.discount_message) or ""

    def apply_gift_card(self, gift_card_code: str) -> None:
        self.actions.fill(self.selectors.gift_card_input, gift_card_code)
        self.actions.click(self.selectors.apply_gift_card_button)
        self.actions.wait_for_page_load()

    def estimate_shipping(self, country: str, state: str | None, zip_code: str) -> None:
        self.actions.select_option(self.selectors.country_select, country)
        # States are loaded after the country changes
        self.actions.pause(500)
        if state:
            self.actions.select_option(self.selectors.state_select, state)
        self.actions.fill(self.selectors.zip_input, zip_code)
        self.actions.click(self.selectors.estimate_shipping_button)
        self.actions.wait_for_page_load()

    # Leaving the cart

    def proceed_to_checkout(self) -> None:
        # The terms checkbox has no accessible label
        self.page.locator(self.selectors.terms_of_service).check()
        self.page.get_by_role("button", name="Checkout").click()
        self.actions.wait_for_page_load()

    def continue_shopping(self) -> None:
        self.actions.click(self.selectors.continue_shopping_button)
        self.actions.wait_for_page_load()

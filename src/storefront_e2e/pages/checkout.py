"""Page object for the one-page checkout."""

from dataclasses import dataclass

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from ..errors import CheckoutError, MissingPaymentDetailsError
from ..models import Address, CreditCardDetails, PaymentMethod, PurchaseOrderDetails, ShippingMethod
from ..steplog import log_warning
from .actions import PageActions
from .chrome import SiteChrome

ORDER_CONFIRMED_TEXT = "your order has been successfully processed"


@dataclass(frozen=True)
class AddressFormSelectors:
    """Field selectors of one address form (billing or shipping)."""

    dropdown: str
    first_name: str
    last_name: str
    country: str
    state: str
    city: str
    address1: str
    zip: str
    phone: str
    email: str | None = None


BILLING_FORM = AddressFormSelectors(
    dropdown="#billing-address-select",
    first_name="#BillingNewAddress_FirstName",
    last_name="#BillingNewAddress_LastName",
    email="#BillingNewAddress_Email",
    country="#BillingNewAddress_CountryId",
    state="#BillingNewAddress_StateProvinceId",
    city="#BillingNewAddress_City",
    address1="#BillingNewAddress_Address1",
    zip="#BillingNewAddress_ZipPostalCode",
    phone="#BillingNewAddress_PhoneNumber",
)

SHIPPING_FORM = AddressFormSelectors(
    dropdown="#shipping-address-select",
    first_name="#ShippingNewAddress_FirstName",
    last_name="#ShippingNewAddress_LastName",
    country="#ShippingNewAddress_CountryId",
    state="#ShippingNewAddress_StateProvinceId",
    city="#ShippingNewAddress_City",
    address1="#ShippingNewAddress_Address1",
    zip="#ShippingNewAddress_ZipPostalCode",
    phone="#ShippingNewAddress_PhoneNumber",
)

SHIPPING_METHOD_SELECTORS = {
    ShippingMethod.GROUND: 'input[id="shippingoption_0"]',
    ShippingMethod.NEXT_DAY: 'input[id="shippingoption_1"]',
    ShippingMethod.SECOND_DAY: 'input[id="shippingoption_2"]',
}

PAYMENT_METHOD_SELECTORS = {
    PaymentMethod.COD: "#paymentmethod_0",
    PaymentMethod.CHECK: "#paymentmethod_1",
    PaymentMethod.CREDIT_CARD: "#paymentmethod_2",
    PaymentMethod.PURCHASE_ORDER: "#paymentmethod_3",
}


@dataclass(frozen=True)
class CheckoutSelectors:
    payment_method_step: str = "#opc-payment_method"
    payment_info_step: str = "#opc-payment_info"
    confirm_order_step: str = "#opc-confirm_order"
    billing_continue: str = "#billing-buttons-container input.button-1.new-address-next-step-button"
    ship_to_same_address: str = "#ShipToSameAddress"
    shipping_continue: str = "#shipping-buttons-container input.button-1.new-address-next-step-button"
    in_store_pickup: str = "#PickUpInStore"
    shipping_method_radio: str = 'input[name="shippingmethod"]'
    shipping_method_continue: str = "input.button-1.shipping-method-next-step-button"
    payment_method_radio: str = 'input[name="paymentmethod"]'
    payment_method_continue: str = "input.button-1.payment-method-next-step-button"
    credit_card_type: str = "#CreditCardType"
    cardholder_name: str = "#CardholderName"
    card_number: str = "#CardNumber"
    expire_month: str = "#ExpireMonth"
    expire_year: str = "#ExpireYear"
    card_code: str = "#CardCode"
    purchase_order_number: str = "#PurchaseOrderNumber"
    payment_info_continue: str = "input.button-1.payment-info-next-step-button"
    confirm_order_button: str = "input.button-1.confirm-order-next-step-button"
    order_confirmation_title: str = ".order-completed .title"
    order_number: str = ".order-number strong"
    continue_button: str = "input.button-2.order-completed-continue-button"
    message_error: str = ".message-error"


PaymentDetails = CreditCardDetails | PurchaseOrderDetails


class CheckoutPage:
    """The accordion of billing, shipping, payment and confirm steps."""

    selectors = CheckoutSelectors()

    def __init__(self, page: Page, actions: PageActions | None = None):
        self.page = page
        self.actions = actions or PageActions(page)
        self.chrome = SiteChrome(self.actions)

    def go_to_checkout(self) -> None:
        self.actions.navigate("/onepagecheckout")
        self.actions.wait_for_page_load()

    # Addresses

    def _fill_address_form(self, address: Address, form: AddressFormSelectors) -> None:
        # Saved addresses: switch the dropdown to "New Address"
        dropdown = self.page.query_selector(form.dropdown)
        if dropdown and len(dropdown.query_selector_all("option")) > 1:
            self.actions.select_option(form.dropdown, "")

        self.actions.fill(form.first_name, address.first_name)
        self.actions.fill(form.last_name, address.last_name)
        if form.email and address.email:
            self.actions.fill(form.email, address.email)

        self.actions.select_option(form.country, address.country)
        if address.state:
            # Populated after the country is chosen
            self.actions.wait_for_element(form.state)
            self.actions.select_option(form.state, address.state)

        self.actions.fill(form.city, address.city)
        self.actions.fill(form.address1, address.address1)
        self.actions.fill(form.zip, address.zip)
        self.actions.fill(form.phone, address.phone)

    def fill_billing_address(self, address: Address) -> None:
        self._fill_address_form(address, BILLING_FORM)

    def continue_billing_address(self) -> None:
        self.actions.click(self.selectors.billing_continue)
        next_step = self.actions.wait_for_any([
            self.selectors.shipping_continue,
            self.selectors.shipping_method_radio,
            self.selectors.payment_method_radio,
        ])
        if next_step is None:
            log_warning("No expected checkout step became visible after continuing billing address")

    def set_ship_to_same_address(self, same_address: bool) -> None:
        if same_address:
            self.actions.check(self.selectors.ship_to_same_address)
        else:
            self.actions.uncheck(self.selectors.ship_to_same_address)

    def fill_shipping_address(self, address: Address) -> None:
        self._fill_address_form(address, SHIPPING_FORM)

    def continue_shipping_address(self) -> None:
        self.actions.click(self.selectors.shipping_continue)
        next_step = self.actions.wait_for_any([
            self.selectors.shipping_method_radio,
            self.selectors.payment_method_radio,
        ])
        if next_step is None:
            log_warning("No expected checkout step became visible after continuing shipping address")

    def advance_through_saved_addresses(self) -> None:
        """
        Step past billing and shipping for an account with saved addresses.

        Each step is only touched when it is showing; in-store pickup is
        chosen when offered.
        """
        if self.actions.is_visible(self.selectors.billing_continue):
            self.actions.click(self.selectors.billing_continue)
            self.actions.pause(1000)

        self._choose_in_store_pickup_if_offered()

        if self.actions.is_visible(self.selectors.shipping_continue):
            self.actions.click(self.selectors.shipping_continue)
            self.actions.pause(1000)

    def _choose_in_store_pickup_if_offered(self) -> None:
        if self.actions.is_visible(self.selectors.in_store_pickup):
            self.actions.check(self.selectors.in_store_pickup)
            self.actions.pause(500)

    # Shipping and payment method

    def _select_radio(self, selector: str, fallback: str, description: str) -> None:
        try:
            self.actions.wait_for_element(selector, timeout=5000)
            self.actions.click(selector)
        except PlaywrightError as e:
            log_warning(f"Failed to select {description}; falling back to first available option. Error: {e}")
            self.actions.click(fallback)

    def select_shipping_method(self, method: ShippingMethod | str = ShippingMethod.GROUND) -> None:
        method = ShippingMethod.parse(method)
        self._select_radio(
            SHIPPING_METHOD_SELECTORS[method],
            self.selectors.shipping_method_radio,
            f"shipping method '{method.value}'",
        )

    def is_on_shipping_method_step(self) -> bool:
        return self.actions.is_visible(self.selectors.shipping_method_radio)

    def continue_shipping_method(self) -> None:
        self.actions.click(self.selectors.shipping_method_continue)
        self.actions.wait_for_element(self.selectors.payment_method_step)

    def select_payment_method(self, method: PaymentMethod | str = PaymentMethod.COD) -> None:
        method = PaymentMethod.parse(method)
        self._select_radio(
            PAYMENT_METHOD_SELECTORS[method],
            self.selectors.payment_method_radio,
            f"payment method '{method.value}'",
        )

    def continue_payment_method(self) -> None:
        self.actions.click(self.selectors.payment_method_continue)
        self.actions.wait_for_element(self.selectors.payment_info_step)

    # Payment information

    def fill_credit_card_info(self, card: CreditCardDetails) -> None:
        self.actions.select_option(self.selectors.credit_card_type, card.type)
        self.actions.fill(self.selectors.cardholder_name, card.name)
        self.actions.fill(self.selectors.card_number, card.number)
        self.actions.select_option(self.selectors.expire_month, card.exp_month)
        self.actions.select_option(self.selectors.expire_year, card.exp_year)
        self.actions.fill(self.selectors.card_code, card.cvv)

    def fill_purchase_order_number(self, po_number: str) -> None:
        self.actions.fill(self.selectors.purchase_order_number, po_number)

    def continue_payment_info(self) -> None:
        self.actions.click(self.selectors.payment_info_continue)
        self.actions.wait_for_element(self.selectors.confirm_order_step)

    # Confirmation

    def confirm_order(self) -> None:
        self.actions.click(self.selectors.confirm_order_button)
        self.actions.wait_for_page_load()

    def is_order_confirmed(self) -> bool:
        try:
            self.actions.wait_for_element(self.selectors.order_confirmation_title)
        except PlaywrightError:
            return False
        title = self.actions.get_text(self.selectors.order_confirmation_title) or ""
        return ORDER_CONFIRMED_TEXT in title.lower()

    def get_order_number(self) -> str:
        return (self.actions.get_text(self.selectors.order_number) or "").strip()

    def click_continue_after_order(self) -> None:
        self.actions.click(self.selectors.continue_button)
        self.actions.wait_for_page_load()

    def get_error_message(self) -> str | None:
        return self.actions.get_text(self.selectors.message_error)

    # Whole flow

    @staticmethod
    def _check_payment_details(method: PaymentMethod, details: PaymentDetails | None) -> None:
        if method is PaymentMethod.CREDIT_CARD and not isinstance(details, CreditCardDetails):
            raise MissingPaymentDetailsError(
                "Credit card details are required when using credit card payment method"
            )
        if method is PaymentMethod.PURCHASE_ORDER and not (
            isinstance(details, PurchaseOrderDetails) and details.po_number
        ):
            raise MissingPaymentDetailsError(
                "Purchase order number is required when using purchase order payment method"
            )

    def complete_checkout(
        self,
        billing_address: Address | None,
        shipping_method: ShippingMethod | str = ShippingMethod.GROUND,
        payment_method: PaymentMethod | str = PaymentMethod.COD,
        payment_details: PaymentDetails | None = None,
    ) -> None:
        """
        Run the whole checkout from billing address to order confirmation.

        Inputs are validated before the browser is touched: a billing address
        is always required, card details for credit card payment and a PO
        number for purchase orders.

        Raises:
            CheckoutError: billing address missing
            MissingPaymentDetailsError: payment details missing for the method
        """
        if billing_address is None:
            raise CheckoutError("Billing address is required for checkout")

        payment = PaymentMethod.parse(payment_method)
        self._check_payment_details(payment, payment_details)

        self.fill_billing_address(billing_address)
        self.continue_billing_address()

        self._choose_in_store_pickup_if_offered()

        if self.actions.is_visible(self.selectors.shipping_continue):
            self.continue_shipping_address()

        # Skipped by the shop when in-store pickup was chosen
        if self.is_on_shipping_method_step():
            self.select_shipping_method(shipping_method)
            self.continue_shipping_method()

        self.select_payment_method(payment)
        self.continue_payment_method()

        if isinstance(payment_details, CreditCardDetails) and payment is PaymentMethod.CREDIT_CARD:
            self.fill_credit_card_info(payment_details)
        elif isinstance(payment_details, PurchaseOrderDetails) and payment is PaymentMethod.PURCHASE_ORDER:
            self.fill_purchase_order_number(payment_details.po_number)
        self.continue_payment_info()

        self.confirm_order()

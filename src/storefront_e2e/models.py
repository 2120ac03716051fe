"""Core data models for the storefront suite."""

from dataclasses import asdict, dataclass
from enum import Enum


class AggregateField(Enum):
    """Order-level summary values shown under the cart."""

    SUBTOTAL = "subtotal"
    SHIPPING = "shipping"
    TAX = "tax"
    DISCOUNT = "discount"
    TOTAL = "total"


class ShippingMethod(Enum):
    """Shipping options offered during checkout."""

    GROUND = "ground"
    NEXT_DAY = "nextday"
    SECOND_DAY = "secondday"

    @classmethod
    def parse(cls, value: "ShippingMethod | str") -> "ShippingMethod":
        """Accept a member or its value; unknown values fall back to ground."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            return cls.GROUND


class PaymentMethod(Enum):
    """Payment options offered during checkout."""

    COD = "cod"
    CHECK = "check"
    CREDIT_CARD = "creditcard"
    PURCHASE_ORDER = "purchaseorder"

    @classmethod
    def parse(cls, value: "PaymentMethod | str") -> "PaymentMethod":
        """Accept a member or its value; unknown values fall back to COD."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            return cls.COD


class Category(Enum):
    """Top-menu categories; the value is the category's URL path segment."""

    BOOKS = "books"
    COMPUTERS = "computers"
    ELECTRONICS = "electronics"
    APPAREL = "apparel-shoes"
    DIGITAL_DOWNLOADS = "digital-downloads"
    JEWELRY = "jewelry"
    GIFT_CARDS = "gift-cards"

    @property
    def menu_selector(self) -> str:
        return f'.top-menu a[href="/{self.value}"]'

    @classmethod
    def lookup(cls, name: str) -> "Category | None":
        """Find a category by short name ("apparel") or path ("apparel-shoes")."""
        key = name.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower().replace("_", "-")):
                return member
        return None


class FooterSection(Enum):
    """Column headings of the footer menu."""

    INFORMATION = ".footer-menu-wrapper .column.information h3"
    CUSTOMER_SERVICE = ".footer-menu-wrapper .column.customer-service h3"
    MY_ACCOUNT = ".footer-menu-wrapper .column.my-account h3"
    FOLLOW_US = ".footer-menu-wrapper .column.follow-us h3"


class FooterLink(Enum):
    """Links expected somewhere in the footer."""

    SITEMAP = 'a[href="/sitemap"]'
    SHIPPING_RETURNS = 'a[href="/shipping-returns"]'
    PRIVACY_POLICY = 'a[href="/privacy-policy"]'
    CONDITIONS_OF_USE = 'a[href="/conditions-of-use"]'
    ABOUT_US = 'a[href="/about-us"]'
    CONTACT_US = 'a[href="/contactus"]'
    SEARCH = 'a[href="/search"]'
    NEWS = 'a[href="/news"]'
    BLOG = 'a[href="/blog"]'
    MY_ACCOUNT = 'a[href="/customer/info"]'
    ORDERS = 'a[href="/customer/orders"]'
    ADDRESSES = 'a[href="/customer/addresses"]'
    CART = 'a[href="/cart"]'
    WISHLIST = 'a[href="/wishlist"]'


@dataclass(frozen=True)
class LineItem:
    """One cart row as displayed."""

    name: str
    unit_price: float
    quantity: int
    subtotal: float  # as shown by the shop, not computed


@dataclass(frozen=True)
class SkippedRow:
    """A cart row left out of a scrape because sub-elements were missing."""

    index: int
    missing: tuple[str, ...]


@dataclass(frozen=True)
class ScrapeResult:
    """Line items scraped from the cart plus the rows that were skipped."""

    items: tuple[LineItem, ...]
    skipped: tuple[SkippedRow, ...] = ()


@dataclass(frozen=True)
class OrderAggregates:
    """Order-level summary values scraped from the page."""

    subtotal: float = 0.0
    shipping: float = 0.0
    tax: float = 0.0
    discount: float = 0.0  # unsigned magnitude
    total: float = 0.0


@dataclass(frozen=True)
class AggregateReadout:
    """Aggregates plus the fields that could not be read and defaulted to 0."""

    aggregates: OrderAggregates
    missing: tuple[AggregateField, ...] = ()


@dataclass(frozen=True)
class ItemVerification:
    """Comparison of one line item's displayed and expected subtotal."""

    name: str
    unit_price: float
    quantity: int
    expected_subtotal: float
    actual_subtotal: float
    is_correct: bool


@dataclass(frozen=True)
class VerificationReport:
    """Result of a price verification pass."""

    items: tuple[ItemVerification, ...]
    calculated_subtotal: float
    order_subtotal: float
    subtotal_match: bool
    shipping: float
    tax: float
    discount: float
    expected_total: float
    order_total: float
    total_match: bool
    all_calculations_correct: bool

    def mismatches(self) -> list[str]:
        """Describe every check that failed."""
        problems = [
            f"{item.name}: expected {item.expected_subtotal:.2f}, shown {item.actual_subtotal:.2f}"
            for item in self.items
            if not item.is_correct
        ]
        if not self.subtotal_match:
            problems.append(
                f"Sub-total: line items sum to {self.calculated_subtotal:.2f}, "
                f"shown {self.order_subtotal:.2f}"
            )
        if not self.total_match:
            problems.append(
                f"Total: expected {self.expected_total:.2f}, shown {self.order_total:.2f}"
            )
        return problems

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SearchBoxStatus:
    """Visibility of the header search input and button."""

    input: bool
    button: bool

    @property
    def all_visible(self) -> bool:
        return self.input and self.button


@dataclass(frozen=True)
class HeaderStatus:
    """Visibility of the page header's building blocks."""

    logo: bool
    search_box: SearchBoxStatus
    shopping_cart: bool
    header_links: bool

    @property
    def all_header_elements_visible(self) -> bool:
        return self.logo and self.search_box.all_visible and self.shopping_cart and self.header_links


@dataclass(frozen=True)
class ProductListing:
    """A product tile on a category or home page grid."""

    title: str
    price: float
    url: str


@dataclass
class RegistrationData:
    """Values typed into the registration form."""

    first_name: str
    last_name: str
    email: str
    password: str
    gender: str | None = None  # "male", "female" or None to leave unset


@dataclass
class Address:
    """A billing or shipping address for checkout."""

    first_name: str
    last_name: str
    country: str
    city: str
    address1: str
    zip: str
    phone: str
    email: str = ""
    state: str = ""


@dataclass
class CreditCardDetails:
    """Card fields on the payment information step."""

    type: str
    name: str
    number: str
    exp_month: str
    exp_year: str
    cvv: str


@dataclass
class PurchaseOrderDetails:
    """Purchase order number for the payment information step."""

    po_number: str

"""Cart operations and the site footer."""

import pytest

from storefront_e2e.models import FooterLink, FooterSection
from storefront_e2e.pricing import compare_prices, round_to_two_decimals
from storefront_e2e.steplog import log_action, log_assertion, log_step
from storefront_e2e.testdata import generate_unique_email

pytestmark = pytest.mark.e2e


def assert_chrome_visible(page_object):
    assert page_object.chrome.verify_complete_header_ui().all_header_elements_visible
    assert page_object.chrome.verify_header_menu_exists()


def assert_footer(page_object, links, where):
    chrome = page_object.chrome

    log_action(f"Checking footer menu wrapper visibility on {where}")
    footer_exists = chrome.verify_footer_menu_exists()
    log_assertion(f"Footer menu wrapper visible on {where}", footer_exists)
    assert footer_exists

    sections = chrome.verify_footer_sections()
    for section in FooterSection:
        log_assertion(f"{section.name.replace('_', ' ').title()} section visible on {where}", sections[section])
        assert sections[section], section

    visible_links = chrome.verify_footer_links()
    for link in links:
        log_assertion(f"{link.name.replace('_', ' ').title()} link visible on {where}", visible_links[link])
        assert visible_links[link], link
    log_step(f"Verify footer on {where}")


def test_empty_cart_message(pages):
    """TC007 - Verify empty cart message."""
    pages.cart.go_to_cart()
    assert_chrome_visible(pages.cart)

    assert pages.cart.is_cart_empty()


def test_same_product_added_twice(pages, test_data):
    """TC008 - Add same product multiple times."""
    product = test_data.test_products.simple_products[0]

    pages.product.go_to_product_detail(product.url)
    assert_chrome_visible(pages.product)

    for quantity in (1, 2):
        pages.product.set_quantity(quantity)
        pages.product.add_to_cart_from_detail_page()
        pages.product.close_notification()

    pages.cart.go_to_cart()
    assert_chrome_visible(pages.cart)

    items = pages.cart.get_cart_items()
    assert len(items) == 1
    assert items[0].quantity == 3
    assert compare_prices(items[0].subtotal, round_to_two_decimals(product.price * 3))


def test_footer_on_home_page(pages):
    """TC009 - Verify footer menu appears on homepage."""
    log_action("Navigating to homepage")
    pages.home.go_to_home_page()

    assert_footer(
        pages.home,
        [
            FooterLink.SITEMAP,
            FooterLink.SHIPPING_RETURNS,
            FooterLink.PRIVACY_POLICY,
            FooterLink.CONTACT_US,
            FooterLink.SEARCH,
            FooterLink.CART,
        ],
        "homepage",
    )


def test_footer_on_cart_page(pages, test_data):
    """TC010 - Verify footer menu appears on the cart page of a new customer."""
    email = generate_unique_email()
    pages.home.click_register()
    log_action("Filling registration form", f"Email: {email}")
    pages.register.register_user(test_data.users["newUser"].to_registration(email=email))
    assert pages.register.is_registration_successful()
    pages.register.click_continue()

    product = test_data.test_products.multiple_products[0]
    pages.product.go_to_product_detail(product.url)
    pages.product.set_quantity(1)
    pages.product.add_to_cart_from_detail_page()
    pages.product.close_notification()

    pages.cart.go_to_cart()
    assert not pages.cart.is_cart_empty()

    assert_footer(
        pages.cart,
        [
            FooterLink.SITEMAP,
            FooterLink.PRIVACY_POLICY,
            FooterLink.ABOUT_US,
            FooterLink.MY_ACCOUNT,
            FooterLink.ORDERS,
            FooterLink.CART,
        ],
        "cart",
    )

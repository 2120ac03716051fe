"""Fixtures for the browser journeys against the live demo shop."""

import pytest
from playwright.sync_api import expect

from storefront_e2e.config import Config, load_config
from storefront_e2e.pages import StorefrontPages
from storefront_e2e.testdata import StoreFixtures, load_test_data


@pytest.fixture(scope="session")
def storefront_config() -> Config:
    return load_config()


@pytest.fixture(scope="session")
def base_url(storefront_config):
    """Point pytest-playwright's relative navigation at the configured shop."""
    return storefront_config.base_url


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args, storefront_config):
    browser = storefront_config.browser
    return {
        **browser_context_args,
        "viewport": {"width": browser.viewport_width, "height": browser.viewport_height},
    }


@pytest.fixture(scope="session")
def test_data(storefront_config) -> StoreFixtures:
    return load_test_data(storefront_config.test_data)


@pytest.fixture
def pages(page, storefront_config) -> StorefrontPages:
    browser = storefront_config.browser
    page.set_default_timeout(browser.action_timeout_ms)
    page.set_default_navigation_timeout(browser.navigation_timeout_ms)
    expect.set_options(timeout=browser.expect_timeout_ms)
    return StorefrontPages.for_page(page, storefront_config)


@pytest.fixture(autouse=True)
def start_on_home_page(pages):
    """Every journey starts on the home page with a complete header."""
    pages.home.go_to_home_page()

    header = pages.home.chrome.verify_complete_header_ui()
    assert header.logo
    assert header.search_box.all_visible
    assert header.shopping_cart
    assert header.header_links
    assert header.all_header_elements_visible

    assert pages.home.chrome.verify_header_menu_exists()

"""Page object for the login page."""

from dataclasses import dataclass

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from .actions import PageActions
from .chrome import SiteChrome


@dataclass(frozen=True)
class LoginSelectors:
    email_input: str = "#Email"
    password_input: str = "#Password"
    remember_me: str = "#RememberMe"
    login_button: str = "input.button-1.login-button"
    forgot_password_link: str = ".forgot-password a"
    register_button: str = "input.button-1.register-button"
    logout_link: str = "a.ico-logout"
    validation_error: str = ".validation-summary-errors"
    field_validation_error: str = ".field-validation-error"


class LoginPage:
    selectors = LoginSelectors()

    def __init__(self, page: Page, actions: PageActions | None = None):
        self.page = page
        self.actions = actions or PageActions(page)
        self.chrome = SiteChrome(self.actions)

    def go_to_login_page(self) -> None:
        self.actions.navigate("/login")
        self.actions.wait_for_page_load()

    def login(self, email: str, password: str, remember_me: bool = False) -> None:
        self.actions.fill(self.selectors.email_input, email)
        self.actions.fill(self.selectors.password_input, password)
        if remember_me:
            self.actions.click(self.selectors.remember_me)
        self.actions.click(self.selectors.login_button)
        self.actions.wait_for_page_load()

    def is_login_successful(self) -> bool:
        """True once the logout link shows up (5s)."""
        try:
            self.actions.wait_for_element(self.selectors.logout_link, timeout=5000)
            return True
        except PlaywrightError:
            return False

    def _wait_for_text(self, selector: str) -> str | None:
        try:
            self.actions.wait_for_element(selector, timeout=3000)
        except PlaywrightError:
            return None
        return self.actions.get_text(selector)

    def get_validation_error(self) -> str | None:
        return self._wait_for_text(self.selectors.validation_error)

    def get_field_error(self) -> str | None:
        return self._wait_for_text(self.selectors.field_validation_error)

    def go_to_register(self) -> None:
        self.actions.click(self.selectors.register_button)
        self.actions.wait_for_page_load()

    def click_forgot_password(self) -> None:
        self.actions.click(self.selectors.forgot_password_link)
        self.actions.wait_for_page_load()

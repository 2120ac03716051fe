"""Page object for the registration page."""

import re
from dataclasses import dataclass

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from ..models import RegistrationData
from .actions import PageActions
from .chrome import SiteChrome

REGISTRATION_COMPLETED = re.compile(r"your registration completed", re.IGNORECASE)


@dataclass(frozen=True)
class RegisterSelectors:
    result_message: str = ".result"
    validation_error: str = ".validation-summary-errors"


class RegisterPage:
    """Registration form, driven through labels and roles as a user sees it."""

    selectors = RegisterSelectors()

    def __init__(self, page: Page, actions: PageActions | None = None):
        self.page = page
        self.actions = actions or PageActions(page)
        self.chrome = SiteChrome(self.actions)

    def go_to_register_page(self) -> None:
        self.actions.navigate("/register")
        self.actions.wait_for_page_load()

    def register_user(self, user: RegistrationData) -> None:
        if user.gender == "male":
            self.page.get_by_role("radio", name="Male", exact=True).check()
        elif user.gender == "female":
            self.page.get_by_role("radio", name="Female").check()

        self.page.get_by_label("First name:").fill(user.first_name)
        self.page.get_by_label("Last name:").fill(user.last_name)
        self.page.get_by_label("Email:").fill(user.email)
        self.page.get_by_label("Password:", exact=True).fill(user.password)
        self.page.get_by_label("Confirm password:").fill(user.password)

        self.page.get_by_role("button", name="Register").click()
        self.actions.wait_for_page_load()

    def is_registration_successful(self) -> bool:
        try:
            self.page.get_by_text(REGISTRATION_COMPLETED).wait_for(state="visible", timeout=5000)
            return True
        except PlaywrightError:
            return False

    def get_result_message(self) -> str | None:
        return self.actions.get_text(self.selectors.result_message)

    def click_continue(self) -> None:
        self.page.get_by_role("button", name="Continue").click()
        self.actions.wait_for_page_load()

    def get_validation_error(self) -> str | None:
        try:
            self.actions.wait_for_element(self.selectors.validation_error, timeout=3000)
        except PlaywrightError:
            return None
        return self.actions.get_text(self.selectors.validation_error)

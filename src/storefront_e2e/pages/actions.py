"""Browser capabilities shared by every page object."""

from pathlib import Path
from typing import Sequence

from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import DEFAULT_BASE_URL


class PageActions:
    """
    Thin wrapper over a Playwright page.

    Page objects hold one of these rather than inheriting from a base page.
    Reads of optional content (``get_text``, ``wait_for_any``) return None
    instead of raising; navigation and clicks let Playwright errors through.
    """

    def __init__(
        self,
        page: Page,
        base_url: str = DEFAULT_BASE_URL,
        screenshot_dir: Path = Path("playwright-report/screenshots"),
    ):
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.screenshot_dir = screenshot_dir

    def url_for(self, path: str = "/") -> str:
        """Absolute URLs pass through; paths are joined to the base URL."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def navigate(self, path: str = "/") -> None:
        self.page.goto(self.url_for(path))

    def wait_for_page_load(self) -> None:
        self.page.wait_for_load_state("networkidle")

    def title(self) -> str:
        return self.page.title()

    def click(self, selector: str) -> None:
        self.page.click(selector)

    def fill(self, selector: str, value: str) -> None:
        self.page.fill(selector, value)

    def check(self, selector: str) -> None:
        self.page.check(selector)

    def uncheck(self, selector: str) -> None:
        self.page.uncheck(selector)

    def select_option(self, selector: str, value: str) -> None:
        """Select by option value or label."""
        self.page.select_option(selector, value)

    def get_text(self, selector: str, timeout: float = 5000) -> str | None:
        """Text content of the first match, or None if it cannot be read."""
        try:
            return self.page.text_content(selector, timeout=timeout)
        except PlaywrightError:
            return None

    def is_visible(self, selector: str) -> bool:
        return self.page.is_visible(selector)

    def wait_for_element(self, selector: str, timeout: float = 10000) -> None:
        self.page.wait_for_selector(selector, state="visible", timeout=timeout)

    def wait_for_any(self, selectors: Sequence[str], timeout: float = 10000) -> str | None:
        """Wait until one of several selectors is visible and return it."""
        try:
            self.page.wait_for_selector(", ".join(selectors), state="visible", timeout=timeout)
        except PlaywrightTimeoutError:
            return None
        for selector in selectors:
            if self.page.is_visible(selector):
                return selector
        return None

    def query_all(self, selector: str) -> list[ElementHandle]:
        return self.page.query_selector_all(selector)

    def pause(self, ms: float) -> None:
        self.page.wait_for_timeout(ms)

    def screenshot(self, name: str) -> Path:
        path = self.screenshot_dir / f"{name}.png"
        path.parent.mkdir(parents=True, exist_ok=True)
        self.page.screenshot(path=str(path))
        return path

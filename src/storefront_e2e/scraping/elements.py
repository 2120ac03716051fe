"""Element protocol shared by live Playwright handles and saved HTML."""

from typing import Callable, Protocol, Sequence, TypeVar

from bs4 import BeautifulSoup, Tag
from playwright.sync_api import Error as PlaywrightError

T = TypeVar("T")


class ElementLike(Protocol):
    """The slice of Playwright's ElementHandle the scrapers rely on."""

    def query_selector(self, selector: str) -> "ElementLike | None": ...

    def query_selector_all(self, selector: str) -> Sequence["ElementLike"]: ...

    def text_content(self) -> str | None: ...

    def input_value(self) -> str: ...

    def get_attribute(self, name: str) -> str | None: ...


def read_or_none(getter: Callable[[], T]) -> T | None:
    """Run an element lookup or read, treating a detached or vanished element as absent."""
    try:
        return getter()
    except PlaywrightError:
        return None


class SoupElement:
    """ElementLike over a BeautifulSoup tag, for HTML captured from a page."""

    def __init__(self, tag: Tag):
        self.tag = tag

    def query_selector(self, selector: str) -> "SoupElement | None":
        found = self.tag.select_one(selector)
        if isinstance(found, Tag):
            return SoupElement(found)
        return None

    def query_selector_all(self, selector: str) -> list["SoupElement"]:
        return [SoupElement(t) for t in self.tag.select(selector) if isinstance(t, Tag)]

    def text_content(self) -> str | None:
        return self.tag.get_text()

    def input_value(self) -> str:
        """Value attribute of an input; selected option or text otherwise."""
        if self.tag.name == "input":
            return str(self.tag.get("value", ""))
        if self.tag.name == "select":
            option = self.tag.find("option", selected=True) or self.tag.find("option")
            if isinstance(option, Tag):
                return str(option.get("value", option.get_text()))
            return ""
        return self.tag.get_text()

    def get_attribute(self, name: str) -> str | None:
        value = self.tag.get(name)
        if value is None:
            return None
        return " ".join(value) if isinstance(value, list) else str(value)

    def __repr__(self) -> str:
        return f"SoupElement(<{self.tag.name}>)"


class SoupDocument(SoupElement):
    """A whole HTML document parsed with lxml."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html, "lxml")
        super().__init__(self.soup)

"""Header and footer checks common to every storefront page."""

from dataclasses import dataclass

from ..models import FooterLink, FooterSection, HeaderStatus, SearchBoxStatus
from .actions import PageActions


@dataclass(frozen=True)
class ChromeSelectors:
    logo: str = ".header-logo"
    search_input: str = "#small-searchterms"
    search_button: str = "input.search-box-button"
    shopping_cart: str = "#topcartlink"
    header_links: str = ".header-links"
    header_menu: str = ".header-menu"
    footer_menu: str = ".footer-menu-wrapper"


class SiteChrome:
    """Visibility checks for the shared header and footer."""

    selectors = ChromeSelectors()

    def __init__(self, actions: PageActions):
        self.actions = actions

    def verify_complete_header_ui(self) -> HeaderStatus:
        visible = self.actions.is_visible
        return HeaderStatus(
            logo=visible(self.selectors.logo),
            search_box=SearchBoxStatus(
                input=visible(self.selectors.search_input),
                button=visible(self.selectors.search_button),
            ),
            shopping_cart=visible(self.selectors.shopping_cart),
            header_links=visible(self.selectors.header_links),
        )

    def verify_header_menu_exists(self) -> bool:
        return self.actions.is_visible(self.selectors.header_menu)

    def verify_footer_menu_exists(self) -> bool:
        return self.actions.is_visible(self.selectors.footer_menu)

    def verify_footer_sections(self) -> dict[FooterSection, bool]:
        return {section: self.actions.is_visible(section.value) for section in FooterSection}

    def verify_footer_links(self) -> dict[FooterLink, bool]:
        return {link: self.actions.is_visible(link.value) for link in FooterLink}

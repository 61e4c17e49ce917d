"""Playwright (sync API) adapter."""

import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from phrasebook.exceptions import ElementNotFound

logger = logging.getLogger(__name__)


def timeout_ms(wait_timeout: float) -> Optional[float]:
    """Seconds to Playwright milliseconds; ``None`` keeps the page default."""
    return wait_timeout * 1000 if wait_timeout else None


def first_match(locator: Locator, description: str, timeout: Optional[float] = None) -> Locator:
    """Wait for the first element of ``locator`` to be attached and return it.

    Raises:
        ElementNotFound: If nothing is attached before the timeout
    """
    first = locator.first
    try:
        first.wait_for(state="attached", timeout=timeout)
    except PlaywrightTimeoutError as e:
        raise ElementNotFound(f"Unable to find {description}") from e
    return first


class PlaywrightElement:
    """A located element, wrapped around a Playwright Locator."""

    def __init__(self, locator: Locator, timeout: Optional[float] = None) -> None:
        self.locator = locator
        self.timeout = timeout

    @property
    def text(self) -> str:
        return self.locator.inner_text()

    def find(self, selector: str) -> "PlaywrightElement":
        nested = first_match(self.locator.locator(selector), f"element {selector!r}", self.timeout)
        return PlaywrightElement(nested, self.timeout)


class PlaywrightBrowser:
    """Browser backed by a Playwright Page.

    Lookups wait until the element is attached, for ``wait_timeout`` seconds
    or the page's default timeout when it is 0.
    """

    def __init__(self, page: Page, base_url: str = "", wait_timeout: float = 0) -> None:
        self.page = page
        self.base_url = base_url
        self.timeout = timeout_ms(wait_timeout)

    def current_path(self) -> str:
        return urlparse(self.page.url).path

    def has_content(self, text: str, wait: bool = True) -> bool:
        if wait:
            body = self.page.locator("body", has_text=text)
            try:
                body.wait_for(state="attached", timeout=self.timeout)
            except PlaywrightTimeoutError:
                return False
        return text in self.page.inner_text("body")

    def find(self, selector: str) -> PlaywrightElement:
        locator = first_match(self.page.locator(selector), f"element {selector!r}", self.timeout)
        return PlaywrightElement(locator, self.timeout)

    def visit(self, path: str) -> None:
        url = urljoin(self.base_url, path) if self.base_url else path
        logger.debug("Playwright navigating to %s", url)
        self.page.goto(url)

    def click_link(self, text: str) -> None:
        link = self.page.get_by_role("link", name=text, exact=True)
        first_match(link, f"link {text!r}", self.timeout).click()

    def click_button(self, text: str) -> None:
        button = self.page.get_by_role("button", name=text, exact=True)
        first_match(button, f"button {text!r}", self.timeout).click()

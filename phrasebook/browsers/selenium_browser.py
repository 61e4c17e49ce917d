"""Selenium WebDriver adapter."""

import logging
from typing import Any, Tuple
from urllib.parse import urljoin, urlparse

from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from phrasebook.exceptions import ElementNotFound

logger = logging.getLogger(__name__)

Locator = Tuple[str, str]


def xpath_literal(text: str) -> str:
    """Quote ``text`` for use inside an XPath expression."""
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = text.split('"')
    return "concat(" + ", '\"', ".join(f'"{part}"' for part in parts) + ")"


def button_locator(text: str) -> Locator:
    """Locator for a button by its label or an input button by its value."""
    literal = xpath_literal(text)
    return (
        By.XPATH,
        f"//button[normalize-space(.)={literal}]"
        f" | //input[(@type='submit' or @type='button' or @type='reset')"
        f" and @value={literal}]",
    )


def locate(search_context: Any, locator: Locator, wait_timeout: float = 0) -> Any:
    """Find one element below ``search_context`` (a driver or an element).

    With a positive ``wait_timeout`` the lookup waits for the element to be
    present.

    Raises:
        ElementNotFound: If nothing matches in time
    """
    try:
        if wait_timeout:
            wait = WebDriverWait(search_context, wait_timeout)
            return wait.until(EC.presence_of_element_located(locator))
        return search_context.find_element(*locator)
    except (NoSuchElementException, TimeoutException) as e:
        by, value = locator
        raise ElementNotFound(f"Unable to find element {by}={value!r}") from e


class SeleniumElement:
    """A located WebElement."""

    def __init__(self, element: Any, wait_timeout: float = 0) -> None:
        self.element = element
        self.wait_timeout = wait_timeout

    @property
    def text(self) -> str:
        return self.element.text

    def find(self, selector: str) -> "SeleniumElement":
        found = locate(self.element, (By.CSS_SELECTOR, selector), self.wait_timeout)
        return SeleniumElement(found, self.wait_timeout)


class SeleniumBrowser:
    """Browser backed by a Selenium WebDriver.

    Example usage in a conftest.py:
        @pytest.fixture
        def phrasebook_browser(phrasebook_settings):
            driver = webdriver.Firefox()
            yield SeleniumBrowser(
                driver, "http://localhost:8000", phrasebook_settings.wait_timeout
            )
            driver.quit()
    """

    def __init__(self, driver: Any, base_url: str = "", wait_timeout: float = 0) -> None:
        self.driver = driver
        self.base_url = base_url
        self.wait_timeout = wait_timeout

    def current_path(self) -> str:
        return urlparse(self.driver.current_url).path

    def has_content(self, text: str, wait: bool = True) -> bool:
        """Check the visible body text, waiting for ``text`` when ``wait`` is set."""
        body_locator = (By.TAG_NAME, "body")
        if wait and self.wait_timeout:
            try:
                return bool(WebDriverWait(self.driver, self.wait_timeout).until(
                    EC.text_to_be_present_in_element(body_locator, text)
                ))
            except TimeoutException:
                return False
        return text in locate(self.driver, body_locator).text

    def find(self, selector: str) -> SeleniumElement:
        found = locate(self.driver, (By.CSS_SELECTOR, selector), self.wait_timeout)
        return SeleniumElement(found, self.wait_timeout)

    def visit(self, path: str) -> None:
        url = urljoin(self.base_url, path) if self.base_url else path
        logger.debug("Selenium navigating to %s", url)
        self.driver.get(url)

    def click_link(self, text: str) -> None:
        locate(self.driver, (By.LINK_TEXT, text), self.wait_timeout).click()

    def click_button(self, text: str) -> None:
        locate(self.driver, button_locator(text), self.wait_timeout).click()

"""Unit tests for the Selenium and Playwright browser adapters."""

from unittest.mock import MagicMock, Mock, patch

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from selenium.common.exceptions import NoSuchElementException, TimeoutException
from selenium.webdriver.common.by import By

from phrasebook.browsers import PlaywrightBrowser, SeleniumBrowser
from phrasebook.browsers.playwright_browser import timeout_ms
from phrasebook.browsers.selenium_browser import button_locator, xpath_literal
from phrasebook.exceptions import ElementNotFound


# ============================================================================
# Selenium
# ============================================================================

@pytest.fixture
def driver():
    """Mock WebDriver."""
    return Mock()


def test_selenium_current_path(driver):
    driver.current_url = "http://localhost:8000/widgets/1?tab=info"
    assert SeleniumBrowser(driver).current_path() == "/widgets/1"


def test_selenium_has_content_reads_body_text(driver):
    driver.find_element.return_value.text = "Welcome, Duke"
    browser = SeleniumBrowser(driver)

    assert browser.has_content("Duke")
    assert not browser.has_content("Blowtorch")
    driver.find_element.assert_called_with(By.TAG_NAME, "body")


def test_selenium_visit_joins_base_url(driver):
    SeleniumBrowser(driver, "http://localhost:8000").visit("/widgets/1")
    driver.get.assert_called_once_with("http://localhost:8000/widgets/1")


def test_selenium_visit_without_base_url(driver):
    SeleniumBrowser(driver).visit("/widgets/1")
    driver.get.assert_called_once_with("/widgets/1")


def test_selenium_find_nested(driver):
    container = Mock()
    level = Mock(text="Saved")
    driver.find_element.return_value = container
    container.find_element.return_value = level

    element = SeleniumBrowser(driver).find("#flash").find(".notice")

    assert element.text == "Saved"
    driver.find_element.assert_called_once_with(By.CSS_SELECTOR, "#flash")
    container.find_element.assert_called_once_with(By.CSS_SELECTOR, ".notice")


def test_selenium_missing_element_raises(driver):
    driver.find_element.side_effect = NoSuchElementException("nope")
    with pytest.raises(ElementNotFound, match="#flash"):
        SeleniumBrowser(driver).find("#flash")


def test_selenium_click_link(driver):
    SeleniumBrowser(driver).click_link("Home")
    driver.find_element.assert_called_once_with(By.LINK_TEXT, "Home")
    driver.find_element.return_value.click.assert_called_once()


def test_selenium_click_button(driver):
    SeleniumBrowser(driver).click_button("Save")
    driver.find_element.assert_called_once_with(*button_locator("Save"))
    driver.find_element.return_value.click.assert_called_once()


def test_selenium_click_missing_button(driver):
    driver.find_element.side_effect = NoSuchElementException("nope")
    with pytest.raises(ElementNotFound):
        SeleniumBrowser(driver).click_button("Launch")


def test_selenium_waits_when_timeout_configured(driver):
    with patch("phrasebook.browsers.selenium_browser.WebDriverWait") as wait:
        wait.return_value.until.return_value = Mock(text="Hi")
        element = SeleniumBrowser(driver, wait_timeout=5).find("#flash")

    wait.assert_called_once_with(driver, 5)
    assert element.text == "Hi"
    driver.find_element.assert_not_called()


def test_selenium_wait_timeout_raises_not_found(driver):
    with patch("phrasebook.browsers.selenium_browser.WebDriverWait") as wait:
        wait.return_value.until.side_effect = TimeoutException("slow")
        with pytest.raises(ElementNotFound):
            SeleniumBrowser(driver, wait_timeout=1).find("#flash")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Save", '"Save"'),
        ('Say "hi"', "'Say \"hi\"'"),
        ("Don't \"go\"", "concat(\"Don't \", '\"', \"go\", '\"', \"\")"),
    ],
)
def test_xpath_literal(text, expected):
    assert xpath_literal(text) == expected


def test_button_locator_matches_buttons_and_inputs():
    by, xpath = button_locator("Save")
    assert by == By.XPATH
    assert '//button[normalize-space(.)="Save"]' in xpath
    assert '@value="Save"' in xpath


def test_selenium_has_content_waits_for_text(driver):
    with patch("phrasebook.browsers.selenium_browser.WebDriverWait") as wait:
        wait.return_value.until.return_value = True
        assert SeleniumBrowser(driver, wait_timeout=5).has_content("Loaded later")

    wait.assert_called_once_with(driver, 5)
    driver.find_element.assert_not_called()


def test_selenium_has_content_gives_up_after_timeout(driver):
    with patch("phrasebook.browsers.selenium_browser.WebDriverWait") as wait:
        wait.return_value.until.side_effect = TimeoutException("slow")
        assert not SeleniumBrowser(driver, wait_timeout=1).has_content("Never")


def test_selenium_has_content_without_wait_checks_immediately(driver):
    driver.find_element.return_value.text = "Home"
    with patch("phrasebook.browsers.selenium_browser.WebDriverWait") as wait:
        assert not SeleniumBrowser(driver, wait_timeout=5).has_content("Gizmo", wait=False)

    wait.assert_not_called()
    driver.find_element.assert_called_once_with(By.TAG_NAME, "body")


# ============================================================================
# Playwright
# ============================================================================

@pytest.fixture
def page():
    """Mock Playwright Page."""
    return MagicMock()


def test_timeout_ms():
    assert timeout_ms(0) is None
    assert timeout_ms(2.5) == 2500


def test_playwright_current_path(page):
    page.url = "http://localhost:8000/users/1/profile"
    assert PlaywrightBrowser(page).current_path() == "/users/1/profile"


def test_playwright_has_content_waits_for_text(page):
    page.inner_text.return_value = "Welcome, Duke"

    assert PlaywrightBrowser(page, wait_timeout=2).has_content("Welcome")

    page.locator.assert_called_once_with("body", has_text="Welcome")
    page.locator.return_value.wait_for.assert_called_once_with(state="attached", timeout=2000)
    page.inner_text.assert_called_with("body")


def test_playwright_has_content_gives_up_after_timeout(page):
    page.locator.return_value.wait_for.side_effect = PlaywrightTimeoutError("Timeout 2000ms exceeded")

    assert not PlaywrightBrowser(page, wait_timeout=2).has_content("Goodbye")
    page.inner_text.assert_not_called()


def test_playwright_has_content_without_wait(page):
    page.inner_text.return_value = "Welcome, Duke"

    assert not PlaywrightBrowser(page).has_content("Goodbye", wait=False)
    page.locator.assert_not_called()


def test_playwright_visit(page):
    PlaywrightBrowser(page, "http://localhost:8000").visit("/")
    page.goto.assert_called_once_with("http://localhost:8000/")


def test_playwright_find_nested(page):
    container = page.locator.return_value.first
    nested = container.locator.return_value.first
    nested.inner_text.return_value = "Welcome back"

    element = PlaywrightBrowser(page).find("#flash").find(".notice")

    assert element.text == "Welcome back"
    page.locator.assert_called_once_with("#flash")
    container.locator.assert_called_once_with(".notice")
    container.wait_for.assert_called_once_with(state="attached", timeout=None)
    nested.wait_for.assert_called_once_with(state="attached", timeout=None)


def test_playwright_find_waits_with_configured_timeout(page):
    PlaywrightBrowser(page, wait_timeout=3).find("#flash")
    page.locator.return_value.first.wait_for.assert_called_once_with(
        state="attached", timeout=3000
    )


def test_playwright_missing_element_after_wait(page):
    page.locator.return_value.first.wait_for.side_effect = PlaywrightTimeoutError("Timeout")
    with pytest.raises(ElementNotFound, match="#flash"):
        PlaywrightBrowser(page).find("#flash")


def test_playwright_click_link_waits_for_link(page):
    link = page.get_by_role.return_value.first

    PlaywrightBrowser(page).click_link("Home")

    page.get_by_role.assert_called_once_with("link", name="Home", exact=True)
    link.wait_for.assert_called_once_with(state="attached", timeout=None)
    link.click.assert_called_once()


def test_playwright_click_missing_button(page):
    button = page.get_by_role.return_value.first
    button.wait_for.side_effect = PlaywrightTimeoutError("Timeout")

    with pytest.raises(ElementNotFound, match="button 'Launch'"):
        PlaywrightBrowser(page).click_button("Launch")
    button.click.assert_not_called()
